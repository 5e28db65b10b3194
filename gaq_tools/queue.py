"""
GAQ Queue and Renderer

Holds tracking events in insertion order and turns them into the body of a
``<script>`` element. The queue never reorders, deduplicates or validates
events; ordering policy belongs to the caller.
"""

import logging
from typing import Iterable, Iterator, List, Optional

from markupsafe import Markup

from .events import TrackingEvent

logger = logging.getLogger(__name__)

GA_JS_AUTO = "('https:' == document.location.protocol ? 'https://ssl' : 'http://www') + '.google-analytics.com/ga.js'"
GA_JS_SSL = "'https://ssl.google-analytics.com/ga.js'"

QUEUE_DECLARATION = "var _gaq = _gaq || [];"

LOADER_TEMPLATE = """(function() {{
  var ga = document.createElement('script'); ga.type = 'text/javascript'; ga.async = true;
  ga.src = {src};
  var s = document.getElementsByTagName('script')[0]; s.parentNode.insertBefore(ga, s);
}})();"""


class EventRenderer:
    """Renders a single event, optionally addressed to a named tracker."""

    def __init__(self, event: TrackingEvent, tracker_name: Optional[str] = None):
        self.event = event
        self.tracker_name = tracker_name

    def __str__(self) -> str:
        return self.event.render(self.tracker_name)


class EventQueue:
    """Ordered collection of tracking events awaiting rendering."""

    def __init__(self, events: Optional[Iterable[TrackingEvent]] = None):
        self._events: List[TrackingEvent] = []
        if events is not None:
            self.extend(events)

    def append(self, event: TrackingEvent) -> "EventQueue":
        """Add an event to the end of the queue."""
        if not isinstance(event, TrackingEvent):
            raise TypeError(f"expected a TrackingEvent, got {type(event).__name__}")
        self._events.append(event)
        return self

    push = append

    def extend(self, events: Iterable[TrackingEvent]) -> "EventQueue":
        for event in events:
            self.append(event)
        return self

    def __iter__(self) -> Iterator[TrackingEvent]:
        return iter(self._events)

    def __len__(self) -> int:
        return len(self._events)

    @property
    def events(self) -> List[TrackingEvent]:
        return list(self._events)

    def render_lines(self, tracker_name: Optional[str] = None) -> List[str]:
        return [str(EventRenderer(event, tracker_name)) for event in self._events]

    def render(self, tracker_name: Optional[str] = None) -> str:
        """Render one ``_gaq.push`` line per event, newline-joined."""
        lines = self.render_lines(tracker_name)
        logger.debug("Rendered %d tracking event(s)", len(lines))
        return "\n".join(lines)


def render_loader(ssl: bool = False) -> str:
    """Return the async snippet that injects ga.js into the page."""
    return LOADER_TEMPLATE.format(src=GA_JS_SSL if ssl else GA_JS_AUTO)


def render_script(body: str, include_loader: bool = False, ssl: bool = False) -> Markup:
    """Wrap rendered queue lines in a ``<script>`` element.

    Args:
        body: Newline-separated ``_gaq.push`` lines
        include_loader: Declare ``_gaq`` first and append the ga.js loader
        ssl: Always load ga.js over https

    Returns:
        Markup safe to embed in a template without further escaping
    """
    parts = []
    if include_loader:
        parts.append(QUEUE_DECLARATION)
    if body:
        parts.append(body)
    if include_loader:
        parts.append(render_loader(ssl))

    lines = "\n".join(parts).splitlines()
    inner = "\n".join(f"  {line}" if line else line for line in lines)
    return Markup(f'<script type="text/javascript">\n{inner}\n</script>\n')
