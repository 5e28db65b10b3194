"""
Analytics View Helpers

Template-facing helpers that emit the Google Analytics ``_gaq`` snippets.

Ecommerce example::

    # create a new transaction
    helpers.analytics_add_transaction(
        '1234',           # order ID - required
        'Acme Clothing',  # affiliation or store name
        '11.99',          # total - required
        '1.29',           # tax
        '5',              # shipping
        'San Jose',       # city
        'California',     # state or province
        'USA'             # country
    )

    # add an item to the transaction
    helpers.analytics_add_item(
        '1234',           # order ID - required
        'DD44',           # SKU/code - required
        'T-Shirt',        # product name
        'Green Medium',   # category or variation
        '11.99',          # unit price - required
        '1'               # quantity - required
    )

    # submit the transaction
    helpers.analytics_track_transaction()
"""

import logging
from typing import Iterable, Optional

from markupsafe import Markup

from config_manager import AnalyticsConfig
from gaq_tools import (
    AddItem,
    AddTransaction,
    EventQueue,
    EventRenderer,
    MissingTrackerConfiguration,
    SetAccount,
    SetAllowLinker,
    SetDomainName,
    TrackEvent,
    TrackingEvent,
    TrackPageLoadTime,
    TrackPageview,
    TrackTransaction,
    render_script,
)

logger = logging.getLogger(__name__)


class AnalyticsHelpers:
    """Renders tracking snippets for one configured tracker."""

    def __init__(self, analytics_config: AnalyticsConfig):
        """Initialize the helpers.

        Args:
            analytics_config: Tracker identity and rendering options
        """
        self.config = analytics_config

    def _require_tracker(self) -> None:
        if not self.config.is_valid_tracker():
            logger.warning("Analytics helper called without a valid tracker (got %r)", self.config.tracker)
            raise MissingTrackerConfiguration()

    def analytics_init(self, events: Optional[Iterable[TrackingEvent]] = None, local: Optional[bool] = None) -> Markup:
        """Initialize the Analytics javascript. Put it in the ``<head>`` tag.

        Page views and page load times are tracked by default.

        Args:
            events: Additional events, pushed after the bootstrap events
            local: Local development mode; falls back to the configured default.
                Sets the domain name to ``none`` and allows the linker.

        Returns:
            A ``<script>`` tag containing the analytics initialization sequence
        """
        self._require_tracker()

        if local is None:
            local = self.config.local

        queue = EventQueue([
            SetAccount(self.config.tracker),
            TrackPageview(),
            TrackPageLoadTime(),
        ])
        queue.extend(events or [])

        if local:
            queue.append(SetDomainName("none"))
            queue.append(SetAllowLinker(True))

        logger.debug("Initializing analytics with %d event(s), local=%s", len(queue), local)
        return render_script(
            queue.render(self.config.tracker_name),
            include_loader=True,
            ssl=self.config.ssl,
        )

    def analytics_track_event(self, category: str, action: str, label: Optional[str] = None,
                              value: Optional[int] = None,
                              non_interaction: Optional[bool] = None) -> Markup:
        """Track a custom event.

        Example: ``analytics_track_event("Videos", "Play", "Gone With the Wind")``
        """
        self._require_tracker()
        return self._render_event(TrackEvent(category, action, label, value, non_interaction))

    def analytics_add_transaction(self, order_id, store_name, total, tax, shipping,
                                  city, state_or_province, country) -> Markup:
        """Track an ecommerce transaction."""
        self._require_tracker()
        return self._render_event(AddTransaction(
            order_id, store_name, total, tax, shipping, city, state_or_province, country
        ))

    def analytics_add_item(self, order_id, product_id, product_name, product_variation,
                           unit_price, quantity) -> Markup:
        """Add an item to the current transaction."""
        self._require_tracker()
        return self._render_event(AddItem(
            order_id, product_id, product_name, product_variation, unit_price, quantity
        ))

    def analytics_track_transaction(self) -> Markup:
        """Flush the current transaction."""
        self._require_tracker()
        return self._render_event(TrackTransaction())

    def _render_event(self, event: TrackingEvent) -> Markup:
        return render_script(str(EventRenderer(event, self.config.tracker_name)))

    def as_template_globals(self) -> dict:
        """Helpers keyed by the names templates call them by."""
        return {
            "analytics_init": self.analytics_init,
            "analytics_track_event": self.analytics_track_event,
            "analytics_add_transaction": self.analytics_add_transaction,
            "analytics_add_item": self.analytics_add_item,
            "analytics_track_transaction": self.analytics_track_transaction,
        }
