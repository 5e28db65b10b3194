"""
Factory for creating the analytics helpers module.
"""
from types import SimpleNamespace

from config_manager import AnalyticsConfig
from gaq_tools import EVENT_TYPES
from .helpers import AnalyticsHelpers


def create_analytics_helpers_module(analytics_config: AnalyticsConfig) -> dict:
    """Create analytics helpers module with service and template context.

    Args:
        analytics_config: Tracker identity and rendering options

    Returns:
        Dictionary containing the service and a Flask context processor
    """
    helpers = AnalyticsHelpers(analytics_config)

    # Event classes available to templates as ``gaq.<EventName>``
    gaq = SimpleNamespace(**{event_type.__name__: event_type for event_type in EVENT_TYPES})

    def inject_analytics_helpers() -> dict:
        """Inject analytics helpers into template context."""
        context = helpers.as_template_globals()
        context["gaq"] = gaq
        return context

    return {
        "service": helpers,
        "context_processor": inject_analytics_helpers
    }
