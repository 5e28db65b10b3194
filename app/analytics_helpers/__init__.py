"""
Analytics Helpers Subsystem

View helpers that render Google Analytics tracking snippets for templates.
"""

from .factory import create_analytics_helpers_module
from .helpers import AnalyticsHelpers

__all__ = ["AnalyticsHelpers", "create_analytics_helpers_module"]
