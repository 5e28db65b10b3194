"""
Error types raised by the GAQ rendering layer.
"""


class GAQError(Exception):
    """Base class for tracking queue errors."""


class MissingTrackerConfiguration(GAQError, ValueError):
    """Raised when a helper renders without a valid tracker configured."""

    def __init__(self, message: str = "Tracker must be set! Did you set the analytics tracker?"):
        super().__init__(message)


class MissingRequiredArgument(GAQError, TypeError):
    """Raised when an event is built without one of its required arguments."""

    def __init__(self, event_name: str, argument: str):
        self.event_name = event_name
        self.argument = argument
        super().__init__(f"{event_name} requires '{argument}'")
