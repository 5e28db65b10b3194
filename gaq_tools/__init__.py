# GAQ tools package: tracking events, queue and script rendering

from .errors import GAQError, MissingRequiredArgument, MissingTrackerConfiguration
from .events import (
    EVENT_TYPES,
    AddItem,
    AddTransaction,
    AnonymizeIp,
    DeleteCustomVar,
    SetAccount,
    SetAllowLinker,
    SetCustomVar,
    SetDomainName,
    SetSiteSpeedSampleRate,
    TrackEvent,
    TrackingEvent,
    TrackPageLoadTime,
    TrackPageview,
    TrackTransaction,
)
from .queue import EventQueue, EventRenderer, render_loader, render_script

__all__ = [
    "GAQError",
    "MissingRequiredArgument",
    "MissingTrackerConfiguration",
    "EVENT_TYPES",
    "AddItem",
    "AddTransaction",
    "AnonymizeIp",
    "DeleteCustomVar",
    "SetAccount",
    "SetAllowLinker",
    "SetCustomVar",
    "SetDomainName",
    "SetSiteSpeedSampleRate",
    "TrackEvent",
    "TrackingEvent",
    "TrackPageLoadTime",
    "TrackPageview",
    "TrackTransaction",
    "EventQueue",
    "EventRenderer",
    "render_loader",
    "render_script",
]
