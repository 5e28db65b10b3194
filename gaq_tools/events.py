"""
Event Catalog for the GAQ Tracking Queue

Every trackable action is an immutable value type. An event knows the
``_gaq`` method it maps to and its positional parameters, and renders
itself as a single ``_gaq.push([...]);`` call.
"""

from dataclasses import dataclass, fields
from typing import ClassVar, List, Optional, Tuple, Union

from jinja2.utils import htmlsafe_json_dumps

from .errors import MissingRequiredArgument

Param = Union[str, int, float, bool, None]


def _is_missing(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


@dataclass(frozen=True)
class TrackingEvent:
    """Base class for all tracking events."""

    method: ClassVar[str] = ""
    required: ClassVar[Tuple[str, ...]] = ()
    # False for calls addressed to another global object, e.g. ``_gat``
    prefixable: ClassVar[bool] = True

    # Required fields default to None so an omitted argument fails here,
    # not in the generated __init__.
    def __post_init__(self):
        for name in self.required:
            if _is_missing(getattr(self, name)):
                raise MissingRequiredArgument(type(self).__name__, name)

    def params(self) -> List[Param]:
        """Positional arguments of the call, in the order the tracker expects."""
        return [getattr(self, f.name) for f in fields(self)]

    def method_name(self, tracker_name: Optional[str] = None) -> str:
        if tracker_name and self.prefixable:
            return f"{tracker_name}.{self.method}"
        return self.method

    def to_array(self, tracker_name: Optional[str] = None) -> List[Param]:
        """Build the array pushed onto ``_gaq``.

        Trailing ``None`` parameters are dropped; an interior ``None`` becomes
        an empty string so later arguments keep their position.
        """
        params = self.params()
        while params and params[-1] is None:
            params.pop()
        return [self.method_name(tracker_name)] + ["" if p is None else p for p in params]

    def render(self, tracker_name: Optional[str] = None) -> str:
        """Render the event as one ``_gaq.push`` statement."""
        return f"_gaq.push({htmlsafe_json_dumps(self.to_array(tracker_name))});"


# -----------------------------------------------------------------------------
# Core events
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class SetAccount(TrackingEvent):
    tracker_id: Optional[str] = None

    method: ClassVar[str] = "_setAccount"
    required: ClassVar[Tuple[str, ...]] = ("tracker_id",)


@dataclass(frozen=True)
class TrackPageview(TrackingEvent):
    """Track a page view, optionally for a virtual page path."""

    page: Optional[str] = None

    method: ClassVar[str] = "_trackPageview"


@dataclass(frozen=True)
class TrackPageLoadTime(TrackingEvent):
    method: ClassVar[str] = "_trackPageLoadTime"


@dataclass(frozen=True)
class TrackEvent(TrackingEvent):
    """Track a custom event.

    See http://code.google.com/apis/analytics/docs/tracking/eventTrackerGuide.html
    """

    category: Optional[str] = None
    action: Optional[str] = None
    label: Optional[str] = None
    value: Optional[int] = None
    non_interaction: Optional[bool] = None

    method: ClassVar[str] = "_trackEvent"
    required: ClassVar[Tuple[str, ...]] = ("category", "action")


@dataclass(frozen=True)
class SetDomainName(TrackingEvent):
    domain_name: Optional[str] = None

    method: ClassVar[str] = "_setDomainName"
    required: ClassVar[Tuple[str, ...]] = ("domain_name",)


@dataclass(frozen=True)
class SetAllowLinker(TrackingEvent):
    allow: Optional[bool] = None

    method: ClassVar[str] = "_setAllowLinker"
    required: ClassVar[Tuple[str, ...]] = ("allow",)


# -----------------------------------------------------------------------------
# E-commerce events
# See http://code.google.com/apis/analytics/docs/tracking/gaTrackingEcommerce.html
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class AddTransaction(TrackingEvent):
    """Create a transaction. Must be pushed before its items."""

    order_id: Optional[str] = None
    store_name: Optional[str] = None
    total: Optional[Union[str, int, float]] = None
    tax: Optional[Union[str, int, float]] = None
    shipping: Optional[Union[str, int, float]] = None
    city: Optional[str] = None
    state_or_province: Optional[str] = None
    country: Optional[str] = None

    method: ClassVar[str] = "_addTrans"
    required: ClassVar[Tuple[str, ...]] = ("order_id", "total")


@dataclass(frozen=True)
class AddItem(TrackingEvent):
    """Add an item to the transaction identified by ``order_id``."""

    order_id: Optional[str] = None
    product_id: Optional[str] = None
    product_name: Optional[str] = None
    product_variation: Optional[str] = None
    unit_price: Optional[Union[str, int, float]] = None
    quantity: Optional[Union[str, int]] = None

    method: ClassVar[str] = "_addItem"
    required: ClassVar[Tuple[str, ...]] = ("order_id", "product_id", "unit_price", "quantity")


@dataclass(frozen=True)
class TrackTransaction(TrackingEvent):
    method: ClassVar[str] = "_trackTrans"


# -----------------------------------------------------------------------------
# Visitor and sampling options
# -----------------------------------------------------------------------------

CUSTOM_VAR_SLOTS = range(1, 6)
CUSTOM_VAR_SCOPES = range(1, 4)  # 1: visitor, 2: session, 3: page


@dataclass(frozen=True)
class SetCustomVar(TrackingEvent):
    index: Optional[int] = None
    name: Optional[str] = None
    value: Optional[str] = None
    scope: Optional[int] = None

    method: ClassVar[str] = "_setCustomVar"
    required: ClassVar[Tuple[str, ...]] = ("index", "name", "value")

    def __post_init__(self):
        super().__post_init__()
        if self.index not in CUSTOM_VAR_SLOTS:
            raise ValueError(f"custom variable index must be 1-5, got {self.index!r}")
        if self.scope is not None and self.scope not in CUSTOM_VAR_SCOPES:
            raise ValueError(f"custom variable scope must be 1-3, got {self.scope!r}")


@dataclass(frozen=True)
class DeleteCustomVar(TrackingEvent):
    index: Optional[int] = None

    method: ClassVar[str] = "_deleteCustomVar"
    required: ClassVar[Tuple[str, ...]] = ("index",)

    def __post_init__(self):
        super().__post_init__()
        if self.index not in CUSTOM_VAR_SLOTS:
            raise ValueError(f"custom variable index must be 1-5, got {self.index!r}")


@dataclass(frozen=True)
class SetSiteSpeedSampleRate(TrackingEvent):
    """Percentage of visitors whose page load time is sampled."""

    sample_rate: Optional[int] = None

    method: ClassVar[str] = "_setSiteSpeedSampleRate"
    required: ClassVar[Tuple[str, ...]] = ("sample_rate",)

    def __post_init__(self):
        super().__post_init__()
        if not 1 <= self.sample_rate <= 100:
            raise ValueError(f"sample rate must be 1-100, got {self.sample_rate!r}")


@dataclass(frozen=True)
class AnonymizeIp(TrackingEvent):
    method: ClassVar[str] = "_gat._anonymizeIp"
    prefixable: ClassVar[bool] = False


EVENT_TYPES = (
    SetAccount,
    TrackPageview,
    TrackPageLoadTime,
    TrackEvent,
    SetDomainName,
    SetAllowLinker,
    AddTransaction,
    AddItem,
    TrackTransaction,
    SetCustomVar,
    DeleteCustomVar,
    SetSiteSpeedSampleRate,
    AnonymizeIp,
)
