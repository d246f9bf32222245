"""Event models.

Several refactorings of event data meet here:

- Eliminate intersection: an event is a user event OR a device event, never
  both, and is timed or untimed independently. Both axes are closed sums.
- Extract product: fields shared by every case (id, timing, timestamp, an
  ad's page url and data) live on one record; case-specific detail moves
  into a sum-typed field.
- Extract sum: optional-field soup (device id, user id, reading, click,
  purchase) is classified into exactly one activity.
- Eliminate wildcard: alert handling matches every alert explicitly.
- Eliminate type-case: identified events are found by matching cases, not
  by checking runtime types against an intersection trait.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any, assert_never

from fdm.domain.constructors import READING
from fdm.domain.result import AmbiguousOrMissingVariant, Err, Ok, Result, ValidationFailure
from fdm.domain.variants import VariantBuilder, case

# ---------------------------------------------------------------------------
# Origin (user XOR device)
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class UserEvent:
    user_id: str


@dataclass(frozen=True)
class DeviceEvent:
    device_id: str


Origin = UserEvent | DeviceEvent

ORIGIN: VariantBuilder[Origin] = VariantBuilder(
    "origin",
    [
        case("user", UserEvent, "user_id"),
        case("device", DeviceEvent, "device_id"),
    ],
)


def classify_origin(raw_fields: Mapping[str, Any]) -> Result[Origin, AmbiguousOrMissingVariant]:
    """Classify ``{device_id, user_id}`` evidence into one origin."""
    return ORIGIN.classify(raw_fields)


# ---------------------------------------------------------------------------
# Timing (timed XOR untimed)
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Timed:
    at: datetime


@dataclass(frozen=True)
class Untimed:
    pass


UNTIMED = Untimed()

Timing = Timed | Untimed


@dataclass(frozen=True)
class Event:
    """An event always has an id, exactly one origin, and a timing."""

    event_id: str
    origin: Origin
    timing: Timing = UNTIMED


def make_event(
    event_id: str,
    raw_fields: Mapping[str, Any],
    timestamp: datetime | None = None,
) -> Result[Event, AmbiguousOrMissingVariant]:
    match classify_origin(raw_fields):
        case Ok(origin):
            timing: Timing = Timed(timestamp) if timestamp is not None else UNTIMED
            return Ok(Event(event_id=event_id, origin=origin, timing=timing))
        case Err() as failed:
            return failed


# ---------------------------------------------------------------------------
# Activity (extract sum)
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Reading:
    device_id: str
    value: float


@dataclass(frozen=True)
class Click:
    user_id: str
    href: str


@dataclass(frozen=True)
class Purchase:
    user_id: str
    item: str


Activity = Reading | Click | Purchase


def _reading(device_id: str, reading: Any) -> Result[Activity, ValidationFailure]:
    match READING(reading):
        case Ok(value):
            return Ok(Reading(device_id=device_id, value=value.value))
        case Err() as failed:
            return failed


def _click(user_id: str, click: str) -> Result[Activity, ValidationFailure]:
    return Ok(Click(user_id=user_id, href=click))


def _purchase(user_id: str, purchase: str) -> Result[Activity, ValidationFailure]:
    return Ok(Purchase(user_id=user_id, item=purchase))


ACTIVITY: VariantBuilder[Result[Activity, ValidationFailure]] = VariantBuilder(
    "activity",
    [
        case("reading", _reading, "device_id", "reading"),
        case("click", _click, "user_id", "click"),
        case("purchase", _purchase, "user_id", "purchase"),
    ],
)


@dataclass(frozen=True)
class ActivityEvent:
    timestamp: datetime
    activity: Activity


def classify_activity(
    raw_fields: Mapping[str, Any],
    timestamp: datetime,
) -> Result[ActivityEvent, AmbiguousOrMissingVariant | ValidationFailure]:
    """Classify sensor/user optional fields into one activity.

    Valid combinations: device id + reading, user id + click,
    user id + purchase. Anything else is ambiguous or missing. A reading
    must parse as a number and be finite.
    """
    match ACTIVITY.classify(raw_fields):
        case Ok(Ok(activity)):
            return Ok(ActivityEvent(timestamp=timestamp, activity=activity))
        case Ok(Err() as failed) | (Err() as failed):
            return failed


# ---------------------------------------------------------------------------
# Web events (eliminate type-case)
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PageClick:
    href: str


@dataclass(frozen=True)
class Order:
    order_id: str
    item: str


WebEvent = PageClick | Order


def identified_event_id(event: WebEvent) -> str | None:
    """Return the id of events that carry one, matching on cases."""
    match event:
        case Order(order_id=order_id):
            return order_id
        case PageClick():
            return None
        case _:
            assert_never(event)


# ---------------------------------------------------------------------------
# Advertising (extract product)
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Impression:
    pass


@dataclass(frozen=True)
class AdClick:
    element_id: str


@dataclass(frozen=True)
class AdAction:
    action_name: str


AdKind = Impression | AdClick | AdAction


@dataclass(frozen=True)
class AdvertisingEvent:
    """Page and payload are shared by every kind, so they live here once."""

    page_url: str
    data: str
    kind: AdKind


AD_KIND: VariantBuilder[AdKind] = VariantBuilder(
    "advertising",
    [
        case("impression", Impression),
        case("click", lambda element_id: AdClick(element_id=element_id), "element_id"),
        case("action", lambda action_name: AdAction(action_name=action_name), "action_name"),
    ],
)


def make_ad_event(
    page_url: str,
    data: str,
    raw_fields: Mapping[str, Any],
) -> Result[AdvertisingEvent, AmbiguousOrMissingVariant]:
    """No kind fields -> impression; ``element_id`` -> click; ``action_name`` -> action."""
    match AD_KIND.classify(raw_fields):
        case Ok(kind):
            return Ok(AdvertisingEvent(page_url=page_url, data=data, kind=kind))
        case Err() as failed:
            return failed


def ad_summary(event: AdvertisingEvent) -> str:
    match event.kind:
        case Impression():
            return f"impression on {event.page_url}"
        case AdClick(element_id=element_id):
            return f"click on #{element_id} at {event.page_url}"
        case AdAction(action_name=action_name):
            return f"{action_name} at {event.page_url}"
        case _:
            assert_never(event.kind)


# ---------------------------------------------------------------------------
# Alerts (eliminate wildcard)
# ---------------------------------------------------------------------------


class Alert(StrEnum):
    SERVER_DOWN = "server_down"
    SERVICE_RESTARTED = "service_restarted"
    DISK_PRESSURE = "disk_pressure"
    BILLING_OVERAGE = "billing_overage"


def page_developer(alert: Alert) -> str | None:
    """Return the text to page the on-call developer with, if any.

    Every alert is listed. Adding an alert makes type checkers flag this
    function until the new case is handled.
    """
    match alert:
        case Alert.SERVER_DOWN:
            return "The server is down, please look into it right away!"
        case Alert.BILLING_OVERAGE:
            return "Billing overage detected, please review resource usage now!"
        case Alert.SERVICE_RESTARTED:
            return None
        case Alert.DISK_PRESSURE:
            return None
        case _:
            assert_never(alert)


# ---------------------------------------------------------------------------
# User behavior patterns
# ---------------------------------------------------------------------------


class Behavior(StrEnum):
    PURCHASE = "purchase"
    RETURN = "return"
    ANYTHING = "anything"


@dataclass(frozen=True)
class Sequence:
    first: UserBehavior
    second: UserBehavior


@dataclass(frozen=True)
class Not:
    behavior: UserBehavior


UserBehavior = Behavior | Sequence | Not


def analyze_pattern(behavior: UserBehavior) -> bool:
    """Whether *behavior* involves a purchase or a return anywhere."""
    match behavior:
        case Behavior.PURCHASE | Behavior.RETURN:
            return True
        case Behavior.ANYTHING:
            return False
        case Sequence(first, second):
            return analyze_pattern(first) or analyze_pattern(second)
        case Not(behavior):
            return analyze_pattern(behavior)
        case _:
            assert_never(behavior)
