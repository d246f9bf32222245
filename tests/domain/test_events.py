"""Tests for event models."""

from datetime import UTC, datetime

import pytest

from fdm.domain.events import (
    UNTIMED,
    ActivityEvent,
    AdAction,
    AdClick,
    AdvertisingEvent,
    Alert,
    Behavior,
    Click,
    DeviceEvent,
    Event,
    Impression,
    Not,
    Order,
    PageClick,
    Purchase,
    Reading,
    Sequence,
    Timed,
    UserEvent,
    ad_summary,
    analyze_pattern,
    classify_activity,
    classify_origin,
    identified_event_id,
    make_ad_event,
    make_event,
    page_developer,
)
from fdm.domain.result import AmbiguousOrMissingVariant, Err, Ok, RuleViolated

NOON = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)


class TestOrigin:
    def test_device_only(self) -> None:
        assert classify_origin({"device_id": "d1", "user_id": None}) == Ok(DeviceEvent("d1"))

    def test_user_only(self) -> None:
        assert classify_origin({"user_id": "u1"}) == Ok(UserEvent("u1"))

    def test_both_is_ambiguous(self) -> None:
        result = classify_origin({"device_id": "d1", "user_id": "u1"})
        assert result == Err(AmbiguousOrMissingVariant("origin", ("device_id", "user_id")))

    def test_neither_is_missing(self) -> None:
        assert classify_origin({}) == Err(AmbiguousOrMissingVariant("origin", ()))


class TestMakeEvent:
    def test_untimed_by_default(self) -> None:
        result = make_event("e1", {"user_id": "u1"})
        assert result == Ok(Event("e1", UserEvent("u1"), UNTIMED))

    def test_timed(self) -> None:
        result = make_event("e2", {"device_id": "d1"}, NOON)
        assert result == Ok(Event("e2", DeviceEvent("d1"), Timed(NOON)))

    def test_origin_failure_propagates(self) -> None:
        assert isinstance(make_event("e3", {}), Err)


class TestActivity:
    def test_reading(self) -> None:
        result = classify_activity({"device_id": "d1", "reading": "21.5"}, NOON)
        assert result == Ok(ActivityEvent(NOON, Reading("d1", 21.5)))

    @pytest.mark.parametrize(
        "reading,rule",
        [("abc", "number"), ("", "number"), ("nan", "finite"), ("inf", "finite"), (True, "number")],
    )
    def test_bad_reading_is_a_failure_value(self, reading: object, rule: str) -> None:
        result = classify_activity({"device_id": "d1", "reading": reading}, NOON)
        assert result == Err(RuleViolated(rule=rule, tag="Reading"))

    def test_numeric_reading_passes_through(self) -> None:
        result = classify_activity({"device_id": "d1", "reading": 7}, NOON)
        assert result == Ok(ActivityEvent(NOON, Reading("d1", 7.0)))

    def test_click(self) -> None:
        result = classify_activity({"user_id": "u1", "click": "/home"}, NOON)
        assert result == Ok(ActivityEvent(NOON, Click("u1", "/home")))

    def test_purchase(self) -> None:
        result = classify_activity({"user_id": "u1", "purchase": "book"}, NOON)
        assert result == Ok(ActivityEvent(NOON, Purchase("u1", "book")))

    @pytest.mark.parametrize(
        "fields",
        [
            {"device_id": "d1"},
            {"user_id": "u1", "click": "/a", "purchase": "b"},
            {"device_id": "d1", "click": "/a"},
            {"user_id": "u1", "reading": 3},
        ],
    )
    def test_nonsense_combinations_rejected(self, fields: dict) -> None:
        result = classify_activity(fields, NOON)
        assert isinstance(result, Err)
        assert isinstance(result.error, AmbiguousOrMissingVariant)


class TestAdvertising:
    @pytest.mark.parametrize(
        ("fields", "kind"),
        [
            ({}, Impression()),
            ({"element_id": "buy"}, AdClick("buy")),
            ({"action_name": "signup"}, AdAction("signup")),
        ],
    )
    def test_kind_selected_from_evidence(self, fields: dict, kind: object) -> None:
        result = make_ad_event("/shop", "{}", fields)
        assert result == Ok(AdvertisingEvent("/shop", "{}", kind))  # type: ignore[arg-type]

    def test_click_and_action_together_rejected(self) -> None:
        result = make_ad_event("/shop", "", {"element_id": "buy", "action_name": "signup"})
        assert isinstance(result, Err)
        assert result.error.evidence == ("action_name", "element_id")

    def test_summary(self) -> None:
        click = AdvertisingEvent("/shop", "", AdClick("buy"))
        assert ad_summary(click) == "click on #buy at /shop"
        assert ad_summary(AdvertisingEvent("/", "", Impression())) == "impression on /"
        assert ad_summary(AdvertisingEvent("/", "", AdAction("signup"))) == "signup at /"


class TestWebEvents:
    def test_order_carries_id(self) -> None:
        assert identified_event_id(Order("o-1", "lamp")) == "o-1"

    def test_click_has_no_id(self) -> None:
        assert identified_event_id(PageClick("/")) is None


class TestAlerts:
    @pytest.mark.parametrize("alert", [Alert.SERVER_DOWN, Alert.BILLING_OVERAGE])
    def test_paging_alerts(self, alert: Alert) -> None:
        message = page_developer(alert)
        assert message is not None
        assert message.endswith("!")

    @pytest.mark.parametrize("alert", [Alert.SERVICE_RESTARTED, Alert.DISK_PRESSURE])
    def test_quiet_alerts(self, alert: Alert) -> None:
        assert page_developer(alert) is None

    def test_every_alert_handled(self) -> None:
        for alert in Alert:
            page_developer(alert)


class TestBehavior:
    @pytest.mark.parametrize(
        ("behavior", "expected"),
        [
            (Behavior.PURCHASE, True),
            (Behavior.RETURN, True),
            (Behavior.ANYTHING, False),
            (Sequence(Behavior.ANYTHING, Behavior.RETURN), True),
            (Sequence(Behavior.ANYTHING, Behavior.ANYTHING), False),
            (Not(Behavior.PURCHASE), True),
            (Not(Sequence(Behavior.ANYTHING, Not(Behavior.ANYTHING))), False),
        ],
    )
    def test_analyze_pattern(self, behavior: object, expected: bool) -> None:
        assert analyze_pattern(behavior) is expected  # type: ignore[arg-type]
