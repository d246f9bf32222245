"""ModelingService — validate, classify, and build through the domain core.

Adapts the pure domain operations to :class:`ServiceResult` so the CLI
(and any future interface) gets one uniform success/failure shape.
Domain failures map 1:1 to ``ServiceError.code``:

- ``EMPTY_RULE_SET`` / ``RULE_VIOLATED`` from validation
- ``AMBIGUOUS_OR_MISSING_VARIANT`` from classification
- ``INCOMPLETE_BUILDER`` from type-state builds

Caller mistakes that are not domain failures (unknown tag, unknown model,
malformed field text) report ``UNKNOWN_TAG``, ``UNKNOWN_MODEL``,
``UNKNOWN_FIELD``, or ``INVALID_FIELD``.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from fdm.domain.constructors import CONSTRUCTORS, get_constructor, password_constructor
from fdm.domain.documents import DOCUMENT_KIND, classify_document
from fdm.domain.events import (
    ACTIVITY,
    AD_KIND,
    ORIGIN,
    classify_activity,
    classify_origin,
    make_ad_event,
)
from fdm.domain.payments import CARD, classify_card, masked
from fdm.domain.people import PERSON
from fdm.domain.result import Err, Failure, Ok, Result
from fdm.domain.validated import SmartConstructor, Validated
from fdm.services.base import BaseService
from fdm.services.result import ServiceResult


def to_data(value: Any) -> Any:
    """Convert domain values into JSON-compatible data.

    Dataclass variants become ``{"variant": <class name>, **fields}``.
    """
    if isinstance(value, Validated):
        return to_data(value.value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        data: dict[str, Any] = {"variant": type(value).__name__}
        for f in dataclasses.fields(value):
            data[f.name] = to_data(getattr(value, f.name))
        return data
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, (list, tuple, frozenset, set)):
        return [to_data(v) for v in value]
    if isinstance(value, Mapping):
        return {str(k): to_data(v) for k, v in value.items()}
    return value


def _split_ids(raw: Any) -> Any:
    if isinstance(raw, str):
        return tuple(part.strip() for part in raw.split(",") if part.strip())
    return raw


# Classifiers take raw fields and return a domain Result.
_Classifier = Callable[[dict[str, Any]], Result[Any, Failure]]


def _origin(fields: dict[str, Any]) -> Result[Any, Failure]:
    return classify_origin(fields)


def _activity(fields: dict[str, Any]) -> Result[Any, Failure]:
    raw_ts = fields.get("timestamp")
    timestamp = datetime.fromisoformat(raw_ts) if raw_ts else datetime.now(UTC)
    return classify_activity(fields, timestamp)


def _ad(fields: dict[str, Any]) -> Result[Any, Failure]:
    page_url = str(fields.get("page_url") or "")
    return make_ad_event(page_url, str(fields.get("data") or ""), fields)


def _card(fields: dict[str, Any]) -> Result[Any, Failure]:
    match classify_card(fields):
        case Ok(card):
            return Ok({"variant": type(card).__name__, "number": masked(card)})
        case Err() as failed:
            return failed


def _document(fields: dict[str, Any]) -> Result[Any, Failure]:
    document_id = fields.get("document_id") or "doc"
    raw = dict(fields)
    if "owner_ids" in raw:
        raw["owner_ids"] = _split_ids(raw["owner_ids"])
    return classify_document(str(document_id), raw)


CLASSIFIERS: dict[str, _Classifier] = {
    "origin": _origin,
    "activity": _activity,
    "ad": _ad,
    "card": _card,
    "document": _document,
}

# Fields each classifier reads; anything else is reported as ignored.
CLASSIFIER_FIELDS: dict[str, frozenset[str]] = {
    "origin": ORIGIN.discriminants,
    "activity": ACTIVITY.discriminants | {"timestamp"},
    "ad": AD_KIND.discriminants | {"page_url", "data"},
    "card": CARD.discriminants,
    "document": DOCUMENT_KIND.discriminants | {"document_id"},
}


class ModelingService(BaseService):
    """Validation, classification, and type-state builds."""

    def _constructor(self, tag: str) -> SmartConstructor:
        ctor = get_constructor(tag)
        if ctor.tag == "Password":
            pw = self._settings.password
            return password_constructor(pw.min_length, require_digit=pw.require_digit)
        return ctor

    def list_constructors(self) -> ServiceResult:
        items = []
        for tag in CONSTRUCTORS:
            ctor = self._constructor(tag)
            items.append(
                {"tag": ctor.tag, "rules": ctor.rules.names, "description": ctor.description}
            )
        return ServiceResult.success("list_constructors", {"items": items, "count": len(items)})

    def validate(self, tag: str, raw: Any) -> ServiceResult:
        """Run the smart constructor registered for *tag* on *raw*."""
        op = "validate"
        try:
            ctor = self._constructor(tag)
        except KeyError:
            return ServiceResult.error_result(
                op,
                "UNKNOWN_TAG",
                f"No smart constructor for '{tag}'",
                known=sorted(CONSTRUCTORS),
            )

        result = ctor(raw)
        self._log.debug("validate", tag=ctor.tag, ok=result.ok)
        match result:
            case Ok(validated):
                return ServiceResult.success(
                    op,
                    {"tag": validated.tag, "value": to_data(validated), "rules": ctor.rules.names},
                )
            case Err(failure):
                return ServiceResult.failure(op, failure)

    def classify(self, model: str, fields: Mapping[str, Any]) -> ServiceResult:
        """Classify raw *fields* into exactly one variant of *model*."""
        op = "classify"
        classifier = CLASSIFIERS.get(model)
        if classifier is None:
            return ServiceResult.error_result(
                op,
                "UNKNOWN_MODEL",
                f"No variant model named '{model}'",
                known=sorted(CLASSIFIERS),
            )

        try:
            result = classifier(dict(fields))
        except ValueError as exc:
            return ServiceResult.error_result(op, "INVALID_FIELD", str(exc), model=model)

        ignored = sorted(set(fields) - CLASSIFIER_FIELDS[model])
        self._log.debug("classify", model=model, fields=sorted(fields), ok=result.ok)
        match result:
            case Ok(variant):
                return ServiceResult.success(
                    op,
                    {"model": model, "variant": to_data(variant)},
                    warnings=[f"Ignored field '{name}'" for name in ignored],
                )
            case Err(failure):
                return ServiceResult.failure(op, failure)

    def build_person(self, steps: list[tuple[str, Any]]) -> ServiceResult:
        """Apply ``(field, value)`` *steps* to an empty Person builder, then build.

        Steps apply in order; repeating a field keeps the last value.
        """
        op = "build_person"
        builder = PERSON.empty()
        for field, value in steps:
            try:
                builder = builder.with_field(field, value)
            except KeyError:
                return ServiceResult.error_result(
                    op,
                    "UNKNOWN_FIELD",
                    f"Person has no field '{field}'",
                    known=sorted(PERSON.marks),
                )

        result = builder.build()
        self._log.debug("build_person", marks=sorted(builder.marks), ok=result.ok)
        match result:
            case Ok(person):
                return ServiceResult.success(
                    op, {"person": to_data(person), "marks": sorted(builder.marks)}
                )
            case Err(failure):
                return ServiceResult.failure(op, failure)
