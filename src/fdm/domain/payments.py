"""Credit card models (extract sum).

A card record with four optional fields (16-digit number, 15-digit number,
4-digit code, 3-digit code) admits nonsense combinations. The closed sum
below admits only the two real ones:

- Visa: 16-digit number with a 4-digit security code.
- Amex: 15-digit number with a 3-digit security code.

Digit strings are validated through smart constructors before a card is
constructed.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, assert_never

from fdm.domain.result import (
    AmbiguousOrMissingVariant,
    Err,
    Ok,
    Result,
    ValidationFailure,
)
from fdm.domain.rules import RuleSet, all_digits, exact_length
from fdm.domain.validated import SmartConstructor, Validated
from fdm.domain.variants import VariantBuilder, case


def _digits(count: int) -> SmartConstructor[str]:
    return SmartConstructor(
        tag=f"Digits{count}",
        rules=RuleSet.of(all_digits(), exact_length(count)),
        parse=lambda raw: str(raw).replace(" ", "").replace("-", ""),
        parse_rule="text",
    )


DIGITS_16 = _digits(16)
DIGITS_15 = _digits(15)
DIGITS_4 = _digits(4)
DIGITS_3 = _digits(3)


@dataclass(frozen=True)
class Visa:
    number: Validated[str]
    security_code: Validated[str]

    @property
    def groups(self) -> tuple[str, str, str, str]:
        n = self.number.value
        return n[0:4], n[4:8], n[8:12], n[12:16]


@dataclass(frozen=True)
class Amex:
    number: Validated[str]
    security_code: Validated[str]

    @property
    def groups(self) -> tuple[str, str, str]:
        n = self.number.value
        return n[0:4], n[4:10], n[10:15]


CreditCard = Visa | Amex


def _checked(
    card_type: type[CreditCard],
    number_ctor: SmartConstructor[str],
    code_ctor: SmartConstructor[str],
    raw_number: Any,
    raw_code: Any,
) -> Result[CreditCard, ValidationFailure]:
    number = number_ctor(raw_number)
    if isinstance(number, Err):
        return number
    code = code_ctor(raw_code)
    if isinstance(code, Err):
        return code
    return Ok(card_type(number=number.value, security_code=code.value))


def _visa(digit16: Any, security_code4: Any) -> Result[CreditCard, ValidationFailure]:
    return _checked(Visa, DIGITS_16, DIGITS_4, digit16, security_code4)


def _amex(digit15: Any, security_code3: Any) -> Result[CreditCard, ValidationFailure]:
    return _checked(Amex, DIGITS_15, DIGITS_3, digit15, security_code3)


CARD: VariantBuilder[Result[CreditCard, ValidationFailure]] = VariantBuilder(
    "credit_card",
    [
        case("visa", _visa, "digit16", "security_code4"),
        case("amex", _amex, "digit15", "security_code3"),
    ],
)


def classify_card(
    raw_fields: Mapping[str, Any],
) -> Result[CreditCard, AmbiguousOrMissingVariant | ValidationFailure]:
    """Classify and validate raw card fields.

    Expected keys: ``digit16``/``security_code4`` for Visa or
    ``digit15``/``security_code3`` for Amex. Variant selection happens
    first; digit validation only runs for the selected case.
    """
    match CARD.classify(raw_fields):
        case Ok(checked):
            return checked
        case Err() as failed:
            return failed


def masked(card: CreditCard) -> str:
    """Render the card number with all but the last four digits hidden."""
    match card:
        case Visa():
            brand = "VISA"
        case Amex():
            brand = "AMEX"
        case _:
            assert_never(card)
    digits = card.number.value
    return f"{brand} {'*' * (len(digits) - 4)}{digits[-4:]}"
