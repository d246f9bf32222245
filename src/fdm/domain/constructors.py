"""Smart constructor catalog.

Each entry pairs a tag with its rule set and, where input arrives as
text, a parse step. Rule names are stable: they appear verbatim in
``RuleViolated`` failures.

The registry mirrors the subtype registry pattern: look up by tag, get a
ready-to-call constructor.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from fdm.domain.result import Result, ValidationFailure
from fdm.domain.rules import (
    Rule,
    RuleSet,
    at_least,
    at_most,
    exact_length,
    finite,
    has_digit,
    matches,
    min_length,
    not_blank,
    positive,
)
from fdm.domain.validated import SmartConstructor, Validated, validate

AGE_MIN = 0
AGE_MAX = 120

EMAIL_PATTERN = r"[\w.+-]+@[\w-]+(\.[\w-]+)+"

BANK_ACCOUNT_ID_LENGTH = 10

CARD_POINTS_MIN = 1
CARD_POINTS_MAX = 13


def _to_int(raw: object) -> int:
    if isinstance(raw, bool):
        raise TypeError("booleans are not integers")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        return int(raw.strip())
    raise TypeError(f"cannot read an integer from {type(raw).__name__}")


def _to_decimal(raw: object) -> Decimal:
    if isinstance(raw, bool):
        raise TypeError("booleans are not amounts")
    try:
        value = Decimal(str(raw).strip())
    except InvalidOperation as exc:
        raise ValueError(f"not an amount: {raw!r}") from exc
    if not value.is_finite():
        raise ValueError(f"not a finite amount: {raw!r}")
    return value


def _to_float(raw: object) -> float:
    if isinstance(raw, bool):
        raise TypeError("booleans are not numbers")
    if isinstance(raw, int | float):
        try:
            return float(raw)
        except OverflowError as exc:
            raise ValueError(f"number out of range: {raw!r}") from exc
    if isinstance(raw, str):
        return float(raw.strip())
    raise TypeError(f"cannot read a number from {type(raw).__name__}")


def _to_str(raw: object) -> str:
    if not isinstance(raw, str):
        raise TypeError(f"expected text, got {type(raw).__name__}")
    return raw


NON_NEGATIVE: SmartConstructor[int] = SmartConstructor(
    tag="NonNegative",
    rules=RuleSet.of(at_least(0)),
    parse=_to_int,
    parse_rule="integer",
    description="An integer that is never negative.",
)

AGE: SmartConstructor[int] = SmartConstructor(
    tag="Age",
    rules=RuleSet.of(at_least(AGE_MIN), at_most(AGE_MAX)),
    parse=_to_int,
    parse_rule="integer",
    description=f"An integer age between {AGE_MIN} and {AGE_MAX} inclusive.",
)

EMAIL: SmartConstructor[str] = SmartConstructor(
    tag="Email",
    rules=RuleSet.of(matches(EMAIL_PATTERN, name="email-format")),
    parse=_to_str,
    parse_rule="text",
    description="A syntactically plausible email address.",
)

BANK_ACCOUNT_ID: SmartConstructor[str] = SmartConstructor(
    tag="BankAccountId",
    rules=RuleSet.of(exact_length(BANK_ACCOUNT_ID_LENGTH)),
    parse=_to_str,
    parse_rule="text",
    description=f"A bank account id of exactly {BANK_ACCOUNT_ID_LENGTH} characters.",
)

ACCOUNT_NAME: SmartConstructor[str] = SmartConstructor(
    tag="AccountName",
    rules=RuleSet.of(not_blank()),
    parse=_to_str,
    parse_rule="text",
    description="A non-blank account holder name.",
)

BALANCE: SmartConstructor[Decimal] = SmartConstructor(
    tag="Balance",
    rules=RuleSet.of(at_least(0)),
    parse=_to_decimal,
    parse_rule="amount",
    description="A non-negative account balance.",
)

SALARY: SmartConstructor[Decimal] = SmartConstructor(
    tag="Salary",
    rules=RuleSet.of(positive()),
    parse=_to_decimal,
    parse_rule="amount",
    description="A strictly positive salary.",
)

READING: SmartConstructor[float] = SmartConstructor(
    tag="Reading",
    rules=RuleSet.of(finite()),
    parse=_to_float,
    parse_rule="number",
    description="A finite sensor reading.",
)

PRICE: SmartConstructor[Decimal] = SmartConstructor(
    tag="Price",
    rules=RuleSet.of(at_least(0)),
    parse=_to_decimal,
    parse_rule="amount",
    description="A non-negative price or charge.",
)

CARD_POINTS: SmartConstructor[int] = SmartConstructor(
    tag="CardPoints",
    rules=RuleSet.of(at_least(CARD_POINTS_MIN), at_most(CARD_POINTS_MAX)),
    parse=_to_int,
    parse_rule="integer",
    description=f"Playing card points from {CARD_POINTS_MIN} to {CARD_POINTS_MAX}.",
)


def password_constructor(
    min_chars: int = 8,
    *,
    require_digit: bool = True,
) -> SmartConstructor[str]:
    """Build a Password constructor from security settings."""
    rules: list[Rule[str]] = [min_length(min_chars)]
    if require_digit:
        rules.append(has_digit())
    return SmartConstructor(
        tag="Password",
        rules=RuleSet.of(*rules),
        parse=_to_str,
        parse_rule="text",
        description=f"A password of at least {min_chars} characters"
        + (" containing a digit." if require_digit else "."),
    )


PASSWORD = password_constructor()


def check_password(candidate: str, *rules: Rule[str]) -> Result[Validated[str], ValidationFailure]:
    """Validate *candidate* against caller-chosen password rules.

    Calling with no rules fails with ``EmptyRuleSet``.
    """
    return validate(candidate, RuleSet.of(*rules), tag="Password")


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

CONSTRUCTORS: dict[str, SmartConstructor] = {
    c.tag: c
    for c in (
        NON_NEGATIVE,
        AGE,
        EMAIL,
        PASSWORD,
        BANK_ACCOUNT_ID,
        ACCOUNT_NAME,
        BALANCE,
        SALARY,
        READING,
        PRICE,
        CARD_POINTS,
    )
}


def get_constructor(tag: str) -> SmartConstructor:
    """Look up a smart constructor by tag (case-insensitive).

    Raises:
        KeyError: If no constructor is registered for *tag*.
    """
    if tag in CONSTRUCTORS:
        return CONSTRUCTORS[tag]
    for name, ctor in CONSTRUCTORS.items():
        if name.lower() == tag.lower():
            return ctor
    raise KeyError(tag)
