"""E-commerce models: orders with charges, emails, and email trigger rules.

Charges are a closed sum rather than one nullable column per charge kind.
Trigger rules are a recursive sum: a few primitive conditions combined with
``And``, ``Or`` and ``Negate``, evaluated by structural matching.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, assert_never

from fdm.domain.constructors import EMAIL, PRICE
from fdm.domain.result import Err, Ok, Result, ValidationFailure
from fdm.domain.rules import RuleSet, min_length
from fdm.domain.validated import Validated, validate

# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LineItem:
    description: str
    price: Validated[Decimal]


@dataclass(frozen=True)
class Shipping:
    cost: Validated[Decimal]


@dataclass(frozen=True)
class Handling:
    cost: Validated[Decimal]


OrderCharge = Shipping | Handling


@dataclass(frozen=True)
class Order:
    items: tuple[LineItem, ...]
    charges: tuple[OrderCharge, ...] = ()

    @property
    def subtotal(self) -> Decimal:
        return sum((item.price.value for item in self.items), Decimal(0))

    @property
    def total(self) -> Decimal:
        return self.subtotal + sum((c.cost.value for c in self.charges), Decimal(0))


def charge_label(charge: OrderCharge) -> str:
    match charge:
        case Shipping():
            return "shipping"
        case Handling():
            return "handling"
        case _:
            assert_never(charge)


def place_order(
    items: Iterable[tuple[str, Any]],
    *,
    shipping: Any = None,
    handling: Any = None,
) -> Result[Order, ValidationFailure]:
    """Price every ``(description, raw_price)`` item, then add the charges given.

    The first invalid price (items first, then shipping, then handling)
    is reported.
    """
    priced: list[LineItem] = []
    for description, raw_price in items:
        match PRICE(raw_price):
            case Ok(price):
                priced.append(LineItem(description=description, price=price))
            case Err() as failed:
                return failed

    charges: list[OrderCharge] = []
    for kind, raw_cost in ((Shipping, shipping), (Handling, handling)):
        if raw_cost is None:
            continue
        match PRICE(raw_cost):
            case Ok(cost):
                charges.append(kind(cost=cost))
            case Err() as failed:
                return failed

    return Ok(Order(items=tuple(priced), charges=tuple(charges)))


# ---------------------------------------------------------------------------
# Emails
# ---------------------------------------------------------------------------

RECIPIENTS_RULES: RuleSet[Sequence[Any]] = RuleSet.of(min_length(1))


@dataclass(frozen=True)
class Email:
    subject: str
    body: str
    sender: Validated[str]
    recipients: tuple[Validated[str], ...]


def compose_email(
    subject: str,
    body: str,
    sender: str,
    recipients: Sequence[str],
) -> Result[Email, ValidationFailure]:
    """Build an email. It needs a recipient, and every address must be valid."""
    checked = validate(tuple(recipients), RECIPIENTS_RULES, tag="Recipients")
    if isinstance(checked, Err):
        return checked

    addresses: list[Validated[str]] = []
    for raw in (sender, *recipients):
        match EMAIL(raw):
            case Ok(address):
                addresses.append(address)
            case Err() as failed:
                return failed

    sender_address, *recipient_addresses = addresses
    return Ok(
        Email(
            subject=subject,
            body=body,
            sender=sender_address,
            recipients=tuple(recipient_addresses),
        )
    )


# ---------------------------------------------------------------------------
# Email trigger rules
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ShopperAbandons:
    pass


@dataclass(frozen=True)
class After:
    days: int


@dataclass(frozen=True)
class And:
    left: TriggerRule
    right: TriggerRule


@dataclass(frozen=True)
class Or:
    left: TriggerRule
    right: TriggerRule


@dataclass(frozen=True)
class Negate:
    rule: TriggerRule


TriggerRule = ShopperAbandons | After | And | Or | Negate

SHOPPER_ABANDONS = ShopperAbandons()


@dataclass(frozen=True)
class Shopper:
    """What a trigger rule can see about one shopper."""

    abandoned_cart: bool
    days_since_visit: int


def should_send(rule: TriggerRule, shopper: Shopper) -> bool:
    match rule:
        case ShopperAbandons():
            return shopper.abandoned_cart
        case After(days=days):
            return shopper.days_since_visit >= days
        case And(left, right):
            return should_send(left, shopper) and should_send(right, shopper)
        case Or(left, right):
            return should_send(left, shopper) or should_send(right, shopper)
        case Negate(inner):
            return not should_send(inner, shopper)
        case _:
            assert_never(rule)


def describe_rule(rule: TriggerRule) -> str:
    """Render *rule* as a fully parenthesized expression."""
    match rule:
        case ShopperAbandons():
            return "abandoned cart"
        case After(days=days):
            return f"after {days} days"
        case And(left, right):
            return f"({describe_rule(left)} and {describe_rule(right)})"
        case Or(left, right):
            return f"({describe_rule(left)} or {describe_rule(right)})"
        case Negate(inner):
            return f"not {describe_rule(inner)}"
        case _:
            assert_never(rule)
