"""Validated values and smart constructors.

A :class:`Validated` wraps one raw value that passed a rule set. The only
way to obtain one is :func:`validate` (or a :class:`SmartConstructor`,
which delegates to it). There is no public constructor.

INVARIANT: A Validated instance exists iff its raw value passed the rule
set it was validated against. The wrapped value is never replaced;
"changing" it means validating a new raw value.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeVar

from fdm.domain.result import EmptyRuleSet, Err, Ok, Result, RuleViolated, ValidationFailure
from fdm.domain.rules import RuleSet

T = TypeVar("T")


class Validated(Generic[T]):
    """Opaque, immutable wrapper around a value that passed validation."""

    __slots__ = ("_tag", "_value")

    _tag: str
    _value: T

    def __init__(self, *_args: Any, **_kwargs: Any) -> None:
        raise TypeError("Validated values are only produced by validate()")

    @property
    def value(self) -> T:
        return self._value

    @property
    def tag(self) -> str:
        return self._tag

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError(f"Validated values are immutable (cannot set {name!r})")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"Validated values are immutable (cannot delete {name!r})")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Validated):
            return NotImplemented
        return (self._tag, self._value) == (other._tag, other._value)

    def __hash__(self) -> int:
        return hash((Validated, self._tag, self._value))

    def __copy__(self) -> Validated[T]:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Validated[T]:
        return self

    def __repr__(self) -> str:
        label = self._tag or "Validated"
        return f"{label}({self._value!r})"


def _promote(value: T, tag: str) -> Validated[T]:
    obj: Validated[T] = object.__new__(Validated)
    object.__setattr__(obj, "_tag", tag)
    object.__setattr__(obj, "_value", value)
    return obj


def validate(
    raw: T,
    rules: RuleSet[T],
    *,
    tag: str = "",
) -> Result[Validated[T], ValidationFailure]:
    """Promote *raw* to a :class:`Validated` value if it passes *rules*.

    Returns:
        ``Ok(Validated)`` wrapping *raw* unchanged, ``Err(EmptyRuleSet)``
        when *rules* is empty, or ``Err(RuleViolated)`` naming the first
        failing rule in declaration order.
    """
    if len(rules) == 0:
        return Err(EmptyRuleSet(tag=tag))
    failed = rules.first_violation(raw)
    if failed is not None:
        return Err(RuleViolated(rule=failed.name, tag=tag))
    return Ok(_promote(raw, tag))


@dataclass(frozen=True)
class SmartConstructor(Generic[T]):
    """The sole legal way to build a tagged validated value.

    An optional *parse* step coerces loosely typed input (e.g. CLI text)
    before the rules run. A parse failure is reported as a violation of
    *parse_rule*.
    """

    tag: str
    rules: RuleSet[T]
    parse: Callable[[Any], T] | None = None
    parse_rule: str = "parseable"
    description: str = ""

    def __call__(self, raw: Any) -> Result[Validated[T], ValidationFailure]:
        value = raw
        if self.parse is not None:
            try:
                value = self.parse(raw)
            except (TypeError, ValueError):
                return Err(RuleViolated(rule=self.parse_rule, tag=self.tag))
        return validate(value, self.rules, tag=self.tag)
