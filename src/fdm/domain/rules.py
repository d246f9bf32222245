"""Validation rules and rule sets.

A :class:`Rule` is a named pure predicate. A :class:`RuleSet` is an
ordered conjunction of rules, evaluated in declaration order.

INVARIANT: A rule set with zero rules rejects every input. This departs
from plain conjunction over an empty collection (vacuously true) so that an
empty rule set can never silently become a no-op validator.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable, Iterator, Sized
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Rule(Generic[T]):
    """A named predicate over a raw value."""

    name: str
    predicate: Callable[[T], bool]

    def __call__(self, raw: T) -> bool:
        return bool(self.predicate(raw))


@dataclass(frozen=True)
class RuleSet(Generic[T]):
    """Ordered, immutable conjunction of rules."""

    rules: tuple[Rule[T], ...] = ()

    @classmethod
    def of(cls, *rules: Rule[T]) -> RuleSet[T]:
        return cls(tuple(rules))

    def __and__(self, other: RuleSet[T]) -> RuleSet[T]:
        return RuleSet(self.rules + other.rules)

    def __iter__(self) -> Iterator[Rule[T]]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    @property
    def names(self) -> list[str]:
        return [r.name for r in self.rules]

    def first_violation(self, raw: T) -> Rule[T] | None:
        """Return the first rule (in declaration order) that *raw* fails.

        Evaluation stops at the first failure. A predicate that cannot
        judge *raw* at all (``TypeError`` or ``ValueError``, as in
        ``"120" >= 0``) counts as violated.
        """
        for rule in self.rules:
            try:
                passed = rule(raw)
            except (TypeError, ValueError):
                passed = False
            if not passed:
                return rule
        return None


# ---------------------------------------------------------------------------
# Stock rules
# ---------------------------------------------------------------------------


def at_least(bound: Any) -> Rule[Any]:
    """``raw >= bound``.

    Examples:
        >>> at_least(0).name
        '>=0'
    """
    return Rule(f">={bound}", lambda raw: raw >= bound)


def at_most(bound: Any) -> Rule[Any]:
    """``raw <= bound``."""
    return Rule(f"<={bound}", lambda raw: raw <= bound)


def positive() -> Rule[Any]:
    return Rule(">0", lambda raw: raw > 0)


def finite() -> Rule[float]:
    return Rule("finite", lambda raw: math.isfinite(raw))


def min_length(n: int) -> Rule[Sized]:
    return Rule(f"len>={n}", lambda raw: len(raw) >= n)


def exact_length(n: int) -> Rule[Sized]:
    return Rule(f"len=={n}", lambda raw: len(raw) == n)


def not_blank() -> Rule[str]:
    return Rule("not-blank", lambda raw: bool(raw.strip()))


def has_digit() -> Rule[str]:
    return Rule("has-digit", lambda raw: any(ch.isdigit() for ch in raw))


def all_digits() -> Rule[str]:
    # str.isdigit accepts superscripts and other Unicode digits.
    return Rule("all-digits", lambda raw: bool(raw) and all("0" <= ch <= "9" for ch in raw))


def matches(pattern: str, name: str | None = None) -> Rule[str]:
    """Full-match *pattern* against the raw string."""
    compiled = re.compile(pattern)
    return Rule(name or f"matches:{pattern}", lambda raw: compiled.fullmatch(raw) is not None)
