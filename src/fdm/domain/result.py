"""Result values and the failure taxonomy.

Every fallible domain operation returns ``Ok(value)`` or ``Err(failure)``
instead of raising. Failures are plain frozen dataclasses so callers can
``match`` on them and the service layer can serialize them.

INVARIANT: No failure here is retryable with the same input. Validation is
deterministic, so the same input always reproduces the same failure.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result carrying a value."""

    value: T
    ok: bool = field(default=True, init=False)


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed result carrying a failure value."""

    error: E
    ok: bool = field(default=False, init=False)


Result = Ok[T] | Err[E]


# ---------------------------------------------------------------------------
# Failure kinds
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Failure:
    """Base for all failure kinds. Subclasses set ``code``."""

    code: ClassVar[str] = "FAILURE"

    @property
    def message(self) -> str:
        return self.code

    def detail(self) -> dict[str, object]:
        """Structured payload for service-layer error reporting."""
        return {}


@dataclass(frozen=True)
class EmptyRuleSet(Failure):
    """A rule set with zero rules was used. Always a caller bug."""

    code: ClassVar[str] = "EMPTY_RULE_SET"

    tag: str = ""

    @property
    def message(self) -> str:
        target = f" for '{self.tag}'" if self.tag else ""
        return f"Rule set{target} is empty; empty rule sets reject every input"

    def detail(self) -> dict[str, object]:
        return {"tag": self.tag}


@dataclass(frozen=True)
class RuleViolated(Failure):
    """Raw input failed the named rule (the first failing one)."""

    code: ClassVar[str] = "RULE_VIOLATED"

    rule: str
    tag: str = ""

    @property
    def message(self) -> str:
        target = f"'{self.tag}' " if self.tag else ""
        return f"Value {target}violates rule '{self.rule}'"

    def detail(self) -> dict[str, object]:
        return {"rule": self.rule, "tag": self.tag}


@dataclass(frozen=True)
class AmbiguousOrMissingVariant(Failure):
    """Discriminant evidence does not select exactly one case."""

    code: ClassVar[str] = "AMBIGUOUS_OR_MISSING_VARIANT"

    model: str
    evidence: tuple[str, ...] = ()

    @property
    def message(self) -> str:
        if not self.evidence:
            return f"No evidence for any '{self.model}' variant"
        found = ", ".join(self.evidence)
        return f"Evidence ({found}) does not select exactly one '{self.model}' variant"

    def detail(self) -> dict[str, object]:
        return {"model": self.model, "evidence": list(self.evidence)}


@dataclass(frozen=True)
class IncompleteBuilder(Failure):
    """Terminal build attempted before every required mark was set."""

    code: ClassVar[str] = "INCOMPLETE_BUILDER"

    product: str
    missing_marks: frozenset[str] = frozenset()

    @property
    def message(self) -> str:
        missing = ", ".join(sorted(self.missing_marks))
        return f"Cannot build '{self.product}': missing {missing}"

    def detail(self) -> dict[str, object]:
        return {"product": self.product, "missing_marks": sorted(self.missing_marks)}


ValidationFailure = EmptyRuleSet | RuleViolated
