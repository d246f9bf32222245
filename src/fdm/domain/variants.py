"""Discriminated variant builder.

Turns loosely typed input (a mapping of optional fields, stringly typed
discriminants) into exactly one case of a closed sum type.

Each :class:`Case` declares the evidence fields that identify it. A field
counts as evidence when it is present and not ``None``. The set of present
evidence must equal one case's ``requires`` exactly:

- Two cases' worth of evidence (e.g. both a device id and a user id) is
  ambiguous.
- Evidence matching no case (including no evidence at all, unless a case
  declares empty ``requires``) is missing.

Both report ``AmbiguousOrMissingVariant``. The selected case's ``build``
receives only its own fields, so irrelevant optional input never leaks
into the constructed variant.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from fdm.domain.result import AmbiguousOrMissingVariant, Err, Ok, Result

V = TypeVar("V")


@dataclass(frozen=True)
class Case(Generic[V]):
    """One variant: its name, identifying fields, and constructor.

    Attributes:
        name: Case identifier (e.g. ``"device"``).
        requires: Evidence fields that must all be present.
        build: Called with ``requires`` (plus any present ``carries``) as
            keyword arguments.
        carries: Optional non-discriminating fields this case accepts.
    """

    name: str
    requires: frozenset[str]
    build: Callable[..., V]
    carries: frozenset[str] = field(default_factory=frozenset)


def case(
    name: str,
    build: Callable[..., V],
    *requires: str,
    carries: Iterable[str] = (),
) -> Case[V]:
    """Shorthand for :class:`Case` with positional evidence fields."""
    return Case(name=name, requires=frozenset(requires), build=build, carries=frozenset(carries))


class VariantBuilder(Generic[V]):
    """Classify raw fields into exactly one of a closed set of cases."""

    def __init__(self, model: str, cases: Iterable[Case[V]]) -> None:
        self.model = model
        self.cases: tuple[Case[V], ...] = tuple(cases)
        if not self.cases:
            raise ValueError(f"Variant model '{model}' declares no cases")

        names = [c.name for c in self.cases]
        if len(set(names)) != len(names):
            raise ValueError(f"Variant model '{model}' has duplicate case names: {names}")

        signatures = [c.requires for c in self.cases]
        if len(set(signatures)) != len(signatures):
            raise ValueError(f"Variant model '{model}' has cases with identical evidence")

        self.discriminants: frozenset[str] = frozenset().union(*signatures)

    def evidence(self, raw_fields: Mapping[str, Any]) -> frozenset[str]:
        """Return the discriminant fields present (non-None) in *raw_fields*."""
        return frozenset(k for k in self.discriminants if raw_fields.get(k) is not None)

    def select(self, raw_fields: Mapping[str, Any]) -> Case[V] | None:
        present = self.evidence(raw_fields)
        for candidate in self.cases:
            if candidate.requires == present:
                return candidate
        return None

    def classify(self, raw_fields: Mapping[str, Any]) -> Result[V, AmbiguousOrMissingVariant]:
        """Build the single case that *raw_fields* is evidence for."""
        chosen = self.select(raw_fields)
        if chosen is None:
            present = tuple(sorted(self.evidence(raw_fields)))
            return Err(AmbiguousOrMissingVariant(model=self.model, evidence=present))

        kwargs = {k: raw_fields[k] for k in chosen.requires}
        for extra in chosen.carries:
            if raw_fields.get(extra) is not None:
                kwargs[extra] = raw_fields[extra]
        return Ok(chosen.build(**kwargs))

    def __repr__(self) -> str:
        return f"VariantBuilder({self.model!r}, cases={[c.name for c in self.cases]})"
