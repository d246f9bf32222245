"""Type-state builders.

A :class:`Blueprint` declares a product constructor and, for each field,
the mark recorded once that field is supplied (e.g. ``age -> "AgeSet"``).
Builders are immutable: ``with_field`` returns a new builder with one more
mark set and never touches the original.

Python has no type-level sets of marks, so completeness is checked when
``build`` is called. ``build`` reports ``IncompleteBuilder`` with the
missing marks instead of constructing a partial product.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType
from typing import Any, Generic, NoReturn, TypeVar

from fdm.domain.result import Err, IncompleteBuilder, Ok, Result

P = TypeVar("P")


class Blueprint(Generic[P]):
    """Static description of a product and its required marks."""

    def __init__(
        self,
        product: Callable[..., P],
        marks: Mapping[str, str],
        required: Iterable[str] | None = None,
        *,
        name: str | None = None,
    ) -> None:
        self.product = product
        self.name = name or getattr(product, "__name__", "product")
        self.marks: Mapping[str, str] = MappingProxyType(dict(marks))
        all_marks = frozenset(self.marks.values())
        self.required: frozenset[str] = (
            all_marks if required is None else frozenset(required)
        )
        unknown = self.required - all_marks
        if unknown:
            raise ValueError(f"Required marks not declared by any field: {sorted(unknown)}")

    def empty(self) -> Builder[P]:
        """A builder with no marks set and every field unset."""
        return Builder(self, {})

    def __repr__(self) -> str:
        return f"Blueprint({self.name!r}, required={sorted(self.required)})"


class Builder(Generic[P]):
    """Immutable, multi-step builder for a :class:`Blueprint` product."""

    __slots__ = ("_blueprint", "_values")

    def __init__(self, blueprint: Blueprint[P], values: Mapping[str, Any]) -> None:
        object.__setattr__(self, "_blueprint", blueprint)
        object.__setattr__(self, "_values", MappingProxyType(dict(values)))

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError("Builders are immutable; use with_field()")

    @property
    def blueprint(self) -> Blueprint[P]:
        return self._blueprint

    @property
    def values(self) -> Mapping[str, Any]:
        return self._values

    @property
    def marks(self) -> frozenset[str]:
        return frozenset(self._blueprint.marks[f] for f in self._values)

    @property
    def missing(self) -> frozenset[str]:
        return self._blueprint.required - self.marks

    @property
    def complete(self) -> bool:
        return not self.missing

    def with_field(self, field: str, value: Any) -> Builder[P]:
        """Return a new builder with *field* set to *value*.

        Setting the same field again replaces the earlier value; the mark
        stays set.

        Raises:
            KeyError: If *field* is not declared by the blueprint.
        """
        if field not in self._blueprint.marks:
            raise KeyError(field)
        return Builder(self._blueprint, {**self._values, field: value})

    def build(self) -> Result[P, IncompleteBuilder]:
        """Construct the product if every required mark is set.

        Never mutates the builder, so it can be called repeatedly.
        """
        missing = self.missing
        if missing:
            return Err(IncompleteBuilder(product=self._blueprint.name, missing_marks=missing))
        return Ok(self._blueprint.product(**self._values))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Builder):
            return NotImplemented
        return self._blueprint is other._blueprint and dict(self._values) == dict(other._values)

    def __repr__(self) -> str:
        return f"Builder({self._blueprint.name!r}, marks={sorted(self.marks)})"


def empty(blueprint: Blueprint[P]) -> Builder[P]:
    return blueprint.empty()


def with_field(builder: Builder[P], field: str, value: Any) -> Builder[P]:
    return builder.with_field(field, value)


def build(builder: Builder[P]) -> Result[P, IncompleteBuilder]:
    return builder.build()
