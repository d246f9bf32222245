"""Document ownership (seal data trait).

An open hierarchy of document traits (owned, anonymous, group-owned) is
replaced by one record whose ``kind`` field is a closed sum.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, assert_never

from fdm.domain.result import AmbiguousOrMissingVariant, Err, Ok, Result
from fdm.domain.variants import VariantBuilder, case


@dataclass(frozen=True)
class Owned:
    owner_id: str


@dataclass(frozen=True)
class Anonymous:
    pass


@dataclass(frozen=True)
class GroupOwned:
    owner_ids: tuple[str, ...]


DocumentKind = Owned | Anonymous | GroupOwned


@dataclass(frozen=True)
class Document:
    document_id: str
    kind: DocumentKind


DOCUMENT_KIND: VariantBuilder[DocumentKind] = VariantBuilder(
    "document",
    [
        case("owned", lambda owner_id: Owned(owner_id=owner_id), "owner_id"),
        case("group", lambda owner_ids: GroupOwned(owner_ids=tuple(owner_ids)), "owner_ids"),
        case("anonymous", Anonymous),
    ],
)


def classify_document(
    document_id: str,
    raw_fields: Mapping[str, Any],
) -> Result[Document, AmbiguousOrMissingVariant]:
    """No owner fields -> anonymous; ``owner_id`` -> owned; ``owner_ids`` -> group."""
    match DOCUMENT_KIND.classify(raw_fields):
        case Ok(kind):
            return Ok(Document(document_id=document_id, kind=kind))
        case Err() as failed:
            return failed


def owners(document: Document) -> tuple[str, ...]:
    match document.kind:
        case Owned(owner_id=owner_id):
            return (owner_id,)
        case GroupOwned(owner_ids=owner_ids):
            return owner_ids
        case Anonymous():
            return ()
        case _:
            assert_never(document.kind)
