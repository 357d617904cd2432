"""Cross-file duplicate resolution for doc objects."""

from __future__ import annotations

from typing import List, Sequence, Set

from .logging import get_logger
from .models import DocObject

MEMBER_KIND = "member"

logger = get_logger("dedupe")


def resolve_duplication(docs: Sequence[DocObject]) -> List[DocObject]:
    """Drop redundant ``member`` docs and return the survivors in input order.

    A member sharing its longname with any doc of another kind (method, getter,
    setter, ...) is removed. Among members sharing a longname, only the one whose
    id sorts first *as a string* survives, so ``"10"`` beats ``"2"``.
    """
    member_docs = [doc for doc in docs if doc.kind == MEMBER_KIND]
    remove_ids: Set[str] = set()

    for member_doc in member_docs:
        shadowed = any(
            doc.longname == member_doc.longname and doc.kind != MEMBER_KIND for doc in docs
        )
        if shadowed:
            remove_ids.add(_id_key(member_doc))
            continue

        duplicates = [
            doc for doc in docs if doc.longname == member_doc.longname and doc.kind == MEMBER_KIND
        ]
        if len(duplicates) > 1:
            ids = sorted(_id_key(doc) for doc in duplicates)
            remove_ids.update(ids[1:])

    if remove_ids:
        logger.debug("Removing %d duplicate member docs", len(remove_ids))
    return [doc for doc in docs if _id_key(doc) not in remove_ids]


def _id_key(doc: DocObject) -> str:
    return str(doc.doc_id)


__all__ = ["MEMBER_KIND", "resolve_duplication"]
