"""Query matching over the cheatsheet dataset.

Matching is a plain case-insensitive substring test per field.
Results always keep dataset order; nothing is ranked or re-sorted.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .cheats import CheatEntry

logger = logging.getLogger(__name__)


def fold_query(query: str) -> str:
    """Normalize query text for case-insensitive comparison."""
    return query.casefold()


def entry_matches(entry: CheatEntry, folded_query: str) -> bool:
    """Return whether ``folded_query`` occurs in any field of ``entry``.

    Each field is tested on its own, so a query never matches across the
    boundary between command, category and description.
    """
    if not folded_query:
        return True
    return (
        folded_query in entry.command.casefold()
        or folded_query in entry.category.casefold()
        or folded_query in entry.description.casefold()
    )


def filter_entries(dataset: Iterable[CheatEntry], query: str) -> tuple[CheatEntry, ...]:
    """Return entries matching ``query`` in dataset order."""
    folded = fold_query(query)
    matches = tuple(entry for entry in dataset if entry_matches(entry, folded))
    logger.debug("filter updated; query=%r, shown=%d", query, len(matches))
    return matches


__all__ = ["entry_matches", "filter_entries", "fold_query"]
