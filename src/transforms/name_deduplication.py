"""Scientific name deduplication transform.

This module drops repeated name strings while keeping first-seen order.
Names are compared verbatim; no case or whitespace folding is applied.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from core.types import NameRecord


class NameDeduplicator:
    """Single-pass filter keeping the first record for each name string."""

    def __init__(self) -> None:
        self._seen_names: set[str] = set()
        self.duplicates_skipped = 0

    def is_new(self, record: NameRecord) -> bool:
        """Return True and remember the name if it has not been seen yet."""
        if record.name_string in self._seen_names:
            self.duplicates_skipped += 1
            return False
        self._seen_names.add(record.name_string)
        return True

    def filter(self, records: Iterable[NameRecord]) -> Iterator[NameRecord]:
        for record in records:
            if self.is_new(record):
                yield record


def remove_duplicate_names(records: Iterable[NameRecord]) -> list[NameRecord]:
    """Remove records whose name string was already seen.

    Args:
        records: Name records in source order.

    Returns:
        Ordered records with later duplicates removed.
    """
    return list(NameDeduplicator().filter(records))
