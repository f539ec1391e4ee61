"""Index Animalium source reader.

This module reads the headerless tab-separated dump into name records.
Rows are deduplicated by scientific name as they are read.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Any, Iterator

from core.constants import (
    MIN_ROW_FIELDS,
    PROGRESS_LOG_INTERVAL,
    SOURCE_DELIMITER,
    SOURCE_ENCODING,
)
from core.errors import MalformedRowError, SetupError
from core.logging_config import EventLogger, get_logger
from core.types import IngestSummary, NameRecord, RawRow
from transforms.name_deduplication import NameDeduplicator


class RecordIngestor:
    """Reads a source file into deduplicated name records.

    Blank lines are skipped. Any other row with fewer than two fields
    aborts the run with ``MalformedRowError``.
    """

    def __init__(self, logger: EventLogger | None = None) -> None:
        self._logger = logger if logger is not None else get_logger(__name__)
        self.summary = IngestSummary()
        self._rows_read = 0
        self._blank_lines = 0

    def ingest(self, path: str | Path) -> list[NameRecord]:
        """Read, validate, and deduplicate source rows.

        Args:
            path: Local tab-separated file without a header row.

        Returns:
            Name records in first-seen order.

        Raises:
            SetupError: If the file is missing, unreadable, or not UTF-8.
            MalformedRowError: If a row has fewer than two fields or cannot be split.
        """
        source_path = Path(path).expanduser()
        self._rows_read = 0
        self._blank_lines = 0
        deduplicator = NameDeduplicator()
        records = list(deduplicator.filter(self._iter_records(source_path)))
        self.summary = IngestSummary(
            rows_read=self._rows_read,
            records_kept=len(records),
            duplicates_skipped=deduplicator.duplicates_skipped,
            blank_lines=self._blank_lines,
        )
        self._logger.info(
            "names_collected", source_path=str(source_path), **_log_fields(self.summary)
        )
        return records

    def _iter_records(self, source_path: Path) -> Iterator[NameRecord]:
        for line_number, row in _iter_rows(source_path):
            if not row:
                self._blank_lines += 1
                continue
            record = _build_record(source_path, line_number, row)
            self._rows_read += 1
            yield record
            if line_number % PROGRESS_LOG_INTERVAL == 0:
                self._logger.info("names_processed", line_number=line_number)


def collect_names(path: str | Path, logger: EventLogger | None = None) -> list[NameRecord]:
    """Read deduplicated name records from a source file.

    Args:
        path: Local tab-separated source path.
        logger: Optional injected logger.

    Returns:
        Name records in first-seen order.
    """
    return RecordIngestor(logger).ingest(path)


def _iter_rows(source_path: Path) -> Iterator[tuple[int, RawRow]]:
    """Yield one-based line numbers with split rows.

    Raises:
        SetupError: If the file cannot be opened or decoded.
        MalformedRowError: If the csv module cannot split a line.
    """
    if not source_path.is_file():
        raise SetupError(
            f"Failed to read source at {source_path}: file does not exist. "
            "Run 'sherborn download' or pass an existing --source file."
        )
    try:
        with source_path.open(encoding=SOURCE_ENCODING, newline="") as source_file:
            reader = csv.reader(
                source_file, delimiter=SOURCE_DELIMITER, quoting=csv.QUOTE_NONE
            )
            try:
                for row in reader:
                    yield reader.line_num, row
            except csv.Error as error:
                raise MalformedRowError(
                    f"Malformed row at {source_path}:{reader.line_num}: {error}."
                ) from error
    except UnicodeDecodeError as error:
        raise SetupError(
            f"Failed to decode source at {source_path}: {error.reason}. "
            "The source must be UTF-8 encoded."
        ) from error
    except OSError as error:
        raise SetupError(f"Failed to read source at {source_path}: {error}.") from error


def _build_record(source_path: Path, line_number: int, row: RawRow) -> NameRecord:
    """Map a raw row onto a name record.

    Raises:
        MalformedRowError: If the row has fewer than two fields.
    """
    if len(row) < MIN_ROW_FIELDS:
        raise MalformedRowError(
            f"Malformed row at {source_path}:{line_number}: expected at least "
            f"{MIN_ROW_FIELDS} tab-separated fields, got {len(row)}."
        )
    return NameRecord(taxon_id=row[0], name_string=row[1])


def _log_fields(summary: IngestSummary) -> dict[str, Any]:
    """Flatten ingest counters into log event fields."""
    return {
        "rows_read": summary.rows_read,
        "records_kept": summary.records_kept,
        "duplicates_skipped": summary.duplicates_skipped,
        "blank_lines": summary.blank_lines,
    }
