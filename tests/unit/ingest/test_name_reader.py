"""Unit tests for the Index Animalium source reader."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.errors import MalformedRowError, SetupError
from core.types import IngestSummary, NameRecord, RawRow
from ingest.name_reader import RecordIngestor, _build_record, collect_names
from tests.fixture_paths import fixture_path
from tests.recording_logger import RecordingLogger
from transforms.name_deduplication import NameDeduplicator


def _write_rows(tmp_path: Path, rows: list[tuple[str, ...]]) -> Path:
    source_path = tmp_path / "data.csv"
    source_path.write_text("".join("\t".join(row) + "\n" for row in rows), encoding="utf-8")
    return source_path


def test_ingest_drops_later_duplicate_names(tmp_path: Path) -> None:
    """Second occurrence of a name should be discarded with its taxon id."""
    source_path = _write_rows(tmp_path, [("1", "Aus bus"), ("2", "Aus bus"), ("3", "Cus dus")])

    records = RecordIngestor(RecordingLogger()).ingest(source_path)

    assert records == [
        NameRecord(taxon_id="1", name_string="Aus bus"),
        NameRecord(taxon_id="3", name_string="Cus dus"),
    ]


def test_ingest_reads_fixture_in_file_order() -> None:
    """Fixture rows should map to records in first-seen order."""
    records = collect_names(fixture_path("index_animalium_sample.tsv"), RecordingLogger())

    assert [record.taxon_id for record in records] == ["1", "3", "4", "5"]


def test_ingest_keeps_quotes_and_ignores_extra_columns() -> None:
    """Quotes are name text and columns past the second are ignored."""
    records = collect_names(fixture_path("index_animalium_sample.tsv"), RecordingLogger())

    assert records[0].name_string == "Aus bus Linnaeus, 1758"
    assert records[-1].name_string == '"Gus" hus Say, 1817'


def test_ingest_records_summary_counters() -> None:
    """Ingestor should count rows, duplicates, and blank lines."""
    ingestor = RecordIngestor(RecordingLogger())

    ingestor.ingest(fixture_path("index_animalium_sample.tsv"))

    assert ingestor.summary == IngestSummary(
        rows_read=5, records_kept=4, duplicates_skipped=1, blank_lines=1
    )


def test_ingest_empty_file_returns_no_records() -> None:
    """An empty source is valid and yields nothing."""
    logger = RecordingLogger()

    records = RecordIngestor(logger).ingest(fixture_path("empty.tsv"))

    assert records == [] and logger.names() == ["names_collected"]


def test_ingest_raises_for_short_row() -> None:
    """A row with one field should fail with its line number."""
    with pytest.raises(MalformedRowError, match=r"short_row\.tsv:2"):
        collect_names(fixture_path("short_row.tsv"), RecordingLogger())


def test_ingest_raises_setup_error_for_missing_file(tmp_path: Path) -> None:
    """Missing source should raise an error that is also an OSError."""
    missing_path = tmp_path / "does-not-exist.tsv"

    with pytest.raises(SetupError) as error_info:
        collect_names(missing_path, RecordingLogger())

    assert isinstance(error_info.value, OSError)


def test_ingest_raises_setup_error_for_invalid_encoding(tmp_path: Path) -> None:
    """Non-UTF-8 bytes make the source unreadable."""
    source_path = tmp_path / "data.csv"
    source_path.write_bytes(b"1\tAus b\xffus\n")

    with pytest.raises(SetupError):
        collect_names(source_path, RecordingLogger())


def test_ingest_logs_progress_every_interval(tmp_path: Path, monkeypatch) -> None:
    """Progress events should be emitted at the configured interval."""
    monkeypatch.setattr("ingest.name_reader.PROGRESS_LOG_INTERVAL", 2)
    source_path = _write_rows(tmp_path, [(str(index), f"Name {index}") for index in range(1, 6)])
    logger = RecordingLogger()

    RecordIngestor(logger).ingest(source_path)

    assert logger.names() == ["names_processed", "names_processed", "names_collected"]


def test_ingest_accepts_crlf_line_endings(tmp_path: Path) -> None:
    """Windows line endings should not leak into name strings."""
    source_path = tmp_path / "data.csv"
    source_path.write_bytes(b"1\tAus bus\r\n2\tCus dus\r\n")

    records = collect_names(source_path, RecordingLogger())

    assert [record.name_string for record in records] == ["Aus bus", "Cus dus"]


def test_ingest_raises_malformed_row_for_oversized_field(tmp_path: Path) -> None:
    """Fields past the csv size limit should fail with their line number."""
    source_path = tmp_path / "data.csv"
    source_path.write_text("1\tAus bus\n2\t" + "A" * 140000 + "\n", encoding="utf-8")

    with pytest.raises(MalformedRowError, match=r"data\.csv:2"):
        collect_names(source_path, RecordingLogger())


def test_ingest_routes_rows_through_deduplicator_filter(monkeypatch) -> None:
    """Ingest should drop duplicates via the shared name filter."""
    filtered: list[NameRecord] = []
    original_filter = NameDeduplicator.filter

    def recording_filter(self: NameDeduplicator, records):
        for record in original_filter(self, records):
            filtered.append(record)
            yield record

    monkeypatch.setattr(NameDeduplicator, "filter", recording_filter)

    records = collect_names(fixture_path("index_animalium_sample.tsv"), RecordingLogger())

    assert filtered == records


def test_build_record_maps_raw_row_fields() -> None:
    """The first two raw row fields become taxon id and name."""
    row: RawRow = ["42", "Zus zus", "ignored"]

    record = _build_record(Path("data.csv"), 1, row)

    assert record == NameRecord(taxon_id="42", name_string="Zus zus")
