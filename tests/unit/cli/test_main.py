"""Unit tests for CLI command handling."""

from __future__ import annotations

import zipfile
from pathlib import Path
from typing import Any, Iterator

import pytest
import requests

from cli.main import build_parser, main
from tests.fixture_paths import fixture_path


class _FakeResponse:
    def __enter__(self) -> "_FakeResponse":
        return self

    def __exit__(self, *exc_info: object) -> None:
        return None

    def raise_for_status(self) -> None:
        return None

    def iter_content(self, chunk_size: int) -> Iterator[bytes]:
        return iter([b"1\tAus bus\n"])


def test_cli_build_prints_archive_path(tmp_path: Path, capsys) -> None:
    """CLI build should print the written archive path."""
    output_path = tmp_path / "sherborn.zip"
    args = [
        "--data-root",
        str(tmp_path),
        "build",
        "--source",
        str(fixture_path("index_animalium_sample.tsv")),
        "--output",
        str(output_path),
    ]

    exit_code = main(args)
    output = capsys.readouterr().out.strip()

    assert exit_code == 0 and output == str(output_path.resolve())
    assert zipfile.is_zipfile(output_path)


def test_cli_build_reports_missing_source(tmp_path: Path, capsys) -> None:
    """Missing source should fail with a single stage-tagged message."""
    exit_code = main(["--data-root", str(tmp_path), "build"])
    error_output = capsys.readouterr().err.strip()

    assert exit_code == 1
    assert error_output.startswith("error: setup:")
    assert len(error_output.splitlines()) == 1


def test_cli_build_reports_malformed_row(tmp_path: Path, capsys) -> None:
    """Short rows should abort before any archive is written."""
    output_path = tmp_path / "sherborn.zip"
    args = [
        "build",
        "--source",
        str(fixture_path("short_row.tsv")),
        "--output",
        str(output_path),
    ]

    exit_code = main(args)

    assert exit_code == 1
    assert capsys.readouterr().err.startswith("error: ingest:")
    assert not output_path.exists()


def test_cli_download_prints_source_path(tmp_path: Path, capsys, monkeypatch) -> None:
    """CLI download should fetch into the data root."""

    def fake_get(url: str, **kwargs: object) -> Any:
        return _FakeResponse()

    monkeypatch.setattr(requests, "get", fake_get)

    exit_code = main(["--data-root", str(tmp_path), "download", "--url", "https://example.org/x"])
    output = capsys.readouterr().out.strip()

    assert exit_code == 0
    assert Path(output).read_text(encoding="utf-8") == "1\tAus bus\n"


def test_build_parser_requires_command() -> None:
    """Parser should reject a missing subcommand."""
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_cli_build_reports_unsplittable_row(tmp_path: Path, capsys) -> None:
    """Rows the csv module rejects should still yield one tagged error line."""
    source_path = tmp_path / "data.csv"
    source_path.write_text("1\t" + "A" * 140000 + "\n", encoding="utf-8")

    exit_code = main(["build", "--source", str(source_path), "--output", str(tmp_path / "x.zip")])
    error_output = capsys.readouterr().err.strip()

    assert exit_code == 1
    assert error_output.startswith("error: ingest:")
    assert len(error_output.splitlines()) == 1
