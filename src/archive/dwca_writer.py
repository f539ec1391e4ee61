"""Darwin Core Archive writer.

This module defines the archive writer interface and the default
zip implementation. The writer is the only component touching disk
after ingest, so assembly stays testable without a filesystem.
"""

from __future__ import annotations

import zipfile
from pathlib import Path
from typing import Protocol

from archive.eml_xml import render_eml_xml
from archive.meta_xml import render_meta_xml
from core.constants import CORE_FILE_NAME, EML_FILE_NAME, META_FILE_NAME, SOURCE_DELIMITER
from core.errors import ArchiveError
from core.logging_config import EventLogger, get_logger
from core.types import CoreTable, PackageMetadata


class ArchiveWriter(Protocol):
    """Serializes a core table and metadata into a package file."""

    def write_package(self, core_table: CoreTable, metadata: PackageMetadata) -> Path: ...


class DwcaArchiveWriter:
    """Zip-based Darwin Core Archive writer."""

    def __init__(self, output_path: Path, logger: EventLogger | None = None) -> None:
        self._output_path = output_path
        self._logger = logger if logger is not None else get_logger(__name__)

    def write_package(self, core_table: CoreTable, metadata: PackageMetadata) -> Path:
        """Write taxa.txt, meta.xml, and eml.xml into one zip archive.

        Args:
            core_table: Header row plus data rows.
            metadata: Package descriptive metadata.

        Returns:
            Path to the written archive.

        Raises:
            ArchiveError: If the archive cannot be written.
        """
        members = {
            CORE_FILE_NAME: render_core_text(core_table).encode("utf-8"),
            META_FILE_NAME: render_meta_xml(core_table.header),
            EML_FILE_NAME: render_eml_xml(metadata),
        }
        partial_path = self._output_path.with_name(self._output_path.name + ".part")
        try:
            self._output_path.parent.mkdir(parents=True, exist_ok=True)
            with zipfile.ZipFile(partial_path, "w", compression=zipfile.ZIP_DEFLATED) as bundle:
                for member_name, payload in members.items():
                    bundle.writestr(member_name, payload)
            partial_path.replace(self._output_path)
        except OSError as error:
            _discard_partial(partial_path)
            raise ArchiveError(
                f"Failed to write archive at {self._output_path}: {error}. "
                "Check the output directory permissions."
            ) from error
        self._logger.info(
            "archive_written",
            archive_path=str(self._output_path),
            row_count=len(core_table.data_rows),
        )
        return self._output_path


def render_core_text(core_table: CoreTable) -> str:
    """Render the core table as tab-separated text, header first."""
    for row_index, row in enumerate(core_table.rows):
        for value in row:
            if SOURCE_DELIMITER in value or "\n" in value or "\r" in value:
                raise ArchiveError(
                    f"Cannot serialize core row {row_index}: value {value!r} "
                    "contains a field or line separator."
                )
    lines = [SOURCE_DELIMITER.join(row) for row in core_table.rows]
    return "\n".join(lines) + "\n"


def _discard_partial(partial_path: Path) -> None:
    if partial_path.exists():
        partial_path.unlink()
