"""Archive build orchestration.

This module coordinates source download, name ingest, package
assembly, and archive writing. Each stage completes before the next
starts, and any failure aborts the run before output is written.
"""

from __future__ import annotations

from pathlib import Path

from archive.dwca_writer import ArchiveWriter, DwcaArchiveWriter
from assemble.package_assembler import PackageAssembler
from core.config import SherbornConfig
from core.logging_config import EventLogger, get_logger
from core.metadata_config import load_metadata_params
from core.types import BuildOptions, BuildResult
from ingest.downloader import ensure_source
from ingest.name_reader import RecordIngestor

_LOGGER = get_logger(__name__)


class ArchiveBuildRunner:
    """Runner for one source-to-archive build."""

    def __init__(
        self,
        options: BuildOptions,
        config: SherbornConfig,
        writer: ArchiveWriter | None = None,
        logger: EventLogger | None = None,
    ) -> None:
        self._options = options
        self._config = config
        self._logger = logger if logger is not None else _LOGGER
        self._output_path = _resolve_path(options.output_path, config.archive_path)
        self._writer = writer if writer is not None else DwcaArchiveWriter(
            self._output_path, self._logger
        )

    def run(self) -> BuildResult:
        """Execute the build and return its outputs."""
        params = load_metadata_params(self._options.metadata_file)
        source_path = self._resolve_source()
        ingestor = RecordIngestor(self._logger)
        records = ingestor.ingest(source_path)
        core_table, metadata = PackageAssembler(params, self._logger).assemble(records)
        archive_path = self._writer.write_package(core_table, metadata)
        result = BuildResult(
            archive_path=archive_path,
            record_count=len(core_table.data_rows),
            summary=ingestor.summary,
        )
        self._logger.info(
            "archive_built",
            source_path=str(source_path),
            archive_path=str(archive_path),
            record_count=result.record_count,
            duplicates_skipped=result.summary.duplicates_skipped,
        )
        return result

    def _resolve_source(self) -> Path:
        source_path = _resolve_path(self._options.source_path, self._config.source_path)
        if not self._options.download:
            return source_path
        return ensure_source(
            self._config.source_url,
            source_path,
            self._config.download_timeout,
            force=self._options.force_download,
            logger=self._logger,
        )


def build_archive(
    options: BuildOptions,
    config: SherbornConfig,
    writer: ArchiveWriter | None = None,
) -> BuildResult:
    """Build a Darwin Core Archive from the Index Animalium source.

    Args:
        options: Build request options.
        config: Runtime configuration.
        writer: Optional archive writer; zip writer by default.

    Returns:
        Archive location and run counters.

    Raises:
        SetupError: If the source cannot be fetched or opened.
        MalformedRowError: If a source row lacks required fields.
        AssemblyError: If metadata params are incomplete.
        ArchiveError: If the archive cannot be written.
    """
    return ArchiveBuildRunner(options, config, writer).run()


def _resolve_path(value: str | None, default: Path) -> Path:
    if value is None:
        return default
    return Path(value).expanduser().resolve()
