"""Core table and package metadata assembly.

This module turns deduplicated name records into the fixed three-term
core table and copies static metadata params into PackageMetadata.
"""

from __future__ import annotations

import uuid
from typing import Sequence

from core.constants import CORE_HEADER, NOMENCLATURAL_CODE
from core.errors import AssemblyError
from core.logging_config import EventLogger, get_logger
from core.types import CoreTable, MetadataParams, NameRecord, PackageMetadata


class PackageAssembler:
    """Builds the core table and metadata pair for one run."""

    def __init__(self, params: MetadataParams, logger: EventLogger | None = None) -> None:
        self._params = params
        self._logger = logger if logger is not None else get_logger(__name__)

    def assemble(self, records: Sequence[NameRecord]) -> tuple[CoreTable, PackageMetadata]:
        """Map records and metadata params into archive inputs.

        Args:
            records: Deduplicated name records in output order.

        Returns:
            Core table and package metadata.

        Raises:
            AssemblyError: If required metadata params are missing.
        """
        _validate_params(self._params)
        core_table = build_core_table(records)
        metadata = build_package_metadata(self._params)
        self._logger.info(
            "package_assembled",
            package_id=metadata.package_id,
            record_count=len(core_table.data_rows),
        )
        return core_table, metadata


def assemble(
    records: Sequence[NameRecord],
    params: MetadataParams,
    logger: EventLogger | None = None,
) -> tuple[CoreTable, PackageMetadata]:
    """Assemble the core table and metadata for a record sequence.

    Args:
        records: Deduplicated name records.
        params: Static metadata params.
        logger: Optional injected logger.

    Returns:
        Core table and package metadata.
    """
    return PackageAssembler(params, logger).assemble(records)


def build_core_table(records: Sequence[NameRecord]) -> CoreTable:
    """Build the header row plus one ICZN row per record."""
    rows: list[tuple[str, ...]] = [CORE_HEADER]
    for record in records:
        rows.append((record.taxon_id, record.name_string, NOMENCLATURAL_CODE))
    return CoreTable(rows=tuple(rows))


def build_package_metadata(params: MetadataParams) -> PackageMetadata:
    return PackageMetadata(
        package_id=params.package_id,
        title=params.title,
        url=params.url,
        abstract=params.abstract,
        authors=tuple(params.authors),
        metadata_providers=tuple(params.metadata_providers),
    )


def _validate_params(params: MetadataParams) -> None:
    """Fail when identity fields or people entries are missing.

    Raises:
        AssemblyError: If a required field is empty or malformed.
    """
    for field_name in ("package_id", "title", "url"):
        if not getattr(params, field_name):
            raise AssemblyError(
                f"Missing metadata field '{field_name}'. "
                "Set it in the metadata file or keep the built-in default."
            )
    try:
        uuid.UUID(params.package_id)
    except ValueError as error:
        raise AssemblyError(
            f"Invalid package_id '{params.package_id}': expected a UUID string."
        ) from error
    if not params.authors:
        raise AssemblyError("Metadata params must list at least one author.")
    if not params.metadata_providers:
        raise AssemblyError("Metadata params must list at least one metadata provider.")
