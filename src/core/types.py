"""Shared typed models.

This module defines immutable data models used by ingest, assembly,
and archive layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from core.constants import (
    AUTHOR_FIRST_NAME,
    AUTHOR_LAST_NAME,
    CORE_HEADER,
    DATASET_ABSTRACT,
    DATASET_TITLE,
    DATASET_URL,
    DATASET_UUID,
    PROVIDER_EMAIL,
    PROVIDER_FIRST_NAME,
    PROVIDER_LAST_NAME,
)

RawRow = list[str]
"""One split source line: field 0 is the taxon id, field 1 the name."""


@dataclass(frozen=True)
class NameRecord:
    """Normalized scientific name record.

    Attributes:
        taxon_id: Opaque identifier taken from the first source column.
        name_string: Scientific name text, the deduplication key.
    """

    taxon_id: str
    name_string: str


@dataclass(frozen=True)
class IngestSummary:
    """Counters collected while reading one source file."""

    rows_read: int = 0
    records_kept: int = 0
    duplicates_skipped: int = 0
    blank_lines: int = 0


@dataclass(frozen=True)
class CoreTable:
    """Darwin Core core table.

    Attributes:
        rows: Header row of term URIs followed by one row per record.
    """

    rows: tuple[tuple[str, ...], ...] = (CORE_HEADER,)

    @property
    def header(self) -> tuple[str, ...]:
        return self.rows[0]

    @property
    def data_rows(self) -> tuple[tuple[str, ...], ...]:
        return self.rows[1:]


@dataclass(frozen=True)
class Person:
    """Author or metadata provider entry for EML.

    Attributes:
        first_name: Optional given name.
        last_name: Optional surname.
        email: Optional contact address.
    """

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None


@dataclass(frozen=True)
class MetadataParams:
    """Static descriptive fields supplied by configuration.

    Attributes:
        package_id: Package UUID string.
        title: Dataset display title.
        url: Source dataset URL.
        abstract: Free-text dataset description.
        authors: Dataset creators.
        metadata_providers: People responsible for the metadata.
    """

    package_id: str = DATASET_UUID
    title: str = DATASET_TITLE
    url: str = DATASET_URL
    abstract: str = DATASET_ABSTRACT
    authors: tuple[Person, ...] = (
        Person(first_name=AUTHOR_FIRST_NAME, last_name=AUTHOR_LAST_NAME),
    )
    metadata_providers: tuple[Person, ...] = (
        Person(
            first_name=PROVIDER_FIRST_NAME,
            last_name=PROVIDER_LAST_NAME,
            email=PROVIDER_EMAIL,
        ),
    )


@dataclass(frozen=True)
class PackageMetadata:
    """Descriptive metadata handed to the archive writer.

    Attributes:
        package_id: Package UUID string.
        title: Dataset display title.
        url: Source dataset URL.
        abstract: Free-text dataset description.
        authors: Dataset creators.
        metadata_providers: People responsible for the metadata.
    """

    package_id: str
    title: str
    url: str
    abstract: str
    authors: tuple[Person, ...] = field(default_factory=tuple)
    metadata_providers: tuple[Person, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class BuildOptions:
    """Archive build command options.

    Attributes:
        source_path: Optional local source file; config default if omitted.
        output_path: Optional archive path; config default if omitted.
        download: Fetch the source before building.
        force_download: Re-fetch even if the source already exists.
        metadata_file: Optional YAML file overriding metadata params.
    """

    source_path: str | None = None
    output_path: str | None = None
    download: bool = False
    force_download: bool = False
    metadata_file: str | None = None


@dataclass(frozen=True)
class BuildResult:
    """Archive build outputs.

    Attributes:
        archive_path: Written archive location.
        record_count: Number of core data rows.
        summary: Ingest counters for the run.
    """

    archive_path: Path
    record_count: int
    summary: IngestSummary
