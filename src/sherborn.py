"""Public SDK surface for Sherborn.

This module provides a stable import path for library users.
It re-exports the pipeline components and typed models.
"""

from __future__ import annotations

from archive.dwca_writer import ArchiveWriter, DwcaArchiveWriter
from assemble.package_assembler import PackageAssembler, assemble
from core.config import SherbornConfig
from core.errors import (
    ArchiveError,
    AssemblyError,
    ConfigError,
    MalformedRowError,
    SetupError,
    SherbornError,
)
from core.metadata_config import load_metadata_params
from core.types import (
    BuildOptions,
    BuildResult,
    CoreTable,
    MetadataParams,
    NameRecord,
    PackageMetadata,
    Person,
)
from ingest.downloader import download_source
from ingest.name_reader import RecordIngestor, collect_names
from ingest.pipeline import build_archive

__all__ = [
    "ArchiveError",
    "ArchiveWriter",
    "AssemblyError",
    "BuildOptions",
    "BuildResult",
    "ConfigError",
    "CoreTable",
    "DwcaArchiveWriter",
    "MalformedRowError",
    "MetadataParams",
    "NameRecord",
    "PackageAssembler",
    "PackageMetadata",
    "Person",
    "RecordIngestor",
    "SetupError",
    "SherbornConfig",
    "SherbornError",
    "assemble",
    "build_archive",
    "collect_names",
    "download_source",
    "load_metadata_params",
]
