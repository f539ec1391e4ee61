"""Sherborn exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each pipeline stage raises a specific error type for debuggability.
"""

from __future__ import annotations


class SherbornError(Exception):
    """Base exception for all Sherborn failures."""

    stage = "sherborn"


class ConfigError(SherbornError):
    """Raised for invalid runtime configuration."""

    stage = "config"


class SetupError(SherbornError, OSError):
    """Raised when the source file cannot be fetched, found, or opened."""

    stage = "setup"


class IngestError(SherbornError):
    """Raised for source row parsing failures."""

    stage = "ingest"


class MalformedRowError(IngestError):
    """Raised when a source row lacks the required fields."""


class AssemblyError(SherbornError):
    """Raised when package metadata parameters are incomplete."""

    stage = "assemble"


class ArchiveError(SherbornError):
    """Raised for archive serialization failures."""

    stage = "archive"


class DependencyError(SherbornError):
    """Raised when an optional runtime dependency is missing."""

    stage = "dependency"
