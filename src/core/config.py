"""Runtime configuration model for Sherborn.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import (
    ARCHIVE_FILE_NAME,
    DATASET_URL,
    DEFAULT_DATA_ROOT,
    DEFAULT_DOWNLOAD_TIMEOUT_SECONDS,
    SOURCE_FILE_NAME,
)
from core.errors import ConfigError


@dataclass(frozen=True)
class SherbornConfig:
    """Validated runtime configuration.

    Attributes:
        data_root: Local directory holding the download and the archive.
        source_url: Remote location of the Index Animalium dump.
        download_timeout: Per-request download timeout in seconds.
    """

    data_root: Path
    source_url: str
    download_timeout: int

    @property
    def source_path(self) -> Path:
        """Local path of the downloaded tab-separated source."""
        return self.data_root / SOURCE_FILE_NAME

    @property
    def archive_path(self) -> Path:
        """Default output path for the generated archive."""
        return self.data_root / ARCHIVE_FILE_NAME

    @classmethod
    def from_env(cls) -> "SherbornConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            ConfigError: If environment values are invalid.
        """
        data_root_value = os.getenv("SHERBORN_DATA_ROOT", str(DEFAULT_DATA_ROOT))
        source_url = os.getenv("SHERBORN_SOURCE_URL", DATASET_URL)
        timeout_value = os.getenv(
            "SHERBORN_DOWNLOAD_TIMEOUT", str(DEFAULT_DOWNLOAD_TIMEOUT_SECONDS)
        )
        return cls(
            data_root=Path(data_root_value).expanduser().resolve(),
            source_url=source_url,
            download_timeout=_parse_download_timeout(timeout_value),
        )


def _parse_download_timeout(raw_value: str) -> int:
    """Parse the download timeout environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed positive timeout in seconds.

    Raises:
        ConfigError: If value is not a positive integer.
    """
    try:
        timeout = int(raw_value)
    except ValueError as error:
        raise ConfigError(
            "Invalid SHERBORN_DOWNLOAD_TIMEOUT value: "
            f"expected integer, got '{raw_value}'. "
            "Set SHERBORN_DOWNLOAD_TIMEOUT to a number of seconds."
        ) from error
    if timeout < 1:
        raise ConfigError(
            f"Invalid SHERBORN_DOWNLOAD_TIMEOUT value {timeout}: expected value >= 1."
        )
    return timeout
