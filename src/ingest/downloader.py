"""Source file download helpers.

This module fetches the Index Animalium dump into the local data root.
Failures surface as setup errors; there is no retry.
"""

from __future__ import annotations

from pathlib import Path

import requests

from core.constants import DOWNLOAD_CHUNK_SIZE
from core.errors import SetupError
from core.logging_config import EventLogger, get_logger

_LOGGER = get_logger(__name__)


def download_source(
    url: str,
    destination: Path,
    timeout: int,
    logger: EventLogger | None = None,
) -> Path:
    """Download a remote file to a local path.

    Args:
        url: Remote source URL.
        destination: Local file path to write.
        timeout: Request timeout in seconds.
        logger: Optional injected logger.

    Returns:
        The destination path.

    Raises:
        SetupError: If the request fails or the file cannot be written.
    """
    log = logger if logger is not None else _LOGGER
    log.info("download_started", url=url, destination=str(destination))
    partial_path = destination.with_name(destination.name + ".part")
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        with requests.get(url, stream=True, timeout=timeout, allow_redirects=True) as response:
            response.raise_for_status()
            with partial_path.open("wb") as output_file:
                for chunk in response.iter_content(chunk_size=DOWNLOAD_CHUNK_SIZE):
                    output_file.write(chunk)
        partial_path.replace(destination)
    except requests.RequestException as error:
        _discard_partial(partial_path)
        raise SetupError(
            f"Failed to download source from {url}: {error}. "
            "Check network access or pass a local --source file."
        ) from error
    except OSError as error:
        _discard_partial(partial_path)
        raise SetupError(f"Failed to write download to {destination}: {error}.") from error
    log.info("download_completed", destination=str(destination))
    return destination


def ensure_source(
    url: str,
    destination: Path,
    timeout: int,
    force: bool = False,
    logger: EventLogger | None = None,
) -> Path:
    """Return a local source path, downloading only when needed.

    Args:
        url: Remote source URL.
        destination: Expected local file path.
        timeout: Request timeout in seconds.
        force: Download even if the file already exists.
        logger: Optional injected logger.

    Returns:
        Path to a local source file.
    """
    if destination.is_file() and not force:
        log = logger if logger is not None else _LOGGER
        log.info("download_skipped", destination=str(destination))
        return destination
    return download_source(url, destination, timeout, logger)


def _discard_partial(partial_path: Path) -> None:
    if partial_path.exists():
        partial_path.unlink()
