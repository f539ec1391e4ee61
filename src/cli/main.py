"""Sherborn CLI entry points.
This module exposes commands for downloading the source and building archives.
It maps argparse commands onto pipeline calls.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, Sequence

from core.config import SherbornConfig
from core.errors import SherbornError
from core.logging_config import configure_logging
from core.types import BuildOptions
from ingest.downloader import ensure_source
from ingest.pipeline import build_archive


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="sherborn",
        description="Convert Index Animalium into a Darwin Core Archive",
    )
    parser.add_argument("--data-root", help="Override SHERBORN_DATA_ROOT for this command")
    parser.add_argument("--quiet", action="store_true", help="Only log warnings and errors")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_download_command(subparsers)
    _add_build_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Sherborn CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(logging.WARNING if args.quiet else logging.INFO)
    try:
        config = _build_config(args.data_root)
        if args.command == "download":
            return _run_download_command(config, args)
        if args.command == "build":
            return _run_build_command(config, args)
    except SherbornError as error:
        print(f"error: {error.stage}: {error}", file=sys.stderr)
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(data_root: str | None) -> SherbornConfig:
    """Build config with optional data-root override.

    Args:
        data_root: Optional override path.

    Returns:
        Runtime configuration.
    """
    config = SherbornConfig.from_env()
    if data_root:
        config = replace(config, data_root=Path(data_root).expanduser().resolve())
    return config


def _run_download_command(config: SherbornConfig, args: argparse.Namespace) -> int:
    """Handle download command.

    Args:
        config: Runtime configuration.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    source_path = ensure_source(
        args.url or config.source_url,
        config.source_path,
        config.download_timeout,
        force=args.force,
    )
    print(source_path)
    return 0


def _run_build_command(config: SherbornConfig, args: argparse.Namespace) -> int:
    """Handle build command.

    Args:
        config: Runtime configuration.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    options = BuildOptions(
        source_path=args.source,
        output_path=args.output,
        download=args.download,
        force_download=args.force_download,
        metadata_file=args.metadata_file,
    )
    result = build_archive(options, config)
    print(result.archive_path)
    return 0


def _add_download_command(subparsers: Any) -> None:
    """Register download subcommand."""
    parser = subparsers.add_parser("download", help="Fetch the Index Animalium source file")
    parser.add_argument("--url", help="Override the source URL")
    parser.add_argument("--force", action="store_true", help="Re-download an existing file")


def _add_build_command(subparsers: Any) -> None:
    """Register build subcommand."""
    parser = subparsers.add_parser("build", help="Build a Darwin Core Archive")
    parser.add_argument("--source", help="Local tab-separated source file")
    parser.add_argument("--output", help="Archive output path")
    parser.add_argument(
        "--download",
        action="store_true",
        help="Download the source first when it is not present",
    )
    parser.add_argument(
        "--force-download",
        action="store_true",
        help="With --download, fetch the source even if it exists",
    )
    parser.add_argument("--metadata-file", help="YAML file overriding package metadata")
