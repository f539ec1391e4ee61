"""Unit tests for YAML metadata overrides."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.constants import DATASET_UUID
from core.errors import ConfigError
from core.metadata_config import load_metadata_params
from core.types import MetadataParams, Person
from tests.fixture_paths import fixture_path


def test_load_metadata_params_returns_defaults_without_file() -> None:
    """No file means built-in dataset metadata."""
    assert load_metadata_params(None) == MetadataParams()


def test_load_metadata_params_applies_overrides() -> None:
    """YAML keys should replace defaults and keep the rest."""
    params = load_metadata_params(str(fixture_path("metadata.yaml")))

    assert params.title == "Index Animalium (test build)"
    assert params.package_id == DATASET_UUID
    assert params.authors == (Person(first_name="Charles Davies", last_name="Sherborn"),)
    assert params.metadata_providers[0].email == "curator@example.org"


def test_load_metadata_params_rejects_unknown_keys(tmp_path: Path) -> None:
    """Unsupported root keys should fail loudly."""
    metadata_file = tmp_path / "metadata.yaml"
    metadata_file.write_text("titel: typo\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="titel"):
        load_metadata_params(str(metadata_file))


def test_load_metadata_params_rejects_non_list_people(tmp_path: Path) -> None:
    """People entries must be a list of mappings."""
    metadata_file = tmp_path / "metadata.yaml"
    metadata_file.write_text("authors: Sherborn\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_metadata_params(str(metadata_file))


def test_load_metadata_params_raises_for_missing_file(tmp_path: Path) -> None:
    """Missing metadata file is a config error."""
    with pytest.raises(ConfigError):
        load_metadata_params(str(tmp_path / "missing.yaml"))


def test_load_metadata_params_raises_for_invalid_yaml(tmp_path: Path) -> None:
    """Broken YAML syntax is a config error."""
    metadata_file = tmp_path / "metadata.yaml"
    metadata_file.write_text("title: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_metadata_params(str(metadata_file))
