"""YAML overrides for package metadata parameters.

This module loads an optional YAML file describing the dataset title,
identifier, abstract, and people. Missing keys keep built-in defaults.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Mapping, Sequence, cast

from core.errors import ConfigError, DependencyError
from core.types import MetadataParams, Person

_SCALAR_KEYS = ("package_id", "title", "url", "abstract")
_PEOPLE_KEYS = ("authors", "metadata_providers")
_PERSON_KEYS = ("first_name", "last_name", "email")


def load_metadata_params(metadata_path: str | None) -> MetadataParams:
    """Load metadata params, applying YAML overrides when a path is given.

    Args:
        metadata_path: Optional YAML file path.

    Returns:
        Metadata params with overrides applied.

    Raises:
        DependencyError: If PyYAML is unavailable.
        ConfigError: If the file is missing, unparsable, or off-schema.
    """
    defaults = MetadataParams()
    if metadata_path is None:
        return defaults
    payload = _load_yaml_payload(metadata_path)
    root_mapping = _expect_mapping(payload, "metadata file root")
    _validate_root_keys(root_mapping)
    overrides: dict[str, object] = {}
    for key in _SCALAR_KEYS:
        if key in root_mapping:
            overrides[key] = _expect_string(root_mapping[key], key)
    for key in _PEOPLE_KEYS:
        if key in root_mapping:
            overrides[key] = _parse_people(root_mapping[key], key)
    return replace(defaults, **overrides)


def _load_yaml_payload(metadata_path: str) -> object:
    try:
        import yaml  # type: ignore[import-untyped]
    except ImportError as error:  # pragma: no cover - dependency failure
        raise DependencyError(
            "YAML metadata support requires PyYAML. Install with 'pip install pyyaml'."
        ) from error
    metadata_file = Path(metadata_path).expanduser().resolve()
    if not metadata_file.exists():
        raise ConfigError(
            f"Metadata file does not exist at {metadata_file}. Provide a valid YAML file path."
        )
    try:
        payload = cast(object, yaml.safe_load(metadata_file.read_text(encoding="utf-8")))
    except OSError as error:
        raise ConfigError(
            f"Failed to read metadata file at {metadata_file}: {error}."
        ) from error
    except yaml.YAMLError as error:
        raise ConfigError(
            f"Failed to parse YAML metadata at {metadata_file}: {error}. Fix YAML syntax and retry."
        ) from error
    if payload is None:
        return {}
    return payload


def _expect_mapping(value: object, context: str) -> Mapping[str, object]:
    if isinstance(value, Mapping):
        normalized_mapping = {}
        for key, payload in value.items():
            if not isinstance(key, str):
                raise ConfigError(
                    f"Invalid {context}: expected string keys, got {type(key).__name__}."
                )
            normalized_mapping[key] = payload
        return normalized_mapping
    raise ConfigError(f"Invalid {context}: expected mapping, got {type(value).__name__}.")


def _expect_string(value: object, context: str) -> str:
    if isinstance(value, str):
        return value
    raise ConfigError(f"Invalid '{context}': expected string, got {type(value).__name__}.")


def _parse_people(value: object, context: str) -> tuple[Person, ...]:
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
        raise ConfigError(f"Invalid '{context}': expected list, got {type(value).__name__}.")
    people: list[Person] = []
    for index, entry in enumerate(value):
        entry_context = f"{context}[{index}]"
        person_mapping = _expect_mapping(entry, entry_context)
        unknown_keys = sorted(set(person_mapping) - set(_PERSON_KEYS))
        if unknown_keys:
            raise ConfigError(
                f"Invalid {entry_context}: unsupported keys {unknown_keys}. "
                f"Allowed keys: {list(_PERSON_KEYS)}."
            )
        fields = {
            key: _expect_string(person_mapping[key], f"{entry_context}.{key}")
            for key in _PERSON_KEYS
            if person_mapping.get(key) is not None
        }
        people.append(Person(**fields))
    return tuple(people)


def _validate_root_keys(root_mapping: Mapping[str, object]) -> None:
    allowed_keys = set(_SCALAR_KEYS) | set(_PEOPLE_KEYS)
    unknown_keys = sorted(set(root_mapping) - allowed_keys)
    if unknown_keys:
        raise ConfigError(
            f"Unsupported metadata keys {unknown_keys}. Allowed keys: {sorted(allowed_keys)}."
        )
