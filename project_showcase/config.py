"""
config.py

Responsibility: Load the list of repositories to showcase into typed records.

`.json` files are read with the json module; anything else (`.yml`, `.yaml`)
is read with PyYAML. Two shapes are understood:

- a mapping with a `projects` list: `{"projects": [{"owner": ..., "repo": ...}]}`
- a bare list of `{owner, repo}` mappings

Any problem with the file is fatal: there is no partial-configuration recovery.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class ProjectConfig:
    """One configured repository."""

    owner: str
    repo: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


def _required_str(index: int, raw: dict[str, Any], key: str) -> str:
    value = raw.get(key)
    if not isinstance(value, str):
        raise ConfigError(
            f"Project #{index + 1}: `{key}` must be a string, got {type(value).__name__} ({value!r})."
        )
    value = value.strip()
    if not value:
        raise ConfigError(f"Project #{index + 1} must define non-empty `owner` and `repo`.")
    return value


def _parse_entry(index: int, raw: Any) -> ProjectConfig:
    if not isinstance(raw, dict):
        raise ConfigError(f"Project #{index + 1} must be a mapping with `owner` and `repo` keys.")

    return ProjectConfig(
        owner=_required_str(index, raw, "owner"),
        repo=_required_str(index, raw, "repo"),
    )


def _parse_text(path: Path, text: str) -> Any:
    # YAML rejects tab indentation, which is valid JSON, so .json files go through json.
    if path.suffix.lower() == ".json":
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Projects file is not valid JSON: {path}\n\n{e}") from e
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Projects file is not valid YAML: {path}\n\n{e}") from e


def load_projects(config_path: str | Path) -> list[ProjectConfig]:
    """
    Parse the projects file into an ordered list of `ProjectConfig`.
    """
    path = Path(config_path)
    if not path.exists():
        raise ConfigError(f"Projects file does not exist: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Could not read projects file {path}: {e}") from e

    data = _parse_text(path, text)

    if isinstance(data, dict):
        entries = data.get("projects")
    else:
        entries = data

    if not isinstance(entries, list):
        raise ConfigError("Projects file must contain a `projects` list (or be a list itself).")

    return [_parse_entry(i, raw) for i, raw in enumerate(entries)]
