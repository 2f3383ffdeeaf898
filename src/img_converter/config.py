"""Configuration-file loading and CLI/config merging."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

import yaml
from pydantic import ValidationError

from img_converter.errors import ConfigError
from img_converter.formats import DEFAULT_QUALITY
from img_converter.schemas import ConfigFileModel
from img_converter.types import ConfigScalar

_YAML_SUFFIXES = {".yaml", ".yml"}


@dataclass(frozen=True)
class Settings:
    """Fully merged run settings (CLI over config file over defaults)."""

    input: Path | None
    output: Path | None
    format: str | None
    width: int | None = None
    height: int | None = None
    min_width: int | None = None
    min_height: int | None = None
    max_width: int | None = None
    max_height: int | None = None
    quality: int = DEFAULT_QUALITY
    allow_upscale: bool = False
    recursive: bool = False
    overwrite: bool = False
    dry_run: bool = False
    verbose: bool = False
    silent: bool = False


def load_config_file(path: Path) -> ConfigFileModel:
    """Read and validate a JSON or YAML configuration file.

    Parameters
    ----------
    path : Path
        Configuration file. ``.yaml``/``.yml`` files are parsed as YAML,
        anything else as JSON.

    Returns
    -------
    ConfigFileModel
        Validated configuration values.

    Raises
    ------
    ConfigError
        If the file cannot be read, parsed or validated.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to load config file: {path}. {exc}") from exc

    try:
        if path.suffix.lower() in _YAML_SUFFIXES:
            raw = yaml.safe_load(text)
        else:
            raw = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigError(f"Failed to load config file: {path}. {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(
            f"Failed to load config file: {path}. Top-level value must be a mapping."
        )

    try:
        return ConfigFileModel.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config file {path}: {exc}") from exc


def merge_settings(
    cli_values: Mapping[str, ConfigScalar | Path],
    file_config: ConfigFileModel | None = None,
) -> Settings:
    """Merge CLI values over config-file values over defaults.

    ``None`` in ``cli_values`` means "not given on the command line".
    """
    file_values = (
        file_config.model_dump(exclude_none=True) if file_config is not None else {}
    )
    merged: dict[str, object] = {}
    for key in Settings.__dataclass_fields__:
        value = cli_values.get(key)
        if value is None:
            value = file_values.get(key)
        if value is not None:
            merged[key] = value
    merged.setdefault("input", None)
    merged.setdefault("output", None)
    merged.setdefault("format", None)
    if merged["input"] is not None:
        merged["input"] = Path(str(merged["input"]))
    if merged["output"] is not None:
        merged["output"] = Path(str(merged["output"]))
    return Settings(**merged)  # type: ignore[arg-type]
