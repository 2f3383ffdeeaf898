"""Pydantic schemas for runtime validation of conversion inputs."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator
from pydantic.alias_generators import to_camel

from img_converter.formats import normalize_format
from img_converter.types import FormatName


class ProcessingConfig(BaseModel):
    """Validated per-image processing parameters."""

    model_config = ConfigDict(extra="forbid")

    format: FormatName
    width: PositiveInt | None = None
    height: PositiveInt | None = None
    min_width: PositiveInt | None = None
    min_height: PositiveInt | None = None
    max_width: PositiveInt | None = None
    max_height: PositiveInt | None = None
    quality: int | None = Field(default=None, ge=1, le=100)
    allow_upscale: bool = False

    @field_validator("format", mode="before")
    @classmethod
    def _normalize_format(cls, value: object) -> str:
        if not isinstance(value, str):
            raise ValueError("format must be a string.")
        return normalize_format(value)


class ConfigFileModel(BaseModel):
    """Options accepted from a JSON/YAML configuration file.

    Keys may be given in camelCase (``minWidth``) or snake_case
    (``min_width``).
    """

    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    input: Path | None = None
    output: Path | None = None
    format: str | None = None
    width: PositiveInt | None = None
    height: PositiveInt | None = None
    min_width: PositiveInt | None = None
    min_height: PositiveInt | None = None
    max_width: PositiveInt | None = None
    max_height: PositiveInt | None = None
    quality: int | None = Field(default=None, ge=1, le=100)
    allow_upscale: bool | None = None
    recursive: bool | None = None
    overwrite: bool | None = None
    dry_run: bool | None = None
    verbose: bool | None = None
    silent: bool | None = None
