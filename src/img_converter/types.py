"""Shared type aliases for converter modules."""

from __future__ import annotations

from typing import Literal

type FormatName = Literal[
    "jpeg",
    "png",
    "webp",
    "gif",
    "tiff",
    "bmp",
    "avif",
    "heic",
    "heif",
]

type ConfigScalar = str | int | float | bool | None
