"""Supported image formats and format-name normalization."""

from __future__ import annotations

from typing import cast

from img_converter.errors import UnsupportedFormatError
from img_converter.types import FormatName

DEFAULT_QUALITY = 80

INPUT_FORMATS: frozenset[str] = frozenset(
    {"jpeg", "png", "webp", "gif", "tiff", "bmp", "avif", "heic", "heif"}
)
OUTPUT_FORMATS: frozenset[str] = frozenset(
    {"jpeg", "png", "webp", "gif", "tiff", "bmp", "avif"}
)
QUALITY_FORMATS: frozenset[str] = frozenset({"jpeg", "webp", "avif"})

IMAGE_EXTENSIONS: frozenset[str] = frozenset(
    {"jpg", "jpeg", "png", "webp", "gif", "tiff", "tif", "bmp", "avif", "heic", "heif"}
)

_ALIASES: dict[str, str] = {"jpg": "jpeg", "tif": "tiff"}

_PILLOW_FORMATS: dict[str, str] = {
    "jpeg": "JPEG",
    "png": "PNG",
    "webp": "WEBP",
    "gif": "GIF",
    "tiff": "TIFF",
    "bmp": "BMP",
    "avif": "AVIF",
}


def _canonical(value: str) -> str:
    lowered = value.strip().lower()
    return _ALIASES.get(lowered, lowered)


def normalize_format(value: str) -> FormatName:
    """Normalize a user-supplied output format name.

    Parameters
    ----------
    value : str
        Format name such as ``"JPG"``, ``"jpeg"`` or ``"WebP"``.

    Returns
    -------
    FormatName
        Lower-case canonical name; ``jpg`` always becomes ``jpeg`` and
        ``tif`` becomes ``tiff``.

    Raises
    ------
    UnsupportedFormatError
        If the format cannot be written.
    """
    normalized = _canonical(value)
    if normalized not in OUTPUT_FORMATS:
        raise UnsupportedFormatError(f"Unsupported format: {value}")
    return cast(FormatName, normalized)


def is_readable_format(value: str) -> bool:
    """Return whether ``value`` names a format accepted as input."""
    return _canonical(value) in INPUT_FORMATS


def is_writable_format(value: str) -> bool:
    """Return whether ``value`` names a format accepted as output."""
    return _canonical(value) in OUTPUT_FORMATS


def is_quality_capable(fmt: str) -> bool:
    """Return whether the format accepts a lossy quality setting."""
    return _canonical(fmt) in QUALITY_FORMATS


def is_image_extension(extension: str) -> bool:
    """Check a file extension (with or without leading dot) for discovery."""
    return extension.lower().lstrip(".") in IMAGE_EXTENSIONS


def canonical_extension(fmt: str) -> str:
    """Return the file extension used for converted output files."""
    return normalize_format(fmt)


def pillow_format(fmt: str) -> str:
    """Map a format name to the identifier Pillow expects in ``save``."""
    return _PILLOW_FORMATS[normalize_format(fmt)]
