"""Unit tests for format normalization and capability lookups."""

from __future__ import annotations

import pytest

from img_converter.errors import UnsupportedFormatError
from img_converter.formats import (
    DEFAULT_QUALITY,
    canonical_extension,
    is_image_extension,
    is_quality_capable,
    is_readable_format,
    is_writable_format,
    normalize_format,
    pillow_format,
)


def test_jpg_spellings_normalize_to_jpeg() -> None:
    """Treat jpg and jpeg as one format regardless of case."""
    assert normalize_format("JPG") == normalize_format("jpg") == normalize_format("jpeg")
    assert normalize_format("jpg") == "jpeg"


@pytest.mark.parametrize(("raw", "expected"), [("PNG", "png"), ("WebP", "webp"), (" avif ", "avif")])
def test_other_formats_are_lower_cased(raw: str, expected: str) -> None:
    """Lower-case and strip non-jpeg format names."""
    assert normalize_format(raw) == expected


@pytest.mark.parametrize("raw", ["svg", "pdf", "heic", "heif", ""])
def test_unwritable_formats_are_rejected(raw: str) -> None:
    """Raise UnsupportedFormatError for unknown or read-only formats."""
    with pytest.raises(UnsupportedFormatError, match="Unsupported format"):
        normalize_format(raw)


@pytest.mark.parametrize("fmt", ["jpeg", "jpg", "webp", "avif"])
def test_quality_capable_formats(fmt: str) -> None:
    """Report quality support for lossy encoders."""
    assert is_quality_capable(fmt)


@pytest.mark.parametrize("fmt", ["png", "gif", "tiff", "bmp"])
def test_formats_without_quality(fmt: str) -> None:
    """Report no quality support for the remaining writable formats."""
    assert not is_quality_capable(fmt)


def test_readable_and_writable_sets_differ_on_heif() -> None:
    """Accept HEIC/HEIF as input only."""
    assert is_readable_format("heic")
    assert is_readable_format("HEIF")
    assert not is_writable_format("heic")
    assert is_writable_format("jpg")
    assert not is_readable_format("svg")


@pytest.mark.parametrize("ext", ["jpg", "JPG", ".jpeg", "tif", "tiff", "heic", "avif"])
def test_image_extensions_are_case_insensitive(ext: str) -> None:
    """Recognize image extensions with or without a leading dot."""
    assert is_image_extension(ext)


@pytest.mark.parametrize("ext", ["txt", "pdf", "doc", ""])
def test_non_image_extensions(ext: str) -> None:
    """Ignore files that are not images."""
    assert not is_image_extension(ext)


def test_canonical_extension_and_pillow_format() -> None:
    """Name outputs after the normalized format and map to Pillow ids."""
    assert canonical_extension("JPG") == "jpeg"
    assert canonical_extension("png") == "png"
    assert pillow_format("jpg") == "JPEG"
    assert pillow_format("tiff") == "TIFF"


def test_default_quality() -> None:
    """Keep the default quality at 80."""
    assert DEFAULT_QUALITY == 80
