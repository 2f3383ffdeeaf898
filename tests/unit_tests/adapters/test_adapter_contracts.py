"""Unit tests for codec adapter contract behavior."""

from __future__ import annotations

import pytest

from img_converter.adapters.codec import PillowImageCodec, _prepare_mode, fit_inside
from img_converter.application.ports import ImageCodec
from img_converter.dimensions import Dimensions


def test_pillow_codec_satisfies_port() -> None:
    """Ensure the Pillow adapter exposes every port method."""
    codec: ImageCodec = PillowImageCodec()
    assert callable(codec.read_dimensions)
    assert callable(codec.resize_and_encode)


@pytest.mark.parametrize(
    ("source", "box", "enlarge", "expected"),
    [
        (Dimensions(800, 600), (400, 400), False, Dimensions(400, 300)),
        (Dimensions(100, 50), (200, 50), False, Dimensions(100, 50)),
        (Dimensions(100, 100), (200, 200), False, Dimensions(100, 100)),
        (Dimensions(100, 100), (200, 200), True, Dimensions(200, 200)),
        (Dimensions(10_000, 1), (1, 1), False, Dimensions(1, 1)),
    ],
)
def test_fit_inside(
    source: Dimensions, box: tuple[int, int], enlarge: bool, expected: Dimensions
) -> None:
    """Fit inside the box, never enlarging unless allowed."""
    assert fit_inside(source, *box, enlargement_allowed=enlarge) == expected


def test_prepare_mode_flattens_for_jpeg() -> None:
    from PIL import Image

    assert _prepare_mode(Image.new("RGBA", (2, 2)), "JPEG").mode == "RGB"
    assert _prepare_mode(Image.new("LA", (2, 2)), "JPEG").mode == "L"
    assert _prepare_mode(Image.new("RGBA", (2, 2)), "PNG").mode == "RGBA"


@pytest.mark.parametrize(
    ("mode", "save_format", "expected"),
    [
        ("CMYK", "PNG", "RGB"),
        ("YCbCr", "PNG", "RGB"),
        ("F", "PNG", "L"),
        ("I;16", "PNG", "I;16"),
        ("CMYK", "WEBP", "RGB"),
        ("LA", "WEBP", "RGBA"),
        ("CMYK", "JPEG", "CMYK"),
    ],
)
def test_prepare_mode_matches_encoder(mode: str, save_format: str, expected: str) -> None:
    """Convert only modes the target encoder cannot store."""
    from PIL import Image

    assert _prepare_mode(Image.new(mode, (2, 2)), save_format).mode == expected


def test_prepare_mode_keeps_palette_transparency_as_alpha() -> None:
    from PIL import Image

    image = Image.new("P", (2, 2))
    image.info["transparency"] = 0

    assert _prepare_mode(image, "WEBP").mode == "RGBA"
    assert _prepare_mode(image, "JPEG").mode == "RGB"
