"""Shared test doubles for unit tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from img_converter.dimensions import Dimensions
from img_converter.errors import CodecError, UnreadableImageError


class FakeCodec:
    """In-memory codec recording every call.

    Dimensions are looked up by file name; unknown names fall back to
    ``default``. Names listed in ``unreadable`` fail to decode and names in
    ``broken`` fail to encode.
    """

    def __init__(
        self,
        sizes: dict[str, Dimensions] | None = None,
        default: Dimensions = Dimensions(100, 50),
        unreadable: set[str] | None = None,
        broken: set[str] | None = None,
        payload: bytes = b"converted",
    ) -> None:
        self.sizes = sizes or {}
        self.default = default
        self.unreadable = unreadable or set()
        self.broken = broken or set()
        self.payload = payload
        self.read_calls: list[Path] = []
        self.encode_calls: list[dict[str, object]] = []

    def read_dimensions(self, path: Path) -> Dimensions:
        self.read_calls.append(path)
        if path.name in self.unreadable:
            raise UnreadableImageError(f"Unable to read image dimensions: {path}")
        return self.sizes.get(path.name, self.default)

    def resize_and_encode(
        self,
        source_path: Path,
        target_path: Path,
        width: int | None,
        height: int | None,
        fmt: str,
        quality: int | None = None,
        enlargement_allowed: bool = False,
    ) -> None:
        self.encode_calls.append(
            {
                "source_path": source_path,
                "target_path": target_path,
                "width": width,
                "height": height,
                "fmt": fmt,
                "quality": quality,
                "enlargement_allowed": enlargement_allowed,
            }
        )
        if source_path.name in self.broken:
            raise CodecError(f"Failed to write {target_path}: encoder exploded")
        target_path.write_bytes(self.payload)


@pytest.fixture
def fake_codec() -> FakeCodec:
    """Fresh fake codec per test."""
    return FakeCodec()


@pytest.fixture
def make_codec() -> type[FakeCodec]:
    """Expose the fake codec class for tests that need custom sizes."""
    return FakeCodec
