"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from img_converter.dimensions import Dimensions
from img_converter.types import FormatName


class ImageCodec(Protocol):
    """Decode, resize and encode images on behalf of the use-cases."""

    def read_dimensions(self, path: Path) -> Dimensions:
        """Return pixel dimensions from the image header."""

    def resize_and_encode(
        self,
        source_path: Path,
        target_path: Path,
        width: int | None,
        height: int | None,
        fmt: FormatName,
        quality: int | None = None,
        enlargement_allowed: bool = False,
    ) -> None:
        """Write ``source_path`` to ``target_path`` in ``fmt``.

        ``width``/``height`` are ``None`` when no resize is requested.
        """
