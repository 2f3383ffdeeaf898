"""Pillow-backed image codec."""

from __future__ import annotations

import logging
from pathlib import Path

import pillow_heif
from PIL import Image, UnidentifiedImageError, features

from img_converter.dimensions import Dimensions, round_half_up
from img_converter.errors import CodecError, UnreadableImageError
from img_converter.formats import is_quality_capable, pillow_format
from img_converter.types import FormatName

logger = logging.getLogger(__name__)

pillow_heif.register_heif_opener()

# Modes each encoder accepts without an explicit conversion.
_ENCODER_MODES: dict[str, frozenset[str]] = {
    "JPEG": frozenset({"1", "L", "RGB", "CMYK"}),
    "BMP": frozenset({"1", "L", "P", "RGB", "RGBA"}),
    "PNG": frozenset({"1", "L", "LA", "I", "I;16", "P", "RGB", "RGBA"}),
    "WEBP": frozenset({"RGB", "RGBA"}),
    "AVIF": frozenset({"RGB", "RGBA"}),
}

_GRAYSCALE_MODES = frozenset({"LA", "La", "I", "I;16", "F"})


def fit_inside(
    source: Dimensions,
    width: int,
    height: int,
    enlargement_allowed: bool,
) -> Dimensions:
    """Largest size that fits ``width`` x ``height`` keeping aspect ratio.

    Without enlargement the result never exceeds ``source`` either.
    """
    ratio = min(width / source.width, height / source.height)
    if not enlargement_allowed:
        ratio = min(ratio, 1.0)
    return Dimensions(
        width=max(1, round_half_up(source.width * ratio)),
        height=max(1, round_half_up(source.height * ratio)),
    )


def _prepare_mode(image: Image.Image, save_format: str) -> Image.Image:
    accepted = _ENCODER_MODES.get(save_format)
    if accepted is None or image.mode in accepted:
        return image
    if image.mode in _GRAYSCALE_MODES and "L" in accepted:
        return image.convert("L")
    if image.has_transparency_data and "RGBA" in accepted:
        return image.convert("RGBA")
    return image.convert("RGB")


class PillowImageCodec:
    """Read and write images with Pillow (HEIC/HEIF via ``pillow_heif``)."""

    def __init__(self, resample: Image.Resampling = Image.Resampling.LANCZOS) -> None:
        self.resample = resample

    def read_dimensions(self, path: Path) -> Dimensions:
        """Return pixel dimensions without decoding the full image.

        Raises
        ------
        UnreadableImageError
            If Pillow cannot identify the file or it reports no size.
        """
        try:
            with Image.open(path) as image:
                width, height = image.size
        except UnidentifiedImageError as exc:
            raise UnreadableImageError(
                f"Unable to read image dimensions: {path}"
            ) from exc
        except OSError as exc:
            raise UnreadableImageError(f"Unable to open image {path}: {exc}") from exc
        if not width or not height:
            raise UnreadableImageError(f"Unable to read image dimensions: {path}")
        return Dimensions(width=width, height=height)

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
        """Resize (fit inside) and encode ``source_path`` into ``target_path``.

        Parameters
        ----------
        source_path : Path
            Image to read.
        target_path : Path
            Destination file; parent directories are created.
        width, height : int | None
            Bounding box for the resize. ``None`` keeps the source size.
        fmt : FormatName
            Output format.
        quality : int | None, default=None
            Encoder quality, forwarded only for quality-capable formats.
        enlargement_allowed : bool, default=False
            Whether the resize may exceed the source dimensions.

        Raises
        ------
        UnreadableImageError
            If the source cannot be decoded.
        CodecError
            If resizing, encoding or writing fails.
        """
        save_format = pillow_format(fmt)
        save_kwargs: dict[str, object] = {}
        if quality is not None and is_quality_capable(fmt):
            save_kwargs["quality"] = quality

        try:
            image_cm = Image.open(source_path)
        except UnidentifiedImageError as exc:
            raise UnreadableImageError(f"Unable to decode image: {source_path}") from exc
        except OSError as exc:
            raise UnreadableImageError(
                f"Unable to open image {source_path}: {exc}"
            ) from exc

        with image_cm as image:
            try:
                image.load()
                result: Image.Image = image
                if width is not None and height is not None:
                    source = Dimensions(width=image.width, height=image.height)
                    size = fit_inside(source, width, height, enlargement_allowed)
                    if size != source:
                        logger.debug(
                            "resizing %s from %s to %s", source_path, source, size
                        )
                        result = image.resize(
                            (size.width, size.height), resample=self.resample
                        )
                result = _prepare_mode(result, save_format)
                target_path.parent.mkdir(parents=True, exist_ok=True)
                result.save(target_path, format=save_format, **save_kwargs)
            except (OSError, ValueError, KeyError) as exc:
                raise CodecError(f"Failed to write {target_path}: {exc}") from exc


def encoder_available(fmt: FormatName) -> bool:
    """Return whether the installed Pillow build can write ``fmt``."""
    if fmt == "avif":
        return bool(features.check("avif"))
    Image.init()
    return pillow_format(fmt) in Image.SAVE
