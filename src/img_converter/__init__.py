"""Top-level API for batch image conversion."""

from __future__ import annotations

from pathlib import Path

from img_converter.application.results import ProcessingSummary
from img_converter.dimensions import ConstraintSet, Dimensions, resolve_dimensions
from img_converter.formats import is_quality_capable, normalize_format

__version__ = "0.1.0"


def convert_images(
    input_path: Path,
    output_path: Path,
    format: str,
    *,
    width: int | None = None,
    height: int | None = None,
    min_width: int | None = None,
    min_height: int | None = None,
    max_width: int | None = None,
    max_height: int | None = None,
    quality: int | None = None,
    allow_upscale: bool = False,
    recursive: bool = False,
    overwrite: bool = False,
) -> ProcessingSummary:
    """Convert an image file or a directory of images.

    Parameters
    ----------
    input_path : Path
        Source file or directory.
    output_path : Path
        Destination file or directory. Directory inputs are mirrored below it.
    format : str
        Output format (``jpg``/``jpeg``, ``png``, ``webp``, ``gif``, ``tiff``,
        ``bmp``, ``avif``).
    width, height : int, optional
        Target size. With both set the image fits inside the box.
    min_width, min_height, max_width, max_height : int, optional
        Size bounds applied after the target size.
    quality : int, optional
        Encoder quality (1-100) for jpeg, webp and avif.
    allow_upscale : bool, default=False
        Allow minimum bounds to enlarge the image.
    recursive : bool, default=False
        Descend into subdirectories of a directory input.
    overwrite : bool, default=False
        Replace existing output files.

    Returns
    -------
    ProcessingSummary
        Per-file results and success/failure counts.
    """
    from img_converter.application.options import BatchOptions
    from img_converter.application.use_cases import (
        build_processing_options,
    )
    from img_converter.application.use_cases import convert_images as _impl

    options = build_processing_options(
        format=format,
        width=width,
        height=height,
        min_width=min_width,
        min_height=min_height,
        max_width=max_width,
        max_height=max_height,
        quality=quality,
        allow_upscale=allow_upscale,
    )
    return _impl(
        input_path=Path(input_path),
        output_path=Path(output_path),
        options=options,
        batch=BatchOptions(recursive=recursive, overwrite=overwrite),
    )


__all__ = [
    "ConstraintSet",
    "Dimensions",
    "ProcessingSummary",
    "convert_images",
    "is_quality_capable",
    "normalize_format",
    "resolve_dimensions",
]
