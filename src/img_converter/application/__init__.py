"""Application-layer use-cases and option objects."""

from __future__ import annotations

from pathlib import Path

from img_converter.application.options import (
    BatchOptions,
    ConstraintSet,
    ProcessingOptions,
)
from img_converter.application.ports import ImageCodec
from img_converter.application.results import (
    ProcessFailure,
    ProcessingSummary,
    ProcessResult,
    ProcessSuccess,
    summarize,
)


def build_processing_options(
    *,
    format: str,
    width: int | None = None,
    height: int | None = None,
    min_width: int | None = None,
    min_height: int | None = None,
    max_width: int | None = None,
    max_height: int | None = None,
    quality: int | None = None,
    allow_upscale: bool = False,
) -> ProcessingOptions:
    """Build typed processing options via lazy use-case import."""
    from img_converter.application.use_cases import build_processing_options as _impl

    return _impl(
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


def convert_image(
    *,
    input_path: Path,
    output_path: Path,
    options: ProcessingOptions,
    codec: ImageCodec | None = None,
) -> ProcessResult:
    """Convert one image via lazy use-case import."""
    from img_converter.application.use_cases import convert_image as _impl

    return _impl(
        input_path=input_path,
        output_path=output_path,
        options=options,
        codec=codec,
    )


def convert_images(
    *,
    input_path: Path,
    output_path: Path,
    options: ProcessingOptions,
    batch: BatchOptions | None = None,
    codec: ImageCodec | None = None,
) -> ProcessingSummary:
    """Convert a file or directory via lazy use-case import."""
    from img_converter.application.use_cases import convert_images as _impl

    return _impl(
        input_path=input_path,
        output_path=output_path,
        options=options,
        batch=batch,
        codec=codec,
    )


__all__ = [
    "BatchOptions",
    "ConstraintSet",
    "ProcessingOptions",
    "ProcessFailure",
    "ProcessSuccess",
    "ProcessResult",
    "ProcessingSummary",
    "summarize",
    "build_processing_options",
    "convert_image",
    "convert_images",
]
