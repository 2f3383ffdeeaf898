"""Application use-cases orchestrating image conversion workflows."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from img_converter.adapters.codec import PillowImageCodec
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
from img_converter.dimensions import resolve_dimensions
from img_converter.errors import (
    ConfigError,
    DestinationExistsError,
    ImageConversionError,
    InputNotFoundError,
    InvalidConstraintsError,
    UnreadableImageError,
)
from img_converter.formats import is_quality_capable
from img_converter.infrastructure.filesystem import (
    build_output_path,
    find_image_files,
    single_output_path,
)
from img_converter.schemas import ProcessingConfig

logger = logging.getLogger(__name__)

DESTINATION_EXISTS_MESSAGE = "Output file already exists. Use --overwrite to replace it."


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
    """Build typed processing options from command/API params.

    Raises
    ------
    UnsupportedFormatError
        If ``format`` cannot be written.
    ConfigError
        If a value is out of range (non-positive size, quality outside 1-100).
    InvalidConstraintsError
        If a minimum exceeds its maximum.
    """
    try:
        config = ProcessingConfig(
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
    except ValidationError as exc:
        raise ConfigError(f"Invalid processing parameters: {exc}") from exc

    constraints = ConstraintSet(
        target_width=config.width,
        target_height=config.height,
        min_width=config.min_width,
        min_height=config.min_height,
        max_width=config.max_width,
        max_height=config.max_height,
        allow_upscale=config.allow_upscale,
    )
    constraints.validate()
    return ProcessingOptions(
        format=config.format,
        constraints=constraints,
        quality=config.quality,
    )


def _destination_exists_failure(input_path: Path, output_path: Path) -> ProcessFailure:
    return ProcessFailure(
        input_path=input_path,
        output_path=output_path,
        error=DESTINATION_EXISTS_MESSAGE,
        error_kind=DestinationExistsError.__name__,
    )


def convert_image(
    *,
    input_path: Path,
    output_path: Path,
    options: ProcessingOptions,
    codec: ImageCodec | None = None,
) -> ProcessResult:
    """Use-case: convert one image, capturing any failure as data.

    Parameters
    ----------
    input_path : Path
        Source image.
    output_path : Path
        Destination file; parent directories are created.
    options : ProcessingOptions
        Target format, constraints and quality.
    codec : ImageCodec | None, default=None
        Codec implementation; Pillow when omitted.

    Returns
    -------
    ProcessResult
        ``ProcessSuccess`` with byte sizes, or ``ProcessFailure``.
    """
    codec = codec or PillowImageCodec()
    try:
        original_size = input_path.stat().st_size
        original = codec.read_dimensions(input_path)
        if original.width < 1 or original.height < 1:
            raise UnreadableImageError("Unable to read image dimensions")

        target = resolve_dimensions(original, options.constraints)
        if target.width < 1 or target.height < 1:
            raise InvalidConstraintsError(
                f"Constraints resolve {original} to an empty image ({target})."
            )
        resize = target != original
        quality = options.quality if is_quality_capable(options.format) else None

        output_path.parent.mkdir(parents=True, exist_ok=True)
        codec.resize_and_encode(
            input_path,
            output_path,
            target.width if resize else None,
            target.height if resize else None,
            options.format,
            quality=quality,
            enlargement_allowed=options.constraints.allow_upscale,
        )
        new_size = output_path.stat().st_size
    except ImageConversionError as exc:
        logger.warning("failed to convert %s: %s", input_path, exc)
        return ProcessFailure(
            input_path=input_path,
            output_path=output_path,
            error=str(exc),
            error_kind=type(exc).__name__,
        )
    except Exception as exc:
        logger.exception("unexpected error converting %s", input_path)
        return ProcessFailure(
            input_path=input_path,
            output_path=output_path,
            error=str(exc) or type(exc).__name__,
            error_kind=type(exc).__name__,
        )

    logger.debug(
        "converted %s -> %s (%s -> %s, %d -> %d bytes)",
        input_path,
        output_path,
        original,
        target,
        original_size,
        new_size,
    )
    return ProcessSuccess(
        input_path=input_path,
        output_path=output_path,
        original_size=original_size,
        new_size=new_size,
        original_dimensions=original,
        new_dimensions=target,
    )


def convert_file(
    *,
    input_path: Path,
    output_path: Path,
    options: ProcessingOptions,
    batch: BatchOptions,
    codec: ImageCodec | None = None,
) -> ProcessingSummary:
    """Use-case: convert a single input file.

    When ``output_path`` is an existing directory the output is written
    inside it as ``<stem>.<extension>``.
    """
    destination = single_output_path(input_path, output_path, options.format)
    if not batch.overwrite and destination.exists():
        return summarize([_destination_exists_failure(input_path, destination)])
    result = convert_image(
        input_path=input_path,
        output_path=destination,
        options=options,
        codec=codec,
    )
    return summarize([result])


def convert_directory(
    *,
    input_dir: Path,
    output_dir: Path,
    options: ProcessingOptions,
    batch: BatchOptions,
    codec: ImageCodec | None = None,
) -> ProcessingSummary:
    """Use-case: convert every image under ``input_dir``.

    Files are processed one at a time in discovery order. The overwrite
    check runs per file, right before that file is converted, so outputs
    written earlier in the same run are seen. A failing file never stops
    the walk.
    """
    codec = codec or PillowImageCodec()
    output_dir.mkdir(parents=True, exist_ok=True)

    results: list[ProcessResult] = []
    for input_path in find_image_files(input_dir, recursive=batch.recursive):
        output_path = build_output_path(input_path, input_dir, output_dir, options.format)
        if not batch.overwrite and output_path.exists():
            logger.info("skipping %s: %s exists", input_path, output_path)
            results.append(_destination_exists_failure(input_path, output_path))
            continue
        results.append(
            convert_image(
                input_path=input_path,
                output_path=output_path,
                options=options,
                codec=codec,
            )
        )
    return summarize(results)


def _resolve_input(input_path: Path) -> Path:
    message = f"Input path does not exist or is not accessible: {input_path}"
    try:
        resolved = input_path.resolve()
        exists = resolved.exists()
    except OSError as exc:
        raise InputNotFoundError(f"{message} ({exc})") from exc
    if not exists:
        raise InputNotFoundError(message)
    return resolved


def plan_conversion(
    *,
    input_path: Path,
    output_path: Path,
    options: ProcessingOptions,
    batch: BatchOptions,
) -> list[tuple[Path, Path]]:
    """Use-case: list ``(input, output)`` pairs without touching any image."""
    options.constraints.validate()
    source = _resolve_input(input_path)
    destination = output_path.resolve()
    if source.is_dir():
        return [
            (path, build_output_path(path, source, destination, options.format))
            for path in find_image_files(source, recursive=batch.recursive)
        ]
    return [(source, single_output_path(source, destination, options.format))]


def convert_images(
    *,
    input_path: Path,
    output_path: Path,
    options: ProcessingOptions,
    batch: BatchOptions | None = None,
    codec: ImageCodec | None = None,
) -> ProcessingSummary:
    """Use-case: convert a file or a directory of images.

    Raises
    ------
    InvalidConstraintsError
        If the constraints are inconsistent; raised before any file is read.
    InputNotFoundError
        If ``input_path`` does not exist.
    """
    batch = batch or BatchOptions()
    options.constraints.validate()
    source = _resolve_input(input_path)
    destination = output_path.resolve()

    if source.is_dir():
        summary = convert_directory(
            input_dir=source,
            output_dir=destination,
            options=options,
            batch=batch,
            codec=codec,
        )
    else:
        summary = convert_file(
            input_path=source,
            output_path=destination,
            options=options,
            batch=batch,
            codec=codec,
        )
    logger.info(
        "processed %d file(s): %d succeeded, %d failed",
        summary.total,
        summary.successful,
        summary.failed,
    )
    return summary
