#!/usr/bin/env python3
"""
img_converter.cli.cli

Typer-based CLI for converting images between formats with optional resizing.

Examples
--------
Convert a single file to WebP at quality 75:

    img-tool convert -i photo.png -o out/ -f webp -q 75

Convert a whole tree, fitting every image inside 1920x1080:

    img-tool convert -i photos/ -o converted/ -f jpg -r --max-width 1920 --max-height 1080

Options may also come from a JSON or YAML file; command-line values win:

    img-tool convert -c settings.json
"""

from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path

import typer

from img_converter.application.results import ProcessingSummary, format_file_size
from img_converter.errors import ImageConversionError

app = typer.Typer(
    name="img-tool",
    help="Convert images between formats with resizing and size constraints.",
    no_args_is_help=True,
)

SIZE_HELP = "{} in pixels."


# -----------------------------
# Output helpers
# -----------------------------
def _print_conversion_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly error.

    Parameters
    ----------
    exc : Exception
        Exception raised before or during conversion.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.secho(f"✗ {type(exc).__name__}: {exc}", fg=typer.colors.RED, err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _configure_logging(verbose: bool, debug: bool) -> None:
    """Route library logging to stderr at the requested level."""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def _print_results(summary: ProcessingSummary, verbose: bool) -> None:
    """Print per-file lines (verbose only) followed by the summary block."""
    if verbose:
        typer.echo("\n=== Processing Results ===\n")
        for result in summary.results:
            if result.success:
                sizes = (
                    f" ({format_file_size(result.original_size)} → "
                    f"{format_file_size(result.new_size)})"
                )
                typer.secho(
                    f"✓ {result.input_path} → {result.output_path}{sizes}",
                    fg=typer.colors.GREEN,
                )
            else:
                typer.secho(
                    f"✗ {result.input_path}: {result.error}",
                    fg=typer.colors.RED,
                    err=True,
                )
        typer.echo("")

    typer.echo("=== Summary ===")
    typer.echo(f"Total files: {summary.total}")
    typer.echo(f"Successful: {summary.successful}")
    if summary.failed > 0:
        typer.echo(f"Failed: {summary.failed}")


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
) -> None:
    """Initialize shared CLI state.

    Parameters
    ----------
    ctx : typer.Context
        Typer context object used to store shared state.
    debug : bool, default=False
        Whether to enable debug error output.
    """
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("convert")
def convert_cmd(
    ctx: typer.Context,
    input_path: Path | None = typer.Option(
        None, "--input", "-i", help="Input file or directory path."
    ),
    output_path: Path | None = typer.Option(
        None, "--output", "-o", help="Output file or directory path."
    ),
    format: str | None = typer.Option(
        None,
        "--format",
        "-f",
        help="Target output format (jpg, png, webp, gif, tiff, bmp, avif).",
    ),
    width: int | None = typer.Option(
        None, "--width", "-w", help=SIZE_HELP.format("Desired width")
    ),
    height: int | None = typer.Option(
        None, "--height", "-h", help=SIZE_HELP.format("Desired height")
    ),
    min_width: int | None = typer.Option(
        None, "--min-width", help=SIZE_HELP.format("Minimum width")
    ),
    min_height: int | None = typer.Option(
        None, "--min-height", help=SIZE_HELP.format("Minimum height")
    ),
    max_width: int | None = typer.Option(
        None, "--max-width", help=SIZE_HELP.format("Maximum width")
    ),
    max_height: int | None = typer.Option(
        None, "--max-height", help=SIZE_HELP.format("Maximum height")
    ),
    quality: int | None = typer.Option(
        None,
        "--quality",
        "-q",
        help="Output quality (1-100) for formats that support it. Default: 80.",
    ),
    allow_upscale: bool = typer.Option(
        False,
        "--allow-upscale",
        help="Allow upscaling images beyond original dimensions.",
    ),
    recursive: bool = typer.Option(
        False, "--recursive", "-r", help="Process subdirectories recursively."
    ),
    overwrite: bool = typer.Option(
        False, "--overwrite", help="Overwrite existing output files."
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Show what would be processed without writing files.",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Print detailed logs for each file."
    ),
    silent: bool = typer.Option(
        False, "--silent", "-s", help="Only print errors and summary."
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        exists=True,
        dir_okay=False,
        readable=True,
        help="Path to a JSON or YAML configuration file.",
    ),
) -> None:
    """Convert an image file or a directory of images.

    Parameters
    ----------
    ctx : typer.Context
        Typer context containing global options.
    input_path : Path | None
        Input file or directory; may come from the config file instead.
    output_path : Path | None
        Output file or directory; may come from the config file instead.
    format : str | None
        Target format; ``jpg`` and ``jpeg`` are the same format.

    Notes
    -----
    - Exit code is 0 when every file converted and 1 when any file failed.
    - Invalid options (unknown format, ``min > max``, missing input) abort
      before any file is touched.
    """
    debug: bool = bool(ctx.obj.get("debug", False))

    try:
        from img_converter.application import use_cases
        from img_converter.application.options import BatchOptions
        from img_converter.config import load_config_file, merge_settings
        from img_converter.formats import is_quality_capable

        file_config = load_config_file(config) if config is not None else None
        settings = merge_settings(
            {
                "input": input_path,
                "output": output_path,
                "format": format,
                "width": width,
                "height": height,
                "min_width": min_width,
                "min_height": min_height,
                "max_width": max_width,
                "max_height": max_height,
                "quality": quality,
                "allow_upscale": allow_upscale or None,
                "recursive": recursive or None,
                "overwrite": overwrite or None,
                "dry_run": dry_run or None,
                "verbose": verbose or None,
                "silent": silent or None,
            },
            file_config,
        )
        _configure_logging(settings.verbose and not settings.silent, debug)

        if settings.input is None:
            raise typer.BadParameter("Missing option '--input' / '-i'.")
        if settings.output is None:
            raise typer.BadParameter("Missing option '--output' / '-o'.")
        if settings.format is None:
            raise typer.BadParameter("Missing option '--format' / '-f'.")

        options = use_cases.build_processing_options(
            format=settings.format,
            width=settings.width,
            height=settings.height,
            min_width=settings.min_width,
            min_height=settings.min_height,
            max_width=settings.max_width,
            max_height=settings.max_height,
            quality=settings.quality,
            allow_upscale=settings.allow_upscale,
        )
        batch = BatchOptions(recursive=settings.recursive, overwrite=settings.overwrite)

        if settings.dry_run:
            planned = use_cases.plan_conversion(
                input_path=settings.input,
                output_path=settings.output,
                options=options,
                batch=batch,
            )
            if not settings.silent:
                typer.echo("DRY RUN MODE - No files will be written\n")
                typer.echo(f"Input: {settings.input}")
                typer.echo(f"Output: {settings.output}")
                typer.echo(f"Format: {options.format}")
                if settings.width or settings.height:
                    typer.echo(
                        f"Dimensions: {settings.width or 'auto'} x {settings.height or 'auto'}"
                    )
                if options.quality is not None and is_quality_capable(options.format):
                    typer.echo(f"Quality: {options.quality}")
                typer.echo(f"\nWould process {len(planned)} file(s):")
                for source, target in planned:
                    typer.echo(f"  {source} → {target}")
            return

        if not settings.silent and not settings.verbose:
            typer.echo("Processing images...\n")

        summary = use_cases.convert_images(
            input_path=settings.input,
            output_path=settings.output,
            options=options,
            batch=batch,
        )
    except typer.BadParameter:
        raise
    except ImageConversionError as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_conversion_error(exc, debug))

    if settings.silent:
        for result in summary.results:
            if not result.success:
                typer.secho(
                    f"✗ {result.input_path}: {result.error}",
                    fg=typer.colors.RED,
                    err=True,
                )
        _print_results(summary, verbose=False)
    else:
        _print_results(summary, verbose=settings.verbose)

    if summary.failed > 0:
        raise typer.Exit(code=1)


@app.command("formats")
def formats_cmd() -> None:
    """List readable, writable and quality-capable formats."""
    from img_converter.formats import (
        IMAGE_EXTENSIONS,
        INPUT_FORMATS,
        OUTPUT_FORMATS,
        QUALITY_FORMATS,
    )

    typer.echo(f"input: {', '.join(sorted(INPUT_FORMATS))}")
    typer.echo(f"output: {', '.join(sorted(OUTPUT_FORMATS))}")
    typer.echo(f"quality: {', '.join(sorted(QUALITY_FORMATS))}")
    typer.echo(f"extensions: {', '.join(sorted(IMAGE_EXTENSIONS))}")


@app.command("doctor")
def doctor_cmd() -> None:
    """Print installed codec library versions."""
    import importlib.metadata as metadata

    modules = ["pillow", "pillow-heif", "pydantic", "typer", "pyyaml"]

    typer.echo(f"Python: {sys.version.split()[0]}")
    for module in modules:
        try:
            version = metadata.version(module)
            typer.echo(f"{module}: {version}")
        except metadata.PackageNotFoundError:
            typer.echo(f"{module}: <not installed>")

    from img_converter.adapters.codec import encoder_available

    avif = encoder_available("avif")
    typer.echo(f"avif encoder: {'available' if avif else '<unavailable>'}")


if __name__ == "__main__":
    app()
