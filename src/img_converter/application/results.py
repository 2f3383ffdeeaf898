"""Application-layer result objects and summary aggregation."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from img_converter.dimensions import Dimensions


@dataclass(frozen=True)
class ProcessSuccess:
    """Image converted and written."""

    input_path: Path
    output_path: Path
    original_size: int
    new_size: int
    original_dimensions: Dimensions | None = None
    new_dimensions: Dimensions | None = None
    success: Literal[True] = True

    @property
    def saved_bytes(self) -> int:
        return self.original_size - self.new_size


@dataclass(frozen=True)
class ProcessFailure:
    """Image could not be converted; the batch carries on."""

    input_path: Path
    output_path: Path
    error: str
    error_kind: str = "ImageConversionError"
    success: Literal[False] = False


type ProcessResult = ProcessSuccess | ProcessFailure


@dataclass(frozen=True)
class ProcessingSummary:
    """Aggregate outcome of a conversion run, in discovery order."""

    total: int
    successful: int
    failed: int
    results: tuple[ProcessResult, ...] = ()


def summarize(results: Iterable[ProcessResult]) -> ProcessingSummary:
    """Tally successes and failures over an ordered result sequence."""
    ordered = tuple(results)
    successful = sum(1 for result in ordered if result.success)
    return ProcessingSummary(
        total=len(ordered),
        successful=successful,
        failed=len(ordered) - successful,
        results=ordered,
    )


def format_file_size(size_bytes: int) -> str:
    """Human-readable file size (``B``, ``KB`` or ``MB``)."""
    if size_bytes < 1024:
        return f"{size_bytes} B"
    if size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.2f} KB"
    return f"{size_bytes / (1024 * 1024):.2f} MB"
