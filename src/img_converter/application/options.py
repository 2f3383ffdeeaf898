"""Typed option objects shared across conversion use-cases."""

from __future__ import annotations

from dataclasses import dataclass

from img_converter.dimensions import ConstraintSet
from img_converter.types import FormatName


@dataclass(frozen=True)
class ProcessingOptions:
    """Per-image conversion options."""

    format: FormatName
    constraints: ConstraintSet = ConstraintSet()
    quality: int | None = None


@dataclass(frozen=True)
class BatchOptions:
    """Options steering directory traversal and output handling."""

    recursive: bool = False
    overwrite: bool = False


__all__ = ["BatchOptions", "ConstraintSet", "ProcessingOptions"]
