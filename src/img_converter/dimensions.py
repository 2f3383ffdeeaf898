"""Target-size resolution from geometric constraints.

The resolver is a pure function: it never touches files and never raises for
well-formed input (original dimensions >= 1, constraints already validated).
Stages run in a fixed order and each feeds the next:

1. primary scaling from ``target_width`` / ``target_height``
2. minimum width
3. minimum height
4. maximum width
5. maximum height
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields

from img_converter.errors import InvalidConstraintsError


@dataclass(frozen=True)
class Dimensions:
    """Pixel size of an actual or desired image."""

    width: int
    height: int

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


@dataclass(frozen=True)
class ConstraintSet:
    """Geometric constraints reconciled by the resolver.

    Every bound is optional; ``None`` means "not requested".
    """

    target_width: int | None = None
    target_height: int | None = None
    min_width: int | None = None
    min_height: int | None = None
    max_width: int | None = None
    max_height: int | None = None
    allow_upscale: bool = False

    def validate(self) -> None:
        """Reject non-positive bounds and ``min > max`` pairs.

        Raises
        ------
        InvalidConstraintsError
            If any bound is not a positive integer, or a minimum exceeds
            its maximum.
        """
        for field in fields(self):
            if field.name == "allow_upscale":
                continue
            value = getattr(self, field.name)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise InvalidConstraintsError(
                    f"{field.name} must be a positive integer, got {value!r}."
                )
        if (
            self.min_width is not None
            and self.max_width is not None
            and self.min_width > self.max_width
        ):
            raise InvalidConstraintsError("min-width cannot be greater than max-width")
        if (
            self.min_height is not None
            and self.max_height is not None
            and self.min_height > self.max_height
        ):
            raise InvalidConstraintsError(
                "min-height cannot be greater than max-height"
            )


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up."""
    return math.floor(value + 0.5)


def _primary_scale(original: Dimensions, c: ConstraintSet) -> tuple[int, int]:
    width, height = original.width, original.height
    if c.target_width is not None and c.target_height is None:
        return c.target_width, round_half_up(height * c.target_width / width)
    if c.target_height is not None and c.target_width is None:
        return round_half_up(width * c.target_height / height), c.target_height
    if c.target_width is not None and c.target_height is not None:
        # Fit inside the box: the smaller ratio never exceeds either bound.
        ratio = min(c.target_width / width, c.target_height / height)
        return round_half_up(width * ratio), round_half_up(height * ratio)
    return width, height


def resolve_dimensions(original: Dimensions, constraints: ConstraintSet) -> Dimensions:
    """Reconcile all constraints into a single target size.

    Parameters
    ----------
    original : Dimensions
        Source image size; both sides must be >= 1.
    constraints : ConstraintSet
        Validated constraint set.

    Returns
    -------
    Dimensions
        Target size.

    Notes
    -----
    Without ``allow_upscale`` the minimum stages assign the bound first and
    then recompute the opposite side against the already-assigned value, so
    the opposite side is left unchanged. Existing outputs depend on that
    result, so it is kept as is. A side already rounded down to 0 takes the
    same path even with upscaling, since it cannot be scaled from.
    """
    c = constraints
    width, height = _primary_scale(original, c)

    if c.min_width is not None and width < c.min_width:
        if c.allow_upscale and width > 0:
            scale = c.min_width / width
            width = c.min_width
            height = round_half_up(height * scale)
        else:
            width = c.min_width
            height = round_half_up(height * c.min_width / width)

    if c.min_height is not None and height < c.min_height:
        if c.allow_upscale and height > 0:
            scale = c.min_height / height
            height = c.min_height
            width = round_half_up(width * scale)
        else:
            height = c.min_height
            width = round_half_up(width * c.min_height / height)

    if c.max_width is not None and width > c.max_width:
        scale = c.max_width / width
        width = c.max_width
        height = round_half_up(height * scale)

    if c.max_height is not None and height > c.max_height:
        scale = c.max_height / height
        height = c.max_height
        width = round_half_up(width * scale)

    return Dimensions(width=width, height=height)
