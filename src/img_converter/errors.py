"""Exception hierarchy for image conversion."""

from __future__ import annotations


class ImageConversionError(Exception):
    """Base error for every failure raised by the converter."""

    exit_code: int = 1


class UnsupportedFormatError(ImageConversionError):
    """Requested output format is unknown or cannot be written."""

    exit_code = 2


class InvalidConstraintsError(ImageConversionError):
    """Dimension constraints are malformed or contradict each other."""

    exit_code = 2


class ConfigError(ImageConversionError):
    """Configuration file is missing, unreadable or invalid."""

    exit_code = 2


class InputNotFoundError(ImageConversionError):
    """Input path does not exist or is not accessible."""

    exit_code = 3


class UnreadableImageError(ImageConversionError):
    """Source image dimensions could not be determined."""


class DestinationExistsError(ImageConversionError):
    """Output file exists and overwriting was not permitted."""


class CodecError(ImageConversionError):
    """Resize, encode or write step failed inside the image codec."""
