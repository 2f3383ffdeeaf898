"""File discovery and output-path mapping for batch conversion."""

from __future__ import annotations

from pathlib import Path

from img_converter.formats import canonical_extension, is_image_extension


def find_image_files(root: Path, recursive: bool = False) -> list[Path]:
    """Collect candidate image files below ``root``.

    Parameters
    ----------
    root : Path
        Directory to scan.
    recursive : bool, default=False
        Descend into subdirectories. When ``False`` they are skipped.
        Symlinked directories are never descended.

    Returns
    -------
    list[Path]
        Files with a known image extension, depth-first with entries of
        each directory sorted by name.
    """
    found: list[Path] = []
    for entry in sorted(root.iterdir(), key=lambda p: p.name):
        if entry.is_symlink() and entry.is_dir():
            continue
        if entry.is_dir():
            if recursive:
                found.extend(find_image_files(entry, recursive=True))
        elif entry.is_file() and is_image_extension(entry.suffix):
            found.append(entry)
    return found


def build_output_path(
    input_path: Path,
    input_root: Path,
    output_root: Path,
    fmt: str,
) -> Path:
    """Mirror ``input_path`` under ``output_root`` with the format's extension."""
    relative = input_path.relative_to(input_root)
    return output_root / relative.parent / f"{relative.stem}.{canonical_extension(fmt)}"


def single_output_path(input_path: Path, output_path: Path, fmt: str) -> Path:
    """Resolve the destination for a single-file conversion.

    An existing directory receives ``<stem>.<extension>``; any other path is
    used as given.
    """
    if output_path.is_dir():
        return output_path / f"{input_path.stem}.{canonical_extension(fmt)}"
    return output_path
