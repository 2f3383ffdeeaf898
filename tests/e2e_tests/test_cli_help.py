"""End-to-end smoke tests for the installed CLI."""

from __future__ import annotations

import subprocess
from pathlib import Path

from PIL import Image

import img_converter


def test_package_import_smoke() -> None:
    """Ensure package can be imported in the test process."""
    assert img_converter.__version__


def test_cli_help_smoke() -> None:
    """Ensure the installed CLI entrypoint responds to --help."""
    result = subprocess.run(
        ["img-tool", "--help"],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 0, result.stderr
    assert "Convert images between formats" in result.stdout


def test_cli_missing_input_fails_cleanly(tmp_path: Path) -> None:
    """Ensure a missing input path yields exit code 3 and a readable message."""
    result = subprocess.run(
        [
            "img-tool",
            "convert",
            "-i",
            str(tmp_path / "definitely-missing"),
            "-o",
            str(tmp_path / "out"),
            "-f",
            "png",
        ],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 3
    assert "does not exist" in result.stderr.lower()


def test_cli_converts_file(tmp_path: Path) -> None:
    source = tmp_path / "in.png"
    Image.new("RGB", (64, 48), (10, 20, 30)).save(source)

    result = subprocess.run(
        ["img-tool", "convert", "-i", str(source), "-o", str(tmp_path), "-f", "jpg", "-w", "32"],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 0, result.stderr
    assert "Successful: 1" in result.stdout
    with Image.open(tmp_path / "in.jpeg") as image:
        assert image.size == (32, 24)
