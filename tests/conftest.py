"""Shared pytest configuration, marker assignment and image fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


type ImageWriter = Callable[..., Path]


@pytest.fixture
def write_image() -> ImageWriter:
    """Return a helper that writes a solid-color image to disk."""

    def _write(
        path: Path,
        size: tuple[int, int] = (40, 20),
        mode: str = "RGB",
        fmt: str | None = None,
    ) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        color: int | tuple[int, ...] = 128 if mode in {"L", "P"} else (200, 30, 60, 255)[
            : len(mode)
        ]
        Image.new(mode, size, color).save(path, format=fmt)
        return path

    return _write
