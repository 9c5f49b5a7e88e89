"""Shared fixtures for tile-animator tests."""

from pathlib import Path
from typing import Any, Iterator

import pytest
from PySide6.QtCore import QCoreApplication, QSettings

from tile_animator.animation import GridTileSurface
from tile_animator.settings import AppSettings


@pytest.fixture(scope="session")
def qapp() -> Iterator[QCoreApplication]:
    """Qt application instance required by timers."""
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app  # type: ignore[misc]


@pytest.fixture
def app_settings(tmp_path: Path) -> AppSettings:
    """AppSettings backed by a throwaway INI file."""
    store = QSettings(str(tmp_path / "settings.ini"), QSettings.Format.IniFormat)
    return AppSettings(settings=store)


@pytest.fixture
def water_tileset() -> dict[str, Any]:
    """Tiled tileset with one three-frame animation on local tile 9."""
    return {
        "name": "water",
        "firstgid": 1,
        "tiles": [
            {
                "id": 9,
                "animation": [
                    {"tileid": 0, "duration": 200},
                    {"tileid": 1, "duration": 300},
                    {"tileid": 2, "duration": 100},
                ],
            },
            {"id": 4, "properties": [{"name": "solid", "type": "bool", "value": True}]},
        ],
    }


@pytest.fixture
def surface() -> GridTileSurface:
    """Two small layers; index 10 is the first frame of the water animation."""
    return GridTileSurface(
        {
            "ground": [
                [10, 3, 10],
                [3, 3, 3],
            ],
            "decor": [
                [0, 0, 7],
                [10, 0, 0],
            ],
        }
    )
