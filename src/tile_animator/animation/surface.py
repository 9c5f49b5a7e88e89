"""
Tile surface collaborator used by the animation clock.

The surface is owned by the host renderer. The clock only enumerates
cells of a layer and reads/writes their tile index through it.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, List, Sequence, cast

from .models import CellRef

logger = logging.getLogger(__name__)


class TileSurface(ABC):
    """Abstract store of layers and cell tile indices."""

    @abstractmethod
    def layer_names(self) -> List[str]:
        """Names of all tile layers, in draw order."""

    @abstractmethod
    def resolve_layer(self, name: str) -> str:
        """Return the handle for a layer name.

        Raises:
            LookupError: If the layer does not exist
        """

    @abstractmethod
    def enumerate_cells(self, layer: str) -> Iterator[CellRef]:
        """Yield every renderable cell of a layer. Restartable per call."""

    @abstractmethod
    def get_tile_index(self, cell: CellRef) -> int:
        """Tile index currently displayed by a cell."""

    @abstractmethod
    def set_tile_index(self, cell: CellRef, value: int) -> None:
        """Change the tile index displayed by a cell."""


class GridTileSurface(TileSurface):
    """Dense in-memory tile surface.

    Each layer is a row-major grid (`grid[y][x]`) of global tile indices.
    Cells holding `empty_index` are not renderable and are skipped by
    enumeration.
    """

    def __init__(self, layers: Dict[str, Sequence[Sequence[int]]], empty_index: int = 0):
        self.empty_index = empty_index
        self._layers: Dict[str, List[List[int]]] = {
            name: [list(row) for row in grid] for name, grid in layers.items()
        }

    @classmethod
    def from_tiled_layers(
        cls, layers_data: Sequence[dict[str, Any]], empty_index: int = 0
    ) -> "GridTileSurface":
        """Build a surface from decoded Tiled tile layers.

        Only layers of type 'tilelayer' are used; their flat `data` list is
        split into rows of `width` cells.

        Args:
            layers_data: Decoded `layers` list of a Tiled map
            empty_index: Tile index that marks an empty cell

        Returns:
            GridTileSurface instance
        """
        layers: Dict[str, List[List[int]]] = {}
        for layer in layers_data:
            if layer.get("type", "tilelayer") != "tilelayer":
                continue
            name = str(layer["name"])
            width = int(layer["width"])
            data = [int(v) for v in cast(list[Any], layer.get("data", []))]
            if width <= 0:
                logger.warning(f"Skipping tile layer '{name}' with width {width}")
                continue
            layers[name] = [data[i:i + width] for i in range(0, len(data), width)]
        return cls(layers, empty_index=empty_index)

    def layer_names(self) -> List[str]:
        return list(self._layers)

    def resolve_layer(self, name: str) -> str:
        if name not in self._layers:
            raise LookupError(f"Unknown tile layer: {name}")
        return name

    def enumerate_cells(self, layer: str) -> Iterator[CellRef]:
        grid = self._layers[layer]
        for y, row in enumerate(grid):
            for x, value in enumerate(row):
                if value != self.empty_index:
                    yield CellRef(layer, x, y)

    def get_tile_index(self, cell: CellRef) -> int:
        return self._layers[cell.layer][cell.y][cell.x]

    def set_tile_index(self, cell: CellRef, value: int) -> None:
        self._layers[cell.layer][cell.y][cell.x] = value

    def get_layer_data(self, name: str) -> List[List[int]]:
        """Return a copy of a layer grid."""
        return [list(row) for row in self._layers[name]]
