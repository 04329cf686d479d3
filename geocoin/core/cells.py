"""Grid cells: coordinate quantization and the flyweight cell registry."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LatLng:
    """Immutable geographic coordinate in degrees."""

    lat: float
    lng: float

    def offset(self, d_lat: float, d_lng: float) -> LatLng:
        return LatLng(self.lat + d_lat, self.lng + d_lng)


@dataclass(frozen=True, slots=True)
class GridCell:
    """Immutable quantized tile identified by integer (i, j)."""

    i: int
    j: int

    @property
    def key(self) -> str:
        """Cell identity string, ``"i,j"``."""
        return f"{self.i},{self.j}"

    def __repr__(self) -> str:
        return f"GridCell({self.i}, {self.j})"


@dataclass(frozen=True, slots=True)
class CellBounds:
    """Lat/lng box covered by one tile (south-west to north-east corner)."""

    south: float
    west: float
    north: float
    east: float

    @classmethod
    def for_cell(cls, cell: GridCell, tile_degrees: float) -> CellBounds:
        lat = cell.i * tile_degrees
        lng = cell.j * tile_degrees
        return cls(south=lat, west=lng, north=lat + tile_degrees, east=lng + tile_degrees)

    def contains(self, point: LatLng) -> bool:
        return self.south <= point.lat < self.north and self.west <= point.lng < self.east


def quantize(lat: float, lng: float, tile_degrees: float) -> tuple[int, int]:
    """Map a coordinate to the (i, j) of the tile containing it.

    Floors toward negative infinity so that tiles on either side of the
    equator and prime meridian have the same size.
    """
    return math.floor(lat / tile_degrees), math.floor(lng / tile_degrees)


def parse_cell_key(key: str) -> tuple[int, int]:
    """Parse an ``"i,j"`` cell key. Raises ValueError on malformed input."""
    parts = key.split(",")
    if len(parts) != 2:
        raise ValueError(f"Malformed cell key: {key!r}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise ValueError(f"Malformed cell key: {key!r}") from None


class CellRegistry:
    """Arena owning exactly one canonical GridCell per (i, j).

    Repeated lookups return the identical instance, so cells can be compared
    with ``is`` and used as dict/set members by reference.
    """

    __slots__ = ("_tile_degrees", "_cells")

    def __init__(self, tile_degrees: float = 1e-4) -> None:
        self._tile_degrees = tile_degrees
        self._cells: dict[tuple[int, int], GridCell] = {}

    @property
    def tile_degrees(self) -> float:
        return self._tile_degrees

    def get_cell(self, i: int, j: int) -> GridCell:
        key = (i, j)
        cell = self._cells.get(key)
        if cell is None:
            cell = GridCell(i, j)
            self._cells[key] = cell
        return cell

    def cell_for(self, lat: float, lng: float) -> GridCell:
        """Return the canonical cell containing (lat, lng)."""
        return self.get_cell(*quantize(lat, lng, self._tile_degrees))

    def bounds(self, cell: GridCell) -> CellBounds:
        return CellBounds.for_cell(cell, self._tile_degrees)

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, key: object) -> bool:
        return key in self._cells
