"""Pydantic request/response models for the REST API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from geocoin.core.cells import CellBounds, GridCell
from geocoin.core.snapshot import CacheView, SessionSnapshot
from geocoin.core.tokens import Token
from geocoin.utils.event_log import GameEvent


# --- Grid ---

class CellSchema(BaseModel):
    i: int
    j: int
    key: str

    @classmethod
    def of(cls, cell: GridCell) -> CellSchema:
        return cls(i=cell.i, j=cell.j, key=cell.key)


class BoundsSchema(BaseModel):
    south: float
    west: float
    north: float
    east: float

    @classmethod
    def of(cls, bounds: CellBounds) -> BoundsSchema:
        return cls(south=bounds.south, west=bounds.west, north=bounds.north, east=bounds.east)


class PositionSchema(BaseModel):
    lat: float
    lng: float


class PositionSample(BaseModel):
    """A position-feed reading; only real coordinates are accepted."""

    lat: float = Field(..., ge=-90.0, le=90.0)
    lng: float = Field(..., ge=-180.0, le=180.0)


# --- Caches & inventory ---

class CacheSchema(BaseModel):
    cell: CellSchema
    bounds: BoundsSchema
    count: int
    tokens: list[str] = Field(default_factory=list)  # labels, stack bottom first

    @classmethod
    def of(cls, view: CacheView) -> CacheSchema:
        return cls(
            cell=CellSchema.of(view.cell),
            bounds=BoundsSchema.of(view.bounds),
            count=view.count,
            tokens=[t.label for t in view.tokens],
        )


class InventorySchema(BaseModel):
    count: int
    tokens: list[str] = Field(default_factory=list)  # acquisition order
    status: str

    @classmethod
    def of(cls, tokens: tuple[Token, ...], status: str) -> InventorySchema:
        return cls(count=len(tokens), tokens=[t.label for t in tokens], status=status)


class WorldStateResponse(BaseModel):
    position: PositionSchema
    center: CellSchema
    caches: list[CacheSchema] = Field(default_factory=list)
    inventory: InventorySchema
    directory_size: int = 0
    tracking: bool = False

    @classmethod
    def of(cls, snap: SessionSnapshot) -> WorldStateResponse:
        return cls(
            position=PositionSchema(lat=snap.position.lat, lng=snap.position.lng),
            center=CellSchema.of(snap.center),
            caches=[CacheSchema.of(v) for v in snap.caches],
            inventory=InventorySchema.of(snap.inventory, snap.inventory_status),
            directory_size=snap.directory_size,
            tracking=snap.tracking,
        )


# --- Events ---

class EventSchema(BaseModel):
    seq: int
    category: str
    message: str
    tokens: list[str] = Field(default_factory=list)

    @classmethod
    def of(cls, event: GameEvent) -> EventSchema:
        return cls(
            seq=event.seq,
            category=event.category.value,
            message=event.message,
            tokens=list(event.tokens),
        )


# --- Transfers ---

class TransferRequest(BaseModel):
    token: str = Field(..., description="Token label, i:j#serial")


class TransferResponse(BaseModel):
    status: str  # "ok" | "noop"
    message: str
    token: str | None = None
    cache: CacheSchema
    inventory: InventorySchema


# --- Control ---

class ControlResponse(BaseModel):
    status: str  # "ok" | "noop"
    message: str
    position: PositionSchema
    center: CellSchema
    cache_count: int = 0


class GameConfigResponse(BaseModel):
    world_seed: int
    tile_degrees: float
    neighborhood_size: int
    cache_spawn_probability: float
    max_initial_tokens: int
    start_lat: float
    start_lng: float
    zoom_level: int
