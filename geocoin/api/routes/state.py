"""GET /api/v1/state, /caches, /inventory, /events: observable game state."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from geocoin.api.dependencies import get_session
from geocoin.api.schemas import CacheSchema, EventSchema, InventorySchema, WorldStateResponse
from geocoin.core.cells import parse_cell_key
from geocoin.engine.session import GameSession

router = APIRouter()


@router.get("/state", response_model=WorldStateResponse)
def get_state(session: GameSession = Depends(get_session)) -> WorldStateResponse:
    return WorldStateResponse.of(session.snapshot())


@router.get("/caches", response_model=list[CacheSchema])
def list_caches(session: GameSession = Depends(get_session)) -> list[CacheSchema]:
    return [CacheSchema.of(v) for v in session.cache_views()]


@router.get("/caches/{cell_key}", response_model=CacheSchema)
def get_cache(cell_key: str, session: GameSession = Depends(get_session)) -> CacheSchema:
    try:
        parse_cell_key(cell_key)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    view = session.snapshot().cache(cell_key)
    if view is None:
        raise HTTPException(status_code=404, detail=f"No cache nearby at {cell_key}.")
    return CacheSchema.of(view)


@router.get("/inventory", response_model=InventorySchema)
def get_inventory(session: GameSession = Depends(get_session)) -> InventorySchema:
    snap = session.snapshot()
    return InventorySchema.of(snap.inventory, snap.inventory_status)


@router.get("/events", response_model=list[EventSchema])
def get_events(
    since: int = Query(0, ge=0, description="Return events with seq >= since"),
    limit: int = Query(50, ge=1, le=500),
    session: GameSession = Depends(get_session),
) -> list[EventSchema]:
    events = session.event_log.since(since) if since else session.event_log.latest(limit)
    return [EventSchema.of(e) for e in events[-limit:]]
