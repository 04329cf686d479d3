"""POST /api/v1/move, /position, /tracking, /control/reset: player controls."""

from __future__ import annotations

from enum import Enum

from fastapi import APIRouter, Depends

from geocoin.api.dependencies import get_session
from geocoin.api.schemas import CellSchema, ControlResponse, PositionSample, PositionSchema
from geocoin.core.enums import Direction
from geocoin.engine.session import GameSession

router = APIRouter()


class MoveDirection(str, Enum):
    north = "north"
    south = "south"
    east = "east"
    west = "west"


class TrackingAction(str, Enum):
    start = "start"
    stop = "stop"


def _respond(session: GameSession, status: str, message: str) -> ControlResponse:
    snap = session.snapshot()
    return ControlResponse(
        status=status,
        message=message,
        position=PositionSchema(lat=snap.position.lat, lng=snap.position.lng),
        center=CellSchema.of(snap.center),
        cache_count=len(snap.caches),
    )


@router.post("/move/{direction}", response_model=ControlResponse)
def move(direction: MoveDirection, session: GameSession = Depends(get_session)) -> ControlResponse:
    session.move(Direction[direction.name.upper()])
    return _respond(session, "ok", f"Moved {direction.value}.")


@router.post("/position", response_model=ControlResponse)
def position(sample: PositionSample, session: GameSession = Depends(get_session)) -> ControlResponse:
    if not session.on_position(sample.lat, sample.lng):
        return _respond(session, "noop", "Position tracking is off.")
    return _respond(session, "ok", "Position updated.")


@router.post("/tracking/{action}", response_model=ControlResponse)
def tracking(action: TrackingAction, session: GameSession = Depends(get_session)) -> ControlResponse:
    match action:
        case TrackingAction.start:
            if session.tracking:
                return _respond(session, "noop", "Already tracking.")
            session.start_tracking()
            return _respond(session, "ok", "Position tracking started.")

        case TrackingAction.stop:
            if not session.tracking:
                return _respond(session, "noop", "Not tracking.")
            session.stop_tracking()
            return _respond(session, "ok", "Position tracking stopped.")


@router.post("/control/reset", response_model=ControlResponse)
def reset(session: GameSession = Depends(get_session)) -> ControlResponse:
    session.reset()
    return _respond(session, "ok", "Game state erased.")
