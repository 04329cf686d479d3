"""POST /api/v1/caches/{cell_key}/...: token transfers between player and cache."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from geocoin.api.dependencies import get_session
from geocoin.api.schemas import CacheSchema, InventorySchema, TransferRequest, TransferResponse
from geocoin.core.tokens import Token
from geocoin.engine.session import GameSession

router = APIRouter()


def _require_cache(session: GameSession, cell_key: str) -> None:
    try:
        live = session.is_live(cell_key)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    if not live:
        raise HTTPException(status_code=404, detail=f"No cache nearby at {cell_key}.")


def _parse_token(label: str) -> Token:
    try:
        return Token.parse(label)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


def _respond(session: GameSession, cell_key: str, token: Token | None, done: str, idle: str) -> TransferResponse:
    snap = session.snapshot()
    view = snap.cache(cell_key)
    if view is None:
        raise HTTPException(status_code=404, detail=f"No cache nearby at {cell_key}.")
    return TransferResponse(
        status="ok" if token is not None else "noop",
        message=done.format(token=token) if token is not None else idle,
        token=token.label if token is not None else None,
        cache=CacheSchema.of(view),
        inventory=InventorySchema.of(snap.inventory, snap.inventory_status),
    )


@router.post("/caches/{cell_key}/take", response_model=TransferResponse)
def take(cell_key: str, session: GameSession = Depends(get_session)) -> TransferResponse:
    _require_cache(session, cell_key)
    token = session.take(cell_key)
    return _respond(session, cell_key, token, "Collected coin {token}.", "Cache is empty.")


@router.post("/caches/{cell_key}/give", response_model=TransferResponse)
def give(cell_key: str, session: GameSession = Depends(get_session)) -> TransferResponse:
    _require_cache(session, cell_key)
    token = session.give(cell_key)
    return _respond(session, cell_key, token, "Deposited coin {token}.", "No coins to give.")


@router.post("/caches/{cell_key}/collect", response_model=TransferResponse)
def collect(cell_key: str, body: TransferRequest, session: GameSession = Depends(get_session)) -> TransferResponse:
    _require_cache(session, cell_key)
    token = _parse_token(body.token)
    moved = session.collect(cell_key, token)
    return _respond(session, cell_key, token if moved else None,
                    "Collected coin {token}.", f"Coin {token} is not in this cache.")


@router.post("/caches/{cell_key}/deposit", response_model=TransferResponse)
def deposit(cell_key: str, body: TransferRequest, session: GameSession = Depends(get_session)) -> TransferResponse:
    _require_cache(session, cell_key)
    token = _parse_token(body.token)
    moved = session.deposit(cell_key, token)
    return _respond(session, cell_key, token if moved else None,
                    "Deposited coin {token}.", f"Coin {token} is not in your inventory.")
