"""Entry point: ``python -m geocoin``.

Supports two modes:
  - ``python -m geocoin``                   → Launch the FastAPI game server
  - ``python -m geocoin walk --moves NNEE`` → Headless walk, printing state after each step
"""

from __future__ import annotations

import argparse
import logging

logger = logging.getLogger(__name__)

# Walk script letters: N/S/E/W move one tile, T takes from the nearest cache, G gives to it.
_WALK_MOVES = {"N": "NORTH", "S": "SOUTH", "E": "EAST", "W": "WEST"}


def _add_world_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--lat", type=float, default=None, help="Start latitude")
    parser.add_argument("--lng", type=float, default=None, help="Start longitude")
    parser.add_argument("--neighborhood", type=int, default=8)
    parser.add_argument("--spawn-probability", type=float, default=0.1)
    parser.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Geocoin: location-based coin collection")
    sub = parser.add_subparsers(dest="command")

    # --- Server mode (default) ---
    srv = sub.add_parser("serve", help="Start the FastAPI game server (default)")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    _add_world_args(srv)

    # --- Headless walk ---
    walk = sub.add_parser("walk", help="Run a headless walk and print nearby caches")
    walk.add_argument("moves_pos", nargs="?", default="", metavar="MOVES", help="Same as --moves")
    walk.add_argument("--moves", type=str, default=None, help="Letters N/S/E/W (move), T (take), G (give)")
    _add_world_args(walk)

    return parser


def _config_from_args(args: argparse.Namespace):
    from geocoin.config import GameConfig

    overrides = {}
    if args.lat is not None:
        overrides["start_lat"] = args.lat
    if args.lng is not None:
        overrides["start_lng"] = args.lng
    return GameConfig(
        world_seed=args.seed,
        neighborhood_size=args.neighborhood,
        cache_spawn_probability=args.spawn_probability,
        log_level=args.log_level,
        **overrides,
    )


def _run_server(args: argparse.Namespace) -> None:
    import uvicorn

    from geocoin.api.app import create_app

    app = create_app(_config_from_args(args))
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


def _nearest_cache_key(session) -> str | None:
    snap = session.snapshot()
    if not snap.caches:
        return None
    center = snap.center
    nearest = min(snap.caches, key=lambda v: (abs(v.cell.i - center.i) + abs(v.cell.j - center.j), v.key))
    return nearest.key


def _print_snapshot(header: str, snap) -> None:
    print(header)
    print(f"  Position ({snap.position.lat:.6f}, {snap.position.lng:.6f}) cell {snap.center.key}")
    for view in sorted(snap.caches, key=lambda v: (v.cell.i, v.cell.j)):
        print(f"    cache {view.key:>20}  {view.count:3d} coins")
    print(f"  {snap.inventory_status}")
    if snap.inventory:
        print("    " + " ".join(t.label for t in snap.inventory))


def _apply_step(session, step: int, letter: str) -> None:
    from geocoin.core.enums import Direction

    if letter in _WALK_MOVES:
        session.move(Direction[_WALK_MOVES[letter]])
    elif letter in ("T", "G"):
        key = _nearest_cache_key(session)
        if key is None:
            logger.warning("Step %d: no cache nearby", step)
            return
        token = session.take(key) if letter == "T" else session.give(key)
        if token is None:
            logger.info("Step %d: nothing to %s at %s", step, "take" if letter == "T" else "give", key)
    else:
        logger.warning("Step %d: ignoring unknown move %r", step, letter)


def _run_walk(args: argparse.Namespace) -> None:
    from geocoin.engine.session import GameSession
    from geocoin.utils.logging import setup_logging

    config = _config_from_args(args)
    setup_logging(config.log_level)
    session = GameSession(config)

    moves = args.moves if args.moves is not None else args.moves_pos
    _print_snapshot("Start:", session.snapshot())
    for step, letter in enumerate(moves.upper(), start=1):
        _apply_step(session, step, letter)
        _print_snapshot(f"Step {step} ({letter}):", session.snapshot())


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Default to serve mode if no subcommand given
    if args.command is None:
        args = parser.parse_args(["serve"])
    if args.command == "serve":
        _run_server(args)
    elif args.command == "walk":
        _run_walk(args)


if __name__ == "__main__":
    main()
