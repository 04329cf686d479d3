"""Game configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    """Immutable configuration for a game session."""

    # World generation
    world_seed: int = 0                    # xxhash seed, fixed so worlds replay identically
    tile_degrees: float = 1e-4             # Angular size of one grid cell
    neighborhood_size: int = 8             # Window is [-N, N) cells around the player
    cache_spawn_probability: float = 0.1
    max_initial_tokens: int = 100          # Initial count = floor(luck * max_initial_tokens)

    # Player start (Oakes College classroom)
    start_lat: float = 36.98949379578401
    start_lng: float = -122.06277128548504

    # Rendering hints
    zoom_level: int = 19

    # Event feed
    event_log_limit: int = 500

    # Logging
    log_level: str = "INFO"
