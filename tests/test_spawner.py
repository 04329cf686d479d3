"""Tests for the neighborhood spawner: window shape, generation, and continuity."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from geocoin.config import GameConfig
from geocoin.core.cells import CellRegistry, GridCell, LatLng
from geocoin.core.directory import CacheDirectory
from geocoin.core.tokens import Token
from geocoin.systems.rng import DeterministicRNG
from geocoin.systems.spawner import NeighborhoodSpawner
from tests.helpers.fakes import FixedLuckRNG, RecordingRenderer, RecordingRNG

# Center of cell (0, 0) and (2, 2) at the default tile size
ORIGIN = LatLng(0.00005, 0.00005)
CELL_2_2 = LatLng(0.00025, 0.00025)


def _build(rng=None, renderer=None, **cfg_overrides):
    cfg = GameConfig(**cfg_overrides)
    cells = CellRegistry(cfg.tile_degrees)
    directory = CacheDirectory()
    spawner = NeighborhoodSpawner(cfg, cells, directory, rng or DeterministicRNG(cfg.world_seed), renderer)
    return spawner, cells, directory


class TestNeighborhoodWindow:
    def test_evaluates_exactly_closed_open_window(self):
        rng = RecordingRNG()
        spawner, _, _ = _build(rng=rng)
        spawner.refresh(ORIGIN)
        evaluated = rng.spawn_keys()
        expected = {(i, j) for i in range(-8, 8) for j in range(-8, 8)}
        assert set(evaluated) == expected
        assert len(evaluated) == 256  # each cell evaluated once

    def test_window_is_asymmetric(self):
        """Offsets run [-N, N): row/column -N is included, +N is not."""
        rng = RecordingRNG()
        spawner, _, _ = _build(rng=rng)
        spawner.refresh(ORIGIN)
        evaluated = set(rng.spawn_keys())
        assert (-8, -8) in evaluated
        assert (7, 7) in evaluated
        assert (8, 0) not in evaluated
        assert (0, 8) not in evaluated

    def test_window_follows_center_cell(self):
        spawner, cells, _ = _build(neighborhood_size=2)
        center = cells.get_cell(10, -4)
        assert list(spawner.neighborhood(center)) == [
            (8, -6), (8, -5), (8, -4), (8, -3),
            (9, -6), (9, -5), (9, -4), (9, -3),
            (10, -6), (10, -5), (10, -4), (10, -3),
            (11, -6), (11, -5), (11, -4), (11, -3),
        ]

    def test_no_spawn_outside_window(self):
        spawner, _, _ = _build(rng=FixedLuckRNG())
        spawner.refresh(ORIGIN)
        assert len(spawner) == 256
        for cache in spawner.live.values():
            assert -8 <= cache.position.i < 8
            assert -8 <= cache.position.j < 8


class TestGeneration:
    def test_only_lucky_cells_spawn(self):
        spawner, _, _ = _build()
        spawner.refresh(ORIGIN)
        for cache in spawner.live.values():
            assert spawner.should_spawn(cache.position.i, cache.position.j)
        unspawned = [
            (i, j) for i in range(-8, 8) for j in range(-8, 8)
            if f"{i},{j}" not in spawner.live
        ]
        assert not any(spawner.should_spawn(i, j) for i, j in unspawned)

    def test_zero_probability_spawns_nothing(self):
        spawner, _, _ = _build(cache_spawn_probability=0.0)
        assert spawner.refresh(ORIGIN) == []

    def test_fresh_cache_has_dense_serials(self):
        spawner, _, _ = _build()
        spawner.refresh(ORIGIN)
        for cache in spawner.live.values():
            n = spawner.initial_token_count(cache.position.i, cache.position.j)
            assert [t.serial for t in cache.tokens] == list(range(n))
            assert all(t.cell == cache.position for t in cache.tokens)

    def test_size_draw_is_independent_of_spawn_draw(self):
        """A cell that barely spawns can still be large, and vice versa."""
        spawner, _, _ = _build(rng=FixedLuckRNG(spawn_luck=0.0, size_luck=0.999))
        spawner.refresh(ORIGIN)
        assert all(len(c) == 99 for c in spawner.live.values())

    def test_live_caches_use_canonical_cells(self):
        spawner, cells, _ = _build(rng=FixedLuckRNG())
        spawner.refresh(ORIGIN)
        cache = spawner.get("2,2")
        assert cache.position is cells.get_cell(2, 2)
        assert cache.bounds == cells.bounds(cells.get_cell(2, 2))

    def test_refresh_is_reproducible(self):
        a, _, _ = _build()
        b, _, _ = _build()
        a.refresh(ORIGIN)
        b.refresh(ORIGIN)
        assert sorted(a.live) == sorted(b.live)
        for key in a.live:
            assert a.get(key).tokens == b.get(key).tokens


class TestTeardownContinuity:
    def test_collected_token_stays_gone_after_respawn(self):
        spawner, _, directory = _build(rng=FixedLuckRNG(size_luck=0.035), neighborhood_size=1)
        spawner.refresh(CELL_2_2)
        cache = spawner.get("2,2")
        a, b, c = (Token(cache.position, s) for s in range(3))
        assert cache.tokens == [a, b, c]

        cache.remove_token(a)
        spawner.clear()
        assert spawner.get("2,2") is None
        assert "2,2" in directory

        spawner.refresh(CELL_2_2)
        respawned = spawner.get("2,2")
        assert respawned is not cache
        assert respawned.tokens == [b, c]

    def test_clear_captures_every_live_cache(self):
        spawner, _, directory = _build(rng=FixedLuckRNG(), neighborhood_size=2)
        spawner.refresh(ORIGIN)
        keys = set(spawner.live)
        assert spawner.clear() == 16
        assert set(directory) == keys
        assert len(spawner) == 0

    def test_discard_does_not_capture(self):
        spawner, _, directory = _build(rng=FixedLuckRNG(), neighborhood_size=2)
        spawner.refresh(ORIGIN)
        spawner.discard()
        assert len(directory) == 0
        assert len(spawner) == 0

    def test_memento_wins_over_generation(self):
        spawner, _, directory = _build(rng=FixedLuckRNG(size_luck=0.05), neighborhood_size=1)
        spawner.refresh(CELL_2_2)
        cache = spawner.get("2,2")
        cache.add_token(Token(GridCell(40, 40), 0))
        spawner.clear()
        spawner.refresh(CELL_2_2)
        assert spawner.get("2,2").top.label == "40:40#0"
        assert len(spawner.get("2,2")) == 6


class TestRendererHooks:
    def test_draw_on_spawn_and_erase_on_clear(self):
        renderer = RecordingRenderer()
        spawner, _, _ = _build(rng=FixedLuckRNG(), renderer=renderer, neighborhood_size=1)
        spawner.refresh(ORIGIN)
        assert sorted(v.key for v in renderer.drawn) == ["-1,-1", "-1,0", "0,-1", "0,0"]
        assert all(v.count == 3 for v in renderer.drawn)
        spawner.clear()
        assert sorted(renderer.erased) == ["-1,-1", "-1,0", "0,-1", "0,0"]

    def test_redraw_reports_current_contents(self):
        renderer = RecordingRenderer()
        spawner, _, _ = _build(rng=FixedLuckRNG(), renderer=renderer, neighborhood_size=1)
        spawner.refresh(ORIGIN)
        cache = spawner.get("0,0")
        cache.remove_token(cache.top)
        spawner.redraw(cache)
        assert renderer.drawn[-1].key == "0,0"
        assert renderer.drawn[-1].count == 2
