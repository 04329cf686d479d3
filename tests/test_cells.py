"""Tests for coordinate quantization and the flyweight cell registry."""

import pytest

from geocoin.core.cells import CellBounds, CellRegistry, GridCell, LatLng, parse_cell_key, quantize


class TestQuantize:
    def test_positive_coordinates_floor(self):
        assert quantize(36.98949379578401, 12.34567, 1e-4) == (369894, 123456)

    def test_negative_coordinates_floor_toward_negative_infinity(self):
        # Truncation would give -1220627; floor must give -1220628
        i, j = quantize(-0.00005, -122.06277128548504, 1e-4)
        assert i == -1
        assert j == -1220628

    def test_origin_tiles_do_not_alias_across_sign(self):
        assert quantize(0.00001, 0.00001, 1e-4) == (0, 0)
        assert quantize(-0.00001, -0.00001, 1e-4) == (-1, -1)

    def test_tile_boundary_belongs_to_upper_tile(self):
        assert quantize(0.0, 0.0, 1.0) == (0, 0)
        assert quantize(2.0, -3.0, 1.0) == (2, -3)

    def test_custom_tile_size(self):
        assert quantize(10.0, -10.0, 3.0) == (3, -4)


class TestCellRegistry:
    def test_same_pair_returns_identical_instance(self):
        reg = CellRegistry()
        assert reg.get_cell(3, -5) is reg.get_cell(3, -5)

    def test_different_pairs_are_different_cells(self):
        reg = CellRegistry()
        assert reg.get_cell(3, -5) is not reg.get_cell(3, -6)
        assert reg.get_cell(3, -5) != reg.get_cell(3, -6)

    def test_registry_creates_each_cell_once(self):
        reg = CellRegistry()
        for _ in range(5):
            reg.get_cell(1, 1)
            reg.get_cell(1, 2)
        assert len(reg) == 2
        assert (1, 2) in reg

    def test_cell_for_matches_quantize(self):
        reg = CellRegistry(1e-4)
        cell = reg.cell_for(36.98949379578401, -122.06277128548504)
        assert (cell.i, cell.j) == quantize(36.98949379578401, -122.06277128548504, 1e-4)
        assert cell is reg.get_cell(cell.i, cell.j)

    def test_bounds_cover_the_tile(self):
        reg = CellRegistry(1.0)
        b = reg.bounds(reg.get_cell(2, -3))
        assert b == CellBounds(south=2.0, west=-3.0, north=3.0, east=-2.0)
        assert b.contains(LatLng(2.5, -2.5))
        assert not b.contains(LatLng(3.0, -2.5))


class TestCellKeys:
    def test_key_format(self):
        assert GridCell(3, -5).key == "3,-5"

    def test_parse_round_trip(self):
        assert parse_cell_key(GridCell(-12, 40).key) == (-12, 40)

    @pytest.mark.parametrize("bad", ["", "3", "3,4,5", "a,b", "3;4"])
    def test_parse_rejects_malformed(self, bad):
        with pytest.raises(ValueError):
            parse_cell_key(bad)

    def test_cells_are_immutable(self):
        cell = GridCell(1, 2)
        with pytest.raises(Exception):
            cell.i = 5  # type: ignore
