"""
Test suite for the Grid model.

Tests cover:
- Constructor, dimensions and default start/end placement
- Dimension validation and narrow grids
- Cell lookup, iteration order and bounds checking
- Start/end placement rules
- Wall and weight toggling
- Clearing walls and search state
- Resize
- Neighbor queries, with and without diagonal movement
- Public state snapshot and invariant validation
- Responsive size presets
"""

import math

import pytest
from gridwalk import (
    CellKind,
    Grid,
    GridConfig,
    GridError,
    InvalidConfigurationError,
    InvalidDimensionError,
    OutOfBoundsError,
    default_endpoints,
    dimensions_for_width,
)


class TestGridConstruction:
    """Test Grid initialization and properties."""

    def test_constructor_sets_dimensions(self):
        grid = Grid(10, 12)
        assert grid.rows == 10
        assert grid.cols == 12
        assert len(grid) == 120

    def test_default_start_and_end(self):
        grid = Grid(20, 25)
        assert grid.start_cell.coord == (10, 6)
        assert grid.end_cell.coord == (10, 18)
        assert grid.start_cell.is_start
        assert grid.end_cell.is_end

    def test_toggles_default_off(self):
        grid = Grid(5, 5)
        assert grid.allow_diagonal is False
        assert grid.use_weighted_nodes is False

    def test_cells_start_with_defaults(self):
        grid = Grid(4, 4)
        for cell in grid:
            assert cell.is_wall is False
            assert cell.is_weighted is False
            assert cell.weight == 1.0
            assert cell.visited is False
            assert cell.distance == math.inf
            assert cell.g == math.inf
            assert cell.f == math.inf
            assert cell.h == math.inf
            assert cell.came_from is None

    def test_default_config(self):
        grid = Grid(5, 5)
        assert grid.config == GridConfig()


class TestGridDimensions:
    """Test dimension validation."""

    @pytest.mark.parametrize("rows, cols", [(0, 5), (5, 0), (-1, 5), (5, -3)])
    def test_non_positive_dimensions_raise(self, rows, cols):
        with pytest.raises(InvalidDimensionError):
            Grid(rows, cols)

    def test_dimension_error_is_value_error(self):
        with pytest.raises(ValueError):
            Grid(0, 0)

    def test_dimension_error_is_grid_error(self):
        with pytest.raises(GridError):
            Grid(0, 3)

    def test_single_cell_grid_raises(self):
        with pytest.raises(InvalidDimensionError, match="distinct start and end"):
            Grid(1, 1)

    def test_one_by_two_grid(self):
        grid = Grid(1, 2)
        assert grid.start_cell.coord == (0, 0)
        assert grid.end_cell.coord == (0, 1)

    def test_single_column_grid_moves_end(self):
        grid = Grid(2, 1)
        assert grid.start_cell.coord == (1, 0)
        assert grid.end_cell.coord == (0, 0)

    def test_default_endpoints_never_collide(self):
        for rows in range(1, 6):
            for cols in range(1, 6):
                if rows * cols < 2:
                    continue
                start, end = default_endpoints(rows, cols)
                assert start != end


class TestGridLookup:
    """Test cell access."""

    def test_cell_returns_matching_coordinates(self):
        grid = Grid(5, 7)
        cell = grid.cell(3, 4)
        assert (cell.row, cell.col) == (3, 4)

    def test_iteration_is_row_major(self):
        grid = Grid(3, 4)
        coords = [cell.coord for cell in grid]
        assert coords[:5] == [(0, 0), (0, 1), (0, 2), (0, 3), (1, 0)]
        assert coords[-1] == (2, 3)

    def test_in_bounds(self):
        grid = Grid(3, 4)
        assert grid.in_bounds(0, 0)
        assert grid.in_bounds(2, 3)
        assert not grid.in_bounds(3, 0)
        assert not grid.in_bounds(0, 4)
        assert not grid.in_bounds(-1, 0)

    @pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (5, 0), (0, 5)])
    def test_cell_out_of_bounds_raises(self, row, col):
        grid = Grid(5, 5)
        with pytest.raises(OutOfBoundsError):
            grid.cell(row, col)

    def test_out_of_bounds_message(self):
        grid = Grid(5, 5)
        with pytest.raises(OutOfBoundsError, match=r"\(7, 1\) out of bounds for 5x5"):
            grid.cell(7, 1)


class TestStartEndPlacement:
    """Test set_start / set_end."""

    def test_set_start_moves_flag(self):
        grid = Grid(10, 10)
        old = grid.start_cell
        grid.set_start(0, 0)
        assert old.is_start is False
        assert grid.start_cell.coord == (0, 0)
        assert grid.cell(0, 0).is_start

    def test_set_end_moves_flag(self):
        grid = Grid(10, 10)
        old = grid.end_cell
        grid.set_end(9, 9)
        assert old.is_end is False
        assert grid.end_cell is grid.cell(9, 9)

    def test_set_start_on_end_rejected(self):
        grid = Grid(10, 10)
        end = grid.end_cell.coord
        start = grid.start_cell.coord
        with pytest.raises(InvalidConfigurationError):
            grid.set_start(*end)
        assert grid.start_cell.coord == start
        assert grid.cell(*start).is_start
        assert not grid.cell(*end).is_start

    def test_set_end_on_start_rejected(self):
        grid = Grid(10, 10)
        start = grid.start_cell.coord
        with pytest.raises(InvalidConfigurationError):
            grid.set_end(*start)
        assert grid.end_cell.coord == (5, 7)

    def test_set_start_out_of_bounds(self):
        grid = Grid(10, 10)
        with pytest.raises(OutOfBoundsError):
            grid.set_start(10, 0)
        assert grid.start_cell.coord == (5, 2)
        assert grid.start_cell.is_start

    def test_set_end_out_of_bounds(self):
        grid = Grid(10, 10)
        with pytest.raises(OutOfBoundsError):
            grid.set_end(0, -1)
        assert grid.end_cell.coord == (5, 7)

    def test_set_start_on_wall_clears_wall(self):
        grid = Grid(10, 10)
        grid.toggle_wall(1, 1)
        grid.set_start(1, 1)
        assert grid.cell(1, 1).is_wall is False
        assert grid.cell(1, 1).is_start

    def test_set_end_on_weight_clears_weight(self):
        grid = Grid(10, 10, use_weighted_nodes=True)
        grid.toggle_weighted(1, 1)
        grid.set_end(1, 1)
        cell = grid.cell(1, 1)
        assert cell.is_weighted is False
        assert cell.weight == 1.0


class TestToggleWall:
    """Test wall authoring."""

    def test_toggle_wall_sets_wall(self):
        grid = Grid(5, 5)
        grid.toggle_wall(0, 0)
        assert grid.cell(0, 0).is_wall

    def test_toggle_wall_twice_restores(self):
        grid = Grid(5, 5)
        grid.toggle_wall(0, 0)
        grid.toggle_wall(0, 0)
        cell = grid.cell(0, 0)
        assert cell.is_wall is False
        assert cell.weight == 1.0

    def test_toggle_wall_ignored_on_start(self):
        grid = Grid(5, 5)
        grid.toggle_wall(*grid.start_cell.coord)
        assert grid.start_cell.is_wall is False

    def test_toggle_wall_ignored_on_end(self):
        grid = Grid(5, 5)
        grid.toggle_wall(*grid.end_cell.coord)
        assert grid.end_cell.is_wall is False

    def test_toggle_wall_clears_weight(self):
        grid = Grid(5, 5, use_weighted_nodes=True)
        grid.toggle_weighted(0, 0)
        grid.toggle_wall(0, 0)
        cell = grid.cell(0, 0)
        assert cell.is_wall
        assert cell.is_weighted is False
        assert cell.weight == 1.0

    def test_toggle_wall_out_of_bounds(self):
        grid = Grid(5, 5)
        with pytest.raises(OutOfBoundsError):
            grid.toggle_wall(5, 5)


class TestToggleWeighted:
    """Test weight authoring."""

    def test_noop_when_disabled(self):
        grid = Grid(5, 5)
        grid.toggle_weighted(0, 0)
        cell = grid.cell(0, 0)
        assert cell.is_weighted is False
        assert cell.weight == 1.0

    def test_sets_weight_when_enabled(self):
        grid = Grid(5, 5, use_weighted_nodes=True)
        grid.toggle_weighted(0, 0)
        cell = grid.cell(0, 0)
        assert cell.is_weighted
        assert cell.weight == 5.0

    def test_custom_weighted_cost(self):
        grid = Grid(5, 5, use_weighted_nodes=True, config=GridConfig(weighted_cost=3.0))
        grid.toggle_weighted(0, 0)
        assert grid.cell(0, 0).weight == 3.0

    def test_toggle_twice_restores(self):
        grid = Grid(5, 5, use_weighted_nodes=True)
        grid.toggle_weighted(0, 0)
        grid.toggle_weighted(0, 0)
        cell = grid.cell(0, 0)
        assert cell.is_weighted is False
        assert cell.weight == 1.0

    def test_clears_wall(self):
        grid = Grid(5, 5, use_weighted_nodes=True)
        grid.toggle_wall(0, 0)
        grid.toggle_weighted(0, 0)
        cell = grid.cell(0, 0)
        assert cell.is_wall is False
        assert cell.is_weighted

    def test_ignored_on_start_and_end(self):
        grid = Grid(5, 5, use_weighted_nodes=True)
        grid.toggle_weighted(*grid.start_cell.coord)
        grid.toggle_weighted(*grid.end_cell.coord)
        assert grid.start_cell.is_weighted is False
        assert grid.end_cell.is_weighted is False

    def test_enabling_later(self):
        grid = Grid(5, 5)
        grid.use_weighted_nodes = True
        grid.toggle_weighted(0, 0)
        assert grid.cell(0, 0).is_weighted


class TestClearing:
    """Test clear_walls and clear_search_state."""

    def test_clear_walls_resets_roles(self):
        grid = Grid(5, 5, use_weighted_nodes=True)
        grid.toggle_wall(0, 0)
        grid.toggle_weighted(0, 1)
        grid.clear_walls()
        assert all(not c.is_wall and not c.is_weighted and c.weight == 1.0 for c in grid)

    def test_clear_walls_keeps_start_end(self):
        grid = Grid(5, 5)
        grid.set_start(0, 0)
        grid.set_end(4, 4)
        grid.clear_walls()
        assert grid.start_cell.coord == (0, 0)
        assert grid.end_cell.coord == (4, 4)
        assert grid.cell(0, 0).is_start
        assert grid.cell(4, 4).is_end

    def test_clear_walls_resets_search_state(self):
        grid = Grid(5, 5)
        cell = grid.cell(1, 1)
        cell.visited = True
        cell.distance = 3.0
        cell.came_from = (1, 0)
        grid.clear_walls()
        assert cell.visited is False
        assert cell.distance == math.inf
        assert cell.came_from is None

    def test_clear_search_state_keeps_walls(self):
        grid = Grid(5, 5)
        grid.toggle_wall(0, 0)
        cell = grid.cell(1, 1)
        cell.visited = True
        cell.f = 2.0
        grid.clear_search_state()
        assert grid.cell(0, 0).is_wall
        assert cell.visited is False
        assert cell.f == math.inf


class TestResize:
    """Test grid reallocation."""

    def test_resize_changes_dimensions(self):
        grid = Grid(10, 10)
        grid.resize(4, 8)
        assert grid.rows == 4
        assert grid.cols == 8
        assert len(grid) == 32

    def test_resize_rederives_endpoints(self):
        grid = Grid(10, 10)
        grid.set_start(0, 0)
        grid.resize(4, 8)
        assert grid.start_cell.coord == (2, 2)
        assert grid.end_cell.coord == (2, 6)

    def test_resize_discards_walls(self):
        grid = Grid(10, 10)
        grid.toggle_wall(1, 1)
        grid.resize(10, 10)
        assert not any(c.is_wall for c in grid)

    def test_resize_keeps_toggles(self):
        grid = Grid(10, 10, allow_diagonal=True, use_weighted_nodes=True)
        grid.resize(6, 6)
        assert grid.allow_diagonal
        assert grid.use_weighted_nodes

    def test_invalid_resize_leaves_grid_untouched(self):
        grid = Grid(10, 10)
        grid.toggle_wall(1, 1)
        with pytest.raises(InvalidDimensionError):
            grid.resize(0, 10)
        assert grid.rows == 10
        assert grid.cell(1, 1).is_wall


class TestNeighbors:
    """Test neighbor computation."""

    def test_center_orthogonal_order(self):
        grid = Grid(3, 3)
        coords = [c.coord for c in grid.neighbors(grid.cell(1, 1))]
        assert coords == [(0, 1), (2, 1), (1, 0), (1, 2)]

    def test_corner_has_two_neighbors(self):
        grid = Grid(3, 3)
        coords = [c.coord for c in grid.neighbors(grid.cell(0, 0))]
        assert coords == [(1, 0), (0, 1)]

    def test_walls_excluded(self):
        grid = Grid(3, 3)
        grid.toggle_wall(0, 1)
        coords = [c.coord for c in grid.neighbors(grid.cell(1, 1))]
        assert (0, 1) not in coords
        assert len(coords) == 3

    def test_diagonals_appended_after_orthogonals(self):
        grid = Grid(3, 3, allow_diagonal=True)
        coords = [c.coord for c in grid.neighbors(grid.cell(1, 1))]
        assert coords == [
            (0, 1), (2, 1), (1, 0), (1, 2),
            (0, 0), (0, 2), (2, 0), (2, 2),
        ]

    def test_diagonal_excluded_when_framing_cell_is_wall(self):
        grid = Grid(3, 3, allow_diagonal=True)
        grid.toggle_wall(0, 1)
        coords = [c.coord for c in grid.neighbors(grid.cell(1, 1))]
        # (0, 1) frames both upper diagonals
        assert (0, 0) not in coords
        assert (0, 2) not in coords
        assert (2, 0) in coords
        assert (2, 2) in coords

    def test_diagonal_excluded_when_one_side_blocked(self):
        grid = Grid(4, 4, allow_diagonal=True)
        grid.toggle_wall(1, 0)
        coords = [c.coord for c in grid.neighbors(grid.cell(1, 1))]
        assert (0, 0) not in coords
        assert (2, 0) not in coords
        assert (0, 2) in coords
        assert (2, 2) in coords

    def test_diagonal_wall_never_returned(self):
        grid = Grid(3, 3, allow_diagonal=True)
        grid.toggle_wall(2, 2)
        coords = [c.coord for c in grid.neighbors(grid.cell(1, 1))]
        assert (2, 2) not in coords

    def test_neighbors_ignore_visited_state(self):
        grid = Grid(3, 3, allow_diagonal=True)
        grid.cell(0, 1).visited = True
        coords = [c.coord for c in grid.neighbors(grid.cell(1, 1))]
        assert (0, 0) in coords
        assert (0, 1) in coords

    def test_no_wall_ever_returned(self):
        grid = Grid(6, 6, allow_diagonal=True)
        for row, col in [(0, 0), (1, 2), (2, 3), (3, 3), (4, 1), (5, 5)]:
            grid.toggle_wall(row, col)
        for cell in grid:
            assert all(not n.is_wall for n in grid.neighbors(cell))


class TestSnapshotAndValidation:
    """Test states() and validate()."""

    def test_states_cover_every_cell(self):
        grid = Grid(3, 4)
        assert len(grid.states()) == 12

    def test_states_report_kinds(self):
        grid = Grid(3, 4, use_weighted_nodes=True)
        grid.toggle_wall(0, 0)
        grid.toggle_weighted(0, 1)
        states = {(s.row, s.col): s for s in grid.states()}
        assert states[(0, 0)].kind is CellKind.WALL
        assert states[(0, 1)].kind is CellKind.WEIGHT
        assert states[(0, 1)].weight == 5.0
        assert states[grid.start_cell.coord].kind is CellKind.START
        assert states[grid.end_cell.coord].kind is CellKind.END
        assert states[(2, 3)].kind is CellKind.EMPTY

    def test_states_are_frozen(self):
        state = Grid(3, 3).states()[0]
        with pytest.raises(AttributeError):
            state.row = 2

    def test_validate_passes_on_fresh_grid(self):
        Grid(5, 5).validate()

    def test_validate_rejects_duplicate_start(self):
        grid = Grid(5, 5)
        grid.cell(0, 0).is_start = True
        with pytest.raises(InvalidConfigurationError, match="2 start"):
            grid.validate()

    def test_validate_rejects_missing_end(self):
        grid = Grid(5, 5)
        grid.end_cell.is_end = False
        with pytest.raises(InvalidConfigurationError):
            grid.validate()


class TestDimensionsForWidth:
    """Test responsive size presets."""

    @pytest.mark.parametrize(
        "width, expected",
        [
            (320, (10, 10)),
            (479, (10, 10)),
            (480, (15, 15)),
            (767, (15, 15)),
            (768, (15, 20)),
            (1199, (15, 20)),
            (1200, (20, 25)),
            (1920, (20, 25)),
        ],
    )
    def test_presets(self, width, expected):
        assert dimensions_for_width(width) == expected
