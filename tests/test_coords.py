import pytest

from towerrl.coords import (
    COORD_MANAGER,
    CoordinateManager,
    DrawableSection,
    LogicalPosition,
    PixelPosition,
    ScreenData,
    Viewport,
)


def test_default_screen_data_values():
    sd = ScreenData.default()
    assert sd.dungeon_width == 100
    assert sd.dungeon_height == 80
    assert sd.tile_size == 32
    assert sd.scale_factor == 3
    assert sd.padding_right == 500


def test_canvas_size_matches_level_size():
    sd = ScreenData.default()
    assert sd.canvas_height() == sd.level_height
    assert sd.canvas_width() == sd.level_width + sd.padding_right


@pytest.mark.parametrize("x,y", [(0, 0), (5, 7), (99, 79), (40, 45)])
def test_index_round_trip(x, y):
    pos = LogicalPosition(x, y)
    assert COORD_MANAGER.index_to_logical(COORD_MANAGER.logical_to_index(pos)) == pos


@pytest.mark.parametrize("x,y", [(0, 0), (3, 9), (42, 17)])
def test_pixel_round_trip(x, y):
    pos = LogicalPosition(x, y)
    assert COORD_MANAGER.pixel_to_logical(COORD_MANAGER.logical_to_pixel(pos)) == pos


def test_pixel_inside_tile_maps_to_tile():
    size = COORD_MANAGER.tile_size
    pixel = PixelPosition(size * 4 + size - 1, size * 6 + 1)
    assert COORD_MANAGER.pixel_to_logical(pixel) == LogicalPosition(4, 6)


def test_index_to_pixel_agrees_with_logical_to_pixel():
    pos = LogicalPosition(12, 34)
    index = COORD_MANAGER.logical_to_index(pos)
    assert COORD_MANAGER.index_to_pixel(index) == COORD_MANAGER.logical_to_pixel(pos)


def test_is_valid_logical_bounds():
    cm = COORD_MANAGER
    assert cm.is_valid_logical(LogicalPosition(0, 0))
    assert cm.is_valid_logical(LogicalPosition(cm.dungeon_width - 1, cm.dungeon_height - 1))
    assert not cm.is_valid_logical(LogicalPosition(-1, 0))
    assert not cm.is_valid_logical(LogicalPosition(cm.dungeon_width, 0))
    assert not cm.is_valid_logical(LogicalPosition(0, cm.dungeon_height))


def test_tile_positions_round_trip():
    indices = [0, 17, 250, 7999]
    positions = COORD_MANAGER.tile_positions(indices)
    assert [COORD_MANAGER.logical_to_index(p) for p in positions] == indices
    assert COORD_MANAGER.tile_positions([]) == []


def test_distances_worked_example():
    a = LogicalPosition(0, 0)
    b = LogicalPosition(3, 4)
    assert a.manhattan_distance(b) == 7
    assert a.chebyshev_distance(b) == 4


def test_distance_invariants():
    a = LogicalPosition(-2, 5)
    b = LogicalPosition(6, -1)
    assert a.manhattan_distance(b) == b.manhattan_distance(a)
    assert a.chebyshev_distance(b) <= a.manhattan_distance(b)
    assert a.manhattan_distance(a) == a.chebyshev_distance(a) == 0


def test_in_range_is_inclusive():
    a = LogicalPosition(1, 1)
    b = LogicalPosition(4, 6)
    d = a.manhattan_distance(b)
    assert a.in_range(b, d)
    assert not a.in_range(b, d - 1)


def test_is_equal():
    assert LogicalPosition(2, 3).is_equal(LogicalPosition(2, 3))
    assert not LogicalPosition(2, 3).is_equal(LogicalPosition(3, 2))


@pytest.fixture
def viewport():
    sd = ScreenData(
        screen_width=800,
        screen_height=600,
        tile_size=32,
        dungeon_width=100,
        dungeon_height=80,
        scale_factor=3,
    )
    return Viewport(CoordinateManager(sd), LogicalPosition(10, 10))


@pytest.mark.parametrize("x,y", [(10, 10), (12, 8), (0, 0), (30, 25)])
def test_viewport_round_trip(viewport, x, y):
    pos = LogicalPosition(x, y)
    sx, sy = viewport.logical_to_screen(pos)
    assert viewport.screen_to_logical(int(sx), int(sy)) == pos


def test_viewport_center_maps_to_same_screen_point(viewport):
    before = viewport.logical_to_screen(LogicalPosition(10, 10))
    viewport.set_center(LogicalPosition(20, 5))
    assert viewport.logical_to_screen(LogicalPosition(20, 5)) == before


def test_drawable_section_is_centered():
    section = DrawableSection.centered(10, 20, 6)
    assert section.end_x - section.start_x == 6
    assert section.end_y - section.start_y == 6
    assert (section.start_x + section.end_x) // 2 == 10
    assert (section.start_y + section.end_y) // 2 == 20