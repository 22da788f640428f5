"""Logical and pixel positions, coordinate conversion and the viewport."""

from __future__ import annotations

from dataclasses import dataclass


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _tmod(a: int, b: int) -> int:
    """Remainder carrying the sign of the dividend."""
    return a - b * _tdiv(a, b)


@dataclass
class LogicalPosition:
    """A position in the game world, in tiles."""

    x: int = 0
    y: int = 0

    def is_equal(self, other: LogicalPosition) -> bool:
        return self.x == other.x and self.y == other.y

    def manhattan_distance(self, other: LogicalPosition) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def chebyshev_distance(self, other: LogicalPosition) -> int:
        return max(abs(self.x - other.x), abs(self.y - other.y))

    def in_range(self, other: LogicalPosition, distance: int) -> bool:
        """True if other lies within the given Manhattan distance."""
        return self.manhattan_distance(other) <= distance


@dataclass
class PixelPosition:
    """A position in screen pixels, used only for rendering."""

    x: int = 0
    y: int = 0


@dataclass
class ScreenData:
    """Screen and map dimensions the coordinate system is built from."""

    screen_width: int = 0
    screen_height: int = 0
    tile_size: int = 0
    dungeon_width: int = 0
    dungeon_height: int = 0
    scale_factor: int = 0
    level_width: int = 0
    level_height: int = 0
    padding_right: int = 0

    @classmethod
    def default(cls) -> ScreenData:
        tile_size = 32
        dungeon_width = 100
        dungeon_height = 80
        return cls(
            tile_size=tile_size,
            dungeon_width=dungeon_width,
            dungeon_height=dungeon_height,
            scale_factor=3,
            level_width=dungeon_width * tile_size,
            level_height=dungeon_height * tile_size,
            padding_right=500,
        )

    def canvas_width(self) -> int:
        return self.tile_size * self.dungeon_width + self.padding_right

    def canvas_height(self) -> int:
        return self.tile_size * self.dungeon_height


class CoordinateManager:
    """Converts between logical, pixel and flat-index coordinates."""

    def __init__(self, screen_data: ScreenData | None = None) -> None:
        data = screen_data if screen_data is not None else ScreenData.default()
        self.dungeon_width = data.dungeon_width
        self.dungeon_height = data.dungeon_height
        self.tile_size = data.tile_size
        self.scale_factor = data.scale_factor
        self.screen_width = data.screen_width
        self.screen_height = data.screen_height

    def logical_to_index(self, pos: LogicalPosition) -> int:
        return pos.y * self.dungeon_width + pos.x

    def index_to_logical(self, index: int) -> LogicalPosition:
        return LogicalPosition(
            _tmod(index, self.dungeon_width), _tdiv(index, self.dungeon_width)
        )

    def logical_to_pixel(self, pos: LogicalPosition) -> PixelPosition:
        return PixelPosition(pos.x * self.tile_size, pos.y * self.tile_size)

    def index_to_pixel(self, index: int) -> PixelPosition:
        return self.logical_to_pixel(self.index_to_logical(index))

    def pixel_to_logical(self, pos: PixelPosition) -> LogicalPosition:
        return LogicalPosition(
            _tdiv(pos.x, self.tile_size), _tdiv(pos.y, self.tile_size)
        )

    def is_valid_logical(self, pos: LogicalPosition) -> bool:
        return 0 <= pos.x < self.dungeon_width and 0 <= pos.y < self.dungeon_height

    def tile_positions(self, indices) -> list[LogicalPosition]:
        return [self.index_to_logical(i) for i in indices]


COORD_MANAGER = CoordinateManager(ScreenData.default())


class Viewport:
    """Camera centred on a logical position, mapping the world to the screen."""

    def __init__(self, manager: CoordinateManager, center: LogicalPosition) -> None:
        self.manager = manager
        self.center_x = center.x
        self.center_y = center.y

    def set_center(self, pos: LogicalPosition) -> None:
        self.center_x = pos.x
        self.center_y = pos.y

    def _offset(self) -> tuple[float, float]:
        m = self.manager
        offset_x = m.screen_width / 2 - float(self.center_x * m.tile_size) * m.scale_factor
        offset_y = m.screen_height / 2 - float(self.center_y * m.tile_size) * m.scale_factor
        return offset_x, offset_y

    def logical_to_screen(self, pos: LogicalPosition) -> tuple[float, float]:
        m = self.manager
        offset_x, offset_y = self._offset()
        scaled_x = float(pos.x * m.tile_size) * m.scale_factor
        scaled_y = float(pos.y * m.tile_size) * m.scale_factor
        return scaled_x + offset_x, scaled_y + offset_y

    def screen_to_logical(self, screen_x: int, screen_y: int) -> LogicalPosition:
        m = self.manager
        offset_x, offset_y = self._offset()
        pixel_x = (screen_x - offset_x) / m.scale_factor
        pixel_y = (screen_y - offset_y) / m.scale_factor
        return m.pixel_to_logical(PixelPosition(int(pixel_x), int(pixel_y)))


@dataclass
class DrawableSection:
    """A square section of the map in logical coordinates."""

    start_x: int
    start_y: int
    end_x: int
    end_y: int

    @classmethod
    def centered(cls, center_x: int, center_y: int, size: int) -> DrawableSection:
        half = _tdiv(size, 2)
        return cls(center_x - half, center_y - half, center_x + half, center_y + half)