"""Colour matrices, screen settings and viewport-centred screen transforms."""

from __future__ import annotations

from dataclasses import dataclass

from .coords import COORD_MANAGER, CoordinateManager, LogicalPosition, ScreenData, Viewport


@dataclass
class ColorMatrix:
    """An RGBA transformation to apply to a tile."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0
    apply_matrix: bool = False

    @classmethod
    def empty(cls) -> ColorMatrix:
        return cls(0.0, 0.0, 0.0, 0.0, True)

    def is_empty(self) -> bool:
        return self.r == 0 and self.g == 0 and self.b == 0 and self.a == 0


GREEN_COLOR_MATRIX = ColorMatrix(0, 1, 0, 1, True)
RED_COLOR_MATRIX = ColorMatrix(1, 0, 0, 1, True)

SCREEN_INFO = ScreenData.default()
COORDINATES = COORD_MANAGER

VIEWABLE_SQUARE_SIZE = 30
MAP_SCROLLING_ENABLED = True
STATS_UI_OFFSET = 1000


def offset_from_center(
    center_x: int, center_y: int, tile_x: int, tile_y: int, screen_data: ScreenData
) -> tuple[float, float]:
    """Screen position of a tile pixel position when the view is centred on a tile."""
    scale = screen_data.scale_factor
    offset_x = screen_data.screen_width / 2 - float(center_x * screen_data.tile_size) * scale
    offset_y = screen_data.screen_height / 2 - float(center_y * screen_data.tile_size) * scale
    return float(tile_x) * scale + offset_x, float(tile_y) * scale + offset_y


def transform_pixel_position(
    player_x: int, player_y: int, cursor_x: int, cursor_y: int, screen_data: ScreenData
) -> tuple[int, int]:
    """Map a screen cursor to the pixel position of the tile under it."""
    manager = CoordinateManager(screen_data)
    viewport = Viewport(manager, LogicalPosition(player_x, player_y))
    pixel = manager.logical_to_pixel(viewport.screen_to_logical(cursor_x, cursor_y))
    return pixel.x, pixel.y