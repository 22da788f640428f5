"""Tile-based area shapes (circles, rectangles, lines) and direction helpers."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import IntEnum

from .common import Quality
from .coords import COORD_MANAGER, LogicalPosition, PixelPosition


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


class ShapeDirection(IntEnum):
    LINE_UP = 0
    LINE_DOWN = 1
    LINE_RIGHT = 2
    LINE_LEFT = 3
    DIAGONAL_UP_RIGHT = 4
    DIAGONAL_DOWN_RIGHT = 5
    DIAGONAL_UP_LEFT = 6
    DIAGONAL_DOWN_LEFT = 7
    NO_DIRECTION = 8


ALL_DIRECTIONS: tuple[ShapeDirection, ...] = (
    ShapeDirection.LINE_UP,
    ShapeDirection.DIAGONAL_UP_RIGHT,
    ShapeDirection.LINE_RIGHT,
    ShapeDirection.DIAGONAL_DOWN_RIGHT,
    ShapeDirection.LINE_DOWN,
    ShapeDirection.DIAGONAL_DOWN_LEFT,
    ShapeDirection.LINE_LEFT,
    ShapeDirection.DIAGONAL_UP_LEFT,
)

_DIRECTION_DELTAS: dict[ShapeDirection, tuple[int, int]] = {
    ShapeDirection.LINE_UP: (0, -1),
    ShapeDirection.LINE_DOWN: (0, 1),
    ShapeDirection.LINE_RIGHT: (1, 0),
    ShapeDirection.LINE_LEFT: (-1, 0),
    ShapeDirection.DIAGONAL_UP_RIGHT: (1, -1),
    ShapeDirection.DIAGONAL_UP_LEFT: (-1, -1),
    ShapeDirection.DIAGONAL_DOWN_RIGHT: (1, 1),
    ShapeDirection.DIAGONAL_DOWN_LEFT: (-1, 1),
}


def _rotate(direction: ShapeDirection, step: int) -> ShapeDirection:
    if direction not in ALL_DIRECTIONS:
        return direction
    i = ALL_DIRECTIONS.index(direction)
    return ALL_DIRECTIONS[(i + step) % len(ALL_DIRECTIONS)]


def rotate_right(direction: ShapeDirection) -> ShapeDirection:
    """The next direction clockwise; directions outside the compass are unchanged."""
    return _rotate(direction, 1)


def rotate_left(direction: ShapeDirection) -> ShapeDirection:
    """The next direction counter-clockwise; directions outside the compass are unchanged."""
    return _rotate(direction, -1)


def direction_to_coords(direction: ShapeDirection) -> tuple[int, int]:
    """The (dx, dy) step of a direction; anything unknown steps right."""
    return _DIRECTION_DELTAS.get(direction, (1, 0))


class BasicShapeType(IntEnum):
    CIRCULAR = 0
    RECTANGULAR = 1
    LINEAR = 2


@dataclass
class BaseShape:
    """A shape anchored at a pixel position that covers a set of map tiles."""

    position: PixelPosition = field(default_factory=PixelPosition)
    type: BasicShapeType = BasicShapeType.CIRCULAR
    size: int = 0
    width: int = 0
    height: int = 0
    direction: ShapeDirection | None = None
    quality: Quality = Quality.NORMAL

    def get_indices(self) -> list[int]:
        """Flat map indices of the tiles the shape covers."""
        logical = COORD_MANAGER.pixel_to_logical(self.position)
        if self.type == BasicShapeType.CIRCULAR:
            return self._circle(logical.x, logical.y)
        if self.type == BasicShapeType.RECTANGULAR:
            return self._rectangle(logical.x, logical.y)
        if self.type == BasicShapeType.LINEAR:
            return self._line(logical.x, logical.y)
        return []

    def update_position(self, pixel_x: int, pixel_y: int) -> None:
        self.position = PixelPosition(pixel_x, pixel_y)

    def start_position_pixels(self) -> tuple[int, int]:
        return self.position.x, self.position.y

    def get_direction(self) -> ShapeDirection:
        return self.direction if self.direction is not None else ShapeDirection.NO_DIRECTION

    def can_rotate(self) -> bool:
        return self.direction is not None

    def update_size(self, new_size: int) -> None:
        """Change the primary dimension; squares keep both sides equal."""
        self.size = new_size
        if self.type == BasicShapeType.RECTANGULAR and self.width == self.height:
            self.width = new_size
            self.height = new_size

    def update_dimensions(self, width: int, height: int) -> None:
        """Set width and height; only rectangular shapes are affected."""
        if self.type == BasicShapeType.RECTANGULAR:
            self.width = width
            self.height = height
            self.size = width

    def rotate(self) -> None:
        if self.direction is not None:
            self.direction = rotate_right(self.direction)

    def set_direction(self, direction: ShapeDirection) -> None:
        if self.direction is not None:
            self.direction = direction

    def _index(self, x: int, y: int) -> int:
        return COORD_MANAGER.logical_to_index(LogicalPosition(x, y))

    def _circle(self, cx: int, cy: int) -> list[int]:
        r = self.size
        return [
            self._index(cx + x, cy + y)
            for x in range(-r, r + 1)
            for y in range(-r, r + 1)
            if x * x + y * y <= r * r
        ]

    def _rectangle(self, cx: int, cy: int) -> list[int]:
        hw = _tdiv(self.width, 2)
        hh = _tdiv(self.height, 2)
        return [
            self._index(cx + x, cy + y)
            for x in range(-hw, hw + 1)
            for y in range(-hh, hh + 1)
        ]

    def _line(self, cx: int, cy: int) -> list[int]:
        dx, dy = (1, 0) if self.direction is None else direction_to_coords(self.direction)
        return [self._index(cx + i * dx, cy + i * dy) for i in range(self.size)]


def new_circle(pixel_x: int, pixel_y: int, quality: Quality) -> BaseShape:
    radius = {Quality.LOW: 3, Quality.NORMAL: 4, Quality.HIGH: 9}
    size = random.randrange(radius[quality]) if quality in radius else 0
    return BaseShape(
        PixelPosition(pixel_x, pixel_y), BasicShapeType.CIRCULAR, size=size, quality=quality
    )


def new_square(pixel_x: int, pixel_y: int, quality: Quality) -> BaseShape:
    spans = {Quality.LOW: 2, Quality.NORMAL: 3, Quality.HIGH: 4}
    size = random.randrange(spans[quality]) + 1 if quality in spans else 0
    return BaseShape(
        PixelPosition(pixel_x, pixel_y),
        BasicShapeType.RECTANGULAR,
        size=size,
        width=size,
        height=size,
        quality=quality,
    )


def new_rectangle(pixel_x: int, pixel_y: int, quality: Quality) -> BaseShape:
    spans = {Quality.LOW: (5, 3), Quality.NORMAL: (7, 5), Quality.HIGH: (9, 7)}
    if quality in spans:
        w_span, h_span = spans[quality]
        width, height = random.randrange(w_span), random.randrange(h_span)
    else:
        width = height = 0
    return BaseShape(
        PixelPosition(pixel_x, pixel_y),
        BasicShapeType.RECTANGULAR,
        size=width,
        width=width,
        height=height,
        quality=quality,
    )


def _linear(pixel_x: int, pixel_y: int, direction: ShapeDirection, quality: Quality) -> BaseShape:
    spans = {Quality.LOW: 3, Quality.NORMAL: 5, Quality.HIGH: 7}
    length = random.randrange(spans[quality]) + 1 if quality in spans else 0
    return BaseShape(
        PixelPosition(pixel_x, pixel_y),
        BasicShapeType.LINEAR,
        size=length,
        direction=ShapeDirection(direction),
        quality=quality,
    )


def new_line(pixel_x: int, pixel_y: int, direction: ShapeDirection, quality: Quality) -> BaseShape:
    return _linear(pixel_x, pixel_y, direction, quality)


def new_cone(pixel_x: int, pixel_y: int, direction: ShapeDirection, quality: Quality) -> BaseShape:
    return _linear(pixel_x, pixel_y, direction, quality)


def get_line_to(start_pos: LogicalPosition, end_pos: LogicalPosition) -> list[int]:
    """Flat indices of the tiles along a straight line between two positions."""
    start = COORD_MANAGER.logical_to_pixel(start_pos)
    end = COORD_MANAGER.logical_to_pixel(end_pos)
    dx = end.x - start.x
    dy = end.y - start.y
    steps = max(abs(dx), abs(dy))
    if steps == 0:
        return [COORD_MANAGER.logical_to_index(LogicalPosition(start_pos.x, start_pos.y))]
    indices = []
    for i in range(steps + 1):
        pixel = PixelPosition(start.x + _tdiv(dx * i, steps), start.y + _tdiv(dy * i, steps))
        indices.append(COORD_MANAGER.logical_to_index(COORD_MANAGER.pixel_to_logical(pixel)))
    return indices