"""Actions an item can perform, such as being thrown at an area."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any, ClassVar

from ..common import Quality, get_position
from ..coords import COORD_MANAGER, LogicalPosition, PixelPosition
from ..ecs import Component, Manager, Tag
from ..shapes import (
    BaseShape,
    BasicShapeType,
    ShapeDirection,
    new_circle,
    new_line,
    new_square,
)
from .statuseffects import THROWABLE_COMPONENT, CommonItemProperties, StatusEffect

THROWABLE_ACTION_NAME = "Throwable"


class ItemAction(ABC):
    """Something a player can do with an item."""

    component: ClassVar[Component]

    @abstractmethod
    def action_name(self) -> str:
        """Name the action is looked up by."""

    @abstractmethod
    def execute(
        self,
        target_pos: LogicalPosition,
        source_pos: LogicalPosition,
        manager: Manager,
        tags: dict[str, Tag],
    ) -> list[StatusEffect]:
        """Perform the action; return the status effects to apply."""

    @abstractmethod
    def can_execute(self, target_pos: LogicalPosition, source_pos: LogicalPosition) -> bool:
        """Whether the action can reach the target from the source."""

    @abstractmethod
    def copy(self) -> ItemAction:
        """An independent copy of the action."""

    @abstractmethod
    def create_with_quality(self, quality: int) -> None:
        """Reroll the action's values for the given quality."""


@dataclass(init=False)
class ThrowableAction(ItemAction):
    """Throwing an item at an area, applying its effects to the monsters hit."""

    component: ClassVar[Component] = THROWABLE_COMPONENT
    main_props: CommonItemProperties
    throwing_range: int
    damage: int
    shape: BaseShape | None
    vx: Any
    effects_to_apply: list[StatusEffect]

    def __init__(
        self,
        duration: int = 0,
        throwing_range: int = 0,
        damage: int = 0,
        shape: BaseShape | None = None,
        effects=(),
        vx: Any = None,
    ) -> None:
        self.main_props = CommonItemProperties(duration, THROWABLE_ACTION_NAME)
        self.throwing_range = throwing_range
        self.damage = damage
        self.shape = shape
        self.vx = vx
        self.effects_to_apply = list(effects)

    def action_name(self) -> str:
        return self.main_props.name

    def _require_shape(self) -> BaseShape:
        if self.shape is None:
            raise ValueError("throwable action has no area shape")
        return self.shape

    def execute(
        self,
        target_pos: LogicalPosition,
        source_pos: LogicalPosition,
        manager: Manager,
        tags: dict[str, Tag],
    ) -> list[StatusEffect]:
        """Copies of the effects, once per monster in the area and within range."""
        shape = self._require_shape()
        if self.vx is not None:
            self.vx.reset_vx()
        affected = COORD_MANAGER.tile_positions(shape.get_indices())
        applied: list[StatusEffect] = []
        for result in manager.query(tags["monsters"]):
            monster_pos = get_position(result.entity)
            if monster_pos is None:
                continue
            for pos in affected:
                if monster_pos.is_equal(pos) and monster_pos.in_range(
                    source_pos, self.throwing_range
                ):
                    applied.extend(effect.copy() for effect in self.effects_to_apply)
        return applied

    def can_execute(self, target_pos: LogicalPosition, source_pos: LogicalPosition) -> bool:
        return target_pos.in_range(source_pos, self.throwing_range)

    def copy(self) -> ThrowableAction:
        clone = ThrowableAction(
            throwing_range=self.throwing_range,
            damage=self.damage,
            shape=self.shape,
            effects=[effect.copy() for effect in self.effects_to_apply],
            vx=self.vx,
        )
        clone.main_props = replace(self.main_props)
        return clone

    def quality_name(self) -> str:
        return self.main_props.quality_name()

    def create_with_quality(self, quality: int) -> None:
        import random

        self.main_props = self.main_props.with_quality(quality)
        self.main_props.name = THROWABLE_ACTION_NAME
        if quality == Quality.LOW:
            self.throwing_range = 3 + random.randrange(2)
            self.damage = 1 + random.randrange(2)
        elif quality == Quality.NORMAL:
            self.throwing_range = 5 + random.randrange(3)
            self.damage = 2 + random.randrange(3)
        elif quality == Quality.HIGH:
            self.throwing_range = 8 + random.randrange(4)
            self.damage = 4 + random.randrange(4)

    def in_range(self, end_pos: LogicalPosition) -> bool:
        """Whether end_pos is within throwing range of the shape's anchor tile."""
        pixel_x, pixel_y = self._require_shape().start_position_pixels()
        start = COORD_MANAGER.pixel_to_logical(PixelPosition(pixel_x, pixel_y))
        return end_pos.in_range(start, self.throwing_range)


def shape_throwable_action(
    duration: int,
    throw_range: int,
    damage: int,
    shape_type: BasicShapeType,
    quality: int,
    direction: ShapeDirection | None,
    *effects: StatusEffect,
) -> ThrowableAction:
    """A throwable action over a basic shape; lines without a direction point right."""
    shape: BaseShape | None = None
    if shape_type == BasicShapeType.CIRCULAR:
        shape = new_circle(0, 0, quality)
    elif shape_type == BasicShapeType.RECTANGULAR:
        shape = new_square(0, 0, quality)
    elif shape_type == BasicShapeType.LINEAR:
        shape = new_line(
            0, 0, direction if direction is not None else ShapeDirection.LINE_RIGHT, quality
        )
    return ThrowableAction(duration, throw_range, damage, shape, effects)