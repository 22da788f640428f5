"""Item status effects (sticky, burning, freezing) and their shared properties."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import ClassVar

from ..common import Attributes, Quality, get_attributes
from ..ecs import Component, Entity

BURNING_NAME = "Burning"
FREEZING_NAME = "Freezing"
STICKY_NAME = "Sticky"

EFFECT_NAMES: tuple[str, ...] = (BURNING_NAME, FREEZING_NAME, STICKY_NAME)

ITEM_COMPONENT = Component("item")
STICKY_COMPONENT = Component("sticky")
BURNING_COMPONENT = Component("burning")
FREEZING_COMPONENT = Component("freezing")
THROWABLE_COMPONENT = Component("throwable")

# Every component an item's property entity may carry as a status effect.
ALL_ITEM_EFFECTS: tuple[Component, ...] = (
    STICKY_COMPONENT,
    BURNING_COMPONENT,
    FREEZING_COMPONENT,
)

_QUALITY_NAMES = {
    Quality.LOW: "Low Quality",
    Quality.NORMAL: "Medium Quality",
    Quality.HIGH: "High Quality",
}

_DURATION_SPANS = {Quality.LOW: 3, Quality.NORMAL: 3, Quality.HIGH: 6}


@dataclass
class CommonItemProperties:
    """Duration, name and quality shared by every status effect and action."""

    duration: int = 0
    name: str = ""
    quality: int = Quality.LOW

    def add_duration(self, other: CommonItemProperties) -> None:
        self.duration += other.duration

    def quality_name(self) -> str:
        return _QUALITY_NAMES.get(self.quality, "Invalid Quality")

    def with_quality(self, quality: int) -> CommonItemProperties:
        """Fresh properties with a random duration for the quality; the name is left empty."""
        span = _DURATION_SPANS.get(quality)
        if span is None:
            return CommonItemProperties()
        return CommonItemProperties(random.randrange(span) + 1, "", Quality(quality))


def _require_attributes(entity: Entity) -> Attributes:
    attrs = get_attributes(entity)
    if attrs is None:
        raise ValueError(f"entity {entity.id} has no attributes")
    return attrs


class StatusEffect(ABC):
    """An effect an item can carry and apply to a creature."""

    component: ClassVar[Component]
    main_props: CommonItemProperties

    @property
    def name(self) -> str:
        return self.main_props.name

    @property
    def duration(self) -> int:
        return self.main_props.duration

    @abstractmethod
    def stack_effect(self, other: StatusEffect) -> None:
        """Combine another effect of the same kind into this one."""

    @abstractmethod
    def copy(self) -> StatusEffect:
        """An independent copy of the effect."""

    @abstractmethod
    def apply_to_creature(self, entity: Entity) -> None:
        """Apply one turn of the effect to a creature."""

    @abstractmethod
    def display_string(self) -> str:
        """Text describing the effect to the player."""

    @abstractmethod
    def create_with_quality(self, quality: int) -> None:
        """Reroll the effect's values for the given quality."""


def _check_kind(effect: StatusEffect, other: object) -> None:
    if not isinstance(other, type(effect)):
        raise TypeError(
            f"cannot stack {type(other).__name__} onto {type(effect).__name__}"
        )


@dataclass(init=False)
class Sticky(StatusEffect):
    """Slows a creature down; sticky effects can spread."""

    component: ClassVar[Component] = STICKY_COMPONENT
    main_props: CommonItemProperties
    spread: int

    def __init__(self, duration: int = 0, spread: int = 0) -> None:
        self.main_props = CommonItemProperties(duration, STICKY_NAME)
        self.spread = spread

    def stack_effect(self, other: StatusEffect) -> None:
        """Keep the larger spread."""
        _check_kind(self, other)
        other.main_props.add_duration(other.main_props)
        self.spread = max(self.spread, other.spread)

    def copy(self) -> Sticky:
        clone = Sticky(spread=self.spread)
        clone.main_props = replace(self.main_props)
        return clone

    def apply_to_creature(self, entity: Entity) -> None:
        attrs = _require_attributes(entity)
        original_speed = attrs.total_movement_speed
        attrs.total_movement_speed -= 5
        if attrs.total_movement_speed <= 0:
            attrs.total_movement_speed = 1
        self.main_props.duration -= 1
        if self.main_props.duration == 0:
            attrs.total_movement_speed = original_speed

    def display_string(self) -> str:
        return "Movement slowed down by stickiness\n"

    def create_with_quality(self, quality: int) -> None:
        self.main_props = self.main_props.with_quality(quality)
        self.main_props.name = STICKY_NAME
        spans = {Quality.LOW: 2, Quality.NORMAL: 4, Quality.HIGH: 6}
        if quality in spans:
            self.spread = random.randrange(spans[quality]) + 1


@dataclass(init=False)
class Burning(StatusEffect):
    """Damages a creature every turn by its temperature."""

    component: ClassVar[Component] = BURNING_COMPONENT
    main_props: CommonItemProperties
    temperature: int

    def __init__(self, duration: int = 0, temperature: int = 0) -> None:
        self.main_props = CommonItemProperties(duration, BURNING_NAME)
        self.temperature = temperature

    def stack_effect(self, other: StatusEffect) -> None:
        """Add the other's temperature to this one."""
        _check_kind(self, other)
        other.main_props.add_duration(other.main_props)
        self.temperature += other.temperature

    def copy(self) -> Burning:
        clone = Burning(temperature=self.temperature)
        clone.main_props = replace(self.main_props)
        return clone

    def apply_to_creature(self, entity: Entity) -> None:
        self.main_props.duration -= 1
        attrs = _require_attributes(entity)
        attrs.current_health -= self.temperature

    def display_string(self) -> str:
        return f"Burning with a temperature of  {self.temperature}\n"

    def create_with_quality(self, quality: int) -> None:
        self.main_props = self.main_props.with_quality(quality)
        self.main_props.name = BURNING_NAME
        spans = {Quality.LOW: 3, Quality.NORMAL: 5, Quality.HIGH: 7}
        if quality in spans:
            self.temperature = random.randrange(spans[quality]) + 1


@dataclass(init=False)
class Freezing(StatusEffect):
    """Stops a creature from acting while the ice lasts."""

    component: ClassVar[Component] = FREEZING_COMPONENT
    main_props: CommonItemProperties
    thickness: int

    def __init__(self, duration: int = 0, thickness: int = 0) -> None:
        self.main_props = CommonItemProperties(duration, FREEZING_NAME)
        self.thickness = thickness

    def stack_effect(self, other: StatusEffect) -> None:
        """Add the other's thickness to this one."""
        _check_kind(self, other)
        other.main_props.add_duration(other.main_props)
        self.thickness += other.thickness

    def copy(self) -> Freezing:
        clone = Freezing(thickness=self.thickness)
        clone.main_props = replace(self.main_props)
        return clone

    def apply_to_creature(self, entity: Entity) -> None:
        attrs = _require_attributes(entity)
        attrs.can_act = self.main_props.duration <= 0
        self.main_props.duration -= 1

    def display_string(self) -> str:
        return "Frozen Effect Active\n"

    def create_with_quality(self, quality: int) -> None:
        self.main_props = self.main_props.with_quality(quality)
        self.main_props.name = FREEZING_NAME
        spans = {Quality.LOW: 3, Quality.NORMAL: 5, Quality.HIGH: 7}
        if quality in spans:
            self.thickness = random.randrange(spans[quality]) + 1


def all_status_effects(effects_entity: Entity) -> list[StatusEffect]:
    """Copies of every status effect stored on an item's property entity."""
    return [
        effects_entity.get_component_data(component).copy()
        for component in ALL_ITEM_EFFECTS
        if effects_entity.has_component(component)
    ]