"""Shared components, quality levels and entity helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from .coords import LogicalPosition
from .ecs import Component, Entity, Manager, Tag

POSITION_COMPONENT = Component("position")
NAME_COMPONENT = Component("name")
ATTRIBUTE_COMPONENT = Component("attributes")
USER_MSG_COMPONENT = Component("user_message")


@dataclass
class Name:
    name: str = ""


@dataclass
class UserMessage:
    attack_message: str = ""
    game_state_message: str = ""
    status_effect_message: str = ""


def _format_number(value: float) -> str:
    if float(value).is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(float(value))


@dataclass
class Attributes:
    """Base and derived combat statistics of a creature."""

    max_health: int = 0
    current_health: int = 0
    attack_bonus: int = 0
    base_armor_class: int = 0
    base_protection: int = 0
    base_movement_speed: int = 0
    base_dodge_chance: float = 0.0
    total_armor_class: int = 0
    total_protection: int = 0
    total_dodge_chance: float = 0.0
    total_movement_speed: int = 0
    total_attack_speed: int = 0
    can_act: bool = False
    damage_bonus: int = 0

    @classmethod
    def base(
        cls,
        max_health: int,
        attack_bonus: int,
        base_ac: int,
        base_prot: int,
        base_mov_speed: int,
        dodge: float,
        damage_bonus: int,
    ) -> Attributes:
        """Attributes at full health with only the base values set."""
        return cls(
            max_health=max_health,
            current_health=max_health,
            attack_bonus=attack_bonus,
            base_armor_class=base_ac,
            base_protection=base_prot,
            base_movement_speed=base_mov_speed,
            base_dodge_chance=dodge,
            damage_bonus=damage_bonus,
        )

    def display_string(self) -> str:
        lines = [
            f"HP  {self.current_health} / {self.max_health}",
            f"AC {self.total_armor_class}",
            f"Prot {self.total_protection}",
            f"Dodge {_format_number(self.total_dodge_chance)}",
            f"Move Speed {self.total_movement_speed}",
            f"Attack Speed {self.total_attack_speed}",
        ]
        return "".join(line + "\n" for line in lines)


class Quality(IntEnum):
    """Item quality level used by loot generation."""

    LOW = 0
    NORMAL = 1
    HIGH = 2

    @property
    def label(self) -> str:
        return {
            Quality.LOW: "Low Quality",
            Quality.NORMAL: "Normal Quality",
            Quality.HIGH: "High Quality",
        }[self]


@dataclass
class EntityManager:
    """The world's entity store together with its named query tags."""

    world: Manager = field(default_factory=Manager)
    world_tags: dict[str, Tag] = field(default_factory=dict)


def get_component_type(entity: Entity | None, component: Component | None) -> Any:
    """Return the component data of an entity, or None if it is absent."""
    if entity is None or component is None:
        return None
    try:
        return entity.get_component_data(component)
    except KeyError:
        return None


def get_attributes(entity: Entity | None) -> Attributes | None:
    return get_component_type(entity, ATTRIBUTE_COMPONENT)


def get_position(entity: Entity | None) -> LogicalPosition | None:
    return get_component_type(entity, POSITION_COMPONENT)


def distance_between(e1: Entity, e2: Entity) -> int:
    """Chebyshev distance between two positioned entities."""
    return get_position(e1).chebyshev_distance(get_position(e2))


def get_creature_at_position(manager: EntityManager, pos: LogicalPosition) -> Entity | None:
    """Return the first monster standing at pos, or None."""
    for result in manager.world.query(manager.world_tags["monsters"]):
        current = get_position(result.entity)
        if current is not None and pos.is_equal(current):
            return result.entity
    return None