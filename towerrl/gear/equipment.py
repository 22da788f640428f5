"""Armor, melee weapons and ranged weapons that creatures can equip."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any

from ..common import EntityManager, Quality, get_position
from ..coords import COORD_MANAGER
from ..ecs import Component, Entity
from ..shapes import BaseShape

ARMOR_COMPONENT = Component("armor")
MELEE_WEAPON_COMPONENT = Component("melee_weapon")
INVENTORY_COMPONENT = Component("inventory")
RANGED_WEAPON_COMPONENT = Component("ranged_weapon")


def _roll_between(low: int, high: int) -> int:
    """A random integer from low to high, both included; order does not matter."""
    if low > high:
        low, high = high, low
    return random.randint(low, high)


@dataclass
class Armor:
    armor_class: int = 0
    protection: int = 0
    dodge_chance: float = 0.0

    def display_string(self) -> str:
        return (
            f"Armor Class: {self.armor_class}\n"
            f"Protection: {self.protection}\n"
            f"Dodge: {self.dodge_chance:.2f}\n"
        )


@dataclass
class MeleeWeapon:
    min_damage: int = 0
    max_damage: int = 0
    attack_speed: int = 0

    def display_string(self) -> str:
        return (
            f"Min Damage: {self.min_damage}\n"
            f"Max Damage: {self.max_damage}\n"
            f"AttackSpeed: {self.attack_speed}\n"
        )

    def calculate_damage(self) -> int:
        """A random damage value between the weapon's minimum and maximum."""
        return _roll_between(self.min_damage, self.max_damage)


@dataclass
class RangedWeapon:
    """A weapon that hits every monster inside its target area."""

    min_damage: int = 0
    max_damage: int = 0
    shooting_range: int = 0
    target_area: BaseShape | None = None
    shooting_vx: Any = None
    attack_speed: int = 0

    def display_string(self) -> str:
        return (
            f"Min Damage: {self.min_damage}\n"
            f"Max Damage: {self.max_damage}\n"
            f"Attack Speed: {self.attack_speed}\n"
            f"Range: {self.shooting_range}\n"
        )

    def calculate_damage(self) -> int:
        """A random damage value between the weapon's minimum and maximum."""
        return _roll_between(self.min_damage, self.max_damage)

    def get_targets(self, manager: EntityManager) -> list[Entity]:
        """Every monster standing on a tile of the weapon's target area."""
        if self.target_area is None:
            raise ValueError("ranged weapon has no target area")
        positions = COORD_MANAGER.tile_positions(self.target_area.get_indices())
        targets: list[Entity] = []
        for result in manager.world.query(manager.world_tags["monsters"]):
            current = get_position(result.entity)
            if current is None:
                continue
            targets.extend(result.entity for pos in positions if current.is_equal(pos))
        return targets

    def create_with_quality(self, quality: int) -> None:
        """Reroll damage, range and speed for the given quality."""
        if quality == Quality.LOW:
            self.min_damage = random.randrange(2) + 1
            self.max_damage = random.randrange(5) + 3
            self.shooting_range = random.randrange(3) + 1
            self.attack_speed = random.randrange(7) + 1
        elif quality == Quality.NORMAL:
            self.min_damage = random.randrange(7) + 1
            self.max_damage = random.randrange(10) + 1
            self.shooting_range = random.randrange(7) + 3
            self.attack_speed = random.randrange(5) + 1
        elif quality == Quality.HIGH:
            self.min_damage = random.randrange(10) + 1
            self.max_damage = random.randrange(15) + 1
            self.shooting_range = random.randrange(10) + 3
            self.attack_speed = random.randrange(3) + 1