"""Consumables such as potions, and the tracker that applies their effects over turns."""

from __future__ import annotations

import random
from dataclasses import dataclass, field, replace
from enum import IntEnum

from ..common import Attributes, Quality, get_attributes, get_component_type
from ..ecs import Component, Entity
from .equipment import ARMOR_COMPONENT

CONSUMABLE_COMPONENT = Component("consumable")
CONS_EFFECT_TRACKER_COMPONENT = Component("consumable_effect_tracker")


class ConsumableType(IntEnum):
    HEALING_POTION = 0
    PROTECTION_POTION = 1
    SPEED_POTION = 2


def _require_attributes(entity: Entity) -> Attributes:
    attrs = get_attributes(entity)
    if attrs is None:
        raise ValueError(f"entity {entity.id} has no attributes")
    return attrs


@dataclass
class Consumable:
    """A buff applied to a creature's base attributes for a number of turns."""

    name: str = ""
    attr_modifier: Attributes = field(default_factory=Attributes)
    duration: int = 0

    def apply_effect(self, attrs: Attributes) -> None:
        """Apply every non-health modifier; a non-zero speed replaces the base speed."""
        mod = self.attr_modifier
        attrs.attack_bonus += mod.attack_bonus
        attrs.base_armor_class += mod.base_armor_class
        attrs.base_dodge_chance += mod.base_dodge_chance
        attrs.base_protection += mod.base_protection
        if mod.base_movement_speed != 0:
            attrs.base_movement_speed = mod.base_movement_speed

    def apply_healing_effect(self, attrs: Attributes) -> None:
        attrs.current_health += self.attr_modifier.current_health
        attrs.max_health += self.attr_modifier.max_health

    def display_string(self) -> str:
        mod = self.attr_modifier
        parts = [f"Name {self.name}\n"]
        if mod.current_health != 0:
            parts.append(f"Heals: {mod.current_health}")
        if mod.max_health != 0:
            parts.append(f"Max Health: {mod.max_health}")
        if mod.attack_bonus != 0:
            parts.append(f"Attack Bonus: {mod.attack_bonus}")
        if mod.base_armor_class != 0:
            parts.append(f"Armor Class: {mod.base_armor_class}")
        if mod.base_movement_speed != 0:
            parts.append(f"Movemment Speed: {mod.base_movement_speed}")
        if mod.base_dodge_chance != 0:
            parts.append(f"Dodge Chance: {mod.base_dodge_chance:.2f}")
        if mod.base_protection != 0:
            parts.append(f"Protection: {mod.base_protection}")
        return "".join(parts)

    def create_consumable(self, cons_type: ConsumableType, quality: int) -> None:
        """Turn this consumable into a potion of the given kind and quality."""
        if cons_type == ConsumableType.HEALING_POTION:
            self._healing_potion(quality)
        elif cons_type == ConsumableType.PROTECTION_POTION:
            self._protection_potion(quality)
        elif cons_type == ConsumableType.SPEED_POTION:
            self._speed_potion(quality)

    def _healing_potion(self, quality: int) -> None:
        self.duration = 1
        tiers = {
            Quality.LOW: ("Light Healing Potion", 10),
            Quality.NORMAL: ("Moderate Healing Potion", 15),
            Quality.HIGH: ("Strong Healing Potion", 30),
        }
        if quality in tiers:
            self.name, span = tiers[quality]
            self.duration = random.randrange(span) + 1
            self.attr_modifier.current_health = random.randrange(5) + 1

    def _protection_potion(self, quality: int) -> None:
        tiers = {
            Quality.LOW: ("Light Protection Potion", 3, 5),
            Quality.NORMAL: ("Moderate Protection Potion", 5, 15),
            Quality.HIGH: ("Strong Protection Potion", 10, 25),
        }
        if quality in tiers:
            self.name, dur_span, prot_span = tiers[quality]
            self.duration = random.randrange(dur_span) + 1
            self.attr_modifier.base_protection = random.randrange(prot_span) + 1

    def _speed_potion(self, quality: int) -> None:
        tiers = {
            Quality.LOW: ("Light Speed Potion", 3),
            Quality.NORMAL: ("Moderate Speed Potion", 5),
            Quality.HIGH: ("Strong Speed Potion", 7),
        }
        if quality in tiers:
            self.name, dur_span = tiers[quality]
            self.duration = random.randrange(dur_span) + 1
            self.attr_modifier.base_movement_speed = random.randrange(5) + 1


@dataclass
class ConsumableEffect:
    """A consumable being applied, with the number of turns it has run."""

    effect: Consumable
    current_duration: int = 0

    def apply(self, entity: Entity) -> None:
        """Apply one turn: all modifiers on the first turn, healing on every turn."""
        attrs = _require_attributes(entity)
        if self.current_duration == 0:
            self.effect.apply_effect(attrs)
        self.effect.apply_healing_effect(attrs)
        self.current_duration += 1

    def is_done(self) -> bool:
        return self.current_duration == self.effect.duration


@dataclass
class ConsumableEffects:
    """Every consumable effect active on an entity."""

    effects: list[ConsumableEffect] = field(default_factory=list)

    def add_effect(self, effect: ConsumableEffect) -> None:
        self.effects.append(effect)

    def apply_effects(self, entity: Entity) -> None:
        """Apply one turn of each effect and undo those that have run out, except healing."""
        attrs = _require_attributes(entity)
        remaining: list[ConsumableEffect] = []
        for eff in self.effects:
            eff.apply(entity)
            if not eff.is_done():
                remaining.append(eff)
                continue
            mod = eff.effect.attr_modifier
            attrs.attack_bonus -= mod.attack_bonus
            attrs.max_health -= mod.max_health
            attrs.base_armor_class -= mod.base_armor_class
            attrs.base_dodge_chance -= mod.base_dodge_chance
            attrs.base_movement_speed -= mod.base_movement_speed
            # Actions with zero cost are not allowed, so speed never drops to zero.
            if attrs.base_movement_speed == 0:
                attrs.base_movement_speed = 1
            attrs.base_protection -= mod.base_protection
        self.effects = remaining


def add_effect_to_tracker(entity: Entity, consumable: Consumable) -> None:
    """Start a consumable's effect on an entity, creating its tracker if needed."""
    tracker = get_component_type(entity, CONS_EFFECT_TRACKER_COMPONENT)
    if tracker is None:
        tracker = ConsumableEffects()
        entity.add_component(CONS_EFFECT_TRACKER_COMPONENT, tracker)
    own_copy = replace(consumable, attr_modifier=replace(consumable.attr_modifier))
    tracker.add_effect(ConsumableEffect(own_copy))


def run_effect_tracker(entity: Entity) -> None:
    """Advance the entity's consumable effects by one turn and refresh its totals."""
    tracker = get_component_type(entity, CONS_EFFECT_TRACKER_COMPONENT)
    if tracker is not None and tracker.effects:
        tracker.apply_effects(entity)
    update_entity_attributes(entity)


def update_entity_attributes(entity: Entity) -> None:
    """Recompute total stats from base stats and worn armor (1 each without armor)."""
    attrs = _require_attributes(entity)
    armor = get_component_type(entity, ARMOR_COMPONENT)
    if armor is not None:
        ac, prot, dodge = armor.armor_class, armor.protection, float(armor.dodge_chance)
    else:
        ac, prot, dodge = 1, 1, 1.0
    attrs.total_armor_class = attrs.base_armor_class + ac
    attrs.total_protection = attrs.base_protection + prot
    attrs.total_dodge_chance = attrs.base_dodge_chance + dodge
    attrs.total_movement_speed = attrs.base_movement_speed