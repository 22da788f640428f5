"""Items: their status effects, their actions, and helpers for equipment entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import TypeVar

from ..common import NAME_COMPONENT, POSITION_COMPONENT, Name, get_component_type
from ..coords import LogicalPosition
from ..ecs import Entity, Manager
from .actions import ItemAction, ThrowableAction
from .equipment import (
    ARMOR_COMPONENT,
    MELEE_WEAPON_COMPONENT,
    RANGED_WEAPON_COMPONENT,
    Armor,
)
from .statuseffects import ALL_ITEM_EFFECTS, ITEM_COMPONENT, StatusEffect

A = TypeVar("A", bound=ItemAction)


@dataclass
class Item:
    """An item; its status effects live as components on a property entity."""

    properties: Entity | None = None
    actions: list[ItemAction] = field(default_factory=list)
    count: int = 1

    def increment_count(self) -> None:
        self.count += 1

    def decrement_count(self) -> None:
        self.count -= 1

    def _effects(self) -> list[StatusEffect]:
        if self.properties is None:
            return []
        return [
            self.properties.get_component_data(component)
            for component in ALL_ITEM_EFFECTS
            if self.properties.has_component(component)
        ]

    def effect_names(self) -> list[str]:
        """Names of every status effect the item carries."""
        return [effect.name for effect in self._effects()]

    def effect_string(self) -> str:
        """One line per status effect name."""
        return "".join(f"{name}\n" for name in self.effect_names())

    def item_effect(self, effect_name: str) -> StatusEffect | None:
        """The status effect with the given name, or None."""
        for effect in self._effects():
            if effect.name == effect_name:
                return effect
        return None

    def get_action(self, action_name: str) -> ItemAction | None:
        for action in self.actions:
            if action.action_name() == action_name:
                return action
        return None

    def has_action(self, action_name: str) -> bool:
        return self.get_action(action_name) is not None

    def copied_actions(self) -> list[ItemAction]:
        """Independent copies of all the item's actions."""
        return [action.copy() for action in self.actions]

    def throwable_action(self) -> ThrowableAction | None:
        return first_action_of_type(self, ThrowableAction)

    def has_throwable_action(self) -> bool:
        return self.throwable_action() is not None

    def has_all_effects(self, *effects: StatusEffect) -> bool:
        """True if the item carries an effect named like each given one."""
        return all(self.has_effect(effect) for effect in effects)

    def has_effect(self, effect: StatusEffect) -> bool:
        return effect.name in self.effect_names()


def first_action_of_type(item: Item, action_type: type[A]) -> A | None:
    """The first action of the item that is an instance of action_type, or None."""
    for action in item.actions:
        if isinstance(action, action_type):
            return action
    return None


def create_item(
    manager: Manager, name: str, pos: LogicalPosition, *effects: StatusEffect
) -> Entity:
    """Create an item entity at pos carrying the given status effects."""
    return create_item_with_actions(manager, name, pos, (), *effects)


def create_item_with_actions(
    manager: Manager,
    name: str,
    pos: LogicalPosition,
    actions,
    *effects: StatusEffect,
) -> Entity:
    """Create an item entity at pos with the given actions and status effects."""
    properties = manager.new_entity()
    for effect in effects:
        properties.add_component(effect.component, effect)
    item = Item(properties=properties, actions=list(actions), count=1)
    return (
        manager.new_entity()
        .add_component(POSITION_COMPONENT, LogicalPosition(pos.x, pos.y))
        .add_component(NAME_COMPONENT, Name(name))
        .add_component(ITEM_COMPONENT, item)
    )


class ItemKind(IntEnum):
    ARMOR = 0
    MELEE_WEAPON = 1
    RANGED_WEAPON = 2
    INVALID = 3


_KIND_COMPONENTS = (
    (ItemKind.ARMOR, ARMOR_COMPONENT),
    (ItemKind.MELEE_WEAPON, MELEE_WEAPON_COMPONENT),
    (ItemKind.RANGED_WEAPON, RANGED_WEAPON_COMPONENT),
)


def item_stats(entity: Entity) -> str:
    """Display text of the entity's armor, melee or ranged weapon, or ''."""
    for _, component in _KIND_COMPONENTS:
        data = get_component_type(entity, component)
        if data is not None:
            return data.display_string()
    return ""


def get_armor(entity: Entity) -> Armor | None:
    return get_component_type(entity, ARMOR_COMPONENT)


def get_item(entity: Entity) -> Item | None:
    return get_component_type(entity, ITEM_COMPONENT)


def kind_of_item(entity: Entity) -> ItemKind:
    """Which kind of equipment the entity is; armor is checked first."""
    for kind, component in _KIND_COMPONENTS:
        if get_component_type(entity, component) is not None:
            return kind
    return ItemKind.INVALID