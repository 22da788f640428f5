"""A creature's inventory of item entities and the lists built for display."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator

from ..common import NAME_COMPONENT, get_component_type
from ..ecs import Entity
from .actions import THROWABLE_ACTION_NAME
from .consumables import CONSUMABLE_COMPONENT
from .equipment import ARMOR_COMPONENT, MELEE_WEAPON_COMPONENT, RANGED_WEAPON_COMPONENT
from .items import Item, get_item
from .statuseffects import StatusEffect


@dataclass(frozen=True)
class InventoryListEntry:
    """One line of an inventory list shown to the player."""

    index: int
    name: str
    count: int


def _name_of(entity: Entity) -> str:
    name = get_component_type(entity, NAME_COMPONENT)
    return name.name if name is not None else ""


def _require_item(entity: Entity) -> Item:
    item = get_item(entity)
    if item is None:
        raise ValueError(f"entity {entity.id} is not an item")
    return item


@dataclass
class Inventory:
    """Item entities held by a creature; items with the same name stack."""

    content: list[Entity] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.content)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self.content)

    def add_item(self, entity: Entity | None) -> None:
        """Stack onto an item of the same name, or add it with a count of one."""
        if entity is None:
            return
        new_name = _name_of(entity)
        for existing in self.content:
            if _name_of(existing) == new_name:
                _require_item(existing).increment_count()
                return
        _require_item(entity).count = 1
        self.content.append(entity)

    def get_item(self, index: int) -> Entity:
        """The item entity at index, left in the inventory."""
        if index < 0 or index >= len(self.content):
            raise IndexError("index out of range")
        return self.content[index]

    def remove_item(self, index: int) -> None:
        """Take one of the item at index; drop the entry when none are left."""
        try:
            entity = self.get_item(index)
        except IndexError:
            return
        item = _require_item(entity)
        item.decrement_count()
        if item.count <= 0:
            del self.content[index]

    def effect_names(self, index: int) -> list[str]:
        """Status effect names of the item at index."""
        entity = self.get_item(index)
        item = get_item(entity)
        if item is None:
            raise ValueError(f"entity {entity.id} has no item data")
        return item.effect_names()

    def _entries(
        self, indices: Iterable[int], keep: Callable[[Entity, Item], bool]
    ) -> list[InventoryListEntry]:
        selected = list(indices)
        if selected:
            pairs = [(i, self.get_item(i)) for i in selected]
        else:
            pairs = list(enumerate(self.content))
        entries = []
        for index, entity in pairs:
            item = _require_item(entity)
            if keep(entity, item):
                entries.append(InventoryListEntry(index, _name_of(entity), item.count))
        return entries

    def equipment_for_display(self, indices=()) -> list[InventoryListEntry]:
        """Every armor, ranged weapon and melee weapon in the inventory."""
        return self._entries(
            (),
            lambda entity, _: any(
                entity.has_component(c)
                for c in (ARMOR_COMPONENT, RANGED_WEAPON_COMPONENT, MELEE_WEAPON_COMPONENT)
            ),
        )

    def consumables_for_display(self, indices=()) -> list[InventoryListEntry]:
        """Every consumable in the inventory."""
        return self._entries((), lambda entity, _: entity.has_component(CONSUMABLE_COMPONENT))

    def inventory_for_display(
        self, indices=(), *effects: StatusEffect
    ) -> list[InventoryListEntry]:
        """Items carrying all the given effects, from indices or the whole inventory."""
        return self._entries(indices, lambda _, item: item.has_all_effects(*effects))

    def inventory_by_action(self, indices, action_name: str) -> list[InventoryListEntry]:
        """Items that have the named action, from indices or the whole inventory."""
        return self._entries(indices, lambda _, item: item.has_action(action_name))

    def throwable_items(self, indices=()) -> list[InventoryListEntry]:
        return self.inventory_by_action(indices, THROWABLE_ACTION_NAME)

    def has_items_with_action(self, action_name: str) -> bool:
        return any(_require_item(entity).has_action(action_name) for entity in self.content)

    def has_throwable_items(self) -> bool:
        return self.has_items_with_action(THROWABLE_ACTION_NAME)