"""The player's equipment, throwables, input state and attributes."""

from __future__ import annotations

from dataclasses import dataclass, field

from .common import ATTRIBUTE_COMPONENT, Attributes, get_component_type, get_position
from .coords import LogicalPosition
from .ecs import Component, Entity
from .gear.actions import ThrowableAction
from .gear.equipment import (
    ARMOR_COMPONENT,
    INVENTORY_COMPONENT,
    MELEE_WEAPON_COMPONENT,
    RANGED_WEAPON_COMPONENT,
    Armor,
    MeleeWeapon,
    RangedWeapon,
)
from .gear.inventory import Inventory
from .gear.items import Item, ItemKind, get_item, kind_of_item
from .shapes import BaseShape

_KIND_COMPONENTS: dict[ItemKind, Component] = {
    ItemKind.ARMOR: ARMOR_COMPONENT,
    ItemKind.MELEE_WEAPON: MELEE_WEAPON_COMPONENT,
    ItemKind.RANGED_WEAPON: RANGED_WEAPON_COMPONENT,
}


@dataclass
class InputStates:
    """Which kinds of input are currently valid for the player."""

    is_throwing: bool = False
    is_shooting: bool = False
    has_key_input: bool = False
    info_menu_open: bool = False


@dataclass
class PlayerEquipment:
    """The equipment entities the player wears and the ranged attack being prepared."""

    eq_melee_weapon: Entity | None = None
    eq_ranged_weapon: Entity | None = None
    ranged_weapon_max_distance: int = 0
    ranged_weapon_aoe_shape: BaseShape | None = None
    eq_armor: Entity | None = None

    def ranged_weapon(self) -> RangedWeapon | None:
        return get_component_type(self.eq_ranged_weapon, RANGED_WEAPON_COMPONENT)

    def melee_weapon(self) -> MeleeWeapon | None:
        return get_component_type(self.eq_melee_weapon, MELEE_WEAPON_COMPONENT)

    def armor(self) -> Armor | None:
        return get_component_type(self.eq_armor, ARMOR_COMPONENT)

    def equip_item(self, equipment: Entity, player_entity: Entity) -> None:
        """Equip an item, replacing whatever was worn in the same slot."""
        kind = kind_of_item(equipment)
        if kind == ItemKind.INVALID:
            raise ValueError(f"entity {equipment.id} is not equipment")
        item_pos = get_position(equipment)
        player_pos = get_position(player_entity)
        if item_pos is None or player_pos is None:
            raise ValueError("equipment and player must both have a position")
        item_pos.x = player_pos.x
        item_pos.y = player_pos.y

        component = _KIND_COMPONENTS[kind]
        player_entity.add_component(component, equipment.get_component_data(component))
        if kind == ItemKind.ARMOR:
            self.eq_armor = equipment
        elif kind == ItemKind.MELEE_WEAPON:
            self.eq_melee_weapon = equipment
        else:
            self.eq_ranged_weapon = equipment

    def prepare_ranged_attack(self) -> None:
        """Take the area and range of the equipped ranged weapon for targeting."""
        weapon = self.ranged_weapon()
        if weapon is None:
            raise ValueError("no ranged weapon equipped")
        self.ranged_weapon_aoe_shape = weapon.target_area
        self.ranged_weapon_max_distance = weapon.shooting_range


@dataclass
class PlayerThrowable:
    """The item the player is about to throw."""

    selected_throwable: Entity | None = None
    throwing_aoe_shape: BaseShape | None = None
    throwable_item_index: int = 0
    throwable_item: Item | None = None

    def prepare_throwable(self, item_entity: Entity, index: int) -> None:
        """Select an inventory item; its area is used if it can be thrown."""
        self.selected_throwable = item_entity
        item = get_item(item_entity)
        if item is None:
            raise ValueError(f"entity {item_entity.id} is not an item")
        self.throwable_item = item
        action: ThrowableAction | None = item.throwable_action()
        if action is not None:
            self.throwable_item_index = index
            self.throwing_aoe_shape = action.shape

    def remove_thrown_item(self, inventory: Inventory) -> None:
        inventory.remove_item(self.throwable_item_index)


@dataclass
class PlayerData:
    """Everything about the player that other systems need at hand."""

    equipment: PlayerEquipment = field(default_factory=PlayerEquipment)
    throwables: PlayerThrowable = field(default_factory=PlayerThrowable)
    input_states: InputStates = field(default_factory=InputStates)
    player_entity: Entity | None = None
    pos: LogicalPosition | None = None
    inventory: Inventory | None = None

    def _entity(self) -> Entity:
        if self.player_entity is None:
            raise ValueError("player entity is not set")
        return self.player_entity

    def _inventory(self) -> Inventory:
        if self.inventory is None:
            raise ValueError("player inventory is not set")
        return self.inventory

    def unequip_melee_weapon(self) -> None:
        self._entity().remove_component(MELEE_WEAPON_COMPONENT)
        self._inventory().add_item(self.equipment.eq_melee_weapon)
        self.equipment.eq_melee_weapon = None

    def unequip_ranged_weapon(self) -> None:
        self._entity().remove_component(RANGED_WEAPON_COMPONENT)
        self._inventory().add_item(self.equipment.eq_ranged_weapon)
        self.equipment.eq_ranged_weapon = None

    def unequip_armor(self) -> None:
        self._entity().remove_component(ARMOR_COMPONENT)
        self._inventory().add_item(self.equipment.eq_armor)
        self.equipment.eq_armor = None

    def remove_item(self, entity: Entity) -> None:
        """Unequip the slot of the given kind of equipment and return it to the inventory."""
        kind = kind_of_item(entity)
        if kind == ItemKind.ARMOR:
            self.unequip_armor()
        elif kind == ItemKind.MELEE_WEAPON:
            self.unequip_melee_weapon()
        elif kind == ItemKind.RANGED_WEAPON:
            self.unequip_ranged_weapon()
        else:
            raise ValueError(f"entity {entity.id} is not equipment")

    def player_inventory(self) -> Inventory | None:
        return get_component_type(self.player_entity, INVENTORY_COMPONENT)

    def player_attributes(self) -> Attributes:
        """The player's attributes, or fresh empty ones if the player has none."""
        attrs = get_component_type(self.player_entity, ATTRIBUTE_COMPONENT)
        return attrs if attrs is not None else Attributes()

    def update_player_attributes(self) -> None:
        """Recompute totals from base values and the worn armor."""
        attrs = self.player_attributes()
        armor = get_component_type(self.equipment.eq_armor, ARMOR_COMPONENT)
        ac, prot, dodge = 0, 0, 0.0
        if armor is not None:
            ac, prot, dodge = armor.armor_class, armor.protection, float(armor.dodge_chance)
        attrs.total_armor_class = attrs.base_armor_class + ac
        attrs.total_protection = attrs.base_protection + prot
        attrs.total_dodge_chance = attrs.base_dodge_chance + dodge