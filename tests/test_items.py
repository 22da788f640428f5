import pytest

from towerrl.common import NAME_COMPONENT, POSITION_COMPONENT
from towerrl.coords import LogicalPosition
from towerrl.ecs import Manager
from towerrl.gear.actions import ThrowableAction
from towerrl.gear.equipment import (
    ARMOR_COMPONENT,
    MELEE_WEAPON_COMPONENT,
    RANGED_WEAPON_COMPONENT,
    Armor,
    MeleeWeapon,
    RangedWeapon,
)
from towerrl.gear.items import (
    Item,
    ItemKind,
    create_item,
    create_item_with_actions,
    first_action_of_type,
    get_armor,
    get_item,
    item_stats,
    kind_of_item,
)
from towerrl.gear.statuseffects import Burning, Freezing, Sticky


@pytest.fixture
def manager():
    return Manager()


def test_create_item_components(manager):
    entity = create_item(manager, "Bomb", LogicalPosition(3, 4))
    assert entity.get_component_data(NAME_COMPONENT).name == "Bomb"
    assert entity.get_component_data(POSITION_COMPONENT) == LogicalPosition(3, 4)
    assert get_item(entity).count == 1


def test_effect_names_follow_component_order(manager):
    entity = create_item(manager, "Bomb", LogicalPosition(), Freezing(1, 1), Burning(2, 3))
    item = get_item(entity)
    assert item.effect_names() == ["Burning", "Freezing"]
    assert item.effect_string() == "Burning\nFreezing\n"


def test_item_without_properties_has_no_effects():
    item = Item()
    assert item.effect_names() == []
    assert item.effect_string() == ""
    assert item.item_effect("Burning") is None


def test_item_effect_lookup(manager):
    burning = Burning(2, 3)
    item = get_item(create_item(manager, "Bomb", LogicalPosition(), burning))
    assert item.item_effect("Burning") is burning
    assert item.item_effect("Sticky") is None


def test_has_effect_and_all_effects(manager):
    item = get_item(create_item(manager, "Bomb", LogicalPosition(), Burning(1, 1)))
    assert item.has_effect(Burning())
    assert not item.has_effect(Sticky())
    assert item.has_all_effects()
    assert item.has_all_effects(Burning())
    assert not item.has_all_effects(Burning(), Freezing())


def test_counts():
    item = Item(count=1)
    item.increment_count()
    item.increment_count()
    item.decrement_count()
    assert item.count == 2


def test_actions(manager):
    action = ThrowableAction(1, 5, 2)
    actions = [action]
    item = get_item(create_item_with_actions(manager, "Rock", LogicalPosition(), actions))
    actions.clear()
    assert item.get_action("Throwable") is action
    assert item.has_action("Throwable")
    assert not item.has_action("Drink")
    assert item.throwable_action() is action
    assert item.has_throwable_action()
    assert first_action_of_type(item, ThrowableAction) is action


def test_copied_actions_are_independent(manager):
    action = ThrowableAction(1, 5, 2)
    item = get_item(create_item_with_actions(manager, "Rock", LogicalPosition(), [action]))
    copies = item.copied_actions()
    assert len(copies) == 1
    assert copies[0] is not action
    assert copies[0].throwing_range == action.throwing_range
    copies[0].throwing_range += 10
    assert action.throwing_range == 5


def test_no_throwable_action():
    item = Item()
    assert item.throwable_action() is None
    assert not item.has_throwable_action()
    assert first_action_of_type(item, ThrowableAction) is None


def test_kind_of_item(manager):
    armor = manager.new_entity().add_component(ARMOR_COMPONENT, Armor())
    melee = manager.new_entity().add_component(MELEE_WEAPON_COMPONENT, MeleeWeapon())
    ranged = manager.new_entity().add_component(RANGED_WEAPON_COMPONENT, RangedWeapon())
    plain = manager.new_entity()
    assert kind_of_item(armor) is ItemKind.ARMOR
    assert kind_of_item(melee) is ItemKind.MELEE_WEAPON
    assert kind_of_item(ranged) is ItemKind.RANGED_WEAPON
    assert kind_of_item(plain) is ItemKind.INVALID


def test_armor_takes_precedence(manager):
    entity = (
        manager.new_entity()
        .add_component(MELEE_WEAPON_COMPONENT, MeleeWeapon())
        .add_component(ARMOR_COMPONENT, Armor())
    )
    assert kind_of_item(entity) is ItemKind.ARMOR


def test_item_stats_and_getters(manager):
    armor = Armor(10, 5, 1.0)
    entity = manager.new_entity().add_component(ARMOR_COMPONENT, armor)
    assert item_stats(entity) == armor.display_string()
    assert get_armor(entity) is armor
    assert item_stats(manager.new_entity()) == ""
    assert get_armor(manager.new_entity()) is None
    assert get_item(entity) is None