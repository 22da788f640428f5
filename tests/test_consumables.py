import random

import pytest

from towerrl.common import ATTRIBUTE_COMPONENT, Attributes, Quality
from towerrl.ecs import Manager
from towerrl.gear.consumables import (
    CONS_EFFECT_TRACKER_COMPONENT,
    Consumable,
    ConsumableEffect,
    ConsumableEffects,
    ConsumableType,
    add_effect_to_tracker,
    run_effect_tracker,
    update_entity_attributes,
)
from towerrl.gear.equipment import ARMOR_COMPONENT, Armor


def _entity(attrs):
    entity = Manager().new_entity()
    entity.add_component(ATTRIBUTE_COMPONENT, attrs)
    return entity


def test_apply_effect_adds_modifiers_and_sets_speed():
    attrs = Attributes(attack_bonus=2, base_armor_class=3, base_protection=1, base_movement_speed=5)
    mod = Attributes(attack_bonus=4, base_armor_class=2, base_protection=6, base_movement_speed=9)
    Consumable("p", mod, 3).apply_effect(attrs)
    assert attrs.attack_bonus == 2 + 4
    assert attrs.base_armor_class == 3 + 2
    assert attrs.base_protection == 1 + 6
    assert attrs.base_movement_speed == mod.base_movement_speed


def test_apply_effect_zero_speed_keeps_base():
    attrs = Attributes(base_movement_speed=5)
    Consumable("p", Attributes(), 1).apply_effect(attrs)
    assert attrs.base_movement_speed == 5


def test_apply_healing_effect():
    attrs = Attributes(max_health=20, current_health=10)
    Consumable("p", Attributes(current_health=3, max_health=2), 1).apply_healing_effect(attrs)
    assert (attrs.current_health, attrs.max_health) == (10 + 3, 20 + 2)


def test_display_string():
    cons = Consumable("Potion", Attributes(current_health=3), 1)
    assert cons.display_string() == "Name Potion\nHeals: 3"


@pytest.mark.parametrize("quality,name,span", [
    (Quality.LOW, "Light Healing Potion", 10),
    (Quality.NORMAL, "Moderate Healing Potion", 15),
    (Quality.HIGH, "Strong Healing Potion", 30),
])
def test_healing_potion_quality(quality, name, span):
    random.seed(1)
    for _ in range(50):
        cons = Consumable()
        cons.create_consumable(ConsumableType.HEALING_POTION, quality)
        assert cons.name == name
        assert 1 <= cons.duration <= span
        assert 1 <= cons.attr_modifier.current_health <= 5


@pytest.mark.parametrize("quality,name,dur,prot", [
    (Quality.LOW, "Light Protection Potion", 3, 5),
    (Quality.NORMAL, "Moderate Protection Potion", 5, 15),
    (Quality.HIGH, "Strong Protection Potion", 10, 25),
])
def test_protection_potion_quality(quality, name, dur, prot):
    random.seed(2)
    for _ in range(50):
        cons = Consumable()
        cons.create_consumable(ConsumableType.PROTECTION_POTION, quality)
        assert cons.name == name
        assert 1 <= cons.duration <= dur
        assert 1 <= cons.attr_modifier.base_protection <= prot


def test_speed_potion_quality():
    random.seed(4)
    cons = Consumable()
    cons.create_consumable(ConsumableType.SPEED_POTION, Quality.HIGH)
    assert cons.name == "Strong Speed Potion"
    assert 1 <= cons.duration <= 7
    assert 1 <= cons.attr_modifier.base_movement_speed <= 5


def test_effect_is_done_after_duration():
    entity = _entity(Attributes())
    eff = ConsumableEffect(Consumable("p", Attributes(), 2))
    eff.apply(entity)
    assert not eff.is_done()
    eff.apply(entity)
    assert eff.is_done()


def test_tracker_applies_then_restores():
    attrs = Attributes(base_protection=1, base_movement_speed=3, current_health=10)
    entity = _entity(attrs)
    add_effect_to_tracker(entity, Consumable("p", Attributes(base_protection=4, current_health=2), 2))
    tracker = entity.get_component_data(CONS_EFFECT_TRACKER_COMPONENT)
    assert isinstance(tracker, ConsumableEffects)

    run_effect_tracker(entity)
    assert attrs.base_protection == 1 + 4
    assert attrs.current_health == 10 + 2
    assert len(tracker.effects) == 1

    run_effect_tracker(entity)
    assert attrs.base_protection == 1
    assert attrs.current_health == 10 + 2 + 2
    assert tracker.effects == []
    assert attrs.base_movement_speed == 3


def test_restore_never_leaves_zero_speed():
    attrs = Attributes(base_movement_speed=0)
    entity = _entity(attrs)
    effects = ConsumableEffects()
    effects.add_effect(ConsumableEffect(Consumable("p", Attributes(), 1)))
    effects.apply_effects(entity)
    assert attrs.base_movement_speed == 1


def test_update_attributes_with_armor():
    attrs = Attributes(base_armor_class=2, base_protection=3, base_dodge_chance=0.5, base_movement_speed=4)
    entity = _entity(attrs)
    entity.add_component(ARMOR_COMPONENT, Armor(10, 5, 1.0))
    update_entity_attributes(entity)
    assert attrs.total_armor_class == 2 + 10
    assert attrs.total_protection == 3 + 5
    assert attrs.total_dodge_chance == pytest.approx(0.5 + 1.0)
    assert attrs.total_movement_speed == attrs.base_movement_speed


def test_update_attributes_without_armor_uses_one():
    attrs = Attributes(base_armor_class=2, base_protection=3)
    update_entity_attributes(_entity(attrs))
    assert attrs.total_armor_class == attrs.base_armor_class + 1
    assert attrs.total_protection == attrs.base_protection + 1


def test_update_attributes_requires_attributes():
    with pytest.raises(ValueError):
        update_entity_attributes(Manager().new_entity())