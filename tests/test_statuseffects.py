import pytest

from towerrl.common import ATTRIBUTE_COMPONENT, Attributes, Quality
from towerrl.ecs import Manager
from towerrl.gear.statuseffects import (
    ALL_ITEM_EFFECTS,
    BURNING_COMPONENT,
    BURNING_NAME,
    FREEZING_COMPONENT,
    FREEZING_NAME,
    STICKY_COMPONENT,
    STICKY_NAME,
    Burning,
    CommonItemProperties,
    Freezing,
    Sticky,
    all_status_effects,
)


def _creature(**kwargs):
    entity = Manager().new_entity()
    attrs = Attributes(**kwargs)
    entity.add_component(ATTRIBUTE_COMPONENT, attrs)
    return entity, attrs


@pytest.mark.parametrize(
    "quality, expected",
    [
        (Quality.LOW, "Low Quality"),
        (Quality.NORMAL, "Medium Quality"),
        (Quality.HIGH, "High Quality"),
        (9, "Invalid Quality"),
    ],
)
def test_quality_name(quality, expected):
    assert CommonItemProperties(quality=quality).quality_name() == expected


def test_add_duration():
    props = CommonItemProperties(duration=2)
    props.add_duration(CommonItemProperties(duration=3))
    assert props.duration == 2 + 3


@pytest.mark.parametrize("quality, upper", [(Quality.LOW, 3), (Quality.NORMAL, 3), (Quality.HIGH, 6)])
def test_with_quality_ranges(quality, upper):
    for _ in range(50):
        props = CommonItemProperties(duration=99, name="x").with_quality(quality)
        assert 1 <= props.duration <= upper
        assert props.name == ""
        assert props.quality == quality


def test_with_quality_invalid_resets():
    props = CommonItemProperties(duration=5, name="x", quality=Quality.HIGH).with_quality(7)
    assert props == CommonItemProperties()


def test_names_and_components():
    assert (Sticky(1, 1).name, Sticky.component) == (STICKY_NAME, STICKY_COMPONENT)
    assert (Burning(1, 1).name, Burning.component) == (BURNING_NAME, BURNING_COMPONENT)
    assert (Freezing(1, 1).name, Freezing.component) == (FREEZING_NAME, FREEZING_COMPONENT)


def test_burning_apply_damages_and_ticks():
    entity, attrs = _creature(current_health=20)
    burning = Burning(duration=3, temperature=4)
    burning.apply_to_creature(entity)
    assert attrs.current_health == 20 - burning.temperature
    assert burning.duration == 3 - 1


def test_freezing_apply_blocks_then_releases():
    entity, attrs = _creature(can_act=True)
    freezing = Freezing(duration=1, thickness=2)
    freezing.apply_to_creature(entity)
    assert attrs.can_act is False
    assert freezing.duration == 0
    freezing.apply_to_creature(entity)
    assert attrs.can_act is True


def test_sticky_slows_and_restores_when_done():
    entity, attrs = _creature(total_movement_speed=10)
    sticky = Sticky(duration=2, spread=1)
    sticky.apply_to_creature(entity)
    assert attrs.total_movement_speed == 10 - 5
    sticky.apply_to_creature(entity)
    assert sticky.duration == 0
    assert attrs.total_movement_speed == 10 - 5


def test_sticky_clamps_speed_to_one():
    entity, attrs = _creature(total_movement_speed=3)
    Sticky(duration=5, spread=1).apply_to_creature(entity)
    assert attrs.total_movement_speed == 1


def test_apply_without_attributes_raises():
    entity = Manager().new_entity()
    with pytest.raises(ValueError):
        Burning(1, 1).apply_to_creature(entity)


def test_stack_effects():
    sticky = Sticky(1, 2)
    sticky.stack_effect(Sticky(1, 5))
    assert sticky.spread == 5
    sticky.stack_effect(Sticky(1, 1))
    assert sticky.spread == 5

    burning = Burning(1, 2)
    burning.stack_effect(Burning(1, 3))
    assert burning.temperature == 2 + 3

    freezing = Freezing(1, 4)
    freezing.stack_effect(Freezing(1, 6))
    assert freezing.thickness == 4 + 6


def test_stack_wrong_kind_raises():
    with pytest.raises(TypeError):
        Burning(1, 1).stack_effect(Freezing(1, 1))


@pytest.mark.parametrize("effect", [Sticky(3, 2), Burning(3, 4), Freezing(3, 1)])
def test_copy_is_equal_and_independent(effect):
    clone = effect.copy()
    assert clone == effect
    assert clone is not effect
    clone.main_props.duration = 0
    assert effect.duration == 3


def test_display_strings():
    assert Sticky(1, 1).display_string() == "Movement slowed down by stickiness\n"
    assert Freezing(1, 1).display_string() == "Frozen Effect Active\n"
    assert Burning(1, 5).display_string() == "Burning with a temperature of  5\n"


@pytest.mark.parametrize("quality", list(Quality))
def test_create_with_quality_sets_name_and_values(quality):
    for _ in range(30):
        sticky, burning, freezing = Sticky(), Burning(), Freezing()
        for effect in (sticky, burning, freezing):
            effect.create_with_quality(quality)
            assert effect.main_props.quality == quality
            assert effect.duration >= 1
        assert sticky.name == STICKY_NAME and 1 <= sticky.spread <= 6
        assert burning.name == BURNING_NAME and 1 <= burning.temperature <= 7
        assert freezing.name == FREEZING_NAME and 1 <= freezing.thickness <= 7


def test_low_quality_spread_is_small():
    for _ in range(30):
        sticky = Sticky()
        sticky.create_with_quality(Quality.LOW)
        assert sticky.spread in (1, 2)


def test_create_with_invalid_quality_keeps_value():
    freezing = Freezing(4, 9)
    freezing.create_with_quality(7)
    assert freezing.thickness == 9
    assert freezing.duration == 0
    assert freezing.name == FREEZING_NAME


def test_all_status_effects_returns_copies_in_order():
    props = Manager().new_entity()
    burning, sticky = Burning(2, 3), Sticky(1, 1)
    props.add_component(BURNING_COMPONENT, burning)
    props.add_component(STICKY_COMPONENT, sticky)
    effects = all_status_effects(props)
    assert [e.name for e in effects] == [STICKY_NAME, BURNING_NAME]
    assert effects[1] == burning and effects[1] is not burning
    assert len(ALL_ITEM_EFFECTS) == 3


def test_all_status_effects_empty():
    assert all_status_effects(Manager().new_entity()) == []