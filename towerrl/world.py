"""Setting up the entity world and its named query tags."""

from __future__ import annotations

from .common import ATTRIBUTE_COMPONENT, POSITION_COMPONENT, USER_MSG_COMPONENT, EntityManager
from .ecs import Component, Manager, Tag, build_tag
from .gear.statuseffects import ITEM_COMPONENT

RENDERABLE_COMPONENT = Component("renderable")
CREATURE_COMPONENT = Component("creature")


def initialize_creature_components(manager: Manager, tags: dict[str, Tag]) -> Tag:
    """Register the "monsters" tag: creatures with a position and attributes."""
    creatures = build_tag(CREATURE_COMPONENT, POSITION_COMPONENT, ATTRIBUTE_COMPONENT)
    tags["monsters"] = creatures
    return creatures


def initialize_ecs() -> EntityManager:
    """A fresh world with the renderables, messengers, items and monsters tags."""
    manager = Manager()
    tags: dict[str, Tag] = {
        "renderables": build_tag(RENDERABLE_COMPONENT, POSITION_COMPONENT),
        "messengers": build_tag(USER_MSG_COMPONENT),
        "items": build_tag(ITEM_COMPONENT, POSITION_COMPONENT),
    }
    initialize_creature_components(manager, tags)
    return EntityManager(world=manager, world_tags=tags)