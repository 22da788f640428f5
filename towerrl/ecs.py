"""A small entity-component-system store: components, tags, entities and queries."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Any

_component_ids = itertools.count(1)


@dataclass(frozen=True, eq=False)
class Component:
    """A component type. Each instance is a distinct identity."""

    name: str = ""
    id: int = field(default_factory=lambda: next(_component_ids))

    def __repr__(self) -> str:
        return f"Component({self.name!r}, id={self.id})"


@dataclass(frozen=True)
class Tag:
    """A set of components an entity must all carry to match a query."""

    components: frozenset[Component] = frozenset()

    def matches(self, entity: Entity) -> bool:
        return all(entity.has_component(c) for c in self.components)


def build_tag(*components: Component) -> Tag:
    """Build a tag from the given components. An empty tag matches every entity."""
    return Tag(frozenset(components))


class Entity:
    """An entity: an identifier and the data attached to it per component."""

    def __init__(self, entity_id: int) -> None:
        self.id = entity_id
        self._data: dict[Component, Any] = {}

    def add_component(self, component: Component, data: Any) -> Entity:
        """Attach data for a component, replacing any earlier data. Returns the entity."""
        self._data[component] = data
        return self

    def remove_component(self, component: Component) -> Entity:
        """Detach a component if present. Returns the entity."""
        self._data.pop(component, None)
        return self

    def has_component(self, component: Component) -> bool:
        return component in self._data

    def get_component_data(self, component: Component) -> Any:
        """Return the data of a component; raise KeyError if the entity lacks it."""
        try:
            return self._data[component]
        except KeyError:
            raise KeyError(
                f"entity {self.id} has no component {component.name!r}"
            ) from None

    @property
    def components(self) -> dict[Component, Any]:
        return dict(self._data)

    def __repr__(self) -> str:
        names = ", ".join(c.name or str(c.id) for c in self._data)
        return f"Entity({self.id}, [{names}])"


@dataclass
class QueryResult:
    """An entity matched by a query, with the data of the queried components."""

    entity: Entity
    components: dict[Component, Any]


class Manager:
    """Owns the entities of a world and answers tag queries in creation order."""

    def __init__(self) -> None:
        self._ids = itertools.count(1)
        self._entities: dict[int, Entity] = {}
        self._components: list[Component] = []

    def new_component(self, name: str = "") -> Component:
        component = Component(name)
        self._components.append(component)
        return component

    @property
    def components(self) -> tuple[Component, ...]:
        return tuple(self._components)

    def new_entity(self) -> Entity:
        entity = Entity(next(self._ids))
        self._entities[entity.id] = entity
        return entity

    def dispose_entity(self, entity: Entity) -> None:
        self._entities.pop(entity.id, None)

    def query(self, tag: Tag) -> list[QueryResult]:
        return [
            QueryResult(
                entity,
                {c: entity.get_component_data(c) for c in tag.components},
            )
            for entity in self._entities.values()
            if tag.matches(entity)
        ]

    def __contains__(self, entity: object) -> bool:
        return isinstance(entity, Entity) and self._entities.get(entity.id) is entity

    def __len__(self) -> int:
        return len(self._entities)