"""Entity registry holding one component array per component type."""

from __future__ import annotations

from typing import Any, Callable

from .errors import (
    ComponentNotInsertedError,
    ComponentNotRegisterError,
    InvalidEntityIdError,
    TooMuchEntitiesError,
)

DEFAULT_MAX_ENTITIES = 10000


class Registry:
    """Spawns entities and stores their components.

    Every component array is a list with one slot per entity id used so far;
    an empty slot holds ``None``.
    """

    def __init__(self, max_entities: int = DEFAULT_MAX_ENTITIES) -> None:
        if max_entities <= 0:
            raise ValueError("max_entities must be positive")
        self._max_entities = max_entities
        self._nb_entities = 0
        self._empty_indexes: set[int] = set()
        self._components: dict[type, list[Any]] = {}
        self._systems: list[tuple[Callable[..., Any], tuple[type, ...]]] = []

    @property
    def max_entities(self) -> int:
        return self._max_entities

    @property
    def nb_entities(self) -> int:
        """Highest entity id used so far, plus one."""
        return self._nb_entities

    @property
    def living_entities(self) -> int:
        return self._nb_entities - len(self._empty_indexes)

    @property
    def system_count(self) -> int:
        return len(self._systems)

    def is_alive(self, entity: int) -> bool:
        return 0 <= entity < self._nb_entities and entity not in self._empty_indexes

    def _grow(self, size: int) -> None:
        for array in self._components.values():
            array.extend([None] * (size - len(array)))
        self._nb_entities = size

    def spawn_entity(self, entity_id: int | None = None) -> int:
        """Create an entity, reusing the smallest free id unless one is given."""
        if entity_id is None:
            if self._empty_indexes:
                entity = min(self._empty_indexes)
                self._empty_indexes.remove(entity)
                return entity
            if self._nb_entities >= self._max_entities:
                raise TooMuchEntitiesError()
            entity = self._nb_entities
            self._grow(entity + 1)
            return entity
        if not 0 <= entity_id < self._max_entities or self.is_alive(entity_id):
            raise InvalidEntityIdError()
        if entity_id < self._nb_entities:
            self._empty_indexes.remove(entity_id)
        else:
            self._empty_indexes.update(range(self._nb_entities, entity_id))
            self._grow(entity_id + 1)
        return entity_id

    def kill_entity(self, entity: int) -> None:
        if not self.is_alive(entity):
            raise InvalidEntityIdError()
        for array in self._components.values():
            array[entity] = None
        self._empty_indexes.add(entity)

    def register_component(self, component_type: type) -> list[Any]:
        array = self._components.get(component_type)
        if array is None:
            array = [None] * self._nb_entities
            self._components[component_type] = array
        return array

    def is_component_registered(self, component_type: type) -> bool:
        return component_type in self._components

    def get_components(self, component_type: type) -> list[Any]:
        try:
            return self._components[component_type]
        except KeyError:
            raise ComponentNotRegisterError() from None

    def add_component(self, entity: int, component: Any) -> Any:
        array = self.get_components(type(component))
        if not self.is_alive(entity):
            raise InvalidEntityIdError()
        array[entity] = component
        return component

    def remove_component(self, entity: int, component_type: type) -> None:
        array = self.get_components(component_type)
        if not self.is_alive(entity):
            raise InvalidEntityIdError()
        if array[entity] is None:
            raise ComponentNotInsertedError()
        array[entity] = None

    def add_system(self, system: Callable[..., Any], *component_types: type) -> None:
        """Register a system called with the arrays of ``component_types``."""
        for component_type in component_types:
            self.get_components(component_type)
        self._systems.append((system, component_types))

    def run_systems(self) -> None:
        for system, component_types in self._systems:
            system(*(self._components[t] for t in component_types))