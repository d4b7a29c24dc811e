import pytest

from rtype_engine.components import HealthComponent, TransformComponent
from rtype_engine.errors import (
    ComponentNotInsertedError,
    ComponentNotRegisterError,
    InvalidEntityIdError,
    TooMuchEntitiesError,
)
from rtype_engine.registry import Registry


def test_spawned_ids_are_distinct_and_counted():
    registry = Registry(10)
    ids = [registry.spawn_entity() for _ in range(3)]
    assert len(set(ids)) == 3
    assert registry.living_entities == 3
    assert registry.nb_entities == 3


def test_killed_id_is_reused():
    registry = Registry(10)
    first = registry.spawn_entity()
    registry.spawn_entity()
    registry.kill_entity(first)
    assert registry.living_entities == 1
    assert registry.spawn_entity() == first


def test_too_many_entities():
    registry = Registry(2)
    registry.spawn_entity()
    registry.spawn_entity()
    with pytest.raises(TooMuchEntitiesError):
        registry.spawn_entity()


def test_explicit_id_leaves_gaps_free():
    registry = Registry(10)
    assert registry.spawn_entity(5) == 5
    assert registry.nb_entities == 6
    assert registry.living_entities == 1
    assert registry.spawn_entity() == 0


@pytest.mark.parametrize("entity_id", [-1, 10])
def test_explicit_id_out_of_range(entity_id):
    registry = Registry(10)
    with pytest.raises(InvalidEntityIdError):
        registry.spawn_entity(entity_id)


def test_explicit_id_already_alive():
    registry = Registry(10)
    registry.spawn_entity(3)
    with pytest.raises(InvalidEntityIdError):
        registry.spawn_entity(3)


def test_kill_dead_entity_raises():
    registry = Registry(10)
    with pytest.raises(InvalidEntityIdError):
        registry.kill_entity(0)


def test_unregistered_component():
    registry = Registry(10)
    entity = registry.spawn_entity()
    assert registry.is_component_registered(HealthComponent) is False
    with pytest.raises(ComponentNotRegisterError):
        registry.get_components(HealthComponent)
    with pytest.raises(ComponentNotRegisterError):
        registry.add_component(entity, HealthComponent(3))


def test_add_and_remove_component():
    registry = Registry(10)
    registry.register_component(HealthComponent)
    entity = registry.spawn_entity()
    health = HealthComponent(7)
    assert registry.add_component(entity, health) is health
    assert registry.get_components(HealthComponent)[entity] is health
    registry.remove_component(entity, HealthComponent)
    assert registry.get_components(HealthComponent)[entity] is None
    with pytest.raises(ComponentNotInsertedError):
        registry.remove_component(entity, HealthComponent)


def test_arrays_track_entity_count():
    registry = Registry(10)
    registry.spawn_entity()
    registry.register_component(HealthComponent)
    registry.register_component(TransformComponent)
    registry.spawn_entity(4)
    assert len(registry.get_components(HealthComponent)) == registry.nb_entities
    assert len(registry.get_components(TransformComponent)) == registry.nb_entities


def test_kill_clears_components():
    registry = Registry(10)
    registry.register_component(HealthComponent)
    entity = registry.spawn_entity()
    registry.add_component(entity, HealthComponent(1))
    registry.kill_entity(entity)
    assert registry.get_components(HealthComponent)[entity] is None


def test_add_component_to_dead_entity():
    registry = Registry(10)
    registry.register_component(HealthComponent)
    with pytest.raises(InvalidEntityIdError):
        registry.add_component(0, HealthComponent(1))


def test_systems_receive_arrays():
    registry = Registry(10)
    registry.register_component(HealthComponent)
    entity = registry.spawn_entity()
    registry.add_component(entity, HealthComponent(5))
    seen = []
    registry.add_system(lambda healths: seen.append([h.health for h in healths if h]), HealthComponent)
    registry.run_systems()
    assert registry.system_count == 1
    assert seen == [[5]]