import pytest

from cengine.entity import MAX_COMPONENTS, MAX_ENTITIES, Component, EntityRegistry


@pytest.fixture
def registry():
    return EntityRegistry()


def test_component_ids_are_tracked_independently(registry):
    entity = registry.create()
    registry.add_component(entity, Component.TRANSFORM)
    registry.add_component(entity, Component.CAMERA)
    flags = [
        registry.has_component(entity, component)
        for component in (Component.TRANSFORM, Component.MESH, Component.CAMERA)
    ]
    assert flags == [True, False, True]
    registry.remove_component(entity, Component.TRANSFORM)
    assert not registry.has_component(entity, Component.TRANSFORM)
    assert registry.has_component(entity, Component.CAMERA)


def test_first_entity_is_zero_and_ids_increase(registry):
    first = registry.create()
    second = registry.create()
    assert first == 0
    assert second == first + 1
    assert registry.is_alive(first) and registry.is_alive(second)


def test_create_raises_when_full(registry):
    created = [registry.create() for _ in range(MAX_ENTITIES)]
    assert len(set(created)) == MAX_ENTITIES
    with pytest.raises(OverflowError):
        registry.create()


def test_destroyed_id_is_reused(registry):
    a, b, c = registry.create(), registry.create(), registry.create()
    registry.destroy(b)
    assert not registry.is_alive(b)
    assert registry.create() == b
    assert registry.create() == c + 1
    assert registry.is_alive(a)


def test_lowest_free_id_is_reused_first(registry):
    ids = [registry.create() for _ in range(6)]
    registry.destroy(ids[5])
    registry.destroy(ids[3])
    assert registry.create() == ids[3]
    assert registry.create() == ids[5]


def test_components_added_and_removed(registry):
    entity = registry.create()
    registry.add_component(entity, Component.MESH)
    assert registry.has_component(entity, Component.MESH)
    assert not registry.has_component(entity, Component.CAMERA)
    registry.remove_component(entity, Component.MESH)
    assert not registry.has_component(entity, Component.MESH)


def test_destroy_clears_components(registry):
    entity = registry.create()
    registry.add_component(entity, Component.TRANSFORM)
    registry.destroy(entity)
    again = registry.create()
    assert again == entity
    assert not registry.has_component(again, Component.TRANSFORM)


def test_component_out_of_range_is_ignored(registry):
    entity = registry.create()
    registry.add_component(entity, MAX_COMPONENTS)
    assert not registry.has_component(entity, MAX_COMPONENTS)


def test_dead_entity_gets_no_components(registry):
    registry.add_component(5, Component.MESH)
    assert not registry.has_component(5, Component.MESH)
    assert not registry.is_alive(5)


def test_destroy_out_of_range_is_ignored(registry):
    entity = registry.create()
    registry.destroy(MAX_ENTITIES + 3)
    registry.destroy(-1)
    assert registry.is_alive(entity)
    assert registry.create() == entity + 1


def test_reset_forgets_everything(registry):
    for _ in range(4):
        registry.create()
    registry.reset()
    assert len(registry) == 0
    assert registry.create() == 0


def test_iteration_lists_live_entities(registry):
    ids = [registry.create() for _ in range(4)]
    registry.destroy(ids[1])
    assert list(registry) == [ids[0], ids[2], ids[3]]