import pytest

from minidig.component import Component
from minidig.gameobject import GameObject


class _Counter(Component):
    def __init__(self, owner, label="counter"):
        super().__init__(owner)
        self.label = label
        self.updates = 0
        self.renders = 0

    def update(self):
        self.updates += 1

    def render(self):
        self.renders += 1


class _SpecialCounter(_Counter):
    pass


class _Other(Component):
    pass


def test_add_component_passes_owner_and_arguments():
    go = GameObject()
    component = go.add_component(_Counter, label="hello")
    assert component.owner is go
    assert component.label == "hello"
    assert go.components == (component,)


def test_add_component_rejects_non_components():
    with pytest.raises(TypeError):
        GameObject().add_component(str)


def test_get_component_matches_subclasses_and_returns_first():
    go = GameObject()
    special = go.add_component(_SpecialCounter)
    go.add_component(_Counter)
    assert go.get_component(_Counter) is special
    assert go.get_component(_Other) is None


def test_has_component():
    go = GameObject()
    go.add_component(_Counter)
    assert go.has_component(Component)
    assert not go.has_component(_Other)


def test_remove_component_marks_then_cleanup_drops():
    go = GameObject()
    first = go.add_component(_Counter)
    second = go.add_component(_SpecialCounter)
    other = go.add_component(_Other)
    go.remove_component(_Counter)
    assert first.to_be_deleted and second.to_be_deleted
    assert not other.to_be_deleted
    assert len(go.components) == 3
    go.cleanup_components()
    assert go.components == (other,)


def test_update_and_render_reach_components():
    go = GameObject()
    counter = go.add_component(_Counter)
    go.update()
    go.update()
    go.render()
    assert (counter.updates, counter.renders) == (2, 1)


def test_world_position_refreshes_on_render():
    go = GameObject()
    go.set_position(12.0, 34.0)
    assert go.local_transform.position == (12.0, 34.0, 0.0)
    assert go.world_transform.position == (0.0, 0.0, 0.0)
    go.render()
    assert go.world_transform.position == (12.0, 34.0, 0.0)


def test_transforms_are_copies():
    go = GameObject()
    go.local_transform.set_position(7.0, 7.0, 7.0)
    assert go.local_transform.position == (0.0, 0.0, 0.0)


def test_set_parent_shifts_local_by_parent_world():
    parent = GameObject()
    parent.set_position(5.0, 7.0)
    parent.render()
    child = GameObject()
    child.set_position(1.0, 2.0)
    child.set_parent(parent)
    assert child.parent is parent
    assert parent.children == (child,)
    assert child.local_transform.position == (1.0 + 5.0, 2.0 + 7.0, 0.0)


def test_set_parent_to_self_is_ignored():
    go = GameObject()
    go.set_position(3.0, 4.0)
    go.set_parent(go)
    assert go.parent is None
    assert go.local_transform.position == (3.0, 4.0, 0.0)


def test_set_parent_none_raises():
    with pytest.raises(ValueError):
        GameObject().set_parent(None)


def test_reparenting_moves_child_between_parents():
    first, second = GameObject(), GameObject()
    child = GameObject()
    child.set_parent(first)
    child.set_parent(second)
    assert first.children == ()
    assert second.children == (child,)


def test_reparenting_to_same_parent_keeps_single_entry():
    parent = GameObject()
    child = GameObject()
    child.set_parent(parent)
    child.set_parent(parent)
    assert parent.children == (child,)


def test_moving_parent_outdates_child_world():
    parent = GameObject()
    child = GameObject()
    child.set_parent(parent)
    child.set_position(1.0, 1.0)
    parent.render()
    child.render()
    parent.set_position(10.0, 20.0)
    parent.render()
    child.render()
    parent_world = parent.world_transform
    local = child.local_transform
    assert child.world_transform.position == (
        local.x + parent_world.x,
        local.y + parent_world.y,
        0.0,
    )