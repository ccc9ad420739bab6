from dataclasses import dataclass

import pytest

from ttge.ecs import (
    ComponentManager,
    ComponentType,
    Entity,
    EntityManager,
    Root,
    Scene,
    System,
    SystemManager,
    current_component_manager,
    current_entity_manager,
    current_system_manager,
    get_root,
)


@dataclass
class Position:
    x: float = 0.0
    y: float = 0.0


@dataclass
class Sprite:
    name: str = ""


class Recorder(System):
    def __init__(self):
        super().__init__()
        self.deltas = []

    def update(self, dt):
        self.deltas.append(dt)


def test_component_type_values():
    cm = ComponentManager()
    cm.register_component(Sprite, ComponentType.RENDERABLE)
    cm.register_component(Position, ComponentType.TRANSFORMABLE)
    assert cm.get_component_type(Sprite) == 0
    assert cm.get_component_type(Position) == 1


def test_entity_defaults_and_parenting():
    parent = Entity()
    child = Entity(parent)
    assert parent.name == "Entity"
    assert child.parent is parent
    assert parent.children == [child]


def test_entity_copy_shares_structure_not_components():
    parent = Entity()
    e = Entity(parent)
    Entity(e)
    e.name = "hero"
    e.signature = 5
    e.components[Position] = Position()
    clone = e.copy()
    assert clone.name == e.name
    assert clone.signature == e.signature
    assert clone.parent is parent
    assert clone.children == e.children
    assert clone.components == {}


def test_create_and_destroy_entity():
    em = EntityManager()
    e = em.create_entity(None)
    assert em.entities == [e]
    em.destroy_entity(e)
    assert em.entities == []


def test_destroy_unknown_entity_raises():
    em = EntityManager()
    with pytest.raises(ValueError):
        em.destroy_entity(Entity())


def test_signature_round_trip_and_range():
    em = EntityManager()
    e = em.create_entity(None)
    em.set_signature(e, 0b1011)
    assert em.get_signature(e) == 0b1011
    with pytest.raises(ValueError):
        em.set_signature(e, 1 << 32)
    with pytest.raises(ValueError):
        em.set_signature(e, -1)


def test_use_switches_current_managers():
    first = EntityManager()
    second = EntityManager()
    assert current_entity_manager() is second
    first.use()
    assert current_entity_manager() is first
    cm = ComponentManager()
    sm = SystemManager()
    assert current_component_manager() is cm
    assert current_system_manager() is sm


def test_component_set_get_remove():
    cm = ComponentManager()
    e = Entity()
    pos = Position(1.0, 2.0)
    cm.set_component(e, pos)
    assert cm.get_component(e, Position) is pos
    cm.remove_component(e, Position)
    with pytest.raises(KeyError):
        cm.get_component(e, Position)
    cm.remove_component(e, Position)
    assert e.components == {}


def test_component_type_registration():
    cm = ComponentManager()
    cm.register_component(Position, ComponentType.TRANSFORMABLE)
    assert cm.get_component_type(Position) is ComponentType.TRANSFORMABLE
    with pytest.raises(KeyError):
        cm.get_component_type(Recorder)


def test_register_system_and_signature():
    sm = SystemManager()
    system = sm.register_system(Recorder, 0b11)
    assert isinstance(system, Recorder) and sm.systems[Recorder] is system
    assert sm.get_signature(Recorder) == 0b11
    with pytest.raises(KeyError):
        sm.get_signature(System)
    with pytest.raises(TypeError):
        sm.register_system(Position, 1)


def test_entity_signature_changed_adds_and_removes():
    sm = SystemManager()
    em = EntityManager()
    system = sm.register_system(Recorder, 0b11)
    e = em.create_entity(None)
    em.set_signature(e, 0b111)
    sm.entity_signature_changed(e)
    sm.entity_signature_changed(e)
    assert system.entities == [e]
    em.set_signature(e, 0b1)
    sm.entity_signature_changed(e)
    assert system.entities == []


def test_scene_update_runs_every_system():
    scene = Scene()
    rec = scene.sm.register_system(Recorder, 0)
    scene.update(0.5)
    scene.update(0.25)
    assert rec.deltas == [0.5, 0.25]


def test_root_change_scene_and_singleton():
    root = get_root()
    assert get_root() is root
    scene = Scene(root)
    root.change_to_scene(scene)
    assert root.current_scene is scene
    assert scene in root.children
    standalone = Root()
    assert standalone.current_scene is None