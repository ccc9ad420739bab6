"""A small entity-component-system with scenes and a root entity."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional, TypeVar

__all__ = [
    "ComponentType",
    "Entity",
    "EntityManager",
    "ComponentManager",
    "System",
    "SystemManager",
    "Scene",
    "Root",
    "current_entity_manager",
    "current_component_manager",
    "current_system_manager",
    "get_root",
]

_SIGNATURE_BITS = 32
_SIGNATURE_MASK = (1 << _SIGNATURE_BITS) - 1

T = TypeVar("T")
S = TypeVar("S", bound="System")


class ComponentType(IntEnum):
    RENDERABLE = 0
    TRANSFORMABLE = 1


def _check_signature(signature: int) -> int:
    if signature < 0 or signature > _SIGNATURE_MASK:
        raise ValueError(f"signature must fit in {_SIGNATURE_BITS} bits: {signature!r}")
    return signature


@dataclass
class _Current:
    entity_manager: Optional["EntityManager"] = None
    component_manager: Optional["ComponentManager"] = None
    system_manager: Optional["SystemManager"] = None
    root: Optional["Root"] = None


_current = _Current()


class Entity:
    """A node in the entity tree carrying a signature and components."""

    def __init__(self, parent: Optional[Entity] = None, name: str = "Entity") -> None:
        self.name = name
        self.signature = 0
        self.components: dict[type, Any] = {}
        self._children: list[Entity] = []
        self._parent = parent
        if parent is not None:
            parent._children.append(self)

    @property
    def parent(self) -> Optional[Entity]:
        return self._parent

    @property
    def children(self) -> list[Entity]:
        return list(self._children)

    def copy(self) -> Entity:
        """Copy name, signature, parent and children; components are not copied."""
        clone = Entity.__new__(Entity)
        clone.name = self.name
        clone.signature = self.signature
        clone.components = {}
        clone._parent = self._parent
        clone._children = list(self._children)
        return clone

    def __repr__(self) -> str:
        return f"Entity(name={self.name!r}, signature={self.signature:#x})"


class EntityManager:
    """Owns a list of entities; becomes current when created."""

    def __init__(self) -> None:
        self.entities: list[Entity] = []
        self.use()

    def use(self) -> None:
        _current.entity_manager = self

    def create_entity(self, parent: Optional[Entity] = None) -> Entity:
        entity = Entity(parent)
        self.entities.append(entity)
        return entity

    def destroy_entity(self, entity: Entity) -> None:
        try:
            self.entities.remove(entity)
        except ValueError:
            raise ValueError(f"{entity!r} is not managed here") from None

    def set_signature(self, entity: Entity, signature: int) -> None:
        entity.signature = _check_signature(signature)

    def get_signature(self, entity: Entity) -> int:
        return entity.signature


class ComponentManager:
    """Maps component classes to types and stores components on entities."""

    def __init__(self) -> None:
        self.component_types: dict[type, ComponentType] = {}
        self.use()

    def use(self) -> None:
        _current.component_manager = self

    def register_component(self, component_cls: type, component_type: ComponentType) -> None:
        self.component_types[component_cls] = ComponentType(component_type)

    def get_component_type(self, component_cls: type) -> ComponentType:
        try:
            return self.component_types[component_cls]
        except KeyError:
            raise KeyError(f"component {component_cls.__name__} is not registered") from None

    def get_component(self, entity: Entity, component_cls: type[T]) -> T:
        try:
            return entity.components[component_cls]
        except KeyError:
            raise KeyError(f"{entity!r} has no {component_cls.__name__} component") from None

    def set_component(self, entity: Entity, component: Any) -> None:
        entity.components[type(component)] = component

    def remove_component(self, entity: Entity, component_cls: type) -> None:
        entity.components.pop(component_cls, None)


class System(ABC):
    """Base class for systems; holds the entities matching its signature."""

    def __init__(self) -> None:
        self.entities: list[Entity] = []

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance the system by ``dt`` seconds."""


class SystemManager:
    """Registers systems and keeps their entity lists in step with signatures."""

    def __init__(self) -> None:
        self.systems: dict[type, System] = {}
        self.signatures: dict[type, int] = {}
        self.use()

    def use(self) -> None:
        _current.system_manager = self

    def register_system(self, system_cls: type[S], signature: int) -> S:
        if not (isinstance(system_cls, type) and issubclass(system_cls, System)):
            raise TypeError(f"{system_cls!r} is not a System subclass")
        self.signatures[system_cls] = _check_signature(signature)
        system = system_cls()
        self.systems[system_cls] = system
        return system

    def entity_signature_changed(self, entity: Entity) -> None:
        for system_cls, signature in self.signatures.items():
            entities = self.systems[system_cls].entities
            if entity.signature & signature == signature:
                if entity not in entities:
                    entities.append(entity)
            elif entity in entities:
                entities.remove(entity)

    def get_signature(self, system_cls: type) -> int:
        try:
            return self.signatures[system_cls]
        except KeyError:
            raise KeyError(f"system {system_cls.__name__} is not registered") from None


class Scene(Entity):
    """An entity owning its own managers; updating it updates its systems."""

    def __init__(self, parent: Optional[Entity] = None, name: str = "Scene") -> None:
        super().__init__(parent, name)
        self.em = EntityManager()
        self.cm = ComponentManager()
        self.sm = SystemManager()

    def update(self, delta: float) -> None:
        for system in list(self.sm.systems.values()):
            system.update(delta)


class Root(Entity):
    """The top of the entity tree, tracking the active scene."""

    def __init__(self) -> None:
        super().__init__(None, "Root")
        self.em = EntityManager()
        self.cm = ComponentManager()
        self.sm = SystemManager()
        self.current_scene: Optional[Scene] = None

    def change_to_scene(self, new_scene: Optional[Scene]) -> None:
        self.current_scene = new_scene


def current_entity_manager() -> Optional[EntityManager]:
    return _current.entity_manager


def current_component_manager() -> Optional[ComponentManager]:
    return _current.component_manager


def current_system_manager() -> Optional[SystemManager]:
    return _current.system_manager


def get_root() -> Root:
    """Return the process-wide root entity, creating it on first use."""
    if _current.root is None:
        _current.root = Root()
    return _current.root