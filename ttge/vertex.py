"""Mesh vertex layout."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Vertex", "FLOATS_PER_VERTEX"]

FLOATS_PER_VERTEX = 8


@dataclass(frozen=True)
class Vertex:
    """A vertex with position, normal and texture coordinates."""

    position: tuple[float, float, float]
    normal: tuple[float, float, float]
    tex_coords: tuple[float, float]

    def __post_init__(self) -> None:
        for name, size in (("position", 3), ("normal", 3), ("tex_coords", 2)):
            value = tuple(float(v) for v in getattr(self, name))
            if len(value) != size:
                raise ValueError(f"{name} needs {size} components, got {len(value)}")
            object.__setattr__(self, name, value)

    def as_tuple(self) -> tuple[float, ...]:
        """The interleaved floats in buffer order."""
        return (*self.position, *self.normal, *self.tex_coords)