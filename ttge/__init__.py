"""A small game engine: ECS core, input tracking, vectors, vertices, shader helpers and a window loop."""

__version__ = "0.1.0"

__all__ = ["ecs", "engine", "input", "shader", "utils", "vector", "vertex"]