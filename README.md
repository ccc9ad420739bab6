# ttge

A small game engine: an entity-component-system core, input state
tracking, small float vectors, a vertex layout, shader program helpers and
a window loop, built on pyglet.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Starting the engine

```
ttge
```

This opens an 800×600 OpenGL 3.3 window cleared to a dark grey, and
clears, polls events and swaps buffers each frame until the window is
closed.

From Python the same loop is driven by `ttge.engine.Engine`:

```python
from ttge.engine import Engine

engine = Engine()
engine.init()
try:
    engine.run()
finally:
    engine.destroy()
```

`Engine` takes an optional `window_factory` (any callable returning an
object with `clear`, `dispatch_events`, `flip`, `close` and `has_exit`) and
a `clock` callable. `run()` raises `RuntimeError` if `init()` has not been
called. Each frame calls `tick(now)`, which computes the delta as the
previous clock reading minus `now`, stores `now`, and passes the delta to
`update(delta)`. The default `update` records `last_delta` and increments
`frame_count`.

## Entities, components and systems

`ttge.ecs` holds the entity-component-system core:

- `Entity` has a `name`, an integer `signature` and a `components` dict;
  creating one with a parent adds it to the parent's `children`. `copy()`
  copies name, signature, parent and children but not components.
- `EntityManager` creates and destroys entities (`create_entity`,
  `destroy_entity`) and sets and reads their signatures. Signatures must
  fit in 32 bits, otherwise `ValueError` is raised.
- `ComponentManager` maps component classes to a `ComponentType`
  (`RENDERABLE`, `TRANSFORMABLE`) and gets, sets and removes component
  values on an entity, keyed by the component's class.
- `SystemManager` registers `System` subclasses with a signature and keeps
  each system's `entities` list in step through `entity_signature_changed`.
- `Scene` is an entity owning its own three managers; `update(delta)`
  updates every registered system. `Root` tracks the active scene through
  `change_to_scene`; `get_root()` returns the shared root, creating it on
  first use.

```python
from ttge.ecs import EntityManager, SystemManager, System

class Movement(System):
    def update(self, dt):
        for entity in self.entities:
            ...

entities = EntityManager()
systems = SystemManager()
movement = systems.register_system(Movement, 0b1)

player = entities.create_entity(None)
entities.set_signature(player, 0b1)
systems.entity_signature_changed(player)
assert player in movement.entities
```

Each manager becomes current when created or when its `use()` is called;
`current_entity_manager()`, `current_component_manager()` and
`current_system_manager()` return the current ones.

## Input

`ttge.input.Input` records key, mouse button, cursor, joystick and gamepad
state fed to it through `key_callback`, `mouse_button_callback`,
`cursor_position_callback`, `joystick_callback` and
`gamepad_button_callback`, using the codes in `Key`, `MouseButton`,
`Joystick`, `GamepadButton`, `Action` and `JoystickEvent`. It answers
`is_key_pressed(Key.ESCAPE)`, `is_mouse_button_pressed(MouseButton.LEFT)`
and the like (raising `IndexError` for codes out of range), and keeps
`mouse_position` and `mouse_delta` as `Vector2`. `reset()` clears all state.

## Vectors, vertices and files

- `ttge.vector` provides `Vector1` to `Vector4` with addition, subtraction,
  and multiplication and division by a scalar. `Vector4` defaults `w` to 1.
- `ttge.vertex.Vertex` holds a position, normal and texture coordinates;
  `as_tuple()` gives the eight interleaved floats.
- `ttge.utils.read_file_as_string(path)` returns a file's text, or an empty
  string (with a message on stderr) if it cannot be opened.

## Shaders

`ttge.shader.Shader` wraps an OpenGL program and needs a current GL
context. `create_shader(VERTEX_SHADER, source)` compiles a stage and
`link_shader(ids)` attaches and links them; failures raise `ShaderError`.
`bind`, `unbind`, `delete` and `delete_shader` manage the program, and
`set_float` … `set_mat4` / `get_float` … `get_mat4` write and read uniforms
by name. A different GL backend object can be passed as `Shader(gl=...)`.

## What it does not do

The package has no texture loading, no material description and no mesh
upload or drawing, so the window loop draws nothing but the clear colour.
`Input` is not connected to the window automatically; its callbacks must
be called by your own code. There is no scene saving or loading.