"""Shader programs and their uniforms."""

from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence

__all__ = ["ShaderError", "Shader", "VERTEX_SHADER", "FRAGMENT_SHADER"]

VERTEX_SHADER = 0x8B31
FRAGMENT_SHADER = 0x8B30
_LOG_SIZE = 512

_SHADER_KINDS = {
    VERTEX_SHADER: "vertex",
    FRAGMENT_SHADER: "fragment",
    0x8DD9: "geometry",
    0x91B9: "compute",
    0x8E88: "tesscontrol",
    0x8E87: "tessevaluation",
}


class ShaderError(RuntimeError):
    """A shader failed to compile or a program failed to link."""


class _PygletGL:
    """The OpenGL calls the renderer needs, made through pyglet."""

    def __init__(self) -> None:
        from pyglet import gl
        from pyglet.graphics import shader as pyglet_shader

        self.gl = gl
        self._shader_mod = pyglet_shader
        self._compiled: dict[int, Any] = {}

    def _one(self, ctype: Any, value: int = 0) -> Any:
        return (ctype * 1)(value)

    def _name(self, text: str) -> Any:
        raw = text.encode("utf-8")
        buf = (self.gl.GLchar * (len(raw) + 1))()
        buf.value = raw
        return buf

    def create_program(self) -> int:
        return int(self.gl.glCreateProgram())

    def create_shader(self, shader_type: int, source: str) -> tuple[int, bool, str]:
        kind = _SHADER_KINDS.get(shader_type)
        if kind is None:
            raise ValueError(f"unknown shader type {shader_type:#x}")
        try:
            compiled = self._shader_mod.Shader(source, kind)
        except self._shader_mod.ShaderException as exc:
            return 0, False, str(exc)[:_LOG_SIZE]
        shader_id = int(compiled.id)
        self._compiled[shader_id] = compiled
        return shader_id, True, ""

    def delete_shader(self, shader_id: int) -> None:
        compiled = self._compiled.pop(shader_id, None)
        if compiled is not None:
            compiled.delete()
        else:
            self.gl.glDeleteShader(shader_id)

    def attach_shader(self, program: int, shader_id: int) -> None:
        self.gl.glAttachShader(program, shader_id)

    def link_program(self, program: int) -> tuple[bool, str]:
        gl = self.gl
        gl.glLinkProgram(program)
        status = self._one(gl.GLint)
        gl.glGetProgramiv(program, gl.GL_LINK_STATUS, status)
        log = ""
        if not status[0]:
            buf = (gl.GLchar * _LOG_SIZE)()
            gl.glGetProgramInfoLog(program, _LOG_SIZE, None, buf)
            log = buf.value.decode("utf-8", "replace")
        return bool(status[0]), log

    def use_program(self, program: int) -> None:
        self.gl.glUseProgram(program)

    def delete_program(self, program: int) -> None:
        self.gl.glDeleteProgram(program)

    def uniform_location(self, program: int, name: str) -> int:
        return int(self.gl.glGetUniformLocation(program, self._name(name)))

    def set_uniform(self, location: int, kind: str, values: Sequence[float]) -> None:
        gl = self.gl
        if kind == "f":
            gl.glUniform1f(location, values[0])
        elif kind == "i":
            gl.glUniform1i(location, int(values[0]))
        elif kind == "ui":
            gl.glUniform1ui(location, int(values[0]))
        elif kind == "vec":
            fn = {2: gl.glUniform2fv, 3: gl.glUniform3fv, 4: gl.glUniform4fv}[len(values)]
            fn(location, 1, (gl.GLfloat * len(values))(*values))
        elif kind == "mat":
            fn = {4: gl.glUniformMatrix2fv, 9: gl.glUniformMatrix3fv, 16: gl.glUniformMatrix4fv}[
                len(values)
            ]
            fn(location, 1, gl.GL_FALSE, (gl.GLfloat * len(values))(*values))
        else:
            raise ValueError(f"unknown uniform kind {kind!r}")

    def get_uniform(self, program: int, location: int, kind: str, count: int) -> list:
        gl = self.gl
        ctype, fn = {
            "f": (gl.GLfloat, gl.glGetUniformfv),
            "i": (gl.GLint, gl.glGetUniformiv),
            "ui": (gl.GLuint, gl.glGetUniformuiv),
        }[kind]
        buf = (ctype * count)()
        fn(program, location, buf)
        return list(buf)

    def gen_texture(self) -> int:
        tex = self._one(self.gl.GLuint)
        self.gl.glGenTextures(1, tex)
        return int(tex[0])

    def active_texture(self, slot: int) -> None:
        self.gl.glActiveTexture(slot)

    def bind_texture(self, target: int, texture_id: int) -> None:
        self.gl.glBindTexture(target, texture_id)

    def tex_parameter(self, target: int, pname: int, value: int) -> None:
        self.gl.glTexParameteri(target, pname, value)

    def tex_image_2d(self, target: int, width: int, height: int, data: bytes) -> None:
        gl = self.gl
        buf = (gl.GLubyte * len(data)).from_buffer_copy(data)
        gl.glTexImage2D(
            target, 0, gl.GL_RGBA, width, height, 0, gl.GL_RGBA, gl.GL_UNSIGNED_BYTE, buf
        )

    def generate_mipmap(self, target: int) -> None:
        self.gl.glGenerateMipmap(target)

    def delete_texture(self, texture_id: int) -> None:
        self.gl.glDeleteTextures(1, self._one(self.gl.GLuint, texture_id))

    def gen_vertex_array(self) -> int:
        vao = self._one(self.gl.GLuint)
        self.gl.glGenVertexArrays(1, vao)
        return int(vao[0])

    def gen_buffer(self) -> int:
        buf = self._one(self.gl.GLuint)
        self.gl.glGenBuffers(1, buf)
        return int(buf[0])

    def bind_vertex_array(self, vao: int) -> None:
        self.gl.glBindVertexArray(vao)

    def bind_buffer(self, target: int, buffer_id: int) -> None:
        self.gl.glBindBuffer(target, buffer_id)

    def buffer_data(self, target: int, kind: str, values: Sequence[float]) -> None:
        gl = self.gl
        ctype = gl.GLfloat if kind == "f" else gl.GLuint
        arr = (ctype * len(values))(*values)
        gl.glBufferData(target, memoryview(arr).nbytes, arr, gl.GL_STATIC_DRAW)

    def vertex_attrib(self, index: int, size: int, stride: int, offset: int) -> None:
        gl = self.gl
        gl.glVertexAttribPointer(index, size, gl.GL_FLOAT, gl.GL_FALSE, stride, offset)
        gl.glEnableVertexAttribArray(index)

    def draw_elements(self, mode: int, count: int) -> None:
        self.gl.glDrawElements(mode, count, self.gl.GL_UNSIGNED_INT, 0)


def default_gl() -> Any:
    return _PygletGL()


class Shader:
    """A linked shader program."""

    def __init__(self, gl: Optional[Any] = None) -> None:
        self.gl = gl if gl is not None else default_gl()
        self.id = self.gl.create_program()

    def create_shader(self, shader_type: int, source: str) -> int:
        shader_id, ok, log = self.gl.create_shader(shader_type, source)
        if not ok:
            raise ShaderError(f"shader compilation failed\n{log}")
        return shader_id

    def delete_shader(self, shader: int) -> None:
        self.gl.delete_shader(shader)

    def link_shader(self, shaders: Iterable[int]) -> int:
        for shader in shaders:
            self.gl.attach_shader(self.id, shader)
        ok, log = self.gl.link_program(self.id)
        if not ok:
            raise ShaderError(f"program linking failed\n{log}")
        return self.id

    def bind(self) -> None:
        self.gl.use_program(self.id)

    def unbind(self) -> None:
        self.gl.use_program(0)

    def delete(self) -> None:
        self.gl.delete_program(self.id)
        self.id = 0

    def _loc(self, uniform: str) -> int:
        return self.gl.uniform_location(self.id, uniform)

    def _set(self, uniform: str, kind: str, values: Sequence[float]) -> None:
        self.gl.set_uniform(self._loc(uniform), kind, tuple(values))

    def _set_vec(self, uniform: str, value: Sequence[float], size: int) -> None:
        values = tuple(float(v) for v in value)
        if len(values) != size:
            raise ValueError(f"expected {size} components, got {len(values)}")
        self._set(uniform, "vec", values)

    def _set_mat(self, uniform: str, value: Any, size: int) -> None:
        values = tuple(float(v) for v in _flatten(value))
        if len(values) != size * size:
            raise ValueError(f"expected a {size}x{size} matrix")
        self._set(uniform, "mat", values)

    def _get(self, uniform: str, kind: str, count: int) -> list:
        return self.gl.get_uniform(self.id, self._loc(uniform), kind, count)

    def set_float(self, uniform: str, value: float) -> None:
        self._set(uniform, "f", (float(value),))

    def set_int(self, uniform: str, value: int) -> None:
        self._set(uniform, "i", (int(value),))

    def set_uint(self, uniform: str, value: int) -> None:
        if value < 0:
            raise ValueError("unsigned uniform cannot be negative")
        self._set(uniform, "ui", (int(value),))

    def set_vec2(self, uniform: str, value: Sequence[float]) -> None:
        self._set_vec(uniform, value, 2)

    def set_vec3(self, uniform: str, value: Sequence[float]) -> None:
        self._set_vec(uniform, value, 3)

    def set_vec4(self, uniform: str, value: Sequence[float]) -> None:
        self._set_vec(uniform, value, 4)

    def set_mat2(self, uniform: str, value: Any) -> None:
        self._set_mat(uniform, value, 2)

    def set_mat3(self, uniform: str, value: Any) -> None:
        self._set_mat(uniform, value, 3)

    def set_mat4(self, uniform: str, value: Any) -> None:
        self._set_mat(uniform, value, 4)

    def get_float(self, uniform: str) -> float:
        return float(self._get(uniform, "f", 1)[0])

    def get_int(self, uniform: str) -> int:
        return int(self._get(uniform, "i", 1)[0])

    def get_uint(self, uniform: str) -> int:
        return int(self._get(uniform, "ui", 1)[0])

    def get_vec2(self, uniform: str) -> tuple[float, ...]:
        return tuple(self._get(uniform, "f", 2))

    def get_vec3(self, uniform: str) -> tuple[float, ...]:
        return tuple(self._get(uniform, "f", 3))

    def get_vec4(self, uniform: str) -> tuple[float, ...]:
        return tuple(self._get(uniform, "f", 4))

    def get_mat2(self, uniform: str) -> tuple[float, ...]:
        return tuple(self._get(uniform, "f", 4))

    def get_mat3(self, uniform: str) -> tuple[float, ...]:
        return tuple(self._get(uniform, "f", 9))

    def get_mat4(self, uniform: str) -> tuple[float, ...]:
        return tuple(self._get(uniform, "f", 16))


def _flatten(value: Any) -> list:
    out = []
    for item in value:
        if isinstance(item, (list, tuple)):
            out.extend(item)
        else:
            out.append(item)
    return out