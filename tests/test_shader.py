import pytest

from ttge.shader import FRAGMENT_SHADER, VERTEX_SHADER, Shader, ShaderError


class FakeGL:
    def __init__(self, compile_ok=True, link_ok=True):
        self.compile_ok = compile_ok
        self.link_ok = link_ok
        self.uniforms = {}
        self.attached = []
        self.used = []
        self.deleted = []

    def create_program(self):
        return 7

    def create_shader(self, shader_type, source):
        return (shader_type & 0xFF, self.compile_ok, "" if self.compile_ok else "bad syntax")

    def delete_shader(self, shader_id):
        self.deleted.append(shader_id)

    def attach_shader(self, program, shader_id):
        self.attached.append((program, shader_id))

    def link_program(self, program):
        return self.link_ok, "" if self.link_ok else "unresolved"

    def use_program(self, program):
        self.used.append(program)

    def delete_program(self, program):
        self.deleted.append(program)

    def uniform_location(self, program, name):
        return name

    def set_uniform(self, location, kind, values):
        self.uniforms[location] = list(values)

    def get_uniform(self, program, location, kind, count):
        return self.uniforms[location][:count]


def test_compile_and_link():
    gl = FakeGL()
    shader = Shader(gl)
    shaders = [shader.create_shader(VERTEX_SHADER, "v"), shader.create_shader(FRAGMENT_SHADER, "f")]
    assert shader.link_shader(shaders) == shader.id
    assert gl.attached == [(shader.id, s) for s in shaders]


def test_compile_failure_raises():
    shader = Shader(FakeGL(compile_ok=False))
    with pytest.raises(ShaderError, match="bad syntax"):
        shader.create_shader(VERTEX_SHADER, "x")


def test_link_failure_raises():
    shader = Shader(FakeGL(link_ok=False))
    with pytest.raises(ShaderError):
        shader.link_shader([])


def test_bind_unbind_delete():
    gl = FakeGL()
    shader = Shader(gl)
    program = shader.id
    shader.bind()
    shader.unbind()
    shader.delete()
    assert gl.used == [program, 0]
    assert shader.id == 0
    assert program in gl.deleted


def test_scalar_round_trips():
    shader = Shader(FakeGL())
    shader.set_float("f", 2.5)
    shader.set_int("i", -3)
    shader.set_uint("u", 9)
    assert shader.get_float("f") == 2.5
    assert shader.get_int("i") == -3
    assert shader.get_uint("u") == 9


def test_vector_and_matrix_round_trips():
    shader = Shader(FakeGL())
    shader.set_vec3("v", (1, 2, 3))
    shader.set_mat2("m", [[1, 2], [3, 4]])
    ident = tuple(1.0 if r == c else 0.0 for r in range(4) for c in range(4))
    shader.set_mat4("model", ident)
    assert shader.get_vec3("v") == (1.0, 2.0, 3.0)
    assert shader.get_mat2("m") == (1.0, 2.0, 3.0, 4.0)
    assert shader.get_mat4("model") == ident


def test_bad_sizes_rejected():
    shader = Shader(FakeGL())
    with pytest.raises(ValueError):
        shader.set_vec4("v", (1, 2, 3))
    with pytest.raises(ValueError):
        shader.set_mat3("m", [1] * 4)
    with pytest.raises(ValueError):
        shader.set_uint("u", -1)