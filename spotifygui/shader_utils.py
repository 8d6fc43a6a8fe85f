"""Loading, compiling and linking GLSL shader programs."""

import sys
from pathlib import Path

_LOG_SIZE = 512


def load_shader_source(file_path) -> str:
    """Return the text of a shader file, or '' if it cannot be read."""
    try:
        return Path(file_path).read_text()
    except OSError:
        print(f"Failed to open shader file: {file_path}", file=sys.stderr)
        return ""


def _info_log(getter, object_id) -> str:
    from pyglet import gl

    log = (gl.GLchar * _LOG_SIZE)()
    getter(object_id, _LOG_SIZE, None, log)
    return log.value.decode(errors="replace")


def compile_shader(shader_type: str, source: str):
    """Compile source as a shader of the given type ('vertex', 'fragment', ...)."""
    from pyglet.graphics.shader import Shader, ShaderException

    try:
        shader = Shader(source, shader_type)
    except ShaderException as exc:
        raise RuntimeError(f"Shader compile error:\n{exc}") from exc
    check_shader_compile(shader)
    return shader


def create_shader_program(vertex_path, fragment_path):
    """Build a linked shader program from a vertex and a fragment shader file."""
    from pyglet.graphics.shader import ShaderException, ShaderProgram

    vertex_shader = compile_shader("vertex", load_shader_source(vertex_path))
    fragment_shader = compile_shader("fragment", load_shader_source(fragment_path))
    try:
        program = ShaderProgram(vertex_shader, fragment_shader)
    except ShaderException as exc:
        raise RuntimeError(f"Program link error:\n{exc}") from exc
    check_program_link(program)
    return program


def check_shader_compile(shader) -> None:
    """Raise RuntimeError if the shader did not compile."""
    from pyglet import gl

    status = gl.GLint()
    gl.glGetShaderiv(shader.id, gl.GL_COMPILE_STATUS, status)
    if not status.value:
        log = _info_log(gl.glGetShaderInfoLog, shader.id)
        raise RuntimeError(f"Shader compile error:\n{log}")


def check_program_link(program) -> None:
    """Raise RuntimeError if the program did not link."""
    from pyglet import gl

    status = gl.GLint()
    gl.glGetProgramiv(program.id, gl.GL_LINK_STATUS, status)
    if not status.value:
        log = _info_log(gl.glGetProgramInfoLog, program.id)
        raise RuntimeError(f"Program link error:\n{log}")