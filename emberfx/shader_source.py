"""Loading GLSL shader source text from disk."""

from __future__ import annotations

import os
from pathlib import Path


class ShaderLoadError(OSError):
    """Raised when a shader source file cannot be read."""

    def __init__(self, path: str | os.PathLike, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"could not read shader {self.path}: {reason}")


def load_shader_source(path: str | os.PathLike) -> str:
    """Return the text of the shader file at ``path``."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ShaderLoadError(path, str(exc)) from exc


def load_program_sources(
    vertex_path: str | os.PathLike, fragment_path: str | os.PathLike
) -> tuple[str, str]:
    """Return the vertex and fragment shader sources of a program."""
    return load_shader_source(vertex_path), load_shader_source(fragment_path)