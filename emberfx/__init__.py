"""Fire effects: particle flame simulation, shader source loading and procedural fire controls."""

__version__ = "0.1.0"
__all__ = ["particles", "shader_source", "controls"]