"""Parameters of the procedural fire shader and their keyboard controls."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

DEFAULT_INTENSITY = 1.5
DEFAULT_SPEED = 1.0
DEFAULT_OCTAVES = 6
DEFAULT_SCALE = 3.0


class NoiseType(IntEnum):
    """Noise function used by the fire shader."""

    SIMPLEX = 0
    PERLIN = 1

    @property
    def label(self) -> str:
        return self.name.capitalize()


@dataclass
class FireParameters:
    """Tunable values fed to the fire shader as uniforms."""

    intensity: float = DEFAULT_INTENSITY
    speed: float = DEFAULT_SPEED
    octaves: int = DEFAULT_OCTAVES
    scale: float = DEFAULT_SCALE
    noise_type: NoiseType = NoiseType.SIMPLEX

    def toggle_noise_type(self) -> NoiseType:
        """Switch between simplex and Perlin noise and return the new type."""
        self.noise_type = NoiseType(1 - self.noise_type)
        return self.noise_type

    def reset(self) -> None:
        """Restore intensity, speed, octaves and scale; the noise type is kept."""
        self.intensity = DEFAULT_INTENSITY
        self.speed = DEFAULT_SPEED
        self.octaves = DEFAULT_OCTAVES
        self.scale = DEFAULT_SCALE

    def uniforms(self, time: float) -> dict[str, float | int]:
        """Uniform values for one frame rendered at ``time``."""
        return {
            "u_time": float(time),
            "u_intensity": float(self.intensity),
            "u_speed": float(self.speed),
            "u_octaves": int(self.octaves),
            "u_scale": float(self.scale),
            "u_noise_type": int(self.noise_type),
        }


_PRESETS: dict[str, tuple[str, float | int, str]] = {
    "1": ("intensity", 0.5, "Fire intensity: 0.5x"),
    "2": ("intensity", 1.0, "Fire intensity: 1.0x"),
    "3": ("intensity", 1.5, "Fire intensity: 1.5x"),
    "4": ("intensity", 2.0, "Fire intensity: 2.0x"),
    "q": ("speed", 0.5, "Fire speed: 0.5x"),
    "w": ("speed", 1.0, "Fire speed: 1.0x"),
    "e": ("speed", 1.5, "Fire speed: 1.5x"),
    "r": ("speed", 2.0, "Fire speed: 2.0x"),
    "z": ("octaves", 3, "Noise octaves: 3"),
    "x": ("octaves", 6, "Noise octaves: 6"),
    "c": ("octaves", 8, "Noise octaves: 8"),
    "a": ("scale", 2.0, "Fire scale: 2.0x"),
    "s": ("scale", 3.0, "Fire scale: 3.0x"),
    "d": ("scale", 4.0, "Fire scale: 4.0x"),
}


def handle_key(params: FireParameters, key: str) -> bool:
    """Apply a key press to ``params``, printing feedback.

    Keys are names such as ``"1"``, ``"q"``, ``"n"``, ``"space"`` or
    ``"escape"``. Returns False when the key asks to exit, True otherwise.
    """
    name = key.lower()
    if name in ("escape", "esc"):
        return False
    if name in _PRESETS:
        attribute, value, message = _PRESETS[name]
        setattr(params, attribute, value)
        print(message)
    elif name == "n":
        print(f"Noise type: {params.toggle_noise_type().label}")
    elif name in ("space", " "):
        params.reset()
        print("Reset to default values")
    return True


def controls_text() -> str:
    """The keyboard help shown at start-up."""
    lines = [
        "",
        "=== Procedural Fire Shader Demo ===",
        "Fire Intensity: 1-4 keys (0.5x - 2.0x)",
        "Fire Speed: Q-R keys (0.5x - 2.0x)",
        "Noise Octaves: Z-C keys (3, 6, 8)",
        "Fire Scale: A-D keys (2.0x - 4.0x)",
        "Toggle Noise Type: N key",
        "Reset to defaults: SPACE",
        "Exit: ESC",
        "================================",
        "",
    ]
    return "\n".join(lines)