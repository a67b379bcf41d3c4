"""Particle-based fire simulation: spawning, forces and per-frame updates."""

from __future__ import annotations

import math
import random
from array import array
from dataclasses import dataclass, field

PARTICLE_COUNT = 5000

# Floats per particle in the vertex stream: position (3), size (1), colour (4).
VERTEX_STRIDE = 8

Vec3 = tuple[float, float, float]
Vec4 = tuple[float, float, float, float]


@dataclass(slots=True)
class Particle:
    """One fire particle with its physical and visual state."""

    position: Vec3 = (0.0, 0.0, 0.0)
    velocity: Vec3 = (0.0, 0.0, 0.0)
    acceleration: Vec3 = (0.0, 0.0, 0.0)
    life: float = 0.0
    max_life: float = 0.0
    size: float = 0.0
    initial_size: float = 0.0
    color: Vec4 = (0.0, 0.0, 0.0, 0.0)
    temperature: float = 0.0
    turbulence: float = 0.0
    active: bool = False


def _roll(rng: random.Random) -> int:
    return rng.randrange(100)


def spawn_particle(rng: random.Random) -> Particle:
    """Create a fresh particle at the base of the fire."""
    max_life = 0.5 + _roll(rng) / 100.0
    base_spread = 2.0
    position = (
        (_roll(rng) / 100.0 - 0.5) * base_spread,
        -1.3 + _roll(rng) / 500.0,
        (_roll(rng) / 100.0 - 0.5) * base_spread,
    )
    upward_force = 1.2 + _roll(rng) / 200.0
    velocity = (
        (_roll(rng) / 100.0 - 0.5) * 0.3,
        upward_force,
        (_roll(rng) / 100.0 - 0.5) * 0.3,
    )
    initial_size = 0.08 + _roll(rng) / 1000.0
    temperature = 0.8 + _roll(rng) / 500.0
    color = (1.0, 0.3 + temperature * 0.7, 0.2 if temperature > 0.9 else 0.0, 1.0)
    turbulence = _roll(rng) / 100.0
    return Particle(
        position=position,
        velocity=velocity,
        acceleration=(0.0, -0.5, 0.0),
        life=max_life,
        max_life=max_life,
        size=initial_size,
        initial_size=initial_size,
        color=color,
        temperature=temperature,
        turbulence=turbulence,
        active=True,
    )


def wind_force(position: Vec3, time: float) -> Vec3:
    """Wind and rising hot air acting on a point at the given time."""
    y = position[1]
    wind_x = math.sin(time * 2.0 + y * 3.0) * 0.2
    wind_z = math.cos(time * 1.5 + y * 2.0) * 0.15
    rising_air = (y + 1.0) * 0.3
    return (wind_x, rising_air, wind_z)


def _fire_color(life_ratio: float, temperature: float) -> Vec4:
    if life_ratio > 0.7:
        r = 1.0
        g = 0.8 + temperature * 0.2
        b = 0.4 if temperature > 0.8 else 0.0
    elif life_ratio > 0.4:
        r = 1.0
        g = 0.4 + (life_ratio - 0.4) / 0.3 * 0.4
        b = (life_ratio - 0.4) / 0.3 * 0.1
    elif life_ratio > 0.2:
        r = 0.8 + (life_ratio - 0.2) / 0.2 * 0.2
        g = (life_ratio - 0.2) / 0.2 * 0.3
        b = 0.0
    else:
        fade = life_ratio / 0.2
        r = 0.3 * fade
        g = 0.1 * fade
        b = 0.1 * fade
    a = life_ratio / 0.3 if life_ratio < 0.3 else 1.0
    return (r, g, b, a * 0.8)


@dataclass
class FireSimulation:
    """A pool of particles that respawn at the base as they burn out."""

    count: int = PARTICLE_COUNT
    rng: random.Random = field(default_factory=random.Random)
    particles: list[Particle] = field(init=False)
    global_time: float = field(init=False, default=0.0)

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError("particle count must not be negative")
        self.particles = [spawn_particle(self.rng) for _ in range(self.count)]

    def _advance(self, index: int, dt: float) -> None:
        p = self.particles[index]
        if not p.active or p.life <= 0.0:
            self.particles[index] = spawn_particle(self.rng)
            return

        p.life -= dt
        life_ratio = p.life / p.max_life

        # The shared clock advances once per live particle update.
        self.global_time += dt
        t = self.global_time

        wind = wind_force(p.position, t)
        turb = (
            math.sin(t * 5.0 + p.turbulence * 10.0) * 0.1,
            0.0,
            math.cos(t * 4.0 + p.turbulence * 8.0) * 0.1,
        )
        p.acceleration = tuple(
            base + w + tb for base, w, tb in zip((0.0, -0.2, 0.0), wind, turb)
        )
        p.velocity = tuple(v + a * dt for v, a in zip(p.velocity, p.acceleration))
        p.position = tuple(x + v * dt for x, v in zip(p.position, p.velocity))

        p.size = p.initial_size * (1.0 + (1.0 - life_ratio) * 2.0)
        p.temperature = life_ratio * 0.9 + 0.1
        p.color = _fire_color(life_ratio, p.temperature)

    def update(self, dt: float) -> None:
        """Advance every particle by ``dt`` seconds."""
        for index in range(len(self.particles)):
            self._advance(index, dt)

    def vertex_data(self) -> array:
        """Interleaved float32 vertex stream: position, size, colour per particle."""
        data = array("f")
        for p in self.particles:
            data.extend(p.position)
            data.append(p.size)
            data.extend(p.color)
        return data