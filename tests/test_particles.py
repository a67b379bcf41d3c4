import math
import random

import pytest

from emberfx.particles import (
    PARTICLE_COUNT,
    VERTEX_STRIDE,
    FireSimulation,
    Particle,
    spawn_particle,
    wind_force,
)


def test_spawn_particle_ranges():
    rng = random.Random(7)
    for _ in range(500):
        p = spawn_particle(rng)
        assert p.active
        assert 0.5 <= p.max_life <= 1.5
        assert p.life == p.max_life
        x, y, z = p.position
        assert -1.0 <= x < 1.0 and -1.0 <= z < 1.0
        assert -1.3 <= y < -1.3 + 0.2
        assert 1.2 <= p.velocity[1] < 1.7
        assert p.acceleration == (0.0, -0.5, 0.0)
        assert p.size == p.initial_size
        assert 0.08 <= p.initial_size < 0.18
        assert 0.8 <= p.temperature < 1.0
        assert p.color[0] == 1.0 and p.color[3] == 1.0
        assert p.color[2] == (0.2 if p.temperature > 0.9 else 0.0)
        assert 0.0 <= p.turbulence < 1.0


def test_spawn_particle_is_deterministic_for_seed():
    first = spawn_particle(random.Random(3))
    second = spawn_particle(random.Random(3))
    assert first.position == second.position
    assert first.velocity == second.velocity
    assert first.max_life == second.max_life
    assert first.initial_size == second.initial_size
    assert first.color == second.color
    assert first.turbulence == second.turbulence
    assert 0.5 <= first.max_life <= 1.5

    other = spawn_particle(random.Random(4))
    assert (other.position, other.velocity, other.turbulence) != (
        first.position,
        first.velocity,
        first.turbulence,
    )


def test_wind_force_at_origin_time_zero():
    wx, rise, wz = wind_force((0.0, 0.0, 0.0), 0.0)
    assert wx == pytest.approx(0.0)
    assert rise == pytest.approx(0.3)
    assert wz == pytest.approx(0.15)


def test_wind_force_rising_air_grows_with_height():
    low = wind_force((0.0, -1.0, 0.0), 1.0)
    high = wind_force((0.0, 1.0, 0.0), 1.0)
    assert low[1] == pytest.approx(0.0)
    assert high[1] > low[1]
    assert abs(high[0]) <= 0.2 and abs(high[2]) <= 0.15


def test_simulation_default_count():
    sim = FireSimulation(rng=random.Random(0))
    assert len(sim.particles) == PARTICLE_COUNT


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        FireSimulation(count=-1)


def test_vertex_data_layout():
    sim = FireSimulation(count=4, rng=random.Random(1))
    data = sim.vertex_data()
    assert len(data) == 4 * VERTEX_STRIDE
    first = sim.particles[0]
    assert list(data[0:3]) == pytest.approx(list(first.position), abs=1e-6)
    assert data[3] == pytest.approx(first.size, abs=1e-6)
    assert list(data[4:8]) == pytest.approx(list(first.color), abs=1e-6)


def test_update_decrements_life_and_advances_clock():
    sim = FireSimulation(count=3, rng=random.Random(2))
    lives = [p.life for p in sim.particles]
    sim.update(0.01)
    for before, p in zip(lives, sim.particles):
        assert p.life == pytest.approx(before - 0.01)
    assert sim.global_time == pytest.approx(0.03)


def test_dead_particle_respawns_without_moving_clock():
    sim = FireSimulation(count=1, rng=random.Random(4))
    sim.particles[0].life = 0.0
    sim.update(0.5)
    p = sim.particles[0]
    assert p.life == p.max_life
    assert sim.global_time == 0.0


def test_inactive_particle_respawns():
    sim = FireSimulation(count=1, rng=random.Random(5))
    sim.particles[0] = Particle()
    sim.update(0.1)
    assert sim.particles[0].active
    assert sim.particles[0].acceleration == (0.0, -0.5, 0.0)


def test_hot_phase_colour():
    sim = FireSimulation(count=1, rng=random.Random(6))
    p = sim.particles[0]
    p.life = p.max_life
    sim.update(0.0)
    assert p.temperature == pytest.approx(1.0)
    assert p.size == pytest.approx(p.initial_size)
    assert p.color == pytest.approx((1.0, 1.0, 0.4, 0.8))


def test_orange_and_fade_phases():
    sim = FireSimulation(count=1, rng=random.Random(8))
    p = sim.particles[0]
    p.max_life = 1.0
    p.life = 0.5
    sim.update(0.0)
    assert p.color[0] == pytest.approx(1.0)
    assert p.color[3] == pytest.approx(0.8)
    assert p.size == pytest.approx(p.initial_size * 2.0)

    p.life = 0.1
    sim.update(0.0)
    r, g, b, a = p.color
    assert r == pytest.approx(0.15)
    assert g == pytest.approx(b)
    assert a < 0.8