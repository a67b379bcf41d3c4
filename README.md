# emberfx

Fire effects without a graphics stack attached. emberfx provides:

- **`emberfx.particles`**: a flame made of particles. Each particle is born at
  the base of the fire and rises. It is pushed by buoyancy, wind and
  turbulence. As it ages it grows, and its colour moves from white-yellow
  through orange and red to a fading dark red. A particle that has burnt out
  is replaced by a fresh one at the base.
- **`emberfx.shader_source`**: loading of vertex and fragment shader source
  files as text, with a `ShaderLoadError` when a file cannot be read.
- **`emberfx.controls`**: the parameters of a procedural fire shader
  (intensity, speed, noise octaves, scale, noise type). It also maps
  keyboard keys onto them and produces the uniform values a renderer uploads
  each frame.

The package has no runtime dependencies.

## Installation

```
pip install emberfx
```

## Particle fire

```python
import random
from emberfx.particles import FireSimulation

sim = FireSimulation(count=5000, rng=random.Random(42))
for _ in range(60):
    sim.update(1 / 60)

data = sim.vertex_data()  # array("f"): x, y, z, size, r, g, b, a per particle
```

`FireSimulation` holds `PARTICLE_COUNT` (5000) particles by default and uses a
fresh `random.Random` unless one is given; a negative count raises
`ValueError`. Its `particles` list holds `Particle` dataclasses with position,
velocity, acceleration, life, size, colour, temperature and turbulence.

`spawn_particle(rng)` creates one fresh particle from a `random.Random`.
`wind_force(position, time)` returns the wind and rising-air force at a point
as an `(x, y, z)` tuple.

## Shader sources

```python
from emberfx.shader_source import load_program_sources, ShaderLoadError

try:
    vertex_src, fragment_src = load_program_sources("shaders/shader.vert",
                                                    "shaders/shader.frag")
except ShaderLoadError as err:
    print(err)
```

`load_shader_source(path)` reads a single file as UTF-8 text. `ShaderLoadError`
is an `OSError` carrying the `path` and the `reason`.

## Procedural fire controls

```python
from emberfx.controls import FireParameters, handle_key, controls_text

params = FireParameters()
print(controls_text())
handle_key(params, "3")   # intensity 1.5x
handle_key(params, "N")   # switch between simplex and Perlin noise
uniforms = params.uniforms(time=2.5)
params.reset()
```

Keys: `1`–`4` set the intensity, `Q`/`W`/`E`/`R` set the speed, `Z`/`X`/`C`
set the octaves, `A`/`S`/`D` set the scale, `N` toggles the noise type, and
`space` restores intensity, speed, octaves and scale to their defaults (the
noise type is kept). Key names are case-insensitive. `handle_key` prints a
line of feedback for each recognised key and returns `False` for `escape`
(or `esc`), meaning the caller should exit, and `True` otherwise.

`uniforms(time)` returns a dict keyed by `u_time`, `u_intensity`, `u_speed`,
`u_octaves`, `u_scale` and `u_noise_type`. `NoiseType` is an `IntEnum` with
`SIMPLEX` (0) and `PERLIN` (1).

## What emberfx does not do

emberfx opens no window, compiles no shaders and draws nothing, and it has no
command to run. Feed the vertex data, shader sources and uniforms into
whatever OpenGL, software or plotting back end you use.

## Running the tests

```
pip install "emberfx[test]"
pytest
```