[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "emberfx"
version = "0.1.0"
description = "Fire effects: a particle-based flame simulation, shader source loading and procedural fire shader parameters"
requires-python = ">=3.10"
dependencies = []
keywords = ["fire", "particles", "simulation", "shader", "graphics", "procedural"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["emberfx"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
