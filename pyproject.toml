[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ttge"
version = "0.1.0"
description = "A small game engine: entity-component-system core, input state tracking, vector maths, shader helpers and a pyglet main loop"
requires-python = ">=3.10"
dependencies = [
    "pyglet",
]
keywords = ["game engine", "ecs", "entity component system", "opengl", "shader", "pyglet"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ttge = "ttge.engine:main"

[tool.hatch.build.targets.wheel]
packages = ["ttge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
