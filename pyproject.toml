[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minidig"
version = "0.1.0"
description = "A small component-based 2D game engine and a tunnel digging arcade game built on pygame"
requires-python = ">=3.10"
keywords = ["game", "engine", "pygame", "arcade", "components", "tunnels"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
minidig = "minidig.main:main"

[tool.hatch.build.targets.wheel]
packages = ["minidig"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
