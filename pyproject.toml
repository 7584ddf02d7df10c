[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubengine"
version = "0.1.0"
description = "A small entity-component-system game engine with keyboard movement and sprite rendering"
requires-python = ">=3.10"
dependencies = [
    "pillow",
    "pygame",
]
keywords = ["game", "engine", "ecs", "entity-component-system", "sprites", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cubengine = "cubengine.app:main"

[tool.hatch.build.targets.wheel]
packages = ["cubengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
