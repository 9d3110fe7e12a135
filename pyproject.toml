[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ecsworld"
version = "0.1.0"
description = "An entity-component-system scene model with transforms, cameras, lights, meshes, materials and scene loading from JSON-style data."
requires-python = ">=3.10"
keywords = ["ecs", "entity-component-system", "scene", "game", "transform", "camera", "mesh", "obj"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ecsworld"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
