[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "penguinrun"
version = "0.1.0"
description = "Game rules for a top-down penguin arcade game: stages, walls, collisions, money, enemies, a camera and title-screen effects, with no drawing attached."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "collision", "stage", "sprites", "2d"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["penguinrun"]

[tool.hatch.build.targets.sdist]
include = ["penguinrun", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
