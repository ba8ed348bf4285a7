[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drynn"
version = "0.1.0"
description = "Procedural star-cluster generator for a turn-based space strategy game: hex placement, stars, planets, atmospheres, mineral deposits and home-system templates."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "worldgen",
    "procedural-generation",
    "hex-map",
    "space",
    "strategy-game",
    "star-cluster",
]
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
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["drynn"]

[tool.hatch.build.targets.sdist]
include = ["drynn", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
