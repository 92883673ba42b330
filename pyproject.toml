[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "planetside"
version = "0.1.0"
description = "Simulation core for a small-planet building game: procedural terrain, foliage, points of interest, cables, player movement and camera."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "simulation", "procedural", "perlin", "planet"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["planetside"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
