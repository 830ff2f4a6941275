[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reformant"
version = "0.1.0"
description = "Building blocks for a voice analysis tool: Oklab, Okhsl and Okhsv colour maths, single-producer single-consumer queues, a 2D grid and an interface colour palette."
requires-python = ">=3.10"
dependencies = []
keywords = ["oklab", "okhsl", "okhsv", "color", "gamut", "queue", "spsc", "semaphore", "formant"]
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
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["reformant"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
