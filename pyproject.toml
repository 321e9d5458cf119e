[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "perlinterrain"
version = "0.1.0"
description = "Seeded, reproducible Perlin noise with octave helpers and a scrolling wireframe terrain generator"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "perlin",
    "noise",
    "procedural",
    "terrain",
    "heightmap",
    "octave",
    "mt19937",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
perlinterrain = "perlinterrain.terrain:main"

[tool.hatch.build.targets.wheel]
packages = ["perlinterrain"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
