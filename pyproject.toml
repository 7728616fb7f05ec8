[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lissajous"
version = "0.1.0"
description = "Animated Lissajous curve table with keyboard controls, plus a closed knight's tour solver for a 5x6 board"
requires-python = ">=3.10"
keywords = ["lissajous", "parametric", "animation", "pygame", "knights-tour"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
lissajous = "lissajous.app:main"

[tool.hatch.build.targets.wheel]
packages = ["lissajous"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
