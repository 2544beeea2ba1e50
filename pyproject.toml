[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "colasim"
version = "0.1.0"
description = "Discrete-event simulation of a single-server queue with exponential arrivals and service"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "simulation",
    "discrete-event",
    "queueing",
    "mm1",
    "random-number-generator",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
colasim = "colasim.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["colasim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
