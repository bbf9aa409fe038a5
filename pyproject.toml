[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numethods"
version = "0.1.0"
description = "Classic numerical methods: bracketing and open root finding, naive Gaussian elimination and direct polynomial interpolation"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "numerical-methods",
    "bisection",
    "false-position",
    "newton-raphson",
    "gaussian-elimination",
    "interpolation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
numethods-bisection = "numethods.rootfinding:main_bisection"
numethods-false-position = "numethods.rootfinding:main_false_position"
numethods-newton = "numethods.rootfinding:main_newton"
numethods-gauss = "numethods.linear:main"
numethods-interpolate = "numethods.interpolation:main"

[tool.hatch.build.targets.wheel]
packages = ["numethods"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
