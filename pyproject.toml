[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "frogleap"
version = "0.1.0"
description = "Shuffled frog-leaping search for the 0/1 knapsack problem"
requires-python = ">=3.10"
dependencies = []
keywords = ["shuffled frog leaping", "metaheuristic", "knapsack", "optimization", "memetic"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
frogleap = "frogleap.algorithm:main"

[tool.hatch.build.targets.wheel]
packages = ["frogleap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
