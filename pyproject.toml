[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ghostfrag"
version = "0.0.1"
description = "Fragmentation of molecular systems: nuclear graphs, cluster and bond-based fragmenters, and GMBE weights"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "chemistry",
    "fragmentation",
    "quantum chemistry",
    "many-body expansion",
    "GMBE",
    "molecular graph",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Chemistry",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ghostfrag"]

[tool.pytest.ini_options]
addopts = "-ra"
