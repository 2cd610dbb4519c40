[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "saguaro"
version = "0.1.1"
description = "Saguaro is a SAT solver"
requires-python = ">=3.10"
dependencies = []
keywords = ["sat", "solver", "cdcl", "cnf", "dimacs", "boolean", "satisfiability"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
saguaro = "saguaro.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["saguaro"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
