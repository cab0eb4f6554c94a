[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cslabs"
version = "1.0.0"
description = "Data-structures and algorithms exercises: object lifetimes, a bank account, a linked list, shortest tours, sliding puzzles and topological sorting"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "data-structures",
    "algorithms",
    "linked-list",
    "traveling-salesman",
    "8-puzzle",
    "topological-sort",
    "mersenne-twister",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cslabs-lifecycle = "cslabs.lifecycle:main"
cslabs-bank = "cslabs.bank:main"
cslabs-power = "cslabs.basics:power_main"
cslabs-stats = "cslabs.basics:stats_main"
cslabs-traveling = "cslabs.traveling:main"
cslabs-puzzle = "cslabs.puzzle:main"
cslabs-topological = "cslabs.topological:main"
cslabs-listshell = "cslabs.listshell:main"

[tool.hatch.build.targets.wheel]
packages = ["cslabs"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
