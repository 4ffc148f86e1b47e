[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algoset"
version = "0.1.0"
description = "Solutions to classic algorithm puzzles over arrays, strings and linked lists, with a linked list node and a max-heap."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data-structures", "linked-list", "heap", "dynamic-programming", "puzzles"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["algoset"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
