[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "edaulas"
version = "0.1.0"
description = "Classic data-structure and algorithm exercises: trees, AVL rotations, sorting, searching, graphs and grade records"
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "algorithms", "data structures", "sorting", "searching", "graphs", "avl", "dijkstra"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Portuguese (Brazilian)",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
edaulas = "edaulas.cli:main"

[tool.setuptools.packages.find]
include = ["edaulas*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
