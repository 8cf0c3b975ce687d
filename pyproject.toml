[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algoset"
version = "0.1.0"
description = "Classic array, string, interval, graph, grid and tree algorithms as plain Python functions."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "graphs",
    "intervals",
    "sliding-window",
    "union-find",
    "dijkstra",
    "topological-sort",
]
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
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
