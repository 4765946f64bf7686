[build-system]
requires = ["hatchling>=1.18"]
build-backend = "hatchling.build"

[project]
name = "gradledepcheck"
version = "0.1.0"
description = "Parse Gradle dependency trees and render reports, DOT graphs and exports"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "gradle",
    "dependencies",
    "dependency-tree",
    "conflicts",
    "build-tools",
    "graphviz",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gradledepcheck"]

[tool.hatch.build.targets.sdist]
include = ["gradledepcheck", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
