[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jsondom"
version = "0.1.0"
description = "A small JSON document object model with typed accessors, pointers and mutable containers"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "dom", "parser", "pointer", "document"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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
packages = ["jsondom"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
