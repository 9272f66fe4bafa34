[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "keybounds"
version = "0.1.0"
description = "Turn key ranges and key prefixes into lower and upper iteration bounds over byte-ordered keys"
requires-python = ">=3.10"
dependencies = []
keywords = ["key-value", "range", "prefix", "bounds", "iterator", "bytes"]
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
    "Topic :: Database",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["keybounds"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
