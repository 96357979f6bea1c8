[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "plainyaml"
version = "0.1.0"
description = "A small line-oriented YAML reader and writer that keeps comments, quoting and blank lines"
requires-python = ">=3.10"
dependencies = []
keywords = ["yaml", "config", "parser", "round-trip", "comments"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing :: Markup",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["plainyaml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
