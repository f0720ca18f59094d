[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gwparse"
version = "0.1.0"
description = "Grammar-based command-line argument parser with shell completion candidates"
requires-python = ">=3.10"
dependencies = []
keywords = ["grammar", "parser", "argument parsing", "completion", "bash", "fish"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gwparse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
