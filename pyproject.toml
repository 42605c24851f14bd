[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pocket48cli"
version = "2.0.0"
description = "Command-line listing of Pocket48 live streams and recorded broadcasts"
requires-python = ">=3.10"
keywords = ["pocket48", "live", "cli", "streaming"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
]
dependencies = [
    "requests>=2.28",
    "pyyaml>=6.0",
    "tabulate>=0.9",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "responses>=0.23",
]

[project.scripts]
pocket48cli = "pocket48cli.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pocket48cli"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
