[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wonderzork"
version = "1.0.0"
description = "A small text adventure in which Alice must find her way out of Wonderland."
requires-python = ">=3.10"
dependencies = []
keywords = ["text adventure", "interactive fiction", "zork", "game", "wonderland"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wonderzork = "wonderzork.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wonderzork"]

[tool.pytest.ini_options]
addopts = "-ra"
