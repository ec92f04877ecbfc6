[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "greennes"
version = "0.1.0"
description = "A cycle-stepped 6502 CPU emulator for running NES program images"
requires-python = ">=3.10"
dependencies = []
keywords = ["nes", "6502", "emulator", "cpu", "nestest"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
greennes = "greennes.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["greennes"]

[tool.pytest.ini_options]
addopts = "-ra"
