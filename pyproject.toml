[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "busdodge"
version = "0.1.0"
description = "A small terminal dodging game played on a 20x20 grid with ANSI colours"
requires-python = ">=3.10"
keywords = ["game", "terminal", "ansi", "arcade"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Environment :: Console",
    "Operating System :: POSIX",
    "Intended Audience :: End Users/Desktop",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "wcwidth",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
busdodge = "busdodge.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["busdodge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
