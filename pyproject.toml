[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blocko"
version = "0.1.0"
description = "A small block-shooting platformer with levels loaded from a plain text file."
requires-python = ">=3.10"
keywords = ["game", "platformer", "pygame", "arcade"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: End Users/Desktop",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
blocko = "blocko.game:main"

[tool.hatch.build.targets.wheel]
packages = ["blocko"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
