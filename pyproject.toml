[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pongpp"
version = "0.1.0"
description = "A small Pong game with a main menu, a CPU opponent and a win screen."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["pong", "game", "arcade", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pongpp = "pongpp.screens:main"

[tool.hatch.build.targets.wheel]
packages = ["pongpp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
