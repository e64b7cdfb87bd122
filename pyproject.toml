[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "defender"
version = "1.0.0"
description = "A small tower defense game: buy weapons, place them on the map and stop the enemies before they reach the base."
requires-python = ">=3.10"
keywords = ["game", "tower-defense", "pygame", "strategy"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Real Time Strategy",
]
dependencies = [
    "pygame>=2.1",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
defender = "defender.app:main"

[tool.hatch.build.targets.wheel]
packages = ["defender"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
