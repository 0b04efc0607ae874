[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bataille"
version = "1.0.0"
description = "A terminal game of Battleship against a randomly placed fleet, with an optional statistics report."
requires-python = ">=3.10"
dependencies = []
keywords = ["battleship", "bataille navale", "game", "terminal", "board game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: French",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bataille = "bataille.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bataille"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
