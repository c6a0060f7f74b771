[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "holdem"
version = "0.1.0"
description = "A small console Texas hold'em table: shuffle a deck, deal hands and board, and rank each player's seven cards."
requires-python = ">=3.10"
dependencies = []
keywords = ["poker", "texas-holdem", "cards", "game", "hand-evaluation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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
holdem = "holdem.game:main"

[tool.hatch.build.targets.wheel]
packages = ["holdem"]

[tool.pytest.ini_options]
addopts = "-ra"
