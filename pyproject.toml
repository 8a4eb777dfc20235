[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coupgame"
version = "0.1.0"
description = "The Coup card game with role abilities, turn handling and a console front end"
requires-python = ">=3.10"
dependencies = []
keywords = ["coup", "game", "board-game", "card-game", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
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
coupgame = "coupgame.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["coupgame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
