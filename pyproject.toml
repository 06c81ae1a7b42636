[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "navalbattle"
version = "0.1.0"
description = "Game logic for a naval battle (battleship) game: board, computer players, protocol messages, animation timing and UI state."
requires-python = ">=3.10"
dependencies = []
keywords = ["battleship", "naval battle", "board game", "game ai"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["navalbattle*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
