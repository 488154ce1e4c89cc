[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mcg_visual"
version = "0.1.0"
description = "Screen, card and field model for a visual multiplayer card game"
requires-python = ">=3.10"
dependencies = []
keywords = ["cards", "card game", "board game", "drag and drop", "game state"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["mcg_visual"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
