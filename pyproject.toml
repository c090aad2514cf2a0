[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphquest"
version = "0.1.0"
description = "A text-mode maze game: explore scenarios, collect items and reach the exit before time runs out"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "maze", "text adventure", "graph", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
graphquest = "graphquest.game:main"

[tool.hatch.build.targets.wheel]
packages = ["graphquest"]

[tool.pytest.ini_options]
addopts = "-ra"
