[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "connectfour"
version = "0.1.0"
description = "Terminal Connect Four for one or two players, with reflex and minimax computer opponents"
requires-python = ">=3.10"
dependencies = []
keywords = ["connect four", "board game", "minimax", "alpha-beta", "terminal", "game"]
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
connectfour = "connectfour.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["connectfour"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
