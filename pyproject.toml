[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "betbot"
version = "2.2"
description = "Core of a chat bot for friendly bets on matches: data store, scoring, persistence and configuration."
requires-python = ">=3.10"
dependencies = []
keywords = ["bot", "bets", "betting", "matches", "scoring", "chat"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["betbot"]

[tool.hatch.build.targets.sdist]
include = ["betbot", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
