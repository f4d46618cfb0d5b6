[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wallequest"
version = "1.0.0"
description = "A small side-scrolling platformer: guide a cleanup robot through two levels to deliver the last plant."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "platformer", "side-scroller", "pygame", "arcade"]
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
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
wallequest = "wallequest.app:main"

[tool.hatch.build.targets.wheel]
packages = ["wallequest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
