[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rong"
version = "1.1.0"
description = "A two-player Pong game for one keyboard: first to 11 points wins."
requires-python = ">=3.10"
keywords = ["pong", "game", "arcade", "two-player", "pygame"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
rong = "rong.app:main"

[tool.hatch.build.targets.wheel]
packages = ["rong"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
