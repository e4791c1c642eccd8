[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snakegrid"
version = "0.1.0"
description = "A grid-based snake arcade game with a mouse-driven menu, walls, apples and a saved high score."
requires-python = ">=3.10"
keywords = ["snake", "game", "arcade", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
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
snakegrid = "snakegrid.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["snakegrid"]

[tool.pytest.ini_options]
addopts = "-ra"
