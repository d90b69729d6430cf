[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tilebatch"
version = "0.1.0"
description = "A small tile-based sprite batching demo with bitmap fonts, rooms and levels"
requires-python = ">=3.10"
keywords = ["pygame", "sprites", "tiles", "sprite-sheet", "bitmap-font", "game"]
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
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tilebatch = "tilebatch.main:main"

[tool.hatch.build.targets.wheel]
packages = ["tilebatch"]

[tool.pytest.ini_options]
addopts = "-ra"
