[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wastekit"
version = "0.1.0"
description = "Assets and rules toolkit for an isometric role-playing game: sprites, RLE frames, fonts, palettes, message files and the game calendar"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "rpg", "sprite", "palette", "font", "rle", "aaf", "msg"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Role-Playing",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wastekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
