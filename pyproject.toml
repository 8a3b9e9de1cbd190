[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mermaidgame"
version = "0.1.0"
description = "A small tile-based collect-and-escape puzzle game with .ber map validation and XPM texture loading"
requires-python = ">=3.10"
keywords = ["game", "puzzle", "tiles", "xpm", "pygame", "map"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mermaidgame = "mermaidgame.app:main"

[tool.hatch.build.targets.wheel]
packages = ["mermaidgame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
