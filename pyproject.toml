[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "seabattle"
version = "0.1.0"
description = "Sea battle game with ship placement, abilities, a terminal mode and a pygame window"
requires-python = ">=3.10"
keywords = ["battleship", "sea battle", "game", "pygame", "board game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: X11 Applications",
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
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
seabattle = "seabattle.app:main"
seabattle-cli = "seabattle.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["seabattle"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
