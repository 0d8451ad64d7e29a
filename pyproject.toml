[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pokedex"
version = "0.1.0"
description = "An interactive command-line Pokedex that browses location areas and catches Pokemon using the PokeAPI"
requires-python = ">=3.10"
dependencies = []
keywords = ["pokedex", "pokemon", "pokeapi", "repl", "cli", "game"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pokedex = "pokedex.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pokedex"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
