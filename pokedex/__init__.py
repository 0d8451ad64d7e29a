"""Interactive command-line Pokedex backed by the PokeAPI, with an expiring cache."""

__version__ = "0.1.0"