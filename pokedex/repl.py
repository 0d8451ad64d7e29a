"""Commands of the interactive Pokedex shell."""

from __future__ import annotations

import random
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from .pokeapi import (
    PokemonData,
    get_location_areas,
    get_location_data,
    get_pokemon_data,
)
from .pokecache import Cache

API_BASE = "https://pokeapi.co/api/v2"
LOCATION_AREA_URL = f"{API_BASE}/location-area"
POKEMON_URL = f"{API_BASE}/pokemon"


@dataclass
class Config:
    """State shared by the commands of one shell session."""

    cache: Cache
    next: str = LOCATION_AREA_URL
    previous: str = ""
    pokedex: dict[str, PokemonData] = field(default_factory=dict)
    rng: random.Random = field(default_factory=random.Random)


@dataclass(frozen=True)
class Command:
    """A named shell command and the function that carries it out."""

    name: str
    description: str
    callback: Callable[[Config, Sequence[str]], None]


def get_commands() -> dict[str, Command]:
    """Return the shell's commands keyed by name."""
    commands = [
        Command("exit", "Exit the Pokedex", command_exit),
        Command("help", "Displays a help message", command_help),
        Command("map", "Displays next 20 location areas", command_map),
        Command("mapb", "Displays previous 20 location areas", command_mapb),
        Command("explore", "Displays list of pokemon in an area", command_explore),
        Command(
            "catch",
            "Attempts to catch a pokemon and add it to the pokedex",
            command_catch,
        ),
        Command("inspect", "View the stats of pokemon you have caught", command_inspect),
        Command("pokedex", "View the contents of your pokedex", command_pokedex),
    ]
    return {command.name: command for command in commands}


def clean_input(text: str) -> list[str]:
    """Lower-case ``text`` and split it into words."""
    return text.lower().split()


def command_exit(config: Config, params: Sequence[str]) -> None:
    """Leave the shell."""
    print("Closing the Pokedex... Goodbye!")
    sys.exit(0)


def command_help(config: Config, params: Sequence[str]) -> None:
    """Print a usage message listing every command."""
    print("Welcome to the Pokedex!\nUsage:\n")
    for command in get_commands().values():
        print(f"{command.name}: {command.description}")


def _show_page(config: Config, url: str) -> None:
    areas = get_location_areas(url, config.cache)
    config.previous = areas.previous or ""
    config.next = areas.next or ""
    for location in areas.results:
        print(location.name)


def command_map(config: Config, params: Sequence[str]) -> None:
    """Print the next page of location areas."""
    if not config.next:
        print("you're on the last page")
        return
    _show_page(config, config.next)


def command_mapb(config: Config, params: Sequence[str]) -> None:
    """Print the previous page of location areas."""
    if not config.previous:
        print("you're on the first page")
        return
    _show_page(config, config.previous)


def command_explore(config: Config, params: Sequence[str]) -> None:
    """Print the pokemon that can be met in an area."""
    if len(params) < 2:
        print("Usage: explore <area_name>")
        return
    area = params[1]
    data = get_location_data(f"{LOCATION_AREA_URL}/{area}", config.cache)
    print(f"Exploring {area}...\nFound Pokemon:")
    for pokemon in data.pokemon_encounters:
        print(f" - {pokemon.name}")


def command_catch(config: Config, params: Sequence[str]) -> None:
    """Throw a ball at a pokemon; a caught one goes into the pokedex."""
    if len(params) < 2:
        print("Usage: catch <pokemon_name>")
        return
    name = params[1]
    pokemon = get_pokemon_data(f"{POKEMON_URL}/{name}", config.cache)
    print(f"Throwing a Pokeball at {name}...")
    probability = 1.0 - pokemon.base_experience / 250.0
    if config.rng.random() <= probability:
        print(f"{pokemon.name} was caught!")
        config.pokedex[pokemon.name] = pokemon
    else:
        print(f"{pokemon.name} escaped!")


def command_inspect(config: Config, params: Sequence[str]) -> None:
    """Print the details of a caught pokemon."""
    if len(params) < 2:
        print("Usage: inspect <pokemon_name>")
        return
    pokemon = config.pokedex.get(params[1])
    if pokemon is None:
        print("you have not caught that pokemon")
        return
    print(f"Name: {pokemon.name}")
    print(f"Height: {pokemon.height}")
    print(f"Weight: {pokemon.weight}")
    print("Stats:")
    for stat in pokemon.stats:
        print(f"  -{stat.name}: {stat.base_stat}")
    print("Types:")
    for pokemon_type in pokemon.types:
        print(f"  -{pokemon_type.name}")


def command_pokedex(config: Config, params: Sequence[str]) -> None:
    """List the pokemon caught so far."""
    if not config.pokedex:
        print("Your pokedex is empty!")
        return
    for name in config.pokedex:
        print(f" - {name}")