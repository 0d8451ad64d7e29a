import json

import pytest

from pokedex.pokeapi import PokeAPIError, PokemonData
from pokedex.pokecache import Cache
from pokedex.repl import (
    LOCATION_AREA_URL,
    POKEMON_URL,
    Config,
    clean_input,
    command_catch,
    command_exit,
    command_explore,
    command_help,
    command_inspect,
    command_map,
    command_mapb,
    command_pokedex,
    get_commands,
)

PIKACHU = {
    "id": 25,
    "name": "pikachu",
    "base_experience": 112,
    "height": 4,
    "weight": 60,
    "stats": [{"base_stat": 35, "effort": 0, "stat": {"name": "hp", "url": ""}}],
    "types": [{"slot": 1, "type": {"name": "electric", "url": ""}}],
}


class _FixedRng:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


@pytest.fixture
def cache():
    with Cache(3600) as c:
        yield c


def _put(cache, url, obj):
    cache.add(url, json.dumps(obj).encode())


@pytest.mark.parametrize(
    "text, expected",
    [
        ("  hello  world  ", ["hello", "world"]),
        ("gIve mE a break     ", ["give", "me", "a", "break"]),
        ("   extra       spaces      ", ["extra", "spaces"]),
    ],
)
def test_clean_input(text, expected):
    assert clean_input(text) == expected


def test_get_commands_keys_match_names():
    commands = get_commands()
    assert set(commands) == {
        "exit", "help", "map", "mapb", "explore", "catch", "inspect", "pokedex"
    }
    assert all(name == cmd.name for name, cmd in commands.items())


def test_help_lists_every_command(cache, capsys):
    command_help(Config(cache=cache), ["help"])
    out = capsys.readouterr().out
    assert out.startswith("Welcome to the Pokedex!\nUsage:\n\n")
    for cmd in get_commands().values():
        assert f"{cmd.name}: {cmd.description}\n" in out


def test_exit_raises_system_exit(cache, capsys):
    with pytest.raises(SystemExit) as info:
        command_exit(Config(cache=cache), ["exit"])
    assert info.value.code == 0
    assert "Closing the Pokedex... Goodbye!" in capsys.readouterr().out


def test_map_shows_page_and_advances(cache, capsys):
    next_url = LOCATION_AREA_URL + "?offset=20&limit=20"
    _put(cache, LOCATION_AREA_URL, {
        "count": 2,
        "next": next_url,
        "previous": None,
        "results": [{"name": "canalave-city-area", "url": ""},
                    {"name": "eterna-city-area", "url": ""}],
    })
    config = Config(cache=cache)
    command_map(config, ["map"])
    assert capsys.readouterr().out.splitlines() == ["canalave-city-area", "eterna-city-area"]
    assert config.next == next_url
    assert config.previous == ""


def test_map_on_last_page(cache, capsys):
    config = Config(cache=cache, next="")
    command_map(config, ["map"])
    assert capsys.readouterr().out == "you're on the last page\n"


def test_mapb_on_first_page(cache, capsys):
    command_mapb(Config(cache=cache), ["mapb"])
    assert capsys.readouterr().out == "you're on the first page\n"


def test_mapb_goes_back(cache, capsys):
    prev_url = LOCATION_AREA_URL + "?offset=0&limit=20"
    _put(cache, prev_url, {
        "count": 1,
        "next": LOCATION_AREA_URL + "?offset=20&limit=20",
        "previous": None,
        "results": [{"name": "canalave-city-area", "url": ""}],
    })
    config = Config(cache=cache, next="", previous=prev_url)
    command_mapb(config, ["mapb"])
    assert capsys.readouterr().out == "canalave-city-area\n"
    assert config.previous == ""
    assert config.next == LOCATION_AREA_URL + "?offset=20&limit=20"


def test_map_bad_json_raises(cache):
    cache.add(LOCATION_AREA_URL, b"not json")
    config = Config(cache=cache)
    with pytest.raises(PokeAPIError):
        command_map(config, ["map"])
    assert config.next == LOCATION_AREA_URL


def test_explore_usage(cache, capsys):
    command_explore(Config(cache=cache), ["explore"])
    assert capsys.readouterr().out == "Usage: explore <area_name>\n"


def test_explore_lists_pokemon(cache, capsys):
    _put(cache, LOCATION_AREA_URL + "/pastoria-city-area", {
        "name": "pastoria-city-area",
        "pokemon_encounters": [
            {"pokemon": {"name": "tentacool", "url": ""}},
            {"pokemon": {"name": "magikarp", "url": ""}},
        ],
    })
    command_explore(Config(cache=cache), ["explore", "pastoria-city-area"])
    assert capsys.readouterr().out == (
        "Exploring pastoria-city-area...\nFound Pokemon:\n - tentacool\n - magikarp\n"
    )


def test_catch_usage(cache, capsys):
    command_catch(Config(cache=cache), ["catch"])
    assert capsys.readouterr().out == "Usage: catch <pokemon_name>\n"


def test_catch_success_adds_to_pokedex(cache, capsys):
    _put(cache, POKEMON_URL + "/pikachu", PIKACHU)
    config = Config(cache=cache, rng=_FixedRng(0.5))
    command_catch(config, ["catch", "pikachu"])
    out = capsys.readouterr().out
    assert out == "Throwing a Pokeball at pikachu...\npikachu was caught!\n"
    assert config.pokedex["pikachu"].base_experience == 112


def test_catch_failure_leaves_pokedex_empty(cache, capsys):
    _put(cache, POKEMON_URL + "/pikachu", PIKACHU)
    config = Config(cache=cache, rng=_FixedRng(0.9))
    command_catch(config, ["catch", "pikachu"])
    assert "pikachu escaped!" in capsys.readouterr().out
    assert config.pokedex == {}


def test_inspect_not_caught(cache, capsys):
    command_inspect(Config(cache=cache), ["inspect", "pikachu"])
    assert capsys.readouterr().out == "you have not caught that pokemon\n"


def test_inspect_caught(cache, capsys):
    config = Config(cache=cache, pokedex={"pikachu": PokemonData.from_dict(PIKACHU)})
    command_inspect(config, ["inspect", "pikachu"])
    assert capsys.readouterr().out.splitlines() == [
        "Name: pikachu", "Height: 4", "Weight: 60",
        "Stats:", "  -hp: 35", "Types:", "  -electric",
    ]


def test_pokedex_empty_and_filled(cache, capsys):
    config = Config(cache=cache)
    command_pokedex(config, ["pokedex"])
    assert capsys.readouterr().out == "Your pokedex is empty!\n"
    config.pokedex["pikachu"] = PokemonData.from_dict(PIKACHU)
    command_pokedex(config, ["pokedex"])
    assert capsys.readouterr().out == " - pikachu\n"