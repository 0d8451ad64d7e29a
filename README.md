# pokedex

An interactive command-line Pokedex. Browse location areas, see which
Pokemon can be met in each one, try to catch them, and inspect the ones you
have caught. All data comes from the public PokeAPI; responses are cached in
memory for five seconds so that paging back and forth stays quick.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

Start the prompt:

```
pokedex
```

The same shell can be started with `python -m pokedex.cli`. It takes no
options besides `--help`, and reads commands from standard input until the
input ends or `exit` is given.

Each line is lower-cased and split on whitespace, so `MAP` and `  map ` are
the same command. Blank lines are ignored; an unrecognised command prints
`Unknown command`. When a request fails or a response cannot be decoded,
the shell prints `Error: ...` and carries on.

| Command              | What it does                                              |
|----------------------|-----------------------------------------------------------|
| `help`               | Displays a help message                                   |
| `map`                | Displays next 20 location areas                           |
| `mapb`               | Displays previous 20 location areas                       |
| `explore <area>`     | Displays list of pokemon in an area                       |
| `catch <pokemon>`    | Attempts to catch a pokemon and add it to the pokedex     |
| `inspect <pokemon>`  | View the stats of pokemon you have caught                 |
| `pokedex`            | View the contents of your pokedex                         |
| `exit`               | Exit the Pokedex                                          |

`map` reports `you're on the last page` when there is no next page, and
`mapb` reports `you're on the first page` when there is no previous one.

Example session:

```
Pokedex > map
canalave-city-area
eterna-city-area
...
Pokedex > explore pastoria-city-area
Exploring pastoria-city-area...
Found Pokemon:
 - tentacool
 - magikarp
 ...
Pokedex > catch magikarp
Throwing a Pokeball at magikarp...
magikarp was caught!
Pokedex > pokedex
 - magikarp
```

The chance of catching a Pokemon is `1 - base_experience / 250`, so it goes
down as base experience goes up; a Pokemon with more than 250 base
experience always escapes.

## Using it as a library

The pieces behind the prompt can be used on their own:

- `pokedex.pokecache.Cache(interval)` is a thread-safe in-memory byte cache.
  A background thread drops entries that are at least `interval` seconds
  old. `add(key, val)` stores a value, `get(key)` returns it or `None`.
  It can be used as a context manager, and `close()` stops the reaper.
- `pokedex.pokeapi` has `get_location_areas`, `get_location_data` and
  `get_pokemon_data`. Each takes a URL and a `Cache` and returns a frozen
  dataclass (`LocationAreas`, `LocationData`, `PokemonData`), built with the
  classes' `from_dict` methods from the JSON that `fetch_json` returns.
  They raise `PokeAPIError` when a request fails or its body is not valid
  JSON.
- `pokedex.repl` has the command table (`get_commands`, mapping names to
  `Command` objects), the input normaliser (`clean_input`), the
  `command_*` functions, and the `Config` that holds the session state:
  the cache, the next and previous page URLs, the caught Pokemon and the
  random number generator used for catching.
- `pokedex.cli.run(config, lines)` feeds any iterable of input lines through
  the command loop, which is handy for scripting.

## Limitations

Caught Pokemon are kept in memory for the current session only; nothing is
saved to disk, and the cache is not persisted either.