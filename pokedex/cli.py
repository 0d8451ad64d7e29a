"""Entry point of the interactive Pokedex shell."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence

from .pokeapi import PokeAPIError
from .pokecache import Cache
from .repl import Config, clean_input, get_commands

PROMPT = "Pokedex > "
CACHE_INTERVAL = 5.0


def run(config: Config, lines: Iterable[str]) -> None:
    """Read commands from ``lines`` and carry them out until input ends."""
    commands = get_commands()
    for line in lines:
        print(PROMPT, end="", flush=True)
        words = clean_input(line)
        if not words:
            continue
        command = commands.get(words[0])
        if command is None:
            print("Unknown command")
            continue
        try:
            command.callback(config, words)
        except (PokeAPIError, ValueError, TypeError) as exc:
            print(f"Error: {exc}")
    print(PROMPT)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the shell on standard input."""
    parser = argparse.ArgumentParser(
        prog="pokedex", description="Interactive Pokedex shell."
    )
    parser.parse_args(argv)
    with Cache(CACHE_INTERVAL) as cache:
        run(Config(cache=cache), sys.stdin)
    return 0


if __name__ == "__main__":
    sys.exit(main())