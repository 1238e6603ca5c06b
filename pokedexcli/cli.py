"""Interactive Pokedex shell backed by the public Pokémon API."""

from __future__ import annotations

import argparse
import random
import sys
import urllib.error
import urllib.request
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import timedelta
from typing import Protocol, TextIO

from pokedexcli.cache import Cache
from pokedexcli.models import LocationPage, Pokemon, encounter_names

API_ROOT = "https://pokeapi.co/api/v2"
LOCATION_AREA_URL = f"{API_ROOT}/location-area"
POKEMON_URL = f"{API_ROOT}/pokemon"
PROMPT = "Pokedex > "
CACHE_INTERVAL = timedelta(minutes=5)
MAX_CATCH_ROLL = 200
INSPECTED_STATS = 6


class CommandError(Exception):
    """A command could not be carried out."""


class _Rng(Protocol):
    def randint(self, a: int, b: int) -> int: ...


Fetcher = Callable[[str], bytes]


@dataclass(frozen=True)
class Command:
    """A named shell command and the action it runs."""

    name: str
    description: str
    callback: Callable[[], None]


def clean_input(text: str) -> list[str]:
    """Lower-case ``text`` and split it into whitespace-separated words."""
    return text.strip().lower().split()


def http_get(url: str) -> bytes:
    """Fetch ``url`` and return the response body."""
    try:
        with urllib.request.urlopen(url, timeout=30) as response:
            return response.read()
    except urllib.error.HTTPError as err:
        body = err.read().decode("utf-8", "replace")
        raise CommandError(
            f"response failed with status code: {err.code} and \nbody: {body}"
        ) from err


class Session:
    """State of one Pokedex session: pagination, caught Pokémon and the cache."""

    def __init__(
        self,
        cache: Cache,
        fetch: Fetcher | None = None,
        out: TextIO | None = None,
        rng: _Rng | None = None,
    ) -> None:
        self.cache = cache
        self.fetch = fetch if fetch is not None else http_get
        self.out = out if out is not None else sys.stdout
        self.rng = rng if rng is not None else random.Random()
        self.next_url = LOCATION_AREA_URL
        self.previous_url = ""
        self.caught: dict[str, Pokemon] = {}
        self.input: list[str] = []

    def _print(self, text: str = "") -> None:
        print(text, file=self.out)

    def commands(self) -> dict[str, Command]:
        """Return the available commands keyed by the word that starts them."""
        return {
            "help": Command("help", "Displays a help message", self.help),
            "exit": Command("exit", "Exit the Pokedex", self.exit),
            "map": Command("map", "Display the next 20 locations", self.map_next),
            "mapb": Command("map back", "Display the previous 20 locations", self.map_back),
            "explore": Command("explore", "Display pokemon at explored location", self.explore),
            "catch": Command("catch", "Attempt to catch a pokemon", self.catch),
            "inspect": Command("inspect", "Displays information about a pokemon", self.inspect),
            "pokedex": Command(
                "pokedex", "Lists all the names of Pokemon you have caught", self.pokedex
            ),
        }

    def run_command(self, words: Sequence[str]) -> None:
        """Run the command named by the first word; the rest are its arguments."""
        if not words:
            return
        self.input = list(words)
        command = self.commands().get(self.input[0])
        if command is None:
            self._print("Unknown command")
            return
        command.callback()

    def _argument(self, missing: str) -> str:
        if len(self.input) < 2:
            raise CommandError(missing)
        return self.input[1]

    def _cached_fetch(self, url: str) -> tuple[bytes, bool]:
        data = self.cache.get(url)
        if data is not None:
            return data, True
        return self.fetch(url), False

    def help(self) -> None:
        """Print usage of every command."""
        for line in (
            "Welcome to the Pokedex!",
            "Usage:",
            "",
            "help: Displays a help message",
            "exit: Exit the Pokedex",
            "map: Display the next 20 locations",
            "mapb: Display the previous 20 locations",
            "explore <location>: Display pokemon at explored location",
            "catch <name>: Attempt to catch the named pokemon",
            "inspect <name>: Display information about a captured pokemon",
            "pokedex: Display the names of all captured pokemon",
        ):
            self._print(line)

    def exit(self) -> None:
        """Say goodbye and end the program."""
        self._print("Closing the Pokedex... Goodbye!")
        raise SystemExit(0)

    def _show_page(self, url: str) -> None:
        if not url:
            raise CommandError("there are no more locations in that direction")
        data, cached = self._cached_fetch(url)
        page = LocationPage.from_json(data)
        if not cached:
            self.cache.add(url, data)
        self.next_url = page.next
        self.previous_url = page.previous
        for name in page.names:
            self._print(name)

    def map_next(self) -> None:
        """Print the next page of location areas."""
        self._show_page(self.next_url)

    def map_back(self) -> None:
        """Print the previous page of location areas."""
        self._show_page(self.previous_url)

    def explore(self) -> None:
        """Print the Pokémon that can be met in the named location area."""
        area = self._argument("no location name provided")
        url = f"{LOCATION_AREA_URL}/{area}"
        data, cached = self._cached_fetch(url)
        if not cached:
            self.cache.add(url, data)
        for name in encounter_names(data):
            self._print(name)

    def catch(self) -> None:
        """Throw a Pokéball at the named Pokémon."""
        target = self._argument("no pokemon name provided")
        url = f"{POKEMON_URL}/{target}"
        data, cached = self._cached_fetch(url)
        pokemon = Pokemon.from_json(data)
        if cached:
            return
        self._print(f"Throwing a Pokeball at {target}...")
        roll = self.rng.randint(0, MAX_CATCH_ROLL)
        if pokemon.base_experience > roll:
            self._print(f"{target} escaped!")
        else:
            self._print(f"{target} was caught!")
            self._print("You may now inspect it with the inspect command.")
            self.caught[target] = pokemon

    def inspect(self) -> None:
        """Print details of a caught Pokémon."""
        target = self._argument("no pokemon name provided")
        pokemon = self.caught.get(target)
        if pokemon is None:
            raise CommandError("you have not caught that pokemon yet")
        self._print(f"Name: {pokemon.name}")
        self._print(f"Height: {pokemon.height}")
        self._print(f"Weight: {pokemon.weight}")
        self._print("Stats:")
        for stat in pokemon.stats[:INSPECTED_STATS]:
            self._print(f"  -{stat.name}: {stat.base_stat}")
        self._print("Types:")
        for type_name in pokemon.types:
            self._print(f"  - {type_name}")

    def pokedex(self) -> None:
        """Print the names of every caught Pokémon."""
        self._print("Your Pokedex:")
        for pokemon in self.caught.values():
            self._print(f" - {pokemon.name}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive Pokedex until input ends or ``exit`` is given."""
    parser = argparse.ArgumentParser(prog="pokedexcli", description="Interactive Pokedex.")
    parser.parse_args(argv)
    with Cache(CACHE_INTERVAL) as cache:
        session = Session(cache, out=sys.stdout)
        while True:
            print(PROMPT, end="", flush=True)
            line = sys.stdin.readline()
            if not line:
                print()
                return 0
            words = clean_input(line)
            try:
                session.run_command(words)
            except (CommandError, OSError, ValueError) as err:
                print(f"Error: {err}")