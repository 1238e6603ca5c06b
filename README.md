# pokedexcli

An interactive Pokedex for the terminal. You can browse location areas, see which Pokemon can be met in each area, try to catch them, and look at the ones you have caught. All data comes from the public PokeAPI. Location pages and area details are kept in an in-memory cache for five minutes, so asking for them again does not go back to the network.

## Installation

```
pip install .
```

The package needs Python 3.10 or later. It uses only the standard library.

## Usage

Start the prompt:

```
pokedexcli
```

You then get a `Pokedex > ` prompt. Each line is trimmed, changed to lower case and split on whitespace. The first word picks the command and the second word, where there is one, is its argument.

| Command             | What it does                                                   |
|---------------------|----------------------------------------------------------------|
| `help`              | Shows the list of commands                                     |
| `exit`              | Prints a goodbye and closes the Pokedex                        |
| `map`               | Shows the next page of location areas                          |
| `mapb`              | Shows the previous page of location areas                      |
| `explore <area>`    | Lists the Pokemon that can be met in an area                   |
| `catch <name>`      | Throws a Pokeball at the named Pokemon                         |
| `inspect <name>`    | Shows name, height, weight, the first six stats and the types  |
| `pokedex`           | Lists every Pokemon you have caught                            |

An example session:

```
Pokedex > map
canalave-city-area
eterna-city-area
...
Pokedex > explore canalave-city-area
tentacool
tentacruel
...
Pokedex > catch pikachu
Throwing a Pokeball at pikachu...
pikachu was caught!
You may now inspect it with the inspect command.
Pokedex > inspect pikachu
Name: pikachu
Height: 4
Weight: 60
Stats:
  -hp: 35
  ...
Types:
  - electric
Pokedex > pokedex
Your Pokedex:
 - pikachu
```

A throw rolls a number from 0 to 200; the Pokemon escapes if its base experience is higher than the roll, so Pokemon with more base experience are harder to catch.

An unknown command prints `Unknown command`. A missing argument, a failed request, a reply that is not valid JSON, or `map`/`mapb` when there is no page in that direction prints a line that starts with `Error:`; a failed request shows the HTTP status code and the response body. End of input (Ctrl-D) also closes the Pokedex.

## What it does not do

Caught Pokemon live only for the length of a session; nothing is saved to disk, and the Pokedex starts empty each time. There is no offline data: every lookup that is not in the cache needs the network.

## Using the pieces in code

`pokedexcli.cache.Cache` is a thread-safe key/value store of bytes. Its interval is given in seconds or as a `datetime.timedelta` and must be positive. A background thread wakes once per interval and removes entries older than the interval. `get` returns `None` for a missing key, and the cache supports `in` and `len()`. It works as a context manager; leaving the context (or calling `close()`) stops the background thread:

```python
from pokedexcli.cache import Cache

with Cache(60.0) as cache:
    cache.add("key1", b"val1")
    assert cache.get("key1") == b"val1"
    assert cache.get("missing") is None
```

`pokedexcli.models` decodes API replies: `Pokemon.from_json`, `LocationPage.from_json` and `encounter_names` each take JSON bytes, a JSON string or an already parsed mapping, and raise `ValueError` when a field has the wrong type.

`pokedexcli.cli.Session` runs the commands. Give it a cache, and optionally a fetch function that maps a URL to response bytes (by default `http_get`), an output stream and a random source with a `randint` method. That way it can be driven without the network:

```python
import io
import random

from pokedexcli.cache import Cache
from pokedexcli.cli import Session, clean_input

def my_fetch(url: str) -> bytes:
    return b'{"next": "", "previous": "", "results": [{"name": "test-area"}]}'

out = io.StringIO()
with Cache(300.0) as cache:
    session = Session(cache, fetch=my_fetch, out=out, rng=random.Random(0))
    session.run_command(clean_input("  MAP "))

assert out.getvalue() == "test-area\n"
```

Command failures are raised as `pokedexcli.cli.CommandError`; the `exit` command raises `SystemExit(0)`.

## Running the tests

```
pip install ".[test]"
pytest
```