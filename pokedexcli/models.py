"""Records decoded from the Pokémon API's JSON responses."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


def _load(data: bytes | str | Mapping[str, Any] | None) -> Mapping[str, Any]:
    if isinstance(data, (bytes, bytearray, str)):
        data = json.loads(data)
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data


def _obj(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ValueError(f"field {key!r} must be an object")
    return value


def _list(data: Mapping[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"field {key!r} must be an array")
    return value


def _str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


def _int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {key!r} must be an integer")
    return value


def _items(data: Mapping[str, Any], key: str) -> list[Mapping[str, Any]]:
    return [_load(item) for item in _list(data, key)]


@dataclass(frozen=True)
class Stat:
    """One base stat of a Pokémon."""

    name: str
    base_stat: int


@dataclass(frozen=True)
class Pokemon:
    """The parts of a Pokémon record the Pokedex keeps."""

    id: int = 0
    name: str = ""
    base_experience: int = 0
    height: int = 0
    weight: int = 0
    stats: tuple[Stat, ...] = field(default_factory=tuple)
    types: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_json(cls, data: bytes | str | Mapping[str, Any] | None) -> Pokemon:
        """Decode a Pokémon from a JSON document or an already parsed object."""
        obj = _load(data)
        stats = tuple(
            Stat(name=_str(_obj(item, "stat"), "name"), base_stat=_int(item, "base_stat"))
            for item in _items(obj, "stats")
        )
        types = tuple(_str(_obj(item, "type"), "name") for item in _items(obj, "types"))
        return cls(
            id=_int(obj, "id"),
            name=_str(obj, "name"),
            base_experience=_int(obj, "base_experience"),
            height=_int(obj, "height"),
            weight=_int(obj, "weight"),
            stats=stats,
            types=types,
        )


@dataclass(frozen=True)
class LocationPage:
    """One page of location areas with links to its neighbours."""

    next: str = ""
    previous: str = ""
    names: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_json(cls, data: bytes | str | Mapping[str, Any] | None) -> LocationPage:
        """Decode a page of location areas."""
        obj = _load(data)
        return cls(
            next=_str(obj, "next"),
            previous=_str(obj, "previous"),
            names=tuple(_str(item, "name") for item in _items(obj, "results")),
        )


def encounter_names(data: bytes | str | Mapping[str, Any] | None) -> list[str]:
    """Return the names of the Pokémon that can be met in a location area."""
    obj = _load(data)
    return [_str(_obj(item, "pokemon"), "name") for item in _items(obj, "pokemon_encounters")]