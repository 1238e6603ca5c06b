import json

import pytest

from pokedexcli.models import LocationPage, Pokemon, Stat, encounter_names

PIKACHU = {
    "id": 25,
    "name": "pikachu",
    "base_experience": 112,
    "height": 4,
    "weight": 60,
    "is_default": True,
    "stats": [
        {"base_stat": 35, "effort": 0, "stat": {"name": "hp", "url": "u"}},
        {"base_stat": 55, "effort": 0, "stat": {"name": "attack", "url": "u"}},
    ],
    "types": [{"slot": 1, "type": {"name": "electric", "url": "u"}}],
}


def test_pokemon_from_bytes():
    pokemon = Pokemon.from_json(json.dumps(PIKACHU).encode())
    assert pokemon.name == "pikachu"
    assert pokemon.id == 25
    assert pokemon.base_experience == 112
    assert pokemon.height == 4
    assert pokemon.weight == 60
    assert pokemon.stats == (Stat("hp", 35), Stat("attack", 55))
    assert pokemon.types == ("electric",)


def test_pokemon_from_str_and_mapping_agree():
    assert Pokemon.from_json(json.dumps(PIKACHU)) == Pokemon.from_json(PIKACHU)


def test_pokemon_missing_and_null_fields_default():
    pokemon = Pokemon.from_json(b'{"name": "ditto", "base_experience": null}')
    assert pokemon == Pokemon(name="ditto")
    assert pokemon.stats == ()


def test_pokemon_rejects_wrong_types():
    with pytest.raises(ValueError):
        Pokemon.from_json(b'{"name": 7}')
    with pytest.raises(ValueError):
        Pokemon.from_json(b'{"height": "tall"}')
    with pytest.raises(ValueError):
        Pokemon.from_json(b'{"weight": 1.5}')


def test_pokemon_rejects_non_object_and_bad_json():
    with pytest.raises(ValueError):
        Pokemon.from_json(b"[1, 2]")
    with pytest.raises(ValueError):
        Pokemon.from_json(b"{not json")


def test_location_page():
    doc = {
        "count": 2,
        "next": "https://pokeapi.co/api/v2/location-area?offset=20&limit=20",
        "previous": None,
        "results": [
            {"name": "canalave-city-area", "url": "u1"},
            {"name": "eterna-city-area", "url": "u2"},
        ],
    }
    page = LocationPage.from_json(json.dumps(doc))
    assert page.next == doc["next"]
    assert page.previous == ""
    assert page.names == ("canalave-city-area", "eterna-city-area")


def test_location_page_empty_document():
    assert LocationPage.from_json(b"{}") == LocationPage()


def test_encounter_names_in_order():
    doc = {
        "name": "pastoria-city-area",
        "pokemon_encounters": [
            {"pokemon": {"name": "tentacool", "url": "u"}, "version_details": []},
            {"pokemon": {"name": "magikarp", "url": "u"}, "version_details": []},
        ],
    }
    assert encounter_names(json.dumps(doc).encode()) == ["tentacool", "magikarp"]


def test_encounter_names_none_listed():
    assert encounter_names(b'{"name": "empty"}') == []


def test_encounter_names_rejects_bad_list():
    with pytest.raises(ValueError):
        encounter_names(b'{"pokemon_encounters": "oops"}')