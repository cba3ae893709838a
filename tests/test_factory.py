import pytest

from routeone.factory import (
    create_pokemon,
    rival_starter,
    starter_options,
    wild_pokemon_names,
)
from routeone.model import PokemonType


def test_starter_options_list():
    assert starter_options() == ["Charmander", "Bulbasaur", "Squirtle"]


def test_wild_pokemon_names_list():
    assert wild_pokemon_names() == [
        "Pidgey",
        "Rattata",
        "Zubat",
        "Oddish",
        "Growlithe",
        "Poliwag",
    ]


def test_returned_lists_are_independent_copies():
    names = starter_options()
    names.clear()
    assert starter_options() == ["Charmander", "Bulbasaur", "Squirtle"]


@pytest.mark.parametrize(
    "name, kind, move_names",
    [
        ("Charmander", PokemonType.FIRE, ["Scratch", "Ember"]),
        ("Bulbasaur", PokemonType.GRASS, ["Tackle", "Vine Whip"]),
        ("Squirtle", PokemonType.WATER, ["Tackle", "Water Gun"]),
        ("Pikachu", PokemonType.ELECTRIC, ["Quick Attack", "Thunder Shock"]),
        ("Oddish", PokemonType.GRASS, ["Absorb", "Poison Powder"]),
        ("Poliwag", PokemonType.WATER, ["Bubble", "Body Slam"]),
    ],
)
def test_known_species(name, kind, move_names):
    p = create_pokemon(name)
    assert p.name == name
    assert p.type is kind
    assert [m.name for m in p.moveset] == move_names
    assert p.current_hp == p.max_hp


def test_starters_share_the_same_max_hp():
    hps = {create_pokemon(name).max_hp for name in starter_options()}
    assert len(hps) == 1


def test_signature_move_is_stronger_than_basic_move():
    p = create_pokemon("Charmander")
    basic, signature = p.moveset
    assert basic.type is PokemonType.NORMAL
    assert signature.type is PokemonType.FIRE
    assert signature.power > basic.power


def test_unknown_species_falls_back():
    p = create_pokemon("Missingno")
    assert p.name == "Missingno"
    assert p.type is PokemonType.NORMAL
    assert [m.name for m in p.moveset] == ["Tackle", "Growl"]
    assert p.moveset[1].power == 0


def test_each_call_builds_a_fresh_pokemon():
    first = create_pokemon("Pidgey")
    second = create_pokemon("Pidgey")
    first.take_damage(5)
    assert second.current_hp == second.max_hp
    assert first.current_hp < second.current_hp


@pytest.mark.parametrize("name", wild_pokemon_names())
def test_wild_pokemon_are_ready_to_battle(name):
    p = create_pokemon(name)
    assert p.name == name
    assert len(p.moveset) == 2
    assert p.max_hp > 0
    assert not p.is_fainted()


@pytest.mark.parametrize(
    "player, rival",
    [
        ("Charmander", "Bulbasaur"),
        ("Bulbasaur", "Charmander"),
        ("Squirtle", "Charmander"),
    ],
)
def test_rival_starter(player, rival):
    assert rival_starter(player) == rival


def test_rival_never_takes_the_players_starter():
    for name in starter_options():
        choice = rival_starter(name)
        assert choice != name
        assert choice in starter_options()