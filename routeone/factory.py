"""Construction of every species that appears in the game."""

from __future__ import annotations

from routeone.model import Move, Pokemon, PokemonType

_FIRE = PokemonType.FIRE
_WATER = PokemonType.WATER
_GRASS = PokemonType.GRASS
_ELECTRIC = PokemonType.ELECTRIC
_NORMAL = PokemonType.NORMAL

_SPECIES: dict[str, tuple[PokemonType, int, tuple[Move, ...]]] = {
    "Charmander": (_FIRE, 20, (Move("Scratch", _NORMAL, 10), Move("Ember", _FIRE, 12))),
    "Bulbasaur": (_GRASS, 20, (Move("Tackle", _NORMAL, 10), Move("Vine Whip", _GRASS, 12))),
    "Squirtle": (_WATER, 20, (Move("Tackle", _NORMAL, 10), Move("Water Gun", _WATER, 12))),
    "Pikachu": (
        _ELECTRIC,
        18,
        (Move("Quick Attack", _NORMAL, 10), Move("Thunder Shock", _ELECTRIC, 13)),
    ),
    "Pidgey": (_NORMAL, 16, (Move("Tackle", _NORMAL, 10), Move("Gust", _NORMAL, 11))),
    "Rattata": (_NORMAL, 16, (Move("Tackle", _NORMAL, 10), Move("Bite", _NORMAL, 12))),
    "Zubat": (_NORMAL, 17, (Move("Leech Life", _NORMAL, 10), Move("Wing Attack", _NORMAL, 12))),
    "Oddish": (_GRASS, 18, (Move("Absorb", _GRASS, 11), Move("Poison Powder", _GRASS, 0))),
    "Growlithe": (_FIRE, 19, (Move("Bite", _NORMAL, 10), Move("Flame Wheel", _FIRE, 14))),
    "Poliwag": (_WATER, 19, (Move("Bubble", _WATER, 11), Move("Body Slam", _NORMAL, 13))),
}

_FALLBACK = (_NORMAL, 20, (Move("Tackle", _NORMAL, 10), Move("Growl", _NORMAL, 0)))

_WILD = ("Pidgey", "Rattata", "Zubat", "Oddish", "Growlithe", "Poliwag")
_STARTERS = ("Charmander", "Bulbasaur", "Squirtle")


def create_pokemon(name: str) -> Pokemon:
    """Build a fresh Pokémon of the named species.

    Unknown names yield a Normal-type Pokémon with Tackle and Growl.
    """
    kind, max_hp, moves = _SPECIES.get(name, _FALLBACK)
    pokemon = Pokemon(name, kind, max_hp)
    for move in moves:
        pokemon.add_move(move)
    return pokemon


def wild_pokemon_names() -> list[str]:
    """Species that can be met in the tall grass."""
    return list(_WILD)


def starter_options() -> list[str]:
    """Species offered as a first partner."""
    return list(_STARTERS)


def rival_starter(player_starter: str) -> str:
    """The first starter that differs from the player's choice."""
    return next(name for name in _STARTERS if name != player_starter)