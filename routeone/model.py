"""Core data types: elemental types, moves and Pokémon."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum

_ATTACK_MIN = 5
_ATTACK_MAX = 14


class PokemonType(Enum):
    """Elemental type of a Pokémon or a move."""

    FIRE = "Fire"
    WATER = "Water"
    GRASS = "Grass"
    ELECTRIC = "Electric"
    NORMAL = "Normal"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Move:
    """An attack with a type and a base damage."""

    name: str
    type: PokemonType
    power: int


STRUGGLE = Move("Struggle", PokemonType.NORMAL, 10)


@dataclass
class Pokemon:
    """A creature with hit points and a list of moves."""

    name: str
    type: PokemonType
    max_hp: int
    current_hp: int = field(init=False)
    _moves: list[Move] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        self.current_hp = self.max_hp

    @property
    def moveset(self) -> tuple[Move, ...]:
        """The moves this Pokémon knows, in the order they were learned."""
        return tuple(self._moves)

    def take_damage(self, amount: int) -> None:
        """Lose ``amount`` hit points, never dropping below zero."""
        self.current_hp = max(self.current_hp - amount, 0)

    def heal(self) -> None:
        """Restore hit points to the maximum."""
        self.current_hp = self.max_hp

    def is_fainted(self) -> bool:
        """Whether the Pokémon has no hit points left."""
        return self.current_hp <= 0

    def attack(self, rng: random.Random | None = None) -> int:
        """Roll a plain attack's damage, between 5 and 14 inclusive."""
        source = rng if rng is not None else random
        return source.randint(_ATTACK_MIN, _ATTACK_MAX)

    def add_move(self, move: Move) -> None:
        """Teach the Pokémon another move."""
        self._moves.append(move)

    def get_move(self, index: int) -> Move:
        """Return the move at ``index``, or Struggle when there is none."""
        if 0 <= index < len(self._moves):
            return self._moves[index]
        return STRUGGLE