"""A trainer and the Pokémon that travels with them."""

from __future__ import annotations

from dataclasses import dataclass

from routeone.model import Pokemon

_RULE = "=" * 30


@dataclass
class Trainer:
    """A named trainer with a single partner Pokémon."""

    name: str
    pokemon: Pokemon

    def heal_pokemon(self) -> str:
        """Restore the partner to full health and return the notice."""
        self.pokemon.heal()
        return f"{self.pokemon.name} has been healed to full HP!"

    def status(self) -> str:
        """A block of text describing the partner's condition."""
        p = self.pokemon
        return "\n".join(
            [
                "",
                _RULE,
                f"{self.name}'s Pokémon:",
                f"Name: {p.name}",
                f"Type: {p.type}",
                f"HP:   {p.current_hp}/{p.max_hp}",
                _RULE,
            ]
        )