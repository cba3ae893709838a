"""The interactive adventure on Route 1: intro, wild battles, healing and the rival."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable, Sequence
from typing import Protocol, TextIO, TypeVar

from routeone.factory import create_pokemon, rival_starter, wild_pokemon_names
from routeone.model import Move, Pokemon
from routeone.trainer import Trainer

_T = TypeVar("_T")

_WINS_BEFORE_RIVAL = 3
_STARTER_CHOICES = {"1": "Charmander", "2": "Bulbasaur", "3": "Squirtle"}


class _Chooser(Protocol):
    def choice(self, seq: Sequence[_T]) -> _T: ...


class GameOver(Exception):
    """Raised when the player's Pokémon faints in the wild."""


def _hp(pokemon: Pokemon) -> str:
    return f"{pokemon.current_hp}/{pokemon.max_hp}"


class Game:
    """One play-through, reading answers from ``input_func`` and writing to ``output``."""

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        output: TextIO | None = None,
        rng: _Chooser | None = None,
    ) -> None:
        self._input = input_func
        self._out = output if output is not None else sys.stdout
        self._rng: _Chooser = rng if rng is not None else random.Random()
        self.player: Trainer | None = None
        self.rival: Trainer | None = None
        self.rival_pokemon: Pokemon | None = None
        self.rival_name = ""

    def _say(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def _wait(self) -> None:
        self._input("")

    def _ask(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def _require_player(self) -> Trainer:
        if self.player is None:
            raise RuntimeError("no player trainer has been created yet")
        return self.player

    def start(self) -> None:
        """Run the whole game from Professor Oak's introduction onwards."""
        self._say("\n🟦==========================================🟦\n")
        self._say("\n🧑‍🔬 Professor Oak: Welcome to the world of POKEMON!\n")
        self._wait()
        self._say("🧢 My name is OAK, and people call me the POKEMON PROF.\n")
        self._wait()
        self._say("🌍 This world is inhabited by mysterious creatures called POKEMON.\n")
        self._wait()
        self._say("Some people keep them as pets, others use them in battles...\n")
        self._wait()
        self._say("I myself study POKEMON as a profession.\n")
        self._wait()

        self._say("🟦==========================================🟦\n")
        self._say("\n👤 First, what is your name, Trainer?\n\n")
        player_name = self._input("Your name: ")
        self._say(f"\n🧑‍🔬 Oak: Right! So your name is {player_name}!\n")
        self._wait()

        self._say(
            "Now... this is my grandson. He's been your rival since you were both babies.\n"
        )
        self._say("Hmm... what was his name again?\n\n")
        self.rival_name = self._input("Rival's name: ")
        self._say(
            f"\n🧑‍🔬 Oak: Ah yes! Now I remember — his name is {self.rival_name}!\n"
        )
        self._wait()

        self._say("\n⚔️  Your very own POKEMON legend is about to unfold!\n")
        self._say("A world of dreams and adventures with POKEMON awaits — let's begin!\n")
        self._wait()

        starter_name = self.choose_starter()
        self._wait()

        starter = create_pokemon(starter_name)
        self.player = Trainer(player_name, starter)

        self._say("\n🟩===============================🟩\n")
        self._say("\n🎉 Your Starter Pokémon:\n")
        self._say(f"Name: {starter.name}\n")
        self._say(f"Type: {starter.type}\n")
        self._say(f"HP:   {_hp(starter)}\n")
        self._say("\n🟩===============================🟩\n")
        self._wait()

        self._say(
            f"🧑‍🔬 Oak: You chose {starter.name}! A strong partner for a new "
            f"Trainer like you, {player_name}!\n"
        )
        self._wait()
        self._say(f"\n🧑‍🔬 Oak: Your rival {self.rival_name} has chosen a Pokémon too!\n")
        self._wait()
        self._say("📜 Oak: Before you go — here’s a tip...\n")
        self._say("🪵 Wild Pokémon live in tall grass. Be sure to heal up when needed!\n")
        self._wait()
        self._say("\n👣 You step outside into Route 1...\n")
        self._say("🌿 The grass is tall and rustling with movement.\n")
        self._wait()
        self._say("\n👀 Something’s watching you from the grass...\n")
        self._wait()

        if self.handle_wild_battle():
            self.post_battle_prompt()

        self.explore_world()

    def choose_starter(self) -> str:
        """Ask until the player picks one of the three starters; return its name."""
        self._say("\n🟥===============================🟥\n")
        self._say("\n🧑‍🔬 Oak: Now, choose your first Pokémon!\n")
        self._wait()
        self._say("Here are your options:\n")
        self._say("   1️⃣  🔥 Charmander — Fire Type\n")
        self._say("   2️⃣  🌿 Bulbasaur — Grass Type\n")
        self._say("   3️⃣  💧 Squirtle  — Water Type\n")
        self._say("\n🟥===============================🟥\n")

        while True:
            choice = self._ask("\nYour choice (1-3): ")
            if choice in _STARTER_CHOICES:
                return _STARTER_CHOICES[choice]
            self._say("❗ Invalid choice. Please enter 1, 2, or 3.\n")

    def explore_world(self) -> None:
        """The main menu loop on Route 1, ending after the rival battle or on exit."""
        player = self._require_player()
        wild_wins = 0

        self._say("\n🗺️  You are now on Route 1.\n")
        self._say("🌾 The grass is swaying... something may be lurking.\n")
        self._wait()

        while True:
            self._say("\n==============================\n")
            self._say("🧭 What would you like to do?\n")
            self._say("   1️⃣  Explore the tall grass\n")
            self._say("   2️⃣  🏥 Visit Pokémon Center\n")
            self._say("   3️⃣  ❌ Exit Game\n")
            self._say("==============================\n")
            choice = self._ask("\nYour choice: ")

            if choice == "1":
                self._say("\n🌿 You step cautiously into the tall grass...\n")
                self._wait()
                if not self.handle_wild_battle():
                    continue
                wild_wins += 1
                if wild_wins >= _WINS_BEFORE_RIVAL:
                    if self.rival is None:
                        self.rival_pokemon = create_pokemon(
                            rival_starter(player.pokemon.name)
                        )
                        self.rival = Trainer("Rival", self.rival_pokemon)

                    self._say("\n👣 You hear fast footsteps behind you...\n")
                    self._say(
                        f"⚔️  Your rival {self.rival.name} appears and challenges "
                        "you to a battle!\n"
                    )
                    self._wait()

                    if self.handle_rival_battle():
                        self._say("\n🏆 Congratulations! You've defeated your rival!\n")
                        self._say("🎉 You are now a true Pokémon Trainer!\n")
                    else:
                        self._say("\n💀 Your Pokémon fainted during the rival battle.\n")
                        self._say("Better luck next time!\n")
                    return
                self.post_battle_prompt()
            elif choice == "2":
                self.pokemon_center()
            elif choice == "3":
                self._say("\n🎮 Saving progress...\n")
                self._say("👋 Thanks for playing!\n")
                return
            else:
                self._say("❗ Invalid input. Please enter 1, 2, or 3.\n")

    def _show_moves(self, moves: Sequence[Move]) -> None:
        for number, move in enumerate(moves, start=1):
            self._say(f"   {number}️⃣  {move.name} ({move.type}, {move.power})\n")

    def _pick_move(self, moves: Sequence[Move]) -> Move | None:
        answer = self._ask("\nYour choice: ")
        try:
            number = int(answer)
        except ValueError:
            return None
        if 1 <= number <= len(moves):
            return moves[number - 1]
        return None

    def handle_wild_battle(self) -> bool:
        """Fight a random wild Pokémon; True on victory.

        Raises GameOver when the player's Pokémon faints.
        """
        player_poke = self._require_player().pokemon
        wild = create_pokemon(self._rng.choice(wild_pokemon_names()))

        while not wild.is_fainted() and not player_poke.is_fainted():
            moves = player_poke.moveset
            self._say("\n🟨=============================🟨\n")
            self._say(f"🌿 A wild {wild.name} appeared!\n")
            self._say("🟨=============================🟨\n\n")
            self._say(f"🔥 Your Pokémon: {player_poke.name}\n")
            self._say(f"HP:   {_hp(player_poke)}\n\n")
            self._say(f"🧪 Wild Pokémon: {wild.name}\n")
            self._say(f"HP:   {_hp(wild)}\n\n")
            self._say(f"🕹️  What will {player_poke.name} do?\n\n")
            self._show_moves(moves)

            selected = self._pick_move(moves)
            if selected is None:
                self._say("Invalid move! You miss your turn!\n")
            else:
                self._say(f"{player_poke.name} used {selected.name}!\n")
                wild.take_damage(selected.power)

            if wild.is_fainted():
                self._say(f"\n🎉 You defeated the wild {wild.name}!\n")
                return True

            wild_move = self._rng.choice(wild.moveset)
            self._say(f"The wild {wild.name} used {wild_move.name}!\n")
            player_poke.take_damage(wild_move.power)

            if player_poke.is_fainted():
                self._say(f"\n💀 Your {player_poke.name} fainted!\n")
                self._say("Game Over. Better luck next time!\n")
                raise GameOver(f"{player_poke.name} fainted")

        return False

    def post_battle_prompt(self) -> None:
        """After a win, ask whether to keep exploring or visit the Pokémon Center."""
        self._say("\n🟩===============================🟩\n")
        self._say("🎊 Victory! The wild Pokémon has fainted.\n")
        self._say("🟩===============================🟩\n")

        while True:
            self._say("\n🧭 What would you like to do next?\n")
            self._say("   1️⃣  Continue exploring\n")
            self._say("   2️⃣  🏥 Visit Pokémon Center\n")
            choice = self._ask("\nYour choice: ")
            if choice == "1":
                self._say("\n🌿 You venture deeper into the tall grass...\n")
                return
            if choice == "2":
                self._say("\n🏥 Heading to the nearest Pokémon Center...\n")
                self.pokemon_center()
                return
            self._say("❗ Invalid choice. Please enter 1 or 2.\n")

    def pokemon_center(self) -> None:
        """Restore the player's Pokémon to full health."""
        player = self._require_player()
        self._say("\n🏥 You enter the Pokémon Center...\n")
        self._wait()
        self._say("👩‍⚕️ Nurse Joy: Welcome to the Pokémon Center!\n")
        self._say("💉 Let me heal your Pokémon back to full health.\n")
        self._wait()
        self._say("\n✨ Healing in progress...\n")
        self._say("🔄 HP being restored...\n")
        self._wait()

        self._say(player.heal_pokemon() + "\n")
        self._say(f"\n✅ {player.pokemon.name}'s HP has been fully restored!\n")
        self._say(player.status() + "\n")
        self._say("\n👩‍⚕️ Nurse Joy: We hope to see you again!\n")
        self._wait()

    def handle_rival_battle(self) -> bool:
        """Fight the rival's starter; True on victory, False if the player faints."""
        player_poke = self._require_player().pokemon
        if self.rival_pokemon is None:
            self.rival_pokemon = create_pokemon(rival_starter(player_poke.name))
            self.rival = Trainer(self.rival_name, self.rival_pokemon)
        if self.rival is None:
            self.rival = Trainer(self.rival_name, self.rival_pokemon)
        enemy = self.rival.pokemon

        self._say("\n🟥===============================🟥\n")
        self._say("⚔️  Rival Battle Begins!\n")
        self._say(f"{player_poke.name} vs. {enemy.name}!\n")
        self._say("🟥===============================🟥\n")
        self._wait()

        while not player_poke.is_fainted() and not enemy.is_fainted():
            moves = player_poke.moveset
            self._say(f"\n🔥 Your Pokémon: {player_poke.name}\n")
            self._say(f"HP:   {_hp(player_poke)}\n\n")
            self._say(f"🧪 Rival's Pokémon: {enemy.name}\n")
            self._say(f"HP:   {_hp(enemy)}\n\n")
            self._say("🕹️  Choose your move:\n")
            self._show_moves(moves)

            selected = self._pick_move(moves)
            if selected is None:
                self._say("❌ Invalid move! You miss your turn!\n")
            else:
                self._say(f"{player_poke.name} used {selected.name}!\n")
                enemy.take_damage(selected.power)

            if enemy.is_fainted():
                self._say(f"\n🎉 You defeated your rival's {enemy.name}!\n")
                return True

            rival_move = self._rng.choice(enemy.moveset)
            self._say(f"The rival's {enemy.name} used {rival_move.name}!\n")
            player_poke.take_damage(rival_move.power)

            if player_poke.is_fainted():
                self._say(f"\n💀 Your {player_poke.name} fainted!\n")
                return False

        return False


def main(argv: Sequence[str] | None = None) -> int:
    """Play the game on the terminal."""
    parser = argparse.ArgumentParser(
        prog="routeone", description="A short Pokémon adventure on Route 1."
    )
    parser.parse_args(argv)
    try:
        Game().start()
    except GameOver:
        return 0
    except (EOFError, KeyboardInterrupt):
        print()
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())