# routeone

`routeone` is a short text adventure that runs in your terminal. Professor Oak introduces himself first. Then you enter your name and your rival's name and choose a starter:

1. Charmander (Fire)
2. Bulbasaur (Grass)
3. Squirtle (Water)

After that you set out onto Route 1.

## Playing

Install the package and start the game:

```
pip install .
routeone
```

`routeone --help` shows the usage line. The command takes no other options.

Press Enter to move the story along. Battles are turn based:

- On your turn you pick a move by its number, and the move deals its power as damage.
- Anything other than a valid move number costs you the turn.
- After you act, the opponent answers with one of its moves, chosen at random.

Your first wild battle starts right after the introduction. On Route 1 you can then:

- explore the tall grass, where a random wild monster (Pidgey, Rattata, Zubat, Oddish, Growlithe or Poliwag) attacks you;
- visit the Pokémon Center to restore your partner to full HP;
- leave the game.

After each win in the wild you choose between exploring further and visiting the Pokémon Center. After your third win on Route 1, a rival challenges you with the first starter that differs from yours, and the game ends when that battle ends. If your partner faints in a wild battle, the game is over.

## What it does not do

The game has no save files. "Saving progress..." appears when you leave, but nothing is stored, and every run starts again from the introduction. Each trainer has exactly one Pokémon. Move types are shown, but damage is always the move's power: type matchups, levels and status effects are not modelled.

## Using the pieces

The building blocks can also be used on their own:

```python
from routeone.factory import create_pokemon, rival_starter
from routeone.trainer import Trainer

partner = create_pokemon("Squirtle")
partner.take_damage(12)
trainer = Trainer("Red", partner)
print(trainer.heal_pokemon())     # Squirtle has been healed to full HP!
print(trainer.status())
print(rival_starter("Squirtle"))  # Charmander
```

### Modules

`routeone.model`
: Holds `PokemonType` (an enum whose string form is the type name), the frozen `Move` dataclass (`name`, `type`, `power`) and `Pokemon`. `Pokemon` provides:
  - `take_damage`, which never drops HP below 0;
  - `heal`;
  - `is_fainted`;
  - `add_move` and `moveset`;
  - `get_move(index)`, which returns Struggle (Normal, power 10) when the index is out of range;
  - `attack(rng=None)`, which rolls 5 to 14.

`routeone.factory`
: `create_pokemon(name)` builds a species by name. An unknown name gives a Normal-type Pokémon with 20 HP and the moves Tackle and Growl. The module also has `wild_pokemon_names()`, `starter_options()` and `rival_starter(player_starter)`.

`routeone.trainer`
: `Trainer(name, pokemon)`. `heal_pokemon()` returns a notice, and `status()` returns a text block with the partner's name, type and HP.

`routeone.game`
: `Game(input_func=input, output=None, rng=None)` runs a play-through. It reads answers through `input_func`, writes to `output` (standard output by default) and makes random choices with `rng.choice` (a `random.Random` by default). `start()` runs the whole game. The individual steps are also methods:
  - `choose_starter`;
  - `explore_world`;
  - `handle_wild_battle`, which raises `GameOver` when your partner faints;
  - `post_battle_prompt`;
  - `pokemon_center`;
  - `handle_rival_battle`.

  `main(argv=None)` is the command's entry point.

## Running the tests

```
pip install .[test]
pytest
```