from routeone.factory import create_pokemon
from routeone.trainer import Trainer


def test_heal_pokemon_restores_partner():
    trainer = Trainer("Red", create_pokemon("Charmander"))
    trainer.pokemon.take_damage(12)
    message = trainer.heal_pokemon()
    assert trainer.pokemon.current_hp == trainer.pokemon.max_hp
    assert message == "Charmander has been healed to full HP!"


def test_heal_pokemon_revives_fainted_partner():
    trainer = Trainer("Red", create_pokemon("Squirtle"))
    trainer.pokemon.take_damage(1000)
    assert trainer.pokemon.is_fainted()
    trainer.heal_pokemon()
    assert not trainer.pokemon.is_fainted()


def test_status_describes_partner():
    trainer = Trainer("Red", create_pokemon("Bulbasaur"))
    lines = trainer.status().splitlines()
    assert "Red's Pokémon:" in lines
    assert "Name: Bulbasaur" in lines
    assert "Type: Grass" in lines


def test_status_reflects_damage():
    trainer = Trainer("Blue", create_pokemon("Pidgey"))
    trainer.pokemon.take_damage(4)
    p = trainer.pokemon
    hp_line = next(line for line in trainer.status().splitlines() if line.startswith("HP:"))
    assert hp_line.endswith(f"{p.current_hp}/{p.max_hp}")
    assert p.current_hp == p.max_hp - 4


def test_status_is_framed_by_rules():
    trainer = Trainer("Red", create_pokemon("Charmander"))
    lines = [line for line in trainer.status().splitlines() if line]
    assert lines[0] == lines[-1]
    assert set(lines[0]) == {"="}


def test_trainer_shares_its_pokemon():
    partner = create_pokemon("Charmander")
    trainer = Trainer("Red", partner)
    trainer.pokemon.take_damage(5)
    assert partner.current_hp == trainer.pokemon.current_hp
    assert trainer.name == "Red"