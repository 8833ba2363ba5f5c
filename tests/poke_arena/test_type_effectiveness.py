import pytest

from src.poke_arena.enums import Type
from src.poke_arena.type_effectiveness import TypeEffectiveness


def test_single_pair_lookups():
    assert TypeEffectiveness.get_effectiveness(Type.FIRE, Type.GRASS) == 2.0
    assert TypeEffectiveness.get_effectiveness(Type.FIRE, Type.WATER) == 0.5
    assert TypeEffectiveness.get_effectiveness(Type.ELECTRIC, Type.GROUND) == 0.0
    # Not charted -> neutral
    assert TypeEffectiveness.get_effectiveness(Type.NORMAL, Type.ROCK) == 1.0
    assert TypeEffectiveness.get_effectiveness(Type.GRASS, Type.POISON) == 1.0


def test_uncharted_types_are_neutral():
    assert TypeEffectiveness.get_type_multiplier([Type.NORMAL], [Type.PSYCHIC]) == 1.0


def test_dual_defender_types_compound():
    # Water vs Fire is x2, Water vs Water is x0.5
    assert TypeEffectiveness.get_type_multiplier([Type.WATER], [Type.FIRE, Type.WATER]) == pytest.approx(1.0)
    # Grass vs Water twice over (duplicated label still counts per pair)
    assert TypeEffectiveness.get_type_multiplier([Type.GRASS], [Type.WATER, Type.WATER]) == pytest.approx(4.0)


def test_dual_attacker_types_compound():
    # Fire -> Grass x2, Ground -> Grass x0.5
    assert TypeEffectiveness.get_type_multiplier([Type.FIRE, Type.GROUND], [Type.GRASS]) == pytest.approx(1.0)
    # Water -> Fire x2, Ground -> Fire not charted
    assert TypeEffectiveness.get_type_multiplier([Type.WATER, Type.GROUND], [Type.FIRE]) == pytest.approx(2.0)


def test_immunity_wins_over_everything():
    assert TypeEffectiveness.get_type_multiplier([Type.ELECTRIC], [Type.WATER, Type.GROUND]) == 0.0
    assert TypeEffectiveness.get_type_multiplier([Type.ELECTRIC], [Type.GROUND], [Type.ELECTRIC]) == 0.0


def test_weakness_bonus_applies_once_per_matching_attacker_type():
    bulbasaur_types = [Type.GRASS, Type.POISON]
    bulbasaur_weaknesses = [Type.FIRE, Type.PSYCHIC, Type.FLYING, Type.ICE]

    assert TypeEffectiveness.get_type_multiplier([Type.FIRE], bulbasaur_types, bulbasaur_weaknesses) == pytest.approx(2.4)
    # Psychic is not charted at all, only the weakness bonus applies
    assert TypeEffectiveness.get_type_multiplier([Type.PSYCHIC], bulbasaur_types, bulbasaur_weaknesses) == pytest.approx(1.2)
    # Two matching attacker types stack
    assert TypeEffectiveness.get_type_multiplier([Type.PSYCHIC, Type.FLYING], bulbasaur_types, bulbasaur_weaknesses) == pytest.approx(1.44)


def test_missing_or_empty_weaknesses_add_nothing():
    assert TypeEffectiveness.get_type_multiplier([Type.FIRE], [Type.GRASS], None) == 2.0
    assert TypeEffectiveness.get_type_multiplier([Type.FIRE], [Type.GRASS], []) == 2.0


@pytest.mark.parametrize(
    "multiplier, expected",
    [
        (2.4, "It's super effective!"),
        (1.2, "It's super effective!"),
        (0.5, "It's not very effective..."),
        (0.0, "But it had no effect!"),
        (1.0, ""),
    ],
)
def test_effectiveness_description(multiplier, expected):
    assert TypeEffectiveness.get_effectiveness_description(multiplier) == expected
