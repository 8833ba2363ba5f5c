import math

import pytest

from src.poke_arena.schema.creature import Creature
from src.poke_arena.utils.mon_factory import create_battler, initialize, power_multiplier, rarity_factor
from src.poke_arena.utils.rng import ScriptedRandom
from src.poke_arena.utils.units import parse_measurement, require_measurement
from src.poke_arena.errors import InvalidMeasurementError


def make_creature(**fields) -> Creature:
    """Bulbasaur by default; keyword fields replace catalog values"""
    data = dict(
        id=1,
        num="001",
        name="Bulbasaur",
        img="bulbasaur.png",
        type=["Grass", "Poison"],
        weaknesses=["Fire", "Psychic", "Flying", "Ice"],
        height="0.7 m",
        weight="6.9 kg",
        spawn_chance=0.69,
        multipliers=[1.58],
    )
    data.update(fields)
    return Creature.model_validate(data)


@pytest.mark.parametrize("draw", [0.0, 0.5, 0.999])
def test_fixed_fields_do_not_depend_on_random_source(draw):
    battler = create_battler(make_creature(), ScriptedRandom([draw] * 3))

    assert battler.hp == 100
    assert battler.maxHp == 100
    assert battler.critChance == 0.2
    assert battler.missChance == 0.08


def test_random_stats_cover_inclusive_ranges():
    low = create_battler(make_creature(), ScriptedRandom([0.0, 0.0, 0.0]))
    assert (low.defense, low.speed, low.attack) == (6, 30, 18)

    high = create_battler(make_creature(), ScriptedRandom([0.999, 0.999, 0.999]))
    assert (high.defense, high.speed, high.attack) == (11, 50, 26)


def test_stats_are_rolled_defense_speed_attack():
    battler = create_battler(make_creature(), ScriptedRandom([0.0, 0.5, 0.999]))

    assert battler.defense == 6
    assert battler.speed == 40
    assert battler.attack == 26


def test_initialize_draws_three_values_per_creature():
    rng = ScriptedRandom([0.5] * 6)
    charmander = make_creature(id=4, num="004", name="Charmander", type=["Fire"], weaknesses=["Water", "Ground", "Rock"])

    battlers = initialize([make_creature(), charmander], rng)

    assert [b.name for b in battlers] == ["Bulbasaur", "Charmander"]
    assert rng.calls == 6


def test_fixed_defaults_without_random_source():
    battler = create_battler(make_creature())

    assert (battler.defense, battler.speed, battler.attack) == (10, 50, 25)


def test_overrides_replace_derived_fields():
    battler = create_battler(make_creature(), hp=1, speed=60, critChance=1.0)

    assert battler.hp == 1
    assert battler.speed == 60
    assert battler.critChance == 1.0
    assert battler.maxHp == 100


def test_catalog_fields_are_kept():
    battler = create_battler(make_creature())

    assert battler.id == 1
    assert battler.num == "001"
    assert battler.img == "bulbasaur.png"
    assert [t.value for t in battler.type] == ["Grass", "Poison"]


def test_measurements_are_parsed():
    battler = create_battler(make_creature(height="0.7 m", weight="6.9 kg"))

    assert battler.heightM == pytest.approx(0.7)
    assert battler.weightKg == pytest.approx(6.9)


def test_malformed_measurements_become_nan():
    battler = create_battler(make_creature(weight="heavy", height="? m"))

    assert math.isnan(battler.weightKg)
    assert math.isnan(battler.heightM)


@pytest.mark.parametrize(
    "spawn_chance, expected",
    [
        (0.01, 1.3),
        (0.049, 1.3),
        (0.05, 1.15),
        (0.1, 1.15),
        (0.2, 1.0),
        (0.5, 1.0),
        (None, 1.0),
        (0.0, 1.0),
        (15.98, 1.0),
    ],
)
def test_rarity_factor(spawn_chance, expected):
    assert rarity_factor(spawn_chance) == expected
    assert create_battler(make_creature(spawn_chance=spawn_chance)).rarityFactor == expected


@pytest.mark.parametrize(
    "multipliers, expected",
    [
        ([1.2, 1.58], 1.58),
        ([1.65], 1.65),
        ([], 1.0),
        (None, 1.0),
    ],
)
def test_power_multiplier(multipliers, expected):
    assert power_multiplier(multipliers) == expected
    assert create_battler(make_creature(multipliers=multipliers)).powerMultiplier == expected


def test_parse_measurement():
    assert parse_measurement("6.9 kg", "kg") == pytest.approx(6.9)
    assert parse_measurement(" 1.04 m ", "m") == pytest.approx(1.04)
    assert parse_measurement("210.0 kg", "kg") == pytest.approx(210.0)
    assert math.isnan(parse_measurement("", "kg"))
    assert math.isnan(parse_measurement("six kg", "kg"))


def test_require_measurement_raises_on_malformed_value():
    assert require_measurement("weight", "8.5 kg", "kg") == pytest.approx(8.5)

    with pytest.raises(InvalidMeasurementError) as exc_info:
        require_measurement("weight", "heavy", "kg")

    assert exc_info.value.field == "weight"
    assert exc_info.value.status == 400
