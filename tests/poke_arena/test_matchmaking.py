import pytest

from src.poke_arena.errors import CreatureNotFoundError, MissingTeamsError, NotEnoughCreaturesError
from src.poke_arena.matchmaking import parse_team_ids, pick_teams
from src.poke_arena.schema.creature import Creature
from src.poke_arena.utils.rng import ScriptedRandom


def make_creature(creature_id: int) -> Creature:
    return Creature(id=creature_id, num=f"{creature_id:03d}", name=f"Mon{creature_id}", img="", type=["Normal"], height="1.0 m", weight="10.0 kg")


CATALOG = [make_creature(i) for i in (1, 4, 7, 25, 39)]


def test_parse_team_ids():
    assert parse_team_ids("1,4,7") == [1, 4, 7]
    assert parse_team_ids(" 1, 25 ,abc,0,,-3") == [1, 25]
    assert parse_team_ids("") == []
    assert parse_team_ids(None) == []


def test_single_pick_gets_one_random_opponent():
    # others are [4, 7, 25, 39]; floor(0.5 * 4) = 2
    user, opponents = pick_teams(CATALOG, [1], ScriptedRandom([0.5]))

    assert [c.id for c in user] == [1]
    assert [c.id for c in opponents] == [25]


def test_single_pick_never_fights_itself():
    for draw in (0.0, 0.3, 0.6, 0.99):
        _, opponents = pick_teams(CATALOG, [4], ScriptedRandom([draw]))
        assert opponents[0].id != 4


def test_unknown_single_pick_raises():
    with pytest.raises(CreatureNotFoundError):
        pick_teams(CATALOG, [999], ScriptedRandom([0.5]))


def test_team_pick_samples_same_number_of_opponents():
    # others are [7, 25, 39]: pick index 2 (39), then from [7, 25] index 0 (7)
    user, opponents = pick_teams(CATALOG, [1, 4], ScriptedRandom([0.9, 0.1]))

    assert [c.id for c in user] == [1, 4]
    assert [c.id for c in opponents] == [39, 7]


def test_team_pick_is_capped_by_available_creatures():
    user, opponents = pick_teams(CATALOG, [1, 4, 7, 25], ScriptedRandom([0.0]))

    assert len(user) == 4
    assert [c.id for c in opponents] == [39]


def test_empty_selection_raises():
    with pytest.raises(MissingTeamsError):
        pick_teams(CATALOG, [], ScriptedRandom([]))


def test_no_opponents_left_raises():
    with pytest.raises(NotEnoughCreaturesError):
        pick_teams(CATALOG[:1], [1], ScriptedRandom([0.5]))
