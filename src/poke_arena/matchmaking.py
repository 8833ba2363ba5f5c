from typing import Sequence

from src.poke_arena.errors import CreatureNotFoundError, MissingTeamsError, NotEnoughCreaturesError
from src.poke_arena.schema.creature import Creature
from src.poke_arena.utils.rng import RandomSource, choice_index


def parse_team_ids(team_param: str | None) -> list[int]:
    """Parse "1,4,7" into [1, 4, 7]. Entries that are not positive integers are dropped."""
    if not team_param:
        return []
    ids = []
    for part in team_param.split(","):
        part = part.strip()
        if part.isdecimal() and int(part) != 0:
            ids.append(int(part))
    return ids


def _sample(rng: RandomSource, pool: Sequence[Creature], count: int) -> list[Creature]:
    # Partial Fisher-Yates: one draw per picked creature
    remaining = list(pool)
    picked = []
    while remaining and len(picked) < count:
        picked.append(remaining.pop(choice_index(rng, len(remaining))))
    return picked


def pick_teams(creatures: Sequence[Creature], team_ids: Sequence[int], rng: RandomSource) -> tuple[list[Creature], list[Creature]]:
    """
    Build the user team from the chosen ids and a random opponent team of the same size

    - One id: that creature against one random other creature
    - Several ids: the selected creatures against a random sample of the rest,
      as many as ids were chosen (fewer if the catalog runs short)
    """
    if not team_ids:
        raise MissingTeamsError("No Pokémon selected")

    if len(team_ids) == 1:
        chosen_id = team_ids[0]
        chosen = next((creature for creature in creatures if creature.id == chosen_id), None)
        if chosen is None:
            raise CreatureNotFoundError(chosen_id)
        others = [creature for creature in creatures if creature.id != chosen_id]
        if not others:
            raise NotEnoughCreaturesError("No other Pokémon available to fight")
        return [chosen], [others[choice_index(rng, len(others))]]

    wanted = set(team_ids)
    selected = [creature for creature in creatures if creature.id in wanted]
    others = [creature for creature in creatures if creature.id not in wanted]
    if not others:
        raise NotEnoughCreaturesError("No other Pokémon available to fight")
    return selected, _sample(rng, others, len(team_ids))
