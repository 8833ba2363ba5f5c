from src.poke_arena.enums.type import Type
from src.poke_arena.enums.other import BattleSide, BattleOutcome
