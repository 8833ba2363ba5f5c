from enum import IntEnum


class BattleSide(IntEnum):
    USER = 0
    OPPONENT = 1

    def opposite(self) -> "BattleSide":
        return BattleSide.OPPONENT if self == BattleSide.USER else BattleSide.USER


class BattleOutcome(IntEnum):
    """How a battle ended, if it has"""

    ONGOING = 0
    USER_WON = 1
    OPPONENT_WON = 2
    DRAW = 3

    @property
    def ended(self) -> bool:
        return self != BattleOutcome.ONGOING
