from enum import StrEnum

from .constants import BLACK_SYMBOL, WHITE_SYMBOL, EMPTY_SYMBOL, BLACK_CODE, WHITE_CODE


class CellState(StrEnum):
    EMPTY = EMPTY_SYMBOL
    BLACK = BLACK_SYMBOL
    WHITE = WHITE_SYMBOL

    @classmethod
    def from_symbol(cls, symbol: str) -> "CellState":
        if symbol == WHITE_SYMBOL:
            return cls.WHITE
        if symbol == BLACK_SYMBOL:
            return cls.BLACK
        return cls.EMPTY


class Player(StrEnum):
    BLACK = "black"
    WHITE = "white"

    @property
    def opponent(self) -> "Player":
        return Player.WHITE if self is Player.BLACK else Player.BLACK

    @property
    def cell(self) -> CellState:
        """The CellState this player's stones occupy."""
        return CellState.BLACK if self is Player.BLACK else CellState.WHITE

    @classmethod
    def from_code(cls, code: int) -> "Player":
        """Maps the driver's player code (1=Black, 2=White)."""
        if code == BLACK_CODE:
            return cls.BLACK
        if code == WHITE_CODE:
            return cls.WHITE
        raise ValueError(f"Unknown player code: {code}")
