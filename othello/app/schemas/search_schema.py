from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Dict, Optional

from othello.app.core.settings import settings
from othello.core.board import Move
from othello.core.constants import BOARD_CELLS, BLACK_CODE, WHITE_CODE


class SearchRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    position: str = Field(min_length=BOARD_CELLS, max_length=BOARD_CELLS)
    player: int
    depth: int = Field(ge=0)

    @field_validator("player")
    @classmethod
    def check_player_code(cls, value: int) -> int:
        if value not in (BLACK_CODE, WHITE_CODE):
            raise ValueError(f"player must be {BLACK_CODE} (Black, X) or {WHITE_CODE} (White, O)")
        return value

    @field_validator("depth")
    @classmethod
    def check_depth_limit(cls, value: int) -> int:
        max_depth = settings.search.max_depth
        if value > max_depth:
            raise ValueError(f"depth must be at most {max_depth}")
        return value


class MoveScore(BaseModel):
    row: int
    col: int
    score: int


class SearchResponse(BaseModel):
    # None means the side to move has no legal move
    best_move: Optional[MoveScore] = None
    scores: Dict[str, int] = {}
    nodes_explored: int = 0
    duration: float = 0.0
    # Position after the best move, or the input position when there is none
    result_position: str

    @property
    def move(self) -> Optional[Move]:
        if self.best_move is None:
            return None
        return Move(self.best_move.row, self.best_move.col)
