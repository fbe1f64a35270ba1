"""
Search Service - single entry point for drivers.

Turns a validated SearchRequest into a board, runs the NegaScout solver,
applies the chosen move and reports the result with timing.
"""

import logging
import time

from othello.app.core.settings import EngineSettings, settings as default_settings
from othello.app.schemas.search_schema import SearchRequest, SearchResponse, MoveScore
from othello.core.board import Board
from othello.core.enums import Player
from othello.core.solver import Solver

logger = logging.getLogger(__name__)


class SearchService:
    def __init__(self, settings: EngineSettings = None):
        self.settings = settings or default_settings

    def run(self, request: SearchRequest) -> SearchResponse:
        max_depth = self.settings.search.max_depth
        if request.depth > max_depth:
            raise ValueError(f"Depth {request.depth} exceeds the configured maximum of {max_depth}")

        board = Board.from_string(request.position)
        player = Player.from_code(request.player)
        solver = Solver(research_horizon=self.settings.search.research_horizon)

        start_time = time.time()
        result = solver.solve(board, player, request.depth)
        duration = round(time.time() - start_time, 3)

        move = result["best_move"]
        if move is None:
            logger.info("No legal move for %s (depth %d)", player, request.depth)
            return SearchResponse(
                best_move=None,
                nodes_explored=result["nodes_explored"],
                duration=duration,
                result_position=board.to_string()
            )

        next_board = board.play(move, player)
        logger.info(
            "%s plays %s at depth %d: score %d, %d nodes in %.3fs",
            player, move, request.depth, result["best_score"], result["nodes_explored"], duration
        )

        return SearchResponse(
            best_move=MoveScore(row=move.row, col=move.col, score=result["best_score"]),
            scores={str(m): s for m, s in result["scores"].items()},
            nodes_explored=result["nodes_explored"],
            duration=duration,
            result_position=next_board.to_string()
        )


# Singleton instance
search_service = SearchService()
