import logging

from pydantic import ValidationError

from othello.app.core.settings import settings
from othello.app.schemas.search_schema import SearchRequest
from othello.app.services.search_service import search_service
from othello.core.board import Board


def read_request() -> SearchRequest:
    """Prompts until position, player and depth form a valid request."""
    while True:
        position = input("Board position (36 chars, X=Black, O=White, other=Empty):\n")
        player = input("Player to move (1 = Black X, 2 = White O):\n")
        depth = input(f"Search depth [{settings.search.default_depth}]:\n") or settings.search.default_depth

        try:
            return SearchRequest(position=position, player=player, depth=depth)
        except ValidationError as e:
            print(f"Invalid input: {e}")


def main():
    logging.basicConfig(level=settings.logging.level, format=settings.logging.format)

    print("=======================================")
    print("   6x6 OTHELLO: NegaScout engine")
    print("=======================================")

    request = read_request()

    try:
        response = search_service.run(request)
    except ValueError as e:
        print(f"Search Error: {e}")
        return

    if response.move is None:
        print("No legal move.")
    else:
        print(f"Best Move: {response.move}")  # (row,col)

    board = Board.from_string(response.result_position)
    print("Board:")
    print(board.render())
    print(board.to_string())


if __name__ == "__main__":
    main()
