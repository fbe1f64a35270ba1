# othello/core/constants.py

# --- Board Dimensions ---
BOARD_SIZE = 6
BOARD_CELLS = BOARD_SIZE * BOARD_SIZE

# --- Description Symbols ---
# Anything that is not 'X' or 'O' reads as an empty cell
BLACK_SYMBOL = "X"
WHITE_SYMBOL = "O"
EMPTY_SYMBOL = "+"

# Player codes used by the console driver
BLACK_CODE = 1
WHITE_CODE = 2

# --- Scoring System ---
# Score = own pieces - opponent pieces, so |score| <= 36.
# One past that acts as +/- infinity for the root window.
MAX_SCORE = BOARD_CELLS + 1
MIN_SCORE = -MAX_SCORE

# --- Search ---
# Below or at this depth a null-window fail high is accepted without re-search
RESEARCH_HORIZON = 2

# The 8 unit directions as (d_row, d_col)
DIRECTIONS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
]
