"""
Win detection for Tic-Tac-Toe.
A board is a list of 9 cells, each None, "X" or "O", indexed row by row.
"""

X = "X"
O = "O"
MARKS = (X, O)
BOARD_SIZE = 9

# Rows, columns, diagonals. Checked in this order.
WINNING_LINES = [
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
]


def empty_board():
    return [None] * BOARD_SIZE


def calculate_winner(squares):
    """
    Find the first completed line on the board.
    Returns (winner, winning_squares); winner is None and winning_squares
    is empty when no line is complete. Draws are not reported here.
    """
    for a, b, c in WINNING_LINES:
        if squares[a] and squares[a] == squares[b] == squares[c]:
            return squares[a], [a, b, c]
    return None, []


def is_board_full(squares):
    return all(square is not None for square in squares)
