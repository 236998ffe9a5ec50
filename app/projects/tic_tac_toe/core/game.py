"""
Game state for Tic-Tac-Toe: board history, current position and the
move list sort order.
"""
from app.projects.tic_tac_toe.core.winner import (
    BOARD_SIZE,
    MARKS,
    O,
    X,
    calculate_winner,
    empty_board,
    is_board_full,
)


class GameState:
    """
    Owns the history of board snapshots, the pointer to the displayed
    board, and the move list sort order.

    history[0] is always the empty board and history[i] is the board after
    move i. Invalid moves and jumps are ignored and reported by returning
    False, never by raising.
    """

    def __init__(self, history=None, current_move=0, is_ascending=True):
        self.history = history if history is not None else [empty_board()]
        self.current_move = current_move
        self.is_ascending = is_ascending

    @property
    def current_squares(self):
        return self.history[self.current_move]

    @property
    def x_is_next(self):
        return self.current_move % 2 == 0

    @property
    def next_player(self):
        return X if self.x_is_next else O

    @property
    def verdict(self):
        return calculate_winner(self.current_squares)

    @property
    def is_draw(self):
        winner, _ = self.verdict
        return winner is None and is_board_full(self.current_squares)

    def apply_move(self, index):
        """
        Place the next player's mark on the current board.
        Any snapshots after the current move are dropped.
        Returns True if the move was accepted.
        """
        if not isinstance(index, int) or isinstance(index, bool):
            return False
        if index < 0 or index >= BOARD_SIZE:
            return False

        squares = self.current_squares
        winner, _ = calculate_winner(squares)
        if squares[index] or winner:
            return False

        next_squares = list(squares)
        next_squares[index] = self.next_player
        self.history = self.history[:self.current_move + 1] + [next_squares]
        self.current_move = len(self.history) - 1
        return True

    def jump_to(self, move):
        """Show the board after `move`. History is not modified."""
        if not isinstance(move, int) or isinstance(move, bool):
            return False
        if move < 0 or move >= len(self.history):
            return False
        self.current_move = move
        return True

    def toggle_sort_order(self):
        self.is_ascending = not self.is_ascending

    def to_dict(self):
        return {
            "history": [list(squares) for squares in self.history],
            "current_move": self.current_move,
            "is_ascending": self.is_ascending,
        }

    @classmethod
    def from_dict(cls, data):
        """
        Rebuild a game from to_dict() output.
        Raises ValueError if the data does not describe a playable game.
        """
        if not isinstance(data, dict):
            raise ValueError("Game data must be a dict")

        history = data.get("history")
        current_move = data.get("current_move")
        is_ascending = data.get("is_ascending", True)

        if not isinstance(history, list) or not history:
            raise ValueError("History must be a non-empty list")
        if not isinstance(current_move, int) or isinstance(current_move, bool):
            raise ValueError("Current move must be an integer")
        if not 0 <= current_move < len(history):
            raise ValueError(f"Current move {current_move} is out of range")
        if not isinstance(is_ascending, bool):
            raise ValueError("Sort order must be a boolean")

        for move, squares in enumerate(history):
            if not isinstance(squares, list) or len(squares) != BOARD_SIZE:
                raise ValueError(f"Board at move {move} must have {BOARD_SIZE} cells")
            if any(square is not None and square not in MARKS for square in squares):
                raise ValueError(f"Board at move {move} has an unknown mark")

        if any(history[0]):
            raise ValueError("Game must start from an empty board")
        for move in range(1, len(history)):
            _check_step(history[move - 1], history[move], move)

        return cls(
            history=[list(squares) for squares in history],
            current_move=current_move,
            is_ascending=is_ascending,
        )


def _check_step(previous, squares, move):
    """Each move fills exactly one empty cell with the mover's mark, and no move follows a win."""
    winner, _ = calculate_winner(previous)
    if winner:
        raise ValueError(f"Move {move} follows a win for {winner}")
    changed = [i for i in range(BOARD_SIZE) if previous[i] != squares[i]]
    expected = X if move % 2 == 1 else O
    if len(changed) != 1:
        raise ValueError(f"Move {move} must change exactly one cell")
    index = changed[0]
    if previous[index] is not None or squares[index] != expected:
        raise ValueError(f"Move {move} must place {expected} on an empty cell")
