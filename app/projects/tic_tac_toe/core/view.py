"""
Build the page model for a game: status line, board cells, move list.
Everything here is derived from GameState on each render and never stored.
"""
BOARD_ROWS = 3
BOARD_COLS = 3


def status_text(state):
    """Winner takes precedence over draw, draw over next player."""
    winner, _ = state.verdict
    if winner:
        return f"Winner: {winner}"
    if state.is_draw:
        return "It's a draw!"
    return f"Next player: {state.next_player}"


def move_description(move):
    """
    Label for a history entry. Row and column come from the move number
    alone, not from comparing boards.
    """
    if move == 0:
        return "Go to game start"
    row = (move - 1) // BOARD_COLS
    col = (move - 1) % BOARD_COLS
    return f"Go to move #{move} (row: {row}, col: {col})"


def sort_label(is_ascending):
    return "Sort Descending" if is_ascending else "Sort Ascending"


def board_rows(state):
    squares = state.current_squares
    _, winning_squares = state.verdict
    rows = []
    for row in range(BOARD_ROWS):
        cells = []
        for col in range(BOARD_COLS):
            index = row * BOARD_COLS + col
            cells.append({
                "index": index,
                "value": squares[index],
                "is_winning": index in winning_squares,
            })
        rows.append(cells)
    return rows


def move_entries(state):
    entries = []
    for move in range(len(state.history)):
        is_current = move == state.current_move
        if is_current:
            label = f"You are at move #{move}"
        else:
            label = move_description(move)
        entries.append({"move": move, "label": label, "is_current": is_current})

    if not state.is_ascending:
        entries.reverse()
    return entries


def render(state):
    """Page model for the game template and the JSON API."""
    winner, winning_squares = state.verdict
    return {
        "status": status_text(state),
        "winner": winner,
        "winning_squares": winning_squares,
        "is_draw": state.is_draw,
        "next_player": state.next_player,
        "current_move": state.current_move,
        "rows": board_rows(state),
        "moves": move_entries(state),
        "is_ascending": state.is_ascending,
        "sort_label": sort_label(state.is_ascending),
    }
