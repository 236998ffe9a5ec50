"""
Tic-Tac-Toe with move history.
Game state lives in the signed session cookie, one game per browser.
Every click is a form POST that applies one transition and redirects back.
"""

import logging

from flask import Blueprint, jsonify, redirect, render_template, session, url_for

from app.projects.tic_tac_toe.core.game import GameState
from app.projects.tic_tac_toe.core.view import render
from app.utils.logging import log_project_event, log_project_visit

logger = logging.getLogger(__name__)

SESSION_KEY = 'tic_tac_toe'

tic_tac_toe_bp = Blueprint('tic_tac_toe', __name__,
                          template_folder='templates')


def _load_game():
    """Game from the session, or a new one if missing or malformed."""
    data = session.get(SESSION_KEY)
    if data is None:
        return GameState()
    try:
        return GameState.from_dict(data)
    except ValueError as e:
        logger.warning(f"Discarding invalid game in session: {e}")
        return GameState()


def _save_game(game):
    session[SESSION_KEY] = game.to_dict()


@tic_tac_toe_bp.route('/')
def index():
    """Display the Tic-Tac-Toe board, status and move history"""
    log_project_visit('tic_tac_toe', 'Tic-Tac-Toe')
    game = _load_game()
    return render_template('tic_tac_toe.html', view=render(game))


@tic_tac_toe_bp.route('/play/<int:index>', methods=['POST'])
def play(index):
    """Place the next mark on a cell; occupied cells and finished boards are ignored"""
    game = _load_game()
    player = game.next_player
    if game.apply_move(index):
        _save_game(game)
        log_project_event('tic_tac_toe', 'Move',
                          f"{player} played cell {index} (move #{game.current_move})")
    else:
        logger.debug(f"Ignored move on cell {index} at move #{game.current_move}")
    return redirect(url_for('tic_tac_toe.index'))


@tic_tac_toe_bp.route('/jump/<int:move>', methods=['POST'])
def jump(move):
    """Show the board as it was after an earlier move"""
    game = _load_game()
    if game.jump_to(move):
        _save_game(game)
        log_project_event('tic_tac_toe', 'Jump', f"Jumped to move #{move}")
    else:
        logger.debug(f"Ignored jump to move #{move} ({len(game.history)} positions)")
    return redirect(url_for('tic_tac_toe.index'))


@tic_tac_toe_bp.route('/sort', methods=['POST'])
def toggle_sort():
    """Flip the order of the move list"""
    game = _load_game()
    game.toggle_sort_order()
    _save_game(game)
    order = 'ascending' if game.is_ascending else 'descending'
    log_project_event('tic_tac_toe', 'Sort', f"Move list sorted {order}")
    return redirect(url_for('tic_tac_toe.index'))


@tic_tac_toe_bp.route('/reset', methods=['POST'])
def reset():
    """Start a new game"""
    session.pop(SESSION_KEY, None)
    log_project_event('tic_tac_toe', 'Reset', "Started a new game")
    return redirect(url_for('tic_tac_toe.index'))


@tic_tac_toe_bp.route('/api/state')
def api_state():
    """Return the stored game and its rendered view as JSON."""
    game = _load_game()
    return jsonify({"state": game.to_dict(), "view": render(game)})
