"""
Connect Four Web Interface

A Flask web application for two players sharing one browser.
"""

import logging
import os
import secrets
from typing import Any, Dict, Optional, Tuple

from flask import Blueprint, Flask, jsonify, render_template, request, session

from connectfour import Cell, GameController, InvalidColumnError, RejectReason, RoundResult
from connectfour.board import COLUMNS

logger = logging.getLogger(__name__)

bp = Blueprint('game', __name__)

TOKEN_COLORS = {Cell.RED: 'red', Cell.YELLOW: 'yellow'}

REJECT_MESSAGES = {
    RejectReason.COLUMN_FULL: 'Column is full, choose another one',
    RejectReason.GAME_OVER: 'Game is over, start a new game',
}

# Global storage for game instances, keyed by the id kept in the session cookie
games: Dict[str, GameController] = {}


def get_game() -> GameController:
    """Get or create a game instance from the session."""
    game_id = session.get('game_id')
    if game_id not in games:
        return start_game()
    return games[game_id]


def start_game(player_one: Optional[str] = None, player_two: Optional[str] = None) -> GameController:
    """Create a new game and attach it to the session, replacing any previous one."""
    old_id = session.get('game_id')
    if old_id is not None:
        games.pop(old_id, None)

    game = GameController(player_one, player_two)
    game_id = secrets.token_hex(8)
    games[game_id] = game
    session['game_id'] = game_id
    logger.info("Started game %s", game_id)
    return game


def serialize_player(player) -> Dict[str, Any]:
    return {'name': player.name, 'token': TOKEN_COLORS[player.token]}


def serialize_game_state(game: GameController) -> Dict[str, Any]:
    """Convert game state to JSON-serializable format."""
    winner = game.get_winner()
    return {
        'board': [[int(cell) for cell in row] for row in game.get_board()],
        'rows': game.board.rows,
        'columns': game.board.columns,
        'players': [serialize_player(p) for p in game.players],
        'active_player': serialize_player(game.get_active_player()),
        'game_state': game.state.value,
        'winner': winner.name if winner else None,
        'winning_line': [list(cell) for cell in game.winning_line],
        'valid_columns': game.valid_columns(),
        'is_game_over': game.is_game_over(),
        'move_count': game.move_count,
    }


def serialize_result(result: RoundResult) -> Dict[str, Any]:
    return {
        'outcome': result.outcome.value,
        'winner': result.winner,
        'reason': result.reason.value if result.reason else None,
        'row': result.row,
        'column': result.column,
    }


def parse_column(data: Any) -> Tuple[Optional[int], Optional[str]]:
    """Pull the column out of a move request body."""
    if not isinstance(data, dict) or 'column' not in data:
        return None, 'Column not specified'
    column = data['column']
    if isinstance(column, bool) or not isinstance(column, int):
        return None, 'Column must be an integer'
    return column, None


@bp.route('/')
def index():
    """Main game page."""
    return render_template('index.html', columns=COLUMNS)


@bp.route('/api/game/state')
def get_game_state():
    """Get current game state."""
    return jsonify(serialize_game_state(get_game()))


@bp.route('/api/game/new', methods=['POST'])
def new_game():
    """Start a new game with the names from the intro form."""
    data = request.get_json(silent=True) or {}
    game = start_game(data.get('player_one'), data.get('player_two'))
    return jsonify(serialize_game_state(game))


@bp.route('/api/game/move', methods=['POST'])
def make_move():
    """Play one round for the active player."""
    column, error = parse_column(request.get_json(silent=True))
    if error:
        return jsonify({'error': error}), 400

    game = get_game()
    try:
        result = game.play_round(column)
    except InvalidColumnError as e:
        return jsonify({'error': str(e)}), 400

    response = serialize_game_state(game)
    response['result'] = serialize_result(result)
    if result.is_rejected:
        response['error'] = REJECT_MESSAGES[result.reason]
        return jsonify(response), 409
    return jsonify(response)


@bp.route('/api/game/reset', methods=['POST'])
def reset_game():
    """Restart the current game with the same players."""
    game = get_game()
    game.reset()
    return jsonify(serialize_game_state(game))


def create_app(config: Optional[Dict[str, Any]] = None) -> Flask:
    """
    Build the Flask application.

    Settings come from the defaults below, then from CONNECTFOUR_* environment
    variables, then from `config`.

    Args:
        config: Extra settings applied last (tests pass TESTING here)

    Returns:
        Flask: The configured application
    """
    app = Flask(__name__)
    app.config.from_mapping(SECRET_KEY='connect4_secret_key_change_in_production')
    app.config.from_prefixed_env('CONNECTFOUR')
    if config:
        app.config.from_mapping(config)

    app.register_blueprint(bp)
    return app


app = create_app()

if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    app.run(debug=True,
            host=os.environ.get('CONNECTFOUR_HOST', '127.0.0.1'),
            port=int(os.environ.get('CONNECTFOUR_PORT', '5000')))
