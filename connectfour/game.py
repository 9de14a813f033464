"""
Connect Four Game Controller

Owns the board and the two players, alternates turns and decides when a game
is won or drawn. Callers drive the game one column at a time through
GameController.play_round and render whatever it returns.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .board import Board, Cell
from .rules import Line, find_winning_line, is_board_full

logger = logging.getLogger(__name__)

DEFAULT_PLAYER_ONE = "Player One"
DEFAULT_PLAYER_TWO = "Player Two"


class GameState(Enum):
    """Enumeration for game states."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAWN = "drawn"


class Outcome(Enum):
    """What a single call to play_round did."""
    CONTINUE = "continue"
    WIN = "win"
    DRAW = "draw"
    REJECTED = "rejected"


class RejectReason(Enum):
    COLUMN_FULL = "column_full"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Player:
    """A participant: display name and the token they drop."""
    name: str
    token: Cell


@dataclass(frozen=True)
class RoundResult:
    """Result of one round. `winner` is set for WIN, `reason` for REJECTED."""
    outcome: Outcome
    winner: Optional[str] = None
    reason: Optional[RejectReason] = None
    row: Optional[int] = None
    column: Optional[int] = None

    @property
    def is_game_over(self) -> bool:
        return self.outcome in (Outcome.WIN, Outcome.DRAW)

    @property
    def is_rejected(self) -> bool:
        return self.outcome is Outcome.REJECTED


@dataclass(frozen=True)
class WinResult:
    winner: Optional[str] = None
    is_game_over: bool = False
    line: Line = ()


class GameController:
    """
    Turn orchestration for a two-player Connect Four game.

    Player one (red) always moves first. The active player flips after every
    accepted move that does not end the game. Once a game is won or drawn no
    further moves are accepted.

    Attributes:
        board (Board): The game board
        players (Tuple[Player, Player]): Player one and player two
        state (GameState): Current state of the game
        move_count (int): Number of tokens placed so far
    """

    def __init__(self, player_one_name: str = DEFAULT_PLAYER_ONE,
                 player_two_name: str = DEFAULT_PLAYER_TWO):
        """
        Start a new game.

        Args:
            player_one_name (str): Display name of the red player. Blank names
                fall back to "Player One".
            player_two_name (str): Display name of the yellow player. Blank names
                fall back to "Player Two".
        """
        self.board = Board()
        self.players: Tuple[Player, Player] = (
            Player(_clean_name(player_one_name, DEFAULT_PLAYER_ONE), Cell.RED),
            Player(_clean_name(player_two_name, DEFAULT_PLAYER_TWO), Cell.YELLOW),
        )
        self._active = self.players[0]
        self._winner: Optional[Player] = None
        self._winning_line: Line = ()
        self.state = GameState.IN_PROGRESS
        self.move_count = 0
        logger.info("New game: %s (red) vs %s (yellow)",
                    self.players[0].name, self.players[1].name)

    def get_active_player(self) -> Player:
        return self._active

    def get_board(self) -> List[List[Cell]]:
        return self.board.get_board()

    def get_winner(self) -> Optional[Player]:
        return self._winner

    @property
    def winning_line(self) -> Line:
        return self._winning_line

    def is_game_over(self) -> bool:
        """
        Check if the game is over.

        Returns:
            bool: True if the game was won or drawn
        """
        return self.state is not GameState.IN_PROGRESS

    def valid_columns(self) -> List[int]:
        """
        Get the columns the active player may drop into.

        Returns:
            List[int]: Column indices (0-based), empty once the game is over
        """
        if self.is_game_over():
            return []
        return self.board.valid_columns()

    def play_round(self, column: int) -> RoundResult:
        """
        Play the active player's token into a column.

        Args:
            column (int): Column index (0-based)

        Returns:
            RoundResult: CONTINUE, WIN or DRAW for an accepted move; REJECTED
            when the column is full or the game is already over. A rejected
            move leaves the board and the active player unchanged.

        Raises:
            InvalidColumnError: If the column is not on the board
        """
        if self.is_game_over():
            logger.debug("Move into column %r after game over ignored", column)
            return RoundResult(Outcome.REJECTED, reason=RejectReason.GAME_OVER)

        player = self._active
        row = self.board.drop_token(column, player.token)
        if row is None:
            return RoundResult(Outcome.REJECTED, reason=RejectReason.COLUMN_FULL)

        column = int(column)
        self.move_count += 1
        self.board.print_board()

        win = self.check_winner()
        if win.is_game_over:
            self.state = GameState.WON
            self._winner = player
            self._winning_line = win.line
            logger.info("%s wins after %d moves", player.name, self.move_count)
            return RoundResult(Outcome.WIN, winner=player.name, row=row, column=column)

        if self.is_draw():
            self.state = GameState.DRAWN
            logger.info("Game drawn after %d moves", self.move_count)
            return RoundResult(Outcome.DRAW, row=row, column=column)

        self._switch_player_turn()
        return RoundResult(Outcome.CONTINUE, row=row, column=column)

    def check_winner(self) -> WinResult:
        """
        Look for four of the active player's tokens in a line.

        Only the player who just moved can have completed a line, so only
        their token is checked.

        Returns:
            WinResult: The winner's name and line, or an empty result
        """
        player = self._active
        line = find_winning_line(self.board.as_array(), player.token)
        if line is None:
            return WinResult()
        return WinResult(winner=player.name, is_game_over=True, line=line)

    def is_draw(self) -> bool:
        """True when every cell is occupied. Check for a winner first."""
        return is_board_full(self.board.as_array())

    def reset(self) -> None:
        """Reset the game to initial state, keeping the player names."""
        self.board.reset()
        self._active = self.players[0]
        self._winner = None
        self._winning_line = ()
        self.state = GameState.IN_PROGRESS
        self.move_count = 0
        logger.info("Game reset: %s to move", self._active.name)

    def _switch_player_turn(self) -> None:
        self._active = self.players[1] if self._active is self.players[0] else self.players[0]

    def __str__(self) -> str:
        result = [str(self.board)]
        if self.state is GameState.IN_PROGRESS:
            result.append(f"{self._active.name}'s turn")
        elif self.state is GameState.DRAWN:
            result.append("It's a draw!")
        else:
            result.append(f"{self._winner.name} wins!")
        return "\n".join(result)


def _clean_name(name: Optional[str], default: str) -> str:
    if name is None or not str(name).strip():
        return default
    return str(name).strip()
