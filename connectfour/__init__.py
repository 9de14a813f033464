"""
Connect Four Game Package

Two-player Connect Four on the standard 6x7 board.
"""

from .board import Board, Cell, InvalidColumnError
from .game import GameController, GameState, Outcome, Player, RejectReason, RoundResult, WinResult

__all__ = ['Board', 'Cell', 'InvalidColumnError', 'GameController', 'GameState',
           'Outcome', 'Player', 'RejectReason', 'RoundResult', 'WinResult']
__version__ = '1.0.0'
