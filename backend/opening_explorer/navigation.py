"""
Step forwards and backwards through an opening line or the move history.
"""
import logging
from dataclasses import dataclass
from typing import Optional, Sequence

import chess

from .opening_data import Opening

logger = logging.getLogger(__name__)


@dataclass
class ReplayResult:
    """Board reached after replaying a prefix of a move list."""
    board: chess.Board
    applied: int  # Moves actually played
    requested: int  # Clamped target index
    failed_move: Optional[str] = None  # SAN that could not be applied

    @property
    def complete(self) -> bool:
        return self.failed_move is None and self.applied == self.requested

    @property
    def fen(self) -> str:
        return self.board.fen()

    @property
    def last_move(self) -> Optional[str]:
        """SAN of the last move played, or None at the start position."""
        if not self.board.move_stack:
            return None
        board = self.board.copy()
        move = board.pop()
        return board.san(move)


def replay_moves(moves: Sequence[str], target_index: int) -> ReplayResult:
    """
    Replay the first target_index SAN moves from the start position.

    The target is clamped to [0, len(moves)]. Replay stops at the first move
    that cannot be applied; the result says how far it got.
    """
    safe_index = max(0, min(target_index, len(moves)))
    board = chess.Board()
    applied = 0

    for move_san in moves[:safe_index]:
        try:
            board.push_san(move_san)
        except (chess.InvalidMoveError, chess.IllegalMoveError, chess.AmbiguousMoveError):
            logger.warning(f"Failed to apply move {applied}: {move_san}")
            return ReplayResult(board=board, applied=applied, requested=safe_index, failed_move=move_san)
        applied += 1

    return ReplayResult(board=board, applied=applied, requested=safe_index)


def navigate_opening(opening: Opening, target_index: int) -> ReplayResult:
    """Jump to a ply within an opening's move list."""
    return replay_moves(opening.moves, target_index)


def navigate_history(history: Sequence[str], target_index: int) -> ReplayResult:
    """Jump to a ply within the live move history."""
    return replay_moves(history, target_index)
