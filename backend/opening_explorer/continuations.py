"""
Continuation lookup for click-to-move: which moves does the catalogue
know from the current move history.
"""
from typing import Dict, FrozenSet, List, Sequence

import chess

from .catalogue import history_key
from .opening_data import MOVE_SEPARATOR


def known_continuations(history: Sequence[str], continuation_index: Dict[str, FrozenSet[str]]) -> FrozenSet[str]:
    """Catalogue moves that follow the history; empty if none are known."""
    if any(MOVE_SEPARATOR in move for move in history):
        return frozenset()
    return continuation_index.get(history_key(history), frozenset())


def known_legal_moves(board: chess.Board, known: FrozenSet[str]) -> List[chess.Move]:
    """
    Legal moves on the board whose SAN is a known continuation.

    Catalogue data is not guaranteed to be legal from an arbitrary position,
    so this intersects it with the rules engine's legal moves.
    """
    if not known:
        return []
    return [move for move in board.legal_moves if board.san(move) in known]


def pieces_with_known_moves(board: chess.Board, known: FrozenSet[str]) -> List[str]:
    """Squares (e.g. "g1") of pieces that have at least one known move."""
    squares: List[str] = []
    for move in known_legal_moves(board, known):
        name = chess.square_name(move.from_square)
        if name not in squares:
            squares.append(name)
    return squares


def known_destinations(board: chess.Board, square: str, known: FrozenSet[str]) -> List[str]:
    """Destination squares of known moves for the piece on `square`."""
    try:
        from_square = chess.parse_square(square)
    except ValueError:
        return []

    return [
        chess.square_name(move.to_square)
        for move in known_legal_moves(board, known)
        if move.from_square == from_square
    ]
