"""
Move-string parsing utilities for catalogue records.
"""
import re
from typing import List, Optional, Sequence


MOVE_NUMBER_RE = re.compile(r'(\d+\.+)')
MOVE_NUMBER_TOKEN_RE = re.compile(r'^\d+\.+$')


def parse_moves_string(moves_str: Optional[str]) -> List[str]:
    """
    Parse an annotated move string into SAN tokens.

    "1.e4 e5 2.Nf3" and "1. e4  e5 2. Nf3" both give ["e4", "e5", "Nf3"].
    Move numbers glued to the next move are split off, but two moves glued
    together ("1.e4e5") are kept as one token.
    """
    if not moves_str:
        return []

    # Detach move numbers from the move that follows them
    normalized = MOVE_NUMBER_RE.sub(r'\1 ', moves_str)

    moves = []
    for token in normalized.split():
        token = token.strip()
        if token and not MOVE_NUMBER_TOKEN_RE.match(token):
            moves.append(token)
    return moves


def format_moves_as_notation(moves: Sequence[str], max_moves: Optional[int] = None) -> str:
    """Render SAN tokens as numbered notation, e.g. "1.e4 e5 2.Nf3"."""
    if not moves:
        return ""

    shown = list(moves[:max_moves]) if max_moves is not None else list(moves)
    pairs = []
    for i in range(0, len(shown), 2):
        move_number = i // 2 + 1
        if i + 1 < len(shown):
            pairs.append(f"{move_number}.{shown[i]} {shown[i + 1]}")
        else:
            pairs.append(f"{move_number}.{shown[i]}")
    return " ".join(pairs)
