"""
Match engine: finds the catalogue opening that best describes the
current game.
"""
from typing import Dict, Optional, Sequence

from .opening_data import Catalogue, Opening


def placement_field(position_key: str) -> str:
    """Piece-placement part of a FEN-like key (everything before the first space)."""
    return position_key.split(" ", 1)[0] if position_key else ""


def relaxed_position_match(position_key: str, position_index: Dict[str, Opening]) -> Optional[Opening]:
    """
    Match on piece placement only, ignoring side to move, castling rights,
    en passant square and clocks.

    Linear scan over the whole index, O(n) per call.
    """
    placement = placement_field(position_key)
    if not placement:
        return None

    for fen, opening in position_index.items():
        if placement_field(fen) == placement:
            return opening
    return None


def starts_with_history(opening: Opening, history: Sequence[str]) -> bool:
    """True if the opening's first len(history) moves equal the history."""
    if len(opening.moves) < len(history):
        return False
    return all(opening.moves[i] == move for i, move in enumerate(history))


def find_match(
    history: Sequence[str],
    position_key: str,
    is_pinned: bool,
    pinned_opening: Optional[Opening] = None,
    *,
    catalogue: Catalogue,
) -> Optional[Opening]:
    """
    Find the single best-matching opening for the current game.

    Args:
        history: SAN moves played so far
        position_key: FEN of the current position
        is_pinned: True while the user is stepping through a chosen opening
        pinned_opening: The chosen opening, returned as-is when pinned
        catalogue: Catalogue to match against

    Returns:
        Matching Opening, or None if nothing matches
    """
    # A pinned opening is never redirected by incidental matches
    if is_pinned:
        return pinned_opening

    if not history:
        return None

    match = catalogue.position_index.get(position_key)
    if match is not None:
        return match

    match = relaxed_position_match(position_key, catalogue.position_index)
    if match is not None:
        return match

    for opening in catalogue.openings:
        if starts_with_history(opening, history):
            return opening

    return None
