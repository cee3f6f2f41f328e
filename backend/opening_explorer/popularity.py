"""
Popularity scoring based on where an opening record came from.
"""
from typing import Optional


# Checked after the primary source and the ECO root flag
SOURCE_SCORES = (
    ("eco_js", 80),
    ("scid", 70),
    ("eco_wikip", 60),
    ("interpolated", 30),  # Gap-filling entries
)
PRIMARY_SCORE = 100
ECO_ROOT_SCORE = 95
DEFAULT_SCORE = 25

PRIMARY_SOURCE = "eco_tsv"  # Lichess data is most authoritative


def calculate_popularity(src: Optional[str], is_eco_root: bool = False) -> int:
    """Map a record's source and root flag to a popularity score."""
    if src == PRIMARY_SOURCE:
        return PRIMARY_SCORE
    if is_eco_root:
        return ECO_ROOT_SCORE
    for source, score in SOURCE_SCORES:
        if src == source:
            return score
    return DEFAULT_SCORE
