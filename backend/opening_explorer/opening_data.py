"""
Data models for the opening catalogue.
"""
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Optional, Tuple


DEFAULT_OPENING_NAME = "Unknown Opening"

# SAN tokens never contain this character, so joined prefixes are unambiguous
MOVE_SEPARATOR = "|"


class RecordParseError(ValueError):
    """Raised when a raw opening record has the wrong shape."""

    def __init__(self, position_key: str, reason: str):
        super().__init__(f"Invalid record for {position_key!r}: {reason}")
        self.position_key = position_key
        self.reason = reason


class CatalogueLoadError(Exception):
    """Raised when raw catalogue data cannot be read at all."""


@dataclass
class RawRecord:
    """A validated raw record, keyed by the position it describes."""
    position_key: str
    name: str = DEFAULT_OPENING_NAME
    eco: Optional[str] = None
    moves: str = ""
    src: Optional[str] = None  # eco_tsv, eco_js, scid, eco_wikip, interpolated
    scid: Optional[str] = None
    is_eco_root: bool = False
    aliases: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Opening:
    """A named opening line from the start position."""
    name: str
    moves: Tuple[str, ...]  # SAN tokens
    popularity: int
    fen: str  # Position after all moves are played
    eco: Optional[str] = None
    src: Optional[str] = None
    scid: Optional[str] = None
    is_eco_root: bool = False
    aliases: Dict[str, str] = field(default_factory=dict, hash=False)

    @property
    def identity(self) -> str:
        """Stable id used for favourites and deduplication."""
        return self.fen or self.eco or self.name

    def to_dict(self) -> Dict:
        return {
            "name": self.name,
            "eco": self.eco,
            "moves": list(self.moves),
            "popularity": self.popularity,
            "fen": self.fen,
            "src": self.src,
            "scid": self.scid,
            "isEcoRoot": self.is_eco_root,
            "aliases": dict(self.aliases),
            "id": self.identity,
        }


@dataclass(frozen=True)
class Catalogue:
    """Read-only opening catalogue and its lookup indexes."""
    openings: Tuple[Opening, ...] = ()
    position_index: Dict[str, Opening] = field(default_factory=dict, hash=False)
    continuation_index: Dict[str, FrozenSet[str]] = field(default_factory=dict, hash=False)

    @classmethod
    def empty(cls) -> "Catalogue":
        return cls()

    def __len__(self) -> int:
        return len(self.openings)

    def get(self, identity: str) -> Optional[Opening]:
        """Find an opening by its identity."""
        opening = self.position_index.get(identity)
        if opening is not None:
            return opening
        for candidate in self.openings:
            if candidate.identity == identity:
                return candidate
        return None
