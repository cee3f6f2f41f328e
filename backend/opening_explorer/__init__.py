"""Chess opening catalogue: indexing, matching and ranking."""

from .catalogue import build_catalogue, history_key, load_catalogue, merge_record_sets, parse_raw_record
from .continuations import known_continuations, known_destinations, pieces_with_known_moves
from .match_engine import find_match, relaxed_position_match
from .move_parser import format_moves_as_notation, parse_moves_string
from .navigation import ReplayResult, navigate_history, navigate_opening, replay_moves
from .opening_data import Catalogue, CatalogueLoadError, Opening, RawRecord, RecordParseError
from .popularity import calculate_popularity
from .ranking import favourite_openings, ranked_continuations, search_openings, suggested_moves

__all__ = [
    'Catalogue',
    'CatalogueLoadError',
    'Opening',
    'RawRecord',
    'RecordParseError',
    'ReplayResult',
    'build_catalogue',
    'calculate_popularity',
    'favourite_openings',
    'find_match',
    'format_moves_as_notation',
    'history_key',
    'known_continuations',
    'known_destinations',
    'load_catalogue',
    'merge_record_sets',
    'navigate_history',
    'navigate_opening',
    'parse_moves_string',
    'parse_raw_record',
    'pieces_with_known_moves',
    'ranked_continuations',
    'relaxed_position_match',
    'replay_moves',
    'search_openings',
    'suggested_moves',
]
