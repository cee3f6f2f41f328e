"""
Catalogue builder: turns raw per-position opening records into a
read-only catalogue with a position index and a continuation index.
"""
import json
import logging
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional, Sequence, Set

from .move_parser import parse_moves_string
from .opening_data import (
    DEFAULT_OPENING_NAME,
    MOVE_SEPARATOR,
    Catalogue,
    CatalogueLoadError,
    Opening,
    RawRecord,
    RecordParseError,
)
from .popularity import calculate_popularity

logger = logging.getLogger(__name__)


def history_key(moves: Sequence[str]) -> str:
    """Key used in the continuation index for a move prefix ("" = start)."""
    return MOVE_SEPARATOR.join(moves)


def _optional_str(position_key: str, data: Mapping[str, Any], field_name: str) -> Optional[str]:
    value = data.get(field_name)
    if value is None:
        return None
    if not isinstance(value, str):
        raise RecordParseError(position_key, f"'{field_name}' must be a string")
    return value


def parse_raw_record(position_key: str, data: Any) -> RawRecord:
    """
    Validate one raw record and apply field defaults.

    Raises:
        RecordParseError: if the record is not a mapping or a field has
            the wrong type.
    """
    if not isinstance(data, Mapping):
        raise RecordParseError(position_key, "record must be an object")

    name = _optional_str(position_key, data, "name")
    moves = _optional_str(position_key, data, "moves")

    is_eco_root = data.get("isEcoRoot")
    if is_eco_root is None:
        is_eco_root = False
    if not isinstance(is_eco_root, bool):
        raise RecordParseError(position_key, "'isEcoRoot' must be a boolean")

    aliases = data.get("aliases") or {}
    if not isinstance(aliases, Mapping):
        raise RecordParseError(position_key, "'aliases' must be an object")

    return RawRecord(
        position_key=position_key,
        name=name.strip() if name and name.strip() else DEFAULT_OPENING_NAME,
        eco=_optional_str(position_key, data, "eco"),
        moves=moves or "",
        src=_optional_str(position_key, data, "src"),
        scid=_optional_str(position_key, data, "scid"),
        is_eco_root=is_eco_root,
        aliases={str(k): str(v) for k, v in aliases.items()},
    )


def merge_record_sets(record_sets: Iterable[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Merge raw record sets in order.

    Later sets win on key collision. Keys keep the position of their first
    appearance, the same way repeated dict updates behave.

    Raises:
        CatalogueLoadError: if a record set is not a mapping.
    """
    merged: Dict[str, Any] = {}
    for i, record_set in enumerate(record_sets):
        if not isinstance(record_set, Mapping):
            raise CatalogueLoadError(
                f"Record set {i} must be an object keyed by position, got {type(record_set).__name__}"
            )
        merged.update(record_set)
    return merged


def build_opening(record: RawRecord) -> Optional[Opening]:
    """Build an Opening from a validated record, or None if it has no moves."""
    moves = parse_moves_string(record.moves)
    if not moves:
        return None

    return Opening(
        name=record.name,
        moves=tuple(moves),
        popularity=calculate_popularity(record.src, record.is_eco_root),
        fen=record.position_key,
        eco=record.eco,
        src=record.src,
        scid=record.scid,
        is_eco_root=record.is_eco_root,
        aliases=record.aliases,
    )


def build_catalogue(record_sets: Iterable[Mapping[str, Any]]) -> Catalogue:
    """
    Build the catalogue from one or more raw record sets.

    Args:
        record_sets: Mappings of position key -> raw record, merged last-wins

    Returns:
        Catalogue with openings, position index and continuation index

    Raises:
        CatalogueLoadError: if a record set is not a mapping
    """
    merged = merge_record_sets(record_sets)

    openings: List[Opening] = []
    position_index: Dict[str, Opening] = {}
    continuations: Dict[str, Set[str]] = {}
    skipped = 0

    for position_key, data in merged.items():
        try:
            record = parse_raw_record(str(position_key), data)
        except RecordParseError as e:
            logger.debug(f"Skipping record: {e}")
            skipped += 1
            continue

        opening = build_opening(record)
        if opening is None:
            skipped += 1
            continue

        openings.append(opening)
        position_index[record.position_key] = opening

        for i in range(len(opening.moves) - 1):
            key = history_key(opening.moves[: i + 1])
            continuations.setdefault(key, set()).add(opening.moves[i + 1])

    continuations[""] = {opening.moves[0] for opening in openings}

    continuation_index: Dict[str, FrozenSet[str]] = {
        key: frozenset(moves) for key, moves in continuations.items()
    }

    logger.info(
        f"Built catalogue: {len(openings)} openings, {len(continuation_index)} prefixes, "
        f"{len(continuation_index[''])} first moves, {skipped} records skipped"
    )

    return Catalogue(
        openings=tuple(openings),
        position_index=position_index,
        continuation_index=continuation_index,
    )


def read_record_set(path: str) -> Dict[str, Any]:
    """
    Read one raw record set from a JSON file.

    Raises:
        CatalogueLoadError: if the file is unreadable, not JSON, or not an object
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise CatalogueLoadError(f"Failed to read {path}: {e}") from e

    if not isinstance(data, dict):
        raise CatalogueLoadError(f"{path} must contain a JSON object keyed by position")
    return data


def load_catalogue(paths: Sequence[str]) -> Catalogue:
    """Read JSON record sets in order and build the catalogue from them."""
    if not paths:
        raise CatalogueLoadError("No opening data files found")

    record_sets = []
    for path in paths:
        record_set = read_record_set(path)
        print(f"Read {len(record_set)} records from {path}")
        record_sets.append(record_set)

    return build_catalogue(record_sets)
