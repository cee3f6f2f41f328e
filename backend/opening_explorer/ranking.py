"""
Ranking, suggestion and search over the opening catalogue.
"""
from typing import Dict, Iterable, List, Sequence

from .match_engine import starts_with_history
from .opening_data import Opening
from .popularity import PRIMARY_SOURCE

MAX_RANKED_RESULTS = 100
MAX_SUGGESTIONS = 8
MAX_SEARCH_RESULTS = 50


def continues_history(opening: Opening, history: Sequence[str]) -> bool:
    """True if the opening goes at least one move past the history."""
    return len(opening.moves) > len(history) and starts_with_history(opening, history)


def _rank_key(opening: Opening):
    return (
        -opening.popularity,
        0 if opening.src == PRIMARY_SOURCE else 1,
        0 if opening.is_eco_root else 1,
    )


def ranked_continuations(history: Sequence[str], openings: Sequence[Opening]) -> List[Opening]:
    """
    Openings that continue the history, most popular first.

    With an empty history every opening is a candidate. Ties on popularity
    put eco_tsv entries first, then ECO roots; remaining ties keep catalogue
    order.
    """
    if history:
        candidates = [o for o in openings if continues_history(o, history)]
    else:
        candidates = list(openings)

    # sorted() is stable, so exact ties keep catalogue order
    return sorted(candidates, key=_rank_key)[:MAX_RANKED_RESULTS]


def suggested_moves(history: Sequence[str], openings: Sequence[Opening]) -> List[str]:
    """
    Next moves seen in the catalogue, ordered by the average popularity of
    the openings that play them.
    """
    ply = len(history)
    totals: Dict[str, List[int]] = {}
    for opening in openings:
        if not continues_history(opening, history):
            continue
        stats = totals.setdefault(opening.moves[ply], [0, 0])
        stats[0] += opening.popularity
        stats[1] += 1

    averages = [(move, total / count) for move, (total, count) in totals.items()]
    averages.sort(key=lambda item: item[1], reverse=True)
    return [move for move, _ in averages[:MAX_SUGGESTIONS]]


def search_openings(query: str, openings: Sequence[Opening]) -> List[Opening]:
    """Case-insensitive substring search on name, ECO code, moves and aliases."""
    if not query or not query.strip():
        return []
    query = query.lower()

    results = []
    for opening in openings:
        if _matches_query(opening, query):
            results.append(opening)
            if len(results) >= MAX_SEARCH_RESULTS:
                break
    return results


def _matches_query(opening: Opening, query: str) -> bool:
    if query in opening.name.lower():
        return True
    if opening.eco and query in opening.eco.lower():
        return True
    if query in " ".join(opening.moves).lower():
        return True
    return any(query in alias.lower() for alias in opening.aliases.values())


def favourite_openings(identities: Iterable[str], openings: Sequence[Opening]) -> List[Opening]:
    """Openings whose identity is in the given set, in catalogue order."""
    wanted = set(identities)
    return [o for o in openings if o.identity in wanted]
