"""
Chess Opening Explorer API
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI, Query, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from typing import Optional, List, Dict
import logging
import os

from opening_explorer import (
    Catalogue,
    CatalogueLoadError,
    find_match,
    format_moves_as_notation,
    known_continuations,
    load_catalogue,
    navigate_opening,
    ranked_continuations,
    search_openings,
    suggested_moves,
)
from opening_explorer.eco_client import EcoDataClient

logger = logging.getLogger(__name__)

ECO_DATA_DIR = os.getenv("ECO_DATA_DIR", os.path.join(os.path.dirname(__file__), "data", "eco"))
CORS_ORIGINS = os.getenv(
    "CORS_ORIGINS",
    "http://localhost:5173,http://localhost:5174,http://localhost:3000",
).split(",")


# ============================================
# Pydantic models for request/response
# ============================================

class OpeningResponse(BaseModel):
    id: str
    name: str
    eco: Optional[str] = None
    moves: List[str]
    popularity: int
    fen: str
    src: Optional[str] = None
    scid: Optional[str] = None
    isEcoRoot: bool = False
    aliases: Dict[str, str] = {}


class MatchResponse(BaseModel):
    opening: Optional[OpeningResponse] = None


class ContinuationsResponse(BaseModel):
    moves: List[str]
    openings: List[OpeningResponse]
    total: int


class MovesResponse(BaseModel):
    moves: List[str]
    next: List[str]


class SearchResponse(BaseModel):
    query: str
    openings: List[OpeningResponse]
    total: int


class NavigateResponse(BaseModel):
    opening: OpeningResponse
    index: int
    applied: int
    fen: str
    lastMove: Optional[str] = None
    failedMove: Optional[str] = None
    notation: str


class StatusResponse(BaseModel):
    loaded: bool
    totalOpenings: int
    indexSize: int
    firstMoves: int
    ecoRoots: int
    error: Optional[str] = None


# ============================================
# Catalogue loading
# ============================================

def load_catalogue_from_disk(data_dir: str) -> Catalogue:
    """Build the catalogue from the cached data files in data_dir."""
    client = EcoDataClient(cache_dir=data_dir)
    return load_catalogue(client.cached_files())


def refresh_catalogue(app: FastAPI) -> None:
    """Rebuild the catalogue and swap it in; keep an empty one on failure."""
    print(f"Loading opening data from {ECO_DATA_DIR}...")
    try:
        catalogue = load_catalogue_from_disk(ECO_DATA_DIR)
    except CatalogueLoadError as e:
        logger.error(f"Failed to load openings: {e}")
        app.state.catalogue = Catalogue.empty()
        app.state.load_error = str(e)
        return

    app.state.catalogue = catalogue
    app.state.load_error = None
    print(f"Loaded {len(catalogue)} chess openings")


@asynccontextmanager
async def lifespan(app: FastAPI):
    refresh_catalogue(app)
    yield


app = FastAPI(title="Chess Opening Explorer API", lifespan=lifespan)

# Enable CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================
# Helper functions
# ============================================

def get_catalogue(request: Request) -> Catalogue:
    return getattr(request.app.state, "catalogue", None) or Catalogue.empty()


def parse_history(moves: Optional[str]) -> List[str]:
    """Split a comma-separated SAN list ("e4,e5,Nf3") into moves."""
    if not moves:
        return []
    return [move.strip() for move in moves.split(",") if move.strip()]


def opening_response(opening) -> OpeningResponse:
    return OpeningResponse(**opening.to_dict())


# ============================================
# Opening endpoints
# ============================================

@app.get("/api/openings/match", response_model=MatchResponse)
async def match_opening(
    request: Request,
    moves: Optional[str] = Query(None, description="Comma-separated SAN move history"),
    fen: str = Query("", description="FEN of the current position"),
    pinned: Optional[str] = Query(None, description="Identity of the opening being studied"),
):
    """Find the opening that best matches the current game."""
    catalogue = get_catalogue(request)

    pinned_opening = catalogue.get(pinned) if pinned else None
    match = find_match(
        parse_history(moves),
        fen,
        is_pinned=pinned_opening is not None,
        pinned_opening=pinned_opening,
        catalogue=catalogue,
    )
    return MatchResponse(opening=opening_response(match) if match else None)


@app.get("/api/openings/continuations", response_model=ContinuationsResponse)
async def get_continuations(
    request: Request,
    moves: Optional[str] = Query(None, description="Comma-separated SAN move history"),
):
    """Popular openings continuing the current move history."""
    history = parse_history(moves)
    openings = ranked_continuations(history, get_catalogue(request).openings)
    return ContinuationsResponse(
        moves=history,
        openings=[opening_response(o) for o in openings],
        total=len(openings),
    )


@app.get("/api/openings/suggestions", response_model=MovesResponse)
async def get_suggestions(
    request: Request,
    moves: Optional[str] = Query(None, description="Comma-separated SAN move history"),
):
    """Suggested next moves, by average popularity."""
    history = parse_history(moves)
    return MovesResponse(moves=history, next=suggested_moves(history, get_catalogue(request).openings))


@app.get("/api/openings/known-moves", response_model=MovesResponse)
async def get_known_moves(
    request: Request,
    moves: Optional[str] = Query(None, description="Comma-separated SAN move history"),
):
    """All catalogue moves that follow the move history."""
    history = parse_history(moves)
    known = known_continuations(history, get_catalogue(request).continuation_index)
    return MovesResponse(moves=history, next=sorted(known))


@app.get("/api/openings/search", response_model=SearchResponse)
async def search(
    request: Request,
    q: str = Query("", description="Name, ECO code, moves or alias"),
):
    """Search openings by name, ECO code, moves or alias."""
    openings = search_openings(q, get_catalogue(request).openings)
    return SearchResponse(query=q, openings=[opening_response(o) for o in openings], total=len(openings))


@app.get("/api/openings/navigate", response_model=NavigateResponse)
async def navigate(
    request: Request,
    identity: str = Query(..., description="Opening identity (FEN, ECO code or name)"),
    index: int = Query(0, description="Ply to jump to"),
):
    """Step to a ply within an opening's move list."""
    opening = get_catalogue(request).get(identity)
    if opening is None:
        raise HTTPException(status_code=404, detail="Opening not found")

    result = navigate_opening(opening, index)
    return NavigateResponse(
        opening=opening_response(opening),
        index=result.requested,
        applied=result.applied,
        fen=result.fen,
        lastMove=result.last_move,
        failedMove=result.failed_move,
        notation=format_moves_as_notation(opening.moves, result.applied),
    )


@app.get("/api/openings/status", response_model=StatusResponse)
async def status(request: Request):
    """Catalogue load summary."""
    catalogue = get_catalogue(request)
    return StatusResponse(
        loaded=len(catalogue) > 0,
        totalOpenings=len(catalogue),
        indexSize=len(catalogue.continuation_index),
        firstMoves=len(catalogue.continuation_index.get("", ())),
        ecoRoots=sum(1 for o in catalogue.openings if o.is_eco_root),
        error=getattr(request.app.state, "load_error", None),
    )


@app.post("/api/openings/reload", response_model=StatusResponse)
async def reload(request: Request):
    """Rebuild the catalogue from the data directory."""
    refresh_catalogue(request.app)
    return await status(request)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok"}
