import pytest

from opening_explorer import build_catalogue

from .positions import E4_E5_FEN, E4_FEN, ITALIAN_FEN, OPEN_SICILIAN_FEN, QUEENS_PAWN_FEN, SICILIAN_FEN


@pytest.fixture
def raw_records():
    return {
        E4_FEN: {"name": "King's Pawn Game", "eco": "B00", "moves": "1.e4", "src": "eco_js", "isEcoRoot": True},
        E4_E5_FEN: {"name": "King's Pawn Game: Open Game", "eco": "C20", "moves": "1.e4 e5", "src": "eco_tsv"},
        SICILIAN_FEN: {
            "name": "Sicilian Defense",
            "eco": "B20",
            "moves": "1.e4 c5",
            "src": "eco_tsv",
            "aliases": {"scid": "Sicilian", "eco_wikip": "Sicilian Defence"},
        },
        OPEN_SICILIAN_FEN: {"name": "Sicilian Defense: Open", "eco": "B27", "moves": "1.e4 c5 2.Nf3", "src": "scid"},
        ITALIAN_FEN: {
            "name": "Italian Game: Giuoco Piano",
            "eco": "C50",
            "moves": "1. e4 e5 2. Nf3 Nc6 3. Bc4 Bc5",
            "src": "eco_wikip",
        },
        QUEENS_PAWN_FEN: {"name": "Queen's Pawn Game", "eco": "A40", "moves": "1.d4", "src": "interpolated"},
        "no-moves-position": {"name": "Empty", "eco": "A00"},
    }


@pytest.fixture
def catalogue(raw_records):
    return build_catalogue([raw_records])
