import chess

from opening_explorer import known_continuations, known_destinations, pieces_with_known_moves
from opening_explorer.continuations import known_legal_moves


def test_known_continuations(catalogue):
    index = catalogue.continuation_index
    assert known_continuations([], index) == {"e4", "d4"}
    assert known_continuations(["e4"], index) == {"e5", "c5"}
    assert known_continuations(["e4", "e5", "Nf3"], index) == {"Nc6"}
    assert known_continuations(["h4"], index) == frozenset()


def test_pieces_with_known_moves_at_start(catalogue):
    known = known_continuations([], catalogue.continuation_index)
    assert sorted(pieces_with_known_moves(chess.Board(), known)) == ["d2", "e2"]


def test_known_destinations(catalogue):
    board = chess.Board()
    for san in ["e4", "e5"]:
        board.push_san(san)
    known = known_continuations(["e4", "e5"], catalogue.continuation_index)

    assert pieces_with_known_moves(board, known) == ["g1"]
    assert known_destinations(board, "g1", known) == ["f3"]
    assert known_destinations(board, "b1", known) == []
    assert known_destinations(board, "zz", known) == []


def test_catalogue_moves_that_are_illegal_here_are_dropped():
    # "Nf3" is a known name but black is to move after 1.e4
    board = chess.Board()
    board.push_san("e4")
    assert known_legal_moves(board, frozenset({"Nf3", "c5", "Qxh7"})) == [chess.Move.from_uci("c7c5")]
    assert known_legal_moves(board, frozenset()) == []


def test_separator_in_history_token_matches_nothing(catalogue):
    index = catalogue.continuation_index
    assert known_continuations(["e4|e5"], index) == frozenset()
    assert known_continuations(["e4", "e5|Nf3"], index) == frozenset()
