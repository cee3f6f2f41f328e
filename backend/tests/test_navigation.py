import chess

from opening_explorer import navigate_history, navigate_opening, replay_moves

from .positions import E4_FEN, ITALIAN_FEN, START_FEN


def test_navigate_opening_to_end(catalogue):
    italian = catalogue.position_index[ITALIAN_FEN]
    result = navigate_opening(italian, len(italian.moves))
    assert result.complete
    assert result.applied == 6
    assert result.fen == ITALIAN_FEN
    assert result.last_move == "Bc5"


def test_navigate_opening_steps_back(catalogue):
    italian = catalogue.position_index[ITALIAN_FEN]
    result = navigate_opening(italian, 1)
    assert result.fen == E4_FEN
    assert result.last_move == "e4"


def test_target_index_is_clamped(catalogue):
    italian = catalogue.position_index[ITALIAN_FEN]
    assert navigate_opening(italian, 99).requested == 6

    result = navigate_opening(italian, -3)
    assert result.requested == 0
    assert result.fen == START_FEN
    assert result.last_move is None


def test_replay_stops_at_bad_move():
    result = replay_moves(["e4", "e5", "Ke3", "Nc6"], 4)
    assert not result.complete
    assert result.applied == 2
    assert result.requested == 4
    assert result.failed_move == "Ke3"
    assert result.board.fullmove_number == 2


def test_replay_stops_at_unparseable_token():
    result = replay_moves(["e4e5", "Nf3"], 2)
    assert result.applied == 0
    assert result.failed_move == "e4e5"
    assert result.board == chess.Board()


def test_navigate_history():
    result = navigate_history(["d4", "d5", "c4"], 2)
    assert result.applied == 2
    assert result.last_move == "d5"

    empty = navigate_history([], 3)
    assert empty.applied == 0
    assert empty.complete
    assert empty.fen == START_FEN
