from opening_explorer.move_parser import format_moves_as_notation, parse_moves_string


def test_parses_normal_format():
    result = parse_moves_string("1.e4 e5 2.Bc4 Bc5 3.Nf3 d6 4.c3 Qe7 5.d4")
    assert result == ["e4", "e5", "Bc4", "Bc5", "Nf3", "d6", "c3", "Qe7", "d4"]


def test_handles_extra_spaces():
    assert parse_moves_string("1. e4  e5   2. Nf3 Nc6") == ["e4", "e5", "Nf3", "Nc6"]


def test_moves_without_numbers():
    assert parse_moves_string("e4 e5 Nf3 Nc6") == ["e4", "e5", "Nf3", "Nc6"]


def test_drops_standalone_move_numbers():
    assert parse_moves_string("1. e4 e5 2. Nf3") == ["e4", "e5", "Nf3"]


def test_glued_moves_stay_one_token():
    assert parse_moves_string("1.e4e5 2.Bc4Bc5 3.Nf3d6") == ["e4e5", "Bc4Bc5", "Nf3d6"]


def test_black_move_number_markers():
    assert parse_moves_string("1.e4 c5 2.Nf3 d6 3...cxd4") == ["e4", "c5", "Nf3", "d6", "cxd4"]
    assert parse_moves_string("12... Nf6") == ["Nf6"]


def test_empty_input():
    assert parse_moves_string("") == []
    assert parse_moves_string(None) == []
    assert parse_moves_string("   ") == []


def test_castling_and_checks_are_kept():
    assert parse_moves_string("1.e4 e5 2.Nf3 Nc6 3.Bb5 a6 4.O-O Bc5+") == [
        "e4", "e5", "Nf3", "Nc6", "Bb5", "a6", "O-O", "Bc5+",
    ]


def test_format_moves_as_notation():
    assert format_moves_as_notation(["e4", "e5", "Nf3"]) == "1.e4 e5 2.Nf3"
    assert format_moves_as_notation(["e4", "e5", "Nf3", "Nc6"], max_moves=2) == "1.e4 e5"
    assert format_moves_as_notation(["e4", "e5"], max_moves=0) == ""
    assert format_moves_as_notation([]) == ""


def test_formatted_notation_parses_back():
    moves = ["d4", "Nf6", "c4", "e6", "Nc3", "Bb4"]
    assert parse_moves_string(format_moves_as_notation(moves)) == moves
