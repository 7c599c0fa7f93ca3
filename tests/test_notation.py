from __future__ import annotations

import pytest

from cubeperm.notation import (
    invert_move,
    invert_moves,
    invert_sequence,
    is_move_token,
    move_face,
    opposite_face,
    split_move_modifier,
    tokenize,
)


def test_tokenize_splits_on_any_whitespace() -> None:
    assert tokenize("  R U'\tF2\nD ") == ["R", "U'", "F2", "D"]
    assert tokenize("") == []


def test_split_move_modifier() -> None:
    assert split_move_modifier("R") == ("R", "")
    assert split_move_modifier("Uw2") == ("Uw", "2")
    assert split_move_modifier("x'") == ("x", "'")


def test_move_grammar() -> None:
    for token in ("U", "F2", "R'", "M", "E2", "S'", "x", "y'", "z2", "Uw", "Lw'", "r", "d2"):
        assert is_move_token(token), token
    for token in ("Q", "R3", "uw", "Rww", "X", "", "2"):
        assert not is_move_token(token), token


def test_inverse_moves_are_built_in_reverse_order() -> None:
    assert invert_move("R") == "R'"
    assert invert_move("R'") == "R"
    assert invert_move("R2") == "R2"
    assert invert_moves(["R", "U2", "F'"]) == ["F", "U2", "R'"]
    assert invert_sequence("R U R' F2 D2 L") == "L' D2 F2 R U' R'"


def test_move_face_and_opposites() -> None:
    assert move_face("B'") == "B"
    assert [opposite_face(face) for face in "UDLRFB"] == list("DURLBF")

    with pytest.raises(ValueError):
        opposite_face("M")
    with pytest.raises(ValueError):
        invert_move("'")
