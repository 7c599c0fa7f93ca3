from __future__ import annotations

import pytest

from cubeperm.moves import BASE_MOVE_NAMES, build_move_catalog, get_move_catalog, list_move_names, lookup_move
from cubeperm.notation import is_move_token
from cubeperm.state import SOLVED


def test_face_turn_cycles() -> None:
    moves = get_move_catalog()

    assert moves["U"].get_cycles() == [
        [0, 2, 8, 6], [1, 5, 7, 3], [9, 45, 36, 18], [10, 46, 37, 19], [11, 47, 38, 20],
    ]
    assert moves["F"].get_cycles() == [
        [6, 18, 29, 53], [7, 21, 28, 50], [8, 24, 27, 47], [9, 11, 17, 15], [10, 14, 16, 12],
    ]
    assert moves["R"].get_cycles() == [
        [2, 42, 29, 11], [5, 39, 32, 14], [8, 36, 35, 17], [18, 20, 26, 24], [19, 23, 25, 21],
    ]
    assert moves["D"].get_cycles() == [
        [15, 24, 42, 51], [16, 25, 43, 52], [17, 26, 44, 53], [27, 29, 35, 33], [28, 32, 34, 30],
    ]
    assert moves["B"].get_cycles() == [
        [0, 51, 35, 20], [1, 48, 34, 23], [2, 45, 33, 26], [36, 38, 44, 42], [37, 41, 43, 39],
    ]
    assert moves["L"].get_cycles() == [
        [0, 9, 27, 44], [3, 12, 30, 41], [6, 15, 33, 38], [45, 47, 53, 51], [46, 50, 52, 48],
    ]


def test_catalog_contains_every_variant_and_wide_alias() -> None:
    names = list_move_names()
    assert len(names) == len(BASE_MOVE_NAMES) * 3 + 6 * 3
    assert len(set(names)) == len(names)
    assert all(is_move_token(name) for name in names)
    for alias in "ufrdbl":
        assert f"{alias}2" in names
        assert f"{alias}'" in names


def test_double_and_prime_are_derived_from_base() -> None:
    moves = get_move_catalog()
    for name in BASE_MOVE_NAMES:
        move = moves[name]
        assert moves[f"{name}2"] == move.apply(move)
        assert moves[f"{name}'"] == move.invert()
        assert move.get_period() == 4


def test_wide_alias_matches_wide_move() -> None:
    moves = get_move_catalog()
    assert moves["r"] == moves["Rw"]
    assert moves["u'"] == moves["Uw'"]
    assert moves["Rw"] == SOLVED * "R M'"
    assert moves["Lw"] == SOLVED * "L M"


def test_face_turns_fix_centers_and_slices_do_not() -> None:
    moves = get_move_catalog()
    for name in "UFRDBL":
        assert moves[name].preserves_centers()
    for name in ("M", "E", "S", "x", "y", "z", "Uw"):
        assert not moves[name].preserves_centers()


def test_opposite_faces_commute_and_rotation_relations_hold() -> None:
    moves = get_move_catalog()
    for a, b in (("U", "D"), ("L", "R"), ("F", "B")):
        assert moves[a].apply(moves[b]) == moves[b].apply(moves[a])

    # A whole-cube rotation is both outer layers plus the slice between them.
    assert SOLVED * "x" == SOLVED * "R M' L'"
    assert SOLVED * "y" == SOLVED * "U E' D'"
    assert SOLVED * "z" == SOLVED * "F S B'"


def test_lookup_move_returns_none_for_unknown_name() -> None:
    assert lookup_move("R") == get_move_catalog()["R"]
    assert lookup_move("R3") is None
    assert lookup_move("") is None


def test_catalog_is_read_only_and_memoized() -> None:
    catalog = get_move_catalog()
    assert get_move_catalog() is catalog
    with pytest.raises(TypeError):
        catalog["Q"] = SOLVED  # type: ignore[index]


def test_rebuilt_catalog_is_identical() -> None:
    rebuilt = build_move_catalog()
    catalog = get_move_catalog()
    assert list(rebuilt) == list(catalog)
    assert all(rebuilt[name] == catalog[name] for name in catalog)
