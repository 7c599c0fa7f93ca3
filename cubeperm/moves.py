from __future__ import annotations

from functools import lru_cache
from types import MappingProxyType
from typing import Mapping

from cubeperm.notation import is_move_token
from cubeperm.state import SOLVED, State, UnknownMoveError

# Whole-cube x: U goes to B, F to U, R turns clockwise, D to F, B to D, L turns counterclockwise.
_X_PERMUTATION = (
    *range(44, 35, -1),
    *range(0, 9),
    20, 23, 26, 19, 22, 25, 18, 21, 24,
    *range(9, 18),
    *range(35, 26, -1),
    51, 48, 45, 52, 49, 46, 53, 50, 47,
)

# Whole-cube y: U turns clockwise, F goes to L, R to F, D turns counterclockwise, B to R, L to B.
_Y_PERMUTATION = (
    2, 5, 8, 1, 4, 7, 0, 3, 6,
    *range(45, 54),
    *range(9, 18),
    33, 30, 27, 34, 31, 28, 35, 32, 29,
    *range(18, 27),
    *range(36, 45),
)

_U_CYCLES = (
    (9, 45, 36, 18),
    (10, 46, 37, 19),
    (11, 47, 38, 20),
    (0, 2, 8, 6),
    (1, 5, 7, 3),
)

# Evaluated in order; each formula may only use moves defined above it.
_DERIVED_MOVES = (
    ("z", "y y y x y"),
    ("D", "x x U x x"),
    ("R", "z z z U z"),
    ("L", "z U z z z"),
    ("F", "x U x x x"),
    ("B", "x x x U x"),
    ("M", "x x x R L L L"),
    ("E", "y y y U D D D"),
    ("S", "z F F F B"),
    ("Uw", "U E E E"),
    ("Fw", "F S"),
    ("Rw", "R M M M"),
    ("Bw", "B S S S"),
    ("Lw", "L M"),
    ("Dw", "D E"),
)

BASE_MOVE_NAMES = (
    "x", "y", "z",
    "U", "F", "R", "D", "B", "L",
    "Uw", "Fw", "Rw", "Dw", "Bw", "Lw",
    "M", "E", "S",
)


def _derive_base_moves() -> dict[str, State]:
    base: dict[str, State] = {
        "x": State.from_permutation(_X_PERMUTATION),
        "y": State.from_permutation(_Y_PERMUTATION),
        "U": State.product_of_cycles(_U_CYCLES),
    }
    for name, formula in _DERIVED_MOVES:
        try:
            base[name] = SOLVED.apply_named_sequence(base, formula)
        except UnknownMoveError as exc:
            raise RuntimeError(
                f"Move '{name}' is derived from undefined move '{exc.token}'"
            ) from exc
    return base


def _wide_alias(name: str) -> str | None:
    if len(name) == 2 and name.endswith("w"):
        return name[0].lower()
    return None


def build_move_catalog() -> Mapping[str, State]:
    base = _derive_base_moves()
    registry: dict[str, State] = {}

    def register(key: str, move: State) -> None:
        if not is_move_token(key):
            raise ValueError(f"Move name does not match move notation: {key}")
        if key in registry:
            raise ValueError(f"Duplicate move key detected: {key}")
        registry[key] = move

    for name in BASE_MOVE_NAMES:
        move = base[name]
        double = move.apply(move)
        prime = move.invert()

        keys = [name]
        alias = _wide_alias(name)
        if alias is not None:
            keys.append(alias)

        for key in keys:
            register(key, move)
            register(f"{key}2", double)
            register(f"{key}'", prime)

    return MappingProxyType(registry)


@lru_cache(maxsize=1)
def get_move_catalog() -> Mapping[str, State]:
    return build_move_catalog()


def lookup_move(name: str) -> State | None:
    return get_move_catalog().get(name)


def list_move_names() -> list[str]:
    return list(get_move_catalog())
