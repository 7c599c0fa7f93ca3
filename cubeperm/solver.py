from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Sequence

from cubeperm.moves import get_move_catalog
from cubeperm.notation import FACE_MOVES, move_face, opposite_face, split_move_modifier
from cubeperm.state import State

log = logging.getLogger(__name__)

MOVE_NAMES: tuple[str, ...] = (
    "U", "F", "R", "D", "B", "L",
    "U2", "F2", "R2", "D2", "B2", "L2",
    "U'", "F'", "R'", "D'", "B'", "L'",
)


@dataclass(frozen=True)
class SolverConfig:
    max_length: int = 7
    move_names: tuple[str, ...] = MOVE_NAMES

    def __post_init__(self) -> None:
        object.__setattr__(self, "move_names", tuple(self.move_names))
        if self.max_length < 0:
            raise ValueError("max_length must be >= 0")
        if not self.move_names:
            raise ValueError("move_names must be non-empty")
        for move in self.move_names:
            base, _ = split_move_modifier(move)
            # Only outer face turns keep the centers fixed, which is_solved0 relies on.
            if base not in FACE_MOVES:
                raise ValueError(f"Search moves must be outer face turns, got '{move}'")


def is_move_available(prev_move: str | None, move: str) -> bool:
    """Whether ``move`` may follow ``prev_move`` in a search sequence.

    - the same face is never turned twice in a row (R' R2 collapses to one turn)
    - opposite faces commute, so only the alphabetical order is kept (D U, not U D)
    """
    if prev_move is None:
        return True

    prev_face = move_face(prev_move)
    face = move_face(move)

    if prev_face == face:
        return False
    if opposite_face(prev_face) == face:
        return prev_face < face
    return True


def is_canonical_sequence(moves: Sequence[str]) -> bool:
    prev_move: str | None = None
    for move in moves:
        if not is_move_available(prev_move, move):
            return False
        prev_move = move
    return True


@lru_cache(maxsize=None)
def _successors(move_names: tuple[str, ...]) -> dict[str | None, tuple[str, ...]]:
    table: dict[str | None, tuple[str, ...]] = {}
    for prev_move in (None, *move_names):
        table[prev_move] = tuple(move for move in move_names if is_move_available(prev_move, move))
    return table


def depth_limited_search(
    state: State,
    solution: list[str],
    depth: int,
    catalog: Mapping[str, State],
    move_names: tuple[str, ...] = MOVE_NAMES,
) -> bool:
    if depth == 0:
        return state.is_solved0()

    prev_move = solution[-1] if solution else None
    for move_name in _successors(move_names)[prev_move]:
        solution.append(move_name)
        if depth_limited_search(state.apply(catalog[move_name]), solution, depth - 1, catalog, move_names):
            return True
        solution.pop()

    return False


def solve(
    state: State,
    max_length: int | None = None,
    catalog: Mapping[str, State] | None = None,
    config: SolverConfig | None = None,
) -> list[str] | None:
    """Iterative deepening over face turns.

    Returns the first sequence found (shortest length first), or ``None`` when
    no sequence shorter than ``max_length`` solves ``state``.
    """
    config = config or SolverConfig()
    if max_length is None:
        max_length = config.max_length
    if max_length < 0:
        raise ValueError("max_length must be >= 0")
    if catalog is None:
        catalog = get_move_catalog()

    if not state.preserves_centers():
        raise ValueError(
            "Search requires a state with fixed centers; "
            "undo whole-cube rotations and slice moves before solving"
        )

    missing = [move for move in config.move_names if move not in catalog]
    if missing:
        raise KeyError(f"Move catalog lacks search moves: {', '.join(missing)}")

    started = time.perf_counter()
    solution: list[str] = []
    for depth in range(max_length):
        log.info("Start searching length %d", depth)
        if depth_limited_search(state, solution, depth, catalog, config.move_names):
            log.info(
                "Found solution '%s' in %.3fs",
                " ".join(solution),
                time.perf_counter() - started,
            )
            return list(solution)

    log.info(
        "Solution not found shorter than %d moves (%.3fs)",
        max_length,
        time.perf_counter() - started,
    )
    return None


def verify_solution(
    state: State,
    moves: Sequence[str],
    catalog: Mapping[str, State] | None = None,
) -> bool:
    """True when ``moves`` solves ``state`` and could have come out of the search."""
    if catalog is None:
        catalog = get_move_catalog()
    if not is_canonical_sequence(moves):
        return False
    return state.apply_named_sequence(catalog, " ".join(moves)).is_solved0()
