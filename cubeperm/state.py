from __future__ import annotations

import logging
from math import gcd
from typing import TYPE_CHECKING, Iterable, Mapping, Sequence

import numpy as np

from cubeperm.models import (
    CENTER_COLORS,
    CENTER_POSITIONS,
    FACE_SIZE,
    FACELET_COUNT,
    FACES,
    Color,
    Face,
)
from cubeperm.notation import tokenize

if TYPE_CHECKING:
    from numpy.typing import NDArray

log = logging.getLogger(__name__)

_PERMUTATION_DTYPE = np.uint8


class InvalidPermutationError(ValueError):
    def __init__(self, message: str, values: Sequence[int] | None = None) -> None:
        if values is not None:
            message = f"{message}: {list(values)}"
        super().__init__(message)
        self.values = None if values is None else tuple(values)


class UnknownMoveError(ValueError):
    def __init__(self, token: str, position: int) -> None:
        super().__init__(f"Unknown move token '{token}' at index {position}")
        self.token = token
        self.position = position


def _frozen(array: NDArray[np.uint8]) -> NDArray[np.uint8]:
    array.flags.writeable = False
    return array


class State:
    """Cube configuration (or move) as a permutation of the 54 facelet positions.

    ``p[i]`` is the position the sticker that started at ``i`` has moved to.
    States are immutable; every operation returns a new state.
    """

    __slots__ = ("_p",)

    def __init__(self, values: Iterable[int]) -> None:
        self._p = _frozen(_validated_array(values))

    @classmethod
    def _from_array(cls, array: NDArray[np.uint8]) -> State:
        # Trusted path: composition and inversion of valid states stay valid.
        state = object.__new__(cls)
        state._p = _frozen(array)
        return state

    @classmethod
    def identity(cls) -> State:
        return cls._from_array(np.arange(FACELET_COUNT, dtype=_PERMUTATION_DTYPE))

    @classmethod
    def from_permutation(cls, values: Iterable[int]) -> State:
        return cls(values)

    @classmethod
    def from_cycle(cls, positions: Sequence[int]) -> State:
        """Single cycle ``positions[0] -> positions[1] -> ... -> positions[0]``."""
        array = np.arange(FACELET_COUNT, dtype=_PERMUTATION_DTYPE)
        if not positions:
            return cls._from_array(array)

        for position in positions:
            _check_entry(position, "Cycle position", positions)
        if len(set(int(position) for position in positions)) != len(positions):
            raise InvalidPermutationError("Cycle positions must be distinct", positions)

        for index, position in enumerate(positions):
            array[position] = positions[(index + 1) % len(positions)]
        return cls._from_array(array)

    @classmethod
    def product_of_cycles(cls, cycles: Iterable[Sequence[int]], base: State | None = None) -> State:
        """Apply one cycle per entry of ``cycles``, left to right, starting from ``base``.

        ``base`` defaults to the identity.
        """
        state = cls.identity() if base is None else base
        for cycle in cycles:
            state = state.apply(cls.from_cycle(cycle))
        return state

    @property
    def p(self) -> NDArray[np.uint8]:
        return self._p

    def to_list(self) -> list[int]:
        return [int(value) for value in self._p]

    def copy(self) -> State:
        return State._from_array(self._p.copy())

    def apply(self, other: State) -> State:
        """Perform this permutation, then ``other``."""
        return State._from_array(other._p[self._p])

    def invert(self) -> State:
        inverse = np.empty(FACELET_COUNT, dtype=_PERMUTATION_DTYPE)
        inverse[self._p] = np.arange(FACELET_COUNT, dtype=_PERMUTATION_DTYPE)
        return State._from_array(inverse)

    def get_prime(self) -> State:
        return self.invert()

    def preserves_centers(self) -> bool:
        return all(int(self._p[center]) == center for center in CENTER_POSITIONS)

    def is_solved0(self) -> bool:
        """Strict identity check.

        Only meaningful when no applied move touched the centers (no x, y, z,
        M, E, S or wide turns). Use ``is_solved`` otherwise.
        """
        return self._p.tobytes() == _IDENTITY_BYTES

    def is_solved(self) -> bool:
        """Color-based check, valid after rotations, slice and wide moves."""
        inverse = self.invert()._p
        # Left is solved whenever the other five faces are.
        for face in FACES[:-1]:
            colors = _face_colors(inverse, face)
            if any(color != colors[0] for color in colors[1:]):
                return False
        return True

    def get_face_colors(self, face: Face | str) -> tuple[Color, ...]:
        return _face_colors(self.invert()._p, Face(face))

    def facelet_string(self) -> str:
        inverse = self.invert()._p
        return "".join(color.value for face in FACES for color in _face_colors(inverse, face))

    def get_cycles(self) -> list[list[int]]:
        visited = [False] * FACELET_COUNT
        cycles: list[list[int]] = []

        for start in range(FACELET_COUNT):
            if visited[start] or int(self._p[start]) == start:
                continue

            cycle: list[int] = []
            position = start
            while not visited[position]:
                visited[position] = True
                cycle.append(position)
                position = int(self._p[position])
            cycles.append(cycle)

        return cycles

    def get_period(self) -> int:
        """LCM of the cycle lengths; 0 for the identity."""
        period = 0
        for cycle in self.get_cycles():
            length = len(cycle)
            period = length if period == 0 else period * length // gcd(period, length)
        return period

    def apply_named_sequence(self, catalog: Mapping[str, State], text: str) -> State:
        """Apply whitespace-separated move names; fail on the first unknown token."""
        state = self
        for position, token in enumerate(tokenize(text)):
            move = catalog.get(token)
            if move is None:
                raise UnknownMoveError(token, position)
            state = state.apply(move)
        return state

    def apply_moves(self, catalog: Mapping[str, State], text: str) -> State:
        """Like ``apply_named_sequence`` but unknown tokens are logged and skipped."""
        state = self
        for token in tokenize(text):
            move = catalog.get(token)
            if move is None:
                log.warning("Skipping unknown move token '%s'", token)
                continue
            state = state.apply(move)
        return state

    def __mul__(self, other: object) -> State:
        if isinstance(other, State):
            return self.apply(other)
        if isinstance(other, str):
            from cubeperm.moves import get_move_catalog

            return self.apply_named_sequence(get_move_catalog(), other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, State):
            return NotImplemented
        return self._p.tobytes() == other._p.tobytes()

    def __hash__(self) -> int:
        return hash(self._p.tobytes())

    def __repr__(self) -> str:
        return f"State({self.to_list()})"

    def __str__(self) -> str:
        letters = self.facelet_string()
        rows: dict[Face, list[str]] = {}
        for face in FACES:
            block = letters[face.offset : face.offset + FACE_SIZE]
            rows[face] = [block[row * 3 : row * 3 + 3] for row in range(3)]

        pad = " " * 4
        lines = [pad + row for row in rows[Face.UP]]
        lines.extend(
            " ".join(rows[face][row] for face in (Face.LEFT, Face.FRONT, Face.RIGHT, Face.BACK))
            for row in range(3)
        )
        lines.extend(pad + row for row in rows[Face.DOWN])
        return "\n".join(lines)


def _face_colors(inverse: NDArray[np.uint8], face: Face) -> tuple[Color, ...]:
    return tuple(
        CENTER_COLORS[int(inverse[position]) // FACE_SIZE]
        for position in face.positions
    )


def _check_entry(value: object, label: str, values: Sequence[int]) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidPermutationError(f"{label} must be an integer, got {value!r}")
    if not 0 <= value < FACELET_COUNT:
        raise InvalidPermutationError(f"{label} {value} is outside [0, {FACELET_COUNT})", values)


def _validated_array(values: Iterable[int]) -> NDArray[np.uint8]:
    raw = list(values)
    if len(raw) != FACELET_COUNT:
        raise InvalidPermutationError(
            f"Permutation must contain exactly {FACELET_COUNT} entries, got {len(raw)}"
        )
    for value in raw:
        _check_entry(value, "Permutation entry", raw)
    if len(set(int(value) for value in raw)) != FACELET_COUNT:
        raise InvalidPermutationError("Permutation entries must be distinct", raw)
    return np.array(raw, dtype=_PERMUTATION_DTYPE)


_IDENTITY_BYTES = np.arange(FACELET_COUNT, dtype=_PERMUTATION_DTYPE).tobytes()

SOLVED = State.identity()
