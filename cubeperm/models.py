from __future__ import annotations

from enum import Enum

FACELET_COUNT = 54
FACE_SIZE = 9


class Face(str, Enum):
    UP = "U"
    FRONT = "F"
    RIGHT = "R"
    DOWN = "D"
    BACK = "B"
    LEFT = "L"

    @property
    def ordinal(self) -> int:
        return FACE_ORDER.index(self.value)

    @property
    def offset(self) -> int:
        return self.ordinal * FACE_SIZE

    @property
    def positions(self) -> range:
        return range(self.offset, self.offset + FACE_SIZE)

    @property
    def center(self) -> int:
        return self.offset + FACE_SIZE // 2


class Color(str, Enum):
    WHITE = "W"
    GREEN = "G"
    RED = "R"
    YELLOW = "Y"
    BLUE = "B"
    ORANGE = "O"


# Facelet blocks are laid out in this order: U 0..8, F 9..17, R 18..26, D 27..35, B 36..44, L 45..53.
FACE_ORDER = "UFRDBL"

FACES: tuple[Face, ...] = tuple(Face(face) for face in FACE_ORDER)

# White up, green front.
CENTER_COLORS: tuple[Color, ...] = (
    Color.WHITE,
    Color.GREEN,
    Color.RED,
    Color.YELLOW,
    Color.BLUE,
    Color.ORANGE,
)

CENTER_POSITIONS: tuple[int, ...] = tuple(face.center for face in FACES)

OPPOSITE_FACES = {
    "U": "D",
    "D": "U",
    "L": "R",
    "R": "L",
    "F": "B",
    "B": "F",
}
