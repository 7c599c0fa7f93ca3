from __future__ import annotations

from cubeperm.models import OPPOSITE_FACES

FACE_MOVES = frozenset("UFRDBL")
SLICE_MOVES = frozenset("MES")
ROTATIONS = frozenset("xyz")
WIDE_ALIASES = frozenset("ufrdbl")
MODIFIERS = ("", "2", "'")


def tokenize(text: str) -> list[str]:
    return text.split()


def split_move_modifier(move: str) -> tuple[str, str]:
    if move.endswith("2"):
        return move[:-1], "2"
    if move.endswith("'"):
        return move[:-1], "'"
    return move, ""


def is_move_token(token: str) -> bool:
    """Checks a token against the move grammar, regardless of the catalog."""
    base, _ = split_move_modifier(token)
    if len(base) == 1:
        return base in FACE_MOVES or base in SLICE_MOVES or base in ROTATIONS or base in WIDE_ALIASES
    if len(base) == 2:
        return base[0] in FACE_MOVES and base[1] == "w"
    return False


def move_face(move: str) -> str:
    """Face letter turned by a move token, e.g. ``"R'" -> "R"``."""
    if not move:
        raise ValueError("Move must be non-empty")
    return move[0]


def opposite_face(face: str) -> str:
    if face not in OPPOSITE_FACES:
        raise ValueError(f"Not an outer face: {face}")
    return OPPOSITE_FACES[face]


def invert_move(move: str) -> str:
    base, modifier = split_move_modifier(move)
    if not base:
        raise ValueError("Move must be non-empty")
    if modifier == "":
        return f"{base}'"
    if modifier == "'":
        return base
    return move


def invert_moves(moves: list[str]) -> list[str]:
    return [invert_move(move) for move in reversed(moves)]


def invert_sequence(text: str) -> str:
    return " ".join(invert_moves(tokenize(text)))
