from cubeperm.models import CENTER_COLORS, FACE_ORDER, Color, Face
from cubeperm.moves import build_move_catalog, get_move_catalog, list_move_names, lookup_move
from cubeperm.notation import invert_move, invert_moves, invert_sequence, tokenize
from cubeperm.solver import MOVE_NAMES, SolverConfig, is_move_available, solve, verify_solution
from cubeperm.state import SOLVED, InvalidPermutationError, State, UnknownMoveError

__all__ = [
    "CENTER_COLORS",
    "Color",
    "FACE_ORDER",
    "Face",
    "InvalidPermutationError",
    "MOVE_NAMES",
    "SOLVED",
    "SolverConfig",
    "State",
    "UnknownMoveError",
    "build_move_catalog",
    "get_move_catalog",
    "invert_move",
    "invert_moves",
    "invert_sequence",
    "is_move_available",
    "list_move_names",
    "lookup_move",
    "solve",
    "tokenize",
    "verify_solution",
]
