"""弓将棋 (archer shogi): 8x8 board, reserves, archers and demise."""

from archer_shogi.game.board import EMPTY, Board, Piece, Square
from archer_shogi.game.demise import DemiseError, can_demise, crowned_kind, demise, heir_kind
from archer_shogi.game.drops import drop_destinations, is_drop_legal
from archer_shogi.game.hand import Reserve
from archer_shogi.game.mfen import FormatError, decode, encode
from archer_shogi.game.moves import (
    aiming_arrows,
    ambiguous_shots,
    destination_counts,
    destinations,
    movable,
)
from archer_shogi.game.notation import format_move, parse_move, parse_square, square_label
from archer_shogi.game.position import Position
from archer_shogi.game.types import FILES, RANKS, PieceKind, Side

__all__ = [
    "EMPTY",
    "FILES",
    "RANKS",
    "Board",
    "DemiseError",
    "FormatError",
    "Piece",
    "PieceKind",
    "Position",
    "Reserve",
    "Side",
    "Square",
    "aiming_arrows",
    "ambiguous_shots",
    "can_demise",
    "crowned_kind",
    "decode",
    "demise",
    "destination_counts",
    "destinations",
    "drop_destinations",
    "encode",
    "format_move",
    "heir_kind",
    "is_drop_legal",
    "movable",
    "parse_move",
    "parse_square",
    "square_label",
]
