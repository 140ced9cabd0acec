from typing import Iterator, Tuple

from .board import Board, Coord, Player
from .tiles import MASK_DIM, OFFSET, Mask, Rotation

Move = Tuple[int, int, Rotation]


def footprint(row: int, col: int, mask: Mask) -> Iterator[Coord]:
    """Board coordinates covered by the filled cells of ``mask`` anchored at (row, col)."""
    for dr in range(MASK_DIM):
        for dc in range(MASK_DIM):
            if mask[dr][dc]:
                yield row + dr - OFFSET, col + dc - OFFSET


def is_legal(row: int, col: int, rotation: Rotation, board: Board, mask: Mask) -> bool:
    # Unfilled mask cells are never checked, so the anchor itself may lie
    # off the board.
    for r, c in footprint(row, col, mask):
        if not board.in_bounds(r, c) or board.owner_at(r, c) is not None:
            return False
    return True


def commit(row: int, col: int, rotation: Rotation, board: Board, mask: Mask,
           player: Player, game) -> None:
    for r, c in footprint(row, col, mask):
        board.place(r, c, player)
    player.last_move = (row, col)
    game.last_move = (row, col)
