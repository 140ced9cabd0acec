import logging
from typing import Iterator, Optional

from ..board import Board, Coord, Player
from ..placement import Move, is_legal
from ..tiles import OFFSET, ROTATIONS, TileCatalog

log = logging.getLogger(__name__)

TOP_LEFT: Coord = (-OFFSET, -OFFSET)


def bottom_right(board: Board) -> Coord:
    return board.height - 1 + OFFSET, board.width - 1 + OFFSET


def step_ascending(board: Board, anchor: Coord) -> Coord:
    r, c = anchor
    c += 1
    if c > board.width - 1 + OFFSET:
        c = -OFFSET
        r += 1
    if r > board.height - 1 + OFFSET:
        r, c = TOP_LEFT
    return r, c


def step_descending(board: Board, anchor: Coord) -> Coord:
    r, c = anchor
    c -= 1
    if c < -OFFSET:
        c = board.width - 1 + OFFSET
        r -= 1
    if r < -OFFSET:
        r, c = bottom_right(board)
    return r, c


def in_scan_range(board: Board, anchor: Coord) -> bool:
    r, c = anchor
    return (-OFFSET <= r <= board.height - 1 + OFFSET
            and -OFFSET <= c <= board.width - 1 + OFFSET)


def anchor_cycle(board: Board, start: Coord, descending: bool = False) -> Iterator[Coord]:
    """Every anchor of the scan range once, beginning at ``start``.

    The range is [-OFFSET, h-1+OFFSET] x [-OFFSET, w-1+OFFSET]: far enough
    out that a mask whose filled cells sit on its edge can still reach the
    border cells of the board. A start outside the range is stepped forward
    until it enters it; every anchor skipped that way has all of its mask
    cells off the board.
    """
    step = step_descending if descending else step_ascending
    total = (board.height + 2 * OFFSET) * (board.width + 2 * OFFSET)
    anchor = start
    while not in_scan_range(board, anchor):
        anchor = step(board, anchor)
    for _ in range(total):
        yield anchor
        anchor = step(board, anchor)


def scan(board: Board, start: Coord, *,
         descending: bool = False, rotation_major: bool = False) -> Iterator[Move]:
    """Candidate (row, col, rotation) triples in search order.

    rotation_major: all anchors at 0 degrees, then all at 90, and so on.
    Otherwise every rotation is tried at an anchor before stepping on.
    """
    if rotation_major:
        for rot in ROTATIONS:
            for r, c in anchor_cycle(board, start, descending):
                yield r, c, rot
    else:
        for r, c in anchor_cycle(board, start, descending):
            for rot in ROTATIONS:
                yield r, c, rot


def first_legal(board: Board, tiles: TileCatalog, start: Coord, *,
                descending: bool = False, rotation_major: bool = False) -> Optional[Move]:
    masks = {rot: tiles.active_mask(rot) for rot in ROTATIONS}
    for r, c, rot in scan(board, start, descending=descending, rotation_major=rotation_major):
        if is_legal(r, c, rot, board, masks[rot]):
            return r, c, rot
    log.debug("scan from %s exhausted on %dx%d board", start, board.height, board.width)
    return None


def has_legal_move(board: Board, tiles: TileCatalog, player: Player) -> bool:
    """Existence probe run before every turn.

    Always scans ascending, whichever seat ``player`` holds.
    """
    start = player.last_move if player.last_move is not None else TOP_LEFT
    return first_legal(board, tiles, start) is not None
