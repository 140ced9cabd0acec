from typing import List

from .board import Board, Player
from .placement import Move
from .tiles import EMPTY, FILLED, MASK_DIM, Mask, TileCatalog

EMPTY_SYMBOL = "."


def render_board(board: Board) -> str:
    lines = []
    for row in board.grid:
        lines.append("".join(EMPTY_SYMBOL if p is None else p.symbol for p in row))
    return "\n".join(lines) + "\n"


def _mask_row(mask: Mask, r: int) -> str:
    return "".join(FILLED if mask[r][c] else EMPTY for c in range(MASK_DIM))


def render_tiles(tiles: TileCatalog, only_active: bool = False) -> str:
    """Tiles with their four rotations side by side, one blank line between tiles.

    With ``only_active`` just the unrotated active tile is drawn.
    """
    if only_active:
        mask = tiles.rotations(tiles.active)[0]
        return "".join(_mask_row(mask, r) + "\n" for r in range(MASK_DIM))
    blocks: List[str] = []
    for rotations in tiles:
        lines = [" ".join(_mask_row(m, r) for m in rotations) for r in range(MASK_DIM)]
        blocks.append("\n".join(lines) + "\n")
    return "\n".join(blocks)


def render_auto_move(player: Player, move: Move) -> str:
    r, c, rot = move
    return f"Player {player.symbol} => {r} {c} rotated {int(rot)}"


def prompt(player: Player) -> str:
    return f"Player {player.symbol}] "


def win_message(player: Player) -> str:
    return f"Player {player.symbol} wins"
