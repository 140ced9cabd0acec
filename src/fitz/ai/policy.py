import logging
from typing import Optional

from ..board import Board, Coord, Player, PlayerKind
from ..errors import SearchExhausted
from ..placement import Move, commit
from ..tiles import OFFSET
from .scan import TOP_LEFT, first_legal

log = logging.getLogger(__name__)


def policy_a_start(game) -> Coord:
    return game.last_move if game.last_move is not None else TOP_LEFT


def second_player_start(board: Board) -> Coord:
    # Row seeded from the width and column from the height. The scan steps
    # it into range, so on boards that are not square it does not begin at
    # the bottom-right corner.
    return board.width + OFFSET, board.height + OFFSET


def policy_b_start(game, player: Player) -> Coord:
    if player.last_move is not None:
        return player.last_move
    return TOP_LEFT if player.first else second_player_start(game.board)


def find_policy_a(game) -> Optional[Move]:
    """Rotation-major ascending scan from the last move made by anyone."""
    return first_legal(game.board, game.tiles, policy_a_start(game), rotation_major=True)


def find_policy_b(game, player: Player) -> Optional[Move]:
    """Anchor-major scan from the player's own last move.

    The first player scans left-to-right, top-to-bottom; the second player
    scans the mirror image.
    """
    return first_legal(game.board, game.tiles, policy_b_start(game, player),
                       descending=not player.first)


def choose_move(game, player: Player) -> Optional[Move]:
    if player.kind == PlayerKind.POLICY_A:
        return find_policy_a(game)
    if player.kind == PlayerKind.POLICY_B:
        return find_policy_b(game, player)
    raise ValueError(f"{player!r} is not an automated player")


def play_automated(game, player: Player) -> Move:
    """Find and commit the automated player's move.

    The caller must have run the existence probe; an exhausted scan here
    would otherwise leave the turn unchanged forever.
    """
    mv = choose_move(game, player)
    if mv is None:
        raise SearchExhausted(f"{player!r} has no legal move; probe before playing")
    r, c, rot = mv
    commit(r, c, rot, game.board, game.tiles.active_mask(rot), player, game)
    log.debug("%s placed tile %d at (%d, %d) rotated %d",
              player.symbol, game.tiles.active, r, c, int(rot))
    return mv
