import logging
from typing import Optional, Tuple

from .ai.policy import play_automated
from .ai.scan import has_legal_move
from .board import MAX_DIM, MIN_DIM, Board, Coord, Player, PlayerKind
from .errors import DimensionError
from .placement import Move, commit, is_legal
from .tiles import Rotation, TileCatalog

log = logging.getLogger(__name__)

P1_SYMBOL = "*"
P2_SYMBOL = "#"


class Game:
    def __init__(self, p1_kind: PlayerKind = PlayerKind.HUMAN,
                 p2_kind: PlayerKind = PlayerKind.HUMAN) -> None:
        self.players: Tuple[Player, Player] = (
            Player(P1_SYMBOL, p1_kind, first=True),
            Player(P2_SYMBOL, p2_kind, first=False),
        )
        self.board = Board()
        self.tiles = TileCatalog()
        self.turn = 0
        self.last_move: Optional[Coord] = None
        self._winner: Optional[Player] = None

    def current_player(self) -> Player:
        return self.players[self.turn]

    def opponent(self, player: Player) -> Player:
        return self.players[1] if player is self.players[0] else self.players[0]

    def start(self, height: int, width: int) -> None:
        if not (MIN_DIM <= height <= MAX_DIM and MIN_DIM <= width <= MAX_DIM):
            raise DimensionError(f"{height}x{width} outside {MIN_DIM}..{MAX_DIM}")
        self.board.resize(height, width)

    def can_move(self, player: Optional[Player] = None) -> bool:
        if player is None:
            player = self.current_player()
        return has_legal_move(self.board, self.tiles, player)

    def check_end(self) -> Optional[Player]:
        """Probe the player to move; if they are stuck their opponent wins."""
        if self._winner is None and not self.can_move():
            self._winner = self.opponent(self.current_player())
            log.debug("player %s wins", self._winner.symbol)
        return self._winner

    def _end_turn(self) -> None:
        self.tiles.advance()
        self.turn = (self.turn + 1) % 2

    def play(self, r: int, c: int, rotation: int) -> None:
        if self.terminal():
            raise RuntimeError("Game over")
        rot = Rotation.parse(rotation)
        mask = self.tiles.active_mask(rot)
        if not is_legal(r, c, rot, self.board, mask):
            raise ValueError("Illegal move")
        commit(r, c, rot, self.board, mask, self.current_player(), self)
        self._end_turn()

    def play_auto(self) -> Move:
        if self.terminal():
            raise RuntimeError("Game over")
        mv = play_automated(self, self.current_player())
        self._end_turn()
        return mv

    def terminal(self) -> bool:
        return self._winner is not None

    def winner(self) -> Optional[Player]:
        return self._winner
