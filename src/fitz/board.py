from enum import Enum
from typing import List, Optional, Tuple

from .errors import PlayerTypeError

Coord = Tuple[int, int]

MIN_DIM = 1
MAX_DIM = 999


class PlayerKind(Enum):
    HUMAN = "h"
    POLICY_A = "1"
    POLICY_B = "2"

    @classmethod
    def parse(cls, token: str) -> "PlayerKind":
        try:
            return cls(token)
        except ValueError:
            raise PlayerTypeError(f"unknown player type {token!r}") from None


class Player:
    """A seat at the table.

    ``first`` is fixed at creation and only steers the Policy B scan
    direction. ``last_move`` is the anchor of this player's latest placement,
    or None before their first one.
    """

    def __init__(self, symbol: str, kind: PlayerKind, first: bool) -> None:
        self.symbol = symbol
        self.kind = kind
        self.first = first
        self.last_move: Optional[Coord] = None

    def __repr__(self) -> str:
        return f"Player({self.symbol!r}, {self.kind.name})"


class Board:
    def __init__(self) -> None:
        self.height = 1
        self.width = 1
        self.grid: List[List[Optional[Player]]] = [[None]]

    def resize(self, height: int, width: int) -> None:
        self.height = height
        self.width = width
        self.grid = [[None for _ in range(width)] for _ in range(height)]

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.height and 0 <= c < self.width

    def owner_at(self, r: int, c: int) -> Optional[Player]:
        return self.grid[r][c]

    def place(self, r: int, c: int, player: Player) -> None:
        self.grid[r][c] = player

    def occupied_count(self, player: Optional[Player] = None) -> int:
        n = 0
        for row in self.grid:
            for cell in row:
                if cell is not None and (player is None or cell is player):
                    n += 1
        return n
