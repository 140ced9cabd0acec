from enum import IntEnum
from typing import Iterator, List, Tuple

from .errors import TileFileError, TileFileNotFound

MASK_DIM = 5
OFFSET = MASK_DIM // 2

FILLED = "!"
EMPTY = ","

Mask = Tuple[Tuple[bool, ...], ...]


class Rotation(IntEnum):
    R0 = 0
    R90 = 90
    R180 = 180
    R270 = 270

    @property
    def index(self) -> int:
        return self.value // 90

    @classmethod
    def parse(cls, degrees: int) -> "Rotation":
        try:
            return cls(degrees)
        except ValueError:
            raise ValueError(f"invalid rotation {degrees}") from None


ROTATIONS = (Rotation.R0, Rotation.R90, Rotation.R180, Rotation.R270)


def rotate_mask(mask: Mask) -> Mask:
    """Rotate a mask a quarter turn clockwise: (r, c) -> (c, D-1-r)."""
    out = [[False] * MASK_DIM for _ in range(MASK_DIM)]
    for r in range(MASK_DIM):
        for c in range(MASK_DIM):
            out[c][MASK_DIM - 1 - r] = mask[r][c]
    return tuple(tuple(row) for row in out)


def as_mask(rows) -> Mask:
    mask = tuple(tuple(bool(v) for v in row) for row in rows)
    if len(mask) != MASK_DIM or any(len(row) != MASK_DIM for row in mask):
        raise ValueError("mask must be 5x5")
    return mask


class TileCatalog:
    """Ordered tiles, each with its four rotation masks, and the active index."""

    def __init__(self) -> None:
        self._tiles: List[Tuple[Mask, Mask, Mask, Mask]] = []
        self._active = 0

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[Tuple[Mask, Mask, Mask, Mask]]:
        return iter(self._tiles)

    @property
    def active(self) -> int:
        return self._active

    @active.setter
    def active(self, index: int) -> None:
        if not 0 <= index < len(self._tiles):
            raise IndexError(f"tile index {index} out of range")
        self._active = index

    def append_tile(self, mask: Mask) -> None:
        masks = [mask]
        for _ in range(3):
            masks.append(rotate_mask(masks[-1]))
        self._tiles.append((masks[0], masks[1], masks[2], masks[3]))

    def rotations(self, index: int) -> Tuple[Mask, Mask, Mask, Mask]:
        return self._tiles[index]

    def active_mask(self, rotation: Rotation) -> Mask:
        return self._tiles[self._active][Rotation(rotation).index]

    def advance(self) -> None:
        self._active = (self._active + 1) % len(self._tiles)


def _parse_block(block: str) -> Mask:
    rows = block.split("\n")
    if len(rows) != MASK_DIM:
        raise TileFileError(f"tile has {len(rows)} rows")
    out = []
    for row in rows:
        if len(row) != MASK_DIM:
            raise TileFileError(f"tile row {row!r} is not {MASK_DIM} wide")
        cells = []
        for ch in row:
            if ch == FILLED:
                cells.append(True)
            elif ch == EMPTY:
                cells.append(False)
            else:
                raise TileFileError(f"unexpected character {ch!r}")
        out.append(tuple(cells))
    return tuple(out)


def parse_tiles(text: str) -> List[Mask]:
    """Parse 5x5 blocks of '!'/',' separated by single blank lines.

    Every row, including the last one, must be newline-terminated.
    """
    if not text.endswith("\n"):
        raise TileFileError("missing final newline")
    return [_parse_block(block) for block in text[:-1].split("\n\n")]


def catalog_from_text(text: str) -> TileCatalog:
    catalog = TileCatalog()
    for mask in parse_tiles(text):
        catalog.append_tile(mask)
    return catalog


def load_tile_file(path: str) -> TileCatalog:
    try:
        with open(path, "r", newline="") as fh:
            text = fh.read()
    except OSError as e:
        raise TileFileNotFound(str(e)) from e
    except UnicodeDecodeError as e:
        raise TileFileError(str(e)) from e
    return catalog_from_text(text)
