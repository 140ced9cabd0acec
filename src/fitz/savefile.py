"""Save-file format.

A header line ``tile turn height width`` followed by ``height`` rows of
``width`` characters: ``*`` for the first player, ``#`` for the second and
``.`` for an empty cell. Every line is newline-terminated.
"""
from typing import List

from .board import MAX_DIM, MIN_DIM
from .errors import SaveFileError, SaveFileNotFound
from .render import EMPTY_SYMBOL, render_board


def _parse_int(token: str) -> int:
    # int() would also accept "+3", " 3" and "3_0"
    body = token[1:] if token.startswith("-") else token
    if not body.isdigit() or not body.isascii():
        raise SaveFileError(f"not an integer: {token!r}")
    return int(token)


def parse_header(line: str, tile_count: int) -> List[int]:
    tokens = line.split(" ")
    if len(tokens) != 4 or any(t == "" for t in tokens):
        raise SaveFileError(f"bad header {line!r}")
    tile, turn, height, width = [_parse_int(t) for t in tokens]
    if not 0 <= tile < tile_count:
        raise SaveFileError(f"tile index {tile} out of range")
    if turn not in (0, 1):
        raise SaveFileError(f"turn {turn} out of range")
    if not (MIN_DIM <= height <= MAX_DIM and MIN_DIM <= width <= MAX_DIM):
        raise SaveFileError(f"dimensions {height}x{width} out of range")
    return [tile, turn, height, width]


def load_save(text: str, game) -> None:
    if not text.endswith("\n"):
        raise SaveFileError("missing final newline")
    lines = text[:-1].split("\n")
    tile, turn, height, width = parse_header(lines[0], len(game.tiles))
    rows = lines[1:]
    if len(rows) != height:
        raise SaveFileError(f"expected {height} rows, found {len(rows)}")

    symbols = {p.symbol: p for p in game.players}
    game.board.resize(height, width)
    for r, row in enumerate(rows):
        if len(row) != width:
            raise SaveFileError(f"row {r} is {len(row)} wide, expected {width}")
        for c, ch in enumerate(row):
            if ch == EMPTY_SYMBOL:
                continue
            player = symbols.get(ch)
            if player is None:
                raise SaveFileError(f"unexpected character {ch!r}")
            game.board.place(r, c, player)

    game.tiles.active = tile
    game.turn = turn


def load_save_file(path: str, game) -> None:
    try:
        with open(path, "r", newline="") as fh:
            text = fh.read()
    except OSError as e:
        raise SaveFileNotFound(str(e)) from e
    except UnicodeDecodeError as e:
        raise SaveFileError(str(e)) from e
    load_save(text, game)


def dump_save(game) -> str:
    board = game.board
    header = f"{game.tiles.active} {game.turn} {board.height} {board.width}\n"
    return header + render_board(board)


def save_game(game, path: str) -> None:
    with open(path, "w") as fh:
        fh.write(dump_save(game))
