from typing import NamedTuple, Union

from .tiles import Rotation

SAVE_PREFIX = "save"
MAX_SPACES = 2


class MoveCommand(NamedTuple):
    row: int
    col: int
    rotation: Rotation


class SaveCommand(NamedTuple):
    path: str


Command = Union[MoveCommand, SaveCommand]


class CommandError(ValueError):
    pass


def _to_int(token: str) -> int:
    body = token[1:] if token[:1] in ("+", "-") else token
    if not body.isdigit() or not body.isascii():
        raise CommandError(f"not an integer: {token!r}")
    return int(token)


def parse_command(line: str) -> Command:
    """Parse one line of human input.

    Either ``row col rotation`` or ``save<path>`` (no space before the
    path). Lines with more than two spaces are rejected outright.
    """
    line = line.rstrip("\n")
    if line.count(" ") > MAX_SPACES:
        raise CommandError("too many spaces")
    tokens = [t for t in line.split(" ") if t]
    if not tokens:
        raise CommandError("empty input")
    if tokens[0].startswith(SAVE_PREFIX):
        if len(tokens) > 1:
            raise CommandError("save takes a single token")
        return SaveCommand(tokens[0][len(SAVE_PREFIX):])
    if len(tokens) != 3:
        raise CommandError("expected row col rotation")
    row, col, degrees = [_to_int(t) for t in tokens]
    try:
        rotation = Rotation.parse(degrees)
    except ValueError as e:
        raise CommandError(str(e)) from None
    return MoveCommand(row, col, rotation)
