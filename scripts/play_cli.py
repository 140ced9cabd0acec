import sys
import argparse
import logging
from typing import List, Optional, Tuple

from fitz.board import PlayerKind
from fitz.commands import CommandError, MoveCommand, parse_command
from fitz.errors import DimensionError, EndOfInput, FitzError, PlayerTypeError, UsageError
from fitz.game import Game
from fitz.render import prompt, render_auto_move, render_board, render_tiles, win_message
from fitz.savefile import load_save_file, save_game
from fitz.tiles import load_tile_file

log = logging.getLogger("fitz.cli")


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog="fitz", usage=UsageError.message[len("Usage: "):])
    parser.add_argument("tilefile")
    parser.add_argument("rest", nargs="*", help="p1type p2type [height width | filename]")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def parse_dimension(token: str) -> int:
    body = token[1:] if token[:1] in ("+", "-") else token
    if not body.isdigit() or not body.isascii():
        raise DimensionError(f"not a number: {token!r}")
    return int(token)


def parse_players(p1: str, p2: str) -> Tuple[PlayerKind, PlayerKind]:
    return PlayerKind.parse(p1), PlayerKind.parse(p2)


def setup_game(tilefile: str, rest: List[str]) -> Game:
    try:
        kinds: Optional[Tuple[PlayerKind, PlayerKind]] = parse_players(rest[0], rest[1])
        player_error = None
    except PlayerTypeError as e:
        kinds, player_error = None, e
    # a bad tile file is reported ahead of a bad player type
    tiles = load_tile_file(tilefile)
    if player_error is not None:
        raise player_error

    g = Game(*kinds)
    g.tiles = tiles
    if len(rest) == 3:
        load_save_file(rest[2], g)
    else:
        g.start(parse_dimension(rest[2]), parse_dimension(rest[3]))
    return g


def human_turn(g: Game) -> None:
    player = g.current_player()
    while True:
        try:
            line = input(prompt(player))
        except EOFError:
            raise EndOfInput() from None
        try:
            cmd = parse_command(line)
        except CommandError as e:
            log.debug("rejected input %r: %s", line, e)
            continue
        if isinstance(cmd, MoveCommand):
            try:
                g.play(cmd.row, cmd.col, cmd.rotation)
            except ValueError as e:
                log.debug("rejected move %s: %s", cmd, e)
                continue
            return
        try:
            save_game(g, cmd.path)
        except OSError:
            print("Unable to save game", file=sys.stderr)


def game_loop(g: Game) -> None:
    while True:
        sys.stdout.write(render_board(g.board))
        winner = g.check_end()
        if winner is not None:
            print(win_message(winner))
            return
        player = g.current_player()
        if player.kind == PlayerKind.HUMAN:
            sys.stdout.write(render_tiles(g.tiles, only_active=True))
            human_turn(g)
        else:
            mv = g.play_auto()
            print(render_auto_move(player, mv))


def main(argv: Optional[List[str]] = None) -> int:
    try:
        args = build_parser().parse_args(argv)
        logging.basicConfig(level=getattr(logging, args.log_level))
        if not args.rest:
            sys.stdout.write(render_tiles(load_tile_file(args.tilefile)))
            return 0
        if len(args.rest) not in (3, 4):
            raise UsageError()
        game_loop(setup_game(args.tilefile, args.rest))
    except FitzError as e:
        log.debug("exiting: %s", e)
        print(e.message, file=sys.stderr)
        return e.code
    return 0


if __name__ == "__main__":
    sys.exit(main())
