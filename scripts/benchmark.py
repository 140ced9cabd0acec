import argparse
import time
from statistics import mean
from fitz.board import PlayerKind
from fitz.game import Game
from fitz.tiles import catalog_from_text

DEFAULT_TILES = (
    ",,,,,\n,,!,,\n,!!!,\n,,!,,\n,,,,,\n"
    "\n"
    ",,,,,\n,,!,,\n,,!,,\n,,!!,\n,,,,,\n"
    "\n"
    ",,,,,\n,,,,,\n,,!!,\n,,,,,\n,,,,,\n"
)

def play_out(size: int, p1: PlayerKind, p2: PlayerKind, tiles_text: str):
    g = Game(p1, p2)
    g.tiles = catalog_from_text(tiles_text)
    g.start(size, size)
    plies = 0
    while g.check_end() is None:
        g.play_auto()
        plies += 1
    return g, plies

def bench(size: int, p1: PlayerKind, p2: PlayerKind, tiles_text: str, repeats: int):
    times = []
    plies = []
    winner = None
    for _ in range(repeats):
        t0 = time.time()
        g, n = play_out(size, p1, p2, tiles_text)
        times.append(time.time() - t0)
        plies.append(n)
        winner = g.winner().symbol
    return {
        "time_s_avg": mean(times),
        "plies": int(mean(plies)),
        "pps": int(mean(plies) / mean(times)) if mean(times) > 0 else 0,
        "winner": winner,
    }

def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--sizes", type=int, nargs="+", default=[5, 10, 20, 40])
    parser.add_argument("--tiles", default=None, help="tile file (defaults to a built-in set)")
    parser.add_argument("--repeats", type=int, default=3)
    args = parser.parse_args()

    tiles_text = DEFAULT_TILES
    if args.tiles:
        with open(args.tiles) as fh:
            tiles_text = fh.read()

    matchups = [
        (PlayerKind.POLICY_A, PlayerKind.POLICY_A),
        (PlayerKind.POLICY_A, PlayerKind.POLICY_B),
        (PlayerKind.POLICY_B, PlayerKind.POLICY_B),
    ]
    print("Fitz automated play benchmark")
    for size in args.sizes:
        print(f"\nBoard {size}x{size}")
        for p1, p2 in matchups:
            res = bench(size, p1, p2, tiles_text, args.repeats)
            print(f"{p1.value} vs {p2.value}  time={res['time_s_avg']:.3f}s  plies={res['plies']:>6}  pps={res['pps']:>8}  winner={res['winner']}")

if __name__ == "__main__":
    main()
