#!/usr/bin/env python3
import argparse, os
from pathlib import Path
import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from npuzzle.domains.board import Board, MalformedInput
from npuzzle.search.solver import ALGORITHMS, HEURISTICS, solve


def draw_board(board: Board, out_path: Path):
    n = board.size
    plt.figure(figsize=(3,3))
    ax = plt.gca()
    ax.set_xlim(0, n); ax.set_ylim(0, n)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    # grid
    for i in range(n+1):
        ax.plot([0,n],[i,i], linewidth=1)
        ax.plot([i,i],[0,n], linewidth=1)
    # tiles
    for idx, t in enumerate(board.tiles):
        if t == 0: continue
        r, c = divmod(idx, n)
        ax.text(c+0.5, r+0.6, str(t), ha="center", va="center", fontsize=16)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()


def parse_pieces(s: str):
    try:
        pieces = [int(p) for p in s.split(",")]
    except ValueError:
        raise argparse.ArgumentTypeError(f"Failed to parse {s!r} as comma-separated numbers")
    if any(p <= 0 for p in pieces):
        raise argparse.ArgumentTypeError(f"Pieces must be positive numbers, got {s!r}")
    return pieces


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Solve one N-puzzle instance and print the path.")
    p.add_argument("-a", "--algorithm", choices=sorted(ALGORITHMS), default="a-star")
    p.add_argument("-r", "--heuristic", choices=sorted(HEURISTICS), default="taxicab")
    p.add_argument("-p", "--pieces", type=parse_pieces, required=True,
                   help="Non-blank tiles in row-major order, e.g. 7,8,5,3,1,4,6,2")
    p.add_argument("-x", "--x-blank", type=int, required=True, help="Column of the blank")
    p.add_argument("-y", "--y-blank", type=int, required=True, help="Row of the blank")
    p.add_argument("--timeout_sec", type=float, default=None)
    p.add_argument("--max_expansions", type=int, default=None)
    p.add_argument("--outdir", type=Path, default=None, help="Save one PNG per board along the path")
    return p


def main(argv=None):
    p = build_parser()
    args = p.parse_args(argv)

    try:
        board = Board.from_pieces(args.pieces, args.x_blank, args.y_blank)
    except MalformedInput as e:
        p.error(f"Failed to create puzzle: {e}")

    res = solve(board, args.algorithm, args.heuristic,
                timeout_sec=args.timeout_sec, max_expansions=args.max_expansions)

    if not res.solved:
        print(f"No path ({res.termination.value}) after {res.expanded} expansions.")
        return 1

    for b in res.path:
        print(b)
        print()
    print(f"The cost of this solution (the # of moves) was {res.g}.")
    print("Moves:", ",".join(m.value for m in res.moves))

    if args.outdir is not None:
        for i, b in enumerate(res.path):
            draw_board(b, args.outdir / f"step_{i:03d}.png")
        print(f"Saved {len(res.path)} frames to {args.outdir}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
