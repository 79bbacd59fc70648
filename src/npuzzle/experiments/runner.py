from __future__ import annotations
import argparse, csv
from dataclasses import dataclass
from pathlib import Path
from typing import List

from npuzzle.domains.board import Board, is_solvable, make_unsolvable_variant, scramble
from npuzzle.search.result import SearchResult
from npuzzle.search.solver import ALGORITHMS, HEURISTICS, INFORMED, solve

HEADER = [
    "algorithm","heuristic","depth","seed",
    "expanded","generated","duplicates","g","time_sec",
    "peak_open","peak_closed","peak_recursion","bound_final","tie_break",
    "termination","solvable"
]

@dataclass
class Instance:
    seed: int
    depth: int
    board: Board

def generate(size: int, depths: List[int], per_depth: int, start_seed: int = 0) -> List[Instance]:
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        made = 0
        attempts = 0
        while made < per_depth:
            b = scramble(size, d, seed)
            attempts += 1
            if is_solvable(b):
                out.append(Instance(seed=seed, depth=d, board=b))
                made += 1
            seed += 1
            if attempts > per_depth * 2000:
                raise RuntimeError(f"Instance generation took too long at depth={d}. Check solvability logic.")
    return out

def _cell(v):
    return "" if v is None else v

def result_row(res: SearchResult, heur: str, inst: Instance, solvable_flag: int) -> list:
    return [
        res.algorithm, heur, inst.depth, inst.seed,
        res.expanded, res.generated, res.duplicates, _cell(res.g),
        f"{res.time:.6f}",
        _cell(res.peak_open), _cell(res.peak_closed), _cell(res.peak_recursion), _cell(res.bound_final),
        _cell(res.tie_break), res.termination.value, solvable_flag,
    ]

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="A*/IDA* (+BFS/DFS/ID-DFS) N-puzzle experiment runner")
    ap.add_argument("--algorithms", choices=sorted(ALGORITHMS), nargs="+", default=list(INFORMED))
    ap.add_argument("--heuristic", choices=sorted(HEURISTICS), default="taxicab")
    ap.add_argument("--n", type=int, default=3, help="Square board size (N×N)")
    ap.add_argument("--depths", type=int, nargs="+", default=[6,10,14,18,22,26])
    ap.add_argument("--per_depth", type=int, default=30)
    ap.add_argument("--tie_break", choices=["g","h","fifo","lifo"], default="g")
    ap.add_argument("--timeout_sec", type=float, default=None, help="Per-instance wall time")
    ap.add_argument("--max_expansions", type=int, default=None, help="Per-instance expansion budget")
    ap.add_argument("--dfs_max_depth", type=int, default=None, help="Depth limit for DFS (optional)")
    ap.add_argument("--seed", type=int, default=0, help="First scramble seed")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))
    ap.add_argument("--include_unsolvable", action="store_true",
                    help="Also run parity-flipped variants (the engines report no_solution)")
    return ap

def engine_opts(algorithm: str, args) -> dict:
    opts = {"return_path": False, "timeout_sec": args.timeout_sec, "max_expansions": args.max_expansions}
    if algorithm == "a-star":
        opts["tie_break"] = args.tie_break
    if algorithm == "dfs":
        opts["max_depth"] = args.dfs_max_depth
    return opts

def main(argv=None):
    args = build_parser().parse_args(argv)

    insts = generate(args.n, args.depths, args.per_depth, start_seed=args.seed)
    args.out.parent.mkdir(parents=True, exist_ok=True)

    with args.out.open("w", newline="") as f:
        w = csv.writer(f); w.writerow(HEADER)
        for inst in insts:
            cases = [(inst.board, 1)]
            # Optional unsolvable variants (flip parity).
            if args.include_unsolvable:
                cases.append((make_unsolvable_variant(inst.board), 0))
            for board, solvable_flag in cases:
                for algo in args.algorithms:
                    r = solve(board, algo, args.heuristic, **engine_opts(algo, args))
                    w.writerow(result_row(r, args.heuristic, inst, solvable_flag))

    print(f"Wrote {args.out} ({len(insts)} instances)")

if __name__ == "__main__":
    main()
