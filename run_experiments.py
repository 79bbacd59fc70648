#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(cmd):
    print("Running:", cmd)
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    run("python -m npuzzle.experiments.runner --n 3 --depths 6 10 14 18 --per_depth 10 --heuristic taxicab --out results/p8_taxicab.csv")
    run("python -m npuzzle.experiments.runner --n 3 --depths 6 10 14 18 --per_depth 10 --heuristic num-incorrect --out results/p8_num_incorrect.csv")
    run("python -m npuzzle.experiments.runner --n 3 --depths 6 10 --per_depth 5 --algorithms bfs id-dfs --out results/p8_uninformed.csv")
    run("python -m npuzzle.experiments.runner --n 4 --depths 10 20 30 --per_depth 5 --heuristic taxicab --timeout_sec 30 --out results/p15_taxicab.csv")
    run("python -m npuzzle.experiments.analyze results/p8_taxicab.csv results/p8_num_incorrect.csv results/p8_uninformed.csv results/p15_taxicab.csv")

if __name__ == "__main__":
    main()
