#!/usr/bin/env python3
import argparse, os
from pathlib import Path
import numpy as np
import pandas as pd
import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

METRICS = ["expanded", "generated", "time_sec"]

def sem(x):
    x = np.asarray(x, float)
    n = np.sum(~np.isnan(x))
    return 0.0 if n <= 1 else np.nanstd(x, ddof=1)/np.sqrt(n)

def load(paths) -> pd.DataFrame:
    frames = [pd.read_csv(p) for p in paths]
    df = pd.concat(frames, ignore_index=True)
    missing = {"algorithm", "heuristic", "depth", "termination"} - set(df.columns)
    if missing:
        raise ValueError(f"results are missing columns: {sorted(missing)}")
    return df

def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Mean/SEM of each metric per (algorithm, heuristic, depth) over solved runs.

    Every group that was run appears; groups with no solved run get
    ``solved == 0`` and NaN metrics.
    """
    keys = ["algorithm", "heuristic", "depth"]
    out = df.groupby(keys).size().rename("runs").to_frame()
    grouped = df[df["termination"] == "ok"].groupby(keys)
    for m in METRICS:
        agg = grouped[m].agg(["mean", sem]).rename(columns={"mean": f"{m}_mean", "sem": f"{m}_sem"})
        out = out.join(agg)
    out["solved"] = grouped.size().reindex(out.index, fill_value=0)
    return out.reset_index()

def plot_metric(summary: pd.DataFrame, metric: str, outdir: Path):
    plt.figure(figsize=(6,4))
    for (algo, heur), sub in summary.groupby(["algorithm", "heuristic"]):
        sub = sub.sort_values("depth")
        plt.errorbar(sub["depth"], sub[f"{metric}_mean"], yerr=sub[f"{metric}_sem"],
                     marker="o", capsize=3, label=f"{algo} ({heur})")
    plt.yscale("log")
    plt.xlabel("scramble depth")
    plt.ylabel(metric)
    plt.title(f"Mean {metric} by depth")
    plt.legend()
    outdir.mkdir(parents=True, exist_ok=True)
    p = outdir / f"{metric}_by_depth.png"
    plt.tight_layout()
    plt.savefig(p, dpi=200)
    plt.close()
    return p

def main(argv=None):
    ap = argparse.ArgumentParser(description="Summarize runner CSVs and plot cost vs. depth")
    ap.add_argument("csv", type=Path, nargs="+")
    ap.add_argument("--outdir", type=Path, default=Path("results/figs"))
    ap.add_argument("--summary", type=Path, default=Path("results/summary.csv"))
    args = ap.parse_args(argv)

    summary = summarize(load(args.csv))
    args.summary.parent.mkdir(parents=True, exist_ok=True)
    summary.to_csv(args.summary, index=False)
    print(f"Wrote {args.summary} ({len(summary)} rows)")
    for m in METRICS:
        print(f"Saved {plot_metric(summary, m, args.outdir)}")

if __name__ == "__main__":
    main()
