"""Command-line entry points: single solve, benchmark runner and analysis."""

from __future__ import annotations

import csv

import pandas as pd
import pytest

from npuzzle.domains.board import scramble
from npuzzle.experiments import analyze, runner, solve_one


def test_solve_one_prints_path(capsys) -> None:
    code = solve_one.main(["--pieces", "7,8,5,3,1,4,6,2", "--x-blank", "0", "--y-blank", "2"])
    out = capsys.readouterr().out
    assert code == 0
    assert "The cost of this solution (the # of moves) was" in out
    assert " 1  2  3\n 4  5  6\n 7  8 --" in out


def test_solve_one_saves_frames(tmp_path) -> None:
    code = solve_one.main(["-p", "1,2,3,4,5,6,7,8", "-x", "1", "-y", "2",
                           "-a", "ida-star", "-r", "num-incorrect", "--outdir", str(tmp_path)])
    assert code == 0
    assert sorted(p.name for p in tmp_path.iterdir()) == ["step_000.png", "step_001.png"]


def test_solve_one_reports_budget(capsys) -> None:
    code = solve_one.main(["-p", "1,2,4,3,5,6,7,8,9,10,11,15,13,14,12", "-x", "3", "-y", "3",
                           "--max_expansions", "3"])
    assert code == 1
    assert "budget_exceeded" in capsys.readouterr().out


@pytest.mark.parametrize("pieces", ["1,2,3,4", "1,2,x", "0,1,2"], ids=["non-square", "not-a-number", "zero"])
def test_solve_one_rejects_malformed_pieces(pieces: str) -> None:
    with pytest.raises(SystemExit) as exc:
        solve_one.main(["--pieces", pieces, "-x", "0", "-y", "0"])
    assert exc.value.code == 2


def test_generate_only_solvable_instances() -> None:
    insts = runner.generate(3, [4, 8], per_depth=3)
    assert [i.depth for i in insts] == [4, 4, 4, 8, 8, 8]
    assert len({i.seed for i in insts}) == 6


def test_generate_records_the_seed_each_board_came_from() -> None:
    insts = runner.generate(3, [4, 8], per_depth=3, start_seed=7)
    assert insts[0].seed == 7
    for inst in insts:
        assert scramble(3, inst.depth, inst.seed) == inst.board


def _run(tmp_path, *extra):
    out = tmp_path / "run.csv"
    runner.main(["--n", "3", "--depths", "4", "6", "--per_depth", "2", "--out", str(out), *extra])
    with out.open(newline="") as f:
        return out, list(csv.DictReader(f))


def test_runner_writes_one_row_per_case(tmp_path) -> None:
    _, rows = _run(tmp_path, "--include_unsolvable")
    # 4 instances × (solvable + parity-flipped) × (A* + IDA*)
    assert len(rows) == 16
    assert list(rows[0]) == runner.HEADER
    assert {r["algorithm"] for r in rows} == {"A*", "IDA*"}
    for r in rows:
        if r["solvable"] == "1":
            assert r["termination"] == "ok"
            assert int(r["g"]) <= int(r["depth"])
        else:
            assert r["termination"] == "no_solution"
            assert r["g"] == ""


def test_runner_uninformed_strategies(tmp_path) -> None:
    _, rows = _run(tmp_path, "--algorithms", "bfs", "id-dfs", "dfs", "--dfs_max_depth", "8")
    assert {r["algorithm"] for r in rows} == {"BFS", "ID-DFS", "DFS"}
    assert all(r["termination"] == "ok" for r in rows)


def test_analyze_summary_and_plots(tmp_path) -> None:
    csv_path, _ = _run(tmp_path, "--include_unsolvable")
    summary_path = tmp_path / "summary.csv"
    figs = tmp_path / "figs"
    analyze.main([str(csv_path), "--outdir", str(figs), "--summary", str(summary_path)])

    summary = pd.read_csv(summary_path)
    assert set(summary["algorithm"]) == {"A*", "IDA*"}
    assert (summary["solved"] == 2).all()
    assert (summary["runs"] == 4).all()
    assert sorted(p.name for p in figs.iterdir()) == [
        "expanded_by_depth.png", "generated_by_depth.png", "time_sec_by_depth.png",
    ]


def test_summary_keeps_groups_without_solved_runs() -> None:
    df = pd.DataFrame({
        "algorithm": ["A*", "A*", "IDA*", "IDA*"],
        "heuristic": ["taxicab"] * 4,
        "depth": [20, 20, 20, 20],
        "termination": ["ok", "ok", "budget_exceeded", "budget_exceeded"],
        "expanded": [10, 30, 5, 5],
        "generated": [20, 60, 9, 9],
        "time_sec": [0.1, 0.3, 0.5, 0.5],
    })
    summary = analyze.summarize(df).set_index("algorithm")
    assert list(summary.index) == ["A*", "IDA*"]
    assert summary.loc["A*", "solved"] == 2
    assert summary.loc["A*", "expanded_mean"] == 20
    assert summary.loc["IDA*", "solved"] == 0
    assert summary.loc["IDA*", "runs"] == 2
    assert pd.isna(summary.loc["IDA*", "expanded_mean"])
