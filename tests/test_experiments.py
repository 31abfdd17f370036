import csv

import pytest

from eightpuzzle.domains.puzzle8 import GOAL
from eightpuzzle.experiments import analyze, runner, solve, visualize_path
from eightpuzzle.search.a_star import AStarSolver


def test_format_solution_matches_chain():
    solver = AStarSolver()
    solver.solve((2, 3, 4, 1, 8, 5, 7, 0, 6))
    text = solve.format_solution(solver.solution)
    assert text.split("\n\n") == [
        "p = 1 = g+h = 0+1\n2 3 4\n1 8 5\n7 0 6",
        "p = 1 = g+h = 1+0\n2 3 4\n1 8 5\n7 6 0",
    ]


def test_solve_main_default(capsys):
    res = solve.main(["--stats"])
    out = capsys.readouterr().out
    assert out.startswith("p = 5 = g+h = 0+5\n2 8 3\n1 6 4\n7 0 5")
    assert f"Solved in {res['g']} moves" in out
    assert "expanded=" in out


def test_solve_main_rejects_bad_tiles(capsys):
    with pytest.raises(SystemExit):
        solve.main(["--tiles", "0", "1", "1", "3", "4", "5", "6", "7", "8"])
    assert "permutation" in capsys.readouterr().err


def test_generate_instances():
    insts = runner.generate([4, 6], per_depth=3, start_seed=10)
    assert [i.depth for i in insts] == [4, 4, 4, 6, 6, 6]
    assert [i.seed for i in insts] == [10, 11, 12, 13, 14, 15]


def test_run_writes_csv(tmp_path):
    out = tmp_path / "sub" / "run.csv"
    insts = runner.generate([4, 8], per_depth=2)
    assert runner.run(insts, out) == 4
    with out.open(newline="") as f:
        rows = list(csv.DictReader(f))
    assert list(rows[0].keys()) == runner.HEADER
    assert all(r["termination"] == "ok" and r["algorithm"] == "A*" for r in rows)
    assert all(int(r["g"]) <= int(r["depth"]) for r in rows)


def test_row_for_exhausted():
    inst = runner.Instance(seed=1, depth=4, state=GOAL)
    res = {"algorithm": "A*", "g": None, "termination": "exhausted", "time": 0.5}
    row = runner.row_for(res, inst, 0)
    assert row[runner.HEADER.index("g")] == ""
    assert row[runner.HEADER.index("termination")] == "exhausted"
    assert row[runner.HEADER.index("solvable")] == 0


def test_analyze_summary_and_plot(tmp_path):
    out = tmp_path / "run.csv"
    runner.run(runner.generate([4, 8], per_depth=3), out)
    df = analyze.load([out])
    assert len(df) == 6
    stats = analyze.summarize(df)
    assert stats.loc[(1, 4), ("g", "max")] <= 4
    assert stats.loc[(1, 8), ("expanded", "mean")] >= 0
    p = analyze.plot_by_depth(df, tmp_path / "plots", "expanded")
    assert p.exists()


def test_analyze_main(tmp_path, capsys):
    out = tmp_path / "run.csv"
    runner.run(runner.generate([4], per_depth=2), out)
    stats = analyze.main([str(out), "--save", str(tmp_path / "plots")])
    assert stats is not None
    assert (tmp_path / "plots" / "astar_time_sec.png").exists()


def test_save_frames(tmp_path):
    res = AStarSolver().solve((2, 3, 4, 1, 8, 0, 7, 6, 5))
    frames = visualize_path.save_frames(res["path"], tmp_path)
    assert [f.name for f in frames] == ["step_000.png", "step_001.png"]
    assert all(f.exists() for f in frames)
