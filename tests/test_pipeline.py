import json
from pathlib import Path

import pytest

from study_planner.glue.io import InputEmpty
from study_planner.glue.pipeline import assemble_data, build_params, load_and_run, main, run_pipeline


def _write_dataset(tmp_path: Path):
    (tmp_path / "dataset").mkdir()
    subjects = tmp_path / "dataset" / "matrix.txt"
    subjects.write_text(
        "1.5 0.5 1.5 BASIC_MATHEMATICS\n2.0 1.0 2.5 LOGIC_GATES_1\n",
        encoding="utf-8",
    )
    budget = tmp_path / "dataset" / "time.txt"
    budget.write_text("2 3 2\n", encoding="utf-8")
    return subjects, budget


def _cfg(tmp_path, subjects, budget, **extra):
    cfg = {
        "dataset": {
            "subjects": str(subjects.relative_to(tmp_path)),
            "budget": str(budget.relative_to(tmp_path)),
        },
    }
    cfg.update(extra)
    return cfg


def test_assemble_data(tmp_path):
    subjects, budget = _write_dataset(tmp_path)
    params = build_params({"params": {"plateau_divisor": 5.0}})

    run_cfg = assemble_data(_cfg(tmp_path, subjects, budget), tmp_path, params)
    assert run_cfg.n_subjects == 2
    assert run_cfg.names == ("BASIC_MATHEMATICS", "LOGIC_GATES_1")
    assert list(run_cfg.day_budget) == [2, 3, 2, 2, 2, 2, 2]
    assert run_cfg.plateau_divisor == 5.0


def test_assemble_data_requires_both_inputs(tmp_path):
    with pytest.raises(ValueError):
        assemble_data({"dataset": {"subjects": "matrix.txt"}}, tmp_path, build_params({}))


def test_build_params_override():
    cfg = {"iters": 10, "params": {"log_period": 1, "perturb_width": 0.3}}
    params = build_params(cfg)
    assert params["iters"] == 10
    assert params["log_period"] == 1
    assert params["perturb_width"] == 0.3
    assert params["sa_cooling"] == 0.999998


def test_run_pipeline(tmp_path):
    subjects, budget = _write_dataset(tmp_path)
    outdir = tmp_path / "out"
    cfg = _cfg(tmp_path, subjects, budget, seed=0, params={"iters": 5, "log_period": 1})

    result = run_pipeline(cfg, base_dir=tmp_path, outdir=outdir)
    assert "best" in result
    assert (outdir / "metrics.json").exists()
    assert (outdir / "plan.csv").exists()
    assert (outdir / "metrics_log.csv").exists()

    with open(outdir / "metrics.json", encoding="utf-8") as f:
        metrics_data = json.load(f)
    assert metrics_data["seed"] == 0
    assert metrics_data["iters_logged"] == 5
    assert metrics_data["iterations"] == 5

    plan_lines = (outdir / "plan.csv").read_text(encoding="utf-8").splitlines()
    assert plan_lines[0].startswith("subject,day_1")
    assert plan_lines[1].startswith("BASIC_MATHEMATICS,")


def test_run_pipeline_records_generated_seed(tmp_path):
    subjects, budget = _write_dataset(tmp_path)
    cfg = _cfg(tmp_path, subjects, budget, iters=3)

    first = run_pipeline(cfg, base_dir=tmp_path)
    replay = run_pipeline(dict(cfg, seed=first["meta"]["seed"]), base_dir=tmp_path)

    assert (first["best"]["plan"] == replay["best"]["plan"]).all()
    assert first["best"]["best_score"] == replay["best"]["best_score"]


def test_load_and_run_with_explicit_paths(tmp_path):
    subjects, budget = _write_dataset(tmp_path)
    result = load_and_run(
        None,
        subjects_path=subjects,
        budget_path=budget,
        seed_override=1,
        iters_override=20,
    )
    assert result["meta"]["seed"] == 1
    assert result["best"]["iterations"] == 20


def test_load_and_run_empty_subjects(tmp_path):
    subjects, budget = _write_dataset(tmp_path)
    subjects.write_text("", encoding="utf-8")
    with pytest.raises(InputEmpty):
        load_and_run(None, subjects_path=subjects, budget_path=budget, iters_override=1)


def test_main_prints_report(tmp_path, capsys):
    subjects, budget = _write_dataset(tmp_path)
    main([
        "--subjects", str(subjects),
        "--budget", str(budget),
        "--seed", "3",
        "--iters", "50",
        "--progress",
    ])
    out = capsys.readouterr().out
    assert "Iteration 0, Best Score:" in out
    assert "Optimized Plan Evaluation Score:" in out
    assert "Daily Totals vs Limits:" in out
    assert "Seed: 3" in out


def test_main_exits_nonzero_on_missing_input(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--subjects", str(tmp_path / "missing.txt"), "--budget", str(tmp_path / "t.txt")])
    assert exc.value.code == 1
    assert "Error:" in capsys.readouterr().err


def test_build_params_checks_initial_temperature():
    assert build_params({"params": {"sa_temp0": 0}})["sa_temp0"] == 0.0
    assert build_params({"params": {"sa_temp0": "12.5"}})["sa_temp0"] == 12.5
    with pytest.raises(ValueError):
        build_params({"params": {"sa_temp0": "hot"}})
    with pytest.raises(ValueError):
        build_params({"params": {"sa_temp0": -1.0}})


def test_main_exits_nonzero_on_bad_temperature(tmp_path, capsys):
    subjects, budget = _write_dataset(tmp_path)
    cfg_path = tmp_path / "cfg.yaml"
    cfg_path.write_text("params:\n  sa_temp0: hot\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main(["--config", str(cfg_path), "--subjects", str(subjects), "--budget", str(budget)])
    assert exc.value.code == 1
    assert "sa_temp0" in capsys.readouterr().err


def test_main_exits_nonzero_on_invalid_yaml(tmp_path, capsys):
    subjects, budget = _write_dataset(tmp_path)
    cfg_path = tmp_path / "cfg.yaml"
    cfg_path.write_text("params: [unclosed\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main(["--config", str(cfg_path), "--subjects", str(subjects), "--budget", str(budget)])
    assert exc.value.code == 1
    assert "Error:" in capsys.readouterr().err
