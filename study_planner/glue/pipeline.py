"""Command line pipeline orchestrating input loading and annealing."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Dict, Optional

import numpy as np

from ..config.config import DEFAULTS, RunConfig
from ..engine.annealing import run_annealing
from ..logging.metrics import Metrics, save_metrics_json, save_plan_csv
from .io import (
    InputError,
    load_config,
    load_day_budget,
    load_subjects,
    validate_inputs,
)
from .report import render_report


def _resolve(base: Path, maybe_path: Optional[str]) -> Optional[Path]:
    if maybe_path is None:
        return None
    return (base / maybe_path).resolve()


def build_params(cfg: Dict[str, Any]) -> Dict[str, Any]:
    params = DEFAULTS.copy()
    params.update(cfg.get("params", {}))
    if "iters" in cfg:
        params["iters"] = int(cfg["iters"])
    if "log_period" in cfg:
        params["log_period"] = int(cfg["log_period"])

    try:
        params["sa_temp0"] = float(params["sa_temp0"])
    except (TypeError, ValueError) as exc:
        raise ValueError(f"sa_temp0 must be a number: {params['sa_temp0']!r}") from exc
    if not params["sa_temp0"] >= 0.0:
        raise ValueError("sa_temp0 must be >= 0")
    return params


def assemble_data(cfg: Dict[str, Any], base_dir: Path, params: Dict[str, Any]) -> RunConfig:
    """Load the subject table and day budget following the configuration contract."""

    dataset = cfg.get("dataset", {})

    subjects_path = dataset.get("subjects")
    budget_path = dataset.get("budget")

    if subjects_path is None or budget_path is None:
        raise ValueError("dataset.subjects and dataset.budget must be provided")

    subjects, names = load_subjects(_resolve(base_dir, subjects_path))
    day_budget = load_day_budget(_resolve(base_dir, budget_path))

    validate_inputs(subjects, day_budget)

    return RunConfig(
        subjects=subjects,
        names=tuple(names),
        day_budget=day_budget,
        plateau_divisor=float(params.get("plateau_divisor", 10.0)),
    )


def _resolve_seed(cfg: Dict[str, Any]) -> int:
    seed = cfg.get("seed")
    if seed is None:
        # fresh entropy, but recorded so the run can be replayed
        return int(np.random.SeedSequence().entropy % (2**32))
    return int(seed)


def run_pipeline(
    cfg: Dict[str, Any],
    *,
    base_dir: Path,
    outdir: Optional[Path] = None,
) -> Dict[str, Any]:
    """Execute the annealing search according to ``cfg`` and return the best plan."""

    params = build_params(cfg)
    run_cfg = assemble_data(cfg, base_dir, params)

    seed = _resolve_seed(cfg)
    rng = np.random.default_rng(seed)
    metrics = Metrics()

    best = run_annealing(run_cfg, params, metrics, rng)

    meta = {
        "seed": seed,
        "config_version": cfg.get("version", "dev"),
        "iters_logged": len(metrics.rows),
    }

    if outdir is not None:
        outdir.mkdir(parents=True, exist_ok=True)
        save_metrics_json(outdir / "metrics.json", metrics, best, params, extra=meta)
        save_plan_csv(outdir / "plan.csv", best["plan"], run_cfg.names)
        metrics.save_csv(outdir / "metrics_log.csv")

    return {
        "best": best,
        "run_config": run_cfg,
        "metrics": metrics,
        "params": params,
        "meta": meta,
    }


def load_and_run(
    config_path: Optional[Path],
    *,
    subjects_path: Optional[Path] = None,
    budget_path: Optional[Path] = None,
    outdir: Optional[Path] = None,
    seed_override: Optional[int] = None,
    iters_override: Optional[int] = None,
) -> Dict[str, Any]:
    """Convenience wrapper combining ``load_config`` and :func:`run_pipeline`.

    Explicit input paths win over the ``dataset`` section of the config file.
    """

    if config_path is not None:
        cfg = load_config(config_path)
        base_dir = Path(config_path).resolve().parent
    else:
        cfg = {}
        base_dir = Path.cwd()

    dataset = dict(cfg.get("dataset", {}))
    if subjects_path is not None:
        dataset["subjects"] = str(Path(subjects_path).resolve())
    if budget_path is not None:
        dataset["budget"] = str(Path(budget_path).resolve())
    dataset.setdefault("subjects", "matrix.txt")
    dataset.setdefault("budget", "time.txt")
    cfg["dataset"] = dataset

    if seed_override is not None:
        cfg["seed"] = int(seed_override)
    if iters_override is not None:
        cfg["iters"] = int(iters_override)

    return run_pipeline(cfg, base_dir=base_dir, outdir=outdir)


def build_arg_parser():
    import argparse

    ap = argparse.ArgumentParser(description="Weekly study planner (simulated annealing)")
    ap.add_argument("--config", default=None, help="Path to YAML/JSON configuration")
    ap.add_argument("--subjects", default=None, help="Subject table (default: matrix.txt)")
    ap.add_argument("--budget", default=None, help="Daily hour budgets (default: time.txt)")
    ap.add_argument("--outdir", default=None, help="Optional output directory for run artefacts")
    ap.add_argument("--seed", type=int, default=None, help="Optional RNG seed override")
    ap.add_argument("--iters", type=int, default=None, help="Optional iteration budget override")
    ap.add_argument(
        "--progress",
        action="store_true",
        help="Print buffered progress lines after the search",
    )
    return ap


def main(argv: Optional[list[str]] = None) -> Dict[str, Any]:
    ap = build_arg_parser()
    args = ap.parse_args(argv)

    try:
        result = load_and_run(
            Path(args.config).resolve() if args.config else None,
            subjects_path=Path(args.subjects) if args.subjects else None,
            budget_path=Path(args.budget) if args.budget else None,
            outdir=Path(args.outdir).resolve() if args.outdir else None,
            seed_override=args.seed,
            iters_override=args.iters,
        )
    except (InputError, FileNotFoundError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    except ValueError as exc:
        print(f"Error: invalid input: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if args.progress:
        for line in result["metrics"].progress_lines():
            print(line)

    print()
    print(render_report(result["best"], result["run_config"]))
    print(f"\nSeed: {result['meta']['seed']}")
    return result


__all__ = [
    "assemble_data",
    "build_arg_parser",
    "build_params",
    "load_and_run",
    "main",
    "run_pipeline",
]
