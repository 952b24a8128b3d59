"""Plain-text rendering of optimised plans."""

from __future__ import annotations

from typing import Sequence

import numpy as np
import pandas as pd

from ..config.enums import N_DAYS


def plan_to_frame(plan: np.ndarray, names: Sequence[str]) -> pd.DataFrame:
    """Return the plan in whole minutes, one row per subject."""

    plan = np.asarray(plan, dtype=np.float64)
    minutes = np.rint(plan * 60.0).astype(np.int64)
    columns = [f"Day {d + 1}" for d in range(plan.shape[1])]
    return pd.DataFrame(minutes, index=pd.Index(list(names), name="subject"), columns=columns)


def daily_totals_frame(plan: np.ndarray, day_budget: np.ndarray) -> pd.DataFrame:
    plan = np.asarray(plan, dtype=np.float64)
    return pd.DataFrame(
        {
            "total": plan.sum(axis=0),
            "limit": np.asarray(day_budget, dtype=np.float64)[:N_DAYS],
        },
        index=pd.Index([f"Day {d + 1}" for d in range(plan.shape[1])], name="day"),
    )


def render_plan(plan: np.ndarray, names: Sequence[str], caption: str = "") -> str:
    if len(names) == 0:
        return "Empty plan!"
    body = plan_to_frame(plan, names).to_string()
    if not caption:
        return body
    width = max(len(line) for line in body.splitlines())
    return caption.center(width).rstrip() + "\n\n" + body


def render_daily_totals(plan: np.ndarray, day_budget: np.ndarray) -> str:
    lines = ["Daily Totals vs Limits:"]
    for day, row in daily_totals_frame(plan, day_budget).iterrows():
        lines.append(f"{day}: Total = {row['total']:.4g}, Limit = {row['limit']:.4g}")
    return "\n".join(lines)


def render_report(result, run_cfg) -> str:
    """Final score, the plan table and per-day totals, as the CLI prints them."""

    parts = [
        f"Optimized Plan Evaluation Score: {float(result['best_score']):.6g}",
        "",
        render_plan(result["plan"], run_cfg.names, "Final Optimized Plan"),
        "",
        render_daily_totals(result["plan"], run_cfg.day_budget),
    ]
    return "\n".join(parts)


__all__ = [
    "daily_totals_frame",
    "plan_to_frame",
    "render_daily_totals",
    "render_plan",
    "render_report",
]
