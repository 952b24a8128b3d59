import csv
import json

import numpy as np

from ..config.enums import N_DAYS


class Metrics:
    def __init__(self):
        self.rows = []

    def append(self, it, curr, best, temp, status=""):
        self.rows.append((it, float(curr), float(best), float(temp), status))

    def progress_lines(self):
        for it, curr, best, temp, _status in self.rows:
            yield (
                f"Iteration {it}, Best Score: {best:.6g}, "
                f"Current Score: {curr:.6g}, Temperature: {temp:.6g}"
            )

    def save_csv(self, path):
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["iter", "curr_score", "best_score", "temp", "status"])
            for row in self.rows:
                w.writerow(list(row))


def save_metrics_json(path, metrics, best, params, *, extra=None):
    data = {
        "final_best_score": float(best["best_score"]),
        "final_current_score": float(best["current_score"]),
        "final_temperature": float(best["temperature"]),
        "iterations": int(best["iterations"]),
        "iters_logged": len(metrics.rows),
        "params": params,
    }
    if extra:
        data.update(extra)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def save_plan_csv(path, plan, names):
    plan = np.asarray(plan, dtype=np.float64)
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(["subject"] + [f"day_{d + 1}" for d in range(N_DAYS)])
        for name, row in zip(names, plan):
            w.writerow([name] + [int(v) for v in np.rint(row * 60.0)])
