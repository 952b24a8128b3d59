"""Learning-utility model: hours per subject and day to a single score."""

from __future__ import annotations

import numpy as np
from numba import njit

from ..config.enums import SUBJ_MIN_TIME, SUBJ_PLATEAU, SUBJ_WEIGHT


@njit(cache=True)
def activation(weight, min_time, plateau, hours, plateau_divisor=10.0):
    """Utility earned by studying one subject for ``hours`` on a single day.

    Nothing is earned below ``min_time``. Between ``min_time`` and ``plateau``
    the ramp ``weight / plateau * hours`` is measured from zero hours, not from
    ``min_time``, so the curve jumps at ``min_time`` unless that point happens
    to lie on the ramp. Past ``plateau`` the marginal rate is divided by
    ``plateau_divisor``.
    """

    if hours < min_time:
        return 0.0
    if hours < plateau:
        return weight / plateau * hours
    return weight + (hours - plateau) * weight / plateau / plateau_divisor


@njit(cache=True)
def _sigmoid(x):
    return 1.0 / (1.0 + np.exp(-x))


@njit(cache=True)
def balance_multiplier(subjects, plan):
    """Return ``1 + mean(sigmoid(weighted hours per subject))``, in ``(1, 2)``."""

    n, n_days = plan.shape
    if n == 0:
        return 1.0
    mult = 1.0
    for i in range(n):
        weight = subjects[i, SUBJ_WEIGHT]
        task_total = 0.0
        for d in range(n_days):
            task_total += plan[i, d] * weight
        mult += _sigmoid(task_total) / n
    return mult


@njit(cache=True)
def plan_score(subjects, plan, plateau_divisor=10.0):
    """Objective maximised by the search: summed activation times balance."""

    n, n_days = plan.shape
    if n == 0:
        return 0.0
    score = 0.0
    for i in range(n):
        weight = subjects[i, SUBJ_WEIGHT]
        min_time = subjects[i, SUBJ_MIN_TIME]
        plateau = subjects[i, SUBJ_PLATEAU]
        for d in range(n_days):
            score += activation(weight, min_time, plateau, plan[i, d], plateau_divisor)
    return score * balance_multiplier(subjects, plan)


def score_plan(run_cfg, plan) -> float:
    """Score ``plan`` against the subjects and divisor held by ``run_cfg``."""

    return float(
        plan_score(
            run_cfg.subjects,
            np.asarray(plan, dtype=np.float64),
            run_cfg.plateau_divisor,
        )
    )
