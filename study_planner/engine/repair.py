import numpy as np
from numba import njit


@njit(cache=True)
def repair_day(plan, day, budget):
    """Rescale one day of ``plan`` in place so its total fits ``budget[day]``.

    Feasible days are left untouched, so repeated calls are no-ops.
    """

    n = plan.shape[0]
    total = 0.0
    for i in range(n):
        total += plan[i, day]
    limit = budget[day]
    if total > limit:
        scale = limit / total
        for i in range(n):
            plan[i, day] *= scale


@njit(cache=True)
def repair_plan(plan, budget):
    """Apply :func:`repair_day` to every day of ``plan``."""

    for d in range(plan.shape[1]):
        repair_day(plan, d, budget)


def day_totals(plan) -> np.ndarray:
    return np.asarray(plan, dtype=np.float64).sum(axis=0)
