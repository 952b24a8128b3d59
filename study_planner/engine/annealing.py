"""Simulated annealing over weekly study allocations."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .acceptance import accept_solution
from .repair import repair_day, repair_plan
from .utility import plan_score
from ..config.enums import (
    N_DAYS,
    STATUS_ACCEPT,
    STATUS_BEST,
    STATUS_IMPROVE,
    STATUS_REJECT,
)


@dataclass
class SearchState:
    """Mutable search state owned by a single :func:`run_annealing` call."""

    current: np.ndarray
    current_score: float
    best: np.ndarray
    best_score: float
    temperature: float
    iteration: int = 0


def init_search_state(run_cfg, params, rng) -> SearchState:
    """Draw a random feasible plan and seed current/best with it."""

    current = rng.random((run_cfg.n_subjects, N_DAYS))
    repair_plan(current, run_cfg.day_budget)
    score = float(plan_score(run_cfg.subjects, current, run_cfg.plateau_divisor))
    return SearchState(
        current=current,
        current_score=score,
        best=current.copy(),
        best_score=score,
        temperature=float(params["sa_temp0"]),
    )


def anneal_step(state, run_cfg, rng, perturb_width, cooling):
    """Perturb one cell, repair its day, then accept or reject the candidate.

    Returns the acceptance status of the move.
    """

    cand = state.current.copy()
    task_idx = int(rng.integers(run_cfg.n_subjects))
    day_idx = int(rng.integers(N_DAYS))

    cand[task_idx, day_idx] += rng.uniform(-perturb_width, perturb_width)
    if cand[task_idx, day_idx] < 0.0:
        cand[task_idx, day_idx] = 0.0

    repair_day(cand, day_idx, run_cfg.day_budget)

    new_score = float(plan_score(run_cfg.subjects, cand, run_cfg.plateau_divisor))
    prev_score = state.current_score
    status = STATUS_REJECT

    if accept_solution(prev_score, new_score, state.temperature, rng):
        state.current, state.current_score = cand, new_score
        if new_score > state.best_score:
            state.best = cand.copy()
            state.best_score = new_score
            status = STATUS_BEST
        elif new_score > prev_score:
            status = STATUS_IMPROVE
        else:
            status = STATUS_ACCEPT

    # cooling
    state.temperature *= cooling
    state.iteration += 1
    return status


def run_annealing(run_cfg, params, metrics, rng=None):
    """Run the fixed-budget annealing loop and return the best plan found."""

    if rng is None:
        rng = np.random.default_rng()

    iters = int(params.get("iters", 0))
    log_period = max(1, int(params.get("log_period", 100)))
    perturb_width = float(params.get("perturb_width", 0.15))
    cooling = float(params.get("sa_cooling", 0.999998))

    state = init_search_state(run_cfg, params, rng)

    for it in range(iters):
        status = anneal_step(state, run_cfg, rng, perturb_width, cooling)

        # logging
        if (it % log_period) == 0 or it == iters - 1:
            metrics.append(
                it,
                state.current_score,
                state.best_score,
                state.temperature,
                status=status,
            )

    return {
        "plan": state.best,
        "best_score": state.best_score,
        "current_score": state.current_score,
        "temperature": state.temperature,
        "iterations": state.iteration,
    }
