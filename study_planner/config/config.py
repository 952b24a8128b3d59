from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .enums import F_SUBJ, N_DAYS

# Simple parameter defaults (extend freely)
DEFAULTS = {
    "iters": 10000000,
    "log_period": 100,
    "sa_temp0": 1000.0,
    "sa_cooling": 0.999998,
    "perturb_width": 0.15,    # half-width of the single-cell perturbation (hours)
    "plateau_divisor": 10.0,  # post-plateau marginal rate = pre-plateau rate / divisor
}


@dataclass(frozen=True, eq=False)
class RunConfig:
    """Immutable problem description shared by scoring, repair and search."""

    subjects: np.ndarray
    names: Tuple[str, ...]
    day_budget: np.ndarray
    plateau_divisor: float = 10.0

    def __post_init__(self) -> None:
        subjects = np.array(self.subjects, dtype=np.float64)
        budget = np.array(self.day_budget, dtype=np.float64)
        if subjects.ndim != 2 or subjects.shape[1] != F_SUBJ:
            raise ValueError("subjects must have shape (n, F_SUBJ)")
        if budget.shape != (N_DAYS,):
            raise ValueError("day_budget must have shape (N_DAYS,)")
        if len(self.names) != subjects.shape[0]:
            raise ValueError("names must match the number of subjects")
        subjects.setflags(write=False)
        budget.setflags(write=False)
        object.__setattr__(self, "subjects", subjects)
        object.__setattr__(self, "day_budget", budget)
        object.__setattr__(self, "names", tuple(str(n) for n in self.names))
        object.__setattr__(self, "plateau_divisor", float(self.plateau_divisor))

    @property
    def n_subjects(self) -> int:
        return int(self.subjects.shape[0])
