import numpy as np
from ..config.config import RunConfig
from ..config.enums import *

def generate_data(n_subjects=6, daily_hours=3.0, plateau_divisor=10.0, seed=0):
    rng = np.random.default_rng(seed)

    subjects = np.zeros((n_subjects, F_SUBJ), dtype=np.float64)
    # weights 1..3, min session 0..1h, plateau 0.5..2h beyond the min session
    subjects[:, SUBJ_WEIGHT] = rng.uniform(1.0, 3.0, size=n_subjects)
    subjects[:, SUBJ_MIN_TIME] = rng.uniform(0.0, 1.0, size=n_subjects)
    subjects[:, SUBJ_PLATEAU] = subjects[:, SUBJ_MIN_TIME] + rng.uniform(0.5, 2.0, size=n_subjects)

    names = [f"SUBJECT_{i + 1}" for i in range(n_subjects)]

    # lighter weekend by default
    day_budget = np.full(N_DAYS, float(daily_hours), dtype=np.float64)
    day_budget[5:] = 0.5 * daily_hours

    return RunConfig(
        subjects=subjects,
        names=tuple(names),
        day_budget=day_budget,
        plateau_divisor=plateau_divisor,
    )
