"""Input helpers for the command-line glue layer.

Subject tables and day budgets are plain whitespace-separated text, read token
by token until the end of the stream or the first token that does not parse.
Every helper accepts either a filesystem path or an already open text stream.
Failures are reported through :class:`InputUnavailable` (the stream could not
be read) and :class:`InputEmpty` (nothing usable was found), both raised before
any search state exists.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Tuple

import numpy as np

from ..config.enums import (
    F_SUBJ,
    N_DAYS,
    SUBJ_MIN_TIME,
    SUBJ_PLATEAU,
    SUBJ_WEIGHT,
)


class InputError(ValueError):
    """Base class for problems detected while reading planner inputs."""


class InputUnavailable(InputError):
    """A required input stream could not be opened or read."""


class InputEmpty(InputError):
    """An input stream was read but yielded zero records."""


def load_config(path_yaml: Path) -> Dict:
    """Read a YAML (or JSON) configuration file.

    Parameters
    ----------
    path_yaml:
        Path to the configuration file.

    Returns
    -------
    dict
        Parsed configuration dictionary.  Empty files resolve to ``{}``.
    """

    import json

    import yaml

    path = Path(path_yaml)
    if not path.exists():
        raise FileNotFoundError(path)

    text = path.read_text(encoding="utf-8").strip()
    if not text:
        return {}

    if path.suffix.lower() == ".json":
        cfg = json.loads(text)
    else:
        try:
            cfg = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ValueError(f"invalid configuration file {path}: {exc}") from exc
    if cfg is None:
        return {}
    if not isinstance(cfg, dict):
        raise ValueError(f"configuration must be a mapping: {path}")
    return cfg


def _read_tokens(source, label: str) -> List[str]:
    """Return whitespace-separated tokens from a path or text stream."""

    if hasattr(source, "read"):
        try:
            text = source.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise InputUnavailable(f"could not read {label} stream: {exc}") from exc
    else:
        path = Path(source)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise InputUnavailable(f"could not open {label} file {path}: {exc}") from exc
    return text.split()


def _parse_float(token: str):
    try:
        val = float(token)
    except ValueError:
        return None
    if not np.isfinite(val):
        return None
    return val


def load_subjects(source) -> Tuple[np.ndarray, List[str]]:
    """Load ``weight min_time plateau name`` records.

    Reading stops at the first record whose numeric fields do not parse; a
    trailing partial record is ignored.
    """

    tokens = _read_tokens(source, "subject table")

    rows = []
    names = []
    for start in range(0, len(tokens) - F_SUBJ, F_SUBJ + 1):
        vals = [_parse_float(tok) for tok in tokens[start : start + F_SUBJ]]
        if any(v is None for v in vals):
            break
        row = np.zeros(F_SUBJ, dtype=np.float64)
        row[SUBJ_WEIGHT] = vals[0]
        row[SUBJ_MIN_TIME] = vals[1]
        row[SUBJ_PLATEAU] = vals[2]
        rows.append(row)
        names.append(tokens[start + F_SUBJ])

    if not rows:
        raise InputEmpty("no subjects loaded from the subject table")

    return np.vstack(rows), names


def load_day_budget(source) -> np.ndarray:
    """Load per-day hour budgets, padded to a full week.

    Fewer than ``N_DAYS`` values are padded by repeating the last one; extra
    values are ignored.
    """

    tokens = _read_tokens(source, "day budget")

    values = []
    for tok in tokens:
        val = _parse_float(tok)
        if val is None:
            break
        values.append(val)

    if not values:
        raise InputEmpty("no time limits loaded from the day budget")

    while len(values) < N_DAYS:
        values.append(values[-1])

    return np.asarray(values[:N_DAYS], dtype=np.float64)


def validate_inputs(subjects: np.ndarray, day_budget: np.ndarray) -> None:
    """Run lightweight value checks on the loaded inputs.

    Array shapes are checked when the :class:`RunConfig` is built.
    """

    subjects = np.asarray(subjects)
    day_budget = np.asarray(day_budget)

    weight = subjects[:, SUBJ_WEIGHT]
    min_time = subjects[:, SUBJ_MIN_TIME]
    plateau = subjects[:, SUBJ_PLATEAU]

    if np.any(weight <= 0):
        raise ValueError("subject weights must be > 0")
    if np.any(min_time < 0):
        raise ValueError("subject min times must be >= 0")
    if np.any(plateau <= min_time):
        raise ValueError("subject plateaus must exceed their min times")
    if np.any(day_budget < 0):
        raise ValueError("day budgets must be >= 0")


__all__ = [
    "InputEmpty",
    "InputError",
    "InputUnavailable",
    "load_config",
    "load_day_budget",
    "load_subjects",
    "validate_inputs",
]
