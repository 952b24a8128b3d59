"""Glue helpers exposed for CLI and integration harnesses."""

from .io import (
    InputEmpty,
    InputError,
    InputUnavailable,
    load_config,
    load_day_budget,
    load_subjects,
    validate_inputs,
)
from .pipeline import (
    assemble_data,
    build_arg_parser,
    build_params,
    load_and_run,
    main,
    run_pipeline,
)
from .report import plan_to_frame, render_daily_totals, render_plan, render_report

__all__ = [
    "InputEmpty",
    "InputError",
    "InputUnavailable",
    "assemble_data",
    "build_arg_parser",
    "build_params",
    "load_and_run",
    "load_config",
    "load_day_budget",
    "load_subjects",
    "main",
    "plan_to_frame",
    "render_daily_totals",
    "render_plan",
    "render_report",
    "run_pipeline",
    "validate_inputs",
]
