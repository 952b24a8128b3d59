"""Entry point delegating to the study planner glue pipeline CLI."""

from study_planner.glue.pipeline import main as pipeline_main


def main() -> None:
    pipeline_main()


if __name__ == "__main__":
    main()
