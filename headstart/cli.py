"""headstart command-line entry point.

Usage::

    headstart                              # interactive
    headstart --answers answers.json -o ~/code
    headstart --answers answers.json --dry-run
"""

from __future__ import annotations

import asyncio
import sys
import time
from pathlib import Path
from typing import Optional

from rich.panel import Panel

from headstart.answers import Answers, Deployment
from headstart.catalog import catalog_for
from headstart.config import Config
from headstart.errors import CatalogError, ValidationError
from headstart.executor import Executor, ExecutionResult
from headstart.planner import Plan, build_plan
from headstart.prompts import ask_answers, load_answers
from headstart.reporter import ProgressSink, RichReporter
from headstart.utils import (
    console,
    format_duration,
    print_error,
    print_info,
    print_success,
    print_table,
)

EXIT_OK = 0
EXIT_ACTION_FAILED = 1
EXIT_INVALID = 2
EXIT_INTERRUPTED = 130


def print_plan(plan: Plan) -> None:
    """Print the plan as a table without running anything."""
    rows = [
        (str(index), str(int(step.phase)), step.feature, step.label, step.action.describe())
        for index, step in enumerate(plan, start=1)
    ]
    print_table(rows, ["#", "Phase", "Feature", "Step", "Runs"], title=f"Plan for {plan.app_name}")


async def execute_plan(
    plan: Plan,
    answers: Answers,
    config: Config,
    sink: Optional[ProgressSink] = None,
    executor: Optional[Executor] = None,
) -> int:
    """Run *plan* and report the outcome; returns the process exit code."""
    executor = executor or Executor(timeout=config.command_timeout)
    sink = sink or RichReporter()

    console.print("[green]Creating your application...[/green]")
    started = time.monotonic()
    result: ExecutionResult = await executor.execute(plan, sink)
    elapsed = format_duration(time.monotonic() - started)

    if not result.success:
        error = result.error
        feature = error.feature if error else "unknown step"
        message = error.message if error else "plan did not complete"
        print_error(
            f"Setup failed at {feature!r} after {result.completed}/{result.total} steps "
            f"({elapsed}): {message}"
        )
        return EXIT_ACTION_FAILED

    print_success(f"Application setup complete in {elapsed}! Enjoy building your app!")
    if answers.deployment is not Deployment.NONE:
        print_info(
            f"Remember to set up your project on {answers.deployment.value} "
            "after pushing your code!"
        )
    return EXIT_OK


def run_cli(argv: Optional[list[str]] = None) -> int:
    """Parse *argv*, build the plan and run it.  Returns the exit code."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="headstart",
        description="headstart -- scaffold a frontend or backend project in one go",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  headstart\n"
            "  headstart --answers answers.json --output ~/code\n"
            "  headstart --answers answers.json --dry-run\n"
        ),
    )
    parser.add_argument(
        "--answers", "-a",
        default=None,
        help="JSON file with the answers; skips the interactive questions",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Directory the project is created in (default: current directory)",
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="JSON configuration file (default: HEADSTART_* environment variables)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the plan without running it",
    )

    args = parser.parse_args(argv)

    try:
        config = Config.load(Path(args.config)) if args.config else Config.from_env()
        if args.output:
            config = config.model_copy(update={"output_dir": Path(args.output)})

        answers = load_answers(args.answers) if args.answers else ask_answers()
        plan = build_plan(answers, catalog_for(answers.project_kind), config)
    except (ValidationError, ValueError) as exc:
        print_error(f"Error: {exc}")
        return EXIT_INVALID
    except CatalogError as exc:
        print_error(f"Internal error: {exc}")
        return EXIT_INVALID
    except OSError as exc:
        print_error(f"Error: {exc}")
        return EXIT_INVALID
    except KeyboardInterrupt:
        print_error("Aborted.")
        return EXIT_INTERRUPTED

    if args.dry_run:
        print_plan(plan)
        return EXIT_OK

    console.print(
        Panel(
            f"Project : {plan.app_name}\n"
            f"Location: {plan.project_root.resolve()}\n"
            f"Steps   : {len(plan)}",
            title="[bold]headstart[/bold]",
            border_style="bright_cyan",
        )
    )
    plan.output_dir.mkdir(parents=True, exist_ok=True)
    try:
        return asyncio.run(execute_plan(plan, answers, config))
    except KeyboardInterrupt:
        print_error("Aborted.")
        return EXIT_INTERRUPTED


def main() -> None:
    """Console-script entry point."""
    sys.exit(run_cli())


if __name__ == "__main__":
    main()
