"""Plan execution.

Runs a ``Plan`` one step at a time against the real environment, reporting
every step to a ``ProgressSink`` and stopping at the first failure.

The process working directory is never changed.  The scaffold step runs in
the plan's output directory and must leave the project root behind; every
later step runs inside that root.  Nothing is rolled back on failure: the
artefacts of completed steps stay on disk.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Awaitable, Callable, Optional

from headstart.catalog import Command, FileMutation
from headstart.errors import ActionExecutionError
from headstart.planner import Plan, PlanStep
from headstart.reporter import ProgressSink
from headstart.utils import run_command

CommandRunner = Callable[..., Awaitable[tuple[int, str, str]]]


class StepStatus(str, Enum):
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class StepOutcome:
    """Outcome of one executed step."""

    feature: str
    label: str
    status: StepStatus
    reason: str = ""


@dataclass
class ExecutionResult:
    """Result of a plan run.

    Terminal once every step succeeded or one failed; ``error`` holds the
    failure that stopped the run.
    """

    total: int
    outcomes: list[StepOutcome] = field(default_factory=list)
    error: Optional[ActionExecutionError] = None

    @property
    def completed(self) -> int:
        return sum(1 for o in self.outcomes if o.status is StepStatus.SUCCEEDED)

    @property
    def success(self) -> bool:
        return self.error is None and self.completed == self.total

    @property
    def failed_feature(self) -> Optional[str]:
        return self.error.feature if self.error else None


class Executor:
    """Sequential, fail-fast plan runner.

    Args:
        runner: Coroutine used to run commands; ``run_command`` by default.
            Called as ``runner(command, cwd=..., timeout=...)`` and must
            return ``(returncode, stdout, stderr)``.
        timeout: Optional per-command timeout in seconds.
    """

    def __init__(
        self,
        runner: Optional[CommandRunner] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self._runner = runner or run_command
        self.timeout = timeout

    async def execute(self, plan: Plan, sink: ProgressSink) -> ExecutionResult:
        """Run every step of *plan* in order, stopping at the first failure."""
        result = ExecutionResult(total=len(plan))
        sink.on_progress(0, result.total)

        for step in plan:
            sink.on_start(step.feature, step.label)
            try:
                await self._run_step(plan, step)
            except ActionExecutionError as exc:
                result.outcomes.append(
                    StepOutcome(step.feature, step.label, StepStatus.FAILED, exc.message)
                )
                result.error = exc
                sink.on_failure(step.feature, step.label, exc.message)
                return result

            result.outcomes.append(StepOutcome(step.feature, step.label, StepStatus.SUCCEEDED))
            sink.on_success(step.feature, step.label)
            sink.on_progress(result.completed, result.total)

        return result

    async def _run_step(self, plan: Plan, step: PlanStep) -> None:
        cwd = plan.output_dir if step.is_scaffold else plan.project_root
        try:
            if isinstance(step.action, Command):
                await self._run_command(step.feature, step.action, cwd)
            elif isinstance(step.action, FileMutation):
                await asyncio.to_thread(step.action.apply, cwd)
            else:
                raise ActionExecutionError(
                    step.feature, f"unsupported action {type(step.action).__name__}"
                )
        except (OSError, UnicodeError) as exc:
            raise ActionExecutionError(step.feature, str(exc)) from exc

        if step.is_scaffold and not plan.project_root.is_dir():
            raise ActionExecutionError(
                step.feature, f"project directory {plan.project_root} was not created"
            )

    async def _run_command(self, feature: str, action: Command, cwd: Path) -> None:
        returncode, _, stderr = await self._runner(
            action.command, cwd=cwd, timeout=self.timeout
        )
        if returncode != 0:
            message = f"`{action.command}` exited with code {returncode}"
            if stderr:
                message = f"{message}: {stderr}"
            raise ActionExecutionError(feature, message)
