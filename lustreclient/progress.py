"""Stage progress for the installer workflow using the Rich library.

In interactive terminals a transient progress bar advances through the
workflow stages. In non-interactive terminals (cloud-init, SSM, CI) each
stage is logged instead.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Callable, Iterator, List, Optional

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)

if TYPE_CHECKING:
    from logging import Logger

AdvanceStageFunc = Callable[..., None]

WORKFLOW_STAGES = [
    "Detecting system",
    "Checking existing installation",
    "Resolving compatibility",
    "Installing Lustre client",
    "Verifying installation",
    "Checking file system reachability",
]


def is_interactive_terminal() -> bool:
    """Detect if running in an interactive terminal."""
    console = Console()
    return console.is_terminal


@contextmanager
def create_stage_progress(
    stages: List[str],
    logger: Optional["Logger"] = None,
    transient: bool = True,
) -> Iterator[AdvanceStageFunc]:
    """Context manager that walks through a sequence of named stages.

    Args:
        stages: Stage names in the order they run.
        logger: Logger used for stage messages in non-interactive mode.
        transient: If True, the progress bar is cleared when complete.

    Yields:
        advance_stage(stage_name=None): moves to the next stage, optionally
        overriding its description.
    """
    if not stages:
        def noop_advance(stage_name: Optional[str] = None) -> None:
            pass

        yield noop_advance
        return

    if not is_interactive_terminal():
        current_stage_idx = 0

        if logger is not None:
            logger.verbose(f"Stage 1/{len(stages)}: {stages[0]}...")

        def advance_stage_noninteractive(stage_name: Optional[str] = None) -> None:
            nonlocal current_stage_idx
            current_stage_idx += 1
            if current_stage_idx < len(stages) and logger is not None:
                desc = stage_name if stage_name else stages[current_stage_idx]
                logger.verbose(f"Stage {current_stage_idx + 1}/{len(stages)}: {desc}...")

        yield advance_stage_noninteractive
        return

    columns = [
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TextColumn("{task.completed}/{task.total}"),
        TimeElapsedColumn(),
    ]

    progress = Progress(*columns, transient=transient)
    task_id: TaskID = TaskID(0)
    current_stage_idx = 0

    try:
        progress.start()
        task_id = progress.add_task(stages[0], total=len(stages), completed=1)

        def advance_stage_interactive(stage_name: Optional[str] = None) -> None:
            nonlocal current_stage_idx
            current_stage_idx += 1
            if current_stage_idx < len(stages):
                desc = stage_name if stage_name else stages[current_stage_idx]
                progress.update(task_id, advance=1, description=desc)

        yield advance_stage_interactive
    finally:
        progress.stop()


__all__ = [
    "WORKFLOW_STAGES",
    "is_interactive_terminal",
    "create_stage_progress",
]
