"""
Plan execution.

PlanExecutor runs a Plan's steps in order against a package manager. A dry
run only logs the commands each step would run. A live run stops at the
first failed step: later steps are skipped, except best-effort cache
cleaning, and the failure is raised as a typed installer error.
"""

import logging

from lustreclient.error_messages import format_error
from lustreclient.errors import CommandExecutionError, InstallationFailedError, NoMatchingPackageError
from lustreclient.provisioning.plan import (
    ExecutionResult,
    PackageUnavailable,
    Plan,
    StepOutcome,
    StepStatus,
)


class PlanExecutor:

    def __init__(self, package_manager, logger: logging.Logger):
        self.package_manager = package_manager
        self.logger = logger

    def execute(self, plan: Plan, dry_run: bool = False) -> ExecutionResult:
        """
        Run every step of a plan.

        Args:
            plan: Steps to run.
            dry_run: Log the commands instead of running them.

        Returns:
            ExecutionResult with one outcome per step.

        Raises:
            NoMatchingPackageError: If the package availability guard fails.
            InstallationFailedError: If any other required step fails.
        """
        result = ExecutionResult(dry_run=dry_run)

        if dry_run:
            for step in plan:
                for command in self.package_manager.render(step):
                    self.logger.info(f"Dry run: {command}")
                result.outcomes.append(StepOutcome(step, StepStatus.SUCCEEDED))
            return result

        failure = None
        for step in plan:
            if failure is not None and not step.best_effort:
                self.logger.debug(f"Skipping step after failure: {step.describe()}")
                result.outcomes.append(StepOutcome(step, StepStatus.SKIPPED))
                continue

            self.logger.verbose(f"Running step: {step.describe()}")
            try:
                step.apply(self.package_manager)
            except PackageUnavailable as e:
                result.outcomes.append(StepOutcome(step, StepStatus.FAILED, reason=str(e)))
                failure = NoMatchingPackageError(
                    format_error('NO_MATCHING_PACKAGE', kernel=e.kernel, package=e.name),
                    package=e.name,
                    kernel=e.kernel,
                )
                continue
            except CommandExecutionError as e:
                reason = e.context.get("stderr") or e.error.message
                result.outcomes.append(StepOutcome(step, StepStatus.FAILED, reason=reason))
                if step.best_effort:
                    self.logger.warning(f"Unable to {step.describe()}: {reason}")
                    continue
                if failure is None:
                    failure = InstallationFailedError(
                        format_error('INSTALL_FAILED', step=step.describe()),
                        step=step.describe(),
                        reason=reason,
                    )
                continue

            result.outcomes.append(StepOutcome(step, StepStatus.SUCCEEDED))

        if failure is not None:
            raise failure
        return result
