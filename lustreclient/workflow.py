"""
End-to-end installer workflow.

    detect -> check existing installation -> resolve -> (uninstall) ->
    plan -> execute -> verify -> (reachability)

A healthy existing installation short-circuits to "nothing to do" whatever
the kernel. Otherwise the compatibility lookup runs before anything on the
host is changed, so a broken client on an unsupported host is left in place.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from lustreclient.compatibility import COMPATIBILITY_TABLE, CompatibilityRule, CompatibilityTable, resolve
from lustreclient.environment.os_detect import SystemProfile, detect_system
from lustreclient.errors import ErrorCode
from lustreclient.package_managers import package_manager_for
from lustreclient.progress import WORKFLOW_STAGES, create_stage_progress
from lustreclient.provisioning import ExecutionResult, PlanExecutor, ProvisioningPlanner
from lustreclient.reachability import ReachabilityChecker, ReachabilityResult
from lustreclient.uninstall import UninstallCoordinator
from lustreclient.utils import CommandExecutor
from lustreclient.verifier import InstallationVerifier, VerificationReport


class WorkflowOutcome(Enum):
    INSTALLED = "installed"
    ALREADY_INSTALLED = "already_installed"


@dataclass
class WorkflowResult:
    outcome: WorkflowOutcome
    profile: SystemProfile
    rule: Optional[CompatibilityRule] = None
    reinstalled: bool = False
    execution: Optional[ExecutionResult] = None
    verification: Optional[VerificationReport] = None
    reachability: Optional[ReachabilityResult] = None


class InstallerWorkflow:
    """
    Runs one installation on one host.

    Args:
        host: HostInterface implementation.
        logger: Installer logger.
        package_manager: Package manager to use. Chosen from the detected
            profile when not given.
        executor: CommandExecutor for the chosen package manager.
        table: Compatibility rules.
    """

    def __init__(self, host, logger: logging.Logger, package_manager=None,
                 executor: Optional[CommandExecutor] = None,
                 table: CompatibilityTable = COMPATIBILITY_TABLE):
        self.host = host
        self.logger = logger
        self.package_manager = package_manager
        self.executor = executor
        self.table = table
        self.verifier = InstallationVerifier(host, logger)

    def run(self, fsx_dns_name: Optional[str] = None, dry_run: bool = False) -> WorkflowResult:
        stages = WORKFLOW_STAGES if fsx_dns_name else WORKFLOW_STAGES[:-1]
        with create_stage_progress(stages, logger=self.logger) as advance_stage:
            profile = detect_system(self.host)
            self.logger.info(f"Detected OS: {profile.distro_name} {profile.os_version}")
            self.logger.info(f"Detected kernel version: {profile.kernel_version}")
            advance_stage()

            result = WorkflowResult(outcome=WorkflowOutcome.INSTALLED, profile=profile)
            broken = False
            if self.verifier.client_installed():
                self.logger.info("Lustre is already installed, checking if it is configured correctly...")
                if self.verifier.verify(dry_run=dry_run).passed:
                    self.logger.success("Lustre is installed and configured correctly, nothing to do.")
                    result.outcome = WorkflowOutcome.ALREADY_INSTALLED
                    if fsx_dns_name:
                        result.reachability = ReachabilityChecker(self.host, self.logger).check(fsx_dns_name, dry_run)
                    return result

                broken = True
            advance_stage()

            rule = resolve(profile, self.table, logger=self.logger)
            result.rule = rule
            package_manager = self._package_manager(profile)
            if broken:
                self.logger.info("Lustre is already installed but not configured correctly, "
                                 "uninstalling Lustre & restarting the installation")
                UninstallCoordinator(package_manager, self.logger).uninstall(profile, dry_run=dry_run)
                result.reinstalled = True
            advance_stage()

            self.logger.info(f"Installing Lustre client for {profile.distro_name} ...")
            plan = ProvisioningPlanner(self.host, self.logger).build_plan(profile, rule)
            result.execution = PlanExecutor(package_manager, self.logger).execute(plan, dry_run=dry_run)
            if not dry_run:
                self.logger.info("Lustre client installed, verifying installation...")
            advance_stage()

            report = self.verifier.verify(dry_run=dry_run)
            result.verification = report
            if dry_run and report.failure_reason == ErrorCode.TOOLING_MISSING:
                self.logger.info("Dry run: Lustre client is not installed, skipping module checks")
            else:
                self.verifier.raise_for_report(report)
            advance_stage()

            if fsx_dns_name:
                result.reachability = ReachabilityChecker(self.host, self.logger).check(fsx_dns_name, dry_run)
            return result

    def _package_manager(self, profile: SystemProfile):
        if self.package_manager is None:
            executor = self.executor or CommandExecutor(self.logger)
            self.package_manager = package_manager_for(profile, executor)
        return self.package_manager
