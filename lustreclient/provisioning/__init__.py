"""
Provisioning plans: what to run on a host, and running it.

Public exports:
    Plan, Step and the concrete step types: The plan data model
    ExecutionResult, StepOutcome, StepStatus: Execution outcomes
    ProvisioningPlanner: Builds a Plan for a SystemProfile and rule
    PlanExecutor: Runs or dry-runs a Plan
"""

from lustreclient.provisioning.plan import (
    AddRepository,
    AddSigningKey,
    AutoRemove,
    CheckPackageAvailable,
    CleanCache,
    EnableUnsupportedModules,
    ExecutionResult,
    InstallPackages,
    PackageUnavailable,
    Plan,
    RefreshCache,
    RemovePackages,
    RewriteRepository,
    Step,
    StepOutcome,
    StepStatus,
)
from lustreclient.provisioning.planner import ProvisioningPlanner
from lustreclient.provisioning.executor import PlanExecutor

__all__ = [
    "AddRepository",
    "AddSigningKey",
    "AutoRemove",
    "CheckPackageAvailable",
    "CleanCache",
    "EnableUnsupportedModules",
    "ExecutionResult",
    "InstallPackages",
    "PackageUnavailable",
    "Plan",
    "RefreshCache",
    "RemovePackages",
    "RewriteRepository",
    "Step",
    "StepOutcome",
    "StepStatus",
    "ProvisioningPlanner",
    "PlanExecutor",
]
