"""
Provisioning plan types.

A Plan is an ordered, immutable tuple of Steps built once per run by the
ProvisioningPlanner and executed once by the PlanExecutor. Each step knows
how to apply itself to a package manager and how to describe itself in log
messages. The commands a step turns into are owned by the package manager,
so dry-run output and live execution come from the same place.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Step:
    """Base class for provisioning steps."""

    # Cache maintenance is best effort and still runs after a failed step
    best_effort = False

    def apply(self, package_manager) -> None:
        raise NotImplementedError

    def describe(self) -> str:
        return type(self).__name__


@dataclass(frozen=True)
class EnableUnsupportedModules(Step):
    config_file: str

    def apply(self, package_manager) -> None:
        package_manager.enable_unsupported_modules(self.config_file)

    def describe(self) -> str:
        return f"enable unsupported kernel modules in {self.config_file}"


@dataclass(frozen=True)
class AddSigningKey(Step):
    url: str

    def apply(self, package_manager) -> None:
        package_manager.add_signing_key(self.url)

    def describe(self) -> str:
        return f"import signing key {self.url}"


@dataclass(frozen=True)
class AddRepository(Step):
    url: str
    label: str
    suite: Optional[str] = None

    def apply(self, package_manager) -> None:
        package_manager.add_repository(self.url, self.label, self.suite)

    def describe(self) -> str:
        return f"add repository {self.label} from {self.url}"


@dataclass(frozen=True)
class RewriteRepository(Step):
    """Point an installed repository file at a different repository revision."""
    repo_file: str
    old_token: str
    new_token: str

    def apply(self, package_manager) -> None:
        package_manager.rewrite_repository_revision(self.repo_file, self.old_token, self.new_token)

    def describe(self) -> str:
        return f"rewrite repository revision {self.old_token} -> {self.new_token} in {self.repo_file}"


@dataclass(frozen=True)
class RefreshCache(Step):

    def apply(self, package_manager) -> None:
        package_manager.refresh_cache()

    def describe(self) -> str:
        return "refresh package metadata"


@dataclass(frozen=True)
class CheckPackageAvailable(Step):
    """Guard that fails the plan when the repository does not carry a package."""
    name: str
    kernel: Optional[str] = None

    def apply(self, package_manager) -> None:
        if not package_manager.package_available(self.name):
            raise PackageUnavailable(self.name, self.kernel)

    def describe(self) -> str:
        return f"check that {self.name} is available"


@dataclass(frozen=True)
class InstallPackages(Step):
    names: Tuple[str, ...]
    upgrade: bool = False

    def apply(self, package_manager) -> None:
        package_manager.install(self.names, upgrade=self.upgrade)

    def describe(self) -> str:
        verb = "upgrade" if self.upgrade else "install"
        return f"{verb} {' '.join(self.names)}"


@dataclass(frozen=True)
class RemovePackages(Step):
    names: Tuple[str, ...]

    def apply(self, package_manager) -> None:
        package_manager.remove(self.names)

    def describe(self) -> str:
        return f"remove {' '.join(self.names)}"


@dataclass(frozen=True)
class AutoRemove(Step):

    def apply(self, package_manager) -> None:
        package_manager.autoremove()

    def describe(self) -> str:
        return "remove unneeded dependencies"


@dataclass(frozen=True)
class CleanCache(Step):
    best_effort = True

    def apply(self, package_manager) -> None:
        package_manager.clean_cache()

    def describe(self) -> str:
        return "clean package cache"


class PackageUnavailable(Exception):
    """Raised by CheckPackageAvailable when the package is missing from the repository."""

    def __init__(self, name: str, kernel: Optional[str] = None):
        self.name = name
        self.kernel = kernel
        super().__init__(f"Package {name} is not available")


@dataclass(frozen=True)
class Plan:
    steps: Tuple[Step, ...] = ()

    def __iter__(self):
        return iter(self.steps)

    def __len__(self):
        return len(self.steps)

    def steps_of(self, step_type) -> List[Step]:
        return [step for step in self.steps if isinstance(step, step_type)]


class StepStatus(Enum):
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass
class StepOutcome:
    step: Step
    status: StepStatus
    reason: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.status == StepStatus.SUCCEEDED


@dataclass
class ExecutionResult:
    """Per-step outcomes of one plan execution.

    Attributes:
        outcomes: One StepOutcome per plan step, in plan order.
        dry_run: Whether the plan was only logged.
    """
    outcomes: List[StepOutcome] = field(default_factory=list)
    dry_run: bool = False

    @property
    def success(self) -> bool:
        return all(o.status != StepStatus.FAILED or o.step.best_effort for o in self.outcomes)

    @property
    def failed_outcome(self) -> Optional[StepOutcome]:
        for outcome in self.outcomes:
            if outcome.status == StepStatus.FAILED:
                return outcome
        return None
