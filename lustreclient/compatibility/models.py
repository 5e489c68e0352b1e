"""
Compatibility rule types.

A CompatibilityRule says, for one distribution family, which OS versions and
kernels it covers, which repository revision serves them and what the
installer does about it. Rules are static data; see table.py.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from lustreclient.compatibility.versions import has_prefix, version_at_least
from lustreclient.environment.os_detect import Arch, DistroFamily, SystemProfile


class RuleAction(Enum):
    PROCEED = "proceed"
    REWRITE_REPO_THEN_PROCEED = "rewrite_repo_then_proceed"
    REJECT = "reject"


@dataclass(frozen=True)
class VersionMatch:
    """Matches an OS version exactly, against a set, or against a regular expression."""
    exact: Optional[str] = None
    one_of: Tuple[str, ...] = ()
    pattern: Optional[str] = None

    @classmethod
    def exactly(cls, version: str) -> "VersionMatch":
        return cls(exact=version)

    @classmethod
    def any_of(cls, *versions: str) -> "VersionMatch":
        return cls(one_of=tuple(versions))

    @classmethod
    def matching(cls, pattern: str) -> "VersionMatch":
        return cls(pattern=pattern)

    def matches(self, version: str) -> bool:
        if self.exact is not None:
            return version == self.exact
        if self.one_of:
            return version in self.one_of
        if self.pattern is not None:
            return re.match(self.pattern, version) is not None
        return False


@dataclass(frozen=True)
class KernelMatch:
    """
    Matches a kernel release.

    A prefix match requires the kernel's leading version components to equal
    the prefix. A threshold match requires the kernel to be at least the
    minimum. With neither set every kernel matches.
    """
    prefix: Optional[str] = None
    minimum: Optional[str] = None

    @classmethod
    def starting_with(cls, prefix: str) -> "KernelMatch":
        return cls(prefix=prefix)

    @classmethod
    def at_least(cls, minimum: str) -> "KernelMatch":
        return cls(minimum=minimum)

    @classmethod
    def any(cls) -> "KernelMatch":
        return cls()

    def matches(self, kernel: str) -> bool:
        if self.prefix is not None:
            return has_prefix(kernel, self.prefix)
        if self.minimum is not None:
            return version_at_least(kernel, self.minimum)
        return True

    def describe(self) -> str:
        if self.prefix is not None:
            return f"kernel {self.prefix}.*"
        if self.minimum is not None:
            return f"kernel >= {self.minimum}"
        return "any kernel"


@dataclass(frozen=True)
class CompatibilityRule:
    """
    One row of the compatibility table.

    Attributes:
        distro_family: Family the rule belongs to
        version_match: OS versions the rule covers
        kernel_match: Kernels the rule accepts
        action: What to do when the rule is selected
        repo_revision: Repository revision serving the kernel (Ubuntu codename,
            EL minor release, SLES service pack), or None for the default
        distro_ids: Restrict the rule to these distribution IDs
        arch: Restrict the rule to one architecture
        repo_token: Token in the installed repository file that names the
            revision, replaced by repo_revision on a rewrite
        migrate_from: Revision left behind by an older service pack; when the
            installed repository file still names it, the client is upgraded
            in place instead of installed
        reason: Message for hard rejects
    """
    distro_family: DistroFamily
    version_match: VersionMatch
    kernel_match: KernelMatch
    action: RuleAction = RuleAction.PROCEED
    repo_revision: Optional[str] = None
    distro_ids: Tuple[str, ...] = ()
    arch: Optional[Arch] = None
    repo_token: Optional[str] = None
    migrate_from: Optional[str] = None
    reason: Optional[str] = None

    @property
    def is_reject(self) -> bool:
        return self.action == RuleAction.REJECT

    @property
    def rewrites_repository(self) -> bool:
        return self.action == RuleAction.REWRITE_REPO_THEN_PROCEED

    def applies_to(self, profile: SystemProfile) -> bool:
        """Check the OS version, distribution ID and architecture restrictions."""
        if profile.distro_family != self.distro_family:
            return False
        if not self.version_match.matches(profile.os_version):
            return False
        if self.distro_ids and profile.distro_id not in self.distro_ids:
            return False
        if self.arch is not None and profile.arch != self.arch:
            return False
        return True
