"""
Provisioning planner.

Turns a SystemProfile and its resolved CompatibilityRule into the ordered
steps that install the Lustre client on that host. Building a plan only
reads the host (SLES repository state); it never changes it.
"""

import logging
from typing import List, Optional

from lustreclient.compatibility.models import CompatibilityRule
from lustreclient.config import (
    AMAZON_LINUX_EXTRAS_TOPIC,
    LUSTRE_CLIENT_PACKAGE,
    REPO_BASE_URL,
    REPO_LABEL,
    RPM_CLIENT_PACKAGES,
    RPM_KEY_URL,
    RPM_KEY_URL_CN,
    SLES_KEY_URL,
    SLES_KMP_PACKAGE,
    SLES_REPO_URL,
    SLES_UNSUPPORTED_MODULES_CONF,
    UBUNTU_KEY_URL,
    UBUNTU_MODULE_PACKAGE_PREFIX,
    UBUNTU_REPO_URL,
    YUM_REPO_FILE,
    ZYPPER_REPO_FILE,
)
from lustreclient.environment.os_detect import Arch, DistroFamily, SystemProfile
from lustreclient.error_messages import format_error
from lustreclient.errors import ErrorCode, UnsupportedCombinationError
from lustreclient.provisioning.plan import (
    AddRepository,
    AddSigningKey,
    CheckPackageAvailable,
    CleanCache,
    EnableUnsupportedModules,
    InstallPackages,
    Plan,
    RefreshCache,
    RewriteRepository,
    Step,
)


class ProvisioningPlanner:
    """
    Builds the provisioning plan for one host.

    Args:
        host: HostInterface used to inspect existing repository files.
        logger: Optional logger for planning decisions.
    """

    def __init__(self, host, logger: Optional[logging.Logger] = None):
        self.host = host
        self.logger = logger or logging.getLogger(__name__)

    def build_plan(self, profile: SystemProfile, rule: CompatibilityRule) -> Plan:
        if rule.is_reject:
            raise UnsupportedCombinationError(
                format_error('HARD_REJECTED', reason=rule.reason),
                distro=profile.distro_name,
                version=profile.os_version,
                kernel=profile.kernel_version,
                arch=profile.arch.value,
                code=ErrorCode.HARD_REJECTED,
            )

        builders = {
            DistroFamily.DEBIAN: self._debian_steps,
            DistroFamily.AMAZON_LINUX: self._amazon_steps,
            DistroFamily.ENTERPRISE_LINUX: self._enterprise_linux_steps,
            DistroFamily.SUSE: self._suse_steps,
        }
        builder = builders.get(profile.distro_family)
        if builder is None:
            raise UnsupportedCombinationError(
                format_error('UNSUPPORTED_DISTRO', name=profile.distro_name),
                distro=profile.distro_name,
                version=profile.os_version,
                code=ErrorCode.UNSUPPORTED_DISTRO,
            )

        # The final clean is best effort and still runs after a failed step
        plan = Plan(tuple(builder(profile, rule)) + (CleanCache(),))
        self.logger.debug(f"Provisioning plan: {[step.describe() for step in plan]}")
        return plan

    def _debian_steps(self, profile: SystemProfile, rule: CompatibilityRule) -> List[Step]:
        # Module packages are built per kernel, so the package name is the availability check
        package = f"{UBUNTU_MODULE_PACKAGE_PREFIX}{profile.kernel_version}"
        return [
            AddSigningKey(UBUNTU_KEY_URL),
            AddRepository(UBUNTU_REPO_URL, REPO_LABEL, suite=rule.repo_revision),
            RefreshCache(),
            CheckPackageAvailable(package, kernel=profile.kernel_version),
            InstallPackages((package,)),
        ]

    def _amazon_steps(self, profile: SystemProfile, rule: CompatibilityRule) -> List[Step]:
        if profile.os_version == "2":
            return [InstallPackages((AMAZON_LINUX_EXTRAS_TOPIC,))]
        return [InstallPackages((LUSTRE_CLIENT_PACKAGE,))]

    def _enterprise_linux_steps(self, profile: SystemProfile, rule: CompatibilityRule) -> List[Step]:
        major = profile.major_version
        if major == "7" and profile.arch == Arch.AARCH64:
            key_url = RPM_KEY_URL_CN
            repo_url = f"{REPO_BASE_URL}/centos/7/fsx-lustre-client.repo"
        else:
            key_url = RPM_KEY_URL
            repo_url = f"{REPO_BASE_URL}/el/{major}/fsx-lustre-client.repo"

        steps: List[Step] = [
            AddSigningKey(key_url),
            AddRepository(repo_url, REPO_LABEL),
        ]
        if rule.rewrites_repository:
            steps.append(RewriteRepository(YUM_REPO_FILE, rule.repo_token, rule.repo_revision))
            steps.append(CleanCache())
        else:
            self.logger.info(f"Kernel version {profile.kernel_version} meets the minimum requirement. "
                             f"Proceeding with installation.")
        steps.append(InstallPackages(RPM_CLIENT_PACKAGES))
        return steps

    def _suse_steps(self, profile: SystemProfile, rule: CompatibilityRule) -> List[Step]:
        migrating = bool(rule.migrate_from) and self.host.file_contains(ZYPPER_REPO_FILE, rule.migrate_from)

        steps: List[Step] = [
            EnableUnsupportedModules(SLES_UNSUPPORTED_MODULES_CONF),
            AddSigningKey(SLES_KEY_URL),
        ]

        if migrating:
            target = rule.repo_revision or rule.repo_token
            self.logger.info(f"Updating Lustre client for {profile.distro_name} {profile.os_version} "
                             f"(migrated from {rule.migrate_from})")
            steps.append(RewriteRepository(ZYPPER_REPO_FILE, rule.migrate_from, target))
            steps.append(RefreshCache())
            steps.append(InstallPackages((SLES_KMP_PACKAGE,), upgrade=True))
            return steps

        # zypper refuses to add a repository alias twice
        if not self.host.file_exists(ZYPPER_REPO_FILE):
            steps.append(AddRepository(SLES_REPO_URL, REPO_LABEL))
        if rule.rewrites_repository:
            steps.append(RewriteRepository(ZYPPER_REPO_FILE, rule.repo_token, rule.repo_revision))
        steps.append(RefreshCache())
        steps.append(InstallPackages((LUSTRE_CLIENT_PACKAGE,)))
        return steps
