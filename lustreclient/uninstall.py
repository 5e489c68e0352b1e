"""
Removal of a broken Lustre client installation.

Removal is all or nothing: the first failed command stops the run with
UninstallFailedError rather than reinstalling over a half-removed client.
"""

import logging
from typing import List

from lustreclient.config import LUSTRE_CLIENT_PACKAGE, RPM_CLIENT_PACKAGES, UBUNTU_MODULE_PACKAGE_PREFIX
from lustreclient.environment.os_detect import DistroFamily, SystemProfile
from lustreclient.error_messages import format_error
from lustreclient.errors import CommandExecutionError, UninstallFailedError
from lustreclient.provisioning.plan import AutoRemove, CleanCache, RemovePackages, Step


def removal_steps(profile: SystemProfile) -> List[Step]:
    family = profile.distro_family
    if family == DistroFamily.DEBIAN:
        return [RemovePackages((f"{UBUNTU_MODULE_PACKAGE_PREFIX}*",)), AutoRemove()]
    if family == DistroFamily.AMAZON_LINUX and profile.os_version == "2023":
        return [RemovePackages((LUSTRE_CLIENT_PACKAGE,)), CleanCache()]
    if family in (DistroFamily.AMAZON_LINUX, DistroFamily.ENTERPRISE_LINUX):
        return [RemovePackages(RPM_CLIENT_PACKAGES), CleanCache()]
    if family == DistroFamily.SUSE:
        return [RemovePackages((f"{LUSTRE_CLIENT_PACKAGE}-*",)), CleanCache()]
    raise UninstallFailedError(
        format_error('UNINSTALL_FAILED'),
        reason=f"No uninstall procedure for {profile.distro_name or profile.distro_id}",
    )


class UninstallCoordinator:

    def __init__(self, package_manager, logger: logging.Logger):
        self.package_manager = package_manager
        self.logger = logger

    def uninstall(self, profile: SystemProfile, dry_run: bool = False) -> List[Step]:
        """
        Remove the Lustre client packages for the host's distribution family.

        Returns:
            The removal steps that were run (or logged, for a dry run).

        Raises:
            UninstallFailedError: If the family has no removal procedure or
                any removal command fails.
        """
        steps = removal_steps(profile)

        for step in steps:
            if dry_run:
                for command in self.package_manager.render(step):
                    self.logger.info(f"Dry run: {command}")
                continue

            self.logger.verbose(f"Running step: {step.describe()}")
            try:
                step.apply(self.package_manager)
            except CommandExecutionError as e:
                raise UninstallFailedError(
                    format_error('UNINSTALL_FAILED'),
                    command=e.context.get("command"),
                    reason=e.context.get("stderr") or e.error.message,
                ) from e
        return steps
