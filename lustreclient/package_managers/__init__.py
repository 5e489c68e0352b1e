"""
Package manager implementations for the Lustre client installer.

Public exports:
    package_manager_for: Pick the package manager for a SystemProfile
    AptPackageManager, YumPackageManager, DnfPackageManager,
    AmazonLinuxExtrasPackageManager, ZypperPackageManager: Implementations
"""

from lustreclient.environment.os_detect import DistroFamily, SystemProfile
from lustreclient.errors import ErrorCode, UnsupportedCombinationError
from lustreclient.error_messages import format_error
from lustreclient.package_managers.apt import AptPackageManager
from lustreclient.package_managers.base import ShellPackageManager
from lustreclient.package_managers.yum import (
    AmazonLinuxExtrasPackageManager,
    DnfPackageManager,
    YumPackageManager,
)
from lustreclient.package_managers.zypper import ZypperPackageManager
from lustreclient.utils import CommandExecutor


def package_manager_for(profile: SystemProfile, executor: CommandExecutor) -> ShellPackageManager:
    """
    Return the package manager that provisions the Lustre client on a host.

    Raises:
        UnsupportedCombinationError: If the distribution family is unknown.
    """
    family = profile.distro_family
    if family == DistroFamily.DEBIAN:
        return AptPackageManager(executor)
    if family == DistroFamily.AMAZON_LINUX:
        if profile.os_version == "2023":
            return DnfPackageManager(executor)
        if profile.os_version == "2":
            return AmazonLinuxExtrasPackageManager(executor)
        return YumPackageManager(executor)
    if family == DistroFamily.ENTERPRISE_LINUX:
        return YumPackageManager(executor)
    if family == DistroFamily.SUSE:
        return ZypperPackageManager(executor)

    raise UnsupportedCombinationError(
        format_error('UNSUPPORTED_DISTRO', name=profile.distro_name or profile.distro_id),
        distro=profile.distro_name or profile.distro_id,
        version=profile.os_version,
        code=ErrorCode.UNSUPPORTED_DISTRO,
    )


__all__ = [
    "package_manager_for",
    "ShellPackageManager",
    "AptPackageManager",
    "YumPackageManager",
    "DnfPackageManager",
    "AmazonLinuxExtrasPackageManager",
    "ZypperPackageManager",
]
