"""
System detection for the Lustre client installer.

This module classifies the host into a SystemProfile: distribution family,
OS version, running kernel and CPU architecture. The profile is created once
per run and never modified.

Public exports:
    DistroFamily: Enum of the distribution families the installer knows
    Arch: Enum of supported CPU architectures
    SystemProfile: Immutable description of the host
    detect_system: Function to probe the host and build a SystemProfile
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from lustreclient.errors import ErrorCode, UnknownDistroError, UnsupportedCombinationError
from lustreclient.error_messages import format_error

REDHAT_RELEASE_FILE = "/etc/redhat-release"

# Amazon Linux 1 releases are versioned by date, e.g. 2018.03
AMAZON_LINUX_1_VERSION = re.compile(r"^20\d\d\.\d\d$")


class DistroFamily(Enum):
    DEBIAN = "debian"
    AMAZON_LINUX = "amazon_linux"
    ENTERPRISE_LINUX = "enterprise_linux"
    SUSE = "suse"
    UNKNOWN = "unknown"


class Arch(Enum):
    X86_64 = "x86_64"
    AARCH64 = "aarch64"


DISTRO_FAMILIES = {
    "ubuntu": DistroFamily.DEBIAN,
    "amzn": DistroFamily.AMAZON_LINUX,
    "el": DistroFamily.ENTERPRISE_LINUX,
    "centos": DistroFamily.ENTERPRISE_LINUX,
    "rhel": DistroFamily.ENTERPRISE_LINUX,
    "rocky": DistroFamily.ENTERPRISE_LINUX,
    "suse": DistroFamily.SUSE,
    "sles": DistroFamily.SUSE,
}

ARCH_ALIASES = {
    "x86_64": Arch.X86_64,
    "amd64": Arch.X86_64,
    "aarch64": Arch.AARCH64,
    "arm64": Arch.AARCH64,
}


@dataclass(frozen=True)
class SystemProfile:
    """
    Description of the host the client is installed on.

    Attributes:
        distro_family: Distribution family used to select compatibility rules
        os_version: Distribution version ('22.04', '8.7', '2023', ...)
        kernel_version: Running kernel release (`uname -r`)
        arch: CPU architecture
        distro_id: Lower-case distribution ID ('ubuntu', 'rocky', 'amzn', ...)
        distro_name: Human readable distribution name for messages
    """
    distro_family: DistroFamily
    os_version: str
    kernel_version: str
    arch: Arch
    distro_id: str = ""
    distro_name: str = ""

    @property
    def major_version(self) -> str:
        return self.os_version.split(".")[0]

    @property
    def is_amazon_linux_1(self) -> bool:
        return (self.distro_family == DistroFamily.AMAZON_LINUX
                and bool(AMAZON_LINUX_1_VERSION.match(self.os_version)))

    def describe(self) -> str:
        return f"{self.distro_name or self.distro_id} {self.os_version} ({self.arch.value}, kernel {self.kernel_version})"


def distro_family_for(distro_id: str) -> DistroFamily:
    return DISTRO_FAMILIES.get(distro_id.lower(), DistroFamily.UNKNOWN)


def normalize_arch(machine: str, distro: Optional[str] = None, version: Optional[str] = None,
                   kernel: Optional[str] = None) -> Arch:
    """Map a raw machine name onto a supported architecture.

    Raises:
        UnsupportedCombinationError: If the architecture is not supported.
    """
    arch = ARCH_ALIASES.get(machine.lower())
    if arch is None:
        raise UnsupportedCombinationError(
            format_error('UNSUPPORTED_ARCH', arch=machine),
            distro=distro,
            version=version,
            kernel=kernel,
            arch=machine,
            code=ErrorCode.UNSUPPORTED_ARCH,
        )
    return arch


def detect_system(host=None) -> SystemProfile:
    """
    Probe the host and build its SystemProfile.

    Release information comes from the host's os_release() (the `distro`
    package on a real host). When no distribution ID is reported but
    /etc/redhat-release exists, the host is treated as generic enterprise
    Linux.

    Args:
        host: HostInterface implementation. Defaults to the running Linux host.

    Returns:
        SystemProfile: The detected, immutable host description

    Raises:
        UnknownDistroError: If no release information is available at all.
        UnsupportedCombinationError: If the CPU architecture is not supported.

    Examples:
        >>> profile = detect_system()
        >>> profile.distro_family
        <DistroFamily.ENTERPRISE_LINUX: 'enterprise_linux'>
    """
    if host is None:
        from lustreclient.environment.host import LinuxHost
        host = LinuxHost()

    release = host.os_release()
    distro_id = (release.get("id") or "").lower()
    version = release.get("version") or ""
    name = release.get("name") or ""

    if not distro_id:
        if not host.file_exists(REDHAT_RELEASE_FILE):
            raise UnknownDistroError(
                format_error('UNKNOWN_DISTRO'),
                details="No release information and no /etc/redhat-release found",
            )
        distro_id = "el"

    kernel = host.kernel_release()
    arch = normalize_arch(host.arch(), distro=name or distro_id, version=version, kernel=kernel)

    return SystemProfile(
        distro_family=distro_family_for(distro_id),
        os_version=version,
        kernel_version=kernel,
        arch=arch,
        distro_id=distro_id,
        distro_name=name or distro_id,
    )
