"""
Host environment detection for the Lustre client installer.

Key features:
- Distribution family, OS version, kernel and architecture detection
- Linux implementation of the host collaborator (modules, tooling, LNet)

Public exports:
    SystemProfile: Immutable description of the host
    DistroFamily: Enum of known distribution families
    Arch: Enum of supported CPU architectures
    detect_system: Function to probe the host
    LinuxHost: HostInterface implementation for the running machine
"""

from lustreclient.environment.os_detect import (
    Arch,
    DistroFamily,
    SystemProfile,
    detect_system,
)
from lustreclient.environment.host import LinuxHost

__all__ = [
    "Arch",
    "DistroFamily",
    "SystemProfile",
    "detect_system",
    "LinuxHost",
]
