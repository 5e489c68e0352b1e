"""
Host interface definitions for the Lustre client installer.

This module defines the abstract interface for everything the installer
asks of the machine it runs on: release information, kernel modules,
client tooling and network checks. The decision engine only talks to the
host through this interface, so tests substitute a fake host.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional


class HostInterface(ABC):
    """Interface for host introspection and the few host-level actions the installer takes.

    Example:
        class RecordedHost(HostInterface):
            def kernel_release(self):
                return "5.14.0-427.13.1.el9_4.x86_64"
            # ... implement other abstract methods
    """

    @abstractmethod
    def os_release(self) -> Dict[str, str]:
        """Return release information for the running distribution.

        Returns:
            Dictionary with 'id', 'name' and 'version' keys. Values are empty
            strings when the host exposes no release information.
        """
        pass

    @abstractmethod
    def file_exists(self, path: str) -> bool:
        pass

    @abstractmethod
    def kernel_release(self) -> str:
        """Return the running kernel release, as reported by `uname -r`."""
        pass

    @abstractmethod
    def arch(self) -> str:
        """Return the raw machine architecture, as reported by `uname -m`."""
        pass

    @abstractmethod
    def which(self, tool: str) -> Optional[str]:
        """Return the path to a tool on PATH, or None if it is not installed."""
        pass

    @abstractmethod
    def module_loaded(self, module: str) -> bool:
        pass

    @abstractmethod
    def load_module(self, module: str, verbose: bool = False) -> bool:
        """Load a kernel module.

        Returns:
            True if the module was loaded, False otherwise.
        """
        pass

    @abstractmethod
    def module_info(self, module: str) -> Optional[str]:
        """Return `modinfo` output for a module, or None if it is not available."""
        pass

    @abstractmethod
    def tool_version(self, tool: str) -> Optional[str]:
        pass

    @abstractmethod
    def resolve_hostname(self, hostname: str) -> Optional[str]:
        """Resolve a hostname to an IPv4 address, or None if resolution fails."""
        pass

    @abstractmethod
    def ping(self, target: str) -> bool:
        """Check LNet reachability of a hostname or address with `lctl ping`."""
        pass

    @abstractmethod
    def file_contains(self, path: str, text: str) -> bool:
        """Check whether a file exists and contains the given text."""
        pass
