"""
Package manager interface definitions for the Lustre client installer.

This module defines the abstract interface for the distribution package
manager. Implementations translate each operation into host commands;
`render` returns those commands without running them, which is what a dry
run logs.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterable, List, Optional

if TYPE_CHECKING:
    from lustreclient.provisioning.plan import Step


class PackageManagerInterface(ABC):
    """Interface for distribution package managers.

    Every mutating operation raises CommandExecutionError when the
    underlying command fails.
    """

    name = "unknown"

    @abstractmethod
    def add_signing_key(self, url: str) -> None:
        pass

    @abstractmethod
    def add_repository(self, url: str, label: str, suite: Optional[str] = None) -> None:
        """Register the Lustre client repository.

        Args:
            url: Repository base URL or repository file URL.
            label: Repository name on the host.
            suite: Distribution codename, for managers that need one.
        """
        pass

    @abstractmethod
    def rewrite_repository_revision(self, repo_file: str, old_token: str, new_token: str) -> None:
        """Replace the revision token in an installed repository file."""
        pass

    @abstractmethod
    def refresh_cache(self) -> None:
        pass

    @abstractmethod
    def install(self, names: Iterable[str], upgrade: bool = False) -> None:
        pass

    @abstractmethod
    def remove(self, names: Iterable[str]) -> None:
        pass

    @abstractmethod
    def autoremove(self) -> None:
        """Remove dependencies that are no longer required, where supported."""
        pass

    @abstractmethod
    def clean_cache(self) -> None:
        pass

    @abstractmethod
    def enable_unsupported_modules(self, config_file: str) -> None:
        pass

    @abstractmethod
    def package_available(self, name: str) -> bool:
        """Check whether the configured repositories carry a package."""
        pass

    @abstractmethod
    def render(self, step: "Step") -> List[str]:
        """Return the commands a plan step runs, for logging."""
        pass
