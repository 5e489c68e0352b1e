"""
Interface definitions for the Lustre client installer.

The decision engine depends on two collaborators, both defined here as
abstract interfaces so they can be replaced in tests:

    - HostInterface: release information, kernel modules, client tooling
      and LNet reachability of the machine being provisioned
    - PackageManagerInterface: repository, package and cache operations of
      the distribution package manager
"""

from lustreclient.interfaces.host import HostInterface
from lustreclient.interfaces.package_manager import PackageManagerInterface

__all__ = [
    'HostInterface',
    'PackageManagerInterface',
]
