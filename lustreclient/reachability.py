"""
File system reachability check.

The check is a single linear fallback chain:

    PING_HOSTNAME -> RESOLVE_AND_PING_IP -> RELOAD_TRANSPORT_AND_RETRY

Each state runs only if the previous one failed. The transport module is
reloaded at most once, and the hostname is pinged at most twice.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from lustreclient.config import NETWORK_TOOL, TRANSPORT_MODULE
from lustreclient.errors import DnsResolutionError, UnreachableError


class ReachabilityState(Enum):
    PING_HOSTNAME = "ping_hostname"
    RESOLVE_AND_PING_IP = "resolve_and_ping_ip"
    RELOAD_TRANSPORT_AND_RETRY = "reload_transport_and_retry"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass
class ReachabilityResult:
    state: ReachabilityState
    target: Optional[str] = None
    visited: List[ReachabilityState] = field(default_factory=list)

    @property
    def reachable(self) -> bool:
        return self.state == ReachabilityState.SUCCEEDED


class ReachabilityChecker:

    def __init__(self, host, logger: logging.Logger):
        self.host = host
        self.logger = logger

    def check(self, hostname: str, dry_run: bool = False) -> ReachabilityResult:
        """
        Check that the Lustre client can reach a file system.

        Args:
            hostname: DNS name of the file system.
            dry_run: Log the first ping instead of running anything.

        Returns:
            ReachabilityResult in state SUCCEEDED (or SKIPPED for a dry run).

        Raises:
            DnsResolutionError: If the hostname is unreachable and does not resolve.
            UnreachableError: If every fallback failed.
        """
        self.logger.info("Checking if FSx is reachable...")
        result = ReachabilityResult(state=ReachabilityState.PING_HOSTNAME)

        if dry_run:
            self.logger.info(f'Dry run: {NETWORK_TOOL} ping "{hostname}"')
            result.state = ReachabilityState.SKIPPED
            return result

        result.visited.append(ReachabilityState.PING_HOSTNAME)
        if self.host.ping(hostname):
            self.logger.success("FSx is reachable")
            return self._succeeded(result, hostname)

        self.logger.info("FSx is not reachable via hostname. Attempting to resolve IP address.")
        result.visited.append(ReachabilityState.RESOLVE_AND_PING_IP)
        address = self.host.resolve_hostname(hostname)
        if not address:
            result.state = ReachabilityState.FAILED
            raise DnsResolutionError(hostname)

        if self.host.ping(address):
            self.logger.success(f"FSx is reachable via IP address: {address}")
            return self._succeeded(result, address)

        self.logger.info("FSx is not reachable via IP address. Attempting to load lnet modules before retrying.")
        result.visited.append(ReachabilityState.RELOAD_TRANSPORT_AND_RETRY)
        if not self.host.load_module(TRANSPORT_MODULE, verbose=True):
            self.logger.warning(f"Failed to load the {TRANSPORT_MODULE} module")

        if self.host.ping(hostname):
            self.logger.success("FSx is reachable")
            return self._succeeded(result, hostname)

        result.state = ReachabilityState.FAILED
        raise UnreachableError(hostname, address=address)

    @staticmethod
    def _succeeded(result: ReachabilityResult, target: str) -> ReachabilityResult:
        result.state = ReachabilityState.SUCCEEDED
        result.target = target
        result.visited.append(ReachabilityState.SUCCEEDED)
        return result
