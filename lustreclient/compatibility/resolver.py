"""
Compatibility lookup.

resolve() selects the rule for a SystemProfile: family first, then OS
version, distribution and architecture restrictions, then the kernel. It
never touches the host, so it runs before anything is installed or removed.
"""

import logging
from typing import Optional

from lustreclient.compatibility.models import CompatibilityRule
from lustreclient.compatibility.table import COMPATIBILITY_TABLE, CompatibilityTable
from lustreclient.environment.os_detect import DistroFamily, SystemProfile
from lustreclient.error_messages import format_error
from lustreclient.errors import ErrorCode, UnsupportedCombinationError


def _unsupported(profile: SystemProfile, message: str, code: ErrorCode) -> UnsupportedCombinationError:
    return UnsupportedCombinationError(
        message,
        distro=profile.distro_name or profile.distro_id,
        version=profile.os_version,
        kernel=profile.kernel_version,
        arch=profile.arch.value,
        code=code,
    )


def resolve(profile: SystemProfile, table: CompatibilityTable = COMPATIBILITY_TABLE,
            logger: Optional[logging.Logger] = None) -> CompatibilityRule:
    """
    Select the compatibility rule for a host.

    Args:
        profile: The detected host.
        table: Rules to search.
        logger: Optional logger for the selected rule.

    Returns:
        The first rule that accepts the host's OS version and kernel.

    Raises:
        UnsupportedCombinationError: If the distribution, OS version or kernel
            is not supported, or the combination is explicitly rejected.
    """
    name = profile.distro_name or profile.distro_id

    rules = table.rules_for(profile.distro_family)
    if profile.distro_family == DistroFamily.UNKNOWN or not rules:
        raise _unsupported(profile, format_error('UNSUPPORTED_DISTRO', name=name),
                           ErrorCode.UNSUPPORTED_DISTRO)

    candidates = [rule for rule in rules if rule.applies_to(profile)]
    if not candidates:
        raise _unsupported(profile, format_error('UNSUPPORTED_VERSION', name=name, version=profile.os_version),
                           ErrorCode.UNSUPPORTED_VERSION)

    for rule in candidates:
        if rule.is_reject:
            raise _unsupported(profile, format_error('HARD_REJECTED', reason=rule.reason),
                               ErrorCode.HARD_REJECTED)

    for rule in candidates:
        if rule.kernel_match.matches(profile.kernel_version):
            if logger is not None:
                logger.debug(f"Selected compatibility rule: {rule.kernel_match.describe()}, "
                             f"action {rule.action.value}, revision {rule.repo_revision}")
            return rule

    raise _unsupported(
        profile,
        format_error('UNSUPPORTED_KERNEL', kernel=profile.kernel_version, name=name, version=profile.os_version),
        ErrorCode.UNSUPPORTED_KERNEL,
    )
