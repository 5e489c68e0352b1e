"""
Centralized error message templates for the Lustre client installer.

This module provides:
- Consistent error message templates
- Context-aware message generation

Usage:
    from lustreclient.error_messages import format_error, ERROR_MESSAGES

    msg = format_error('UNSUPPORTED_VERSION', name='Ubuntu', version='16.04')
"""

from typing import Dict, Optional


# Error message templates with placeholders
ERROR_MESSAGES: Dict[str, str] = {
    # Host detection
    'UNKNOWN_DISTRO': (
        "Unable to determine the Linux distribution. "
        "Check the operating system being used has FSx for Lustre client support."
    ),

    'UNSUPPORTED_DISTRO': (
        "Unsupported Linux distribution: {name}. "
        "Check that the OS being used has FSx for Lustre support."
    ),

    'UNSUPPORTED_ARCH': (
        "Unsupported CPU architecture: {arch}. "
        "The Lustre client is published for x86_64 and aarch64 only."
    ),

    # Compatibility
    'UNSUPPORTED_VERSION': "Unsupported {name} version: {version}",

    'UNSUPPORTED_KERNEL': (
        "Kernel version {kernel} does not meet the minimum requirement for {name} {version}."
    ),

    'HARD_REJECTED': "{reason}",

    # Provisioning
    'NO_MATCHING_PACKAGE': (
        "Kernel version {kernel} is not supported for Lustre client: "
        "no package {package} found in the repository."
    ),

    'INSTALL_FAILED': "Installation failed at step '{step}', exiting. Re-run the installer once the problem is fixed.",

    'UNINSTALL_FAILED': "Failed to uninstall Lustre, exiting.",

    # Verification
    'TOOLING_MISSING': "Lustre client not installed.",

    'MODULE_LOAD_FAILED': "Failed to load Lustre kernel module.",

    'MODULE_INFO_UNAVAILABLE': "Lustre kernel module information is not available.",

    # General
    'INVALID_ARGUMENT': "Invalid argument: {argument}",

    'INTERNAL_ERROR': (
        "An internal error occurred: {error}\n"
        "This is likely a bug in the installer.\n"
        "Include the log file and the full error message when reporting it."
    ),
}


def format_error(error_key: str, **kwargs) -> str:
    """
    Format an error message with the given parameters.

    Args:
        error_key: Key for the error message template.
        **kwargs: Parameters to substitute in the template.

    Returns:
        Formatted error message string.

    Example:
        >>> format_error('UNSUPPORTED_VERSION', name='Ubuntu', version='16.04')
        'Unsupported Ubuntu version: 16.04'
    """
    template = ERROR_MESSAGES.get(error_key)
    if template is None:
        return f"Unknown error: {error_key}\nContext: {kwargs}"

    try:
        return template.format(**kwargs)
    except KeyError as e:
        # Return template with available substitutions and note missing ones
        return f"{template}\n(Missing format parameter: {e})"


def get_error_template(error_key: str) -> Optional[str]:
    """
    Get the raw error template for a given key.

    Args:
        error_key: Key for the error message template.

    Returns:
        Template string or None if not found.
    """
    return ERROR_MESSAGES.get(error_key)
