"""
CLI argument builders for the Lustre client installer.

Modules:
    - common_args: Help messages, installer arguments and universal arguments
"""

from lustreclient.cli.common_args import (
    HELP_MESSAGES,
    PROGRAM_DESCRIPTION,
    add_installer_arguments,
    add_universal_arguments,
)

__all__ = [
    'HELP_MESSAGES',
    'PROGRAM_DESCRIPTION',
    'add_installer_arguments',
    'add_universal_arguments',
]
