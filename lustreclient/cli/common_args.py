"""
CLI arguments and help messages for the Lustre client installer.

This module contains:
- Help message definitions
- Installer arguments (file system endpoint, dry run)
- Universal arguments (config file, log file, output control)
"""

from lustreclient.config import DEFAULT_LOG_FILE


HELP_MESSAGES = {
    'fsx_dns_name': (
        "DNS name of an FSx for Lustre file system. When given, the installer checks that the "
        "file system is reachable over LNet after the client is installed."
    ),
    'dryrun': (
        "Log the commands that would be run instead of running them. Nothing on the host is "
        "installed, removed or loaded."
    ),
    'log_file': f"File that receives the full log of the run, including command output. Default: {DEFAULT_LOG_FILE}",
    'config_file': "Path to a YAML file with option overrides, e.g. 'dryrun: true'",
    'debug': "Enable debug output, including source locations in console messages",
    'verbose': "Show command output on the console",
    'stream_log_level': "Minimum level for console messages (DEBUG, VERBOSE, INFO, SUCCESS, WARNING, ERROR)",
}

PROGRAM_DESCRIPTION = (
    "Install, verify and, if needed, reinstall the Amazon FSx for Lustre client on this host."
)


def add_installer_arguments(parser):
    """Add the installer's own arguments.

    Args:
        parser: Argparse parser to add arguments to.
    """
    installer_args = parser.add_argument_group("Installer Arguments")
    installer_args.add_argument(
        "--fsx_dns_name", "--fsx-dns-name",
        dest="fsx_dns_name",
        type=str,
        metavar="HOSTNAME",
        help=HELP_MESSAGES['fsx_dns_name']
    )
    installer_args.add_argument(
        "--dryrun", "--dry-run",
        dest="dryrun",
        action="store_true",
        help=HELP_MESSAGES['dryrun']
    )


def add_universal_arguments(parser):
    """Add configuration and output control arguments.

    Args:
        parser: Argparse parser to add arguments to.
    """
    standard_args = parser.add_argument_group("Standard Arguments")
    standard_args.add_argument(
        "--config-file", "-c",
        type=str,
        help=HELP_MESSAGES['config_file']
    )
    standard_args.add_argument(
        "--log-file",
        type=str,
        default=DEFAULT_LOG_FILE,
        help=HELP_MESSAGES['log_file']
    )

    output_control = parser.add_argument_group("Output Control")
    output_control.add_argument(
        "--debug",
        action="store_true",
        help=HELP_MESSAGES['debug']
    )
    output_control.add_argument(
        "--verbose",
        action="store_true",
        help=HELP_MESSAGES['verbose']
    )
    output_control.add_argument(
        "--stream-log-level",
        type=str,
        default="INFO",
        help=HELP_MESSAGES['stream_log_level']
    )
