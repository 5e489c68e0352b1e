"""
CLI argument parsing for the Lustre client installer.

This module provides the argument parsing entry point, using the argument
builders from the cli package, and applies YAML config file overrides.
"""

import argparse
import logging
from typing import List, Optional

from lustreclient import VERSION
from lustreclient.cli import (
    PROGRAM_DESCRIPTION,
    add_installer_arguments,
    add_universal_arguments,
)
from lustreclient.error_messages import format_error
from lustreclient.errors import ConfigurationError
from lustreclient.utils import apply_config_overrides, read_config_file


class InstallerArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports bad arguments as ConfigurationError instead of exiting with code 2."""

    def error(self, message):
        raise ConfigurationError(
            format_error('INVALID_ARGUMENT', argument=message),
            suggestion=f"Run '{self.prog} --help' to see the supported options",
        )


def build_parser() -> InstallerArgumentParser:
    parser = InstallerArgumentParser(prog="lustre-client-installer", description=PROGRAM_DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    add_installer_arguments(parser)
    add_universal_arguments(parser)
    return parser


def parse_arguments(argv: Optional[List[str]] = None, logger: Optional[logging.Logger] = None):
    """Parse command-line arguments for the installer.

    Args:
        argv: Arguments to parse. Defaults to sys.argv[1:].
        logger: Logger for config file warnings.

    Returns:
        argparse.Namespace: Parsed arguments with config file overrides applied.

    Raises:
        ConfigurationError: If an argument is invalid or the config file
            cannot be read.
    """
    parser = build_parser()
    parsed_args = parser.parse_args(argv)

    if parsed_args.config_file:
        logger = logger or logging.getLogger(__name__)
        config = read_config_file(parsed_args.config_file)
        parsed_args = apply_config_overrides(parsed_args, config, logger)

    validate_args(parsed_args)
    return parsed_args


def validate_args(args):
    if args.fsx_dns_name is not None and not str(args.fsx_dns_name).strip():
        raise ConfigurationError(
            format_error('INVALID_ARGUMENT', argument="--fsx_dns_name must not be empty"),
            parameter="fsx_dns_name",
        )
    if not isinstance(args.dryrun, bool):
        raise ConfigurationError(
            format_error('INVALID_ARGUMENT', argument=f"dryrun must be true or false, got {args.dryrun!r}"),
            parameter="dryrun",
        )
    if args.stream_log_level and not isinstance(logging.getLevelName(str(args.stream_log_level).upper()), int):
        raise ConfigurationError(
            format_error('INVALID_ARGUMENT', argument=f"unknown log level {args.stream_log_level!r}"),
            parameter="stream_log_level",
        )
