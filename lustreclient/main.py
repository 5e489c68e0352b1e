#!/usr/bin/env python3
"""
FSx for Lustre client installer - Main Entry Point

This module provides the main entry point for the installer. All installer
errors are handled here: they are logged with their suggestion and the
process exits with a non-zero code.
"""

import signal
import sys
import traceback

from lustreclient.cli_parser import parse_arguments
from lustreclient.config import EXIT_CODE, LOGGER_NAME
from lustreclient.environment.host import LinuxHost
from lustreclient.error_messages import format_error
from lustreclient.errors import (
    LustreInstallerException,
    ConfigurationError,
    UnknownDistroError,
    UnsupportedCombinationError,
    NoMatchingPackageError,
    InstallationFailedError,
    UninstallFailedError,
    VerificationError,
    DnsResolutionError,
    UnreachableError,
)
from lustreclient.installer_logging import setup_logging, add_file_handler, apply_logging_options
from lustreclient.utils import CommandExecutor
from lustreclient.workflow import InstallerWorkflow

logger = setup_logging(LOGGER_NAME)
debug_enabled = False


def signal_handler(sig, frame):
    """Handle SIGTERM the way Ctrl+C is handled."""
    signal_name = signal.Signals(sig).name
    logger.warning(f"Received signal {signal_name} ({sig})")
    logger.info("Exiting due to signal")
    sys.exit(EXIT_CODE.FAILURE)


def _log_error(e: LustreInstallerException):
    error = e.error
    logger.error(f"[{error.code.value}] {error.message}")
    if error.details:
        logger.info(f"Details: {error.details}")
    if error.suggestion:
        logger.info(f"Suggestion: {error.suggestion}")
    if error.related_docs:
        logger.info(f"Documentation: {error.related_docs}")


def _main_impl(argv=None):
    """
    Main implementation.

    Separated from main() so that main() can wrap it with exception handling.
    """
    global debug_enabled
    signal.signal(signal.SIGTERM, signal_handler)

    args = parse_arguments(argv, logger=logger)
    debug_enabled = args.debug

    add_file_handler(logger, args.log_file)
    apply_logging_options(logger, args)
    logger.info(f"Check log {args.log_file} for more execution details.")

    executor = CommandExecutor(logger, debug=args.debug)
    workflow = InstallerWorkflow(LinuxHost(executor), logger, executor=executor)
    workflow.run(fsx_dns_name=args.fsx_dns_name, dry_run=args.dryrun)
    return EXIT_CODE.SUCCESS


def main(argv=None):
    """
    Main entry point with comprehensive error handling.

    Returns:
        EXIT_CODE.SUCCESS, or EXIT_CODE.FAILURE for any error.
    """
    try:
        return _main_impl(argv)

    except ConfigurationError as e:
        _log_error(e)
        return EXIT_CODE.FAILURE

    except (UnknownDistroError, UnsupportedCombinationError, NoMatchingPackageError) as e:
        _log_error(e)
        return EXIT_CODE.FAILURE

    except (InstallationFailedError, UninstallFailedError) as e:
        _log_error(e)
        return EXIT_CODE.FAILURE

    except VerificationError as e:
        _log_error(e)
        return EXIT_CODE.FAILURE

    except (DnsResolutionError, UnreachableError) as e:
        _log_error(e)
        return EXIT_CODE.FAILURE

    except LustreInstallerException as e:
        # Catch-all for any other installer exceptions
        _log_error(e)
        return EXIT_CODE.FAILURE

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return EXIT_CODE.FAILURE

    except SystemExit:
        # Re-raise SystemExit to allow clean exits (--help, --version)
        raise

    except Exception as e:
        logger.error(format_error('INTERNAL_ERROR', error=str(e)))
        if debug_enabled:
            logger.debug("Stack trace:")
            logger.debug(traceback.format_exc())
        else:
            logger.info("Run with --debug for full stack trace")
        return EXIT_CODE.FAILURE


if __name__ == "__main__":
    sys.exit(main())
