"""
Tests for the entry point in lustreclient.main.

The workflow and host are patched; these tests cover argument handling,
logging setup and the mapping of exceptions to exit codes.
"""

from unittest.mock import MagicMock, patch

import pytest

from lustreclient.config import EXIT_CODE
from lustreclient.errors import (
    DnsResolutionError,
    ErrorCode,
    InstallationFailedError,
    UnsupportedCombinationError,
    VerificationError,
)
from lustreclient.main import main


@pytest.fixture
def patched_main():
    """Patch everything main() touches on the host."""
    with patch('lustreclient.main.InstallerWorkflow') as MockWorkflow, \
            patch('lustreclient.main.LinuxHost') as MockHost, \
            patch('lustreclient.main.add_file_handler') as mock_file_handler, \
            patch('lustreclient.main.signal.signal'), \
            patch('lustreclient.main.logger') as mock_logger:
        yield MockWorkflow, MockHost, mock_file_handler, mock_logger


class TestMainSuccess:
    """Successful runs."""

    def test_returns_success(self, patched_main):
        MockWorkflow, _, _, _ = patched_main
        assert main([]) == EXIT_CODE.SUCCESS
        MockWorkflow.return_value.run.assert_called_once_with(fsx_dns_name=None, dry_run=False)

    def test_passes_arguments(self, patched_main):
        MockWorkflow, _, _, _ = patched_main
        main(["--fsx_dns_name", "fs-0123.fsx.us-east-1.amazonaws.com", "--dryrun"])
        MockWorkflow.return_value.run.assert_called_once_with(
            fsx_dns_name="fs-0123.fsx.us-east-1.amazonaws.com", dry_run=True)

    def test_attaches_log_file(self, patched_main):
        _, _, mock_file_handler, mock_logger = patched_main
        main(["--log-file", "/tmp/fsx-install.log"])
        mock_file_handler.assert_called_once_with(mock_logger, "/tmp/fsx-install.log")
        mock_logger.info.assert_any_call("Check log /tmp/fsx-install.log for more execution details.")


class TestMainFailures:
    """Every failure maps to a non-zero exit code."""

    @pytest.mark.parametrize("error", [
        UnsupportedCombinationError("Unsupported Ubuntu version: 16.04", code=ErrorCode.UNSUPPORTED_VERSION),
        InstallationFailedError(step="install lustre-client"),
        VerificationError("Failed to load Lustre kernel module."),
        DnsResolutionError("fs-0123.fsx.us-east-1.amazonaws.com"),
    ])
    def test_installer_errors(self, patched_main, error):
        MockWorkflow, _, _, mock_logger = patched_main
        MockWorkflow.return_value.run.side_effect = error
        assert main([]) == EXIT_CODE.FAILURE
        mock_logger.error.assert_called_once_with(f"[{error.code.value}] {error.error.message}")
        mock_logger.info.assert_any_call(f"Suggestion: {error.suggestion}")

    def test_suggestion_logged_once(self, patched_main):
        MockWorkflow, _, _, mock_logger = patched_main
        MockWorkflow.return_value.run.side_effect = InstallationFailedError(step="install lustre-client")
        main([])
        logged = [call[0][0] for call in mock_logger.error.call_args_list + mock_logger.info.call_args_list]
        assert sum("Suggestion:" in message for message in logged) == 1

    def test_bad_argument(self, patched_main):
        MockWorkflow, _, _, mock_logger = patched_main
        assert main(["--mount-point", "/fsx"]) == EXIT_CODE.FAILURE
        MockWorkflow.assert_not_called()
        assert "Invalid argument" in mock_logger.error.call_args[0][0]

    def test_unexpected_exception(self, patched_main):
        MockWorkflow, _, _, mock_logger = patched_main
        MockWorkflow.return_value.run.side_effect = RuntimeError("boom")
        assert main([]) == EXIT_CODE.FAILURE
        assert "An internal error occurred: boom" in mock_logger.error.call_args[0][0]
        mock_logger.info.assert_any_call("Run with --debug for full stack trace")

    def test_unexpected_exception_with_debug(self, patched_main):
        MockWorkflow, _, _, mock_logger = patched_main
        MockWorkflow.return_value.run.side_effect = RuntimeError("boom")
        assert main(["--debug"]) == EXIT_CODE.FAILURE
        mock_logger.debug.assert_any_call("Stack trace:")

    def test_keyboard_interrupt(self, patched_main):
        MockWorkflow, _, _, mock_logger = patched_main
        MockWorkflow.return_value.run.side_effect = KeyboardInterrupt()
        assert main([]) == EXIT_CODE.FAILURE
        mock_logger.warning.assert_called_once_with("Interrupted by user")

    def test_help_exits_cleanly(self, patched_main):
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0
