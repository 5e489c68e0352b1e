"""
Shared pytest fixtures for lustreclient tests.

These fixtures provide loggers, fake hosts, package managers and sample
profiles so the decision engine can be tested without touching the machine
the tests run on.
"""

from argparse import Namespace
from unittest.mock import MagicMock

import pytest

from lustreclient.environment.os_detect import Arch, DistroFamily

from tests.fixtures import (
    MockCommandExecutor,
    MockLogger,
    RecordingPackageManager,
    SAMPLE_KERNELS,
    make_host,
    make_installed_host,
    make_profile,
)


# =============================================================================
# Logger Fixtures
# =============================================================================

@pytest.fixture
def mock_logger():
    """
    Create a mock logger that captures all log calls.

    Usage:
        def test_something(mock_logger):
            some_function(logger=mock_logger)
            mock_logger.info.assert_called_with("expected message")
    """
    logger = MagicMock()
    # Add all log levels as mock methods
    for level in ['debug', 'verbose', 'info', 'success', 'warning', 'error', 'critical']:
        setattr(logger, level, MagicMock())
    return logger


@pytest.fixture
def capturing_logger():
    """
    Create a logger that records messages per level.

    Usage:
        def test_something(capturing_logger):
            some_function(logger=capturing_logger)
            capturing_logger.assert_logged('success', 'installed successfully')
    """
    return MockLogger()


# =============================================================================
# Executor and Package Manager Fixtures
# =============================================================================

@pytest.fixture
def mock_executor():
    """Command executor that succeeds for every command."""
    return MockCommandExecutor()


@pytest.fixture
def recording_pm():
    return RecordingPackageManager()


# =============================================================================
# Profile Fixtures
# =============================================================================

@pytest.fixture
def ubuntu_profile():
    return make_profile()


@pytest.fixture
def el9_profile():
    return make_profile(DistroFamily.ENTERPRISE_LINUX, "9.3", SAMPLE_KERNELS['el9_3'],
                        distro_id="rhel", distro_name="Red Hat Enterprise Linux")


@pytest.fixture
def el8_profile():
    return make_profile(DistroFamily.ENTERPRISE_LINUX, "8.10", SAMPLE_KERNELS['el8_10'],
                        distro_id="rocky", distro_name="Rocky Linux")


@pytest.fixture
def el7_arm_profile():
    return make_profile(DistroFamily.ENTERPRISE_LINUX, "7.9", "4.18.0-193.28.1.el7.aarch64",
                        arch=Arch.AARCH64, distro_id="centos", distro_name="CentOS Linux")


@pytest.fixture
def al2023_profile():
    return make_profile(DistroFamily.AMAZON_LINUX, "2023", SAMPLE_KERNELS['al2023'],
                        distro_id="amzn", distro_name="Amazon Linux")


@pytest.fixture
def al2_profile():
    return make_profile(DistroFamily.AMAZON_LINUX, "2", SAMPLE_KERNELS['al2'],
                        distro_id="amzn", distro_name="Amazon Linux")


@pytest.fixture
def sles_profile():
    return make_profile(DistroFamily.SUSE, "12.5", SAMPLE_KERNELS['sles12'],
                        distro_id="sles", distro_name="SLES")


# =============================================================================
# Host Fixtures
# =============================================================================

@pytest.fixture
def ubuntu_host():
    """Ubuntu 22.04 host without a Lustre client."""
    return make_host('ubuntu22')


@pytest.fixture
def installed_ubuntu_host():
    """Ubuntu 22.04 host with a healthy Lustre client."""
    return make_installed_host('ubuntu22')


# =============================================================================
# Args Fixtures (Namespace objects for CLI simulation)
# =============================================================================

@pytest.fixture
def base_args() -> Namespace:
    """Args as parsed from an empty command line."""
    return Namespace(
        fsx_dns_name=None,
        dryrun=False,
        config_file=None,
        log_file='client_installer.log',
        debug=False,
        verbose=False,
        stream_log_level='INFO',
    )
