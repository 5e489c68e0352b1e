"""
Test fixtures package for lustreclient tests.

This package provides reusable fakes and sample data for testing
detection, planning, provisioning and verification without a real host.
"""

from tests.fixtures.mock_logger import MockLogger, create_mock_logger
from tests.fixtures.mock_executor import MockCommandExecutor
from tests.fixtures.fake_host import FakeHost
from tests.fixtures.recording_package_manager import RecordingPackageManager
from tests.fixtures.sample_data import (
    SAMPLE_RELEASES,
    SAMPLE_KERNELS,
    SAMPLE_MODINFO,
    SAMPLE_LSMOD,
    make_profile,
    make_host,
    make_installed_host,
)

__all__ = [
    # Mock classes
    'MockLogger',
    'create_mock_logger',
    'MockCommandExecutor',
    'FakeHost',
    'RecordingPackageManager',
    # Sample data
    'SAMPLE_RELEASES',
    'SAMPLE_KERNELS',
    'SAMPLE_MODINFO',
    'SAMPLE_LSMOD',
    'make_profile',
    'make_host',
    'make_installed_host',
]
