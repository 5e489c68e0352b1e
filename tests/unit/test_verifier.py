"""
Tests for InstallationVerifier in lustreclient.verifier.

Tests cover:
- Tooling, module and modinfo checks in order
- Loading an unloaded module
- Dry runs that only log
- Raising VerificationError with the failing check's code
"""

import pytest

from lustreclient.errors import ErrorCode, VerificationError
from lustreclient.verifier import InstallationVerifier, VerificationReport

from tests.fixtures import FakeHost, make_installed_host


class TestClientInstalled:
    """Tests for client_installed."""

    def test_installed(self, capturing_logger):
        assert InstallationVerifier(make_installed_host(), capturing_logger).client_installed() is True

    def test_not_installed(self, capturing_logger):
        assert InstallationVerifier(FakeHost(), capturing_logger).client_installed() is False


class TestVerify:
    """Tests for verify."""

    def test_healthy_installation(self, capturing_logger):
        report = InstallationVerifier(make_installed_host(), capturing_logger).verify()
        assert report.passed is True
        assert report.failure_reason is None
        assert report.version_string == "lfs 2.15.4"
        capturing_logger.assert_logged('success', 'Lustre client lfs 2.15.4 installed successfully.')

    def test_missing_tooling(self, capturing_logger):
        host = FakeHost()
        report = InstallationVerifier(host, capturing_logger).verify()
        assert report.passed is False
        assert report.failure_reason == ErrorCode.TOOLING_MISSING
        assert host.load_module_calls == []
        capturing_logger.assert_logged('error', 'Lustre client not installed.')

    def test_loads_unloaded_module(self, capturing_logger):
        host = make_installed_host()
        host.loaded_modules.clear()
        report = InstallationVerifier(host, capturing_logger).verify()
        assert report.passed is True
        assert host.load_module_calls == [("lustre", False)]
        capturing_logger.assert_logged('success', 'Lustre kernel module loaded successfully.')

    def test_module_load_failure(self, capturing_logger):
        host = make_installed_host()
        host.loaded_modules.clear()
        host.loadable_modules.clear()
        report = InstallationVerifier(host, capturing_logger).verify()
        assert report.passed is False
        assert report.failure_reason == ErrorCode.MODULE_LOAD_FAILED
        assert report.module_info_available is False
        capturing_logger.assert_logged('error', 'Failed to load Lustre kernel module.')

    def test_missing_module_info(self, capturing_logger):
        host = make_installed_host()
        host.module_infos.clear()
        report = InstallationVerifier(host, capturing_logger).verify()
        assert report.passed is False
        assert report.module_loaded is True
        assert report.failure_reason == ErrorCode.MODULE_INFO_UNAVAILABLE
        capturing_logger.assert_not_logged('success', 'installed successfully')

    def test_dry_run_does_not_load_module(self, capturing_logger):
        host = make_installed_host()
        host.loaded_modules.clear()
        report = InstallationVerifier(host, capturing_logger).verify(dry_run=True)
        assert report.passed is True
        assert report.dry_run is True
        assert host.load_module_calls == []
        capturing_logger.assert_logged('info', 'Dry run: sudo modprobe lustre')
        capturing_logger.assert_logged('info', 'Dry run: sudo modinfo lustre')

    def test_dry_run_missing_tooling_is_not_an_error(self, capturing_logger):
        report = InstallationVerifier(FakeHost(), capturing_logger).verify(dry_run=True)
        assert report.failure_reason == ErrorCode.TOOLING_MISSING
        assert capturing_logger.get_messages('error') == []

    def test_report_is_fresh_each_call(self, capturing_logger):
        host = FakeHost()
        verifier = InstallationVerifier(host, capturing_logger)
        assert verifier.verify().passed is False
        host.install_client()
        assert verifier.verify().passed is True


class TestRequire:
    """Tests for require and raise_for_report."""

    def test_passes_through_healthy_report(self, capturing_logger):
        report = InstallationVerifier(make_installed_host(), capturing_logger).require()
        assert report.passed is True

    @pytest.mark.parametrize("reason", [
        ErrorCode.TOOLING_MISSING,
        ErrorCode.MODULE_LOAD_FAILED,
        ErrorCode.MODULE_INFO_UNAVAILABLE,
    ])
    def test_raises_with_failure_code(self, reason):
        report = VerificationReport(tooling_present=True, failure_reason=reason)
        with pytest.raises(VerificationError) as exc_info:
            InstallationVerifier.raise_for_report(report)
        assert exc_info.value.code == reason
        assert exc_info.value.context["report"] is report

    def test_require_raises(self, capturing_logger):
        with pytest.raises(VerificationError) as exc_info:
            InstallationVerifier(FakeHost(), capturing_logger).require()
        assert exc_info.value.code == ErrorCode.TOOLING_MISSING


class TestVerificationReport:
    """Tests for VerificationReport."""

    def test_passed_requires_every_check(self):
        assert VerificationReport(True, True, True).passed is True
        assert VerificationReport(True, True, False).passed is False

    def test_str(self):
        assert str(VerificationReport(True, False, False)) == \
            "tooling_present=True, module_loaded=False, module_info_available=False"
