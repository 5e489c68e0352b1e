"""
Post-install verification.

InstallationVerifier checks that the client tooling is on PATH, the lustre
kernel module is loaded (loading it if needed) and the module information is
available. It derives a fresh VerificationReport on every call; it is used
both to detect an existing installation and to confirm a new one.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from lustreclient.config import CLIENT_TOOL, DOCS_INSTALL_URL, LUSTRE_MODULE
from lustreclient.error_messages import format_error
from lustreclient.errors import ErrorCode, VerificationError


@dataclass
class VerificationReport:
    """
    Result of one verification pass.

    Attributes:
        tooling_present: The client tool (lfs) is on PATH
        module_loaded: The lustre module is loaded, or a dry run would load it
        module_info_available: modinfo reports the module
        version_string: Output of `lfs --version` on success
        dry_run: Whether module loading and modinfo were only logged
        failure_reason: Error code of the first failed check
    """
    tooling_present: bool = False
    module_loaded: bool = False
    module_info_available: bool = False
    version_string: Optional[str] = None
    dry_run: bool = False
    failure_reason: Optional[ErrorCode] = None

    @property
    def passed(self) -> bool:
        return self.tooling_present and self.module_loaded and self.module_info_available

    def __str__(self) -> str:
        return (f"tooling_present={self.tooling_present}, module_loaded={self.module_loaded}, "
                f"module_info_available={self.module_info_available}")


class InstallationVerifier:

    def __init__(self, host, logger: logging.Logger):
        self.host = host
        self.logger = logger

    def client_installed(self) -> bool:
        return self.host.which(CLIENT_TOOL) is not None

    def verify(self, dry_run: bool = False) -> VerificationReport:
        report = VerificationReport(dry_run=dry_run)

        report.tooling_present = self.client_installed()
        if not report.tooling_present:
            if not dry_run:
                self.logger.error(format_error('TOOLING_MISSING'))
            report.failure_reason = ErrorCode.TOOLING_MISSING
            return report

        if self.host.module_loaded(LUSTRE_MODULE):
            self.logger.info("Lustre kernel module is loaded.")
            report.module_loaded = True
        else:
            self.logger.info("Lustre kernel module is not loaded. Attempting to load...")
            if dry_run:
                self.logger.info(f"Dry run: sudo modprobe {LUSTRE_MODULE}")
                report.module_loaded = True
            elif self.host.load_module(LUSTRE_MODULE):
                self.logger.success("Lustre kernel module loaded successfully.")
                report.module_loaded = True
            else:
                self.logger.error(f"{format_error('MODULE_LOAD_FAILED')} "
                                  f"Please visit {DOCS_INSTALL_URL} for more information.")
                report.failure_reason = ErrorCode.MODULE_LOAD_FAILED
                return report

        if dry_run:
            self.logger.info(f"Dry run: sudo modinfo {LUSTRE_MODULE}")
            report.module_info_available = True
        else:
            module_info = self.host.module_info(LUSTRE_MODULE)
            if module_info is None:
                self.logger.info(format_error('MODULE_INFO_UNAVAILABLE'))
                report.failure_reason = ErrorCode.MODULE_INFO_UNAVAILABLE
                return report
            self.logger.verbose(module_info.rstrip())
            report.module_info_available = True

        report.version_string = self.host.tool_version(CLIENT_TOOL)
        self.logger.success(f"Lustre client {report.version_string or ''} installed successfully.")
        return report

    def require(self, dry_run: bool = False) -> VerificationReport:
        """Verify the installation and raise VerificationError if any check fails."""
        return self.raise_for_report(self.verify(dry_run=dry_run))

    @staticmethod
    def raise_for_report(report: VerificationReport) -> VerificationReport:
        if not report.passed:
            code = report.failure_reason or ErrorCode.MODULE_LOAD_FAILED
            messages = {
                ErrorCode.TOOLING_MISSING: 'TOOLING_MISSING',
                ErrorCode.MODULE_LOAD_FAILED: 'MODULE_LOAD_FAILED',
                ErrorCode.MODULE_INFO_UNAVAILABLE: 'MODULE_INFO_UNAVAILABLE',
            }
            raise VerificationError(format_error(messages.get(code, 'MODULE_LOAD_FAILED')), code=code, report=report)
        return report
