"""
Custom exceptions for the Lustre client installer.

Every failure the installer can report is a subclass of
LustreInstallerException and carries:
- A machine-readable error code
- A clear error description
- Technical details for debugging
- An actionable suggestion, usually with a documentation link

The top-level handler in main.py logs these and exits with a non-zero code.
"""

from dataclasses import dataclass, field
from typing import Optional
from enum import Enum

from lustreclient.config import (
    DOCS_INSTALL_URL,
    DOCS_KERNEL_MATRIX_URL,
    DOCS_TROUBLESHOOTING_URL,
)


class ErrorCode(Enum):
    """Machine-readable error codes for installer errors."""
    # Configuration errors (1xx)
    CONFIG_INVALID_ARGUMENT = "E101"
    CONFIG_FILE_NOT_FOUND = "E102"
    CONFIG_PARSE_ERROR = "E103"

    # Host detection and compatibility errors (2xx)
    UNKNOWN_DISTRO = "E201"
    UNSUPPORTED_DISTRO = "E202"
    UNSUPPORTED_VERSION = "E203"
    UNSUPPORTED_KERNEL = "E204"
    UNSUPPORTED_ARCH = "E205"
    HARD_REJECTED = "E206"

    # Provisioning errors (3xx)
    NO_MATCHING_PACKAGE = "E301"
    INSTALL_FAILED = "E302"
    UNINSTALL_FAILED = "E303"
    COMMAND_FAILED = "E304"

    # Verification errors (4xx)
    TOOLING_MISSING = "E401"
    MODULE_LOAD_FAILED = "E402"
    MODULE_INFO_UNAVAILABLE = "E403"

    # Network errors (5xx)
    DNS_RESOLUTION_FAILED = "E501"
    ENDPOINT_UNREACHABLE = "E502"

    # Internal errors (9xx)
    INTERNAL_ERROR = "E901"


@dataclass
class InstallerError:
    """
    Structured error information for the installer.

    Attributes:
        code: Machine-readable error code.
        message: User-facing error message.
        details: Technical details for debugging.
        suggestion: How to fix the issue.
        related_docs: Optional link to documentation.
        context: Additional context information.
    """
    code: ErrorCode
    message: str
    details: str = ""
    suggestion: str = ""
    related_docs: Optional[str] = None
    context: dict = field(default_factory=dict)

    def __str__(self) -> str:
        """Format error for display."""
        lines = [f"[{self.code.value}] {self.message}"]
        if self.details:
            lines.append(f"  Details: {self.details}")
        if self.suggestion:
            lines.append(f"  Suggestion: {self.suggestion}")
        if self.related_docs:
            lines.append(f"  Documentation: {self.related_docs}")
        return "\n".join(lines)


class LustreInstallerException(Exception):
    """
    Base exception class for the installer.

    All custom exceptions inherit from this class and provide
    structured error information.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR,
                 details: str = "", suggestion: str = "",
                 related_docs: Optional[str] = None, **context):
        self.error = InstallerError(
            code=code,
            message=message,
            details=details,
            suggestion=suggestion,
            related_docs=related_docs,
            context=context
        )
        super().__init__(str(self.error))

    @property
    def code(self) -> ErrorCode:
        return self.error.code

    @property
    def suggestion(self) -> str:
        return self.error.suggestion

    @property
    def context(self) -> dict:
        return self.error.context


class ConfigurationError(LustreInstallerException):
    """
    Raised when command line or config file options are invalid.

    Examples:
        - Unknown command line flag
        - Config file not found or not valid YAML
    """

    def __init__(self, message: str, parameter: str = None,
                 suggestion: str = None,
                 code: ErrorCode = ErrorCode.CONFIG_INVALID_ARGUMENT):
        super().__init__(
            message=message,
            code=code,
            details=f"Parameter: {parameter}" if parameter else "",
            suggestion=suggestion or "Run with --help to see the supported options",
            parameter=parameter
        )


class UnknownDistroError(LustreInstallerException):
    """Raised when the host exposes neither release information nor a release file."""

    def __init__(self, message: str = "Unable to determine the Linux distribution",
                 details: str = ""):
        super().__init__(
            message=message,
            code=ErrorCode.UNKNOWN_DISTRO,
            details=details,
            suggestion="Check the operating system being used has FSx for Lustre client support",
            related_docs=DOCS_INSTALL_URL
        )


class UnsupportedCombinationError(LustreInstallerException):
    """
    Raised when the distro/version/kernel/arch combination is not supported.

    This covers distributions outside the compatibility table, OS versions
    without a rule, kernels below every threshold and explicit hard rejects.
    """

    def __init__(self, message: str, distro: str = None, version: str = None,
                 kernel: str = None, arch: str = None,
                 code: ErrorCode = ErrorCode.UNSUPPORTED_VERSION,
                 suggestion: str = None):
        details_parts = []
        if distro:
            details_parts.append(f"Distribution: {distro}")
        if version:
            details_parts.append(f"Version: {version}")
        if kernel:
            details_parts.append(f"Kernel: {kernel}")
        if arch:
            details_parts.append(f"Architecture: {arch}")

        related_docs = DOCS_KERNEL_MATRIX_URL if code == ErrorCode.UNSUPPORTED_KERNEL else DOCS_INSTALL_URL
        super().__init__(
            message=message,
            code=code,
            details="; ".join(details_parts),
            suggestion=suggestion or self._default_suggestion(code),
            related_docs=related_docs,
            distro=distro,
            version=version,
            kernel=kernel,
            arch=arch
        )

    @staticmethod
    def _default_suggestion(code: ErrorCode) -> str:
        suggestions = {
            ErrorCode.UNSUPPORTED_DISTRO: "Use a distribution with FSx for Lustre client support",
            ErrorCode.UNSUPPORTED_VERSION: "Upgrade to a supported operating system release",
            ErrorCode.UNSUPPORTED_KERNEL: "Boot a kernel listed in the Lustre client compatibility matrix",
            ErrorCode.UNSUPPORTED_ARCH: "Use an x86_64 or aarch64 instance",
            ErrorCode.HARD_REJECTED: "This combination is known not to work; use a different OS release",
        }
        return suggestions.get(code, "Check the Lustre client compatibility matrix")


class NoMatchingPackageError(LustreInstallerException):
    """Raised when the repository carries no client package for the running kernel."""

    def __init__(self, message: str, package: str = None, kernel: str = None):
        details_parts = []
        if package:
            details_parts.append(f"Package: {package}")
        if kernel:
            details_parts.append(f"Kernel: {kernel}")
        super().__init__(
            message=message,
            code=ErrorCode.NO_MATCHING_PACKAGE,
            details="; ".join(details_parts),
            suggestion="Boot a kernel for which a Lustre client module package is published",
            related_docs=DOCS_KERNEL_MATRIX_URL,
            package=package,
            kernel=kernel
        )


class InstallationFailedError(LustreInstallerException):
    """Raised when a mutating provisioning step fails."""

    def __init__(self, message: str = "Installation failed", step: str = None,
                 reason: str = None, suggestion: str = None):
        details_parts = []
        if step:
            details_parts.append(f"Step: {step}")
        if reason:
            details_parts.append(f"Reason: {reason}")
        super().__init__(
            message=message,
            code=ErrorCode.INSTALL_FAILED,
            details="; ".join(details_parts),
            suggestion=suggestion or "Fix the reported problem and re-run the installer",
            related_docs=DOCS_INSTALL_URL,
            step=step,
            reason=reason
        )


class UninstallFailedError(LustreInstallerException):
    """
    Raised when removal of a broken prior installation fails.

    The run stops here rather than attempting a reinstall on top of a
    half-removed client.
    """

    def __init__(self, message: str = "Failed to uninstall Lustre", command: str = None,
                 reason: str = None):
        details_parts = []
        if command:
            details_parts.append(f"Command: {command}")
        if reason:
            details_parts.append(f"Reason: {reason}")
        super().__init__(
            message=message,
            code=ErrorCode.UNINSTALL_FAILED,
            details="; ".join(details_parts),
            suggestion="Remove the Lustre client packages manually and re-run the installer",
            related_docs=DOCS_INSTALL_URL,
            command=command,
            reason=reason
        )


class VerificationError(LustreInstallerException):
    """Raised when post-install checks do not all pass."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.MODULE_LOAD_FAILED,
                 report=None):
        super().__init__(
            message=message,
            code=code,
            details=str(report) if report is not None else "",
            suggestion=self._default_suggestion(code),
            related_docs=DOCS_INSTALL_URL,
            report=report
        )

    @staticmethod
    def _default_suggestion(code: ErrorCode) -> str:
        suggestions = {
            ErrorCode.TOOLING_MISSING: "Re-run the installer; the client tools were not found on PATH",
            ErrorCode.MODULE_LOAD_FAILED: "Check 'dmesg' for module load errors and confirm the kernel is supported",
            ErrorCode.MODULE_INFO_UNAVAILABLE: "Reinstall the client kernel module package",
        }
        return suggestions.get(code, "Re-run the installer")


class DnsResolutionError(LustreInstallerException):
    """Raised when the file system DNS name cannot be resolved."""

    def __init__(self, hostname: str):
        super().__init__(
            message=f"Failed to resolve IP address for {hostname}",
            code=ErrorCode.DNS_RESOLUTION_FAILED,
            details=f"Hostname: {hostname}",
            suggestion="Check the DNS name and the VPC DNS settings",
            related_docs=DOCS_TROUBLESHOOTING_URL,
            hostname=hostname
        )


class UnreachableError(LustreInstallerException):
    """Raised when the Lustre client cannot reach the file system."""

    def __init__(self, hostname: str, address: str = None):
        details_parts = [f"Hostname: {hostname}"]
        if address:
            details_parts.append(f"Address: {address}")
        super().__init__(
            message="Lustre client cannot establish a connection with the FSx file system",
            code=ErrorCode.ENDPOINT_UNREACHABLE,
            details="; ".join(details_parts),
            suggestion="Troubleshoot potential networking issues (security groups, routes, LNet)",
            related_docs=DOCS_TROUBLESHOOTING_URL,
            hostname=hostname,
            address=address
        )


class CommandExecutionError(LustreInstallerException):
    """
    Raised when a host command fails outside of a provisioning plan.

    Examples:
        - Command returns non-zero exit code
        - Command binary not found
    """

    def __init__(self, message: str, command: str = None,
                 exit_code: int = None, stderr: str = None):
        details_parts = []
        if command:
            # Truncate long commands
            cmd_display = command[:200] + "..." if len(command) > 200 else command
            details_parts.append(f"Command: {cmd_display}")
        if exit_code is not None:
            details_parts.append(f"Exit code: {exit_code}")
        if stderr:
            # Truncate long error output
            stderr_display = stderr[:500] + "..." if len(stderr) > 500 else stderr
            details_parts.append(f"Error output: {stderr_display}")

        suggestion = "Check the log file for the command output"
        if exit_code == 127:
            suggestion = "Command not found - check that the tool is installed and in PATH"

        super().__init__(
            message=message,
            code=ErrorCode.COMMAND_FAILED,
            details="; ".join(details_parts),
            suggestion=suggestion,
            command=command,
            exit_code=exit_code,
            stderr=stderr
        )
