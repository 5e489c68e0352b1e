"""
Tests for LinuxHost in lustreclient.environment.host.

Host commands go through a MockCommandExecutor; the distro, platform and
socket lookups are patched.
"""

import socket
from unittest.mock import patch

from lustreclient.environment.host import LinuxHost

from tests.fixtures import MockCommandExecutor, SAMPLE_LSMOD, SAMPLE_MODINFO


class TestReleaseInformation:
    """Tests for os_release, kernel_release and arch."""

    def test_os_release_uses_distro(self):
        host = LinuxHost(MockCommandExecutor())
        with patch('lustreclient.environment.host.distro') as mock_distro:
            mock_distro.id.return_value = 'rocky'
            mock_distro.name.return_value = 'Rocky Linux'
            mock_distro.version.return_value = '8.7'
            release = host.os_release()
        assert release == {'id': 'rocky', 'name': 'Rocky Linux', 'version': '8.7'}

    def test_kernel_and_arch_use_platform(self):
        host = LinuxHost(MockCommandExecutor())
        with patch('lustreclient.environment.host.platform') as mock_platform:
            mock_platform.release.return_value = '5.15.0-1051-aws'
            mock_platform.machine.return_value = 'aarch64'
            assert host.kernel_release() == '5.15.0-1051-aws'
            assert host.arch() == 'aarch64'

    def test_file_exists(self, tmp_path):
        path = tmp_path / "redhat-release"
        path.write_text("Red Hat Enterprise Linux release 9.3 (Plow)\n")
        host = LinuxHost(MockCommandExecutor())
        assert host.file_exists(str(path)) is True
        assert host.file_exists(str(tmp_path / "missing")) is False

    def test_file_contains(self, tmp_path):
        path = tmp_path / "aws-fsx.repo"
        path.write_text("baseurl=https://fsx-lustre-client-repo.s3.amazonaws.com/suse/sles-12/SLES-12/SP4\n")
        host = LinuxHost(MockCommandExecutor())
        assert host.file_contains(str(path), "SP4") is True
        assert host.file_contains(str(path), "SP3") is False
        assert host.file_contains(str(tmp_path / "missing"), "SP4") is False


class TestKernelModules:
    """Tests for module_loaded, load_module and module_info."""

    def test_module_loaded(self):
        host = LinuxHost(MockCommandExecutor({r'^lsmod': (SAMPLE_LSMOD, '', 0)}))
        assert host.module_loaded("lustre") is True
        assert host.module_loaded("lnet") is True

    def test_module_loaded_matches_whole_name(self):
        """A module whose name only starts with the requested one does not count."""
        host = LinuxHost(MockCommandExecutor({r'^lsmod': (SAMPLE_LSMOD, '', 0)}))
        assert host.module_loaded("lmv2") is False
        assert host.module_loaded("lus") is False

    def test_module_loaded_ignores_header(self):
        host = LinuxHost(MockCommandExecutor({r'^lsmod': (SAMPLE_LSMOD, '', 0)}))
        assert host.module_loaded("Module") is False

    def test_module_loaded_when_lsmod_fails(self):
        host = LinuxHost(MockCommandExecutor({r'^lsmod': ('', 'not found', 127)}))
        assert host.module_loaded("lustre") is False

    def test_load_module(self):
        executor = MockCommandExecutor()
        host = LinuxHost(executor)
        assert host.load_module("lustre") is True
        assert executor.last_command == "sudo modprobe lustre"

    def test_load_module_verbose(self):
        executor = MockCommandExecutor()
        LinuxHost(executor).load_module("lnet", verbose=True)
        assert executor.last_command == "sudo modprobe -v lnet"

    def test_load_module_failure(self):
        executor = MockCommandExecutor({r'modprobe': ('', 'FATAL: Module lustre not found', 1)})
        assert LinuxHost(executor).load_module("lustre") is False

    def test_module_info(self):
        executor = MockCommandExecutor({r'modinfo lustre': (SAMPLE_MODINFO, '', 0)})
        assert LinuxHost(executor).module_info("lustre") == SAMPLE_MODINFO

    def test_module_info_missing(self):
        executor = MockCommandExecutor({r'modinfo': ('', 'modinfo: ERROR: Module lustre not found.', 1)})
        assert LinuxHost(executor).module_info("lustre") is None


class TestTooling:
    """Tests for which and tool_version."""

    def test_which(self):
        host = LinuxHost(MockCommandExecutor())
        with patch('lustreclient.environment.host.shutil.which', return_value='/usr/bin/lfs') as mock_which:
            assert host.which("lfs") == '/usr/bin/lfs'
        mock_which.assert_called_once_with("lfs")

    def test_tool_version(self):
        executor = MockCommandExecutor({r'lfs --version': ('lfs 2.15.4\n', '', 0)})
        assert LinuxHost(executor).tool_version("lfs") == "lfs 2.15.4"

    def test_tool_version_failure(self):
        executor = MockCommandExecutor({r'lfs': ('', '', 127)})
        assert LinuxHost(executor).tool_version("lfs") is None


class TestNetwork:
    """Tests for resolve_hostname and ping."""

    def test_resolve_hostname(self):
        host = LinuxHost(MockCommandExecutor())
        with patch('lustreclient.environment.host.socket.gethostbyname', return_value='10.0.1.25'):
            assert host.resolve_hostname("fs-0123.fsx.us-east-1.amazonaws.com") == '10.0.1.25'

    def test_resolve_hostname_failure(self):
        host = LinuxHost(MockCommandExecutor())
        with patch('lustreclient.environment.host.socket.gethostbyname', side_effect=socket.gaierror("no")):
            assert host.resolve_hostname("fs-missing.fsx.us-east-1.amazonaws.com") is None

    def test_ping(self):
        executor = MockCommandExecutor()
        assert LinuxHost(executor).ping("10.0.1.25") is True
        assert executor.last_command == "lctl ping 10.0.1.25"

    def test_ping_failure(self):
        executor = MockCommandExecutor({r'lctl ping': ('', 'failed to ping 10.0.1.25@tcp', 1)})
        assert LinuxHost(executor).ping("10.0.1.25") is False
