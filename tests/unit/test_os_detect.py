"""
Tests for system detection in lustreclient.environment.os_detect.

Tests cover:
- Distribution family classification
- Architecture normalization
- The /etc/redhat-release fallback
- SystemProfile helpers
"""

import pytest

from lustreclient.environment.os_detect import (
    Arch,
    DistroFamily,
    SystemProfile,
    detect_system,
    distro_family_for,
    normalize_arch,
)
from lustreclient.errors import ErrorCode, UnknownDistroError, UnsupportedCombinationError

from tests.fixtures import FakeHost, SAMPLE_KERNELS, make_host, make_profile


class TestDistroFamilyFor:
    """Tests for distro_family_for."""

    @pytest.mark.parametrize("distro_id,family", [
        ("ubuntu", DistroFamily.DEBIAN),
        ("amzn", DistroFamily.AMAZON_LINUX),
        ("rhel", DistroFamily.ENTERPRISE_LINUX),
        ("centos", DistroFamily.ENTERPRISE_LINUX),
        ("rocky", DistroFamily.ENTERPRISE_LINUX),
        ("sles", DistroFamily.SUSE),
        ("SLES", DistroFamily.SUSE),
        ("debian", DistroFamily.UNKNOWN),
    ])
    def test_families(self, distro_id, family):
        assert distro_family_for(distro_id) == family


class TestNormalizeArch:
    """Tests for normalize_arch."""

    @pytest.mark.parametrize("machine,arch", [
        ("x86_64", Arch.X86_64),
        ("amd64", Arch.X86_64),
        ("aarch64", Arch.AARCH64),
        ("arm64", Arch.AARCH64),
    ])
    def test_supported(self, machine, arch):
        assert normalize_arch(machine) == arch

    def test_unsupported(self):
        with pytest.raises(UnsupportedCombinationError) as exc_info:
            normalize_arch("ppc64le", distro="Rocky Linux", version="8.7")
        assert exc_info.value.code == ErrorCode.UNSUPPORTED_ARCH
        assert "ppc64le" in str(exc_info.value)


class TestDetectSystem:
    """Tests for detect_system against a fake host."""

    def test_ubuntu(self):
        profile = detect_system(make_host('ubuntu22'))
        assert profile.distro_family == DistroFamily.DEBIAN
        assert profile.os_version == "22.04"
        assert profile.kernel_version == SAMPLE_KERNELS['ubuntu22']
        assert profile.arch == Arch.X86_64
        assert profile.distro_name == "Ubuntu"

    def test_amazon_linux_arm(self):
        profile = detect_system(make_host('al2023', SAMPLE_KERNELS['al2023'], machine="aarch64"))
        assert profile.distro_family == DistroFamily.AMAZON_LINUX
        assert profile.arch == Arch.AARCH64

    def test_redhat_release_fallback(self):
        """Hosts without release information but with /etc/redhat-release are generic EL."""
        host = FakeHost(release={'id': '', 'name': '', 'version': '7.9'}, kernel=SAMPLE_KERNELS['el7_9'],
                        files={'/etc/redhat-release': 'CentOS Linux release 7.9.2009 (Core)'})
        profile = detect_system(host)
        assert profile.distro_family == DistroFamily.ENTERPRISE_LINUX
        assert profile.distro_id == "el"
        assert profile.distro_name == "el"

    def test_no_release_information(self):
        host = FakeHost(release={'id': '', 'name': '', 'version': ''})
        with pytest.raises(UnknownDistroError) as exc_info:
            detect_system(host)
        assert exc_info.value.code == ErrorCode.UNKNOWN_DISTRO

    def test_unknown_distro_is_classified_not_rejected(self):
        """Detection classifies; rejecting an unknown family is left to the resolver."""
        profile = detect_system(make_host('debian12', "6.1.0-18-amd64"))
        assert profile.distro_family == DistroFamily.UNKNOWN

    def test_unsupported_arch(self):
        with pytest.raises(UnsupportedCombinationError) as exc_info:
            detect_system(make_host('ubuntu22', machine="s390x"))
        assert exc_info.value.context["distro"] == "Ubuntu"


class TestSystemProfile:
    """Tests for SystemProfile helpers."""

    def test_major_version(self, el8_profile):
        assert el8_profile.major_version == "8"

    def test_is_amazon_linux_1(self):
        al1 = make_profile(DistroFamily.AMAZON_LINUX, "2018.03", SAMPLE_KERNELS['al1'], distro_id="amzn")
        assert al1.is_amazon_linux_1 is True

    def test_al2023_is_not_amazon_linux_1(self, al2023_profile):
        assert al2023_profile.is_amazon_linux_1 is False

    def test_is_immutable(self, ubuntu_profile):
        with pytest.raises(AttributeError):
            ubuntu_profile.os_version = "20.04"

    def test_describe(self, ubuntu_profile):
        assert ubuntu_profile.describe() == f"Ubuntu 22.04 (x86_64, kernel {SAMPLE_KERNELS['ubuntu22']})"

    def test_equality(self):
        assert make_profile() == SystemProfile(DistroFamily.DEBIAN, "22.04", SAMPLE_KERNELS['ubuntu22'],
                                               Arch.X86_64, "ubuntu", "Ubuntu")
