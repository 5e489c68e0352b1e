"""
Static configuration for the Lustre client installer.

Repository locations, file paths, package and module names, documentation
links and exit codes live here so the decision engine stays free of
hard-coded strings.
"""

import enum


class EXIT_CODE(enum.IntEnum):
    SUCCESS = 0
    FAILURE = 1


DEFAULT_LOG_FILE = "client_installer.log"
LOGGER_NAME = "LustreClientInstaller"

# Documentation
DOCS_INSTALL_URL = "https://docs.aws.amazon.com/fsx/latest/LustreGuide/install-lustre-client.html"
DOCS_KERNEL_MATRIX_URL = "https://docs.aws.amazon.com/fsx/latest/LustreGuide/lustre-client-matrix.html"
DOCS_TROUBLESHOOTING_URL = "https://docs.aws.amazon.com/fsx/latest/LustreGuide/mount-troubleshooting.html"

# Repositories and signing keys
REPO_BASE_URL = "https://fsx-lustre-client-repo.s3.amazonaws.com"
KEY_BASE_URL = "https://fsx-lustre-client-repo-public-keys.s3.amazonaws.com"
KEY_BASE_URL_CN = "https://fsx-lustre-client-repo-public-keys.s3.amazonaws.cn"

UBUNTU_KEY_URL = f"{KEY_BASE_URL}/fsx-ubuntu-public-key.asc"
UBUNTU_REPO_URL = f"{REPO_BASE_URL}/ubuntu"
UBUNTU_KEYRING = "/usr/share/keyrings/fsx-ubuntu-public-key.gpg"
UBUNTU_SOURCES_LIST = "/etc/apt/sources.list.d/fsxlustreclientrepo.list"

RPM_KEY_URL = f"{KEY_BASE_URL}/fsx-rpm-public-key.asc"
RPM_KEY_URL_CN = f"{KEY_BASE_URL_CN}/fsx-rpm-public-key.asc"
RPM_KEY_FILE = "/tmp/fsx-rpm-public-key.asc"
YUM_REPOS_DIR = "/etc/yum.repos.d"
YUM_REPO_FILE = f"{YUM_REPOS_DIR}/aws-fsx.repo"

SLES_KEY_URL = f"{KEY_BASE_URL}/fsx-sles-public-key.asc"
SLES_KEY_FILE = "/tmp/fsx-sles-public-key.asc"
SLES_REPO_URL = f"{REPO_BASE_URL}/suse/sles-12/SLES-12/fsx-lustre-client.repo"
SLES_REPO_DOWNLOAD = "/tmp/fsx-lustre-client.repo"
ZYPPER_REPO_FILE = "/etc/zypp/repos.d/aws-fsx.repo"
SLES_UNSUPPORTED_MODULES_CONF = "/etc/modprobe.d/10-unsupported-modules.conf"

REPO_LABEL = "aws-fsx"

# Packages
UBUNTU_MODULE_PACKAGE_PREFIX = "lustre-client-modules-"
RPM_CLIENT_PACKAGES = ("kmod-lustre-client", "lustre-client")
LUSTRE_CLIENT_PACKAGE = "lustre-client"
AMAZON_LINUX_EXTRAS_TOPIC = "lustre"
SLES_KMP_PACKAGE = "lustre-client-kmp-default"

# Client tooling and kernel modules
CLIENT_TOOL = "lfs"
NETWORK_TOOL = "lctl"
LUSTRE_MODULE = "lustre"
TRANSPORT_MODULE = "lnet"
