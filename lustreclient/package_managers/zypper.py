from typing import Iterable, List, Optional

from lustreclient.config import SLES_KEY_FILE, SLES_REPO_DOWNLOAD
from lustreclient.package_managers.base import ShellPackageManager, join_names


class ZypperPackageManager(ShellPackageManager):
    """zypper for SLES 12.

    The repository definition is downloaded and registered with `zypper ar`,
    which installs it under /etc/zypp/repos.d using the alias it declares.
    """

    name = "zypper"

    def signing_key_commands(self, url: str) -> List[str]:
        return [
            f"sudo wget -O {SLES_KEY_FILE} {url}",
            f"sudo rpm --import {SLES_KEY_FILE}",
        ]

    def repository_commands(self, url: str, label: str, suite: Optional[str] = None) -> List[str]:
        return [
            f"sudo wget -O {SLES_REPO_DOWNLOAD} {url}",
            f"sudo zypper ar --gpgcheck-strict {SLES_REPO_DOWNLOAD}",
        ]

    def refresh_commands(self) -> List[str]:
        return ["sudo zypper --non-interactive refresh"]

    def install_commands(self, names: Iterable[str], upgrade: bool = False) -> List[str]:
        if upgrade:
            return [f"sudo zypper --non-interactive --gpg-auto-import-keys up --force-resolution {join_names(names)}"]
        return [f"sudo zypper --non-interactive --gpg-auto-import-keys install {join_names(names)}"]

    def remove_commands(self, names: Iterable[str]) -> List[str]:
        return [f"sudo zypper --non-interactive remove {join_names(names)}"]

    def clean_commands(self) -> List[str]:
        return ["sudo zypper clean --all"]

    def availability_commands(self, name: str) -> List[str]:
        return [f"zypper --non-interactive info {name}"]
