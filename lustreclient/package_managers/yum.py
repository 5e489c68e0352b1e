"""
RPM package managers: yum (EL 7/8/9, Amazon Linux 1), dnf (Amazon Linux 2023)
and amazon-linux-extras (Amazon Linux 2).
"""

from typing import Iterable, List, Optional

from lustreclient.config import RPM_KEY_FILE, YUM_REPOS_DIR
from lustreclient.package_managers.base import ShellPackageManager, join_names


class YumPackageManager(ShellPackageManager):

    name = "yum"
    command = "yum"

    def signing_key_commands(self, url: str) -> List[str]:
        return [
            f"curl {url} -o {RPM_KEY_FILE}",
            f"sudo rpm --import {RPM_KEY_FILE}",
        ]

    def repository_commands(self, url: str, label: str, suite: Optional[str] = None) -> List[str]:
        return [f"sudo curl {url} -o {YUM_REPOS_DIR}/{label}.repo"]

    def refresh_commands(self) -> List[str]:
        return [f"sudo {self.command} makecache"]

    def install_commands(self, names: Iterable[str], upgrade: bool = False) -> List[str]:
        verb = "upgrade" if upgrade else "install"
        return [f"sudo {self.command} {verb} -y {join_names(names)}"]

    def remove_commands(self, names: Iterable[str]) -> List[str]:
        return [f"sudo {self.command} remove -y {join_names(names)}"]

    def autoremove_commands(self) -> List[str]:
        return [f"sudo {self.command} autoremove -y"]

    def clean_commands(self) -> List[str]:
        return [f"sudo {self.command} clean all"]

    def availability_commands(self, name: str) -> List[str]:
        return [f"{self.command} list available {name}"]


class DnfPackageManager(YumPackageManager):

    name = "dnf"
    command = "dnf"


class AmazonLinuxExtrasPackageManager(YumPackageManager):
    """Amazon Linux 2 ships the client as an amazon-linux-extras topic; everything else is yum."""

    name = "amazon-linux-extras"

    def install_commands(self, names: Iterable[str], upgrade: bool = False) -> List[str]:
        if upgrade:
            return super().install_commands(names, upgrade=True)
        return [f"sudo amazon-linux-extras install -y {join_names(names)}"]
