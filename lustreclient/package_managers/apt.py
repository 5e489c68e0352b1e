from typing import Iterable, List, Optional

from lustreclient.config import UBUNTU_KEYRING, UBUNTU_SOURCES_LIST
from lustreclient.package_managers.base import ShellPackageManager, join_names


class AptPackageManager(ShellPackageManager):
    """apt for Ubuntu. The repository is signed by a dearmored key in a dedicated keyring."""

    name = "apt"

    def signing_key_commands(self, url: str) -> List[str]:
        return [f'bash -c "wget -O - {url} | gpg --dearmor | sudo tee {UBUNTU_KEYRING} >/dev/null"']

    def repository_commands(self, url: str, label: str, suite: Optional[str] = None) -> List[str]:
        entry = f"deb [signed-by={UBUNTU_KEYRING}] {url} {suite} main"
        return [f"sudo bash -c \"echo '{entry}' > {UBUNTU_SOURCES_LIST}\""]

    def refresh_commands(self) -> List[str]:
        return ["sudo apt-get update"]

    def install_commands(self, names: Iterable[str], upgrade: bool = False) -> List[str]:
        if upgrade:
            return [f"sudo apt-get install -y --only-upgrade {join_names(names)}"]
        return [f"sudo apt-get install -y {join_names(names)}"]

    def remove_commands(self, names: Iterable[str]) -> List[str]:
        return [f"sudo apt-get remove -y {join_names(names)}"]

    def autoremove_commands(self) -> List[str]:
        return ["sudo apt-get autoremove -y"]

    def clean_commands(self) -> List[str]:
        return ["sudo apt-get clean"]

    def availability_commands(self, name: str) -> List[str]:
        return [f"apt-cache search --names-only ^{name}$"]

    def package_available(self, name: str) -> bool:
        for command in self.availability_commands(name):
            stdout, _, return_code = self.executor.execute(command)
            if return_code != 0:
                return False
            # Each result line reads "<package> - <description>"
            if not any(line.split(" ", 1)[0] == name for line in stdout.splitlines()):
                return False
        return True
