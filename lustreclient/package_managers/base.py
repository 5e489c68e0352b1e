"""
Shared command-building base for package managers.

Each manager describes its operations as command strings. The same strings
are logged by a dry run (`render`) and executed by the live operations, so
what a dry run prints is exactly what a real run would do. Pipelines and
redirections are wrapped in `bash -c`; everything that changes the host is
run through sudo.
"""

import logging
import shlex
from typing import Iterable, List, Optional

from lustreclient.config import SLES_UNSUPPORTED_MODULES_CONF
from lustreclient.errors import CommandExecutionError
from lustreclient.interfaces.package_manager import PackageManagerInterface
from lustreclient.provisioning.plan import (
    AddRepository,
    AddSigningKey,
    AutoRemove,
    CheckPackageAvailable,
    CleanCache,
    EnableUnsupportedModules,
    InstallPackages,
    RefreshCache,
    RemovePackages,
    RewriteRepository,
    Step,
)
from lustreclient.utils import CommandExecutor


def sed_replace(old: str, new: str, path: str, delimiter: str = "#") -> str:
    return f"sudo sed -i 's{delimiter}{old}{delimiter}{new}{delimiter}' {path}"


class ShellPackageManager(PackageManagerInterface):
    """Base class that runs package-manager operations as host commands.

    Subclasses implement the *_commands builders.
    """

    name = "shell"

    def __init__(self, executor: CommandExecutor, logger: Optional[logging.Logger] = None):
        self.executor = executor
        self.logger = logger or executor.logger

    # Command builders
    def signing_key_commands(self, url: str) -> List[str]:
        raise NotImplementedError

    def repository_commands(self, url: str, label: str, suite: Optional[str] = None) -> List[str]:
        raise NotImplementedError

    def rewrite_commands(self, repo_file: str, old_token: str, new_token: str) -> List[str]:
        return [sed_replace(old_token, new_token, repo_file)]

    def refresh_commands(self) -> List[str]:
        raise NotImplementedError

    def install_commands(self, names: Iterable[str], upgrade: bool = False) -> List[str]:
        raise NotImplementedError

    def remove_commands(self, names: Iterable[str]) -> List[str]:
        raise NotImplementedError

    def autoremove_commands(self) -> List[str]:
        return []

    def clean_commands(self) -> List[str]:
        raise NotImplementedError

    def unsupported_modules_commands(self, config_file: str = SLES_UNSUPPORTED_MODULES_CONF) -> List[str]:
        return [f"sudo sed -i 's/allow_unsupported_modules 0/allow_unsupported_modules 1/' {config_file}"]

    def availability_commands(self, name: str) -> List[str]:
        raise NotImplementedError

    def commands_for(self, step: Step) -> List[str]:
        if isinstance(step, EnableUnsupportedModules):
            return self.unsupported_modules_commands(step.config_file)
        if isinstance(step, AddSigningKey):
            return self.signing_key_commands(step.url)
        if isinstance(step, AddRepository):
            return self.repository_commands(step.url, step.label, step.suite)
        if isinstance(step, RewriteRepository):
            return self.rewrite_commands(step.repo_file, step.old_token, step.new_token)
        if isinstance(step, RefreshCache):
            return self.refresh_commands()
        if isinstance(step, CheckPackageAvailable):
            return self.availability_commands(step.name)
        if isinstance(step, InstallPackages):
            return self.install_commands(step.names, upgrade=step.upgrade)
        if isinstance(step, RemovePackages):
            return self.remove_commands(step.names)
        if isinstance(step, AutoRemove):
            return self.autoremove_commands()
        if isinstance(step, CleanCache):
            return self.clean_commands()
        raise ValueError(f"Unknown provisioning step: {step!r}")

    def render(self, step: Step) -> List[str]:
        return self.commands_for(step)

    def _run(self, commands: List[str]) -> List[str]:
        outputs = []
        for command in commands:
            stdout, stderr, return_code = self.executor.execute(command)
            if return_code != 0:
                raise CommandExecutionError(
                    f"Command failed: {command}",
                    command=command,
                    exit_code=return_code,
                    stderr=stderr.strip(),
                )
            outputs.append(stdout)
        return outputs

    # PackageManagerInterface
    def add_signing_key(self, url: str) -> None:
        self._run(self.signing_key_commands(url))

    def add_repository(self, url: str, label: str, suite: Optional[str] = None) -> None:
        self._run(self.repository_commands(url, label, suite))

    def rewrite_repository_revision(self, repo_file: str, old_token: str, new_token: str) -> None:
        self._run(self.rewrite_commands(repo_file, old_token, new_token))

    def refresh_cache(self) -> None:
        self._run(self.refresh_commands())

    def install(self, names: Iterable[str], upgrade: bool = False) -> None:
        self._run(self.install_commands(names, upgrade=upgrade))

    def remove(self, names: Iterable[str]) -> None:
        self._run(self.remove_commands(names))

    def autoremove(self) -> None:
        commands = self.autoremove_commands()
        if not commands:
            self.logger.debug(f"{self.name} has no autoremove operation, skipping")
            return
        self._run(commands)

    def clean_cache(self) -> None:
        self._run(self.clean_commands())

    def enable_unsupported_modules(self, config_file: str) -> None:
        self._run(self.unsupported_modules_commands(config_file))

    def package_available(self, name: str) -> bool:
        for command in self.availability_commands(name):
            _, _, return_code = self.executor.execute(command)
            if return_code != 0:
                return False
        return True


def join_names(names: Iterable[str]) -> str:
    return " ".join(shlex.quote(name) for name in names)
