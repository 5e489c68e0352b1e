"""
Linux host implementation of HostInterface.

Release information comes from the `distro` package, kernel and machine
from `platform`, and everything else from host commands run through
CommandExecutor so their output lands in the log file.
"""

import logging
import os
import platform
import shutil
import socket
from typing import Dict, Optional

import distro

from lustreclient.config import LOGGER_NAME, NETWORK_TOOL
from lustreclient.interfaces.host import HostInterface
from lustreclient.utils import CommandExecutor


class LinuxHost(HostInterface):

    def __init__(self, executor: Optional[CommandExecutor] = None):
        self.executor = executor or CommandExecutor(logging.getLogger(LOGGER_NAME))

    def os_release(self) -> Dict[str, str]:
        return {
            "id": distro.id(),
            "name": distro.name(),
            "version": distro.version(),
        }

    def file_exists(self, path: str) -> bool:
        return os.path.isfile(path)

    def kernel_release(self) -> str:
        return platform.release()

    def arch(self) -> str:
        return platform.machine()

    def which(self, tool: str) -> Optional[str]:
        return shutil.which(tool)

    def module_loaded(self, module: str) -> bool:
        stdout, _, return_code = self.executor.execute(["lsmod"])
        if return_code != 0:
            return False
        for line in stdout.splitlines()[1:]:
            fields = line.split()
            if fields and fields[0] == module:
                return True
        return False

    def load_module(self, module: str, verbose: bool = False) -> bool:
        command = ["sudo", "modprobe"]
        if verbose:
            command.append("-v")
        command.append(module)
        _, _, return_code = self.executor.execute(command)
        return return_code == 0

    def module_info(self, module: str) -> Optional[str]:
        stdout, _, return_code = self.executor.execute(["sudo", "modinfo", module])
        if return_code != 0:
            return None
        return stdout

    def tool_version(self, tool: str) -> Optional[str]:
        stdout, _, return_code = self.executor.execute([tool, "--version"])
        if return_code != 0:
            return None
        return stdout.strip()

    def resolve_hostname(self, hostname: str) -> Optional[str]:
        try:
            return socket.gethostbyname(hostname)
        except OSError:
            return None

    def ping(self, target: str) -> bool:
        _, _, return_code = self.executor.execute([NETWORK_TOOL, "ping", target])
        return return_code == 0

    def file_contains(self, path: str, text: str) -> bool:
        try:
            with open(path, 'r') as f:
                return text in f.read()
        except OSError:
            return False
