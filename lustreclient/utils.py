"""
Utility functions for the Lustre client installer.

Classes:
    CommandExecutor: Run host commands, capturing output and logging it.

Functions:
    read_config_file: Load a YAML file of option overrides.
    apply_config_overrides: Merge config file values into parsed arguments.
    format_command: Render a command for log messages.
"""

import io
import logging
import os
import select
import shlex
import subprocess
from typing import Any, Dict, List, Tuple, Union

import yaml

from lustreclient.errors import ConfigurationError, ErrorCode
from lustreclient.installer_logging import VERBOSE

Command = Union[str, List[str]]


def read_config_file(path: str) -> Dict[str, Any]:
    """Load option overrides from a YAML file.

    Args:
        path: Path to the YAML file.

    Returns:
        Dictionary of option names to values. An empty file yields {}.

    Raises:
        ConfigurationError: If the file is missing, unreadable, not valid
            YAML, or does not hold a mapping.
    """
    if not os.path.isfile(path):
        raise ConfigurationError(
            f"Configuration file not found: {path}",
            parameter="config_file",
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
        )

    try:
        with open(path, 'r') as f:
            config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(
            f"Unable to parse configuration file {path}: {e}",
            parameter="config_file",
            code=ErrorCode.CONFIG_PARSE_ERROR,
        ) from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"Configuration file {path} must contain a mapping of option names to values",
            parameter="config_file",
            code=ErrorCode.CONFIG_PARSE_ERROR,
        )
    return config


def apply_config_overrides(args, config: Dict[str, Any], logger: logging.Logger):
    """Set attributes on the argparse namespace from a config mapping.

    Keys may use dashes or underscores. Keys that do not name a known option
    are warned about and ignored.
    """
    for key, value in config.items():
        attr = str(key).replace('-', '_')
        if not hasattr(args, attr):
            logger.warning(f'Ignoring unknown option "{key}" in configuration file')
            continue
        logger.debug(f'Setting option "{attr}" to "{value}" from configuration file')
        setattr(args, attr, value)
    return args


def format_command(command: Command) -> str:
    if isinstance(command, str):
        return command
    return shlex.join(command)


class CommandExecutor:
    """
    Execute host commands in a subprocess, capturing stdout and stderr.

    Output is logged line by line at VERBOSE so it reaches the log file
    without cluttering the console.
    """

    def __init__(self, logger: logging.Logger, debug: bool = False):
        self.logger = logger
        self.debug = debug
        self.process = None

    def execute(self, command: Command) -> Tuple[str, str, int]:
        """
        Execute a command and return its stdout, stderr, and return code.

        Args:
            command: The command to execute (string or list of strings). A
                string is split with shell quoting rules, no shell is involved.

        Returns:
            Tuple of (stdout_content, stderr_content, return_code). A missing
            binary is reported with return code 127.
        """
        self.logger.debug(f"Executing command: {format_command(command)}")

        if isinstance(command, str):
            cmd_args = shlex.split(command)
        else:
            cmd_args = command

        stdout_buffer = io.StringIO()
        stderr_buffer = io.StringIO()

        try:
            self.process = subprocess.Popen(
                cmd_args,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                bufsize=1  # Line buffered
            )
        except FileNotFoundError as e:
            self.logger.debug(f"Command not found: {cmd_args[0]}")
            return "", str(e), 127

        try:
            stdout_fd = self.process.stdout.fileno()

            while self.process.poll() is None:
                readable, _, _ = select.select(
                    [self.process.stdout, self.process.stderr],
                    [],
                    [],
                    0.1
                )

                for stream in readable:
                    line = stream.readline()
                    if not line:  # EOF
                        continue
                    if stream.fileno() == stdout_fd:
                        stdout_buffer.write(line)
                    else:
                        stderr_buffer.write(line)
                    self.logger.log(VERBOSE, line.rstrip())

            for stream, buffer in ((self.process.stdout, stdout_buffer), (self.process.stderr, stderr_buffer)):
                remainder = stream.read()
                if remainder:
                    buffer.write(remainder)
                    for line in remainder.splitlines():
                        self.logger.log(VERBOSE, line)

            return_code = self.process.poll()
            self.logger.debug(f"Command exited with {return_code}: {format_command(command)}")
            return stdout_buffer.getvalue(), stderr_buffer.getvalue(), return_code

        finally:
            if self.process and self.process.poll() is None:
                self.process.terminate()
                try:
                    self.process.wait(timeout=5)
                except subprocess.TimeoutExpired:
                    self.process.kill()
