"""
Mock command executor for testing.

Provides a command executor that records commands and returns
mock responses without actual subprocess execution.
"""

import re
from typing import Dict, List, Optional, Tuple

from lustreclient.utils import format_command


class MockCommandExecutor:
    """
    Mock command executor for testing without subprocess calls.

    Records all executed commands and returns predefined responses.

    Attributes:
        responses: Dict mapping command patterns to (stdout, stderr, exit_code).
        executed_commands: List of all commands that were "executed", as strings.
        default_response: Default response when no pattern matches.

    Example:
        executor = MockCommandExecutor({
            r'yum install': ('', 'No package lustre-client available', 1),
        })

        stdout, stderr, code = executor.execute('sudo yum install -y lustre-client')

        executor.assert_command_executed('yum install')
        assert code == 1
    """

    def __init__(
        self,
        responses: Optional[Dict[str, Tuple[str, str, int]]] = None,
        default_response: Tuple[str, str, int] = ('', '', 0)
    ):
        self.responses = responses or {}
        self.default_response = default_response
        self.executed_commands: List[str] = []
        self.logger = None

    def execute(self, command, **kwargs) -> Tuple[str, str, int]:
        command = format_command(command)
        self.executed_commands.append(command)

        for pattern, response in self.responses.items():
            if self._matches(pattern, command):
                return response

        return self.default_response

    def _matches(self, pattern: str, command: str) -> bool:
        """Check if command matches pattern (regex or substring)."""
        try:
            return bool(re.search(pattern, command))
        except re.error:
            return pattern in command

    def add_response(self, pattern: str, stdout: str = '', stderr: str = '', exit_code: int = 0):
        self.responses[pattern] = (stdout, stderr, exit_code)

    def assert_command_executed(self, pattern: str) -> str:
        for cmd in self.executed_commands:
            if self._matches(pattern, cmd):
                return cmd
        raise AssertionError(
            f"No command matching '{pattern}' was executed.\n"
            f"Executed commands: {self.executed_commands}"
        )

    def assert_command_not_executed(self, pattern: str):
        for cmd in self.executed_commands:
            if self._matches(pattern, cmd):
                raise AssertionError(
                    f"Command matching '{pattern}' was unexpectedly executed: {cmd}"
                )

    def get_commands_matching(self, pattern: str) -> List[str]:
        return [cmd for cmd in self.executed_commands if self._matches(pattern, cmd)]

    def clear(self):
        self.executed_commands.clear()

    @property
    def last_command(self) -> Optional[str]:
        return self.executed_commands[-1] if self.executed_commands else None
