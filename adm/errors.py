"""Error types raised by the vcs module."""

from pathlib import Path
from typing import Union


class VcsError(Exception):
    """Base for every failure raised while driving an external VCS tool."""

    pass


class SpawnFailure(VcsError):
    """Command could not be started at all (missing binary, permissions)."""

    def __init__(self, command: str, error: Union[OSError, ValueError]):
        self.command = command
        self.error = error
        super().__init__(f"Command '{command}' failed to execute - {error}")


class CommandFailure(VcsError):
    """Command ran but exited with a non-zero status."""

    def __init__(self, command: str, stderr: str):
        self.command = command
        self.stderr = stderr
        super().__init__(f"Command '{command}' executed but still failed - {stderr}")


class OutputEncodingFailure(VcsError):
    """Captured output of a command was not valid UTF-8."""

    def __init__(self, command: str, error: UnicodeDecodeError):
        self.command = command
        self.error = error
        super().__init__(f"Failed to retrieve '{command}' output - {error}")


class InvalidPath(VcsError):
    """Path does not exist or is not a directory."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Path '{path}' does not exist or is not a directory")


# Closed set of failure kinds; match against these exhaustively.
VCS_ERRORS = (SpawnFailure, CommandFailure, OutputEncodingFailure, InvalidPath)
