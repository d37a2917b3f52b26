"""Core git operations: run commands and validate a repository handle."""

import subprocess
from pathlib import Path
from typing import List, Optional, Union

from rich.console import Console
from rich.markup import escape

from .errors import CommandFailure, InvalidPath, OutputEncodingFailure, SpawnFailure


def _decode(raw: bytes, command: str) -> str:
    """Decode captured process output as strict UTF-8."""
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise OutputEncodingFailure(command, e) from e


def execute(cmd: str, args: List[str], console: Optional[Console] = None) -> str:
    """
    Run an external command and return its stdout.

    Arguments are handed to the process as-is, no shell is involved. On a
    non-zero exit only stderr is decoded, on success only stdout.

    Raises:
        SpawnFailure: the command could not be started
        CommandFailure: the command exited with a non-zero status
        OutputEncodingFailure: the consulted stream was not valid UTF-8
        TypeError: args is a single string rather than a list
    """
    if isinstance(args, str):
        raise TypeError(f"args must be a list of strings, not {args!r}")

    fullcmd = " ".join([cmd, *args])
    if console:
        console.log(f"[dim]Execute {escape(fullcmd)}[/dim]")

    try:
        result = subprocess.run([cmd, *args], capture_output=True)
    except (OSError, ValueError) as e:
        # ValueError: NUL byte in the program name or an argument
        raise SpawnFailure(fullcmd, e) from e

    if result.returncode != 0:
        raise CommandFailure(fullcmd, _decode(result.stderr, fullcmd))

    return _decode(result.stdout, fullcmd)


class Git:
    """
    Validated handle around the git command-line tool.

    Construction checks that the remote answers ``git ls-remote`` and that
    the git directory and working tree exist. These checks are only made
    once; nothing is re-validated afterwards.
    """

    def __init__(
        self,
        remote: str,
        git_dir: Union[str, Path],
        work_tree: Union[str, Path],
        console: Optional[Console] = None,
    ):
        """Validate remote and paths, in that order."""
        self._console = console

        gitout = execute("git", ["ls-remote", remote], console)
        if console:
            console.log(f"[dim]Results of verifying remote url - {escape(gitout)}[/dim]")

        git_dir = Path(git_dir)
        if not git_dir.is_dir():
            raise InvalidPath(git_dir)

        work_tree = Path(work_tree)
        if not work_tree.is_dir():
            raise InvalidPath(work_tree)

        self._remote = remote
        self._git_dir = git_dir
        self._work_tree = work_tree

    @property
    def remote(self) -> str:
        """URL of the remote repository."""
        return self._remote

    @property
    def git_dir(self) -> Path:
        """Path to the git directory (.git)."""
        return self._git_dir

    @property
    def work_tree(self) -> Path:
        """Path to the working tree."""
        return self._work_tree

    def execute(self, args: List[str]) -> str:
        """Execute git with the given arguments and return stdout."""
        return execute("git", args, self._console)

    def __repr__(self) -> str:
        return (
            f"Git(remote={self._remote!r}, git_dir={str(self._git_dir)!r}, "
            f"work_tree={str(self._work_tree)!r})"
        )
