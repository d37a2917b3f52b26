"""adm CLI - validate a git repository setup and run a git command against it."""

import shlex
from typing import List, Optional

import typer
from rich import print
from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import get_command, get_git_dir, get_remote, get_work_tree
from .errors import VcsError
from .vcs import Git

app = typer.Typer(
    name="adm",
    help="Validate a remote, git directory and working tree, then run git against them",
)

console = Console()
err_console = Console(stderr=True)


def run_git(
    remote: str,
    git_dir: str,
    work_tree: str,
    args: Optional[List[str]],
    verbose: bool = False,
) -> None:
    """
    Build a Git handle and run one command, reporting errors without failing.

    When no args are given the configured command is split into arguments.
    """
    log_console = err_console if verbose else None

    try:
        if not args:
            args = shlex.split(get_command())
        git = Git(remote, git_dir, work_tree, console=log_console)
        output = git.execute(args)
    except (VcsError, ValueError) as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]", soft_wrap=True)
        return

    console.print(output, end="", markup=False, highlight=False, soft_wrap=True)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log executed commands"),
) -> None:
    """Run the configured command when no subcommand is given."""
    if ctx.invoked_subcommand is None:
        run_git(
            get_remote(),
            get_git_dir(),
            get_work_tree(),
            None,
            verbose,
        )


@app.command("run")
def run(
    args: Optional[List[str]] = typer.Argument(
        None, help="Arguments passed to git (e.g. status --short). Defaults to ADM_COMMAND"
    ),
    remote: Optional[str] = typer.Option(
        None, "--remote", "-r", help="Remote repository URL. Defaults to ADM_REMOTE"
    ),
    git_dir: Optional[str] = typer.Option(
        None, "--git-dir", help="Path to git directory. Defaults to ADM_GIT_DIR"
    ),
    work_tree: Optional[str] = typer.Option(
        None, "--work-tree", help="Path to working tree. Defaults to ADM_WORK_TREE"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log executed commands"),
) -> None:
    """Validate the repository setup and run a git command."""
    run_git(
        remote or get_remote(),
        git_dir or get_git_dir(),
        work_tree or get_work_tree(),
        args,
        verbose,
    )


@app.command()
def version() -> None:
    """Show version information."""
    print(f"adm version: [bold]{__version__}[/bold]")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
