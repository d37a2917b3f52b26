"""Default settings for the adm entry point."""

import os

DEFAULT_REMOTE = "https://github.com/awkless-dotfiles/adm.git"
DEFAULT_GIT_DIR = "./.git"
DEFAULT_WORK_TREE = "./"
DEFAULT_COMMAND = "status"

# Environment variables that override the defaults above
REMOTE_ENV = "ADM_REMOTE"
GIT_DIR_ENV = "ADM_GIT_DIR"
WORK_TREE_ENV = "ADM_WORK_TREE"
COMMAND_ENV = "ADM_COMMAND"


def get_remote() -> str:
    """Get configured remote URL."""
    return os.getenv(REMOTE_ENV) or DEFAULT_REMOTE


def get_git_dir() -> str:
    """Get configured git directory path."""
    return os.getenv(GIT_DIR_ENV) or DEFAULT_GIT_DIR


def get_work_tree() -> str:
    """Get configured working tree path."""
    return os.getenv(WORK_TREE_ENV) or DEFAULT_WORK_TREE


def get_command() -> str:
    """Get configured git subcommand."""
    return os.getenv(COMMAND_ENV) or DEFAULT_COMMAND
