"""adm - thin, validating wrapper around the git command-line tool."""

__version__ = "0.2.1"
