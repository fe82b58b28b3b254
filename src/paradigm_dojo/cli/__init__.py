"""
CLI - Command line interface for paradigm-dojo.
"""

from .app import create_parser, main, run
from .exit_codes import ExitCode


__all__ = ["ExitCode", "create_parser", "main", "run"]
