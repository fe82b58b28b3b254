"""
Core module - Domain types, ports, and exceptions.

This module contains:
- domain/: List styles, paradigms, and text aliases
- ports/: Abstract capabilities that adapters and paradigms implement
- exceptions: Centralized exception hierarchy
- validation: Fail-fast argument guards
- services: Factories and the canonical transform entry point
"""

from .domain import *  # noqa: F403
from .exceptions import *  # noqa: F403
from .ports import *  # noqa: F403
from .services import create_config_provider, create_transformer, transform
from .validation import (
    ensure_flag,
    ensure_list_formatter,
    ensure_list_function,
    ensure_names,
    ensure_paradigm,
    ensure_style,
)
