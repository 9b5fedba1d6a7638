"""Utility modules for bigfiles.

This module exports commonly used utility functions.
"""

from bigfiles.utils.formatting import (
    console,
    create_record_table,
    err_console,
    format_mib,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from bigfiles.utils.shell import CommandResult, run_command

__all__ = [
    "CommandResult",
    "console",
    "create_record_table",
    "err_console",
    "format_mib",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "run_command",
]
