"""Utility modules for IPP CLI."""

from .console import (
    _rich_success,
    _rich_error,
    _rich_warning,
    _rich_info,
    _rich_echo,
    _rich_panel,
    _create_fragments_table,
    _get_console,
    STATUS_SYMBOLS
)

__all__ = [
    '_rich_success',
    '_rich_error',
    '_rich_warning',
    '_rich_info',
    '_rich_echo',
    '_rich_panel',
    '_create_fragments_table',
    '_get_console',
    'STATUS_SYMBOLS'
]
