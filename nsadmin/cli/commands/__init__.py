"""
CLI Commands.

Organized by domain/feature area.
"""

from nsadmin.cli.commands.config import get_config, set_config
from nsadmin.cli.commands.namespace import (
    create_namespace,
    delete_namespace,
    fork,
    stats,
)

__all__ = [
    "create_namespace",
    "delete_namespace",
    "fork",
    "get_config",
    "set_config",
    "stats",
]
