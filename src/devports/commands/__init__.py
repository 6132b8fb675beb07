"""Command modules for devports CLI."""

from .config import config
from .kill import kill
from .list import list_cmd
from .names import names
from .open import open_cmd
from .rename import rename, reset
from .watch import watch

__all__ = [
    "config",
    "kill",
    "list_cmd",
    "names",
    "open_cmd",
    "rename",
    "reset",
    "watch",
]
