"""devports - see, name, open and kill local development servers."""

__version__ = "0.1.0"

from .classifier import Classification, classify
from .config import DEFAULT_SCAN_CONFIG, ScanConfiguration, Settings, load_settings
from .controller import PortEntry, RefreshController
from .db import NameStore
from .errors import DevPortsError, KillFailed, PersistenceUnavailable, ProbeFailed
from .filters import filter_records
from .parser import ListenerRecord, parse_listeners
from .system import LsofProber

__all__ = [
    "__version__",
    "Classification",
    "classify",
    "DEFAULT_SCAN_CONFIG",
    "ScanConfiguration",
    "Settings",
    "load_settings",
    "PortEntry",
    "RefreshController",
    "NameStore",
    "DevPortsError",
    "KillFailed",
    "PersistenceUnavailable",
    "ProbeFailed",
    "filter_records",
    "ListenerRecord",
    "parse_listeners",
    "LsofProber",
]
