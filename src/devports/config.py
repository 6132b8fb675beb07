"""Configuration management for devports."""

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import platformdirs
import yaml

logger = logging.getLogger(__name__)

APP_NAME = "devports"


@dataclass(frozen=True)
class ScanConfiguration:
    """Which listeners a scan surfaces."""

    allowed_ports: frozenset[int]
    excluded_process_names: frozenset[str]


# Common dev server ports only
DEV_PORTS: frozenset[int] = frozenset(
    {
        # Web dev
        3000, 3001, 3002, 3003, 3004, 3005,
        3100, 3200, 3300,
        4000, 4001, 4200, 4300,
        5000, 5001, 5173, 5174, 5175, 5500,
        8000, 8001, 8002, 8080, 8081, 8888, 8443,
        9000, 9001, 9090,
        # Databases
        5432,  # PostgreSQL
        3306,  # MySQL
        6379,  # Redis
        27017,  # MongoDB
    }
)

# System and IDE helpers that happen to sit on dev ports
EXCLUDED_PROCESSES: frozenset[str] = frozenset(
    {
        "ControlCe",
        "Control Center",
        "controlcenter",
        "rapportd",
        "Rapport",
        "Cursor",
        "Code Helper",
        "Code - Insiders",
        "TechSmith",
        "stable",
        "mongod",
    }
)

DEFAULT_SCAN_CONFIG = ScanConfiguration(
    allowed_ports=DEV_PORTS,
    excluded_process_names=EXCLUDED_PROCESSES,
)


@dataclass
class Settings:
    """User-tunable runtime settings."""

    refresh_interval: float = 5.0  # Seconds between automatic rescans
    kill_rescan_delay: float = 0.5  # Seconds to wait for the socket to close
    lsof_path: str = "lsof"
    probe_timeout: float = 10.0
    source: str | None = field(default=None, compare=False)


def get_data_dir() -> Path:
    """Get the data directory for devports.

    Returns:
        Path to data directory
    """
    data_dir = Path(platformdirs.user_data_dir(APP_NAME, APP_NAME))
    data_dir.mkdir(parents=True, exist_ok=True, mode=0o700)
    return data_dir


def get_db_path() -> Path:
    """Get the override database file path.

    Returns:
        Path to database file
    """
    return get_data_dir() / "overrides.db"


def get_log_path() -> Path:
    """Get the log file path.

    Returns:
        Path to log file
    """
    return get_data_dir() / "devports.log"


def get_settings_path() -> Path:
    """Get the settings file path (it may not exist).

    Returns:
        Path to settings.yml in the user config directory
    """
    return Path(platformdirs.user_config_dir(APP_NAME, APP_NAME)) / "settings.yml"


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from a YAML file.

    Missing, unreadable or malformed files yield the defaults. Unknown keys
    are ignored and invalid values keep their default.

    Args:
        path: Settings file. Defaults to get_settings_path().

    Returns:
        Settings instance
    """
    path = path or get_settings_path()
    settings = Settings()

    if not path.exists():
        return settings

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Ignoring settings file %s: %s", path, e)
        return settings

    if not isinstance(data, dict):
        if data is not None:
            logger.warning("Ignoring settings file %s: not a mapping", path)
        return settings

    known = {f.name for f in fields(Settings)} - {"source"}
    for key, value in data.items():
        if key not in known:
            logger.debug("Unknown setting %r in %s", key, path)
            continue
        if not _valid_setting(key, value):
            logger.warning("Invalid value for %s in %s: %r", key, path, value)
            continue
        setattr(settings, key, value if key == "lsof_path" else float(value))

    settings.source = str(path)
    return settings


def _valid_setting(key: str, value: Any) -> bool:
    if key == "lsof_path":
        return isinstance(value, str) and bool(value.strip())
    # bools are ints too
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return value > 0
