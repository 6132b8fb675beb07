"""Database layer for devports - persisted custom port names."""

import json
import logging
import sqlite3
import threading
from pathlib import Path

from .classifier import framework_label
from .config import get_db_path
from .errors import PersistenceUnavailable
from .parser import ListenerRecord

logger = logging.getLogger(__name__)

NAMESPACE_KEY = "DevPorts.customNames"


class NameStore:
    """User-chosen display names keyed by port, backed by SQLite.

    All names live under a single key-value row as a JSON object of
    stringified port to name. The in-memory map is authoritative for the
    session; every mutation is written through synchronously. If the
    database cannot be used the store keeps working in memory only.
    """

    _lock = threading.Lock()

    def __init__(self, db_path: Path | None = None, autoload: bool = True) -> None:
        """Initialize the store.

        Args:
            db_path: Path to the SQLite database file. If None, uses default location.
            autoload: Load stored names immediately
        """
        self.db_path = db_path
        self.persistent = True
        self._names: dict[int, str] = {}
        self._names_lock = threading.Lock()

        try:
            if self.db_path is None:
                self.db_path = get_db_path()
            self._init_schema()
        except (OSError, PersistenceUnavailable) as e:
            logger.warning("Custom names will not be saved: %s", e)
            self.persistent = False

        if autoload:
            self.load()

    def _get_connection(self) -> sqlite3.Connection:
        """Get a database connection."""
        conn = sqlite3.connect(str(self.db_path), check_same_thread=False)
        conn.row_factory = sqlite3.Row
        return conn

    def _init_schema(self) -> None:
        """Create the preferences table if it does not exist."""
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True, mode=0o700)
            with self._lock, self._get_connection() as conn:
                conn.execute(
                    """
                    CREATE TABLE IF NOT EXISTS preferences (
                        key TEXT PRIMARY KEY,
                        value TEXT NOT NULL
                    )
                    """
                )
                conn.commit()
        except (sqlite3.Error, OSError) as e:
            raise PersistenceUnavailable(f"{self.db_path}: {e}") from e

    def _read(self) -> str | None:
        """Read the raw stored mapping.

        Raises:
            PersistenceUnavailable: If the database cannot be read
        """
        try:
            with self._lock, self._get_connection() as conn:
                cursor = conn.execute(
                    "SELECT value FROM preferences WHERE key = ?", (NAMESPACE_KEY,)
                )
                row = cursor.fetchone()
                return row["value"] if row else None
        except sqlite3.Error as e:
            raise PersistenceUnavailable(f"{self.db_path}: {e}") from e

    def _write(self, payload: str) -> None:
        """Replace the stored mapping.

        Raises:
            PersistenceUnavailable: If the database cannot be written
        """
        try:
            with self._lock, self._get_connection() as conn:
                conn.execute(
                    """
                    INSERT INTO preferences (key, value) VALUES (?, ?)
                    ON CONFLICT(key) DO UPDATE SET value = excluded.value
                    """,
                    (NAMESPACE_KEY, payload),
                )
                conn.commit()
        except sqlite3.Error as e:
            raise PersistenceUnavailable(f"{self.db_path}: {e}") from e

    def load(self) -> None:
        """Replace in-memory names with the stored ones.

        Entries whose key is not an integer or whose value is not a string
        are dropped. Unreadable or corrupt storage leaves the store empty.
        """
        names: dict[int, str] = {}

        if self.persistent:
            try:
                raw = self._read()
            except PersistenceUnavailable as e:
                logger.warning("Could not load custom names: %s", e)
                raw = None
            names = _decode(raw)

        self._names = names
        logger.debug("Loaded %d custom name(s)", len(names))

    def save(self) -> None:
        """Write the in-memory names to the database."""
        if not self.persistent:
            return

        payload = json.dumps({str(port): name for port, name in self._names.items()})
        try:
            self._write(payload)
        except PersistenceUnavailable as e:
            logger.warning("Could not save custom names: %s", e)

    def get(self, port: int) -> str | None:
        """Get the custom name for a port.

        Args:
            port: Port number

        Returns:
            Custom name or None if not set
        """
        return self._names.get(port)

    def set(self, port: int, name: str | None) -> None:
        """Set or remove the custom name for a port.

        Args:
            port: Port number
            name: New name. Empty or None removes the custom name.
        """
        with self._names_lock:
            names = dict(self._names)
            if name:
                names[port] = name
            else:
                names.pop(port, None)
            self._names = names
            self.save()

    def clear(self, port: int) -> None:
        """Remove the custom name for a port."""
        self.set(port, None)

    @property
    def names(self) -> dict[int, str]:
        """Copy of all custom names."""
        return dict(self._names)

    def display_name(self, record: ListenerRecord) -> str:
        """Custom name for the record's port, else the framework guess."""
        return self._names.get(record.port) or framework_label(record.process_name)


def _decode(raw: str | None) -> dict[int, str]:
    if not raw:
        return {}

    try:
        data = json.loads(raw)
    except ValueError:
        logger.warning("Stored custom names are corrupt; starting empty")
        return {}

    if not isinstance(data, dict):
        logger.warning("Stored custom names are not a mapping; starting empty")
        return {}

    names: dict[int, str] = {}
    for key, value in data.items():
        try:
            port = int(key)
        except ValueError:
            continue
        if isinstance(value, str) and value:
            names[port] = value
    return names
