"""Refresh controller: owns the published set of dev-server listeners."""

import logging
import threading
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import asdict, dataclass
from typing import Any

from . import system
from .classifier import classify
from .config import DEFAULT_SCAN_CONFIG, ScanConfiguration, Settings
from .db import NameStore
from .errors import KillFailed, ProbeFailed
from .filters import filter_records
from .parser import ListenerRecord, parse_listeners
from .system import Prober

logger = logging.getLogger(__name__)

Observer = Callable[[tuple[ListenerRecord, ...]], None]


@dataclass(frozen=True)
class PortEntry:
    """A listener ready for display."""

    port: int
    pid: int
    process_name: str
    display_name: str
    icon: str
    custom: bool  # display_name comes from a user override

    @property
    def url(self) -> str:
        return system.listener_url(self.port)

    def summary(self) -> str:
        """One-line description, e.g. ``localhost:3000 - Next.js (node)``."""
        return f"localhost:{self.port} - {self.display_name} ({self.process_name})"

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["url"] = self.url
        return data


class RefreshController:
    """Scan for listeners in the background and publish the results.

    The published records are an immutable tuple swapped in one assignment,
    so readers never see a partial update. Scans run on a worker pool; a
    new rescan does not wait for or cancel one already in flight, and the
    last scan to finish wins.
    """

    def __init__(
        self,
        prober: Prober,
        store: NameStore | None = None,
        scan_config: ScanConfiguration = DEFAULT_SCAN_CONFIG,
        settings: Settings | None = None,
        max_workers: int = 4,
    ) -> None:
        """Initialize controller.

        Args:
            prober: Source of raw lsof lines
            store: Custom name store. If None, uses the default location.
            scan_config: Allowed ports and excluded process names
            settings: Refresh and kill timings
            max_workers: Upper bound on concurrent scans
        """
        self.prober = prober
        self.store = store if store is not None else NameStore()
        self.scan_config = scan_config
        self.settings = settings or Settings()

        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="devports-scan"
        )
        self._lock = threading.Lock()
        self._records: tuple[ListenerRecord, ...] = ()
        self._observers: list[Observer] = []
        self._pending: set[threading.Timer] = set()
        self._stop = threading.Event()
        self._ticker: threading.Thread | None = None

    def __enter__(self) -> "RefreshController":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    @property
    def records(self) -> tuple[ListenerRecord, ...]:
        """Listeners from the most recently completed scan."""
        return self._records

    def find(self, port: int) -> ListenerRecord | None:
        for record in self._records:
            if record.port == port:
                return record
        return None

    def entries(self) -> list[PortEntry]:
        """Published listeners merged with custom names.

        Returns:
            One PortEntry per listener, in port order
        """
        entries = []
        for record in self._records:
            entries.append(
                PortEntry(
                    port=record.port,
                    pid=record.pid,
                    process_name=record.process_name,
                    display_name=self.store.display_name(record),
                    icon=classify(record.process_name).icon,
                    custom=self.store.get(record.port) is not None,
                )
            )
        return entries

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register a callback for every published result set.

        Callbacks run on the scanning thread.

        Returns:
            Function that removes the callback
        """
        with self._lock:
            self._observers.append(observer)

        def unsubscribe() -> None:
            with self._lock:
                if observer in self._observers:
                    self._observers.remove(observer)

        return unsubscribe

    def rescan(self) -> "Future[tuple[ListenerRecord, ...]]":
        """Start a scan in the background.

        Returns:
            Future resolving to the published records
        """
        return self._executor.submit(self._scan)

    def scan_now(self) -> tuple[ListenerRecord, ...]:
        """Run a scan and wait for it to publish."""
        return self.rescan().result()

    def _scan(self) -> tuple[ListenerRecord, ...]:
        try:
            lines = self.prober.probe()
            records = tuple(filter_records(parse_listeners(lines), self.scan_config))
        except ProbeFailed as e:
            logger.warning("Port scan failed: %s", e)
            records = ()
        except Exception:
            logger.exception("Port scan crashed")
            records = ()

        self._publish(records)
        return records

    def _publish(self, records: tuple[ListenerRecord, ...]) -> None:
        with self._lock:
            self._records = records
            observers = list(self._observers)

        logger.debug("Published %d listener(s)", len(records))
        for observer in observers:
            try:
                observer(records)
            except Exception:
                logger.exception("Observer %r failed", observer)

    def kill_listener(self, port: int) -> bool:
        """Kill the process listening on a port, then rescan shortly after.

        Failures to deliver the signal are logged, not raised.

        Args:
            port: Port from the published results

        Returns:
            False if the port is not in the published results
        """
        record = self.find(port)
        if record is None:
            logger.info("No listener on port %d to kill", port)
            return False

        try:
            system.terminate_process(record.pid)
        except KillFailed as e:
            logger.warning("Kill for port %d: %s", port, e)

        self._schedule_rescan(self.settings.kill_rescan_delay)
        return True

    def _schedule_rescan(self, delay: float) -> None:
        def fire() -> None:
            with self._lock:
                self._pending.discard(timer)
            if self._stop.is_set():
                return
            try:
                self.rescan()
            except RuntimeError:
                # Worker pool shut down between the check and the submit
                logger.debug("Controller stopped; dropping delayed rescan")

        timer = threading.Timer(delay, fire)
        timer.daemon = True
        with self._lock:
            self._pending.add(timer)
        timer.start()

    def open_listener(self, port: int) -> str:
        """Open http://localhost:<port> in the default browser.

        Returns:
            The URL that was opened
        """
        url = system.listener_url(port)
        system.open_url(url)
        return url

    def set_override_name(self, port: int, name: str | None) -> None:
        """Set a custom name; empty or None reverts to the framework guess."""
        self.store.set(port, name)

    def start(self, interval: float | None = None) -> None:
        """Scan now and then every `interval` seconds until stop().

        Args:
            interval: Seconds between scans. Defaults to settings.refresh_interval.
        """
        if self._ticker is not None:
            return

        interval = interval or self.settings.refresh_interval
        self._stop.clear()
        self.rescan()

        def tick() -> None:
            while not self._stop.wait(interval):
                self.rescan()

        self._ticker = threading.Thread(target=tick, name="devports-refresh", daemon=True)
        self._ticker.start()
        logger.debug("Auto-refresh every %.1fs", interval)

    def stop(self) -> None:
        """Stop auto-refresh, drop pending rescans and shut the worker pool down."""
        self._stop.set()
        if self._ticker is not None:
            self._ticker.join()
            self._ticker = None

        with self._lock:
            pending = list(self._pending)
            self._pending.clear()
        for timer in pending:
            timer.cancel()

        self._executor.shutdown(wait=True)
