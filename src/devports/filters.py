"""Filter and deduplicate listener records."""

from collections.abc import Iterable

from .config import DEFAULT_SCAN_CONFIG, ScanConfiguration
from .parser import ListenerRecord

# Always excluded, whatever the scan configuration says
INIT_PROCESSES = frozenset({"launchd", "systemd"})


def is_visible(record: ListenerRecord, config: ScanConfiguration) -> bool:
    """Check a record against the deny-lists and the port allow-list."""
    if record.process_name in INIT_PROCESSES:
        return False
    if record.process_name in config.excluded_process_names:
        return False
    return record.port in config.allowed_ports


def filter_records(
    records: Iterable[ListenerRecord],
    config: ScanConfiguration = DEFAULT_SCAN_CONFIG,
) -> list[ListenerRecord]:
    """Keep visible records, one per port, sorted by port.

    When several processes listen on the same port, the first one in scan
    order wins.

    Args:
        records: Parsed records in scan order
        config: Allowed ports and excluded process names

    Returns:
        Deduplicated records in ascending port order
    """
    by_port: dict[int, ListenerRecord] = {}
    for record in records:
        if not is_visible(record, config):
            continue
        by_port.setdefault(record.port, record)

    return sorted(by_port.values(), key=lambda r: r.port)
