"""Parse lsof listings into listener records."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# COMMAND PID USER FD TYPE DEVICE SIZE/OFF NODE NAME
MIN_COLUMNS = 9
COMMAND_COLUMN = 0
PID_COLUMN = 1
NAME_COLUMN = 8

MAX_PORT = 65535


@dataclass(frozen=True)
class ListenerRecord:
    """A process listening on a local TCP port at scan time."""

    port: int
    pid: int  # May be stale as soon as the scan returns
    process_name: str


def parse_listeners(lines: Iterable[str]) -> list[ListenerRecord]:
    """Parse lsof output lines into listener records.

    Lines that do not fit the format (too few columns, no port in the
    NAME column, non-numeric pid) are skipped. Order follows the input.

    Args:
        lines: Raw lsof output lines

    Returns:
        List of listener records
    """
    records: list[ListenerRecord] = []
    for line in lines:
        record = parse_line(line)
        if record is not None:
            records.append(record)
    return records


def parse_line(line: str) -> ListenerRecord | None:
    """Parse a single lsof output line.

    Args:
        line: Line such as ``node 1234 me 23u IPv6 0x1 0t0 TCP *:3000 (LISTEN)``

    Returns:
        ListenerRecord, or None if the line does not describe a listener
    """
    parts = line.split()
    if len(parts) < MIN_COLUMNS:
        return None

    port = parse_port(parts[NAME_COLUMN])
    if port is None:
        logger.debug("Skipping line without a usable port: %r", line)
        return None

    pid_str = parts[PID_COLUMN]
    if not _is_decimal(pid_str):
        logger.debug("Skipping line with bad pid: %r", line)
        return None

    return ListenerRecord(port=port, pid=int(pid_str), process_name=parts[COMMAND_COLUMN])


def parse_port(address: str) -> int | None:
    """Extract the port after the last colon of an address field.

    Handles ``*:3000``, ``127.0.0.1:3000`` and ``[::1]:3000``.

    Args:
        address: lsof NAME column

    Returns:
        Port number, or None if missing or out of range
    """
    _, colon, port_str = address.rpartition(":")
    if not colon or not _is_decimal(port_str):
        return None

    port = int(port_str)
    if not 1 <= port <= MAX_PORT:
        return None
    return port


def _is_decimal(text: str) -> bool:
    # ASCII 0-9 only; isdigit() alone accepts "³" and non-Latin digits
    return text.isascii() and text.isdigit()
