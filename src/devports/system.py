"""Operating system boundary: socket listing, kill and open."""

import logging
import os
import signal
import subprocess
import webbrowser
from typing import Protocol

from .errors import KillFailed, ProbeFailed

logger = logging.getLogger(__name__)

LSOF_ARGS = ["-iTCP", "-sTCP:LISTEN", "-n", "-P"]


class Prober(Protocol):
    """Anything that can list raw listening-socket lines."""

    def probe(self) -> list[str]: ...


class LsofProber:
    """List TCP sockets in LISTEN state with lsof."""

    def __init__(self, lsof_path: str = "lsof", timeout: float = 10.0) -> None:
        """Initialize prober.

        Args:
            lsof_path: lsof executable name or absolute path
            timeout: Seconds before the lsof run is abandoned
        """
        self.lsof_path = lsof_path
        self.timeout = timeout

    @property
    def command(self) -> list[str]:
        return [self.lsof_path, *LSOF_ARGS]

    def probe(self) -> list[str]:
        """Run lsof and return its output lines.

        Numeric hosts and ports, no DNS resolution. lsof exits with status 1
        when nothing matched, which is not an error.

        Returns:
            Raw stdout lines, header included

        Raises:
            ProbeFailed: If lsof could not run to completion
        """
        try:
            result = subprocess.run(
                self.command,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                text=True,
                errors="replace",
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise ProbeFailed(f"lsof timed out after {self.timeout}s") from e
        except (subprocess.SubprocessError, OSError) as e:
            raise ProbeFailed(f"could not run {self.lsof_path}: {e}") from e

        if result.returncode < 0:
            raise ProbeFailed(f"lsof killed by signal {-result.returncode}")

        lines = result.stdout.splitlines()
        logger.debug("lsof exited %d with %d lines", result.returncode, len(lines))
        return lines


def terminate_process(pid: int) -> None:
    """Forcefully terminate a process (kill -9).

    Args:
        pid: Process ID

    Raises:
        KillFailed: If the signal could not be delivered
    """
    if pid <= 0:
        # 0 and negative pids address process groups
        raise KillFailed(f"refusing to signal pid {pid}")

    try:
        os.kill(pid, signal.SIGKILL)
    except ProcessLookupError as e:
        raise KillFailed(f"process {pid} is already gone") from e
    except PermissionError as e:
        raise KillFailed(f"not permitted to kill process {pid}") from e
    except OSError as e:
        raise KillFailed(f"could not kill process {pid}: {e}") from e

    logger.info("Sent SIGKILL to pid %d", pid)


def listener_url(port: int) -> str:
    """Loopback URL for a local port."""
    return f"http://localhost:{port}"


def open_url(url: str) -> bool:
    """Hand a URL to the default browser.

    Returns:
        True if a browser accepted the URL
    """
    opened = webbrowser.open(url)
    if not opened:
        logger.warning("No browser available to open %s", url)
    return opened
