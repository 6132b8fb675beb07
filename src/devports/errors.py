"""Exceptions raised by devports."""


class DevPortsError(Exception):
    """Base class for devports errors."""

    pass


class ProbeFailed(DevPortsError):
    """Raised when the listening-socket listing could not be produced."""

    pass


class KillFailed(DevPortsError):
    """Raised when a terminate signal could not be delivered."""

    pass


class PersistenceUnavailable(DevPortsError):
    """Raised when the override database cannot be read or written."""

    pass
