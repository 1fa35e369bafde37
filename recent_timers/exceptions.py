"""Custom exception classes for the recent timers cache."""


class RecentTimersError(Exception):
    """Base exception for recent timers errors."""
    pass


class InvalidEntryError(RecentTimersError, ValueError):
    """Exception raised when a timer record is missing required fields or has the wrong types."""
    pass


class StorageError(RecentTimersError):
    """Exception raised when the storage slot cannot be read or written."""
    pass


class CorruptStorageError(StorageError):
    """Exception raised when the storage slot holds data that cannot be parsed."""
    pass
