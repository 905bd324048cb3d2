"""Exceptions raised while synchronizing records."""


class SyncError(Exception):
    """Base class for errors that abort the synchronization of one record."""


class MappingError(SyncError):
    """A database value has no known template representation."""


class RecordNotFound(SyncError):
    """The requested id does not exist in master.mdb."""


class CargoError(SyncError):
    """The wiki answered a cargo query with an error."""


class ConfigError(SyncError):
    """Required configuration is missing."""
