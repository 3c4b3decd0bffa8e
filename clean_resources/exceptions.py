"""Exceptions raised while cleaning cluster resources"""


class ResourceCleanerError(Exception):
    """The base class for all resource cleaner exceptions."""


class ClusterConnectionError(ResourceCleanerError, ConnectionError):
    """Denote failure to reach the cluster or to list its resources"""


class TimestampParseError(ResourceCleanerError, ValueError):
    """Denote a missing or malformed creation timestamp"""


class DeleteError(ResourceCleanerError):
    """Denote failure to delete a single resource"""
