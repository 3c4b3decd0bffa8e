"""Capabilities the reclaimer needs from a cluster client"""

from dataclasses import dataclass
from typing import Any, Optional, Protocol, Sequence

# pylint: disable=too-few-public-methods


@dataclass(frozen=True)
class ResourceRef:
    """
    Identify a cluster resource

    :param kind: resource kind, e.g. BuildConfig
    :param namespace: namespace holding the resource
    :param name: resource name
    """

    kind: str
    namespace: str
    name: str

    @property
    def identifier(self) -> str:
        """Composite identifier in the form namespace:kind:name"""
        return f"{self.namespace}:{self.kind}:{self.name}"


@dataclass(frozen=True)
class ResourceRecord:
    """
    A listed resource: its reference, its creation timestamp (if it has one) and
    an opaque handle the deleter may use.
    """

    ref: ResourceRef
    creation_timestamp: Optional[str] = None
    handle: Any = None


class ResourceLister(Protocol):
    """
    Given a kind and a namespace, return every resource of that kind in it.
    Raise ClusterConnectionError when the cluster cannot be reached.
    """

    def __call__(self, kind: str, namespace: str) -> Sequence[ResourceRecord]:
        pass


class ResourceDeleter(Protocol):
    """
    Delete a single listed resource. Raise DeleteError on failure.
    """

    def __call__(self, record: ResourceRecord) -> None:
        pass


class Reporter(Protocol):
    """
    Report a progress or failure message
    """

    def __call__(self, message: str, /) -> None:
        pass
