"""Delete name-matched cluster resources older than a number of days"""

import datetime
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from .exceptions import DeleteError, TimestampParseError
from .protocols import Reporter, ResourceDeleter, ResourceLister, ResourceRecord

TIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"
FRACTIONAL_TIME_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"


def utc_today() -> datetime.date:
    """Return the current calendar date in UTC"""
    return datetime.datetime.now(datetime.timezone.utc).date()


def parse_creation_date(timestamp: Optional[str]) -> datetime.date:
    """
    Parse a creation timestamp into the UTC calendar date it falls on.
    Timestamps look like 2016-08-16T15:23:01Z, optionally with fractional seconds
    :param timestamp: creation timestamp of a resource, may be missing
    :return: UTC date of the timestamp
    :throws: TimestampParseError
    """
    if not timestamp:
        raise TimestampParseError("Missing creation timestamp")
    time_format = FRACTIONAL_TIME_FORMAT if "." in timestamp else TIME_FORMAT
    try:
        return datetime.datetime.strptime(timestamp, time_format).date()
    except (TypeError, ValueError) as ex:
        raise TimestampParseError(
            f"Malformed creation timestamp: {timestamp!r}"
        ) from ex


def days_between(start: datetime.date, today: datetime.date) -> int:
    """Number of calendar days from start to today"""
    return (today - start).days


def filter_by_name(
    records: Iterable[ResourceRecord], query: str
) -> list[ResourceRecord]:
    """Keep records whose name contains query, in their original order"""
    return [record for record in records if query in record.ref.name]


@dataclass(frozen=True)
class Reclaimer:
    """
    List resources of a kind in a namespace and delete the ones whose name
    contains a query and which were created more than a given number of days ago.

    :param lister: an object returning the resources of a kind in a namespace
    :param deleter: an object deleting a single resource
    :param reporter: called with a message for every deletion and failed deletion
    :param today_getter: returns the date resources' age is measured against
    """

    lister: ResourceLister
    deleter: ResourceDeleter
    reporter: Reporter = print
    today_getter: Callable[[], datetime.date] = utc_today

    def reclaim(
        self, kind: str, namespace: str, interval_days: int, query: str
    ) -> list[str]:
        """
        Delete old resources
        :param kind: kind of resource
        :param namespace: namespace of the resources
        :param interval_days: resources this many days old or younger are kept
        :param query: substring resource names must contain
        :return: namespace:kind:name identifiers of the deleted resources
        :throws: ClusterConnectionError
        """
        if interval_days < 0:
            raise ValueError(f"interval_days must not be negative: {interval_days}")

        records = filter_by_name(self.lister(kind, namespace), query)
        today = self.today_getter()

        deleted: list[str] = []
        for record in records:
            try:
                created = parse_creation_date(record.creation_timestamp)
            except TimestampParseError:
                continue

            if days_between(created, today) <= interval_days:
                continue

            identifier = record.ref.identifier
            try:
                self.deleter(record)
            except DeleteError as ex:
                self.reporter(f"Failed removing resource {identifier}: {ex}")
                continue
            self.reporter(f"Removed resource: {identifier}")
            deleted.append(identifier)
        return deleted
