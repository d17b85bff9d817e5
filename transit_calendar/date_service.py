from datetime import date
from typing import List

import pandas as pd

from transit_calendar.calendar_expander import expand_calendar, empty_date_service
from transit_calendar.exception_overlay import apply_exceptions
from transit_calendar.feed import GTFSFeed, is_gtfs_feed
from transit_calendar.log import logger
from transit_calendar.relations import Calendar, CalendarDates, DateServiceTable

DATE_SERVICE_TABLE = "date_service_table"


def set_date_service_table(feed: GTFSFeed) -> GTFSFeed:
    """Resolves every date/service_id combination in the feed

    The weekly schedules in *calendar* are expanded into dates and corrected with the additions and
    removals in *calendar_dates*. The result replaces any previous *date_service_table* among the derived
    tables of the returned feed. The feed passed in is not changed.

    .. code-block:: python

        >>> from transit_calendar import read_gtfs, set_date_service_table, count_services_by_date

        >>> feed = set_date_service_table(read_gtfs("/path/to/gtfs.zip"))
        >>> feed.derived("date_service_table")

        # count the number of services running on each date
        >>> count_services_by_date(feed)

    :Arguments:
        **feed** (:obj:`GTFSFeed`): Feed with the *calendar* and (optionally) *calendar_dates* tables

    :Returns:
        **feed** (:obj:`GTFSFeed`): New feed with the *date_service_table* derived table
    """
    if not is_gtfs_feed(feed):
        raise TypeError(f"Expected a GTFSFeed, got {type(feed).__name__}")

    calendar = Calendar(feed.table("calendar")) if feed.contains("calendar") else None
    calendar_dates = CalendarDates(feed.table("calendar_dates")) if feed.contains("calendar_dates") else None

    base = empty_date_service() if calendar is None else expand_calendar(calendar)
    table = DateServiceTable(apply_exceptions(base, calendar_dates))

    if table.empty:
        logger.warning("No usable calendar data. The date service table for this feed is empty")
    else:
        logger.info(f"Date service table has {len(table)} records")

    return feed.with_derived(DATE_SERVICE_TABLE, table.data)


def date_service_table(feed: GTFSFeed) -> pd.DataFrame:
    """Returns the date service table stored in the feed by :func:`set_date_service_table`"""
    return feed.derived(DATE_SERVICE_TABLE)


def _resolved_table(feed: GTFSFeed) -> DateServiceTable:
    if not is_gtfs_feed(feed):
        raise TypeError(f"Expected a GTFSFeed, got {type(feed).__name__}")

    if not feed.has_derived(DATE_SERVICE_TABLE):
        feed = set_date_service_table(feed)
    return DateServiceTable(date_service_table(feed))


def services_on(feed: GTFSFeed, service_date) -> List[str]:
    """Returns the IDs of all services active on a date, computing the date service table if needed

    :Arguments:
        **service_date** (:obj:`str`): Date of interest. e.g. "2020-04-01" or "20200401"
    """
    return _resolved_table(feed).services_on(service_date)


def dates_available(feed: GTFSFeed) -> List[date]:
    """Returns all dates in which at least one service is active"""
    table = _resolved_table(feed).data
    return sorted(set(table.date.dt.date))


def count_services_by_date(feed: GTFSFeed) -> pd.DataFrame:
    """Returns the number of active services for each date, with columns *date* and *services*"""
    table = _resolved_table(feed).data
    return table.groupby("date").service_id.nunique().reset_index(name="services")
