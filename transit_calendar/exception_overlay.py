from datetime import date
from typing import Set, Tuple, Union, Optional

import pandas as pd

from transit_calendar.calendar_expander import date_service_frame
from transit_calendar.date_tools import parse_gtfs_dates
from transit_calendar.log import logger
from transit_calendar.relations import CalendarDates


def date_service_pairs(data: pd.DataFrame) -> Set[Tuple[date, str]]:
    missing = [c for c in ["date", "service_id"] if c not in data.columns]
    if missing:
        raise KeyError(f"Date service data requires column(s) that are not present: {', '.join(missing)}")

    dates = parse_gtfs_dates(data["date"])
    return {(d.date(), str(s)) for d, s in zip(dates, data["service_id"]) if not pd.isna(d)}


def apply_exceptions(
    base: pd.DataFrame, calendar_dates: Optional[Union[CalendarDates, pd.DataFrame]] = None
) -> pd.DataFrame:
    """Applies the exceptions in calendar_dates.txt to the dates in which each service runs

    Additions are applied first and removals after them, so a service removed on a date is never active
    on it, even if the same date was also added for that service.

    :Arguments:
        **base** (:obj:`pd.DataFrame`): Pairs of *date* and *service_id*, usually from the expanded calendar

        **calendar_dates** (:obj:`CalendarDates`, *Optional*): Exceptions. Nothing is changed if **None** or empty

    :Returns:
        **date_service** (:obj:`pd.DataFrame`): Unique pairs of *date* and *service_id*
    """
    pairs = date_service_pairs(base)
    if calendar_dates is None:
        return date_service_frame(pairs)

    calendar_dates = CalendarDates(calendar_dates)
    if calendar_dates.empty:
        return date_service_frame(pairs)

    scheduled_services = {service_id for _, service_id in pairs}
    inconsistencies = 0

    msg = "           Service ({}) exists on calendar_dates.txt but is never scheduled on calendar.txt"
    for service_id in sorted(set(calendar_dates.data.service_id) - scheduled_services):
        logger.debug(msg.format(service_id))
        inconsistencies += 1

    additions = date_service_pairs(calendar_dates.additions)
    msg = "ignoring service ({}) addition on {} when the service is already active"
    for service_date, service_id in sorted(additions & pairs):
        logger.debug(msg.format(service_id, service_date))
        inconsistencies += 1
    pairs = pairs | additions

    removals = date_service_pairs(calendar_dates.removals)
    msg = "ignoring service ({}) removal on {} from which the service was absent"
    for service_date, service_id in sorted(removals - pairs):
        logger.debug(msg.format(service_id, service_date))
        inconsistencies += 1
    pairs = pairs - removals

    if inconsistencies:
        logger.info("    Minor inconsistencies found between calendar.txt and calendar_dates.txt")

    logger.debug(f"{len(additions)} service additions and {len(removals)} service removals applied")
    return date_service_frame(pairs)
