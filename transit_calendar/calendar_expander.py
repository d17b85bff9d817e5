from typing import Dict, List, Tuple, Union
from datetime import date

import pandas as pd

from transit_calendar.date_tools import create_days_between, Weekday
from transit_calendar.log import logger
from transit_calendar.relations import Calendar


def empty_date_service() -> pd.DataFrame:
    return pd.DataFrame({"date": pd.Series([], dtype="datetime64[ns]"), "service_id": pd.Series([], dtype=object)})


def date_service_frame(pairs) -> pd.DataFrame:
    """Builds a date/service_id table out of (date, service_id) pairs, sorted by date and service_id"""
    pairs = sorted(pairs)
    if not pairs:
        return empty_date_service()

    dates, services = zip(*pairs)
    return pd.DataFrame(
        {"date": pd.to_datetime(list(dates)).astype("datetime64[ns]"), "service_id": pd.Series(services, dtype=object)}
    )


def services_by_weekday(calendar: Calendar) -> Dict[Weekday, List[Tuple[str, date, date]]]:
    """Indexes every service with both dates defined under each of the weekdays it runs on"""
    index = {day: [] for day in Weekday}
    for service in calendar.services():
        if not service.has_bounds:
            logger.debug(f"Service {service.service_id} has no start or end date and will not be expanded")
            continue
        for day in service.weekdays:
            index[day].append((service.service_id, service.start_date, service.end_date))
    return index


def expand_calendar(calendar: Union[Calendar, pd.DataFrame]) -> pd.DataFrame:
    """Expands the weekly schedules in calendar.txt into every date in which each service runs

    All dates between the earliest start_date and the latest end_date in the calendar are visited, and each
    service that runs on that day of the week is kept if the date is within its own start and end dates.

    :Arguments:
        **calendar** (:obj:`Calendar`): Weekly schedules. A DataFrame is accepted and checked as a *Calendar*

    :Returns:
        **date_service** (:obj:`pd.DataFrame`): Unique pairs of *date* and *service_id*. Empty if no service in
        the calendar has dates defined
    """
    calendar = Calendar(calendar)
    data = calendar.data

    first_day, last_day = data.start_date.min(), data.end_date.max()
    if pd.isna(first_day) or pd.isna(last_day):
        logger.debug("No start and end dates defined in calendar. Nothing to expand")
        return empty_date_service()

    weekday_services = services_by_weekday(calendar)

    pairs = set()
    for service_date in create_days_between(first_day, last_day):
        for service_id, start_date, end_date in weekday_services[Weekday(service_date.weekday())]:
            if start_date <= service_date <= end_date:
                pairs.add((service_date, service_id))

    period = f"{first_day:%Y-%m-%d} and {last_day:%Y-%m-%d}"
    logger.debug(f"Calendar expanded into {len(pairs)} date/service pairs between {period}")
    return date_service_frame(pairs)
