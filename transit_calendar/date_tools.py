import re
from datetime import timedelta, datetime, date
from enum import IntEnum
from typing import Union, Any, Optional, Iterable, List

import numpy as np
import pandas as pd

from transit_calendar.log import logger
from transit_calendar.parameters import Parameters

HMS_PATTERN = re.compile(r"^(\d+):(\d{1,2}):(\d{1,2})$")


class Weekday(IntEnum):
    """Days of the week, numbered as in :meth:`datetime.date.weekday`"""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def column(self) -> str:
        """Name of the flag for this day in calendar.txt"""
        return self.name.lower()


weekday_columns = tuple(day.column for day in Weekday)


def to_seconds(value: Optional[str]) -> Union[int, Any]:
    if value is None or not isinstance(value, str):
        return value

    day = 0
    if "day" in value:
        day = int(value[: value.find(" d")]) * 24 * 3600
        value = value[value.find(", ") + 2 :]

    # convert the string to second of day
    split = value.strip().split(":")
    if len(split) != 3:
        raise ValueError(f"Time {value} does not have an appropriate format")

    hours, minutes, seconds = map(int, split)
    return hours * 3600 + minutes * 60 + seconds + day


def hhmmss_to_seconds(values: Iterable, strict: Optional[bool] = None) -> pd.Series:
    """Converts a sequence of "HH:MM:SS" strings into seconds since the start of the service day.

    Hours can go beyond 24 for trips that run past midnight, and are kept as they are.

    :Arguments:
        **values** (:obj:`Iterable`): Time strings. A *pd.Series* keeps its index in the result

        **strict** (:obj:`bool`, *Optional*): Raise on malformed values instead of leaving them undefined.
        Defaults to the *strict_time_parsing* parameter

    :Returns:
        **seconds** (:obj:`pd.Series`): Nullable integers, one per input value. Empty, missing and (if not
        strict) malformed values are returned as *<NA>*
    """
    index = values.index if isinstance(values, pd.Series) else None
    values = list(values)

    seconds = []
    malformed = []
    for value in values:
        if value is None or (not isinstance(value, str) and pd.isna(value)):
            seconds.append(pd.NA)
            continue

        text = str(value).strip()
        if not text:
            seconds.append(pd.NA)
            continue

        match = HMS_PATTERN.match(text)
        if match is None:
            malformed.append(value)
            seconds.append(pd.NA)
            continue

        hours, minutes, secs = map(int, match.groups())
        seconds.append(hours * 3600 + minutes * 60 + secs)

    if malformed:
        if strict is None:
            strict = Parameters().parameters["gtfs"]["strict_time_parsing"]
        if strict:
            raise ValueError(f"Time {malformed[0]} does not have an appropriate format")
        sample = ", ".join(str(x) for x in malformed[:5])
        logger.warning(f"{len(malformed)} time values could not be parsed and were left undefined (e.g. {sample})")

    return pd.Series(seconds, index=index, dtype="Int64")


def to_time_string(value: Union[int, None]) -> Union[str, None]:
    # it is ok to pass None
    if value is None:
        return value

    if isinstance(value, str):
        if value.isdigit():
            value = int(value)

    if not isinstance(value, int):
        raise TypeError(f"Time {value} is not integer, but it should")

    return str(timedelta(seconds=value))


def format_date(date: str) -> str:
    return "-".join([date[:4], date[4:6], date[6:]])


def to_date(value) -> Optional[date]:
    """Converts a GTFS date (20200106, "20200106" or "2020-01-06") into a date. Blanks become **None**"""
    if value is None:
        return None

    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        if len(value) == 8 and value.isdigit():
            value = format_date(value)
        return date.fromisoformat(value)

    if pd.isna(value):
        return None

    if isinstance(value, np.datetime64):
        return pd.Timestamp(value).date()

    if isinstance(value, datetime):
        return value.date()

    if isinstance(value, date):
        return value

    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"Date {value} does not have an appropriate format")

    return to_date(str(int(value)))


def parse_gtfs_dates(values: Iterable) -> pd.Series:
    """Returns a datetime64 series for a sequence of GTFS dates, with NaT for the undefined ones"""
    if isinstance(values, pd.Series):
        if pd.api.types.is_datetime64_any_dtype(values):
            return values.dt.normalize().astype("datetime64[ns]")
        index = values.index
    else:
        index = None

    parsed = pd.Series([to_date(x) for x in values], index=index, dtype=object)
    return pd.to_datetime(parsed).astype("datetime64[ns]")


def create_days_between(range_start_date, range_end_date) -> List[date]:
    range_start_date, range_end_date = to_date(range_start_date), to_date(range_end_date)
    numdays = (range_end_date - range_start_date).days + 1
    return [range_start_date + timedelta(days=x) for x in range(numdays)]


def day_of_week(date_value) -> Weekday:
    return Weekday(to_date(date_value).weekday())
