from typing import Union

import pandas as pd

from transit_calendar.date_tools import hhmmss_to_seconds, to_time_string
from transit_calendar.feed import GTFSFeed, is_gtfs_feed
from transit_calendar.log import logger
from transit_calendar.parameters import Parameters
from transit_calendar.relations import StopTimes, TimedStopTimes, Frequencies, TimedFrequencies


def set_hms_times(feed: GTFSFeed, strict: bool = None) -> GTFSFeed:
    """Adds times in seconds to stop_times and frequencies

    *stop_times* gets *arrival_time_hms* and *departure_time_hms*, and *frequencies* (if the feed has any)
    gets *start_time_hms* and *end_time_hms*. The original time strings are kept.

    :Arguments:
        **feed** (:obj:`GTFSFeed`): Feed with a *stop_times* table

        **strict** (:obj:`bool`, *Optional*): Raise on malformed times instead of leaving them undefined.
        Defaults to the *strict_time_parsing* parameter

    :Returns:
        **feed** (:obj:`GTFSFeed`): New feed with the time columns added
    """
    if not is_gtfs_feed(feed):
        raise TypeError(f"Expected a GTFSFeed, got {type(feed).__name__}")

    if strict is None:
        strict = Parameters().parameters["gtfs"]["strict_time_parsing"]

    stop_times = StopTimes(feed.table("stop_times")).data
    frequencies = None
    if feed.contains("frequencies") and feed.table("frequencies").shape[0] > 0:
        frequencies = Frequencies(feed.table("frequencies")).data

    logger.debug("    Parsing stop times")
    for col in ["arrival_time", "departure_time"]:
        stop_times[f"{col}_hms"] = hhmmss_to_seconds(stop_times[col], strict)
    tables = {"stop_times": TimedStopTimes(stop_times).data}

    if frequencies is not None:
        logger.debug("    Parsing frequencies")
        for col in ["start_time", "end_time"]:
            frequencies[f"{col}_hms"] = hhmmss_to_seconds(frequencies[col], strict)
        tables["frequencies"] = TimedFrequencies(frequencies).data

    return feed.replace_tables(**tables)


def filter_stop_times_by_hour(
    stop_times: Union[TimedStopTimes, pd.DataFrame], start_hour: int, end_hour: int
) -> pd.DataFrame:
    """Filters stop times by hour of the day

    Keeps the stop times arriving after *start_hour* and departing before *end_hour*. Both limits are
    exclusive, and can go beyond 24 hours.

    :Arguments:
        **stop_times** (:obj:`TimedStopTimes`): Stop times with times in seconds, as created by
        :func:`set_hms_times`

        **start_hour** (:obj:`int`): Hour of the day after which stop times are kept

        **end_hour** (:obj:`int`): Hour of the day before which stop times are kept

    :Returns:
        **stop_times** (:obj:`pd.DataFrame`): Only the stop times within the hours specified
    """
    data = TimedStopTimes(stop_times).data

    start_seconds, end_seconds = int(start_hour * 3600), int(end_hour * 3600)
    logger.debug(f"Filtering stop times between {to_time_string(start_seconds)} and {to_time_string(end_seconds)}")

    keep = (data.arrival_time_hms > start_seconds) & (data.departure_time_hms < end_seconds)
    return data[keep.fillna(False).astype(bool)]
