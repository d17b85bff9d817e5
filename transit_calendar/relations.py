from typing import List, Tuple

import pandas as pd

from transit_calendar.date_tools import parse_gtfs_dates, weekday_columns
from transit_calendar.log import logger
from transit_calendar.transit_elements import Service


class Relation:
    """Table with a fixed set of required columns

    Columns are checked when the relation is built, so any relation in hand is known to carry them.
    The relation keeps its own copy of the data, and hands out copies through *data*.
    """

    required_columns: Tuple[str, ...] = ()

    def __init__(self, data: pd.DataFrame):
        if isinstance(data, Relation):
            data = data._data
        if not isinstance(data, pd.DataFrame):
            raise TypeError(f"{type(self).__name__} must be built from a pandas DataFrame, not {type(data).__name__}")

        missing = [c for c in self.required_columns if c not in data.columns]
        if missing:
            self._fail(KeyError, f"{type(self).__name__} requires column(s) that are not present: {', '.join(missing)}")

        self._data = self._normalize(data.copy())

    def _normalize(self, data: pd.DataFrame) -> pd.DataFrame:
        return data

    @property
    def data(self) -> pd.DataFrame:
        return self._data.copy()

    @property
    def empty(self) -> bool:
        return self._data.shape[0] == 0

    def __len__(self) -> int:
        return self._data.shape[0]

    @staticmethod
    def _fail(error_type, msg: str) -> None:
        logger.error(msg)
        raise error_type(msg)


class Calendar(Relation):
    """Weekly schedules from calendar.txt. Dates become datetime64 (NaT when undefined) and day flags booleans"""

    required_columns = ("service_id", "start_date", "end_date") + weekday_columns

    def _normalize(self, data: pd.DataFrame) -> pd.DataFrame:
        data["service_id"] = data["service_id"].astype(str)
        for col in ["start_date", "end_date"]:
            data[col] = parse_gtfs_dates(data[col])
        for col in weekday_columns:
            data[col] = pd.to_numeric(data[col], errors="coerce").fillna(0).astype(int) != 0
        return data

    def services(self) -> List[Service]:
        headers = list(self.required_columns)
        services = []
        for record in self._data[headers].itertuples(index=False, name=None):
            service = Service()
            service._populate(record, headers)
            services.append(service)
        return services


class CalendarDates(Relation):
    """Service exceptions from calendar_dates.txt. Exception types can only be 1 (added) or 2 (removed)"""

    required_columns = ("service_id", "date", "exception_type")

    ADDED = 1
    REMOVED = 2

    def _normalize(self, data: pd.DataFrame) -> pd.DataFrame:
        data["service_id"] = data["service_id"].astype(str)
        data["date"] = parse_gtfs_dates(data["date"])
        if data["date"].isna().any():
            self._fail(ValueError, "There are exceptions without a date in calendar_dates.txt")

        exception_type = pd.to_numeric(data["exception_type"], errors="coerce")
        illegal = ~exception_type.isin([self.ADDED, self.REMOVED])
        if illegal.any():
            services = ",".join(sorted(data.loc[illegal, "service_id"].unique()))
            self._fail(ValueError, f"illegal service exception type. {services}")
        data["exception_type"] = exception_type.astype(int)
        return data

    @property
    def additions(self) -> pd.DataFrame:
        return self._data.loc[self._data.exception_type == self.ADDED, ["date", "service_id"]]

    @property
    def removals(self) -> pd.DataFrame:
        return self._data.loc[self._data.exception_type == self.REMOVED, ["date", "service_id"]]


class StopTimes(Relation):
    required_columns = ("arrival_time", "departure_time")


class TimedStopTimes(Relation):
    """Stop times that already carry their arrival and departure times in seconds. The time strings are optional"""

    required_columns = ("arrival_time_hms", "departure_time_hms")

    def _normalize(self, data: pd.DataFrame) -> pd.DataFrame:
        for col in ["arrival_time_hms", "departure_time_hms"]:
            data[col] = data[col].astype("Int64")
        return data


class Frequencies(Relation):
    required_columns = ("start_time", "end_time")


class TimedFrequencies(Frequencies):
    required_columns = Frequencies.required_columns + ("start_time_hms", "end_time_hms")

    def _normalize(self, data: pd.DataFrame) -> pd.DataFrame:
        for col in ["start_time_hms", "end_time_hms"]:
            data[col] = data[col].astype("Int64")
        return data


class DateServiceTable(Relation):
    """Resolved pairs of date and service_id. Each pair can only appear once"""

    required_columns = ("date", "service_id")

    def _normalize(self, data: pd.DataFrame) -> pd.DataFrame:
        data = data[list(self.required_columns)].copy()
        data["service_id"] = data["service_id"].astype(str)
        data["date"] = parse_gtfs_dates(data["date"])
        if data["date"].isna().any():
            self._fail(ValueError, "The date service table cannot have undefined dates")
        if data.duplicated().any():
            self._fail(ValueError, "The date service table has repeated date/service_id pairs")
        return data.reset_index(drop=True)

    def services_on(self, service_date) -> List[str]:
        day = parse_gtfs_dates([service_date])[0]
        return sorted(self._data.loc[self._data.date == day, "service_id"].tolist())
