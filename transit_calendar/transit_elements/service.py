from datetime import date
from typing import List, FrozenSet

from transit_calendar.date_tools import create_days_between, to_date, Weekday
from transit_calendar.log import logger


class Service:
    """Transit service built with data from calendar.txt from GTFS

    * service_id (:obj:`str`):
    * monday (:obj:`int`): Flag if the route runs on mondays (1 for **True**, 0 for **False**)
    * tuesday (:obj:`int`): Flag if the route runs on tuesdays (1 for **True**, 0 for **False**)
    * wednesday (:obj:`int`): Flag if the route runs on wednesdays (1 for **True**, 0 for **False**)
    * thursday (:obj:`int`): Flag if the route runs on thursdays (1 for **True**, 0 for **False**)
    * friday (:obj:`int`): Flag if the route runs on fridays (1 for **True**, 0 for **False**)
    * saturday (:obj:`int`): Flag if the route runs on saturdays (1 for **True**, 0 for **False**)
    * sunday (:obj:`int`): Flag if the route runs on sundays (1 for **True**, 0 for **False**)
    * start_date (:obj:`date`): Start date for this service. **None** if not defined
    * end_date (:obj:`date`): End date for this service. **None** if not defined
    * dates (:obj:`List[date]`): List of all dates for which this service is active between its start and end dates
    """

    def __init__(self) -> None:
        self.service_id = ""
        self.monday = 0
        self.tuesday = 0
        self.wednesday = 0
        self.thursday = 0
        self.friday = 0
        self.saturday = 0
        self.sunday = 0
        self.start_date = None
        self.end_date = None

    def _populate(self, record: tuple, headers: list) -> None:
        for key, value in zip(headers, record):
            if key not in self.__dict__.keys():
                raise KeyError(f"{key} field in calendar.txt is unknown field for that file on GTFS")
            self.__dict__[key] = value

        self.start_date = to_date(self.start_date)
        self.end_date = to_date(self.end_date)

        if self.has_bounds and self.end_date < self.start_date:
            logger.warning(f"Service {self.service_id} has start date after end date. It will never be active")

    @property
    def has_bounds(self) -> bool:
        return self.start_date is not None and self.end_date is not None

    @property
    def weekdays(self) -> FrozenSet[Weekday]:
        """Days of the week in which this service runs"""
        return frozenset(day for day in Weekday if int(getattr(self, day.column)))

    def runs_on(self, service_date) -> bool:
        """Whether the weekly schedule of this service covers *service_date*"""
        service_date = to_date(service_date)
        if not self.has_bounds or not self.start_date <= service_date <= self.end_date:
            return False
        return Weekday(service_date.weekday()) in self.weekdays

    @property
    def dates(self) -> List[date]:
        if not self.has_bounds:
            return []
        return [d for d in create_days_between(self.start_date, self.end_date) if self.runs_on(d)]
