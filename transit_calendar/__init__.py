from transit_calendar.log import logger, global_logger
from transit_calendar.parameters import Parameters
from transit_calendar.log import Log
from transit_calendar.feed import GTFSFeed, is_gtfs_feed
from transit_calendar.feed_reader import read_gtfs
from transit_calendar.relations import Calendar, CalendarDates, DateServiceTable, StopTimes, TimedStopTimes
from transit_calendar.relations import Frequencies, TimedFrequencies
from transit_calendar.transit_elements import Service
from transit_calendar.date_tools import hhmmss_to_seconds, to_seconds, to_time_string, Weekday
from transit_calendar.calendar_expander import expand_calendar
from transit_calendar.exception_overlay import apply_exceptions
from transit_calendar.date_service import set_date_service_table, date_service_table, services_on
from transit_calendar.date_service import dates_available, count_services_by_date
from transit_calendar.stop_times import set_hms_times, filter_stop_times_by_hour

name = "transit_calendar"
