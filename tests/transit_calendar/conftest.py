# The conftest.py file serves as a means of providing fixtures for an entire directory.
# Fixtures defined in a conftest.py can be used by any test in that package without
# needing to import them (pytest will automatically discover them).

import uuid
import zipfile

import pandas as pd
import pytest

from transit_calendar import GTFSFeed

CALENDAR_TXT = """service_id,monday,tuesday,wednesday,thursday,friday,saturday,sunday,start_date,end_date
svcA,1,1,1,1,1,0,0,20200106,20200119
svcB,0,0,0,0,0,1,1,20200106,20200119
"""

CALENDAR_DATES_TXT = """service_id,date,exception_type
svcA,20200108,2
svcB,20200120,1
"""

STOP_TIMES_TXT = """trip_id,arrival_time,departure_time,stop_id,stop_sequence
t1,07:55:00,07:56:00,s1,1
t1,08:00:00,08:01:00,s2,2
t1,08:30:00,08:31:00,s3,3
t2,24:50:00,25:10:00,s1,1
"""

FREQUENCIES_TXT = """trip_id,start_time,end_time,headway_secs
t1,06:00:00,09:00:00,600
"""


def weekly(service_id, start_date, end_date, days=(1, 1, 1, 1, 1, 1, 1)):
    record = {"service_id": service_id}
    record.update(dict(zip(["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"], days)))
    record.update({"start_date": start_date, "end_date": end_date})
    return record


@pytest.fixture
def calendar():
    return pd.DataFrame(
        [
            weekly("svcA", "20200106", "20200119", (1, 1, 1, 1, 1, 0, 0)),
            weekly("svcB", "20200106", "20200119", (0, 0, 0, 0, 0, 1, 1)),
        ]
    )


@pytest.fixture
def calendar_dates():
    return pd.DataFrame(
        {"service_id": ["svcA", "svcB"], "date": ["20200108", "20200120"], "exception_type": [2, 1]}
    )


@pytest.fixture
def stop_times():
    return pd.DataFrame(
        {
            "trip_id": ["t1", "t1", "t1", "t2"],
            "arrival_time": ["07:55:00", "08:00:00", "08:30:00", "24:50:00"],
            "departure_time": ["07:56:00", "08:01:00", "08:31:00", "25:10:00"],
        }
    )


@pytest.fixture
def frequencies():
    return pd.DataFrame(
        {"trip_id": ["t1"], "start_time": ["06:00:00"], "end_time": ["09:00:00"], "headway_secs": [600]}
    )


@pytest.fixture
def feed(calendar, calendar_dates, stop_times, frequencies):
    return GTFSFeed(
        {
            "calendar": calendar,
            "calendar_dates": calendar_dates,
            "stop_times": stop_times,
            "frequencies": frequencies,
        }
    )


@pytest.fixture
def create_path(tmp_path):
    return tmp_path / uuid.uuid4().hex


@pytest.fixture
def gtfs_files():
    return {
        "calendar.txt": CALENDAR_TXT,
        "calendar_dates.txt": CALENDAR_DATES_TXT,
        "stop_times.txt": STOP_TIMES_TXT,
        "frequencies.txt": FREQUENCIES_TXT,
    }


@pytest.fixture
def gtfs_folder(create_path, gtfs_files):
    create_path.mkdir()
    for name, contents in gtfs_files.items():
        (create_path / name).write_text(contents, encoding="utf-8")
    return create_path


@pytest.fixture
def gtfs_zip(tmp_path, gtfs_files):
    zip_path = tmp_path / "gtfs_feed.zip"
    with zipfile.ZipFile(zip_path, "w") as zip_file:
        for name, contents in gtfs_files.items():
            zip_file.writestr(name, contents)
    return zip_path


@pytest.fixture
def calendar_entry():
    return weekly
