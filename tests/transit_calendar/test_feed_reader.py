import logging
import zipfile
from datetime import date

import pytest

from transit_calendar import read_gtfs, set_date_service_table, set_hms_times, services_on
from transit_calendar.column_order import column_order
from transit_calendar.parse_csv import parse_csv


def test_read_gtfs_zip(gtfs_zip):
    feed = read_gtfs(str(gtfs_zip))

    assert feed.table_names == ["calendar", "calendar_dates", "frequencies", "stop_times"]
    calendar = feed.table("calendar")
    assert calendar.service_id.tolist() == ["svcA", "svcB"]
    assert calendar.monday.tolist() == [1, 0]
    assert feed.table("calendar_dates").exception_type.tolist() == [2, 1]
    assert feed.table("stop_times").stop_sequence.tolist() == [1, 2, 3, 1]


def test_read_gtfs_folder(gtfs_folder):
    feed = read_gtfs(str(gtfs_folder))
    assert feed.table("stop_times").shape[0] == 4


def test_resolve_feed_read_from_disk(gtfs_zip):
    feed = set_hms_times(set_date_service_table(read_gtfs(str(gtfs_zip))))

    assert feed.derived("date_service_table").shape[0] == 14
    assert services_on(feed, date(2020, 1, 8)) == []
    assert services_on(feed, date(2020, 1, 20)) == ["svcB"]
    assert feed.table("stop_times").departure_time_hms.max() == 90600


def test_read_gtfs_zipped_in_folder(tmp_path, gtfs_files):
    zip_path = tmp_path / "nested.zip"
    with zipfile.ZipFile(zip_path, "w") as zip_file:
        for name, contents in gtfs_files.items():
            zip_file.writestr(f"my_feed/{name}", contents)

    assert read_gtfs(str(zip_path)).contains("calendar")


def test_optional_and_required_files(tmp_path, gtfs_files, caplog):
    zip_path = tmp_path / "partial.zip"
    with zipfile.ZipFile(zip_path, "w") as zip_file:
        zip_file.writestr("calendar.txt", gtfs_files["calendar.txt"])

    with caplog.at_level(logging.WARNING, logger="transit_calendar"):
        feed = read_gtfs(str(zip_path))

    assert feed.table_names == ["calendar"]
    assert "stop_times.txt not available in this feed" in caplog.text
    assert "calendar_dates.txt" not in caplog.text, "Optional files should not raise warnings"


def test_invalid_feeds(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_gtfs(str(tmp_path / "does_not_exist.zip"))

    not_a_zip = tmp_path / "feed.zip"
    not_a_zip.write_text("this is not a zip file")
    with pytest.raises(ValueError):
        read_gtfs(str(not_a_zip))


class TestParseCsv:
    def test_bom_case_and_blank_lines(self, tmp_path):
        file_name = tmp_path / "calendar_dates.txt"
        file_name.write_text("\ufeffService_ID,DATE,exception_type\n\nsvcA, 20200108 ,2\n,,\nsvcB,20200120,1\n", "utf-8")

        data = parse_csv(str(file_name), column_order["calendar_dates.txt"])
        assert list(data.columns) == ["service_id", "date", "exception_type"]
        assert data.service_id.tolist() == ["svcA", "svcB"]
        assert data.date.tolist() == ["20200108", "20200120"]
        assert data.exception_type.tolist() == [2, 1]

    def test_short_rows_and_missing_columns(self, tmp_path):
        file_name = tmp_path / "stop_times.txt"
        file_name.write_text("trip_id,arrival_time,departure_time,stop_sequence\nt1,08:00:00\n", "utf-8")

        data = parse_csv(str(file_name), column_order["stop_times.txt"])
        assert data.departure_time.tolist() == [""]
        assert data.stop_id.tolist() == [""]
        assert data.stop_sequence.tolist() == [0]

    def test_header_only(self, tmp_path):
        file_name = tmp_path / "calendar_dates.txt"
        file_name.write_text("service_id,date,exception_type\n", "utf-8")

        data = parse_csv(str(file_name), column_order["calendar_dates.txt"])
        assert data.empty
        assert list(data.columns) == ["service_id", "date", "exception_type"]

    def test_without_column_order(self, tmp_path):
        file_name = tmp_path / "agency.txt"
        file_name.write_text("agency_id,agency_name\n1,Metro\n", "utf-8")

        data = parse_csv(str(file_name))
        assert data.agency_name.tolist() == ["Metro"]
