from collections import OrderedDict

column_order = {
    "stop_times.txt": OrderedDict(
        [
            ("trip_id", str),
            ("arrival_time", str),
            ("departure_time", str),
            ("stop_id", str),
            ("stop_sequence", int),
            # ("stop_headsign", str),
            # ("pickup_type", int),
            # ("shape_dist_traveled", float),
            # ("timepoint", int),
        ]
    ),
    "calendar.txt": OrderedDict(
        [
            ("service_id", str),
            ("monday", int),
            ("tuesday", int),
            ("wednesday", int),
            ("thursday", int),
            ("friday", int),
            ("saturday", int),
            ("sunday", int),
            ("start_date", str),
            ("end_date", str),
        ]
    ),
    "calendar_dates.txt": OrderedDict([("service_id", str), ("date", str), ("exception_type", int)]),
    "frequencies.txt": OrderedDict(
        [
            ("trip_id", str),
            ("start_time", str),
            ("end_time", str),
            ("headway_secs", int),
            # ("exact_times", int)
        ]
    ),
}

required_files = ["stop_times.txt", "calendar.txt"]
