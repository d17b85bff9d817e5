import logging
import zipfile
from os.path import basename, isdir, isfile, join

from transit_calendar.column_order import column_order, required_files
from transit_calendar.feed import GTFSFeed
from transit_calendar.parse_csv import parse_csv

logger = logging.getLogger("transit_calendar")


def read_gtfs(file_path: str) -> GTFSFeed:
    """Reads the calendar and timetable tables of a GTFS feed

    :Arguments:
        **file_path** (:obj:`str`): Full path to the GTFS feed, either a zip file (e.g. 'D:/project/my_gtfs_feed.zip')
        or a folder with the text files

    :Returns:
        **feed** (:obj:`GTFSFeed`): Feed with one table per GTFS file found (e.g. 'calendar' for calendar.txt)
    """
    if isdir(file_path):
        tables = _read_folder(file_path)
    elif isfile(file_path):
        tables = _read_zip(file_path)
    else:
        raise FileNotFoundError(f"GTFS feed {file_path} does not exist")

    for txt in required_files:
        if txt[:-4] not in tables:
            logger.warning(f"{txt} not available in this feed")

    logger.info(f"Read {len(tables)} tables from GTFS feed {file_path}")
    return GTFSFeed(tables)


def _read_folder(folder: str) -> dict:
    tables = {}
    for txt, columns in column_order.items():
        file_name = join(folder, txt)
        if not isfile(file_name):
            logger.debug(f"{txt} not available in this feed")
            continue

        logger.debug(f'  Loading "{txt[:-4]}" table')
        tables[txt[:-4]] = parse_csv(file_name, columns)
    return tables


def _read_zip(file_path: str) -> dict:
    try:
        zip_archive = zipfile.ZipFile(file_path)
    except zipfile.BadZipFile as e:
        raise ValueError(f"GTFS feed {file_path} is not valid") from e

    tables = {}
    with zip_archive:
        if zip_archive.testzip() is not None:
            logger.error(f"GTFS feed {file_path} is not valid")
            raise ValueError(f"GTFS feed {file_path} is not valid")

        # Feeds are sometimes zipped with the folder that contains the files
        contents = {basename(x): x for x in zip_archive.namelist() if not x.endswith("/")}
        for txt, columns in column_order.items():
            if txt not in contents:
                logger.debug(f"{txt} not available in this feed")
                continue

            logger.debug(f'  Loading "{txt[:-4]}" table')
            with zip_archive.open(contents[txt], "r") as file:
                tables[txt[:-4]] = parse_csv(file, columns)
    return tables
