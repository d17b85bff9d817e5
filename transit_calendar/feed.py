from typing import Dict, List

import pandas as pd


class GTFSFeed:
    """Tables of a GTFS feed, plus the tables derived from them

    Feeds are never changed in place. Every operation that adds or replaces a table returns a new feed,
    so a feed can be held on to as a snapshot.

    .. code-block:: python

        >>> from transit_calendar import GTFSFeed, set_date_service_table

        >>> feed = GTFSFeed({"calendar": calendar_df, "calendar_dates": calendar_dates_df})
        >>> resolved = set_date_service_table(feed)

        >>> resolved.derived("date_service_table")
        >>> feed.has_derived("date_service_table")  # False. The original feed is untouched
    """

    def __init__(self, tables: Dict[str, pd.DataFrame] = None, derived: Dict[str, pd.DataFrame] = None):
        """Instantiates a feed with copies of the given tables

        :Arguments:
            **tables** (:obj:`Dict[str, pd.DataFrame]`): Source tables, keyed by GTFS name (e.g. 'stop_times')

            **derived** (:obj:`Dict[str, pd.DataFrame]`, *Optional*): Tables computed from the source tables
        """
        self.__tables = self.__copy_tables(tables or {})
        self.__derived = self.__copy_tables(derived or {})

    @staticmethod
    def __copy_tables(tables: Dict[str, pd.DataFrame]) -> Dict[str, pd.DataFrame]:
        for name, df in tables.items():
            if not isinstance(df, pd.DataFrame):
                raise TypeError(f"Table {name} must be a pandas DataFrame, not {type(df).__name__}")
        return {name: df.copy() for name, df in tables.items()}

    @property
    def table_names(self) -> List[str]:
        return sorted(self.__tables.keys())

    def contains(self, name: str) -> bool:
        """Whether the feed has the table *name*, even if it has no records"""
        return name in self.__tables

    def table(self, name: str) -> pd.DataFrame:
        if name not in self.__tables:
            raise KeyError(f"The feed has no {name} table")
        return self.__tables[name].copy()

    def has_derived(self, name: str) -> bool:
        return name in self.__derived

    def derived(self, name: str) -> pd.DataFrame:
        if name not in self.__derived:
            raise KeyError(f"{name} has not been computed for this feed")
        return self.__derived[name].copy()

    def replace_tables(self, **tables: pd.DataFrame) -> "GTFSFeed":
        """Returns a new feed with the given source tables added or replaced"""
        new_tables = dict(self.__tables)
        new_tables.update(tables)
        return GTFSFeed(new_tables, self.__derived)

    def with_derived(self, name: str, data: pd.DataFrame) -> "GTFSFeed":
        """Returns a new feed with *data* stored as the derived table *name*, replacing any previous value"""
        new_derived = dict(self.__derived)
        new_derived[name] = data
        return GTFSFeed(self.__tables, new_derived)

    def __repr__(self):
        return f"GTFSFeed(tables={self.table_names}, derived={sorted(self.__derived.keys())})"


def is_gtfs_feed(obj) -> bool:
    return isinstance(obj, GTFSFeed)
