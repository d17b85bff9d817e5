from io import TextIOWrapper
import csv

import pandas as pd


def parse_csv(file_name, column_order=None) -> pd.DataFrame:
    column_order = column_order or {}
    tot = []
    if isinstance(file_name, str):
        csvfile = open(file_name, encoding="utf-8-sig")
    else:
        csvfile = TextIOWrapper(file_name, encoding="utf-8-sig")

    contents = csv.reader(csvfile, delimiter=",", quotechar='"')
    numcols = 0
    for row in contents:
        if not len("".join(row).strip()):
            continue
        broken = [x.strip() for x in row]

        if not numcols:
            numcols = len(broken)
        elif len(broken) < numcols:
            broken.extend([""] * (numcols - len(broken)))
        else:
            broken = broken[:numcols]

        tot.append(broken)
    csvfile.close()

    if not tot:
        return pd.DataFrame({c: pd.Series([], dtype=object) for c in column_order})

    titles = [x.lower() for x in tot.pop(0)]
    data = pd.DataFrame(tot, columns=titles, dtype=object)

    if not column_order:
        return data

    missing_cols_names = [x for x in column_order.keys() if x not in data.columns]
    for col in missing_cols_names:
        data[col] = ""

    data = data[list(column_order.keys())].copy()
    for col, col_type in column_order.items():
        if col_type is str:
            continue
        values = data[col].where(data[col] != "", "0")
        data[col] = pd.to_numeric(values).astype(col_type)
    return data
