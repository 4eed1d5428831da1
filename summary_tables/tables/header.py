"""
Table header helpers

The table header holds one descriptor row per ``table_body`` column (label,
visibility, alignment, formatter, footnotes). This module provides functions for:
- Filling in missing descriptors and fields (`table_header_fill_missing`)
- Setting column formatters (`table_header_fmt_fun`)
- Setting column footnotes (`table_header_footnote`)
- Updating column labels of a report table (`modify_header`)
"""

from typing import Any, Dict, List, Optional

import pandas as pd

from summary_tables.constants.tables import LABEL_COL, TABLE_HEADER_COLUMNS


def _is_missing(value) -> bool:
    # pd.isna is elementwise on list-likes, only scalars count as missing here
    return value is None or (pd.api.types.is_scalar(value) and bool(pd.isna(value)))


def _coalesce(values, defaults) -> List[Any]:
    return [default if _is_missing(value) else value for value, default in zip(values, defaults)]


def _object_column(values, index) -> pd.Series:
    # object dtype keeps None, functions and strings as they are
    return pd.Series(list(values), index=index, dtype=object)


def _check_columns(table_header: pd.DataFrame, columns) -> None:
    missing = sorted(set(columns) - set(table_header["column"]))
    if missing:
        raise KeyError(f"Columns not found in table header: {missing}")


def _set_column_values(table_header: pd.DataFrame, field: str, values: Dict[str, Any]) -> pd.DataFrame:
    """
    Set ``field`` for the columns in ``values``. Values are assigned one cell at
    a time so that functions and other objects are stored as they are.
    """
    _check_columns(table_header, values.keys())
    table_header = table_header.copy()
    table_header[field] = _object_column(
        (
            values[column] if column in values else current
            for column, current in zip(table_header["column"], table_header[field])
        ),
        table_header.index,
    )
    return table_header


def table_header_fill_missing(
    table_header: Optional[pd.DataFrame], table_body: pd.DataFrame
) -> pd.DataFrame:
    """
    Make sure every ``table_body`` column has exactly one descriptor, in body
    column order, with every field filled in.

    Defaults: ``label`` is the column name, ``hide`` is False, ``align`` is
    ``"left"`` for the label column and ``"center"`` otherwise, the remaining
    fields are None.

    :param table_header: Existing table header (may be None or incomplete).
    :param table_body: The table body the header describes.
    :return: The filled table header.
    """
    if table_header is None or table_header.empty:
        table_header = pd.DataFrame(columns=TABLE_HEADER_COLUMNS)

    table_header = table_header.drop_duplicates(subset="column", keep="last")
    filled = pd.DataFrame({"column": list(table_body.columns)}).merge(
        table_header, on="column", how="left"
    )

    for field in TABLE_HEADER_COLUMNS:
        if field not in filled.columns:
            filled[field] = None

    columns = filled["column"].tolist()
    filled["label"] = _object_column(_coalesce(filled["label"], columns), filled.index)
    filled["hide"] = [bool(hide) for hide in _coalesce(filled["hide"], [False] * len(columns))]
    filled["align"] = _object_column(
        _coalesce(
            filled["align"],
            ["left" if column == LABEL_COL else "center" for column in columns],
        ),
        filled.index,
    )
    for field in ["fmt_fun", "footnote", "footnote_abbrev", "spanning_header"]:
        filled[field] = _object_column(_coalesce(filled[field], [None] * len(columns)), filled.index)

    extra_cols = [col for col in filled.columns if col not in TABLE_HEADER_COLUMNS]
    return filled[TABLE_HEADER_COLUMNS + extra_cols]


def table_header_fmt_fun(table_header: pd.DataFrame, fmt_funs: Dict[str, Any]) -> pd.DataFrame:
    """
    Set the formatting function of columns.

    :param table_header: The table header.
    :param fmt_funs: Mapping from column name to formatter.
    :return: Updated copy of the table header.
    """
    return _set_column_values(table_header, "fmt_fun", fmt_funs)


def table_header_footnote(table_header: pd.DataFrame, footnotes: Dict[str, str]) -> pd.DataFrame:
    """
    Set the footnote of columns.

    :param table_header: The table header.
    :param footnotes: Mapping from column name to footnote text.
    :return: Updated copy of the table header.
    """
    return _set_column_values(table_header, "footnote", footnotes)


def modify_header(x, update: Dict[str, str]):
    """
    Set the display label of report table columns and unhide them.

    :param x: The report table.
    :param update: Mapping from column name to label, e.g. ``{"q.value": "**q-value**"}``.
    :return: Updated copy of the report table.
    """
    x = x.copy()
    table_header = _set_column_values(x.table_header, "label", update)
    table_header["hide"] = [
        False if column in update else hide
        for column, hide in zip(table_header["column"], table_header["hide"])
    ]
    x.table_header = table_header
    return x
