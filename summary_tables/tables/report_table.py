"""
Report table container

A report table bundles:
- ``table_body``: the data shown in the table, one row per summarized variable
- ``table_header``: one descriptor row per body column (see ``tables.header``)
- ``call_list``: the operations applied to the table, oldest first
"""

import copy
from typing import Any, Dict, List, Optional

import pandas as pd

from summary_tables.constants.tables import P_VALUE_COL
from summary_tables.tables.header import table_header_fill_missing, table_header_fmt_fun
from summary_tables.utils.formatting import style_pvalue


class ReportTable:
    """
    Summary/report table: body, header and call history.
    """

    def __init__(
        self,
        table_body: pd.DataFrame,
        table_header: pd.DataFrame,
        call_list: Optional[List[Dict[str, Any]]] = None,
    ):
        """
        :param table_body: The table data.
        :param table_header: One descriptor row per ``table_body`` column.
        :param call_list: Records of the operations applied so far.
        """
        self.table_body = table_body
        self.table_header = table_header
        self.call_list = list(call_list) if call_list is not None else []

    @classmethod
    def from_body(
        cls,
        table_body: pd.DataFrame,
        table_header: Optional[pd.DataFrame] = None,
        call_list: Optional[List[Dict[str, Any]]] = None,
    ) -> "ReportTable":
        """
        Build a report table from its body, filling in the header.

        When the body has a p-value column without a formatter, ``style_pvalue``
        is registered for it.

        :param table_body: The table data.
        :param table_header: Optional partial table header.
        :param call_list: Optional call history.
        :return: The report table.
        """
        table_body = table_body.copy()
        header = table_header_fill_missing(table_header, table_body)

        if P_VALUE_COL in table_body.columns:
            current = header.loc[header["column"] == P_VALUE_COL, "fmt_fun"].iloc[0]
            if current is None:
                header = table_header_fmt_fun(header, {P_VALUE_COL: style_pvalue})

        return cls(table_body, header, call_list)

    def copy(self) -> "ReportTable":
        """Deep copy of the table, safe to modify without touching this one."""
        return ReportTable(
            self.table_body.copy(deep=True),
            self.table_header.copy(deep=True),
            copy.deepcopy(self.call_list),
        )

    def get_column_formatter(self, column: str):
        """
        Formatter registered for ``column`` in the table header.

        :param column: Column name.
        :return: The formatter, or None if none is set.
        """
        fmt_funs = self.table_header.loc[self.table_header["column"] == column, "fmt_fun"]
        if fmt_funs.empty:
            raise KeyError(f"Column not found in table header: {column!r}")
        return fmt_funs.iloc[0]

    def add_call(self, operation: str, arguments: Dict[str, Any]) -> None:
        """
        Record an operation in the call history.

        :param operation: Operation name, e.g. ``"add_q"``.
        :param arguments: The arguments the operation was called with.
        """
        self.call_list.append({"operation": operation, "arguments": dict(arguments)})

    def __repr__(self) -> str:
        return (
            f"ReportTable(rows={len(self.table_body)}, "
            f"columns={list(self.table_body.columns)}, calls={len(self.call_list)})"
        )
