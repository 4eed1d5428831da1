import numpy as np
import pandas as pd
import pytest

from summary_tables.tables.report_table import ReportTable


@pytest.fixture
def table_body():
    return pd.DataFrame(
        {
            "variable": ["age", "grade", "response", "marker"],
            "label": ["Age", "Grade", "Tumor Response", "Marker Level"],
            "stat_1": ["46 (37, 59)", "35 (36%)", "28 (29%)", "0.84 (0.24, 1.57)"],
            "p.value": [0.01, 0.04, 0.03, 0.20],
        }
    )


@pytest.fixture
def report_table(table_body):
    table = ReportTable.from_body(table_body)
    table.add_call("tbl_summary", {"by": "trt"})
    table.add_call("add_p", {})
    return table


@pytest.fixture
def report_table_with_missing(table_body):
    table_body = table_body.copy()
    table_body.loc[1, "p.value"] = np.nan
    return ReportTable.from_body(table_body)
