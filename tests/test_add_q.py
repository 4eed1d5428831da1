"""Tests for add_q."""

import logging

import numpy as np
import pandas as pd
import pytest

from summary_tables.add_q import add_q
from summary_tables.constants.tables import ADJUSTMENT_METHODS
from summary_tables.tables.report_table import ReportTable
from summary_tables.theme import Theme
from summary_tables.utils.formatting import style_pvalue


def _header_row(table, column):
    return table.table_header.set_index("column").loc[column]


class TestAddQValues:
    """Test suite for the q-value column."""

    @pytest.mark.parametrize("method", ADJUSTMENT_METHODS)
    def test_one_q_value_per_row(self, report_table, method):
        result = add_q(report_table, method=method, quiet=True)
        assert len(result.table_body["q.value"]) == len(report_table.table_body)
        assert result.table_body["variable"].tolist() == ["age", "grade", "response", "marker"]

    def test_default_method_is_fdr(self, report_table):
        result = add_q(report_table, quiet=True)
        assert result.table_body["q.value"].tolist() == pytest.approx([0.04, 0.16 / 3, 0.16 / 3, 0.20])

    def test_none_is_identity(self, report_table):
        result = add_q(report_table, method="none", quiet=True)
        assert result.table_body["q.value"].tolist() == report_table.table_body["p.value"].tolist()

    def test_bonferroni(self, report_table):
        result = add_q(report_table, method="bonferroni", quiet=True)
        expected = np.minimum(1, report_table.table_body["p.value"] * 4)
        assert result.table_body["q.value"].tolist() == pytest.approx(expected.tolist())

    def test_missing_p_value(self, report_table_with_missing):
        result = add_q(report_table_with_missing, method="bonferroni", quiet=True)
        q_values = result.table_body["q.value"]
        assert np.isnan(q_values[1])
        assert q_values.drop(index=1).tolist() == pytest.approx([0.03, 0.09, 0.60])

    def test_input_not_modified(self, report_table):
        body_before = report_table.table_body.copy()
        header_before = report_table.table_header.copy()
        calls_before = len(report_table.call_list)

        add_q(report_table, quiet=True)

        pd.testing.assert_frame_equal(report_table.table_body, body_before)
        pd.testing.assert_frame_equal(report_table.table_header, header_before)
        assert len(report_table.call_list) == calls_before
        assert "q.value" not in report_table.table_body.columns


class TestAddQErrors:
    """Test suite for invalid inputs."""

    def test_not_a_report_table(self, table_body):
        with pytest.raises(TypeError, match="must be a ReportTable"):
            add_q(table_body)

    def test_missing_p_value_column(self, table_body):
        table = ReportTable.from_body(table_body.drop(columns="p.value"))
        with pytest.raises(KeyError, match="There is no p-value column"):
            add_q(table)

    def test_formatter_not_callable(self, report_table):
        with pytest.raises(TypeError, match="'pvalue_fun' must be a function"):
            add_q(report_table, pvalue_fun=3, quiet=True)

    def test_no_formatter_anywhere(self, report_table):
        table = report_table.copy()
        table.table_header["fmt_fun"] = None
        with pytest.raises(TypeError, match="'pvalue_fun' must be a function"):
            add_q(table, quiet=True)

    def test_unknown_method(self, report_table):
        with pytest.raises(ValueError, match="Invalid adjustment method"):
            add_q(report_table, method="qvalue", quiet=True)


class TestAddQHeader:
    """Test suite for the table header updates."""

    def test_q_value_descriptor(self, report_table):
        result = add_q(report_table, quiet=True)
        assert result.table_header["column"].tolist() == result.table_body.columns.tolist()

        row = _header_row(result, "q.value")
        assert row["label"] == "**q-value**"
        assert not row["hide"]
        assert row["align"] == "center"
        assert row["footnote"] == "False discovery rate correction for multiple testing"

    @pytest.mark.parametrize(
        "method, footnote",
        [
            ("holm", "Holm correction for multiple testing"),
            ("BH", "Benjamini & Hochberg correction for multiple testing"),
            ("none", "No correction for multiple testing"),
        ],
    )
    def test_footnote_names_method(self, report_table, method, footnote):
        result = add_q(report_table, method=method, quiet=True)
        assert _header_row(result, "q.value")["footnote"] == footnote

    def test_other_descriptors_unchanged(self, report_table):
        result = add_q(report_table, quiet=True)
        before = report_table.table_header.set_index("column")
        after = result.table_header.set_index("column").loc[before.index]
        pd.testing.assert_frame_equal(after, before)

    def test_other_footnotes_stay_none(self, report_table):
        result = add_q(report_table, quiet=True)
        header = result.table_header.set_index("column")

        assert header["footnote"].dtype == object
        assert header["label"].dtype == object
        assert header.loc[["variable", "label", "stat_1", "p.value"], "footnote"].tolist() == [None] * 4
        assert header.loc["stat_1", "label"] == "stat_1"

    def test_translated_header_and_footnote(self, report_table):
        theme = Theme({"pkgwide-str:language": "es"})
        result = add_q(report_table, quiet=True, theme=theme)
        row = _header_row(result, "q.value")
        assert row["label"] == "**valor q**"
        assert row["footnote"] == "Corrección de la tasa de falsos descubrimientos para pruebas múltiples"


class TestAddQFormatter:
    """Test suite for the q-value formatter defaults."""

    def test_inherits_p_value_formatter(self, report_table):
        result = add_q(report_table, quiet=True)
        assert _header_row(result, "q.value")["fmt_fun"] is style_pvalue

    def test_explicit_formatter(self, report_table):
        def fmt(x):
            return f"{x:.2f}"

        result = add_q(report_table, pvalue_fun=fmt, quiet=True)
        assert _header_row(result, "q.value")["fmt_fun"] is fmt

    def test_format_string(self, report_table):
        result = add_q(report_table, pvalue_fun="{:.2f}", quiet=True)
        fmt = _header_row(result, "q.value")["fmt_fun"]
        assert fmt(0.0412) == "0.04"
        assert fmt(np.nan) is None

    def test_theme_precedence(self, report_table):
        def add_q_fun(x):
            return "add_q"

        def pkgwide_fun(x):
            return "pkgwide"

        def explicit_fun(x):
            return "explicit"

        both = Theme({"add_q-arg:pvalue_fun": add_q_fun, "pkgwide-fn:pvalue_fun": pkgwide_fun})
        pkgwide_only = Theme({"pkgwide-fn:pvalue_fun": pkgwide_fun})

        assert _header_row(add_q(report_table, quiet=True, theme=both), "q.value")["fmt_fun"] is add_q_fun
        assert _header_row(add_q(report_table, quiet=True, theme=pkgwide_only), "q.value")["fmt_fun"] is pkgwide_fun
        result = add_q(report_table, pvalue_fun=explicit_fun, quiet=True, theme=both)
        assert _header_row(result, "q.value")["fmt_fun"] is explicit_fun

    def test_explicit_formatter_without_p_value_descriptor(self, table_body):
        # header lacks a p.value row, so only the explicit formatter is available
        table = ReportTable.from_body(table_body)
        table.table_header = table.table_header[table.table_header["column"] != "p.value"]

        def fmt(x):
            return f"{x:.2f}"

        result = add_q(table, pvalue_fun=fmt, quiet=True)
        assert _header_row(result, "q.value")["fmt_fun"] is fmt

    def test_p_value_formatter_unchanged(self, report_table):
        result = add_q(report_table, pvalue_fun="{:.2f}", quiet=True)
        assert _header_row(result, "p.value")["fmt_fun"] is style_pvalue


class TestAddQMessages:
    """Test suite for the informational message."""

    def test_logs_adjustment(self, report_table, caplog):
        with caplog.at_level(logging.INFO, logger="summary_tables"):
            add_q(report_table)
        assert "add_q: Adjusting p-values with" in caplog.text
        assert "method='fdr_bh'" in caplog.text

    def test_logs_no_adjustment_for_none(self, report_table, caplog):
        with caplog.at_level(logging.INFO, logger="summary_tables"):
            add_q(report_table, method="none")
        assert "method='none' leaves p-values unadjusted" in caplog.text
        assert "#" not in caplog.text

    def test_quiet(self, report_table, caplog):
        with caplog.at_level(logging.INFO, logger="summary_tables"):
            add_q(report_table, quiet=True)
        assert "add_q" not in caplog.text

    def test_quiet_from_theme(self, report_table, caplog):
        with caplog.at_level(logging.INFO, logger="summary_tables"):
            add_q(report_table, theme=Theme({"pkgwide-lgl:quiet": True}))
        assert "add_q" not in caplog.text

    def test_argument_overrides_theme_quiet(self, report_table, caplog):
        with caplog.at_level(logging.INFO, logger="summary_tables"):
            add_q(report_table, quiet=False, theme=Theme({"pkgwide-lgl:quiet": True}))
        assert "add_q: Adjusting p-values with" in caplog.text


class TestAddQCallList:
    """Test suite for the call history."""

    def test_call_recorded(self, report_table):
        result = add_q(report_table, method="holm", quiet=True)
        assert len(result.call_list) == len(report_table.call_list) + 1
        assert [call["operation"] for call in result.call_list] == ["tbl_summary", "add_p", "add_q"]
        assert result.call_list[-1]["arguments"] == {"method": "holm", "pvalue_fun": None, "quiet": True}

    def test_add_q_twice(self, report_table):
        first = add_q(report_table, quiet=True)
        second = add_q(first, method="bonferroni", quiet=True)

        assert len(second.call_list) == len(first.call_list) + 1
        assert second.table_body.columns.tolist().count("q.value") == 1
        assert second.table_header["column"].tolist().count("q.value") == 1
        assert second.table_body["q.value"].tolist() == pytest.approx([0.04, 0.16, 0.12, 0.80])
        assert _header_row(second, "q.value")["footnote"] == "Bonferroni correction for multiple testing"
