"""
Add a column of q-values to a report table to account for multiple comparisons

This module provides functions for:
- Adding adjusted p-values (q-values) to a report table (`add_q`)
"""

import logging
from typing import Optional

from summary_tables.constants.system import LOGGER_NAME
from summary_tables.constants.tables import (
    DEFAULT_ADJUSTMENT_METHOD,
    NO_ADJUSTMENT,
    P_VALUE_COL,
    Q_VALUE_COL,
)
from summary_tables.constants.theme import (
    ADD_Q_PVALUE_FUN,
    PKGWIDE_LANGUAGE,
    PKGWIDE_PVALUE_FUN,
    PKGWIDE_QUIET,
)
from summary_tables.models.significance import (
    get_method_label,
    get_statsmodels_method,
    p_value_correction,
)
from summary_tables.tables.header import (
    modify_header,
    table_header_fill_missing,
    table_header_fmt_fun,
    table_header_footnote,
)
from summary_tables.tables.report_table import ReportTable
from summary_tables.theme import Theme
from summary_tables.utils.formatting import resolve_formatter
from summary_tables.utils.translation import translate_text

logger = logging.getLogger(LOGGER_NAME)


def _describe_adjustment(method: str) -> str:
    if method == NO_ADJUSTMENT:
        return f"x.table_body['{P_VALUE_COL}'] as is (method='{NO_ADJUSTMENT}' leaves p-values unadjusted)"
    return f"multipletests(x.table_body['{P_VALUE_COL}'], method='{get_statsmodels_method(method)}')"


def add_q(
    x: ReportTable,
    method: str = DEFAULT_ADJUSTMENT_METHOD,
    pvalue_fun=None,
    quiet: Optional[bool] = None,
    theme: Optional[Theme] = None,
) -> ReportTable:
    """
    Add a column of q-values (p-values adjusted for multiple comparisons).

    Adjustments are performed with ``statsmodels.stats.multitest.multipletests``.

    :param x: Report table with a ``p.value`` column in its body.
    :param method: Adjustment method: ``holm``, ``hochberg``, ``hommel``,
        ``bonferroni``, ``BH``, ``BY``, ``fdr`` or ``none``. Default ``"fdr"``.
    :param pvalue_fun: Formatter (or format string) for the q-values. Defaults
        to the theme's ``add_q-arg:pvalue_fun``, then ``pkgwide-fn:pvalue_fun``,
        then the formatter of the ``p.value`` column.
    :param quiet: If True, do not log the adjustment performed. Defaults to
        the theme's ``pkgwide-lgl:quiet``, then False.
    :param theme: Theme overriding package defaults.
    :return: Copy of ``x`` with a ``q.value`` column.
    """
    theme = theme if theme is not None else Theme()

    # setting defaults
    if quiet is None:
        quiet = theme.get_theme_element(PKGWIDE_QUIET, default=False)

    # checking inputs
    if not isinstance(x, ReportTable):
        raise TypeError(f"`x` must be a ReportTable object, got {type(x).__name__}.")

    if P_VALUE_COL not in x.table_body.columns:
        raise KeyError(
            f"There is no p-value column. `x.table_body` must have a column called '{P_VALUE_COL}'."
        )

    # formatter from the argument, the theme, or the p-value column
    formatter = resolve_formatter(
        [
            lambda: pvalue_fun,
            lambda: theme.get_theme_element(ADD_Q_PVALUE_FUN),
            lambda: theme.get_theme_element(PKGWIDE_PVALUE_FUN),
            lambda: x.get_column_formatter(P_VALUE_COL),
        ]
    )

    # perform multiple comparisons
    x = x.copy()
    x.table_body = p_value_correction(
        x.table_body, P_VALUE_COL, correction_method=method, p_corr_column=Q_VALUE_COL
    )
    if not quiet:
        logger.info(f"add_q: Adjusting p-values with\n`{_describe_adjustment(method)}`")

    # update table_header
    language = theme.get_theme_element(PKGWIDE_LANGUAGE)
    footnote_text = translate_text(get_method_label(method), language)

    table_header = table_header_fill_missing(x.table_header, x.table_body)
    table_header = table_header_fmt_fun(table_header, {Q_VALUE_COL: formatter})
    x.table_header = table_header_footnote(table_header, {Q_VALUE_COL: footnote_text})

    x = modify_header(x, {Q_VALUE_COL: f"**{translate_text('q-value', language)}**"})

    # adding call
    x.add_call("add_q", {"method": method, "pvalue_fun": pvalue_fun, "quiet": quiet})

    return x
