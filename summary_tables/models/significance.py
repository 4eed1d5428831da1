"""
Significance testing helpers

This module provides functions for:
- Adjusting a sequence of p-values for multiple comparisons (`adjust_p_values`)
- Correcting a p-value column of a DataFrame (`p_value_correction`)
- Looking up the display label of an adjustment method (`get_method_label`)
"""

import logging

import numpy as np
import pandas as pd
from statsmodels.stats.multitest import multipletests

from summary_tables.constants.system import LOGGER_NAME
from summary_tables.constants.tables import (
    ADJUSTMENT_METHOD_LABELS,
    ADJUSTMENT_METHODS,
    DEFAULT_ADJUSTMENT_METHOD,
    NO_ADJUSTMENT,
    STATSMODELS_METHOD_MAP,
)

logger = logging.getLogger(LOGGER_NAME)


def _validate_method(method: str) -> str:
    """
    Check the method is one of the accepted adjustment methods.

    :param method: Adjustment method name (case-sensitive).
    :return: The method name.
    """
    if method not in ADJUSTMENT_METHODS:
        raise ValueError(
            f"Invalid adjustment method: {method!r}. Valid options are {ADJUSTMENT_METHODS}."
        )
    return method


def get_statsmodels_method(method: str) -> str:
    """
    Translate an adjustment method name to the name used by ``multipletests``.

    :param method: Adjustment method name, e.g. ``"fdr"`` or ``"BY"``.
    :return: The ``statsmodels`` method name, e.g. ``"fdr_bh"``.
    """
    _validate_method(method)
    if method == NO_ADJUSTMENT:
        raise ValueError(f"{NO_ADJUSTMENT!r} has no statsmodels counterpart")
    return STATSMODELS_METHOD_MAP[method]


def get_method_label(method: str) -> str:
    """
    Human-readable label of an adjustment method, used as the q-value footnote.
    Methods without a label are described by their own name.
    """
    return ADJUSTMENT_METHOD_LABELS.get(method) or method


def adjust_p_values(p_values, method: str = DEFAULT_ADJUSTMENT_METHOD) -> pd.Series:
    """
    Adjust p-values for multiple comparisons.

    Missing p-values are left out of the adjustment (they do not count towards
    the number of tests) and come back as NaN in their original position.

    :param p_values: Sequence of p-values (list, array or Series).
    :param method: One of ``holm``, ``hochberg``, ``hommel``, ``bonferroni``,
        ``BH``, ``BY``, ``fdr`` or ``none``.
    :return: Series of adjusted p-values, same length and order (and index, if
        a Series was passed) as ``p_values``.
    """
    _validate_method(method)
    p_values = pd.Series(p_values, dtype=float)
    adjusted = pd.Series(np.nan, index=p_values.index, dtype=float)

    valid_mask = p_values.notna()
    if not valid_mask.any():
        return adjusted

    if method == NO_ADJUSTMENT:
        adjusted[valid_mask] = p_values[valid_mask]
    else:
        adjusted[valid_mask] = multipletests(
            p_values[valid_mask].to_numpy(), method=get_statsmodels_method(method)
        )[1]

    return adjusted


def p_value_correction(
    input_df,
    p_value_column,
    correction_method=DEFAULT_ADJUSTMENT_METHOD,
    p_corr_column="adjusted_p_value",
):
    """
    Perform multiple testing correction on a p-value column.

    :param input_df: DataFrame containing the p-values to be corrected.
    :param p_value_column: Name of the column containing p-values.
    :param correction_method: Adjustment method, see ``adjust_p_values``.
    :param p_corr_column: Name of the output column for adjusted p-values.
    :return: Copy of ``input_df`` with an added column ``p_corr_column``
        containing adjusted p-values. Rows with NaN p-values stay NaN.
    """
    if p_value_column not in input_df.columns:
        raise KeyError(f"Missing p-value column: {p_value_column!r}")

    output_df = input_df.copy()
    output_df[p_corr_column] = adjust_p_values(
        output_df[p_value_column], method=correction_method
    ).astype(float)

    return output_df
