# ------------------------------------------------------------
#### CONSTANTS ####
# ------------------------------------------------------------

P_VALUE_COL = "p.value"
Q_VALUE_COL = "q.value"
LABEL_COL = "label"

# table_header descriptor fields, in order
TABLE_HEADER_COLUMNS = [
    "column",
    "label",
    "hide",
    "align",
    "fmt_fun",
    "footnote",
    "footnote_abbrev",
    "spanning_header",
]

DEFAULT_ADJUSTMENT_METHOD = "fdr"

# p.adjust method names accepted by add_q
ADJUSTMENT_METHODS = [
    "holm",
    "hochberg",
    "hommel",
    "bonferroni",
    "BH",
    "BY",
    "fdr",
    "none",
]

ADJUSTMENT_METHOD_LABELS = {
    "holm": "Holm correction for multiple testing",
    "hochberg": "Hochberg correction for multiple testing",
    "hommel": "Hommel correction for multiple testing",
    "bonferroni": "Bonferroni correction for multiple testing",
    "BH": "Benjamini & Hochberg correction for multiple testing",
    "BY": "Benjamini & Yekutieli correction for multiple testing",
    "fdr": "False discovery rate correction for multiple testing",
    "none": "No correction for multiple testing",
}

# method name -> ``statsmodels.stats.multitest.multipletests`` method
# ("none" is the identity and is never passed to statsmodels)
STATSMODELS_METHOD_MAP = {
    "holm": "holm",
    "hochberg": "simes-hochberg",
    "hommel": "hommel",
    "bonferroni": "bonferroni",
    "BH": "fdr_bh",
    "BY": "fdr_by",
    "fdr": "fdr_bh",
}

NO_ADJUSTMENT = "none"
