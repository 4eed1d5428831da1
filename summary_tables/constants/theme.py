"""
Theme element names understood by the package
"""

ADD_Q_PVALUE_FUN = "add_q-arg:pvalue_fun"
PKGWIDE_PVALUE_FUN = "pkgwide-fn:pvalue_fun"
PKGWIDE_QUIET = "pkgwide-lgl:quiet"
PKGWIDE_LANGUAGE = "pkgwide-str:language"

THEME_ELEMENTS = [
    ADD_Q_PVALUE_FUN,
    PKGWIDE_PVALUE_FUN,
    PKGWIDE_QUIET,
    PKGWIDE_LANGUAGE,
]

DEFAULT_LANGUAGE = "en"
