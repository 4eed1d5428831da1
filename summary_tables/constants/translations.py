"""
Translation table for the text added to report tables

Keys are the English strings; values map a language code to its translation.
"""

SUPPORTED_LANGUAGES = ["en", "de", "es", "fr"]

TRANSLATIONS = {
    "q-value": {
        "de": "q-Wert",
        "es": "valor q",
        "fr": "valeur q",
    },
    "Holm correction for multiple testing": {
        "de": "Holm-Korrektur für multiples Testen",
        "es": "Corrección de Holm para pruebas múltiples",
        "fr": "Correction de Holm pour tests multiples",
    },
    "Hochberg correction for multiple testing": {
        "de": "Hochberg-Korrektur für multiples Testen",
        "es": "Corrección de Hochberg para pruebas múltiples",
        "fr": "Correction de Hochberg pour tests multiples",
    },
    "Hommel correction for multiple testing": {
        "de": "Hommel-Korrektur für multiples Testen",
        "es": "Corrección de Hommel para pruebas múltiples",
        "fr": "Correction de Hommel pour tests multiples",
    },
    "Bonferroni correction for multiple testing": {
        "de": "Bonferroni-Korrektur für multiples Testen",
        "es": "Corrección de Bonferroni para pruebas múltiples",
        "fr": "Correction de Bonferroni pour tests multiples",
    },
    "Benjamini & Hochberg correction for multiple testing": {
        "de": "Benjamini & Hochberg-Korrektur für multiples Testen",
        "es": "Corrección de Benjamini & Hochberg para pruebas múltiples",
        "fr": "Correction de Benjamini & Hochberg pour tests multiples",
    },
    "Benjamini & Yekutieli correction for multiple testing": {
        "de": "Benjamini & Yekutieli-Korrektur für multiples Testen",
        "es": "Corrección de Benjamini & Yekutieli para pruebas múltiples",
        "fr": "Correction de Benjamini & Yekutieli pour tests multiples",
    },
    "False discovery rate correction for multiple testing": {
        "de": "Korrektur der Falscherkennungsrate für multiples Testen",
        "es": "Corrección de la tasa de falsos descubrimientos para pruebas múltiples",
        "fr": "Correction du taux de fausses découvertes pour tests multiples",
    },
    "No correction for multiple testing": {
        "de": "Keine Korrektur für multiples Testen",
        "es": "Sin corrección para pruebas múltiples",
        "fr": "Aucune correction pour tests multiples",
    },
}
