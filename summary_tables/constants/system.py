LOGGER_NAME = "summary_tables"
