"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import date

# Earliest date the date picker accepts.
EARLIEST_DATE = date(2020, 1, 1)
# How far past today a date may be selected.
MAX_DAYS_AHEAD = 365

ISO_DATE_FORMAT = "%Y-%m-%d"
REPORT_DATE_FORMAT = "%B %d, %Y"
HEADER_DATE_FORMAT = "%A, %B %d, %Y"

EXPORT_FILENAME_TEMPLATE = "attendance_{date}.csv"
