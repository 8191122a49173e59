"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

VACATION_CODE = 9001
FLEX_DAY_CODE = 9003

WORKDAYS_PER_WEEK = 5

# Column positions in the exported working-times table
DATE_COLUMN = 0
CATEGORY_COLUMN = 1
START_TIME_COLUMN = 6
END_TIME_COLUMN = 7
MIN_COLUMNS = END_TIME_COLUMN + 1

TABLE_DELIMITER = ";"
TABLE_DATE_FORMAT = "%d.%m.%Y"

DEFAULT_DOWNLOAD_TIMEOUT_SECONDS = 60
DEFAULT_PAGE_TIMEOUT_SECONDS = 30
