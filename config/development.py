import os

# Policy settings (weekly hours, starting balance, period, browser path)
SETTINGS_PATH = os.getenv("FLEXTIME_SETTINGS_PATH", "./gleitzeitconfig.json")

# Where the browser downloads the export, and the name it is renamed to
DOWNLOAD_DIR = os.getenv("FLEXTIME_DOWNLOAD_DIR", "./downloads")
CSV_FILE_NAME = os.getenv("FLEXTIME_CSV_FILE", "working_times.csv")

# Working-times overview page of the time-tracking portal
PORTAL_URL = os.getenv("FLEXTIME_PORTAL_URL", "")

SHOW_WINDOW = bool(int(os.getenv("SHOW_WINDOW", "1")))

DEBUG = bool(int(os.getenv("DEBUG", "1")))
