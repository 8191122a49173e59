import os

SETTINGS_PATH = os.getenv("FLEXTIME_SETTINGS_PATH", "./gleitzeitconfig.json")

DOWNLOAD_DIR = os.getenv("FLEXTIME_DOWNLOAD_DIR", "./downloads")
CSV_FILE_NAME = os.getenv("FLEXTIME_CSV_FILE", "working_times.csv")

PORTAL_URL = os.getenv("FLEXTIME_PORTAL_URL", "")

SHOW_WINDOW = False

DEBUG = bool(int(os.getenv("DEBUG", "0")))
