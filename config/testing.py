import os

SETTINGS_PATH = os.getenv("FLEXTIME_SETTINGS_PATH", "./tests/.data/gleitzeitconfig.json")

DOWNLOAD_DIR = os.getenv("FLEXTIME_DOWNLOAD_DIR", "./tests/.data/downloads")
CSV_FILE_NAME = os.getenv("FLEXTIME_CSV_FILE", "working_times.csv")

PORTAL_URL = "http://localhost/portal"

SHOW_WINDOW = False

DEBUG = False
TESTING = True
