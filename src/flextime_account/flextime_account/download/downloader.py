from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Callable, Optional

from selenium import webdriver
from selenium.common.exceptions import WebDriverException
from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.chrome.service import Service as ChromeService
from selenium.webdriver.common.by import By
from selenium.webdriver.common.keys import Keys
from selenium.webdriver.edge.options import Options as EdgeOptions
from selenium.webdriver.edge.service import Service as EdgeService
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait
from webdriver_manager.chrome import ChromeDriverManager
from webdriver_manager.microsoft import EdgeChromiumDriverManager

from ..common.console import log, log_error
from ..common.datetime_utils import format_table_date
from ..common.validators import require_file_name, require_non_empty
from ..core.constants import DEFAULT_DOWNLOAD_TIMEOUT_SECONDS, DEFAULT_PAGE_TIMEOUT_SECONDS
from ..core.enums import DownloadStatus
from ..core.exceptions import DownloadError
from .reconcile import csv_files, reconcile_download

# Element ids of the working-times overview page
FROM_INPUT_ID = "application-btccatstime-display-component---Overview--DatumVon-inner"
TO_INPUT_ID = "application-btccatstime-display-component---Overview--DatumBis-inner"
EXPORT_BUTTON_ID = "__button3"

PARTIAL_DOWNLOAD_SUFFIXES = (".crdownload", ".tmp", ".partial")
POLL_SECONDS = 0.5


@dataclass(frozen=True)
class DownloadSettings:
    portal_url: str
    download_dir: Path
    csv_file_name: str
    browser_path: str
    show_window: bool = False
    page_timeout: int = DEFAULT_PAGE_TIMEOUT_SECONDS
    download_timeout: int = DEFAULT_DOWNLOAD_TIMEOUT_SECONDS


def build_driver(settings: DownloadSettings):
    """Launch Edge or Chrome (picked from the executable path) set up to download into `download_dir`."""
    if "msedge" in settings.browser_path.lower():
        options = EdgeOptions()
        service = EdgeService(EdgeChromiumDriverManager().install())
    else:
        options = ChromeOptions()
        service = ChromeService(ChromeDriverManager().install())

    options.binary_location = settings.browser_path
    if settings.show_window:
        options.add_argument("--start-maximized")
    else:
        options.add_argument("--headless=new")
        # nothing is shown, so skip loading images
        options.add_argument("--blink-settings=imagesEnabled=false")
    options.add_experimental_option(
        "prefs",
        {
            "download.default_directory": str(settings.download_dir),
            "download.prompt_for_download": False,
        },
    )

    if isinstance(options, EdgeOptions):
        return webdriver.Edge(service=service, options=options)
    return webdriver.Chrome(service=service, options=options)


class WorkingTimesDownloader:
    """Exports the working-times table from the portal into `download_dir`."""

    def __init__(
        self,
        settings: DownloadSettings,
        *,
        driver_factory: Optional[Callable[[DownloadSettings], object]] = None,
        verbose: bool = False,
    ):
        require_file_name(settings.csv_file_name, "csv_file_name", ".csv")
        self._settings = settings
        self._driver_factory = driver_factory or build_driver
        self._verbose = verbose

    @property
    def table_path(self) -> Path:
        return Path(self._settings.download_dir) / self._settings.csv_file_name

    def download(self, *, period_start: date, period_end: date) -> DownloadStatus:
        require_non_empty(self._settings.portal_url, "portal_url")
        download_dir = Path(self._settings.download_dir)
        download_dir.mkdir(parents=True, exist_ok=True)

        try:
            self._export(format_table_date(period_start), format_table_date(period_end))
        except DownloadError as e:
            log_error(str(e), enabled=self._verbose)
            return e.status

        return reconcile_download(download_dir, self._settings.csv_file_name, verbose=self._verbose)

    def _export(self, period_start: str, period_end: str) -> None:
        try:
            driver = self._driver_factory(self._settings)
        except (WebDriverException, OSError, ValueError) as e:
            raise DownloadError(f"browser could not be launched: {e}", DownloadStatus.BROWSER_LAUNCH_FAILED) from e

        try:
            # headless Chromium ignores the download prefs without this
            driver.execute_cdp_cmd(
                "Page.setDownloadBehavior",
                {"behavior": "allow", "downloadPath": str(self._settings.download_dir)},
            )

            try:
                driver.set_page_load_timeout(self._settings.page_timeout)
                driver.get(self._settings.portal_url)
                self._wait(driver).until(EC.element_to_be_clickable((By.ID, FROM_INPUT_ID)))
            except WebDriverException as e:
                raise DownloadError(f"portal could not be opened: {e}", DownloadStatus.PORTAL_UNREACHABLE) from e
            log("portal opened", enabled=self._verbose)

            before = set(csv_files(Path(self._settings.download_dir)))
            self._enter_date(driver, FROM_INPUT_ID, period_start)
            self._enter_date(driver, TO_INPUT_ID, period_end)
            log(f"requested working times {period_start} - {period_end}", enabled=self._verbose)

            self._wait(driver).until(EC.element_to_be_clickable((By.ID, EXPORT_BUTTON_ID))).click()
            self._wait_for_download(before)
        except WebDriverException as e:
            raise DownloadError(f"download failed: {e}", DownloadStatus.DOWNLOAD_FAILED) from e
        finally:
            driver.quit()

    def _wait(self, driver) -> WebDriverWait:
        return WebDriverWait(driver, self._settings.page_timeout)

    def _enter_date(self, driver, element_id: str, value: str) -> None:
        field = self._wait(driver).until(EC.element_to_be_clickable((By.ID, element_id)))
        field.clear()
        field.send_keys(value, Keys.ENTER)

    def _wait_for_download(self, before: set[str]) -> None:
        """Block until a new, complete csv file shows up (or the timeout passes)."""
        download_dir = Path(self._settings.download_dir)
        deadline = time.monotonic() + self._settings.download_timeout
        while time.monotonic() < deadline:
            partial = any(p.name.endswith(PARTIAL_DOWNLOAD_SUFFIXES) for p in download_dir.iterdir())
            if not partial and set(csv_files(download_dir)) - before:
                return
            time.sleep(POLL_SECONDS)
        log_error("timed out waiting for the download", enabled=self._verbose)
