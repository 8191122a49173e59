from __future__ import annotations

from datetime import date

import pytest
from selenium.common.exceptions import TimeoutException, WebDriverException

from src.flextime_account.flextime_account.core.enums import DownloadStatus
from src.flextime_account.flextime_account.core.exceptions import ValidationError
from src.flextime_account.flextime_account.download.downloader import (
    EXPORT_BUTTON_ID,
    FROM_INPUT_ID,
    TO_INPUT_ID,
    DownloadSettings,
    WorkingTimesDownloader,
)


class FakeElement:
    def __init__(self, on_click=None):
        self.typed: list[str] = []
        self._on_click = on_click

    def is_displayed(self):
        return True

    def is_enabled(self):
        return True

    def clear(self):
        self.typed.clear()

    def send_keys(self, *values):
        self.typed.append(values[0])

    def click(self):
        if self._on_click:
            self._on_click()


class FakeDriver:
    def __init__(self, download_dir, *, fail_on_get: bool = False, export_name: str | None = "export.csv"):
        self.quit_called = False
        self.visited: list[str] = []
        self._fail_on_get = fail_on_get

        def export():
            if export_name:
                (download_dir / export_name).write_text("Datum;Art\n", encoding="utf-8")

        self.elements = {
            FROM_INPUT_ID: FakeElement(),
            TO_INPUT_ID: FakeElement(),
            EXPORT_BUTTON_ID: FakeElement(on_click=export),
        }

    def execute_cdp_cmd(self, cmd, params):
        return {}

    def set_page_load_timeout(self, seconds):
        pass

    def get(self, url):
        if self._fail_on_get:
            raise TimeoutException("net::ERR_NAME_NOT_RESOLVED")
        self.visited.append(url)

    def find_element(self, by, value):
        return self.elements[value]

    def quit(self):
        self.quit_called = True


def make_downloader(tmp_path, driver_factory, **overrides):
    values = dict(
        portal_url="https://portal.example/overview",
        download_dir=tmp_path,
        csv_file_name="working_times.csv",
        browser_path="/usr/bin/google-chrome",
        page_timeout=1,
        download_timeout=1,
    )
    values.update(overrides)
    return WorkingTimesDownloader(DownloadSettings(**values), driver_factory=driver_factory)


def test_download_enters_period_and_renames_export(tmp_path):
    driver = FakeDriver(tmp_path)
    downloader = make_downloader(tmp_path, lambda settings: driver)

    status = downloader.download(period_start=date(1999, 1, 1), period_end=date(2022, 9, 15))

    assert status == DownloadStatus.OK
    assert driver.visited == ["https://portal.example/overview"]
    assert driver.elements[FROM_INPUT_ID].typed == ["01.01.1999"]
    assert driver.elements[TO_INPUT_ID].typed == ["15.09.2022"]
    assert driver.quit_called
    assert downloader.table_path.exists()


def test_browser_launch_failure(tmp_path):
    def factory(settings):
        raise WebDriverException("cannot find Chrome binary")

    downloader = make_downloader(tmp_path, factory)

    assert downloader.download(period_start=date(2022, 1, 1), period_end=date(2022, 1, 31)) == DownloadStatus.BROWSER_LAUNCH_FAILED


def test_unreachable_portal_closes_browser(tmp_path):
    driver = FakeDriver(tmp_path, fail_on_get=True)
    downloader = make_downloader(tmp_path, lambda settings: driver)

    status = downloader.download(period_start=date(2022, 1, 1), period_end=date(2022, 1, 31))

    assert status == DownloadStatus.PORTAL_UNREACHABLE
    assert driver.quit_called


def test_nothing_downloaded(tmp_path):
    driver = FakeDriver(tmp_path, export_name=None)
    downloader = make_downloader(tmp_path, lambda settings: driver)

    assert downloader.download(period_start=date(2022, 1, 1), period_end=date(2022, 1, 31)) == DownloadStatus.DOWNLOAD_FAILED


def test_download_dir_is_created(tmp_path):
    target = tmp_path / "nested" / "downloads"
    driver = FakeDriver(target)
    downloader = make_downloader(tmp_path, lambda settings: driver, download_dir=target)

    assert downloader.download(period_start=date(2022, 1, 1), period_end=date(2022, 1, 31)) == DownloadStatus.OK


@pytest.mark.parametrize("name", ["working_times.txt", "sub/working_times.csv", ""])
def test_csv_file_name_is_validated(tmp_path, name):
    with pytest.raises(ValidationError):
        make_downloader(tmp_path, None, csv_file_name=name)


def test_portal_url_is_required_to_download(tmp_path):
    downloader = make_downloader(tmp_path, lambda settings: FakeDriver(tmp_path), portal_url="")

    with pytest.raises(ValidationError):
        downloader.download(period_start=date(2022, 1, 1), period_end=date(2022, 1, 31))
