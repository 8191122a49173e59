from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .accrual.calculator import OvertimeCalculator
from .accrual.factory import AccrualStrategyFactory
from .attendance.file_table_source import FileTableSource
from .balance.service import BalanceService
from .download.downloader import DownloadSettings, WorkingTimesDownloader
from .policy.loader import load_settings_or_default
from .policy.schema import PolicySettings
from .report.service import AccrualReportService


@dataclass(frozen=True)
class Container:
    settings: PolicySettings

    table_source: FileTableSource

    calculator: OvertimeCalculator
    balance_service: BalanceService
    report_service: AccrualReportService
    downloader: WorkingTimesDownloader


def build_container(*, app_settings, show_window: bool | None = None) -> Container:
    """Wire the services from an app settings module (see `config/`)."""
    verbose = bool(getattr(app_settings, "DEBUG", False))

    settings = load_settings_or_default(app_settings.SETTINGS_PATH, verbose=verbose)

    download_dir = Path(app_settings.DOWNLOAD_DIR).resolve()
    downloader = WorkingTimesDownloader(
        DownloadSettings(
            portal_url=str(getattr(app_settings, "PORTAL_URL", "")),
            download_dir=download_dir,
            csv_file_name=str(app_settings.CSV_FILE_NAME),
            browser_path=settings.browser_path,
            show_window=bool(getattr(app_settings, "SHOW_WINDOW", False)) if show_window is None else show_window,
        ),
        verbose=verbose,
    )

    table_source = FileTableSource(downloader.table_path)
    calculator = OvertimeCalculator(strategy_factory=AccrualStrategyFactory())
    balance_service = BalanceService(table_source, calculator=calculator, verbose=verbose)

    return Container(
        settings=settings,
        table_source=table_source,
        calculator=calculator,
        balance_service=balance_service,
        report_service=AccrualReportService(),
        downloader=downloader,
    )
