from __future__ import annotations

import importlib
from datetime import date
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from config import get_settings_module

from .accrual.model import CalculationResult
from .common.console import log
from .common.datetime_utils import today_local
from .container import Container, build_container
from .core.enums import DownloadStatus
from .core.exceptions import DownloadError
from .report.export import export_report


def create_container(*, show_window: Optional[bool] = None) -> Container:
    load_dotenv(override=False)
    settings_module = get_settings_module()
    app_settings = importlib.import_module(settings_module)

    container = build_container(app_settings=app_settings, show_window=show_window)
    log(
        "settings=", settings_module,
        " table=", container.table_source.path,
        enabled=bool(getattr(app_settings, "DEBUG", False)),
    )
    return container


def run(
    *,
    download: bool = False,
    show_window: Optional[bool] = None,
    export_path: Optional[Path | str] = None,
    today: Optional[date] = None,
    container: Optional[Container] = None,
) -> Optional[CalculationResult]:
    """Optionally download a fresh table, then calculate the balance.

    Returns None when no table is available. Raises DownloadError when a
    requested download fails.
    """
    container = container or create_container(show_window=show_window)
    policy = container.settings.resolve(today=today or today_local())

    if download:
        status = container.downloader.download(period_start=policy.period_start, period_end=policy.period_end)
        if status != DownloadStatus.OK:
            raise DownloadError(f"downloading the table of working times failed ({status.name})", status)

    result = container.balance_service.calculate(policy)
    if result is not None and export_path:
        export_report(container.report_service.build(result), export_path)
    return result
