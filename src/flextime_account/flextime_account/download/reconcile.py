"""Download directory bookkeeping.

The portal names its exports itself; after a download the new file is renamed
to the agreed name, replacing the one from the previous run.
"""

from __future__ import annotations

from pathlib import Path

from ..common.console import log
from ..core.enums import DownloadStatus


def csv_files(directory: Path) -> list[str]:
    return sorted(p.name for p in directory.iterdir() if p.is_file() and p.name.lower().endswith(".csv"))


def reconcile_download(download_dir: Path | str, csv_file_name: str, *, verbose: bool = False) -> DownloadStatus:
    download_dir = Path(download_dir)
    names = csv_files(download_dir)

    # only happens if the user put more csv files into the directory
    if len(names) > 2:
        return DownloadStatus.TOO_MANY_FILES

    # old renamed file next to the fresh download
    if len(names) == 2 and csv_file_name in names:
        (download_dir / csv_file_name).unlink()
        log(f'deleted old renamed file "{csv_file_name}"', enabled=verbose)
        names.remove(csv_file_name)

    if len(names) == 1 and names[0] != csv_file_name:
        (download_dir / names[0]).rename(download_dir / csv_file_name)
        log(f'renamed new file "{names[0]}" to "{csv_file_name}"', enabled=verbose)
        return DownloadStatus.OK

    # nothing downloaded, or only last run's file is left
    return DownloadStatus.DOWNLOAD_FAILED
