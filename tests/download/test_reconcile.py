from src.flextime_account.flextime_account.core.enums import DownloadStatus
from src.flextime_account.flextime_account.download.reconcile import reconcile_download

TARGET = "working_times.csv"


def touch(directory, name, content="x"):
    (directory / name).write_text(content, encoding="utf-8")


def test_fresh_download_is_renamed(tmp_path):
    touch(tmp_path, "export.csv", "new")

    assert reconcile_download(tmp_path, TARGET) == DownloadStatus.OK
    assert (tmp_path / TARGET).read_text(encoding="utf-8") == "new"
    assert not (tmp_path / "export.csv").exists()


def test_old_renamed_file_is_replaced(tmp_path):
    touch(tmp_path, TARGET, "old")
    touch(tmp_path, "export.csv", "new")

    assert reconcile_download(tmp_path, TARGET) == DownloadStatus.OK
    assert (tmp_path / TARGET).read_text(encoding="utf-8") == "new"


def test_too_many_csv_files(tmp_path):
    for name in ("a.csv", "b.csv", "c.csv"):
        touch(tmp_path, name)

    assert reconcile_download(tmp_path, TARGET) == DownloadStatus.TOO_MANY_FILES


def test_only_old_file_means_download_failed(tmp_path):
    touch(tmp_path, TARGET, "old")

    assert reconcile_download(tmp_path, TARGET) == DownloadStatus.DOWNLOAD_FAILED
    assert (tmp_path / TARGET).exists()


def test_empty_directory_means_download_failed(tmp_path):
    touch(tmp_path, "notes.txt")

    assert reconcile_download(tmp_path, TARGET) == DownloadStatus.DOWNLOAD_FAILED
