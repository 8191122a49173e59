from __future__ import annotations

import json
from pathlib import Path
from typing import Mapping

from ..common.console import log, log_error
from ..common.datetime_utils import RELATIVE_DAY_OFFSETS, parse_table_date
from ..common.validators import require_non_empty, require_number, require_positive_number, require_suffix
from ..core.enums import AccrualStrategyKind
from ..core.exceptions import SourceUnavailableError, ValidationError
from .schema import DEFAULT_SETTINGS, LEGACY_KEYS, PolicySettings


def _require_period_bound(value, field_name: str) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    if value.strip().lower() in RELATIVE_DAY_OFFSETS:
        return value.strip().lower()
    try:
        parse_table_date(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be DD.MM.YYYY or a relative day, got {value!r}")
    return value.strip()


def _require_strategy(value) -> AccrualStrategyKind:
    try:
        return AccrualStrategyKind(value)
    except ValueError:
        allowed = ", ".join(k.value for k in AccrualStrategyKind)
        raise ValidationError(f"accrual_strategy must be one of: {allowed}")


def _require_json_path(path: Path | str) -> Path:
    return Path(require_suffix(str(path), "settings path", ".json"))


def parse_settings(document: Mapping) -> PolicySettings:
    """Validate a settings document; missing fields take their default."""
    if not isinstance(document, Mapping):
        raise ValidationError("settings document must be a JSON object")

    values = dict(DEFAULT_SETTINGS)
    for key, value in document.items():
        field = LEGACY_KEYS.get(key, key)
        if field in values:
            values[field] = value

    browser_path = values["browser_path"]
    if not isinstance(browser_path, str):
        raise ValidationError("browser_path must be a string")

    return PolicySettings(
        weekly_hours=require_positive_number(values["weekly_hours"], "weekly_hours"),
        starting_balance_hours=require_number(values["starting_balance_hours"], "starting_balance_hours"),
        period_start=_require_period_bound(values["period_start"], "period_start"),
        period_end=_require_period_bound(values["period_end"], "period_end"),
        browser_path=require_non_empty(browser_path, "browser_path"),
        accrual_strategy=_require_strategy(values["accrual_strategy"]),
    )


def load_settings(path: Path | str) -> PolicySettings:
    path = _require_json_path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SourceUnavailableError(f"Cannot read settings file {path}: {e}") from e

    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Settings file {path} is not valid JSON: {e}") from e
    return parse_settings(document)


def save_settings(path: Path | str, settings: PolicySettings) -> None:
    path = _require_json_path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(settings.to_document(), indent=2), encoding="utf-8")


def load_settings_or_default(path: Path | str, *, write_defaults: bool = True, verbose: bool = False) -> PolicySettings:
    """Load settings, falling back to the defaults.

    A missing file is created with the defaults; an invalid file is reported
    and left untouched.
    """
    path = _require_json_path(path)
    try:
        settings = load_settings(path)
    except SourceUnavailableError:
        log_error(f"settings file {path} doesn't exist, using default settings", enabled=verbose)
        settings = PolicySettings.defaults()
        if write_defaults:
            save_settings(path, settings)
            log(f"wrote default settings to {path}", enabled=verbose)
        return settings
    except ValidationError as e:
        log_error(f"settings file {path} is not correctly configured ({e}), using default settings", enabled=verbose)
        return PolicySettings.defaults()

    log("reading settings from", path, enabled=verbose)
    for key, value in settings.to_document().items():
        log("    ", key, "=>", value, enabled=verbose)
    return settings
