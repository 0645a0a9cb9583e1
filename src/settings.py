"""Simple cross-platform settings storage for the tool.

Stores a small JSON settings file in a per-user application data location.
Environment variables (optionally loaded from a `.env` file) take
precedence over the file:

  BIOSPW_LOG_LEVEL   logging level name, e.g. DEBUG
  BIOSPW_AUDITLOG    path of the lookup log to append to
"""

from __future__ import annotations

import json
import logging
import os
import platform
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

load_dotenv()

_APP_NAME = "BiosPw"
_SETTINGS_FILE = "settings.json"
_DEFAULT_LOG_LEVEL = "WARNING"


def _get_user_data_dir() -> Path:
    """Return a platform-appropriate per-user data directory for the app."""
    system = platform.system()
    home = Path.home()
    if system == "Windows":
        appdata = os.getenv("APPDATA")
        if appdata:
            return Path(appdata) / _APP_NAME
        return home / f".{_APP_NAME}"
    if system == "Darwin":
        return home / "Library" / "Application Support" / _APP_NAME
    # Linux / other: honor XDG_DATA_HOME if set
    xdg = os.getenv("XDG_DATA_HOME")
    if xdg:
        return Path(xdg) / _APP_NAME
    return home / ".local" / "share" / _APP_NAME


def ensure_settings_dir() -> Path:
    d = _get_user_data_dir()
    d.mkdir(parents=True, exist_ok=True)
    try:
        if os.name == "posix":
            d.chmod(0o700)
    except OSError:
        pass
    return d


def settings_path() -> Path:
    return ensure_settings_dir() / _SETTINGS_FILE


def load_settings() -> Dict[str, Any]:
    # reading never creates the settings directory
    p = _get_user_data_dir() / _SETTINGS_FILE
    try:
        if not p.is_file():
            return {}
        with p.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_settings(data: Dict[str, Any]) -> None:
    p = settings_path()
    # atomic write: write to temp then replace
    tmp = p.with_suffix(".tmp")
    try:
        with tmp.open("w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        try:
            if os.name == "posix":
                tmp.chmod(0o600)
        except OSError:
            pass
        os.replace(str(tmp), str(p))
    finally:
        if tmp.exists():
            try:
                tmp.unlink()
            except OSError:
                pass


def get_setting(key: str, default: Optional[Any] = None) -> Any:
    s = load_settings()
    return s.get(key, default)


def set_setting(key: str, value: Any) -> None:
    s = load_settings()
    s[key] = value
    save_settings(s)


def get_log_level() -> int:
    """Return the configured logging level as an int.

    Order of preference: BIOSPW_LOG_LEVEL, the 'log_level' setting, WARNING.
    Unknown names fall back to WARNING.
    """
    val = os.getenv("BIOSPW_LOG_LEVEL") or get_setting("log_level") or _DEFAULT_LOG_LEVEL
    level = logging.getLevelName(str(val).upper())
    if isinstance(level, int):
        return level
    return logging.WARNING


def get_auditlog_path() -> Optional[Path]:
    """Return the lookup log path, or None when lookups are not recorded."""
    val = os.getenv("BIOSPW_AUDITLOG") or get_setting("auditlog")
    if not val:
        return None
    return Path(val).expanduser()
