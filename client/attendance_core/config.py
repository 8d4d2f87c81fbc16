"""
Paths, logging setup, config load/save.
"""

import os
import json
import sys
import logging
from dataclasses import dataclass, field, asdict
from pathlib import Path

from .constants import DEFAULT_SERVER_URL, API_TIMEOUT, RECOGNITION_DELAY_SEC


# ─── Paths ───────────────────────────────────────────────────────
# One config/session per user per machine.
_FOLDER_NAME = ".attendance_client"


def default_data_dir():
    """ATTENDANCE_DATA_DIR if set, else ~/.attendance_client. Read on every call."""
    return Path(os.environ.get("ATTENDANCE_DATA_DIR") or Path.home() / _FOLDER_NAME)


CONFIG_FILE_NAME = "config.json"
LOG_FILE_NAME = "client.log"
LOG_MAX_BYTES = 1_000_000

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


# ─── Logging ─────────────────────────────────────────────────────

log = logging.getLogger("attendance")


def setup_logging(log_file=None, level=logging.INFO):
    """Attach file + stdout handlers to the client logger. Safe to call twice."""
    if getattr(log, "_configured", False):
        return log

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        try:
            if log_file.exists() and log_file.stat().st_size > LOG_MAX_BYTES:
                log_file.write_text("")
        except OSError:
            pass
        file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
        file_handler.setFormatter(formatter)
        log.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    log.addHandler(console_handler)

    log.setLevel(level)
    log._configured = True
    return log


# ─── Config Management ──────────────────────────────────────────

@dataclass
class ClientConfig:
    server_url: str = DEFAULT_SERVER_URL
    request_timeout: float = API_TIMEOUT
    recognition_delay: float = RECOGNITION_DELAY_SEC
    data_dir: Path = field(default_factory=default_data_dir)

    def __post_init__(self):
        self.server_url = self.server_url.rstrip("/")
        self.data_dir = Path(self.data_dir)

    @property
    def log_file(self) -> Path:
        return self.data_dir / LOG_FILE_NAME

    def to_dict(self):
        data = asdict(self)
        data["data_dir"] = str(self.data_dir)
        return data


def _apply_env_overrides(values):
    """Environment wins over config.json."""
    url = os.environ.get("ATTENDANCE_API_URL")
    if url:
        values["server_url"] = url
    data_dir = os.environ.get("ATTENDANCE_DATA_DIR")
    if data_dir:
        values["data_dir"] = data_dir
    timeout = os.environ.get("ATTENDANCE_TIMEOUT")
    if timeout:
        try:
            values["request_timeout"] = float(timeout)
        except ValueError:
            log.warning("Ignoring ATTENDANCE_TIMEOUT=%r (not a number)", timeout)
    return values


def load_config(path=None):
    """Load config from disk (if present) plus environment overrides."""
    path = Path(path) if path else default_data_dir() / CONFIG_FILE_NAME
    values = {}
    if path.exists():
        try:
            with open(path, "r", encoding="utf-8") as f:
                stored = json.load(f)
            if isinstance(stored, dict):
                values.update(stored)
        except (json.JSONDecodeError, OSError) as e:
            log.warning("Could not read config %s: %s", path, e)

    values = _apply_env_overrides(values)
    known = {k: v for k, v in values.items() if k in ClientConfig.__dataclass_fields__}
    return ClientConfig(**known)


def save_config(config, path=None):
    """Save config to disk."""
    path = Path(path) if path else config.data_dir / CONFIG_FILE_NAME
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config.to_dict(), f, indent=2)
    log.info("Config saved to %s", path)
