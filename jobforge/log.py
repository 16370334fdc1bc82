"""Logging for JobForge: console on stdout plus a daily file under ``<home>/logs``.

``.env`` is read before anything looks at ``LOG_LEVEL``,
``JOBFORGE_NO_LOG_FILE`` or ``JOBFORGE_HOME``, so the settings there apply
to the very first logger a module asks for.
"""
from __future__ import annotations

import logging
import os
import sys
from datetime import date
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent

_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"
_DATE_FMT = "%Y-%m-%d %H:%M:%S"
_handlers: list[logging.Handler] = []
_configured = False


def load_env(env_file: str | Path | None = None) -> None:
    """Load ``.env`` (searched upward from the working directory) without
    overriding variables already set in the process."""
    load_dotenv(env_file or find_dotenv(usecwd=True))


def jobforge_home() -> Path:
    """Root for config/, data/, exports/ and logs/."""
    return Path(os.environ.get("JOBFORGE_HOME", "").strip() or PROJECT_ROOT).expanduser()


def log_dir() -> Path:
    return jobforge_home() / "logs"


def get_logger(name: str) -> logging.Logger:
    if not _configured:
        configure_logging()
    return logging.getLogger(name)


def configure_logging(env_file: str | Path | None = None, force: bool = False) -> None:
    """Attach the JobForge handlers to the root logger.

    Runs once per process unless *force* is set, in which case the handlers
    from the previous call are replaced.
    """
    global _configured
    if _configured and not force:
        return
    _configured = True

    load_env(env_file)
    level = getattr(logging, os.environ.get("LOG_LEVEL", "INFO").strip().upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)
    for handler in _handlers:
        root.removeHandler(handler)
        handler.close()
    _handlers.clear()

    formatter = logging.Formatter(_FORMAT, datefmt=_DATE_FMT)
    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(formatter)
    _handlers.append(console)

    if not os.environ.get("JOBFORGE_NO_LOG_FILE", "").strip():
        try:
            folder = log_dir()
            folder.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(folder / f"jobforge_{date.today():%Y-%m-%d}.log", encoding="utf-8")
        except OSError:
            # Read-only home: console only.
            fh = None
        if fh is not None:
            fh.setLevel(logging.DEBUG)
            fh.setFormatter(formatter)
            _handlers.append(fh)

    for handler in _handlers:
        root.addHandler(handler)
