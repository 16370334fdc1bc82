"""Write generated documents to plain-text files."""
from __future__ import annotations

from pathlib import Path

from jobforge.config import EXPORTS_DIR
from jobforge.log import get_logger

log = get_logger(__name__)

MASTER_CV_FILE = "JobForge_MasterCV.txt"
TAILORED_CV_FILE = "JobForge_TailoredCV.txt"
COVER_LETTER_FILE = "JobForge_CoverLetter.txt"


def safe_filename(name: str) -> str:
    safe = "".join(c if c.isalnum() or c in " -_." else "_" for c in name).strip(" .")
    return safe[:80] or "JobForge_export.txt"


def save_text(filename: str, text: str, directory: Path | None = None) -> Path:
    """Save *text* verbatim as UTF-8 and return the written path."""
    directory = directory or EXPORTS_DIR
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / safe_filename(filename)
    path.write_text(text or "", encoding="utf-8")
    log.info("Saved → %s", path)
    return path
