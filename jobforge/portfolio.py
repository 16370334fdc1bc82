"""Short portfolio highlights recruiters can scan fast."""
from __future__ import annotations

import csv
import uuid
from datetime import datetime, timezone
from pathlib import Path

from jobforge.config import DATA_DIR
from jobforge.log import get_logger
from jobforge.models import PortfolioItem
from jobforge.tracker import lock_file, unlock_file

log = get_logger(__name__)

PORTFOLIO_CSV: Path = DATA_DIR / "portfolio.csv"
HEADERS: list[str] = ["id", "title", "added_at"]


def list_items(path: Path | None = None) -> list[PortfolioItem]:
    path = path or PORTFOLIO_CSV
    if not path.exists():
        return []
    with open(path, "r", newline="", encoding="utf-8") as f:
        lock_file(f, exclusive=False)
        rows = list(csv.DictReader(f))
        unlock_file(f)
    return [PortfolioItem(id=r["id"], title=r["title"], added_at=r.get("added_at", "")) for r in rows]


def add_item(title: str, path: Path | None = None) -> PortfolioItem:
    """Store a highlight, newest first. Blank input is rejected."""
    title = (title or "").strip()
    if not title:
        raise ValueError("Enter a highlight first")

    path = path or PORTFOLIO_CSV
    item = PortfolioItem(
        id=uuid.uuid4().hex[:12],
        title=title,
        added_at=datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M"),
    )
    items = [item, *list_items(path)]
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", newline="", encoding="utf-8") as f:
        lock_file(f)
        w = csv.DictWriter(f, fieldnames=HEADERS)
        w.writeheader()
        w.writerows({"id": i.id, "title": i.title, "added_at": i.added_at} for i in items)
        unlock_file(f)
    log.debug("Portfolio item added (%d total)", len(items))
    return item
