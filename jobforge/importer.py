"""Create job records from a pasted job link (heuristic, no fetching)."""
from __future__ import annotations

import uuid
from urllib.parse import urlparse

from jobforge.log import get_logger
from jobforge.models import JobRecord, JobStatus

log = get_logger(__name__)

FALLBACK_TITLE = "Software Engineer (Backend)"
FALLBACK_COMPANY = "AureusTech"
DEMO_LINK = "mock://job/1"
DEMO_REQUIREMENTS: list[str] = ["3+ years backend", "REST APIs & PostgreSQL", "Testing & CI"]

# First matching fragment wins.
_TITLE_HINTS: list[tuple[str, str]] = [
    ("product", "Product Manager"),
    ("data", "Data Analyst"),
    ("engineer", "Software Engineer"),
    ("designer", "Product Designer"),
]


def guess_title_from_link(link: str | None) -> str | None:
    if not link:
        return None
    low = link.lower()
    for fragment, title in _TITLE_HINTS:
        if fragment in low:
            return title
    return None


def guess_company_from_link(link: str | None) -> str | None:
    if not link:
        return None
    try:
        host = urlparse(link).hostname or ""
    except ValueError:
        return None
    parts = host.replace("www.", "", 1).split(".")
    if len(parts) < 2 or not parts[0]:
        return None
    return parts[0].capitalize()


def import_job_from_link(link: str | None) -> JobRecord:
    """New Saved job with guessed title/company and demo requirements."""
    job = JobRecord(
        id=uuid.uuid4().hex[:12],
        title=guess_title_from_link(link) or FALLBACK_TITLE,
        company=guess_company_from_link(link) or FALLBACK_COMPANY,
        status=JobStatus.SAVED,
        requirements=list(DEMO_REQUIREMENTS),
        source_url=link or DEMO_LINK,
    )
    log.info("Imported %s @ %s from %s", job.title, job.company, job.source_url)
    return job
