"""Track job records in a structured table (CSV) with file locking."""
from __future__ import annotations

import csv
import fcntl
import json
from datetime import date
from pathlib import Path

from jobforge.config import DATA_DIR
from jobforge.log import get_logger
from jobforge.models import JobRecord, JobStatus

log = get_logger(__name__)

JOBS_CSV: Path = DATA_DIR / "jobs.csv"
HEADERS: list[str] = [
    "id", "title", "company", "status", "applied_on",
    "requirements", "description", "source_url",
]


def lock_file(f, exclusive: bool = True) -> None:
    """Advisory file lock (Unix fcntl)."""
    try:
        op = fcntl.LOCK_EX if exclusive else fcntl.LOCK_SH
        fcntl.flock(f.fileno(), op)
    except (OSError, AttributeError):
        pass


def unlock_file(f) -> None:
    try:
        fcntl.flock(f.fileno(), fcntl.LOCK_UN)
    except (OSError, AttributeError):
        pass


def seed_jobs() -> list[JobRecord]:
    """Sample jobs shown on first start."""
    return [
        JobRecord(
            id="1",
            title="Product Manager — FinTech",
            company="Kaelo Labs",
            status=JobStatus.SAVED,
            requirements=["Backlog, analytics, GTM"],
        ),
        JobRecord(
            id="2",
            title="Data Analyst",
            company="DataNest",
            status=JobStatus.DRAFT,
            requirements=["SQL, dashboards, Python"],
        ),
    ]


def _to_row(job: JobRecord) -> dict[str, str]:
    return {
        "id": job.id,
        "title": job.title,
        "company": job.company,
        "status": JobStatus(job.status).value,
        "applied_on": job.applied_on.isoformat() if job.applied_on else "",
        "requirements": json.dumps(list(job.requirements), ensure_ascii=False),
        "description": job.description,
        "source_url": job.source_url,
    }


def _from_row(row: dict[str, str]) -> JobRecord:
    job_id = row.get("id", "")
    raw_reqs = row.get("requirements") or "[]"
    try:
        parsed = json.loads(raw_reqs)
    except ValueError:
        parsed = None
    if isinstance(parsed, list):
        requirements = [str(r) for r in parsed]
    else:
        log.warning("Unreadable requirements for job %s — keeping raw text", job_id)
        requirements = [raw_reqs]

    raw_status = row.get("status") or JobStatus.SAVED.value
    try:
        status = JobStatus(raw_status)
    except ValueError:
        log.warning("Unknown status %r for job %s — treating as Saved", raw_status, job_id)
        status = JobStatus.SAVED

    applied_on = None
    if status is JobStatus.APPLIED and row.get("applied_on"):
        try:
            applied_on = date.fromisoformat(row["applied_on"])
        except ValueError:
            log.warning("Bad applied_on %r for job %s — dropped", row["applied_on"], job_id)
    return JobRecord(
        id=job_id,
        title=row.get("title", ""),
        company=row.get("company", ""),
        status=status,
        applied_on=applied_on,
        requirements=requirements,
        description=row.get("description") or "",
        source_url=row.get("source_url") or "",
    )


class JobStore:
    """Load-all / save-all repository for :class:`JobRecord` rows.

    The list is kept newest first. A missing file is created with the
    seed jobs on first read.
    """

    def __init__(self, path: Path | None = None) -> None:
        self.path = path or JOBS_CSV

    def ensure(self) -> None:
        if not self.path.exists():
            self.save_all(seed_jobs())
            log.info("Created job tracker → %s", self.path.name)

    def load_all(self) -> list[JobRecord]:
        self.ensure()
        with open(self.path, "r", newline="", encoding="utf-8") as f:
            lock_file(f, exclusive=False)
            rows = list(csv.DictReader(f))
            unlock_file(f)
        return [_from_row(r) for r in rows]

    def save_all(self, jobs: list[JobRecord]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", newline="", encoding="utf-8") as f:
            lock_file(f)
            w = csv.DictWriter(f, fieldnames=HEADERS)
            w.writeheader()
            w.writerows(_to_row(j) for j in jobs)
            unlock_file(f)
        log.debug("Saved %d job(s) → %s", len(jobs), self.path.name)

    def get(self, job_id: str) -> JobRecord | None:
        for job in self.load_all():
            if job.id == job_id:
                return job
        return None

    def add(self, job: JobRecord) -> JobRecord:
        jobs = self.load_all()
        self.save_all([job, *jobs])
        log.info("Tracked: %s @ %s [%s]", job.title, job.company, JobStatus(job.status).value)
        return job

    def upsert(self, job: JobRecord) -> JobRecord:
        jobs = self.load_all()
        for i, existing in enumerate(jobs):
            if existing.id == job.id:
                jobs[i] = job
                self.save_all(jobs)
                return job
        return self.add(job)

    def update_status(self, job_id: str, status: JobStatus | str) -> bool:
        """Move a job to *status* (e.g. Saved -> Applied).

        Applied stamps today's date; every other status clears it.
        """
        status = JobStatus(status)
        jobs = self.load_all()
        for job in jobs:
            if job.id == job_id:
                job.status = status
                job.applied_on = date.today() if status is JobStatus.APPLIED else None
                break
        else:
            return False
        self.save_all(jobs)
        log.debug("Updated %s → %s", job_id, status.value)
        return True

    def mark_applied(self, job_id: str) -> bool:
        return self.update_status(job_id, JobStatus.APPLIED)

    def cache_description(self, job_id: str, text: str) -> bool:
        """Keep the pasted posting text next to the job for later tailoring."""
        jobs = self.load_all()
        for job in jobs:
            if job.id == job_id:
                job.description = text or ""
                break
        else:
            return False
        self.save_all(jobs)
        return True
