#!/usr/bin/env python3
"""Entry point: tailor the master CV and a cover letter for one tracked job.

    python run_tailor.py            # first job in the tracker
    python run_tailor.py JOB_ID     # a specific job
"""
from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

from jobforge.log import get_logger

log = get_logger(__name__)


def main(argv: list[str]) -> int:
    from jobforge.config import ensure_dirs, load_profile
    from jobforge.cover_letter import resolve_candidate_name
    from jobforge.export import COVER_LETTER_FILE, TAILORED_CV_FILE, save_text
    from jobforge.resume import load_master_resume
    from jobforge.tracker import JobStore
    from jobforge.workflow import generate_for_job

    ensure_dirs()
    store = JobStore()
    jobs = store.load_all()
    if not jobs:
        log.error("No jobs tracked — import one in the app first")
        return 1

    job = store.get(argv[0]) if argv else jobs[0]
    if job is None:
        log.error("Unknown job id: %s", argv[0])
        log.info("Known ids: %s", ", ".join(j.id for j in jobs))
        return 1

    profile = load_profile()
    result = generate_for_job(
        job,
        load_master_resume(),
        template=profile["default_template"],
        candidate_name=resolve_candidate_name(profile),
    )
    cv_path = save_text(TAILORED_CV_FILE, result.tailored.text)
    letter_path = save_text(COVER_LETTER_FILE, result.cover_letter)

    log.info("Tailored for: %s @ %s", job.title, job.company)
    log.info("  Keywords: %s", ", ".join(result.keywords[:12]) or "(none)")
    log.info("  CV: %s", cv_path)
    log.info("  Cover letter: %s", letter_path)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
