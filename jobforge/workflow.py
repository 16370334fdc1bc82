"""
Tailoring workflow for one job.

Runs: keywords (posting text + requirements) → tailored CV → cover letter.
"""
from __future__ import annotations

from datetime import date

from jobforge.config import DEFAULT_TEMPLATE, TEMPLATES
from jobforge.cover_letter import DEFAULT_CANDIDATE, generate_cover_letter
from jobforge.keywords import keywords_for_job
from jobforge.log import get_logger
from jobforge.models import GeneratedDocuments, JobRecord
from jobforge.tailor import tailor_resume

log = get_logger(__name__)


def generate_for_job(
    job: JobRecord,
    master_resume: str,
    *,
    description: str | None = None,
    template: str = DEFAULT_TEMPLATE,
    candidate_name: str | None = None,
    today: date | None = None,
) -> GeneratedDocuments:
    if template not in TEMPLATES:
        log.warning("Template %r is not in the catalog — using it as a label only", template)

    # A freshly pasted description wins over the one cached on the job.
    text = description if description is not None else job.description
    keywords = keywords_for_job(text, job.requirements)

    tailored = tailor_resume(
        master_resume,
        job.title,
        job.company,
        template,
        keywords,
        today=today,
    )
    letter = generate_cover_letter(
        job.title,
        job.company,
        tailored.highlights,
        candidate_name or DEFAULT_CANDIDATE,
    )
    log.info("Generated tailored CV & cover letter for %s @ %s (%d keywords)",
             job.title, job.company, len(keywords))
    return GeneratedDocuments(keywords=keywords, tailored=tailored, cover_letter=letter)
