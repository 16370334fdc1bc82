"""Build a tailored CV from the master résumé, a job and its ATS keywords."""
from __future__ import annotations

import re
from datetime import date

from jobforge.log import get_logger
from jobforge.models import TailoredDocument

log = get_logger(__name__)

BULLET = "•"
MAX_HIGHLIGHTS = 6
MAX_RESUME_BULLETS = 5
HEADER_KEYWORDS = 6
FOCUS_KEYWORDS = 12
MISSING = "N/A"

_BULLET_LINE_RE = re.compile(r"^[-*•].+$", re.MULTILINE)
_BULLET_PREFIX_RE = re.compile(r"^[-*•]\s*")


def normalize_bullet(line: str) -> str:
    """'- did X' / '* did X' / '•did X' → '• did X'."""
    return _BULLET_PREFIX_RE.sub(f"{BULLET} ", line).strip()


def strip_bullet(line: str) -> str:
    return _BULLET_PREFIX_RE.sub("", line)


def extract_bullets(master_resume: str | None, limit: int = MAX_RESUME_BULLETS) -> list[str]:
    """First *limit* bullet lines of the résumé, normalised."""
    found = _BULLET_LINE_RE.findall(master_resume or "")
    return [normalize_bullet(b) for b in found[:limit]]


def build_highlights(job_title: str, company: str, ats_keywords: list[str], bullets: list[str]) -> list[str]:
    """Three synthetic lines first, then résumé bullets, capped at six."""
    keywords = ", ".join(ats_keywords[:HEADER_KEYWORDS]) or MISSING
    highlights = [
        f"{BULLET} Impact aligned to {job_title} — quantified outcomes preferred",
        f"{BULLET} Keywords for ATS: {keywords}",
        f"{BULLET} Cross-functional collaboration to deliver {company} priorities",
        *bullets,
    ]
    return highlights[:MAX_HIGHLIGHTS]


def tailor_resume(
    master_resume: str | None,
    job_title: str | None,
    company: str | None,
    template: str | None,
    ats_keywords: list[str] | None = None,
    *,
    today: date | None = None,
) -> TailoredDocument:
    """Return the tailored CV text and the highlights reused by the cover letter.

    Missing values never fail: title, company and template fall back to
    "N/A", an empty keyword list prints "(not provided)". The date stamp is
    the only part that depends on anything besides the arguments.
    """
    master = (master_resume or "").strip()
    job_title = job_title or MISSING
    company = company or MISSING
    template = template or MISSING
    keywords = list(ats_keywords or [])
    stamp = (today or date.today()).isoformat()

    highlights = build_highlights(job_title, company, keywords, extract_bullets(master))

    if keywords:
        focus = f"ATS Focus: {', '.join(keywords[:FOCUS_KEYWORDS])}"
    else:
        focus = "ATS Focus: (not provided)"

    body = "\n".join([
        f"TAILORED CV — {job_title} @ {company}",
        f"Template: {template}",
        f"Generated: {stamp}",
        "",
        focus,
        "",
        "SUMMARY",
        f"Results-oriented candidate targeting {job_title} at {company}. "
        "Blends domain knowledge with data-driven decision making and a bias for measurable impact.",
        "",
        "HIGHLIGHTS",
        *highlights,
        "",
        "EXPERIENCE & EDUCATION (from Master CV)",
        master,
    ])

    log.debug("Tailored CV for %s @ %s — %d keywords, %d highlights",
              job_title, company, len(keywords), len(highlights))
    return TailoredDocument(text=body, highlights=highlights)
