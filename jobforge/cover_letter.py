"""Generate a cover letter from the highlights of a tailored CV."""
from __future__ import annotations

import os

from jobforge.log import get_logger
from jobforge.tailor import BULLET, MISSING, strip_bullet

log = get_logger(__name__)

LETTER_HIGHLIGHTS = 3
DEFAULT_CANDIDATE = "Candidate"
FALLBACK_BULLET = f"{BULLET} Delivered outcomes aligned to the role’s requirements"


def resolve_candidate_name(profile: dict | None = None) -> str:
    """Signature name: CANDIDATE_NAME env, then the profile name, then a placeholder."""
    return (
        os.environ.get("CANDIDATE_NAME", "").strip()
        or str(((profile or {}).get("profile") or {}).get("name") or "").strip()
        or DEFAULT_CANDIDATE
    )


def generate_cover_letter(
    job_title: str | None,
    company: str | None,
    highlights: list[str] | None = None,
    candidate_name: str | None = None,
) -> str:
    top = [strip_bullet(h) for h in (highlights or [])[:LETTER_HIGHLIGHTS]]
    if top:
        bullets = "\n".join(f"{BULLET} {h}" for h in top)
    else:
        log.debug("No highlights — using fallback bullet")
        bullets = FALLBACK_BULLET

    return "\n".join([
        f"Dear Hiring Manager at {company or MISSING},",
        "",
        f"I’m excited to apply for the {job_title or MISSING} role. "
        "I bring relevant experience and a track record of measurable impact:",
        bullets,
        "",
        "I would welcome the opportunity to discuss how I can contribute to your team’s priorities.",
        "",
        "Kind regards,",
        candidate_name or DEFAULT_CANDIDATE,
    ])
