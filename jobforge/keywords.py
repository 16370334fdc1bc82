"""Rank the salient terms of a job posting for ATS alignment."""
from __future__ import annotations

import re
from collections import Counter
from typing import Iterable

MAX_KEYWORDS = 30

STOP_WORDS: frozenset[str] = frozenset(
    """
    the a an and or for with of to in on at as by from is are be this that those these it its their his her they we
    you your our via will can able have has had using use into within under over out per year years month months
    week day hybrid office role job company team teams strong excellent great good ability responsibilities
    requirements detail results
    """.split()
)

# Keeps tokens like "c++", "c#" and "full-stack" intact.
_NON_TOKEN_RE = re.compile(r"[^a-z0-9+\-#\s]")


def extract_keywords(text: str | None) -> list[str]:
    """Return up to 30 distinct lowercase terms, most frequent first.

    Stop words are dropped. Terms with equal counts keep the order in which
    they first appear.
    """
    raw = (text or "").lower()
    tokens = [t for t in _NON_TOKEN_RE.sub(" ", raw).split() if t not in STOP_WORDS]
    return [token for token, _ in Counter(tokens).most_common(MAX_KEYWORDS)]


def keywords_for_job(description: str | None, requirements: Iterable[str] | None) -> list[str]:
    """Keywords from the pasted posting text plus the job's requirement lines."""
    lines = [description or ""]
    lines.extend(r for r in (requirements or []) if r)
    return extract_keywords("\n".join(lines))
