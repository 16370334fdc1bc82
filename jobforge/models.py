"""Data models for jobs, generated documents and portfolio entries."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum


class JobStatus(str, Enum):
    SAVED = "Saved"
    DRAFT = "Draft"
    APPLIED = "Applied"
    INTERVIEW = "Interview"
    OFFER = "Offer"


@dataclass
class JobRecord:
    id: str
    title: str
    company: str
    status: JobStatus = JobStatus.SAVED
    applied_on: date | None = None
    requirements: list[str] = field(default_factory=list)
    description: str = ""
    source_url: str = ""


@dataclass
class TailoredDocument:
    text: str
    highlights: list[str]


@dataclass
class GeneratedDocuments:
    keywords: list[str]
    tailored: TailoredDocument
    cover_letter: str


@dataclass
class PortfolioItem:
    id: str
    title: str
    added_at: str = ""
