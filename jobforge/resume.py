"""Master résumé storage and plain-text import from résumé files.

The master résumé is a single free-form text file that is overwritten on
every save. Import supports PDF (via pdftotext or pypdf), DOCX (via stdlib
zipfile) and TXT.
"""
from __future__ import annotations

import re
import shutil
import subprocess
import zipfile
from pathlib import Path
from xml.etree import ElementTree

from jobforge.config import DATA_DIR
from jobforge.log import get_logger

log = get_logger(__name__)

MASTER_RESUME_PATH: Path = DATA_DIR / "master_resume.txt"


def default_master_resume() -> str:
    return "\n".join([
        "NAME SURNAME",
        "Johannesburg, South Africa • email@example.com • +27 00 000 0000 • linkedin.com/in/yourname",
        "",
        "SUMMARY",
        "Data-driven professional with 5+ years’ experience across product, analytics, and operations. "
        "Skilled in stakeholder engagement, problem solving, and measurable impact.",
        "",
        "CORE SKILLS",
        "• Product strategy • User research • SQL • Python • Data visualization • Roadmapping • A/B testing",
        "",
        "EXPERIENCE",
        "Company A — Product Analyst (2022–Present)",
        "• Shipped feature X improving conversion by 12%",
        "• Built dashboards that cut weekly reporting time by 40%",
        "",
        "Company B — Operations Associate (2020–2022)",
        "• Standardized SOPs across 3 teams; reduced error rate by 18%",
        "",
        "EDUCATION",
        "BCom, University of Somewhere",
    ])


def load_master_resume(path: Path | None = None) -> str:
    path = path or MASTER_RESUME_PATH
    if not path.exists():
        return default_master_resume()
    return path.read_text(encoding="utf-8")


def save_master_resume(text: str, path: Path | None = None) -> Path:
    path = path or MASTER_RESUME_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text or "", encoding="utf-8")
    log.info("Master CV saved → %s (%d chars)", path.name, len(text or ""))
    return path


# ── Import from a file ───────────────────────────────────────────────────

_WORD_NS = "{http://schemas.openxmlformats.org/wordprocessingml/2006/main}"


def _read_txt(path: Path) -> str:
    return path.read_text(encoding="utf-8", errors="ignore")


def _read_docx(path: Path) -> str:
    """One line per Word paragraph; empty paragraphs are skipped."""
    try:
        with zipfile.ZipFile(path) as zf, zf.open("word/document.xml") as body:
            tree = ElementTree.parse(body)
    except (zipfile.BadZipFile, KeyError) as exc:
        raise ValueError(f"{path.name} is not a readable Word document") from exc

    lines = []
    for para in tree.iter(f"{_WORD_NS}p"):
        line = "".join(run.text for run in para.iter(f"{_WORD_NS}t") if run.text)
        if line:
            lines.append(line)
    return "\n".join(lines)


def _unsquash(text: str) -> str:
    """Put spaces back into PDF text whose words came out glued together."""
    if len(text) < 50 or text.count(" ") / len(text) > 0.08:
        return text
    text = re.sub(r"([a-z])([A-Z])", r"\1 \2", text)
    return re.sub(r"([.!?,;:])([A-Za-z])", r"\1 \2", text)


def _read_pdf(path: Path) -> str:
    # pdftotext keeps the column layout of a CV better than pypdf does.
    if shutil.which("pdftotext"):
        done = subprocess.run(
            ["pdftotext", "-layout", str(path), "-"],
            capture_output=True, text=True, timeout=30,
        )
        if done.returncode == 0 and done.stdout.strip():
            return done.stdout
        log.debug("pdftotext gave nothing for %s — falling back to pypdf", path.name)

    from pypdf import PdfReader

    return "\n".join(_unsquash(page.extract_text() or "") for page in PdfReader(str(path)).pages)


_READERS = {".txt": _read_txt, ".docx": _read_docx, ".pdf": _read_pdf}
SUPPORTED_SUFFIXES: tuple[str, ...] = tuple(_READERS)


def extract_text(path: Path) -> str:
    """Plain text of a CV file, picked by suffix (.pdf, .docx or .txt)."""
    reader = _READERS.get(path.suffix.lower())
    if reader is None:
        raise ValueError(
            f"Unsupported master CV format {path.suffix or '(none)'!r}: "
            f"use one of {', '.join(SUPPORTED_SUFFIXES)}"
        )
    return reader(path)


def import_master_resume(source: Path, path: Path | None = None) -> str:
    """Overwrite the master CV with the text read from *source*.

    The stored CV is left untouched when the file yields no text.
    """
    log.info("Importing master CV from %s", source.name)
    text = extract_text(source).strip()
    if not text:
        raise ValueError(f"Could not extract any text from {source.name}; master CV unchanged")
    save_master_resume(text, path)
    return text
