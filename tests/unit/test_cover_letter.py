"""Unit tests for cover letter generation."""

import pytest

from jobforge.cover_letter import FALLBACK_BULLET, generate_cover_letter, resolve_candidate_name
from jobforge.tailor import tailor_resume


@pytest.mark.unit
def test_letter_layout():
    letter = generate_cover_letter("Data Analyst", "DataNest",
                                   ["• Built dashboards", "• Cut errors by 18%"], "Jane Doe")
    lines = letter.splitlines()

    assert lines[0] == "Dear Hiring Manager at DataNest,"
    assert lines[1] == ""
    assert "Data Analyst role" in lines[2]
    assert lines[3:5] == ["• Built dashboards", "• Cut errors by 18%"]
    assert lines[-2:] == ["Kind regards,", "Jane Doe"]


@pytest.mark.unit
def test_only_first_three_highlights_are_used():
    highlights = ["• one", "- two", "* three", "• four"]
    letter = generate_cover_letter("Analyst", "Acme", highlights, "Jane")
    lines = letter.splitlines()

    assert ["• one", "• two", "• three"] == [l for l in lines if l.startswith("• ")]
    assert "four" not in letter


@pytest.mark.unit
def test_round_trip_with_tailored_highlights(master_resume):
    doc = tailor_resume(master_resume, "Data Analyst", "DataNest", "Finance & Accounting", ["sql", "python"])
    letter = generate_cover_letter("Data Analyst", "DataNest", doc.highlights, "Jane Doe")
    lines = letter.splitlines()

    for highlight in doc.highlights[:3]:
        text = highlight[len("• "):]
        assert f"• {text}" in lines
        assert text in letter


@pytest.mark.unit
@pytest.mark.parametrize("highlights", [[], None])
def test_empty_highlights_use_fallback(highlights):
    letter = generate_cover_letter("Data Analyst", "DataNest", highlights)

    assert letter
    assert FALLBACK_BULLET in letter.splitlines()
    assert letter.splitlines()[0] == "Dear Hiring Manager at DataNest,"


@pytest.mark.unit
def test_missing_candidate_name_uses_placeholder():
    letter = generate_cover_letter("Analyst", "Acme", ["• x"])

    assert letter.splitlines()[-1] == "Candidate"


@pytest.mark.unit
def test_resolve_candidate_name_order(monkeypatch):
    monkeypatch.delenv("CANDIDATE_NAME", raising=False)
    assert resolve_candidate_name({"profile": {"name": "Jane Doe"}}) == "Jane Doe"
    assert resolve_candidate_name({"profile": {"name": None}}) == "Candidate"
    assert resolve_candidate_name(None) == "Candidate"

    monkeypatch.setenv("CANDIDATE_NAME", "  J. Doe ")
    assert resolve_candidate_name({"profile": {"name": "Jane Doe"}}) == "J. Doe"
