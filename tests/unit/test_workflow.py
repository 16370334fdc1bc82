"""Unit tests for the tailoring workflow."""

from datetime import date

import pytest

from jobforge.models import JobRecord
from jobforge.workflow import generate_for_job


@pytest.fixture
def job():
    return JobRecord(
        id="2",
        title="Data Analyst",
        company="DataNest",
        requirements=["SQL, dashboards, Python"],
        description="SQL SQL dashboards Looker",
    )


@pytest.mark.unit
def test_uses_cached_description_and_requirements(job, master_resume):
    result = generate_for_job(job, master_resume, candidate_name="Jane Doe", today=date(2024, 5, 1))

    assert result.keywords[0] == "sql"
    assert set(result.keywords) == {"sql", "dashboards", "looker", "python"}
    assert result.tailored.text.startswith("TAILORED CV — Data Analyst @ DataNest\nTemplate: Software Development & IT")
    assert "Generated: 2024-05-01" in result.tailored.text
    assert result.cover_letter.splitlines()[-1] == "Jane Doe"


@pytest.mark.unit
def test_pasted_description_overrides_cached(job, master_resume):
    result = generate_for_job(job, master_resume, description="Tableau Tableau Tableau")

    assert result.keywords[0] == "tableau"
    assert "looker" not in result.keywords


@pytest.mark.unit
def test_letter_reuses_tailored_highlights(job, master_resume):
    result = generate_for_job(job, master_resume, template="Finance & Accounting")
    letter_lines = result.cover_letter.splitlines()

    for highlight in result.tailored.highlights[:3]:
        assert highlight in letter_lines
    assert "Template: Finance & Accounting" in result.tailored.text


@pytest.mark.unit
def test_unknown_template_still_generates(job, master_resume, caplog):
    result = generate_for_job(job, master_resume, template="Space Piracy")

    assert "Template: Space Piracy" in result.tailored.text
    assert "not in the catalog" in caplog.text


@pytest.mark.unit
def test_job_without_text_still_generates(master_resume):
    bare = JobRecord(id="x", title="Analyst", company="Acme")
    result = generate_for_job(bare, master_resume)

    assert result.keywords == []
    assert "ATS Focus: (not provided)" in result.tailored.text
    assert result.cover_letter.splitlines()[-1] == "Candidate"
