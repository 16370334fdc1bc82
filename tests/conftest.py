"""Shared fixtures."""
import os

import pytest

os.environ.setdefault("JOBFORGE_NO_LOG_FILE", "1")


@pytest.fixture
def master_resume():
    return "\n".join([
        "JANE DOE",
        "",
        "EXPERIENCE",
        "- Shipped feature X improving conversion by 12%",
        "* Built dashboards that cut reporting time by 40%",
        "• Standardized SOPs across 3 teams",
        "•Reduced churn by 9%",
        "- Mentored four analysts",
        "- Led migration to dbt",
        "",
        "EDUCATION",
        "BCom, University of Somewhere",
    ])
