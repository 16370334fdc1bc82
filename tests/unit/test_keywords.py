"""Unit tests for ATS keyword extraction."""

from collections import Counter

import pytest

from jobforge.keywords import MAX_KEYWORDS, STOP_WORDS, extract_keywords, keywords_for_job


@pytest.mark.unit
@pytest.mark.parametrize("text", ["", None, "   \n\t ", "!!! ... ???"])
def test_empty_input_gives_no_keywords(text):
    assert extract_keywords(text) == []


@pytest.mark.unit
def test_case_folded_frequency_order():
    """Test that 'remote' and 'sql' (2 each) rank ahead of 'python' (1)."""
    result = extract_keywords("Remote Remote SQL sql Python")

    assert set(result[:2]) == {"remote", "sql"}
    assert result[2] == "python"
    assert len(result) == 3


@pytest.mark.unit
def test_frequency_order_without_stop_words():
    result = extract_keywords("Kafka kafka SQL sql Python")

    assert set(result) == {"kafka", "sql", "python"}
    assert result[-1] == "python"


@pytest.mark.unit
def test_keeps_plus_hash_and_hyphen_tokens():
    result = extract_keywords("C++, C#; full-stack (React).")

    assert set(result) == {"c++", "c#", "full-stack", "react"}


@pytest.mark.unit
def test_punctuation_splits_words():
    assert extract_keywords("python/django,postgres") == ["python", "django", "postgres"]


@pytest.mark.unit
def test_stop_words_are_removed():
    result = extract_keywords("The team has strong ability in the role with Terraform")

    assert result == ["terraform"]


@pytest.mark.unit
def test_result_capped_at_thirty():
    text = " ".join(f"skill{i}" for i in range(50))
    result = extract_keywords(text)

    assert len(result) == MAX_KEYWORDS
    assert result[0] == "skill0"


@pytest.mark.unit
def test_output_properties_on_realistic_posting():
    text = (
        "Senior Data Engineer. You will build ETL pipelines in Python and SQL, "
        "own Airflow DAGs, tune Spark jobs, and partner with analysts. "
        "Python, SQL and Airflow experience required; Spark a plus. "
        "Nice to have: dbt, Kafka, CI/CD, Terraform, AWS (S3, Glue, Redshift)."
    )
    result = extract_keywords(text)

    assert len(result) <= MAX_KEYWORDS
    assert len(result) == len(set(result))
    assert all(k == k.lower() for k in result)
    assert not set(result) & STOP_WORDS

    normalized = text.lower()
    for ch in ".,;:()/":
        normalized = normalized.replace(ch, " ")
    counts = Counter(normalized.split())
    freqs = [counts[k] for k in result]
    assert freqs == sorted(freqs, reverse=True)
    assert set(result[:4]) == {"python", "sql", "airflow", "spark"}


@pytest.mark.unit
def test_keywords_for_job_combines_description_and_requirements():
    result = keywords_for_job("Looking for PostgreSQL skills", ["REST APIs & PostgreSQL", "Testing & CI"])

    assert result[0] == "postgresql"
    assert {"rest", "apis", "testing", "ci", "looking", "skills"} <= set(result)


@pytest.mark.unit
def test_keywords_for_job_handles_missing_parts():
    assert keywords_for_job(None, None) == []
    assert keywords_for_job("", ["SQL, dashboards, Python"]) == ["sql", "dashboards", "python"]
