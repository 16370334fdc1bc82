"""Unit tests for profile configuration."""

import pytest

from jobforge.config import DEFAULT_TEMPLATE, TEMPLATES, load_profile, write_profile


@pytest.mark.unit
def test_template_catalog():
    assert len(TEMPLATES) == 15
    assert DEFAULT_TEMPLATE == "Software Development & IT"
    assert len(set(TEMPLATES)) == len(TEMPLATES)


@pytest.mark.unit
def test_missing_profile_uses_defaults(tmp_path):
    profile = load_profile(tmp_path / "profile.yaml")

    assert profile["profile"]["name"] == "User"
    assert profile["default_template"] == DEFAULT_TEMPLATE


@pytest.mark.unit
def test_write_then_load(tmp_path):
    path = tmp_path / "config" / "profile.yaml"
    write_profile({"profile": {"name": "Zoë Ndlovu"}, "default_template": "Creative & Design"}, path)

    assert path.read_text(encoding="utf-8").startswith("# ====")
    profile = load_profile(path)
    assert profile["profile"]["name"] == "Zoë Ndlovu"
    assert profile["default_template"] == "Creative & Design"


@pytest.mark.unit
def test_flat_name_key_is_accepted(tmp_path):
    path = tmp_path / "profile.yaml"
    path.write_text("name: Jane Doe\n", encoding="utf-8")

    profile = load_profile(path)
    assert profile["profile"]["name"] == "Jane Doe"
    assert profile["default_template"] == DEFAULT_TEMPLATE


@pytest.mark.unit
def test_empty_file_uses_defaults(tmp_path):
    path = tmp_path / "profile.yaml"
    path.write_text("", encoding="utf-8")

    assert load_profile(path)["profile"]["name"] == "User"


@pytest.mark.unit
@pytest.mark.parametrize("body", ["- a\n- b\n", "just a string\n", "42\n"])
def test_non_mapping_profile_uses_defaults(tmp_path, body):
    path = tmp_path / "profile.yaml"
    path.write_text(body, encoding="utf-8")

    profile = load_profile(path)
    assert profile["profile"]["name"] == "User"
    assert profile["default_template"] == DEFAULT_TEMPLATE


@pytest.mark.unit
def test_non_mapping_profile_section_is_ignored(tmp_path):
    path = tmp_path / "profile.yaml"
    path.write_text("profile: Jane\ndefault_template: Project Management\n", encoding="utf-8")

    profile = load_profile(path)
    assert profile["profile"]["name"] == "User"
    assert profile["default_template"] == "Project Management"
