"""Unit tests for portfolio highlights."""

import pytest

from jobforge.portfolio import add_item, list_items


@pytest.mark.unit
def test_empty_when_missing(tmp_path):
    assert list_items(tmp_path / "portfolio.csv") == []


@pytest.mark.unit
def test_add_is_trimmed_and_newest_first(tmp_path):
    path = tmp_path / "portfolio.csv"
    add_item("Launched analytics dashboard", path)
    add_item("  Cut reporting time 40%  ", path)

    items = list_items(path)
    assert [i.title for i in items] == ["Cut reporting time 40%", "Launched analytics dashboard"]
    assert items[0].id != items[1].id
    assert items[0].added_at


@pytest.mark.unit
@pytest.mark.parametrize("title", ["", "   ", None])
def test_blank_highlight_rejected(tmp_path, title):
    path = tmp_path / "portfolio.csv"

    with pytest.raises(ValueError, match="highlight"):
        add_item(title, path)
    assert not path.exists()
