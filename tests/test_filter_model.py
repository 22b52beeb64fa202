"""Tests for the Qt fuzzy filter proxy model."""

import pytest
from PySide6.QtCore import QStringListModel

from fuzzyselect import SequentialMatcher
from fuzzyselect.ui.filter_model import MATCH_OFFSETS_ROLE, FuzzyFilterProxyModel

ITEMS = ["bury the dark", "other", "bury the", "bury"]


def visible(proxy):
    return [proxy.index(row, 0).data() for row in range(proxy.rowCount())]


@pytest.fixture
def source(qapp):
    return QStringListModel(ITEMS)


@pytest.fixture
def proxy(source):
    model = FuzzyFilterProxyModel()
    model.setSourceModel(source)
    return model


class TestFuzzyFilterProxyModel:
    def test_empty_pattern_shows_everything_in_order(self, proxy):
        assert visible(proxy) == ITEMS

    def test_filters_and_ranks(self, proxy):
        proxy.set_pattern("bury")
        assert proxy.pattern() == "bury"
        assert visible(proxy) == ["bury", "bury the", "bury the dark"]

    def test_no_match_hides_everything(self, proxy):
        proxy.set_pattern("zzz")
        assert proxy.rowCount() == 0

    def test_clearing_pattern_restores_source_order(self, proxy):
        proxy.set_pattern("bury")
        proxy.set_pattern("")
        assert visible(proxy) == ITEMS

    def test_equal_scores_keep_source_order(self, proxy):
        """The sequential matcher gives all three 'bury' rows the same score."""
        proxy.set_matcher(SequentialMatcher())
        proxy.set_pattern("bury")
        assert visible(proxy) == ["bury the dark", "bury the", "bury"]

    def test_offsets_role(self, proxy):
        proxy.set_pattern("bt")
        first = proxy.index(0, 0)
        offsets = first.data(MATCH_OFFSETS_ROLE)
        text = first.data()
        assert len(offsets) == 2
        assert [text[i].lower() for i in offsets] == ["b", "t"]

    def test_offsets_role_without_pattern(self, proxy):
        assert proxy.index(0, 0).data(MATCH_OFFSETS_ROLE) == []

    def test_best_source_row(self, proxy):
        assert proxy.best_source_row() == -1
        proxy.set_pattern("bury")
        assert proxy.best_source_row() == 3
        proxy.set_pattern("oth")
        assert proxy.best_source_row() == 1

    def test_ranked_source_rows(self, proxy):
        proxy.set_pattern("bury")
        assert [r.index for r in proxy.ranked_source_rows()] == [3, 2, 0]

    def test_follows_source_changes(self, proxy, source):
        proxy.set_pattern("lvl")
        assert proxy.rowCount() == 0
        source.setStringList(["instruction", "Chemistry", "Level 999999"])
        assert visible(proxy) == ["Level 999999"]

    def test_without_source_model(self, qapp):
        proxy = FuzzyFilterProxyModel()
        proxy.set_pattern("a")
        assert proxy.rowCount() == 0
        assert proxy.best_source_row() == -1
