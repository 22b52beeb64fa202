"""
Qt proxy model that filters and ranks a list model by fuzzy match.

Drop it between any list model and a QListView/QComboBox popup: matching
rows are shown best first, everything else is hidden. Rendering stays with
the view.
"""

from typing import Any

from PySide6.QtCore import (
    QAbstractItemModel,
    QModelIndex,
    QObject,
    QPersistentModelIndex,
    QSortFilterProxyModel,
    Qt,
)

from fuzzyselect.matching import NO_MATCH, Matcher, MatchResult, RecursiveMatcher
from fuzzyselect.selection import FilterResult, TieBreak, select_all, select_best

# Matched character offsets of a row, for highlighting
MATCH_OFFSETS_ROLE = Qt.ItemDataRole.UserRole + 1


class _SourceColumn:
    """Exposes one column of a source model as an indexable collection."""

    def __init__(self, proxy: "FuzzyFilterProxyModel") -> None:
        self.proxy = proxy

    def __len__(self) -> int:
        model = self.proxy.sourceModel()
        return model.rowCount() if model is not None else 0


def _column_text(column: _SourceColumn, row: int) -> str:
    if row < 0 or row >= len(column):
        return ""
    return column.proxy._source_text(row, QModelIndex())


class FuzzyFilterProxyModel(QSortFilterProxyModel):
    """
    Filters rows whose text fuzzy-matches the current pattern.

    With an empty pattern every row is shown in source order. Otherwise rows
    are ordered by descending score and equal scores keep source order.
    """

    def __init__(self, matcher: Matcher | None = None, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._matcher = matcher or RecursiveMatcher()
        self._pattern = ""
        self._results: dict[str, MatchResult] = {}
        self.sort(0, Qt.SortOrder.DescendingOrder)

    def pattern(self) -> str:
        return self._pattern

    def set_pattern(self, pattern: str) -> None:
        """Set the query and re-filter."""
        if pattern == self._pattern:
            return
        self._pattern = pattern
        self._results.clear()
        self.invalidate()

    def matcher(self) -> Matcher:
        return self._matcher

    def set_matcher(self, matcher: Matcher) -> None:
        """Switch scoring strategy and re-rank."""
        self._matcher = matcher
        self._results.clear()
        self.invalidate()

    def setSourceModel(self, source_model: QAbstractItemModel) -> None:  # noqa: N802
        self._results.clear()
        super().setSourceModel(source_model)
        self.sort(0, Qt.SortOrder.DescendingOrder)

    def best_source_row(self, tie_break: TieBreak = TieBreak.SCORE_THEN_MATCH_COUNT) -> int:
        """Source row the combo should auto-select, or -1."""
        return select_best(_SourceColumn(self), self._pattern, _column_text, self._matcher, tie_break)

    def ranked_source_rows(self) -> list[FilterResult]:
        """Matching source rows with scores, best first."""
        return select_all(_SourceColumn(self), self._pattern, _column_text, self._matcher)

    def filterAcceptsRow(  # noqa: N802
        self, source_row: int, source_parent: QModelIndex | QPersistentModelIndex
    ) -> bool:
        if not self._pattern:
            return True
        return self._result_for(self._source_text(source_row, source_parent)).matched

    def lessThan(  # noqa: N802
        self,
        source_left: QModelIndex | QPersistentModelIndex,
        source_right: QModelIndex | QPersistentModelIndex,
    ) -> bool:
        # Sorted descending, so the lower row has to compare as "greater"
        if self._pattern:
            left = self._result_for(self._source_text(source_left.row(), source_left.parent()))
            right = self._result_for(self._source_text(source_right.row(), source_right.parent()))
            if left.score != right.score:
                return left.score < right.score
        return source_left.row() > source_right.row()

    def data(
        self,
        index: QModelIndex | QPersistentModelIndex,
        role: int = Qt.ItemDataRole.DisplayRole,
    ) -> Any:
        if role == MATCH_OFFSETS_ROLE:
            if not index.isValid() or not self._pattern:
                return []
            source = self.mapToSource(index)
            result = self._result_for(self._source_text(source.row(), source.parent()))
            return list(result.offsets)
        return super().data(index, role)

    def _source_text(self, row: int, parent: QModelIndex | QPersistentModelIndex) -> str:
        model = self.sourceModel()
        if model is None:
            return ""
        value = model.data(model.index(row, self.filterKeyColumn(), parent), self.filterRole())
        return "" if value is None else str(value)

    def _result_for(self, text: str) -> MatchResult:
        if not self._pattern:
            return NO_MATCH
        result = self._results.get(text)
        if result is None:
            result = self._matcher.match(self._pattern, text)
            self._results[text] = result
        return result
