"""
Tests for status classification.
"""

from datetime import date, timedelta

import pytest

from projtrack.models.status import Urgency, classify, days_until_due, is_overdue


TODAY = date(2025, 11, 21)


def _due_in(mock_data, days, done=False):
    return mock_data.create_project(due_in=days, done=done, today=TODAY)


class TestClassifyBoundaries:
    """Test the urgency tier boundaries."""

    @pytest.mark.parametrize(
        "days, urgency, label",
        [
            (-1, Urgency.OVERDUE, "OVERDUE (1 days ago)"),
            (0, Urgency.DUE_TODAY, "DUE TODAY"),
            (1, Urgency.URGENT, "DUE IN 1 DAYS"),
            (2, Urgency.URGENT, "DUE IN 2 DAYS"),
            (3, Urgency.WARNING, "DUE IN 3 DAYS"),
            (7, Urgency.WARNING, "DUE IN 7 DAYS"),
            (8, Urgency.NORMAL, "DUE IN 8 DAYS"),
        ],
    )
    def test_tiers(self, mock_data, days, urgency, label):
        """Each distance from the due date maps to its tier and label."""
        status = classify(_due_in(mock_data, days), TODAY)
        assert status.urgency == urgency
        assert status.label == label
        assert status.days_left == days

    def test_long_overdue_label(self, mock_data):
        status = classify(_due_in(mock_data, -30), TODAY)
        assert status.label == "OVERDUE (30 days ago)"

    def test_done_wins_over_due_date(self, mock_data):
        """A done project is DONE even when its due date has passed."""
        status = classify(_due_in(mock_data, -5, done=True), TODAY)
        assert status.urgency == Urgency.DONE
        assert status.label == "DONE"


class TestColors:
    """Test the color attached to each tier."""

    @pytest.mark.parametrize(
        "days, done, color",
        [
            (-1, False, "red"),
            (0, False, "red"),
            (2, False, "red"),
            (7, False, "yellow"),
            (8, False, "green"),
            (8, True, "cyan"),
        ],
    )
    def test_color(self, mock_data, days, done, color):
        assert classify(_due_in(mock_data, days, done), TODAY).color == color


class TestCustomThresholds:
    """Test configurable tier bounds."""

    def test_wider_urgent_tier(self, mock_data):
        status = classify(_due_in(mock_data, 4), TODAY, urgent_days=4, warning_days=10)
        assert status.urgency == Urgency.URGENT

    def test_wider_warning_tier(self, mock_data):
        status = classify(_due_in(mock_data, 10), TODAY, urgent_days=4, warning_days=10)
        assert status.urgency == Urgency.WARNING


class TestOverdue:
    """Test the overdue predicate used by the list filter."""

    def test_yesterday_is_overdue(self, mock_data):
        assert is_overdue(_due_in(mock_data, -1), TODAY)

    def test_today_is_not_overdue(self, mock_data):
        assert not is_overdue(_due_in(mock_data, 0), TODAY)

    def test_done_is_never_overdue(self, mock_data):
        assert not is_overdue(_due_in(mock_data, -10, done=True), TODAY)

    def test_days_until_due(self, mock_data):
        project = _due_in(mock_data, 3)
        assert days_until_due(project, TODAY) == 3
        assert days_until_due(project, TODAY + timedelta(days=5)) == -2
