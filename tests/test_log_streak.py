from datetime import date, timedelta

from app.services.log_service import LogService

TODAY = date(2025, 3, 2)


def days_back(*offsets):
    return [TODAY - timedelta(days=n) for n in offsets]


def test_no_logs():
    assert LogService.count_streak([], TODAY) == 0


def test_consecutive_days():
    assert LogService.count_streak(days_back(0, 1, 2, 3), TODAY) == 4


def test_gap_ends_streak():
    assert LogService.count_streak(days_back(0, 1, 3, 4), TODAY) == 2


def test_missing_today_means_no_streak():
    assert LogService.count_streak(days_back(1, 2, 3), TODAY) == 0


def test_order_does_not_matter():
    assert LogService.count_streak(days_back(2, 0, 1), TODAY) == 3
