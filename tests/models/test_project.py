"""Tests for Project validation, defaults and work-time conversions."""

from datetime import date

import pytest

from errors import EntityValidationError
from models.common import Status
from models.project import DEFAULT_WORKING_DAYS, Project, validate_working_days


def _project(**overrides) -> Project:
    data = {
        "name": "Website Revamp",
        "client_id": 1,
        "hours_per_day": 8,
        "days_per_week": 5,
        "working_days": [1, 2, 3, 4, 5],
        "status": Status.ACTIVE,
    }
    data.update(overrides)
    return Project(**data)


def test_normalize_defaults_fills_work_time():
    """Test: Zero/empty work-time settings take the defaults on create."""
    project = Project(name="P", client_id=1, hours_per_day=0, days_per_week=0, working_days=[], status=0)

    project.normalize_defaults()

    assert project.hours_per_day == 8
    assert project.days_per_week == 5
    assert project.working_days == DEFAULT_WORKING_DAYS
    assert project.timezone == "UTC"
    assert project.currency == "USD"
    assert project.status == Status.ACTIVE


def test_validate_requires_name_and_client():
    with pytest.raises(EntityValidationError, match="name is required"):
        _project(name=" ").validate()
    with pytest.raises(EntityValidationError, match="client"):
        _project(client_id=0).validate()


@pytest.mark.parametrize(
    "start, end",
    [
        (date(2024, 1, 1), date(2024, 1, 1)),
        (date(2024, 1, 1), date(2024, 6, 30)),
        (None, date(2024, 6, 30)),
        (date(2024, 1, 1), None),
        (None, None),
    ],
)
def test_validate_accepts_date_ranges(start, end):
    """Test: Equal, later or missing end dates are accepted."""
    _project(start_date=start, end_date=end).validate()


def test_validate_rejects_end_before_start():
    with pytest.raises(EntityValidationError, match="end date"):
        _project(start_date=date(2024, 2, 1), end_date=date(2024, 1, 31)).validate()


@pytest.mark.parametrize("hours", [0, 1, 24])
def test_hours_per_day_accepted(hours):
    _project(hours_per_day=hours).validate()


@pytest.mark.parametrize("hours", [-1, 25])
def test_hours_per_day_rejected(hours):
    with pytest.raises(EntityValidationError, match="hours per day"):
        _project(hours_per_day=hours).validate()


@pytest.mark.parametrize("days", [-1, 8])
def test_days_per_week_rejected(days):
    with pytest.raises(EntityValidationError, match="days per week"):
        _project(days_per_week=days).validate()


@pytest.mark.parametrize(
    "working_days, message",
    [
        ([0, 1, 2, 3, 4, 5, 6, 0], "cannot exceed 7"),
        ([1, 7], "between 0 \\(Sunday\\) and 6"),
        ([-1], "between 0 \\(Sunday\\) and 6"),
        ([1, 2, 2], "duplicates"),
    ],
)
def test_working_days_rules(working_days, message):
    """Test: Working days are checked for length, then range, then duplicates."""
    with pytest.raises(EntityValidationError, match=message):
        validate_working_days(working_days)


def test_working_days_length_checked_before_range():
    """Test: An over-long list reports its length even when it also holds out-of-range values."""
    with pytest.raises(EntityValidationError, match="cannot exceed 7"):
        validate_working_days([9, 9, 9, 9, 9, 9, 9, 9])


def test_working_days_full_week_accepted():
    validate_working_days([0, 1, 2, 3, 4, 5, 6])
    validate_working_days([])


def test_validate_trims_timezone_and_currency():
    project = _project(timezone=" Europe/Paris ", currency=" EUR ")

    project.validate()

    assert project.timezone == "Europe/Paris"
    assert project.currency == "EUR"


def test_work_time_conversions():
    """Test: Hours convert with the project's own hours per day and days per week."""
    project = _project(hours_per_day=6, days_per_week=4)

    assert project.hours_to_days(12) == 2
    assert project.hours_to_weeks(48) == 2
    assert project.hours_to_man_months(240) == 2


def test_work_time_conversions_fall_back_to_defaults():
    project = _project(hours_per_day=0, days_per_week=0)

    assert project.hours_to_days(16) == 2
    assert project.hours_to_weeks(80) == 2
    assert project.hours_to_man_months(160) == 1
