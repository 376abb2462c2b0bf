"""Tests for Cost validation and amount derivation."""

import pytest

from errors import EntityValidationError
from models.common import Status
from models.cost import Cost, CostType, RateType


def _cost(**overrides) -> Cost:
    data = {
        "project_id": 1,
        "type": CostType.MATERIAL.value,
        "name": "Laptops",
        "amount": 0,
        "quantity": 1,
        "unit_cost": 0,
        "hours": 0,
        "rate_type": "",
        "status": Status.ACTIVE,
    }
    data.update(overrides)
    return Cost(**data)


def test_amount_derived_from_unit_cost_and_quantity():
    """Test: amount = unit_cost * quantity when both are positive."""
    cost = _cost(unit_cost=50, quantity=10)

    cost.validate()

    assert cost.amount == 500


def test_stale_amount_recomputed():
    cost = _cost(unit_cost=50, quantity=10, amount=123)

    cost.validate()

    assert cost.amount == 500


def test_amount_kept_without_unit_cost():
    cost = _cost(amount=250, unit_cost=0, quantity=3)

    cost.validate()

    assert cost.amount == 250


def test_cost_requires_association():
    """Test: A cost must point at a project, milestone or task."""
    with pytest.raises(EntityValidationError, match="associated with a project, milestone, or task"):
        _cost(project_id=None).validate()


@pytest.mark.parametrize("association", ["project_id", "milestone_id", "task_id"])
def test_any_single_association_is_enough(association):
    data = {"project_id": None, association: 3}

    _cost(**data).validate()


@pytest.mark.parametrize(
    "field, message",
    [
        ("amount", "amount cannot be negative"),
        ("quantity", "quantity cannot be negative"),
        ("unit_cost", "unit cost cannot be negative"),
        ("hours", "hours cannot be negative"),
    ],
)
def test_negative_figures_rejected(field, message):
    with pytest.raises(EntityValidationError, match=message):
        _cost(**{field: -1}).validate()


def test_invalid_type_and_rate_type():
    with pytest.raises(EntityValidationError, match="invalid cost type"):
        _cost(type="bribe").validate()
    with pytest.raises(EntityValidationError, match="invalid rate type"):
        _cost(rate_type="weekly").validate()


def test_labor_requires_resource_or_role():
    """Test: Labor costs name a resource or a project role."""
    with pytest.raises(EntityValidationError, match="labor costs must have a resource or project role"):
        _cost(type=CostType.LABOR.value, rate_type=RateType.HOURLY.value, hours=10).validate()

    _cost(type=CostType.LABOR.value, resource_id=4).validate()
    _cost(type=CostType.LABOR.value, project_role_id=2).validate()


def test_labor_amount_derived_before_labor_rule():
    """Test: Amount derivation runs even though the labor rule fails afterwards."""
    cost = _cost(type=CostType.LABOR.value, unit_cost=80, quantity=5)

    with pytest.raises(EntityValidationError, match="labor"):
        cost.validate()
    assert cost.amount == 400


def test_validate_trims_name():
    cost = _cost(name="  Cloud hosting ", category=" infra ")

    cost.validate()

    assert cost.name == "Cloud hosting"
    assert cost.category == "infra"


def test_normalize_defaults():
    cost = _cost(status=0, currency="")

    cost.normalize_defaults()

    assert cost.status == Status.ACTIVE
    assert cost.currency == "USD"


@pytest.mark.parametrize("name", ["", "   "])
def test_blank_name_rejected(name):
    with pytest.raises(EntityValidationError, match="cost name is required"):
        _cost(name=name).validate()


@pytest.mark.parametrize("status", [0, 3, 10])
def test_unknown_status_rejected(status):
    with pytest.raises(EntityValidationError, match="cost status must be 1"):
        _cost(status=status).validate()


def test_total_amount():
    assert _cost(unit_cost=25, quantity=4, amount=1).total_amount == 100
    assert _cost(unit_cost=0, quantity=4, amount=75).total_amount == 75
    assert _cost(unit_cost=25, quantity=0, amount=75).total_amount == 75


@pytest.mark.parametrize(
    "rate_type, rate, expected",
    [
        (RateType.HOURLY.value, 50, 16000),
        (RateType.DAILY.value, 400, 16000),
        (RateType.MONTHLY.value, 8000, 16000),
        (RateType.FIXED.value, 999, 1200),
        ("", 999, 1200),
    ],
)
def test_calculate_labor_cost(rate_type, rate, expected):
    """Test: 320 hours are 40 days or 2 months; other rate types fall back to the amount."""
    cost = _cost(type=CostType.LABOR.value, resource_id=1, hours=320, rate_type=rate_type, amount=1200)

    assert cost.calculate_labor_cost(rate) == expected


def test_calculate_labor_cost_is_zero_without_labor_hours():
    material = _cost(type=CostType.MATERIAL.value, hours=10, rate_type=RateType.HOURLY.value)
    idle = _cost(type=CostType.LABOR.value, resource_id=1, hours=0, rate_type=RateType.HOURLY.value)

    assert material.calculate_labor_cost(50) == 0
    assert idle.calculate_labor_cost(50) == 0
