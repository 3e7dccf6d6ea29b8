import pytest

from timekeeping.core.enums import CalculationMethod, EmploymentType
from timekeeping.employees.model import EmployeeProfile
from timekeeping.overtime.engine import OvertimeRuleEngine
from timekeeping.overtime.factory import OvertimeRuleFactory
from timekeeping.overtime.rules.daily_threshold import DailyThresholdRule
from timekeeping.overtime.rules.flat_rules import ExemptRule, ManualOverrideRule
from timekeeping.overtime.rules.weekly_cumulative import WeeklyCumulativeRule


def _employee(kind: EmploymentType, *, exempt: bool = False) -> EmployeeProfile:
    return EmployeeProfile(employee_id="e1", full_name="E", employment_type=kind, is_exempt=exempt)


def test_exempt_employee_never_gets_overtime():
    result = OvertimeRuleEngine().classify(_employee(EmploymentType.PART_TIME, exempt=True), 55, 40)
    assert (result.regular, result.overtime, result.double_overtime) == (55, 0, 0)
    assert result.method == CalculationMethod.EXEMPT_NO_CALCULATION


@pytest.mark.parametrize("kind", list(EmploymentType))
def test_manual_override_takes_hours_as_given(kind):
    result = OvertimeRuleEngine().classify(_employee(kind), 10, 38, is_manual_override=True)
    assert (result.regular, result.overtime) == (10, 0)
    assert result.method == CalculationMethod.MANUAL_OVERRIDE


def test_exemption_wins_over_manual_override():
    result = OvertimeRuleEngine().classify(_employee(EmploymentType.FULL_TIME, exempt=True), 10, None, is_manual_override=True)
    assert result.method == CalculationMethod.EXEMPT_NO_CALCULATION


def test_contractor_is_all_regular():
    result = OvertimeRuleEngine().classify(_employee(EmploymentType.CONTRACTOR), 12, 45)
    assert (result.regular, result.overtime) == (12, 0)
    assert result.method == CalculationMethod.EXEMPT_NO_CALCULATION


@pytest.mark.parametrize(
    "hours, expected",
    [
        (6, (6, 0, 0)),
        (8, (8, 0, 0)),
        (9, (8, 1, 0)),
        (12, (8, 4, 0)),
        (13, (8, 4, 1)),
    ],
)
def test_part_time_daily_tiers(hours, expected):
    result = OvertimeRuleEngine().classify(_employee(EmploymentType.PART_TIME), hours, 39)
    assert (result.regular, result.overtime, result.double_overtime) == expected
    assert result.method == CalculationMethod.DAILY_THRESHOLD
    assert result.weekly_hours_at_calculation is None


def test_weekly_cumulative_splits_at_forty():
    result = OvertimeRuleEngine().classify(_employee(EmploymentType.FULL_TIME), 6, 36)
    assert (result.regular, result.overtime, result.double_overtime) == (4, 2, 0)
    assert result.weekly_hours_at_calculation == 42
    assert result.method == CalculationMethod.WEEKLY_CUMULATIVE


def test_weekly_cumulative_under_threshold_is_regular():
    result = OvertimeRuleEngine().classify(_employee(EmploymentType.TEMPORARY), 6, 30)
    assert (result.regular, result.overtime) == (6, 0)
    assert result.weekly_hours_at_calculation == 36


def test_weekly_overtime_is_capped_at_todays_hours():
    result = OvertimeRuleEngine().classify(_employee(EmploymentType.SEASONAL), 5, 44)
    assert (result.regular, result.overtime) == (0, 5)


def test_missing_week_total_counts_as_zero():
    result = WeeklyCumulativeRule().classify(hours_today=9, week_other_days_total=None)
    assert (result.regular, result.overtime, result.weekly_hours_at_calculation) == (9, 0, 9)


def test_unrecognized_type_falls_back_to_weekly_rule():
    result = OvertimeRuleEngine().classify(_employee(EmploymentType.UNRECOGNIZED), 10, 35)
    assert result.method == CalculationMethod.WEEKLY_CUMULATIVE
    assert (result.regular, result.overtime) == (5, 5)


def test_components_are_quarter_hours_and_sum_to_total():
    result = DailyThresholdRule().classify(hours_today=13.1)
    assert result.double_overtime == 1.0
    assert result.total == result.regular + result.overtime + result.double_overtime


def test_factory_dispatch():
    factory = OvertimeRuleFactory()
    assert isinstance(factory.for_employee(_employee(EmploymentType.INTERN)), WeeklyCumulativeRule)
    assert isinstance(factory.for_employee(_employee(EmploymentType.PART_TIME)), DailyThresholdRule)
    assert isinstance(factory.for_employee(_employee(EmploymentType.CONTRACTOR)), ExemptRule)
    assert isinstance(
        factory.for_employee(_employee(EmploymentType.PART_TIME), is_manual_override=True), ManualOverrideRule
    )
    assert factory.for_employee(_employee(EmploymentType.FULL_TIME)).needs_weekly_context is True
    assert factory.for_employee(_employee(EmploymentType.PART_TIME)).needs_weekly_context is False
