import pytest

from timekeeping.core.enums import EmploymentType, PayType
from timekeeping.core.exceptions import EmployeeLookupFailed
from timekeeping.employees.resolver import EmployeeProfileResolver


def test_resolves_known_employee(directory):
    directory.add("ft-2", employment_type="full_time", hourly_rate="22.50", overtime_rate_multiplier=2)
    profile = EmployeeProfileResolver(directory).resolve("ft-2")

    assert profile.employee_id == "ft-2"
    assert profile.employment_type == EmploymentType.FULL_TIME
    assert profile.hourly_rate == 22.5
    assert profile.overtime_multiplier == 2.0
    assert profile.is_exempt is False


def test_optional_attributes_get_defaults(directory):
    directory.add("bare")
    profile = EmployeeProfileResolver(directory).resolve("bare")

    assert profile.employment_type == EmploymentType.FULL_TIME
    assert profile.pay_type == PayType.HOURLY
    assert profile.overtime_multiplier == 1.5
    assert profile.status == "active"


def test_unknown_employment_type_is_marked_unrecognized(directory):
    directory.add("odd", employment_type="per_diem")
    assert EmployeeProfileResolver(directory).resolve("odd").employment_type == EmploymentType.UNRECOGNIZED


def test_missing_employee_is_reported(directory):
    with pytest.raises(EmployeeLookupFailed):
        EmployeeProfileResolver(directory).resolve("nobody")


def test_directory_outage_is_reported_not_defaulted(directory):
    directory.unavailable = True
    with pytest.raises(EmployeeLookupFailed) as exc:
        EmployeeProfileResolver(directory).resolve("ft-1")
    assert exc.value.transient is True
