import logging

import pytest

from models import Employee
from repositories.employee_repository import EmployeeRepository
from repositories.sorting import SortMap, normalize_sort_key


sort_map = EmployeeRepository.sort_map


@pytest.mark.parametrize("requested", ["FirstName", "firstname", "first_name", "FIRST_NAME"])
def test_keys_match_case_insensitively(requested):
    assert sort_map.resolve(requested) == ("firstname", False)


@pytest.mark.parametrize("requested", ["SalaryDesc", "salarydesc", "salary_desc"])
def test_desc_suffix_reverses_order(requested):
    assert sort_map.resolve(requested) == ("salary", True)


@pytest.mark.parametrize("requested", [None, "", "age", "salaryasc", "desc"])
def test_unknown_or_missing_key_falls_back_to_default_ascending(requested):
    assert sort_map.resolve(requested) == ("firstname", False)


def test_order_clauses_end_with_id_tie_breaker():
    clauses = sort_map.order_clauses("lastnamedesc")

    assert len(clauses) == 2
    assert str(clauses[0]) == str(Employee.last_name.desc())
    assert str(clauses[1]) == str(Employee.id.asc())


def test_keys_lists_ascending_and_descending_variants():
    assert "positionid" in sort_map.keys
    assert "positioniddesc" in sort_map.keys


def test_default_must_be_a_known_key():
    with pytest.raises(ValueError):
        SortMap({"salary": Employee.salary}, default="name", tie_breaker=Employee.id)


def test_normalize_sort_key():
    assert normalize_sort_key("Price_Per-Night") == "pricepernight"


def test_unknown_key_is_logged_with_accepted_keys(caplog):
    with caplog.at_level(logging.DEBUG, logger="repositories.sorting"):
        sort_map.resolve("age")

    message = caplog.records[-1].getMessage()
    assert "'age'" in message
    assert "salarydesc" in message
