"""
Employee-specific Specifications

Compiles EmployeeResourceParameters into a single specification.
"""

from models import Employee
from dtos.request.employee_request import EmployeeResourceParameters
from .specifications import (
    Specification,
    EqualsSpec,
    LessThanSpec,
    GreaterThanSpec,
    all_of,
    optional_spec,
)


def employee_spec_from_parameters(params: EmployeeResourceParameters) -> Specification[Employee]:
    """
    Build the filter for an employee list request.

    Each supplied filter adds one ANDed predicate; unset filters add nothing.
    """
    return all_of([
        optional_spec(EqualsSpec, Employee.position_id, params.position_id),
        optional_spec(EqualsSpec, Employee.salary, params.salary),
        optional_spec(LessThanSpec, Employee.salary, params.salary_less_than),
        optional_spec(GreaterThanSpec, Employee.salary, params.salary_greater_than),
    ])
