"""
Employee Service

Handles business logic for employee operations: filtered listing, lookup,
registration, updates and removal.
"""

from models import Employee
from dtos.request.employee_request import (
    EmployeeForCreateDto,
    EmployeeForUpdateDto,
    EmployeeResourceParameters,
)
from dtos.response.employee_response import EmployeeDto
from mappings.employee_mappings import employee_to_dto, create_dto_to_employee, update_dto_to_employee
from repositories.employee_repository import EmployeeRepository
from repositories.employee_specifications import employee_spec_from_parameters
from .entity_service import EntityService


class EmployeeService(
    EntityService[EmployeeDto, EmployeeForCreateDto, EmployeeForUpdateDto, EmployeeResourceParameters]
):
    """Service for employee-related business logic."""

    entity_name = Employee.__name__
    repository_class = EmployeeRepository
    parameters_class = EmployeeResourceParameters
    read_mapper = employee_to_dto
    create_mapper = create_dto_to_employee
    update_mapper = update_dto_to_employee
    spec_builder = staticmethod(employee_spec_from_parameters)
