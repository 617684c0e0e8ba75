"""
Employee mappings.
"""

from models import Employee
from dtos.request.employee_request import EmployeeForCreateDto, EmployeeForUpdateDto
from dtos.response.employee_response import EmployeeDto
from .base_mapper import Mapper


def full_name(person) -> str:
    return f"{person.first_name} {person.last_name}"


employee_to_dto = Mapper(Employee, EmployeeDto, computed={"full_name": full_name})
create_dto_to_employee = Mapper(EmployeeForCreateDto, Employee)
update_dto_to_employee = Mapper(EmployeeForUpdateDto, Employee, ignore={"id"})
