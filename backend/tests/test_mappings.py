from datetime import date
from decimal import Decimal
from typing import Optional

import pytest
from pydantic import BaseModel

from exceptions import InvalidArgumentError, MappingConfigurationError
from models import Employee, Booking
from dtos.request.employee_request import EmployeeForCreateDto, EmployeeForUpdateDto
from dtos.response.employee_response import EmployeeDto
from mappings.base_mapper import Mapper, describe_fields
from mappings import (
    employee_to_dto,
    create_dto_to_employee,
    update_dto_to_employee,
    booking_to_dto,
)


def test_describe_fields_of_orm_model():
    fields, required = describe_fields(Employee)

    assert fields[:6] == ["id", "first_name", "last_name", "phone_number", "position_id", "salary"]
    assert "bookings" in fields
    assert required == {"first_name", "last_name", "position_id", "salary"}


def test_describe_fields_of_pydantic_model():
    fields, required = describe_fields(EmployeeDto)

    assert "full_name" in fields
    assert "phone_number" not in required
    assert "id" in required


def test_missing_required_target_field_fails_at_construction():
    class NameOnly(BaseModel):
        first_name: str

    with pytest.raises(MappingConfigurationError) as exc_info:
        Mapper(NameOnly, EmployeeDto)

    missing = exc_info.value.details["missing_fields"]
    assert set(missing) == {"id", "last_name", "full_name", "position_id", "salary"}


def test_rename_and_computed_fill_required_fields():
    class Legacy(BaseModel):
        id: int
        given_name: str
        surname: str
        position: int
        pay: Decimal
        phone: Optional[str] = None

    mapper = Mapper(
        Legacy,
        EmployeeDto,
        renames={
            "first_name": "given_name",
            "last_name": "surname",
            "position_id": "position",
            "salary": "pay",
        },
        computed={"full_name": lambda s: f"{s.given_name} {s.surname}"},
    )

    dto = mapper.map(Legacy(id=4, given_name="Ada", surname="Novak", position=2, pay=Decimal("10")))

    assert dto.full_name == "Ada Novak"
    assert dto.phone_number is None


def test_rename_to_unknown_field_is_rejected():
    with pytest.raises(MappingConfigurationError):
        Mapper(EmployeeForCreateDto, Employee, renames={"nickname": "first_name"})


def test_create_dto_to_entity_copies_all_fields():
    dto = EmployeeForCreateDto(first_name="Ada", last_name="Novak", position_id=3, salary=Decimal("1200.50"))

    entity = create_dto_to_employee.map(dto)

    assert isinstance(entity, Employee)
    assert entity.id is None
    assert (entity.first_name, entity.last_name, entity.position_id, entity.salary) == (
        "Ada", "Novak", 3, Decimal("1200.50")
    )


def test_update_apply_keeps_identity():
    entity = Employee(id=7, first_name="Old", last_name="Name", position_id=1, salary=Decimal("1"))
    dto = EmployeeForUpdateDto(id=99, first_name="New", last_name="Name", position_id=2, salary=Decimal("2"))

    update_dto_to_employee.apply(dto, entity)

    assert entity.id == 7
    assert entity.first_name == "New"
    assert entity.position_id == 2
    assert "id" not in update_dto_to_employee.fields


def test_entity_to_dto_computes_full_name():
    entity = Employee(id=1, first_name="Ada", last_name="Novak", position_id=1, salary=Decimal("5"))

    dto = employee_to_dto.map(entity)

    assert dto.id == 1
    assert dto.full_name == "Ada Novak"


def test_booking_to_dto_without_navigation():
    booking = Booking(
        id=3, guest_id=1, employee_id=2, room_id=5,
        check_in_date=date(2026, 1, 30), check_out_date=date(2026, 2, 2),
        total_price=Decimal("300"),
    )

    dto = booking_to_dto.map(booking)

    assert dto.nights == 3
    assert dto.guest is None and dto.room is None and dto.employee is None


def test_mapping_none_is_an_invalid_argument():
    with pytest.raises(InvalidArgumentError):
        employee_to_dto.map(None)
