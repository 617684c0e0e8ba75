from fastapi import APIRouter, Depends
from dependencies import get_employee_service
from dtos.request.employee_request import EmployeeForCreateDto, EmployeeForUpdateDto, EmployeeResourceParameters
from dtos.response.employee_response import EmployeeDto
from dtos.response.pagination_response import PaginatedResponse
from exceptions import InvalidArgumentError
from services.employee_service import EmployeeService
from utils.error_handlers import handle_api_errors
from constants import HTTPStatus

router = APIRouter(tags=["employees"])


@router.get("/employees", response_model=PaginatedResponse[EmployeeDto])
@handle_api_errors("List employees")
def list_employees(
    params: EmployeeResourceParameters = Depends(),
    service: EmployeeService = Depends(get_employee_service)
):
    """
    Paginated employee list.

    Filters are optional and ANDed together. `order_by` accepts the sortable
    field names, optionally suffixed with `desc`; unknown keys use the default order.
    """
    page = service.list(params)
    return PaginatedResponse[EmployeeDto].model_validate(page)


@router.get("/employees/{employee_id}", response_model=EmployeeDto)
@handle_api_errors("Get employee")
def get_employee(employee_id: int, service: EmployeeService = Depends(get_employee_service)):
    """
    Get a specific employee

    Raises:
        HTTPException: 404 if the employee does not exist
    """
    return service.get_by_id(employee_id)


@router.post("/employees", response_model=EmployeeDto, status_code=HTTPStatus.CREATED)
@handle_api_errors("Create employee")
def create_employee(payload: EmployeeForCreateDto, service: EmployeeService = Depends(get_employee_service)):
    """Hire an employee. Returns the stored record with its new id."""
    return service.create(payload)


@router.put("/employees/{employee_id}", status_code=HTTPStatus.NO_CONTENT)
@handle_api_errors("Update employee")
def update_employee(
    employee_id: int,
    payload: EmployeeForUpdateDto,
    service: EmployeeService = Depends(get_employee_service)
):
    """
    Update an existing employee.

    Raises:
        HTTPException: 400 if the path and body ids differ, 404 if the employee does not exist
    """
    if payload.id != employee_id:
        raise InvalidArgumentError(
            f"Path id {employee_id} does not match body id {payload.id}",
            invalid_fields={"id": payload.id},
        )
    service.update(payload)


@router.delete("/employees/{employee_id}", status_code=HTTPStatus.NO_CONTENT)
@handle_api_errors("Delete employee")
def delete_employee(employee_id: int, service: EmployeeService = Depends(get_employee_service)):
    """Delete an employee. Deleting an unknown id is a no-op; an employee still referenced by bookings gives 409."""
    service.delete(employee_id)
