from fastapi import APIRouter, Depends
from dependencies import get_guest_service
from dtos.request.guest_request import GuestForCreateDto, GuestForUpdateDto, GuestResourceParameters
from dtos.response.guest_response import GuestDto
from dtos.response.pagination_response import PaginatedResponse
from exceptions import InvalidArgumentError
from services.guest_service import GuestService
from utils.error_handlers import handle_api_errors
from constants import HTTPStatus

router = APIRouter(tags=["guests"])


@router.get("/guests", response_model=PaginatedResponse[GuestDto])
@handle_api_errors("List guests")
def list_guests(
    params: GuestResourceParameters = Depends(),
    service: GuestService = Depends(get_guest_service)
):
    """
    Paginated guest list.

    `search` matches first or last name (case-insensitive substring).
    Sort keys: firstname (default), lastname; suffix with `desc` for descending.
    """
    page = service.list(params)
    return PaginatedResponse[GuestDto].model_validate(page)


@router.get("/guests/{guest_id}", response_model=GuestDto)
@handle_api_errors("Get guest")
def get_guest(guest_id: int, service: GuestService = Depends(get_guest_service)):
    """
    Get a specific guest

    Raises:
        HTTPException: 404 if the guest does not exist
    """
    return service.get_by_id(guest_id)


@router.post("/guests", response_model=GuestDto, status_code=HTTPStatus.CREATED)
@handle_api_errors("Create guest")
def create_guest(payload: GuestForCreateDto, service: GuestService = Depends(get_guest_service)):
    """Register a guest"""
    return service.create(payload)


@router.put("/guests/{guest_id}", status_code=HTTPStatus.NO_CONTENT)
@handle_api_errors("Update guest")
def update_guest(
    guest_id: int,
    payload: GuestForUpdateDto,
    service: GuestService = Depends(get_guest_service)
):
    """
    Update an existing guest.

    Raises:
        HTTPException: 400 if the path and body ids differ, 404 if the guest does not exist
    """
    if payload.id != guest_id:
        raise InvalidArgumentError(
            f"Path id {guest_id} does not match body id {payload.id}",
            invalid_fields={"id": payload.id},
        )
    service.update(payload)


@router.delete("/guests/{guest_id}", status_code=HTTPStatus.NO_CONTENT)
@handle_api_errors("Delete guest")
def delete_guest(guest_id: int, service: GuestService = Depends(get_guest_service)):
    """Delete a guest. Deleting a guest that does not exist succeeds."""
    service.delete(guest_id)
