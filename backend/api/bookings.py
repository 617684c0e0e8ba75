from fastapi import APIRouter, Depends
from dependencies import get_booking_service
from dtos.request.booking_request import BookingForCreateDto, BookingForUpdateDto, BookingResourceParameters
from dtos.response.booking_response import BookingDto
from dtos.response.pagination_response import PaginatedResponse
from exceptions import InvalidArgumentError
from services.booking_service import BookingService
from utils.error_handlers import handle_api_errors
from constants import HTTPStatus

router = APIRouter(tags=["bookings"])


@router.get("/bookings", response_model=PaginatedResponse[BookingDto])
@handle_api_errors("List bookings")
def list_bookings(
    params: BookingResourceParameters = Depends(),
    service: BookingService = Depends(get_booking_service)
):
    """
    Paginated booking list with guest, employee and room embedded.

    `check_in_from` and `check_out_to` bound the stay window (both inclusive).
    Sort keys: checkindate (default), checkoutdate, totalprice; add `desc` to reverse.
    """
    page = service.list(params)
    return PaginatedResponse[BookingDto].model_validate(page)


@router.get("/bookings/{booking_id}", response_model=BookingDto)
@handle_api_errors("Get booking")
def get_booking(booking_id: int, service: BookingService = Depends(get_booking_service)):
    return service.get_by_id(booking_id)


@router.post("/bookings", response_model=BookingDto, status_code=HTTPStatus.CREATED)
@handle_api_errors("Create booking")
def create_booking(payload: BookingForCreateDto, service: BookingService = Depends(get_booking_service)):
    """
    Book a room for a guest.

    Raises:
        HTTPException: 400 if check-out is not after check-in,
            409 if the guest, employee or room does not exist
    """
    return service.create(payload)


@router.put("/bookings/{booking_id}", status_code=HTTPStatus.NO_CONTENT)
@handle_api_errors("Update booking")
def update_booking(
    booking_id: int,
    payload: BookingForUpdateDto,
    service: BookingService = Depends(get_booking_service)
):
    """Replace the dates, price and parties of an existing booking."""
    if payload.id != booking_id:
        raise InvalidArgumentError(
            f"Path id {booking_id} does not match body id {payload.id}",
            invalid_fields={"id": payload.id},
        )
    service.update(payload)


@router.delete("/bookings/{booking_id}", status_code=HTTPStatus.NO_CONTENT)
@handle_api_errors("Delete booking")
def delete_booking(booking_id: int, service: BookingService = Depends(get_booking_service)):
    """Cancel a booking"""
    service.delete(booking_id)
