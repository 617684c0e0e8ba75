from fastapi import APIRouter, Depends
from dependencies import get_room_service
from dtos.request.room_request import RoomForCreateDto, RoomForUpdateDto, RoomResourceParameters
from dtos.response.room_response import RoomDto
from dtos.response.pagination_response import PaginatedResponse
from exceptions import InvalidArgumentError
from services.room_service import RoomService
from utils.error_handlers import handle_api_errors
from constants import HTTPStatus

router = APIRouter(tags=["rooms"])


@router.get("/rooms", response_model=PaginatedResponse[RoomDto])
@handle_api_errors("List rooms")
def list_rooms(
    params: RoomResourceParameters = Depends(),
    service: RoomService = Depends(get_room_service)
):
    """Paginated room list, ordered by room number unless `order_by` says otherwise."""
    page = service.list(params)
    return PaginatedResponse[RoomDto].model_validate(page)


@router.get("/rooms/{room_id}", response_model=RoomDto)
@handle_api_errors("Get room")
def get_room(room_id: int, service: RoomService = Depends(get_room_service)):
    return service.get_by_id(room_id)


@router.post("/rooms", response_model=RoomDto, status_code=HTTPStatus.CREATED)
@handle_api_errors("Create room")
def create_room(payload: RoomForCreateDto, service: RoomService = Depends(get_room_service)):
    """Add a room. Room numbers are unique (409 on a duplicate)."""
    return service.create(payload)


@router.put("/rooms/{room_id}", status_code=HTTPStatus.NO_CONTENT)
@handle_api_errors("Update room")
def update_room(
    room_id: int,
    payload: RoomForUpdateDto,
    service: RoomService = Depends(get_room_service)
):
    if payload.id != room_id:
        raise InvalidArgumentError(
            f"Path id {room_id} does not match body id {payload.id}",
            invalid_fields={"id": payload.id},
        )
    service.update(payload)


@router.delete("/rooms/{room_id}", status_code=HTTPStatus.NO_CONTENT)
@handle_api_errors("Delete room")
def delete_room(room_id: int, service: RoomService = Depends(get_room_service)):
    """Delete a room. Deleting a room that does not exist succeeds."""
    service.delete(room_id)
