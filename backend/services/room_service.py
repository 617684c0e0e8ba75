"""
Room Service

Handles business logic for room operations.
"""

from models import Room
from dtos.request.room_request import RoomForCreateDto, RoomForUpdateDto, RoomResourceParameters
from dtos.response.room_response import RoomDto
from mappings.room_mappings import room_to_dto, create_dto_to_room, update_dto_to_room
from repositories.room_repository import RoomRepository
from repositories.room_specifications import room_spec_from_parameters
from .entity_service import EntityService


class RoomService(EntityService[RoomDto, RoomForCreateDto, RoomForUpdateDto, RoomResourceParameters]):
    """Service for room-related business logic."""

    entity_name = Room.__name__
    repository_class = RoomRepository
    parameters_class = RoomResourceParameters
    read_mapper = room_to_dto
    create_mapper = create_dto_to_room
    update_mapper = update_dto_to_room
    spec_builder = staticmethod(room_spec_from_parameters)
