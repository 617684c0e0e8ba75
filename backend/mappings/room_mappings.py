"""
Room mappings.
"""

from models import Room
from dtos.request.room_request import RoomForCreateDto, RoomForUpdateDto
from dtos.response.room_response import RoomDto
from .base_mapper import Mapper


room_to_dto = Mapper(Room, RoomDto)
create_dto_to_room = Mapper(RoomForCreateDto, Room)
update_dto_to_room = Mapper(RoomForUpdateDto, Room, ignore={"id"})
