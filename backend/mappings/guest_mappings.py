"""
Guest mappings.
"""

from models import Guest
from dtos.request.guest_request import GuestForCreateDto, GuestForUpdateDto
from dtos.response.guest_response import GuestDto
from .base_mapper import Mapper
from .employee_mappings import full_name


guest_to_dto = Mapper(Guest, GuestDto, computed={"full_name": full_name})
create_dto_to_guest = Mapper(GuestForCreateDto, Guest)
update_dto_to_guest = Mapper(GuestForUpdateDto, Guest, ignore={"id"})
