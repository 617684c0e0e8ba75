"""
Guest Service

Handles business logic for guest operations.
"""

from models import Guest
from dtos.request.guest_request import GuestForCreateDto, GuestForUpdateDto, GuestResourceParameters
from dtos.response.guest_response import GuestDto
from mappings.guest_mappings import guest_to_dto, create_dto_to_guest, update_dto_to_guest
from repositories.guest_repository import GuestRepository
from repositories.guest_specifications import guest_spec_from_parameters
from .entity_service import EntityService


class GuestService(EntityService[GuestDto, GuestForCreateDto, GuestForUpdateDto, GuestResourceParameters]):
    """Service for guest-related business logic."""

    entity_name = Guest.__name__
    repository_class = GuestRepository
    parameters_class = GuestResourceParameters
    read_mapper = guest_to_dto
    create_mapper = create_dto_to_guest
    update_mapper = update_dto_to_guest
    spec_builder = staticmethod(guest_spec_from_parameters)
