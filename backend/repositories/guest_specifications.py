"""
Guest-specific Specifications
"""

from typing import Optional

from models import Guest
from dtos.request.guest_request import GuestResourceParameters
from .specifications import Specification, EqualsSpec, ContainsTextSpec, all_of, optional_spec


class GuestNameMatchesSpec(Specification[Guest]):
    """Guests whose first or last name contains the search text (case-insensitive)."""

    def __init__(self, text: str):
        self.text = text
        self._spec = ContainsTextSpec(Guest.first_name, text) | ContainsTextSpec(Guest.last_name, text)

    def is_satisfied_by(self, guest: Guest) -> bool:
        return self._spec.is_satisfied_by(guest)

    def to_sql_filter(self):
        return self._spec.to_sql_filter()


def _search_spec(search: Optional[str]) -> Optional[Specification[Guest]]:
    if search is None or not search.strip():
        return None
    return GuestNameMatchesSpec(search.strip())


def guest_spec_from_parameters(params: GuestResourceParameters) -> Specification[Guest]:
    """Build the filter for a guest list request."""
    return all_of([
        _search_spec(params.search),
        optional_spec(EqualsSpec, Guest.phone_number, params.phone_number),
    ])
