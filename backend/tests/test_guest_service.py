import pytest

from exceptions import EntityNotFoundError
from models import Guest
from dtos.request.guest_request import GuestForCreateDto, GuestForUpdateDto, GuestResourceParameters
from repositories.guest_specifications import guest_spec_from_parameters
from services.guest_service import GuestService


@pytest.fixture
def service(db_session):
    return GuestService(db_session)


@pytest.fixture
def guests(make_guest):
    return [
        make_guest(first_name="Marta", last_name="Holm", phone_number="+4711"),
        make_guest(first_name="Jonas", last_name="Marten", phone_number="+4722"),
        make_guest(first_name="Ines", last_name="Alves", phone_number="+3511"),
        make_guest(first_name="Ari", last_name="Lund", phone_number="+4722"),
    ]


def test_search_matches_either_name_ignoring_case(service, guests):
    page = service.list(GuestResourceParameters(search="MART"))

    assert [g.full_name for g in page.items] == ["Jonas Marten", "Marta Holm"]


def test_search_and_phone_number_combine(service, guests):
    page = service.list(GuestResourceParameters(search="a", phone_number="+4722"))

    assert [g.first_name for g in page.items] == ["Ari", "Jonas"]


def test_search_with_wildcard_characters_is_literal(service, guests):
    page = service.list(GuestResourceParameters(search="%"))

    assert page.items == []
    assert page.total_count == 0


def test_sort_by_last_name_descending(service, guests):
    page = service.list(GuestResourceParameters(order_by="last_name_desc"))

    assert [g.last_name for g in page.items] == ["Marten", "Lund", "Holm", "Alves"]


def test_second_page(service, guests):
    page = service.list(GuestResourceParameters(page_number=2, page_size=3))

    assert [g.first_name for g in page.items] == ["Marta"]
    assert page.has_previous and not page.has_next


def test_create_and_update_guest(service):
    created = service.create(GuestForCreateDto(first_name="Noor", last_name="Aziz", phone_number="+100"))

    assert created.email is None

    service.update(GuestForUpdateDto(
        id=created.id, first_name="Noor", last_name="Aziz", phone_number="+100", email="noor@example.com"
    ))

    assert service.get_by_id(created.id).email == "noor@example.com"


def test_get_missing_guest(service):
    with pytest.raises(EntityNotFoundError) as exc_info:
        service.get_by_id(1)

    assert exc_info.value.details["entity"] == "Guest"


@pytest.mark.parametrize("search", ["élodie", "ÉLODIE", "lodi", "ßTRAND"])
def test_search_folds_case_beyond_ascii(db_session, service, make_guest, search):
    elodie = make_guest(first_name="ÉLODIE", last_name="Aßtrand")
    make_guest(first_name="Marta", last_name="Holm")
    spec = guest_spec_from_parameters(GuestResourceParameters(search=search))

    page = service.list(GuestResourceParameters(search=search))

    expected = {g.id for g in db_session.query(Guest).all() if spec.is_satisfied_by(g)}
    assert {g.id for g in page.items} == expected == {elodie.id}
