import pytest

from exceptions import InvalidArgumentError
from models import Employee
from repositories.pagination import PaginatedList, paginate


@pytest.fixture
def five_employees(make_employee):
    for name in ["E", "C", "A", "D", "B"]:
        make_employee(first_name=name)


def _names_query(db_session):
    return db_session.query(Employee).order_by(Employee.first_name.asc(), Employee.id.asc())


def test_pages_of_two_over_five_records(db_session, five_employees):
    pages = [paginate(_names_query(db_session), n, 2) for n in (1, 2, 3)]

    assert [[e.first_name for e in page.items] for page in pages] == [["A", "B"], ["C", "D"], ["E"]]
    assert {page.total_count for page in pages} == {5}
    assert [page.current_page for page in pages] == [1, 2, 3]
    assert pages[0].total_pages == 3


def test_has_next_and_previous(db_session, five_employees):
    first = paginate(_names_query(db_session), 1, 2)
    last = paginate(_names_query(db_session), 3, 2)

    assert first.has_next and not first.has_previous
    assert last.has_previous and not last.has_next


def test_empty_result_first_page_is_valid(db_session):
    page = paginate(_names_query(db_session), 1, 10)

    assert page.items == []
    assert page.total_count == 0
    assert page.total_pages == 0
    assert not page.has_next


@pytest.mark.parametrize("page_number,page_size", [(0, 10), (-1, 10), (1, 0), (1, -5)])
def test_page_parameters_below_one_are_rejected(db_session, page_number, page_size):
    with pytest.raises(InvalidArgumentError) as exc_info:
        paginate(_names_query(db_session), page_number, page_size)

    assert exc_info.value.details["invalid_fields"]


def test_page_past_the_end_is_rejected(db_session, five_employees):
    with pytest.raises(InvalidArgumentError):
        paginate(_names_query(db_session), 4, 2)


def test_map_keeps_metadata():
    page = PaginatedList(items=[1, 2], total_count=7, current_page=2, page_size=2)

    mapped = page.map(lambda x: x * 10)

    assert mapped.items == [10, 20]
    assert (mapped.total_count, mapped.current_page, mapped.page_size) == (7, 2, 2)
    assert page.items == [1, 2]


def test_paginated_list_is_frozen():
    page = PaginatedList(items=[1], total_count=1, current_page=1, page_size=1)

    with pytest.raises(AttributeError):
        page.total_count = 2
