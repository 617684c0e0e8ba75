import pytest


@pytest.fixture
def new_room():
    return {"number": "410", "room_type": "suite", "capacity": 4, "price_per_night": "320.00"}


def test_create_and_list_rooms(client, make_room, new_room):
    make_room(number="101")

    created = client.post("/api/rooms", json=new_room)
    listing = client.get("/api/rooms", params={"order_by": "number_desc"})

    assert created.status_code == 201
    assert [r["number"] for r in listing.json()["items"]] == ["410", "101"]


def test_filter_by_capacity(client, make_room):
    make_room(number="101", capacity=1)
    make_room(number="102", capacity=3)

    response = client.get("/api/rooms", params={"capacity_greater_than": 2})

    assert [r["number"] for r in response.json()["items"]] == ["102"]


def test_duplicate_number_is_conflict(client, make_room, new_room):
    make_room(number="410")

    response = client.post("/api/rooms", json=new_room)

    assert response.status_code == 409


def test_zero_capacity_is_unprocessable(client, new_room):
    response = client.post("/api/rooms", json={**new_room, "capacity": 0})

    assert response.status_code == 422


def test_update_then_get(client, make_room, new_room):
    room = make_room()

    response = client.put(f"/api/rooms/{room.id}", json={**new_room, "id": room.id})

    assert response.status_code == 204
    assert client.get(f"/api/rooms/{room.id}").json()["room_type"] == "suite"


def test_update_missing_room_is_not_found(client, new_room):
    assert client.put("/api/rooms/8", json={**new_room, "id": 8}).status_code == 404


def test_delete_booked_room_is_conflict(client, make_booking):
    booking = make_booking()

    assert client.delete(f"/api/rooms/{booking.room_id}").status_code == 409
