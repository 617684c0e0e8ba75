import sys
from pathlib import Path

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Now import after path is set
from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import Base, create_db_engine, get_db
from models import Employee, Guest, Room, Booking


@pytest.fixture
def db_engine():
    """In-memory database shared by every connection of one test"""
    engine = create_db_engine('sqlite:///:memory:', poolclass=StaticPool)
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db_session(db_engine):
    """Create in-memory database session for testing"""
    SessionLocal = sessionmaker(bind=db_engine, autoflush=False)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def client(db_session):
    """Test client whose requests use the test database session"""
    from main import app

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    # Not used as a context manager so the lifespan (logging, init_database) does not run
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_employee(db_session):
    def _make(first_name="Ada", last_name="Novak", position_id=1, salary="1000.00", phone_number=None):
        employee = Employee(
            first_name=first_name,
            last_name=last_name,
            position_id=position_id,
            salary=Decimal(salary),
            phone_number=phone_number,
        )
        db_session.add(employee)
        db_session.commit()
        return employee
    return _make


@pytest.fixture
def make_guest(db_session):
    def _make(first_name="Lena", last_name="Berg", phone_number="+10000000000", email=None):
        guest = Guest(first_name=first_name, last_name=last_name, phone_number=phone_number, email=email)
        db_session.add(guest)
        db_session.commit()
        return guest
    return _make


@pytest.fixture
def make_room(db_session):
    def _make(number="101", room_type="double", capacity=2, price_per_night="120.00"):
        room = Room(number=number, room_type=room_type, capacity=capacity, price_per_night=Decimal(price_per_night))
        db_session.add(room)
        db_session.commit()
        return room
    return _make


@pytest.fixture
def make_booking(db_session, make_guest, make_employee, make_room):
    def _make(guest=None, employee=None, room=None,
              check_in=date(2026, 5, 1), check_out=date(2026, 5, 3), total_price="240.00"):
        guest = guest or make_guest()
        employee = employee or make_employee()
        room = room or make_room(number=f"R{db_session.query(Room).count() + 1}")
        booking = Booking(
            guest_id=guest.id,
            employee_id=employee.id,
            room_id=room.id,
            check_in_date=check_in,
            check_out_date=check_out,
            total_price=Decimal(total_price),
        )
        db_session.add(booking)
        db_session.commit()
        return booking
    return _make
