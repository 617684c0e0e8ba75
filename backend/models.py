from sqlalchemy import Column, String, Integer, Numeric, Date, ForeignKey, CheckConstraint, Index
from sqlalchemy.orm import relationship
from database import Base


class Employee(Base):
    """Hotel staff member. Bookings record which employee registered them."""
    __tablename__ = 'employees'

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    phone_number = Column(String(30), nullable=True)
    position_id = Column(Integer, nullable=False)
    salary = Column(Numeric(10, 2), nullable=False)

    bookings = relationship("Booking", back_populates="employee")

    __table_args__ = (
        CheckConstraint("salary >= 0", name='ck_employees_salary_non_negative'),
        Index('idx_employees_position', 'position_id'),
    )


class Guest(Base):
    __tablename__ = 'guests'

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    phone_number = Column(String(30), nullable=False)
    email = Column(String(255), nullable=True)

    bookings = relationship("Booking", back_populates="guest")

    __table_args__ = (
        Index('idx_guests_last_name', 'last_name'),
    )


class Room(Base):
    __tablename__ = 'rooms'

    id = Column(Integer, primary_key=True, autoincrement=True)
    number = Column(String(20), nullable=False, unique=True)
    room_type = Column(String(50), nullable=False)  # e.g. 'single', 'double', 'suite'
    capacity = Column(Integer, nullable=False)
    price_per_night = Column(Numeric(10, 2), nullable=False)

    bookings = relationship("Booking", back_populates="room")

    __table_args__ = (
        CheckConstraint("capacity >= 1", name='ck_rooms_capacity_positive'),
        CheckConstraint("price_per_night >= 0", name='ck_rooms_price_non_negative'),
    )


class Booking(Base):
    """
    A stay of one guest in one room, registered by an employee.

    check_out_date is exclusive: a booking from the 1st to the 3rd is two nights.
    """
    __tablename__ = 'bookings'

    id = Column(Integer, primary_key=True, autoincrement=True)
    guest_id = Column(Integer, ForeignKey('guests.id'), nullable=False)
    employee_id = Column(Integer, ForeignKey('employees.id'), nullable=False)
    room_id = Column(Integer, ForeignKey('rooms.id'), nullable=False)
    check_in_date = Column(Date, nullable=False)
    check_out_date = Column(Date, nullable=False)
    total_price = Column(Numeric(10, 2), nullable=False)

    guest = relationship("Guest", back_populates="bookings")
    employee = relationship("Employee", back_populates="bookings")
    room = relationship("Room", back_populates="bookings")

    __table_args__ = (
        CheckConstraint("check_out_date > check_in_date", name='ck_bookings_dates_ordered'),
        CheckConstraint("total_price >= 0", name='ck_bookings_total_non_negative'),
        Index('idx_bookings_guest', 'guest_id'),
        Index('idx_bookings_room', 'room_id'),
        Index('idx_bookings_check_in', 'check_in_date'),
    )
