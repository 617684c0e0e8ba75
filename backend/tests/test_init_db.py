from sqlalchemy import inspect, text

from database import create_db_engine
from init_db import init_database


def test_creates_missing_tables_and_directory(tmp_path):
    db_path = tmp_path / "nested" / "staysphere.db"
    engine = create_db_engine(f"sqlite:///{db_path}")

    created = init_database(engine)

    assert sorted(created) == ["bookings", "employees", "guests", "rooms"]
    assert db_path.exists()
    assert init_database(engine) == []
    engine.dispose()


def test_file_database_enforces_foreign_keys(tmp_path):
    engine = create_db_engine(f"sqlite:///{tmp_path / 'fk.db'}")
    init_database(engine)

    with engine.connect() as conn:
        assert conn.execute(text("PRAGMA foreign_keys")).scalar() == 1
        assert conn.execute(text("PRAGMA journal_mode")).scalar() == "wal"
    assert set(inspect(engine).get_table_names()) >= {"bookings", "rooms"}
    engine.dispose()
