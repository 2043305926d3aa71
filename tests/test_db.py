from sqlalchemy import text

from bridgr.db import connect, postgres_dsn


def test_postgres_dsn_fields():
    password = "password"
    url = postgres_dsn("user", password=password, host="localhost", dbname="bridgr", port=5432)
    assert url.host == "localhost"
    assert url.port == 5432
    assert url.database == "bridgr"
    assert url.username == "user"
    assert url.password == password
    assert url.query["sslmode"] == "disable"


def test_connect_sqlite():
    engine = connect("sqlite://")
    with engine.connect() as conn:
        assert conn.execute(text("select 1")).scalar() == 1