"""Database connections."""

from sqlalchemy import create_engine
from sqlalchemy.engine import URL


def postgres_dsn(user, password, host, dbname, port):
    """URL of a PostgreSQL database, with SSL disabled."""
    return URL.create("postgresql", username=user, password=password, host=host,
                      port=int(port), database=dbname, query={"sslmode": "disable"})


def connect(url):
    return create_engine(url)


def connect_postgres(user, password, host, dbname, port):
    return connect(postgres_dsn(user, password, host, dbname, port))