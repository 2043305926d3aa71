"""Example application serving to-dos and notes."""

import argparse
from dataclasses import dataclass

from .crud import register_crud
from .db import connect_postgres
from .orm import auto_migrate
from .router import Router
from .server import start_server

PASSWORD = "password"


@dataclass
class Todo:
    """A to-do item; every field may be filtered on."""

    id: int = 0
    title: str = ""
    done: bool = False

    @classmethod
    def generic_filtering(cls):
        return True


@dataclass
class Note:
    """A note; only the title may be filtered on."""

    id: int = 0
    title: str = ""
    body: str = ""

    @classmethod
    def filterable_fields(cls):
        return ["title"]


def build_app(engine):
    """Create the tables and return a router serving to-dos and notes."""
    auto_migrate(engine, Todo, Note)
    router = Router()
    register_crud(router, "todos", engine, Todo)
    register_crud(router, "notes", engine, Note)
    return router


def main(argv=None):
    """Connect to PostgreSQL and serve the example API."""
    parser = argparse.ArgumentParser(description="Bridgr example API")
    parser.add_argument("--user", default="test")
    parser.add_argument("--password", default=PASSWORD)
    parser.add_argument("--host", default="localhost")
    parser.add_argument("--dbname", default="bridgr")
    parser.add_argument("--db-port", type=int, default=5432)
    parser.add_argument("--port", default="8080")
    args = parser.parse_args(argv)
    engine = connect_postgres(args.user, args.password, args.host, args.dbname, args.db_port)
    start_server(build_app(engine), args.port)