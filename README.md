# bridgr

bridgr turns dataclass models into a small JSON CRUD API backed by an SQL
database through SQLAlchemy. For every model you register it adds five
routes, records an OpenAPI 3.0 description of them, and can serve that
description together with a Swagger UI page. The router is a plain WSGI
application, so it runs under any WSGI server.

## Installation

```
pip install bridgr
```

## Models

A model is a dataclass with an `id` field, which becomes the primary key:

```python
from dataclasses import dataclass, field

@dataclass
class Todo:
    id: int = 0
    title: str = ""
    done: bool = False
```

Fields of type `int`, `str`, `bool` and `float` (optionally `Optional[...]`)
become matching columns; any other type is stored as JSON. A field's JSON
name is its name, or the value of a `json` key in its metadata
(`field(metadata={"json": "name"})`). The table name is the class name in
snake case, pluralised (`Todo` → `todos`).

`bridgr.orm.auto_migrate(engine, *models)` creates missing tables.

## Routes

`bridgr.crud.register_crud(router, "todos", engine, Todo, opts)` adds:

| Method | Path          | Result                                          |
|--------|---------------|-------------------------------------------------|
| GET    | `/todos`      | list, filtered by query parameters (200)        |
| POST   | `/todos`      | create from a JSON body (201)                   |
| GET    | `/todos/{id}` | one item (200), or 404 when it cannot be read   |
| PUT    | `/todos/{id}` | copy the non-empty fields of the body (200)     |
| DELETE | `/todos/{id}` | delete (204, empty body)                        |

Errors come back as JSON objects of the form `{"error": "..."}`:

- 400 `Invalid input` when the body is not a JSON object or a field has the
  wrong type, and 400 for a filter field that is not allowed;
- 403 `Unauthorized` when the `auth` check returns false;
- 422 with the exception's message when `validate` raises;
- 500 with the error message when storage fails.

Any other storage can be used through `register_crud_routes(router, path,
model, store, opts)`, where `store` has the methods `list(filters)`,
`get(id)`, `create(input)`, `update(id, input)` and `delete(id)` (the
`BridgrModel` protocol). `bridgr.orm.SqlModel(engine, model)` is the SQL one.

### Options

`bridgr.crud.BridgrOptions` has three members:

- `middlewares`: callables that each take a handler and return a handler;
  the first in the list is the outermost;
- `validate`: called with the decoded model instance; raise to reject it;
- `auth`: called with the `Request`; return false to refuse it.

Handlers take a `bridgr.messages.Request` (`method`, `path`, `query`,
`headers`, `body`, `params`) and return a `bridgr.messages.Response`
(`status`, `headers`, `body`).

## Filtering

A model decides which fields may be used as query-string filters on the list
endpoint:

- a `generic_filtering` class method that returns true allows every field;
- otherwise a `filterable_fields` class method lists the allowed JSON names;
- setting `bridgr.orm.GENERIC_FILTERING_ENABLED = True` allows every field
  of every model.

String fields are matched with `LIKE '%value%'`, other fields by equality.
Filtering on a field that is not allowed raises
`bridgr.errors.InvalidFilterFieldError`, which the list endpoint reports as
a 400 response.

## Usage

```python
from bridgr.db import connect
from bridgr.orm import auto_migrate
from bridgr.router import Router
from bridgr.crud import register_crud
from bridgr.server import start_server
from bridgr.example import Todo, Note

engine = connect("sqlite:///bridgr.db")
auto_migrate(engine, Todo, Note)

router = Router()
register_crud(router, "todos", engine, Todo, None)
register_crud(router, "notes", engine, Note, None)

start_server(router, "8080")
```

`start_server` adds `GET /openapi.json` and `GET /docs` and serves the router
with the standard library's `wsgiref` server. To use another WSGI server,
call `bridgr.server.add_docs_routes(router)` and hand it the router.

For PostgreSQL, `connect_postgres` builds the connection URL from its parts
(with `sslmode=disable`):

```python
from bridgr.db import connect_postgres

password = "password"
engine = connect_postgres("user", password, "localhost", "bridgr", 5432)
```

## Example application

The package ships with a small to-do and notes service on PostgreSQL:

```
bridgr-example --user user --host localhost --dbname bridgr --db-port 5432 --port 8080
```

It registers `/todos`, where every field can be filtered, and `/notes`, where
only `title` can be filtered, and serves the API documentation at `/docs`.
The `--password` option sets the database password.

## What it does not do

- It installs no database driver. SQLite works out of the box; PostgreSQL,
  including the example application, needs a driver that SQLAlchemy can use
  (psycopg2 by default) installed separately.
- The OpenAPI document describes request bodies and parameters only; every
  operation is documented with a single `200` response and no response
  schema.
- The built-in server is the single-threaded `wsgiref` server, meant for
  development.