"""CRUD JSON endpoints and OpenAPI documentation for dataclass models stored through SQLAlchemy, served over WSGI."""

__version__ = "0.1.0"