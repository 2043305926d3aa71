"""CRUD storage of dataclass models in SQL tables."""

import dataclasses
import re

from sqlalchemy import JSON, Boolean, Column, Float, Integer, MetaData, String, Table
from sqlalchemy import delete, insert, select, update

from .builder import _flag
from .errors import InvalidFilterFieldError
from .schema import _model_class, _model_fields, json_name

GENERIC_FILTERING_ENABLED = False
"""When true, every field of every model may be filtered on."""

_metadata = MetaData()
_tables = {}
_column_types = {int: Integer, str: String, bool: Boolean, float: Float}


def filterable_fields(model):
    """Set of JSON names a list of the model may be filtered on."""
    cls = _model_class(model)
    if _flag(cls, "generic_filtering") is True:
        return {json_name(f) for f, _ in _model_fields(cls)}
    return set(_flag(cls, "filterable_fields") or ())


def _table_name(cls):
    name = re.sub(r"(?<!^)(?=[A-Z])", "_", cls.__name__).lower()
    if re.search(r"[^aeiou]y$", name):
        return name[:-1] + "ies"
    return name + ("es" if name.endswith(("s", "x", "ch", "sh")) else "s")


def _is_pk(f):
    return f.name == "id" or json_name(f) == "id"


def table_for(model):
    """The table holding a model, one per model class."""
    cls = _model_class(model)
    if cls not in _tables:
        columns = [
            Column(f.name, _column_types.get(tp, JSON), primary_key=_is_pk(f))
            for f, tp in _model_fields(cls)
        ]
        _tables[cls] = Table(_table_name(cls), _metadata, *columns)
    return _tables[cls]


def auto_migrate(engine, *args):
    """Create the tables of the given models where missing."""
    for model in args:
        table_for(model).create(engine, checkfirst=True)


def _coerce(tp, raw):
    if not isinstance(raw, str):
        return raw
    try:
        if tp is bool:
            return raw.strip().lower() in ("1", "t", "true")
        if tp in (int, float):
            return tp(raw)
    except ValueError:
        pass
    return raw


class SqlModel:
    """Stores instances of a dataclass model through an SQLAlchemy engine."""

    def __init__(self, engine, model):
        self.engine = engine
        self.model = _model_class(model)
        self.table = table_for(self.model)
        self._fields = _model_fields(self.model)
        pk = [(f, tp) for f, tp in self._fields if _is_pk(f)]
        if not pk:
            raise ValueError(f"{self.model.__name__} has no id field")
        self._pk, self._pk_type = pk[0]
        self._key = self.table.c[self._pk.name]

    def _instance(self, row):
        return self.model(**{f.name: row._mapping[f.name] for f, _ in self._fields})

    def list(self, filters):
        """Rows matching the filters; strings match by substring, others by equality."""
        allowed = filterable_fields(self.model)
        by_name = {json_name(f): (f, tp) for f, tp in self._fields}
        query = select(self.table)
        invalid = []
        for key, values in filters.items():
            if not ((GENERIC_FILTERING_ENABLED or key in allowed) and key in by_name):
                invalid.append(key)
                continue
            f, tp = by_name[key]
            column = self.table.c[f.name]
            value = values[0] if values else ""
            query = query.where(column.like(f"%{value}%") if tp is str else column == _coerce(tp, value))
        if invalid:
            raise InvalidFilterFieldError(invalid)
        with self.engine.connect() as conn:
            return [self._instance(row) for row in conn.execute(query)]

    def get(self, id):
        """The row with the given id; raises ``LookupError`` if there is none."""
        with self.engine.connect() as conn:
            row = conn.execute(select(self.table).where(self._key == _coerce(self._pk_type, id))).first()
        if row is None:
            raise LookupError("record not found")
        return self._instance(row)

    def create(self, input):
        """Insert an instance and return it with its assigned id."""
        values = {f.name: getattr(input, f.name) for f, _ in self._fields}
        if not values[self._pk.name]:
            del values[self._pk.name]
        with self.engine.begin() as conn:
            new_id = conn.execute(insert(self.table).values(**values)).inserted_primary_key[0]
        return dataclasses.replace(input, **{self._pk.name: new_id})

    def update(self, id, input):
        """Copy the non-empty fields of ``input`` onto the row with the given id."""
        existing = self.get(id)
        values = {
            f.name: getattr(input, f.name)
            for f, _ in self._fields
            if not _is_pk(f) and getattr(input, f.name)
        }
        if values:
            with self.engine.begin() as conn:
                conn.execute(update(self.table).where(self._key == getattr(existing, self._pk.name)).values(**values))
        return dataclasses.replace(existing, **values)

    def delete(self, id):
        """Delete the row with the given id, if any."""
        with self.engine.begin() as conn:
            conn.execute(delete(self.table).where(self._key == _coerce(self._pk_type, id)))