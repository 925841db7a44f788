from __future__ import annotations

import datetime
import uuid
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional

import numpy as np

from sqlitedb.errors import UnsupportedTypeError

PARAMETER_MARKER = "@"

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


class DbType(str, Enum):
    INT32 = "Int32"
    INT64 = "Int64"
    STRING = "String"
    BOOLEAN = "Boolean"
    DECIMAL = "Decimal"
    DOUBLE = "Double"


@dataclass(frozen=True)
class SqliteParameter:
    """A named value with the database type it is declared as."""

    name: str
    value: Any
    db_type: DbType

    @property
    def key(self) -> str:
        """Name as ``sqlite3`` looks it up in a parameter mapping."""
        return self.name[1:]


def _unique_name(value: Any) -> str:
    suffix = str(uuid.uuid4())[-4:]
    return f"{type(value).__name__}{suffix}"


def to_sqlite_parameter(value: Any, name: str = "") -> Optional[SqliteParameter]:
    """Build a :class:`SqliteParameter` for ``value``.

    ``None`` yields ``None``. When ``name`` is blank a unique one is generated
    from the value's type name. The ``@`` marker is prepended if missing.

    Only the types below are mapped; anything else raises
    :class:`UnsupportedTypeError`:

    - ``bool`` -> ``Boolean``
    - ``int`` / ``numpy.integer`` -> ``Int32`` (``Int64`` outside 32 bits)
    - ``str`` -> ``String`` (stripped)
    - ``datetime.datetime`` / ``datetime.date`` -> ``String`` via ``str()``
    - ``decimal.Decimal`` -> ``Decimal``
    - ``float`` / ``numpy.floating`` -> ``Double``
    """
    if value is None:
        return None

    if name is None or not name.strip():
        name = _unique_name(value)
    name = name.strip()
    if not name.startswith(PARAMETER_MARKER):
        name = f"{PARAMETER_MARKER}{name}"

    # bool before int: bool is an int subclass
    if isinstance(value, (bool, np.bool_)):
        return SqliteParameter(name, bool(value), DbType.BOOLEAN)
    if isinstance(value, (int, np.integer)):
        num = int(value)
        db_type = DbType.INT32 if _INT32_MIN <= num <= _INT32_MAX else DbType.INT64
        return SqliteParameter(name, num, db_type)
    if isinstance(value, str):
        return SqliteParameter(name, value.strip(), DbType.STRING)
    if isinstance(value, (datetime.datetime, datetime.date)):
        return SqliteParameter(name, str(value), DbType.STRING)
    if isinstance(value, Decimal):
        return SqliteParameter(name, value, DbType.DECIMAL)
    if isinstance(value, (float, np.floating)):
        return SqliteParameter(name, float(value), DbType.DOUBLE)

    raise UnsupportedTypeError(f"Unsupported type: {type(value).__name__}")


def as_mapping(*params: Optional[SqliteParameter]) -> Dict[str, Any]:
    """Return ``params`` as a mapping accepted by ``sqlite3`` execute calls.

    ``None`` entries are skipped. ``Decimal`` values are bound as text so no
    precision is lost.
    """
    out: Dict[str, Any] = {}
    for param in params:
        if param is None:
            continue
        value = param.value
        if param.db_type is DbType.DECIMAL:
            value = str(value)
        out[param.key] = value
    return out
