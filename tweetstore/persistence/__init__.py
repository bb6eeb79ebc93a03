"""Persistence layer -- relational status archive via SQLAlchemy Core."""

from .database import ROW_COUNT_FAILED, StatusDatabase
from .exceptions import DriverError, PersistenceError
from .models import StatusRecord
from .tables import STATUS_COLUMNS, status_table

__all__ = [
    "DriverError",
    "PersistenceError",
    "ROW_COUNT_FAILED",
    "STATUS_COLUMNS",
    "StatusDatabase",
    "StatusRecord",
    "status_table",
]
