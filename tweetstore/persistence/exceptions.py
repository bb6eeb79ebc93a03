"""
Exceptions for the persistence layer.
"""


class PersistenceError(Exception):
    """Base exception for persistence errors."""

    pass


class DriverError(PersistenceError):
    """Raised when the database dialect or its DBAPI module cannot be loaded."""

    def __init__(self, message: str, driver: str = ""):
        self.driver = driver
        super().__init__(message)
