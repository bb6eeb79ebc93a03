"""Archive Twitter statuses into relational tables."""

__version__ = "0.1.0"
