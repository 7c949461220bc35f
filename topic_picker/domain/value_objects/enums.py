"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class Channel(str, Enum):
    BANCA = "Banca"
    RETAIL = "Retail"


class Category(str, Enum):
    ROOKIE = "Rookie"
    VINTAGE = "Vintage"


class AssignmentStatus(str, Enum):
    CREATED = "created"
    EXISTING = "existing"
    RECOVERED = "recovered"


class StoreBackend(str, Enum):
    APPS_SCRIPT = "apps_script"
    SQL = "sql"
    MEMORY = "memory"


def plain_value(value: object) -> str:
    """Text of an enum member's value, or of any other object."""
    return str(value.value if isinstance(value, Enum) else value)
