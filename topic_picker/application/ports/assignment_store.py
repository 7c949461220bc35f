"""Port interface for assignment persistence.

Only ``fetch_all`` and ``append`` are mandatory. Filtered queries, deletion
and clearing are optional capabilities: a store that lacks them keeps the
default implementations, which raise ``UnsupportedOperation`` instead of
silently doing nothing.
"""

from abc import ABC, abstractmethod

from topic_picker.domain.entities.assignment import Assignment
from topic_picker.domain.errors import UnsupportedOperation

MANUAL_CLEANUP_NOTICE = (
    "This store does not support deleting records. "
    "Please delete the rows manually in the backing sheet."
)


class AssignmentStore(ABC):
    @abstractmethod
    async def fetch_all(self) -> list[Assignment]:
        """Return every stored assignment.

        Raises StoreUnavailable on transport failure or timeout.
        """
        ...

    @abstractmethod
    async def append(self, assignment: Assignment) -> str:
        """Persist a new record and return its id.

        Raises StoreUnavailable when the outcome is unknown and
        AppendConflict when the store rejected the record.
        """
        ...

    async def query_equal(self, field: str, value: str) -> list[Assignment]:
        """Server-side equality filter on a single field."""
        raise UnsupportedOperation(f"{type(self).__name__} has no server-side filtering")

    async def delete(self, record_id: str) -> None:
        raise UnsupportedOperation(MANUAL_CLEANUP_NOTICE)

    async def clear(self) -> None:
        raise UnsupportedOperation(MANUAL_CLEANUP_NOTICE)
