"""Exception hierarchy for the topic picker."""


class TopicPickerError(Exception):
    """Base exception for application-specific failures."""


class ExhaustedPool(TopicPickerError):
    """No topic remains for the requested channel/category in a room."""

    def __init__(self, channel: str = "", category: str = "", room: int | None = None):
        self.channel = channel
        self.category = category
        self.room = room
        if room is None:
            message = "No topics left to draw from"
        else:
            message = f"All topics have been assigned for {channel} {category} in Room {room}"
        super().__init__(message)


class AssignmentFailed(TopicPickerError):
    """Append failed and the follow-up lookup found no record either."""


class StoreError(TopicPickerError):
    """Base class for failures reported by an assignment store."""


class StoreUnavailable(StoreError):
    """Transport-level failure or timeout talking to the store."""


class AppendConflict(StoreError):
    """The store rejected an append because it violates a uniqueness rule."""


class UnsupportedOperation(TopicPickerError):
    """The store cannot perform the requested administrative operation."""
