"""UI configuration constants."""

from enum import IntEnum


class LogLevel(IntEnum):
    """Log panel thresholds; a lower value shows more messages."""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    @classmethod
    def parse(cls, value: str) -> "LogLevel":
        """Map 'debug', 'info', 'warning' or 'error' to a level. Unknown names mean DEBUG."""
        return cls.__members__.get(value.upper(), cls.DEBUG)


# Chat display
USER_LABEL = "You"
ASSISTANT_LABEL = "Gemini"
TIMESTAMP_FORMAT = "%H:%M:%S"
