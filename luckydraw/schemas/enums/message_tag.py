from enum import Enum, unique


@unique
class MessageTag(Enum):
    # System messages
    DEFAULT = "#d1d5db"
    INFO = "#38bdf8"
    SUCCESS = "#22c55e"
    ERROR = "#ef4444"
    WARNING = "#f59e0b"

    # Reveal results
    PRIZE = "#fbbf24"
    CONSOLATION = "#a855f7"

    @property
    def title(self) -> str:
        if self == MessageTag.PRIZE:
            return "Congratulations!"

        if self == MessageTag.CONSOLATION:
            return "Better luck next time!"

        if self == MessageTag.ERROR:
            return "Error"

        if self == MessageTag.SUCCESS:
            return "Success"

        return self.name.title()

    @property
    def rich_style(self) -> str:
        return f"bold {self.value}" if self in (MessageTag.ERROR, MessageTag.PRIZE) else self.value
