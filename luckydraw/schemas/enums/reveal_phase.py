from enum import Enum, unique


@unique
class RevealPhase(Enum):
    IDLE = "idle"
    SPINNING = "spinning"
    LANDED = "landed"
    REVEALED = "revealed"

    @property
    def is_terminal(self) -> bool:
        return self == RevealPhase.REVEALED

    @property
    def next_phase(self) -> "RevealPhase | None":
        order = list(RevealPhase)
        position = order.index(self)
        return order[position + 1] if position + 1 < len(order) else None

    @property
    def label(self) -> str:
        if self == RevealPhase.IDLE:
            return "Spin the Wheel"

        if self == RevealPhase.SPINNING:
            return "Spinning..."

        if self == RevealPhase.LANDED:
            return "The wheel stopped at..."

        return "Result"
