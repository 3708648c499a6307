from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from luckydraw.schemas.enums.message_tag import MessageTag
    from luckydraw.services.reveal.session import RevealSession


class OnAddMessageCallback(Protocol):
    def __call__(self, tag: "MessageTag", message: str) -> None: ...


class OnRevealChangeCallback(Protocol):
    def __call__(self, session: "RevealSession") -> None: ...
