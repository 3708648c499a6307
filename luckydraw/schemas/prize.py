from typing import Any, Iterable, Iterator, List, Optional, Sequence, Tuple, overload

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from luckydraw.utils.constants import SENTINEL_PRIZE_ID, SENTINEL_PRIZE_IMAGE, SENTINEL_PRIZE_NAME

IMAGE_ALIASES = ("image", "image_ref", "imageRef")
GROUP_ALIASES = ("lucky_draw_system", "group_id", "groupId")


class Prize(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: int
    name: str = ""
    image_ref: str = Field(default="", validation_alias=AliasChoices(*IMAGE_ALIASES))
    group_id: Optional[int] = Field(default=None, validation_alias=AliasChoices(*GROUP_ALIASES))

    @field_validator("name", "image_ref", mode="before")
    @classmethod
    def null_to_empty(cls, value: Any) -> Any:
        # gift items created without a picture come back with "image": null
        return "" if value is None else value

    @property
    def is_sentinel(self) -> bool:
        return self.id == SENTINEL_PRIZE_ID

    @classmethod
    def sentinel(cls, group_id: Optional[int] = None) -> "Prize":
        return cls(id=SENTINEL_PRIZE_ID, name=SENTINEL_PRIZE_NAME, image_ref=SENTINEL_PRIZE_IMAGE, group_id=group_id)


class PrizeCatalog(Sequence[Prize]):
    """Ordered wheel entries. Index 0 is always the "no win" sentinel.

    The order fixes both where each sector is drawn and the index used by the
    rotation math, so a catalog never changes once built.
    """

    def __init__(self, prizes: Iterable[Prize]) -> None:
        entries: Tuple[Prize, ...] = tuple(prizes)

        if not entries:
            msg = "Prize catalog must contain at least the sentinel entry"
            raise ValueError(msg)

        if not entries[0].is_sentinel:
            msg = f"Prize catalog must start with the sentinel entry (id={SENTINEL_PRIZE_ID}), got id={entries[0].id}"
            raise ValueError(msg)

        self._prizes = entries

    @classmethod
    def from_gift_list(cls, gifts: Iterable[Prize | dict[str, Any]], group_id: Optional[int] = None) -> "PrizeCatalog":
        prizes: List[Prize] = [Prize.sentinel(group_id=group_id)]

        for gift in gifts:
            prize = gift if isinstance(gift, Prize) else Prize.model_validate(gift)
            if prize.is_sentinel:
                continue

            prizes.append(prize)

        return cls(prizes)

    @property
    def sentinel(self) -> Prize:
        return self._prizes[0]

    def index_of(self, prize_id: int) -> Optional[int]:
        for index, prize in enumerate(self._prizes):
            if prize.id == prize_id:
                return index

        return None

    @overload
    def __getitem__(self, index: int) -> Prize: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[Prize, ...]: ...

    def __getitem__(self, index: int | slice) -> Prize | Tuple[Prize, ...]:
        return self._prizes[index]

    def __len__(self) -> int:
        return len(self._prizes)

    def __iter__(self) -> Iterator[Prize]:
        return iter(self._prizes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrizeCatalog):
            return NotImplemented

        return self._prizes == other._prizes

    def __hash__(self) -> int:
        return hash(self._prizes)

    def __repr__(self) -> str:
        names = ", ".join(f"{p.id}:{p.name}" for p in self._prizes)
        return f"PrizeCatalog([{names}])"
