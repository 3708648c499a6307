from typing import Iterable, Optional

from rich.table import Table

from luckydraw.schemas.lucky_draw import LuckyDraw
from luckydraw.schemas.offer import Offer
from luckydraw.schemas.prize import Prize


def lucky_draws_table(lucky_draws: Iterable[LuckyDraw], total: int) -> Table:
    table = Table(title=f"Lucky Draws ({total})")
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Name", style="green")
    table.add_column("Type", style="magenta")
    table.add_column("Start")
    table.add_column("End")

    for lucky_draw in lucky_draws:
        table.add_row(
            str(lucky_draw.id),
            lucky_draw.name,
            lucky_draw.type,
            lucky_draw.start_date or "-",
            lucky_draw.end_date or "-",
        )

    return table


def lucky_draw_details(lucky_draw: LuckyDraw) -> Table:
    table = Table(title=f"Lucky Draw #{lucky_draw.id}", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value", overflow="fold")

    for field, value in lucky_draw.model_dump(exclude={"id"}).items():
        table.add_row(field.replace("_", " ").title(), str(value) if value not in (None, "") else "[dim]-[/dim]")

    return table


def gifts_table(gifts: Iterable[Prize], total: int) -> Table:
    table = Table(title=f"Gift Items ({total})")
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Name", style="green")
    table.add_column("Image", style="dim", overflow="fold")

    for gift in gifts:
        table.add_row(str(gift.id), gift.name, gift.image_ref or "-")

    return table


def offers_table(offers: Iterable[Offer], total: Optional[int] = None) -> Table:
    offers = list(offers)
    table = Table(title=f"Offers ({total if total is not None else len(offers)})")
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Type", style="magenta")
    table.add_column("Period")
    table.add_column("Daily", justify="right")
    table.add_column("Condition")
    table.add_column("Value")
    table.add_column("Reward", style="green")

    for offer in offers:
        table.add_row(
            str(offer.id),
            offer.type.value if offer.type else "-",
            f"{offer.start_date or '?'} → {offer.end_date or '?'}",
            str(offer.daily_quantity),
            offer.type_of_offer,
            offer.offer_condition_value,
            offer.reward_label,
        )

    return table
