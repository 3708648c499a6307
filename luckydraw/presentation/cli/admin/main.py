from datetime import datetime
from pathlib import Path
from typing import Annotated, NoReturn, Optional

import rich
import typer
from pydantic import ValidationError

from luckydraw.core.async_typer import AsyncTyper
from luckydraw.infrastructure.clients.admin import AdminClient
from luckydraw.presentation.cli import get_settings_from, print_message, print_validation_error, resolve
from luckydraw.presentation.cli.admin import gifts_table, lucky_draw_details, lucky_draws_table, offers_table
from luckydraw.schemas.enums.offer_type import OfferCondition, OfferKind
from luckydraw.schemas.lucky_draw import LuckyDrawUpdate
from luckydraw.schemas.offer import OfferForm

admin_commands = AsyncTyper(
    name="admin",
    help="[yellow]Manage[/yellow] lucky draws, gifts, offers and IMEI lists",
)

DATE_FORMATS = ["%Y-%m-%d"]


async def get_admin(ctx: typer.Context) -> AdminClient:
    if not get_settings_from(ctx).backend.access_token:
        rich.print("❌ [bold red]Missing admin token (LUCKYDRAW_BACKEND__ACCESS_TOKEN)[/bold red]")
        raise typer.Exit(1)

    client = await resolve(ctx, AdminClient)
    client.set_message_callback(on_add_message=print_message)
    return client


def fail(message: str) -> NoReturn:
    rich.print(f"❌ [bold red]{message}[/bold red]")
    raise typer.Exit(1)


def as_date(value: Optional[datetime]) -> Optional[str]:
    return value.date().isoformat() if value is not None else None


# Lucky draws
@admin_commands.command()
async def draws(ctx: typer.Context) -> None:
    """[green]List[/green] lucky draw systems."""
    client = await get_admin(ctx)

    page = await client.list_lucky_draws()
    if page is None:
        fail("Failed to fetch lucky draws")

    rich.print(lucky_draws_table(lucky_draws=page.results, total=page.count))
    if page.has_next:
        rich.print("[dim]More lucky draws are available on the next page.[/dim]")


@admin_commands.command()
async def draw(
    ctx: typer.Context,
    lucky_draw_id: Annotated[int, typer.Argument(help="Lucky draw ID")],
) -> None:
    """[green]Display[/green] one lucky draw."""
    client = await get_admin(ctx)

    lucky_draw = await client.get_lucky_draw(lucky_draw_id=lucky_draw_id)
    if lucky_draw is None:
        fail(f"Failed to fetch lucky draw {lucky_draw_id}")

    rich.print(lucky_draw_details(lucky_draw=lucky_draw))


@admin_commands.command(name="update-draw")
async def update_draw(
    ctx: typer.Context,
    lucky_draw_id: Annotated[int, typer.Argument(help="Lucky draw ID")],
    name: Annotated[Optional[str], typer.Option(help="Lucky draw name")] = None,
    type: Annotated[Optional[str], typer.Option(help="Lucky draw type")] = None,
    start_date: Annotated[Optional[datetime], typer.Option(formats=DATE_FORMATS)] = None,
    end_date: Annotated[Optional[datetime], typer.Option(formats=DATE_FORMATS)] = None,
    description: Annotated[Optional[str], typer.Option()] = None,
    how_to_participate: Annotated[Optional[str], typer.Option()] = None,
    redeem_condition: Annotated[Optional[str], typer.Option()] = None,
    terms_and_conditions: Annotated[Optional[str], typer.Option("--terms")] = None,
) -> None:
    """[green]Update[/green] the text fields of a lucky draw."""
    try:
        update = LuckyDrawUpdate(
            name=name,
            type=type,
            start_date=as_date(start_date),
            end_date=as_date(end_date),
            description=description,
            how_to_participate=how_to_participate,
            redeem_condition=redeem_condition,
            terms_and_conditions=terms_and_conditions,
        )

    except ValidationError as error:
        print_validation_error(error)
        raise typer.Exit(1)

    client = await get_admin(ctx)
    lucky_draw = await client.update_lucky_draw(lucky_draw_id=lucky_draw_id, update=update)
    if lucky_draw is None:
        raise typer.Exit(1)

    rich.print(lucky_draw_details(lucky_draw=lucky_draw))


# Gift items
@admin_commands.command()
async def gifts(
    ctx: typer.Context,
    lucky_draw_id: Annotated[int, typer.Argument(help="Lucky draw ID")],
) -> None:
    """[green]List[/green] gift items of a lucky draw."""
    client = await get_admin(ctx)

    page = await client.list_gift_items(lucky_draw_id=lucky_draw_id)
    if page is None:
        fail("Failed to fetch gift items")

    rich.print(gifts_table(gifts=page.results, total=page.count))


@admin_commands.command(name="add-gift")
async def add_gift(
    ctx: typer.Context,
    lucky_draw_id: Annotated[int, typer.Argument(help="Lucky draw ID")],
    name: Annotated[str, typer.Argument(help="Gift item name")],
) -> None:
    """[green]Add[/green] a gift item to a lucky draw."""
    client = await get_admin(ctx)

    gift = await client.add_gift_item(lucky_draw_id=lucky_draw_id, name=name)
    if gift is None:
        raise typer.Exit(1)

    rich.print(gifts_table(gifts=[gift], total=1))


@admin_commands.command(name="delete-gift")
async def delete_gift(
    ctx: typer.Context,
    gift_id: Annotated[int, typer.Argument(help="Gift item ID")],
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Do not ask for confirmation")] = False,
) -> None:
    """[red]Delete[/red] a gift item."""
    if not yes:
        typer.confirm(f"Delete gift item {gift_id}?", abort=True)

    client = await get_admin(ctx)
    if not await client.delete_gift_item(gift_id=gift_id):
        raise typer.Exit(1)


# Offers
@admin_commands.command()
async def offers(
    ctx: typer.Context,
    lucky_draw_id: Annotated[int, typer.Argument(help="Lucky draw ID")],
    kind: Annotated[Optional[OfferKind], typer.Option(help="Only list one offer type")] = None,
) -> None:
    """[green]List[/green] mobile phone and recharge card offers."""
    client = await get_admin(ctx)

    if kind is not None:
        page = await client.list_offers(lucky_draw_id=lucky_draw_id, kind=kind)
        if page is None:
            fail("Failed to fetch offers")

        rich.print(offers_table(offers=page.results, total=page.count))
        return

    all_offers = await client.list_all_offers(lucky_draw_id=lucky_draw_id)
    if all_offers is None:
        fail("Failed to fetch offers")

    rich.print(offers_table(offers=all_offers))


@admin_commands.command(name="add-offer")
async def add_offer(
    ctx: typer.Context,
    lucky_draw_id: Annotated[int, typer.Argument(help="Lucky draw ID")],
    start_date: Annotated[datetime, typer.Option(formats=DATE_FORMATS)],
    end_date: Annotated[datetime, typer.Option(formats=DATE_FORMATS)],
    daily_quantity: Annotated[int, typer.Option(help="Offers handed out per day")],
    value: Annotated[str, typer.Option("--value", help="Sale interval, or comma separated sale positions")],
    kind: Annotated[OfferKind, typer.Option(help="Offer type")] = OfferKind.MOBILE,
    at_position: Annotated[
        bool,
        typer.Option("--at-position", help="Value lists sale positions instead of an interval"),
    ] = False,
    gift: Annotated[Optional[int], typer.Option(help="Gift item ID (mobile offers)")] = None,
    amount: Annotated[Optional[float], typer.Option(help="Recharge amount")] = None,
    provider: Annotated[Optional[str], typer.Option(help="Recharge provider")] = None,
) -> None:
    """[green]Add[/green] an offer to a lucky draw."""
    try:
        form = OfferForm(
            type=kind,
            start_date=start_date.date(),
            end_date=end_date.date(),
            daily_quantity=daily_quantity,
            type_of_offer=OfferCondition.AT_SALE_POSITION if at_position else OfferCondition.EVERY_CERTAIN_SALE,
            offer_condition_value=value,
            gift=gift,
            amount=amount,
            provider=provider,
        )

    except ValidationError as error:
        print_validation_error(error)
        raise typer.Exit(1)

    client = await get_admin(ctx)
    offer = await client.add_offer(lucky_draw_id=lucky_draw_id, form=form)
    if offer is None:
        raise typer.Exit(1)

    rich.print(offers_table(offers=[offer.model_copy(update={"type": offer.type or kind})]))


@admin_commands.command(name="delete-offer")
async def delete_offer(
    ctx: typer.Context,
    offer_id: Annotated[int, typer.Argument(help="Offer ID")],
    kind: Annotated[OfferKind, typer.Option(help="Offer type")] = OfferKind.MOBILE,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Do not ask for confirmation")] = False,
) -> None:
    """[red]Delete[/red] an offer."""
    if not yes:
        typer.confirm(f"Delete {kind.value} offer {offer_id}?", abort=True)

    client = await get_admin(ctx)
    if not await client.delete_offer(offer_id=offer_id, kind=kind):
        raise typer.Exit(1)


# IMEI allow-list
@admin_commands.command(name="upload-imei")
async def upload_imei(
    ctx: typer.Context,
    lucky_draw_id: Annotated[int, typer.Argument(help="Lucky draw ID")],
    file: Annotated[Path, typer.Argument(help="CSV file with IMEI numbers", exists=True, dir_okay=False)],
) -> None:
    """[green]Upload[/green] the IMEI allow-list of a lucky draw."""
    client = await get_admin(ctx)

    result = await client.upload_imei(lucky_draw_id=lucky_draw_id, file_path=file)
    if result is None:
        raise typer.Exit(1)

    if result.uploaded is not None:
        rich.print(f"📊 [cyan]Uploaded IMEI numbers: {result.uploaded}[/cyan]")
