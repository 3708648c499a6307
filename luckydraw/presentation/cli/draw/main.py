import asyncio
from typing import Annotated, Optional

import rich
import typer
from pydantic import ValidationError
from rich.prompt import Prompt

from luckydraw.core.async_typer import AsyncTyper
from luckydraw.infrastructure.clients.backend import BackendClient
from luckydraw.presentation.cli import get_settings_from, print_message, print_validation_error, resolve
from luckydraw.presentation.cli.draw import ask, ask_other, catalog_table, entry_fields, render_phase
from luckydraw.schemas.submission import CustomerEntry
from luckydraw.services.entry_service import EntryService
from luckydraw.services.reveal.scheduler import AsyncioScheduler
from luckydraw.services.reveal.session import RevealSession
from luckydraw.utils.constants import CAMPAIGN_SOURCES, PROFESSIONS

draw_commands = AsyncTyper(
    name="draw",
    help="[yellow]Enter[/yellow] the lucky draw and spin the wheel",
)


async def make_service(ctx: typer.Context) -> EntryService:
    client = await resolve(ctx, BackendClient)
    return await EntryService(client=client, settings=get_settings_from(ctx), on_add_message=print_message)


@draw_commands.command()
async def gifts(ctx: typer.Context) -> None:
    """[green]Display[/green] the prize wheel of the current lucky draw."""
    service = await make_service(ctx)

    catalog = await service.load_catalog()
    if catalog is None:
        rich.print("❌ [bold red]Failed to fetch gift list[/bold red]")
        raise typer.Exit(1)

    rich.print(catalog_table(catalog=catalog, title=service.title))


@draw_commands.command()
async def enter(
    ctx: typer.Context,
    customer_name: Annotated[Optional[str], typer.Option("--name", help="Customer name")] = None,
    phone_number: Annotated[Optional[str], typer.Option("--phone", help="Contact number")] = None,
    email: Annotated[Optional[str], typer.Option(help="Email address")] = None,
    shop_name: Annotated[Optional[str], typer.Option("--shop", help="Shop name")] = None,
    sold_area: Annotated[Optional[str], typer.Option("--area", help="Sold area")] = None,
    region: Annotated[Optional[str], typer.Option(help="Region of the sold area")] = None,
    imei: Annotated[Optional[str], typer.Option(help="Phone IMEI")] = None,
    campaign_source: Annotated[Optional[str], typer.Option("--heard-from", help="How the customer heard of us")] = None,
    other_campaign_source: Annotated[Optional[str], typer.Option("--heard-from-other")] = None,
    profession: Annotated[Optional[str], typer.Option(help="Customer profession")] = None,
    other_profession: Annotated[Optional[str], typer.Option("--profession-other")] = None,
    auto_spin: Annotated[bool, typer.Option("--auto-spin", help="Spin without waiting for Enter")] = False,
) -> None:
    """[green]Submit[/green] a customer entry and reveal the prize on the wheel."""
    service = await make_service(ctx)
    rich.print(f"\n🎁 [bold cyan]{service.title}[/bold cyan]")
    rich.print("=" * 50)

    heard_from = ask("How did you know about this campaign?", campaign_source, choices=CAMPAIGN_SOURCES)
    chosen_profession = ask("Profession", profession, choices=PROFESSIONS)

    try:
        entry = CustomerEntry.model_validate(
            entry_fields(
                customer_name=ask("Customer name", customer_name),
                phone_number=ask("Contact number", phone_number),
                email=ask("Email", email, required=False),
                shop_name=ask("Shop name", shop_name),
                sold_area=ask("Sold area", sold_area),
                region=ask("Region", region, required=False),
                imei=ask("IMEI", imei),
                how_know_about_campaign=heard_from,
                other_campaign_source=ask_other("Please specify", heard_from, other_campaign_source),
                profession=chosen_profession,
                other_profession=ask_other("Please specify your profession", chosen_profession, other_profession),
            )
        )

    except ValidationError as error:
        print_validation_error(error)
        raise typer.Exit(1)

    submission = await service.submit(entry=entry)
    if submission is None:
        rich.print("❌ [bold red]Entry was not submitted[/bold red]")
        raise typer.Exit(1)

    rich.print(catalog_table(catalog=submission.catalog, title="Prize wheel"))
    if not auto_spin:
        Prompt.ask("[bold]Press Enter to spin the wheel[/bold]", default="", show_default=False)

    finished = asyncio.Event()

    def on_change(session: RevealSession) -> None:
        render_phase(session=session)

        if session.phase.is_terminal and not session.celebrate:
            finished.set()

    session = service.start_reveal(submission=submission, scheduler=AsyncioScheduler(), listener=on_change)
    try:
        session.spin()
        await finished.wait()

        if session.revealed_outcome is not None:
            service.announce(outcome=session.revealed_outcome)

    finally:
        session.dispose()
