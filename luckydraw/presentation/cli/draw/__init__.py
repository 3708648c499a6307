from typing import Any, Dict, Optional, Sequence

import rich
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from luckydraw.schemas.enums.reveal_phase import RevealPhase
from luckydraw.schemas.prize import PrizeCatalog
from luckydraw.services.reveal.session import RevealSession
from luckydraw.utils.constants import OTHER_CHOICE


def ask(label: str, value: Optional[str], choices: Optional[Sequence[str]] = None, required: bool = True) -> str:
    if value is not None:
        return value

    if choices:
        return Prompt.ask(f"[cyan]{label}[/cyan]", choices=list(choices))

    if not required:
        return Prompt.ask(f"[cyan]{label}[/cyan] [dim](optional)[/dim]", default="")

    return Prompt.ask(f"[cyan]{label}[/cyan]")


def ask_other(label: str, choice: str, value: Optional[str]) -> Optional[str]:
    if choice != OTHER_CHOICE:
        return value

    return ask(label=label, value=value)


def catalog_table(catalog: PrizeCatalog, title: str) -> Table:
    table = Table(title=f"{title} ({len(catalog)} sectors)")
    table.add_column("#", style="cyan", justify="right")
    table.add_column("ID", style="magenta", justify="right")
    table.add_column("Prize", style="green")

    for index, prize in enumerate(catalog):
        name = f"[dim]{prize.name}[/dim]" if prize.is_sentinel else prize.name
        table.add_row(str(index), str(prize.id), name)

    return table


def render_phase(session: RevealSession) -> None:
    phase = session.phase

    if phase == RevealPhase.SPINNING:
        rich.print(
            f"🎡 [bold cyan]{phase.label}[/bold cyan] "
            f"[dim]{session.full_turns} turns, {session.rotation_angle:.1f}°[/dim]"
        )

    elif phase == RevealPhase.LANDED and session.stopped_at_entry is not None:
        rich.print(f"📍 [yellow]{phase.label}[/yellow] [bold]{session.stopped_at_entry.name}[/bold]")

    elif phase == RevealPhase.REVEALED and session.revealed_outcome is not None:
        outcome = session.revealed_outcome
        style = "green" if outcome.is_celebrated else "magenta"
        rich.print(Panel(outcome.message, title=outcome.headline, border_style=style, expand=False))

        if session.celebrate:
            rich.print("🎉 🎊 🎉 🎊 🎉")


def entry_fields(**values: Any) -> Dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}
