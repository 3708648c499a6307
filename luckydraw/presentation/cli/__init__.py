from typing import Type, TypeVar

import rich
import typer
from dishka import AsyncContainer
from pydantic import ValidationError

from luckydraw.core.settings import Settings
from luckydraw.schemas.enums.message_tag import MessageTag

T = TypeVar("T")


def print_message(tag: MessageTag, message: str) -> None:
    rich.print(f"[{tag.rich_style}]{tag.title}:[/] {message}")


def print_validation_error(error: ValidationError) -> None:
    rich.print("❌ [bold red]Please fix the following fields:[/bold red]")
    for item in error.errors():
        field = ".".join(str(part) for part in item["loc"]) or "form"
        message = str(item["msg"]).removeprefix("Value error, ")
        rich.print(f"  • [yellow]{field}[/yellow]: {message}")


def get_settings_from(ctx: typer.Context) -> Settings:
    return ctx.obj["settings"]


async def resolve(ctx: typer.Context, dependency: Type[T]) -> T:
    container: AsyncContainer = ctx.obj["container"]
    return await container.get(dependency)
