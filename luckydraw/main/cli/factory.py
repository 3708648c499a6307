import typer

from luckydraw.core.async_typer import AsyncTyper
from luckydraw.core.providers.factory import make_container
from luckydraw.core.settings import settings
from luckydraw.main.ui.app import run_ui
from luckydraw.presentation.cli.admin.main import admin_commands
from luckydraw.presentation.cli.draw.main import draw_commands


class CLIFactory:
    def make(self) -> typer.Typer:
        container = make_container(settings)

        cli_app = AsyncTyper(
            rich_markup_mode="rich",
            context_settings={
                "obj": {
                    "container": container,
                    "settings": settings,
                },
            },
        )

        # Add a callback to prevent single command from being treated as default
        @cli_app.callback()
        def main_callback() -> None:
            """Lucky Draw CLI"""

        self.add_ui_command(app=cli_app)
        self.add_app_commands(app=cli_app)

        return cli_app

    def add_ui_command(self, app: AsyncTyper) -> None:
        @app.command(name="ui")
        def ui_command(ctx: typer.Context) -> None:
            """[green]Run[/green] the desktop entry form and prize wheel."""
            ctx_container = ctx.obj["container"]
            ctx_settings = ctx.obj["settings"]
            run_ui(container=ctx_container, settings=ctx_settings)

    def add_app_commands(self, app: AsyncTyper) -> None:
        app.add_typer(draw_commands, name="draw")
        app.add_typer(admin_commands, name="admin")
