from luckydraw.core.settings import settings
from luckydraw.infrastructure.logging import init_logger
from luckydraw.main.cli.factory import CLIFactory


def run_cli() -> None:
    init_logger(debug=settings.debug)

    cli_factory = CLIFactory()
    cli_app = cli_factory.make()
    cli_app()
