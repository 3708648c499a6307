from dishka import AsyncContainer, make_async_container

from luckydraw.core.providers.clients import ClientsProvider
from luckydraw.core.providers.configs import ConfigsProvider
from luckydraw.core.settings import Settings


def make_container(settings: Settings) -> AsyncContainer:
    container = make_async_container(ConfigsProvider(settings=settings), ClientsProvider())

    return container
