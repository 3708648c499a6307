from dishka import Provider, Scope, provide

from luckydraw.core.settings import BackendConfig
from luckydraw.infrastructure.clients.admin import AdminClient
from luckydraw.infrastructure.clients.backend import BackendClient


class ClientsProvider(Provider):
    @provide(scope=Scope.APP)
    def backend_client(self, config: BackendConfig) -> BackendClient:
        return BackendClient(config=config)

    @provide(scope=Scope.APP)
    def admin_client(self, config: BackendConfig) -> AdminClient:
        return AdminClient(config=config)
