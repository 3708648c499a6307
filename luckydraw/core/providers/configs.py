from dishka import Provider, Scope, provide

from luckydraw.core.settings import BackendConfig, RevealTimings, Settings


class ConfigsProvider(Provider):
    def __init__(self, settings: Settings) -> None:
        super().__init__()
        self._settings = settings

    @provide(scope=Scope.APP)
    def settings(self) -> Settings:
        return self._settings

    @provide(scope=Scope.APP)
    def backend_config(self, settings: Settings) -> BackendConfig:
        return settings.backend

    @provide(scope=Scope.APP)
    def reveal_timings(self, settings: Settings) -> RevealTimings:
        return settings.reveal
