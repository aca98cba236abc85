from dishka import Provider, Scope, from_context, provide

from orderkit.config.settings import OrderingSettings
from orderkit.configs import LoggingSettings
from orderkit.core.enums import TargetIndexCapture


class OrderingConfigProvider(Provider):
    scope = Scope.APP
    config = from_context(OrderingSettings)

    @provide(scope=Scope.APP)
    def get_logging_config(self, config: OrderingSettings) -> LoggingSettings:
        return config.logging

    @provide(scope=Scope.APP)
    def get_target_index_capture(self, config: OrderingSettings) -> TargetIndexCapture:
        return config.TARGET_INDEX_CAPTURE
