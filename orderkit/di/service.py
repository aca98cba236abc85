from dishka import Provider, Scope, provide

from orderkit.core.enums import TargetIndexCapture
from orderkit.core.services.ordering import OrderingService


class ServiceProvider(Provider):
    @provide(scope=Scope.APP)
    def get_ordering_service(self, capture: TargetIndexCapture) -> OrderingService:
        return OrderingService(capture=capture)
