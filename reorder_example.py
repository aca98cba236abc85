import dataclasses
import logging

from dishka import make_container

from orderkit.config.settings import OrderingSettings
from orderkit.core.dto import MoveCommand
from orderkit.core.enums import MoveAction
from orderkit.core.errors import OrderingError
from orderkit.core.services.ordering import OrderingService
from orderkit.di.config import OrderingConfigProvider
from orderkit.di.service import ServiceProvider
from orderkit.logger import init_logging

logger = logging.getLogger(__name__)


@dataclasses.dataclass
class Track:
    id: str
    title: str
    position: int = 0


def print_playlist(tracks: list[Track]) -> None:
    for track in tracks:
        print(f"  {track.position}. {track.title}")
    print("-" * 30)


def main():
    settings = OrderingSettings()
    init_logging(settings.logging)

    container = make_container(
        OrderingConfigProvider(),
        ServiceProvider(),
        context={OrderingSettings: settings},
    )
    service = container.get(OrderingService)

    tracks = [Track(id=f"t{i}", title=title) for i, title in enumerate(["Intro", "Verse", "Chorus", "Bridge", "Outro"])]
    service.normalize_positions(tracks)
    print(f"Capture strategy: {service.capture.value}")
    print_playlist(tracks)

    commands = [
        MoveCommand(action=MoveAction.TOP, item_id="t2"),
        MoveCommand(action=MoveAction.BELOW, item_id="t0", target_id="t4"),
        MoveCommand(action=MoveAction.TO, item_id="t3", position=2),
        MoveCommand(action=MoveAction.TO, item_id="t1", position=9),
    ]
    for command in commands:
        print(f"{command.action.value} {command.item_id}")
        try:
            service.apply(tracks, command)
        except OrderingError as e:
            logger.warning(f"Skipping {command.action.value} for {command.item_id}: {e.message}")
            continue
        print_playlist(tracks)

    container.close()


if __name__ == "__main__":
    main()
