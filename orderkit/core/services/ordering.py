import logging
from collections.abc import MutableSequence, Sequence

from orderkit.config.settings import OrderingSettings
from orderkit.core.dto import MoveCommand
from orderkit.core.enums import MoveAction, TargetIndexCapture
from orderkit.core.errors import InvalidPositionError, ItemNotFoundError
from orderkit.core.interface import Orderable, T

logger = logging.getLogger(__name__)


class OrderingService:
    """Reorders caller-owned sequences of Orderable items in place.

    Every mutating method validates its arguments before the first write, so a
    raised OrderingError leaves both the order and the positions untouched. On
    success the sequence is renormalized: ``items[i].position == i + 1``.
    The service keeps no state between calls; callers synchronize access to a
    shared sequence themselves.
    """

    def __init__(self, capture: TargetIndexCapture = TargetIndexCapture.AFTER_REMOVAL) -> None:
        self._capture = capture

    @classmethod
    def from_settings(cls, settings: OrderingSettings) -> "OrderingService":
        return cls(capture=settings.TARGET_INDEX_CAPTURE)

    @property
    def capture(self) -> TargetIndexCapture:
        return self._capture

    def find_index(self, items: Sequence[Orderable], item_id: str) -> int:
        for index, item in enumerate(items):
            if item.id == item_id:
                return index
        raise ItemNotFoundError(item_id)

    def normalize_positions(self, items: Sequence[Orderable]) -> None:
        for index, item in enumerate(items):
            item.position = index + 1

    def is_normalized(self, items: Sequence[Orderable]) -> bool:
        return all(item.position == index + 1 for index, item in enumerate(items))

    def move_up(self, items: MutableSequence[T], item_id: str) -> None:
        index = self.find_index(items, item_id)
        if index == 0:
            return
        items[index - 1], items[index] = items[index], items[index - 1]
        self.normalize_positions(items)
        logger.debug(f"Moved {item_id} up to position {index}")

    def move_down(self, items: MutableSequence[T], item_id: str) -> None:
        index = self.find_index(items, item_id)
        if index == len(items) - 1:
            return
        items[index + 1], items[index] = items[index], items[index + 1]
        self.normalize_positions(items)
        logger.debug(f"Moved {item_id} down to position {index + 2}")

    def move_to(self, items: MutableSequence[T], item_id: str, position: int) -> None:
        """Move the item to a 1-based position, keeping the others in their relative order."""
        if not 1 <= position <= len(items):
            raise InvalidPositionError(position, len(items))
        index = self.find_index(items, item_id)
        self._relocate(items, index, position - 1)
        logger.debug(f"Moved {item_id} from position {index + 1} to {position}")

    def move_to_top(self, items: MutableSequence[T], item_id: str) -> None:
        self.move_to(items, item_id, 1)

    def move_to_bottom(self, items: MutableSequence[T], item_id: str) -> None:
        self.move_to(items, item_id, len(items))

    def move_above(self, items: MutableSequence[T], item_id: str, target_id: str) -> None:
        """Place the item directly before the target item."""
        self._move_next_to(items, item_id, target_id, offset=0)

    def move_below(self, items: MutableSequence[T], item_id: str, target_id: str) -> None:
        """Place the item directly after the target item."""
        self._move_next_to(items, item_id, target_id, offset=1)

    def apply(self, items: MutableSequence[T], command: MoveCommand) -> None:
        action = command.action
        if action == MoveAction.UP:
            self.move_up(items, command.item_id)
        elif action == MoveAction.DOWN:
            self.move_down(items, command.item_id)
        elif action == MoveAction.TO:
            self.move_to(items, command.item_id, command.position)
        elif action == MoveAction.TOP:
            self.move_to_top(items, command.item_id)
        elif action == MoveAction.BOTTOM:
            self.move_to_bottom(items, command.item_id)
        elif action == MoveAction.ABOVE:
            self.move_above(items, command.item_id, command.target_id)
        elif action == MoveAction.BELOW:
            self.move_below(items, command.item_id, command.target_id)

    def _move_next_to(self, items: MutableSequence[T], item_id: str, target_id: str, offset: int) -> None:
        target_index = self.find_index(items, target_id)

        if self._capture == TargetIndexCapture.BEFORE_REMOVAL:
            # Literal arithmetic on the call-time index; may fall outside [1, len]
            self.move_to(items, item_id, target_index + 1 + offset)
            return

        index = self.find_index(items, item_id)
        if index == target_index:
            self.normalize_positions(items)
            return
        if index < target_index:
            target_index -= 1
        self._relocate(items, index, target_index + offset)
        logger.debug(f"Moved {item_id} to position {target_index + offset + 1} next to {target_id}")

    def _relocate(self, items: MutableSequence[T], index: int, insert_index: int) -> None:
        item = items.pop(index)
        items.insert(insert_index, item)
        self.normalize_positions(items)
