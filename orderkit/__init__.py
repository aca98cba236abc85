from orderkit.core.enums import ErrorKind, MoveAction, TargetIndexCapture
from orderkit.core.errors import InvalidPositionError, ItemNotFoundError, OrderingError
from orderkit.core.interface import Orderable
from orderkit.core.dto import MoveCommand
from orderkit.core.services.ordering import OrderingService

__all__ = [
    "ErrorKind",
    "InvalidPositionError",
    "ItemNotFoundError",
    "MoveAction",
    "MoveCommand",
    "Orderable",
    "OrderingError",
    "OrderingService",
    "TargetIndexCapture",
]
