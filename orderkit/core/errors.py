from orderkit.core.enums import ErrorKind


class OrderingError(Exception):
    """Base error for reorder operations.

    Callers that only care about the failure category can compare ``kind``
    instead of catching the concrete subclasses.
    """

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ItemNotFoundError(OrderingError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, item_id: str) -> None:
        super().__init__(f"item not found: {item_id!r}")
        self.item_id = item_id


class InvalidPositionError(OrderingError):
    kind = ErrorKind.INVALID_POSITION

    def __init__(self, position: int, length: int) -> None:
        if length:
            message = f"invalid position {position}: must be between 1 and {length}"
        else:
            message = f"invalid position {position}: sequence is empty"
        super().__init__(message)
        self.position = position
        self.length = length
