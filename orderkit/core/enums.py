import enum


class ErrorKind(str, enum.Enum):
    NOT_FOUND = "NOT_FOUND"
    INVALID_POSITION = "INVALID_POSITION"


class MoveAction(str, enum.Enum):
    """Reorder primitives that can be requested through a MoveCommand"""

    UP = "UP"
    DOWN = "DOWN"
    TO = "TO"
    TOP = "TOP"
    BOTTOM = "BOTTOM"
    ABOVE = "ABOVE"
    BELOW = "BELOW"


class TargetIndexCapture(str, enum.Enum):
    """When the anchor index is read for above/below moves"""

    # Anchor index as it is once the moved item is taken out
    AFTER_REMOVAL = "AFTER_REMOVAL"
    # Anchor index as it is at call time
    BEFORE_REMOVAL = "BEFORE_REMOVAL"
