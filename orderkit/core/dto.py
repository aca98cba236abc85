from pydantic import BaseModel, Field, model_validator

from orderkit.core.enums import MoveAction

_ANCHORED_ACTIONS = (MoveAction.ABOVE, MoveAction.BELOW)


class MoveCommand(BaseModel):
    """A single reorder request, as received from a caller or a queue.

    Attributes:
        action: Which move to perform
        item_id: Identifier of the item being moved
        position: 1-based destination, only for ``TO``
        target_id: Identifier of the anchor item, only for ``ABOVE`` and ``BELOW``
    """

    action: MoveAction
    item_id: str = Field(..., min_length=1)
    position: int | None = None
    target_id: str | None = Field(default=None, min_length=1)

    @model_validator(mode="after")
    def check_arguments(self) -> "MoveCommand":
        if self.action == MoveAction.TO:
            if self.position is None:
                raise ValueError(f"position is required for action {self.action.value}")
        elif self.position is not None:
            raise ValueError(f"position must be None for action {self.action.value}")

        if self.action in _ANCHORED_ACTIONS:
            if self.target_id is None:
                raise ValueError(f"target_id is required for action {self.action.value}")
        elif self.target_id is not None:
            raise ValueError(f"target_id must be None for action {self.action.value}")

        return self
