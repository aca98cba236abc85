import dataclasses
from collections.abc import Callable

import pytest
from uuid_extensions import uuid7str

from orderkit.core.enums import TargetIndexCapture
from orderkit.core.services.ordering import OrderingService


@dataclasses.dataclass
class Item:
    """Orderable test item with a uuid7 identifier"""

    id: str = dataclasses.field(default_factory=uuid7str)
    position: int = 0


def make_items(n: int) -> list[Item]:
    return [Item(position=i + 1) for i in range(n)]


@pytest.fixture
def service() -> OrderingService:
    return OrderingService()


@pytest.fixture
def legacy_service() -> OrderingService:
    """Service reading the anchor index at call time"""
    return OrderingService(capture=TargetIndexCapture.BEFORE_REMOVAL)


@pytest.fixture
def items_factory() -> Callable[[int], list[Item]]:
    return make_items


@pytest.fixture
def abc() -> list[Item]:
    return [Item(id="A", position=1), Item(id="B", position=2), Item(id="C", position=3)]
