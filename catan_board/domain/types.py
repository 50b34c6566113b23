from __future__ import annotations

from enum import Enum
from typing import Optional


class Resource(str, Enum):
    WOOD = "wood"
    BRICK = "brick"
    SHEEP = "sheep"
    WHEAT = "wheat"
    ORE = "ore"
    DESERT = "desert"


PRODUCING_RESOURCES = (
    Resource.BRICK,
    Resource.WOOD,
    Resource.WHEAT,
    Resource.SHEEP,
    Resource.ORE,
)


class PortType(str, Enum):
    ANY_3TO1 = "3:1"
    WOOD_2TO1 = "wood 2:1"
    BRICK_2TO1 = "brick 2:1"
    SHEEP_2TO1 = "sheep 2:1"
    WHEAT_2TO1 = "wheat 2:1"
    ORE_2TO1 = "ore 2:1"

    @property
    def ratio(self) -> int:
        return 3 if self is PortType.ANY_3TO1 else 2

    @property
    def resource(self) -> Optional[Resource]:
        if self is PortType.ANY_3TO1:
            return None
        return Resource(self.value.split(" ", 1)[0])
