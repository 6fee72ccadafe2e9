"""
Walkway Estimation

The accessibility pass asks a walkway estimator for the walkways in a
layout and compares each one against the required width. The estimator is
a plain callable so a real corridor/pathfinding implementation can replace
the placeholder below without touching the pass.
"""

from typing import Callable, List
from pydantic import BaseModel, ConfigDict, Field

from fitcheck.models.room import FurnitureItem, RoomGeometry


PLACEHOLDER_WALKWAY_CM = 120.0


class Walkway(BaseModel):
    """A walkway through the room and the items narrowing it."""
    model_config = ConfigDict(frozen=True)

    width_cm: float = Field(..., ge=0)
    blocking_furniture: List[str] = Field(default_factory=list)


WalkwayEstimator = Callable[[RoomGeometry, List[FurnitureItem]], List[Walkway]]


def estimate_walkways(room: RoomGeometry, furniture: List[FurnitureItem]) -> List[Walkway]:
    """
    Placeholder estimator: reports a single unobstructed walkway of fixed width.

    Room and furniture are accepted to honour the estimator contract but are
    not inspected.
    """
    return [Walkway(width_cm=PLACEHOLDER_WALKWAY_CM, blocking_furniture=[])]
