"""
Shared fixtures: a fixed rules document, a checker built on it, a
400x500 room, and a factory for furniture items.
"""

from __future__ import annotations

import copy

import pytest

from fitcheck.core.fit_checker import FitChecker
from fitcheck.core.rules import parse_rules
from fitcheck.models.room import Dimensions, FurnitureItem, Position, RoomGeometry
from fitcheck.models.rules import RuleSet

RULES_CONFIG: dict = {
    "clearance_rules": {
        "between_furniture_cm": 45,
        "door_clearance_cm": 90,
        "window_clearance_cm": 30,
    },
    "furniture_specific_rules": {
        "sofa": {},
        "coffee_table": {},
        "bookshelf": {},
        "bed": {"min_clearance_cm": 60},
    },
    "room_specific_rules": {
        "living_room": {
            "furniture_relationships": {
                "sofa_to_coffee_table": {"min_distance_cm": 40, "max_distance_cm": 150},
            },
        },
    },
    "accessibility_rules": {
        "wheelchair_accessible": {"min_walkway_cm": 91},
        "mobility_aid": {"min_walkway_cm": 81},
    },
    "safety_rules": {
        "child_safe": {"tip_over_min_height_cm": 150, "tip_over_min_width_ratio": 0.5},
        "pet_friendly": {},
    },
}


@pytest.fixture
def rules_config() -> dict:
    return copy.deepcopy(RULES_CONFIG)


@pytest.fixture
def rules(rules_config: dict) -> RuleSet:
    return parse_rules(rules_config)


@pytest.fixture
def checker(rules: RuleSet) -> FitChecker:
    return FitChecker(rules)


@pytest.fixture
def room() -> RoomGeometry:
    return RoomGeometry(width_cm=400, length_cm=500, height_cm=270)


@pytest.fixture
def make_item():
    """make_item(id, category, width, length, height, x, y, rotation=0)."""

    def _make(
        product_id: str,
        category: str,
        width: float,
        length: float,
        height: float,
        x: float,
        y: float,
        rotation: float = 0.0,
    ) -> FurnitureItem:
        return FurnitureItem(
            product_id=product_id,
            category=category,
            dimensions=Dimensions(width_cm=width, length_cm=length, height_cm=height),
            position=Position(x_cm=x, y_cm=y, rotation_degrees=rotation),
        )

    return _make
