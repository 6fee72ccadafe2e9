"""
Each validation pass on its own: which layouts produce which issues.
"""

from __future__ import annotations

from fitcheck.core.constraints import (
    check_accessibility,
    check_clearances,
    check_overlaps,
    check_relationships,
    check_room_boundaries,
    check_safety,
)
from fitcheck.core.walkways import Walkway, estimate_walkways
from fitcheck.models.results import FitCheckOptions, IssueType, Severity
from fitcheck.models.room import RoomGeometry


def _room_with_opening(wall: str, offset: float, kind: str) -> RoomGeometry:
    return RoomGeometry.model_validate({
        "width_cm": 400,
        "length_cm": 500,
        "height_cm": 270,
        "openings": [{
            "type": kind,
            "position": {"wall": wall, "distance_from_corner_cm": offset},
            "dimensions": {"width_cm": 80, "height_cm": 200},
        }],
    })


# ----- Boundaries -----

def test_boundaries_inside_room(make_item, room) -> None:
    items = [
        make_item("sofa_1", "sofa", 200, 90, 85, 100, 100),
        make_item("table_1", "coffee_table", 100, 50, 45, 350, 475),
    ]
    assert check_room_boundaries(room, items) == []


def test_boundaries_one_issue_per_item_outside(make_item, room) -> None:
    items = [
        make_item("sofa_1", "sofa", 200, 90, 85, 390, 100),
        make_item("chair_1", "chair", 50, 50, 80, 100, 490),
        make_item("chair_2", "chair", 50, 50, 80, 100, 100),
    ]
    issues = check_room_boundaries(room, items)
    assert [i.furniture_ids for i in issues] == [["sofa_1"], ["chair_1"]]
    assert all(i.type == IssueType.CLEARANCE and i.severity == Severity.ERROR for i in issues)
    assert issues[0].message == "sofa extends beyond room boundaries"


# ----- Overlaps -----

def test_overlaps_one_issue_per_pair(make_item) -> None:
    items = [
        make_item("chair_1", "chair", 50, 50, 80, 100, 100),
        make_item("chair_2", "chair", 50, 50, 80, 120, 110),
        make_item("chair_3", "chair", 50, 50, 80, 300, 300),
    ]
    issues = check_overlaps(items)
    assert len(issues) == 1
    assert issues[0].type == IssueType.OVERLAP
    assert issues[0].severity == Severity.ERROR
    assert issues[0].furniture_ids == ["chair_1", "chair_2"]
    assert issues[0].message == "chair overlaps with chair"


def test_overlaps_three_way(make_item) -> None:
    items = [make_item(f"c{i}", "chair", 50, 50, 80, 100 + i * 10, 100) for i in range(3)]
    pairs = [issue.furniture_ids for issue in check_overlaps(items)]
    assert pairs == [["c0", "c1"], ["c0", "c2"], ["c1", "c2"]]


# ----- Clearances -----

def test_clearance_between_neighbours(make_item, room, rules) -> None:
    items = [
        make_item("sofa_1", "sofa", 20, 90, 85, 100, 100),
        make_item("table_1", "coffee_table", 20, 40, 45, 130, 100),
    ]
    issues = check_clearances(room, items, rules)
    assert len(issues) == 1
    assert issues[0].type == IssueType.CLEARANCE
    assert issues[0].severity == Severity.WARNING
    assert issues[0].furniture_ids == ["sofa_1", "table_1"]
    assert "(30cm < 45cm)" in issues[0].message


def test_clearance_skips_categories_without_rules(make_item, room, rules) -> None:
    items = [
        make_item("stool_1", "stool", 20, 20, 45, 100, 100),
        make_item("stool_2", "stool", 20, 20, 45, 125, 100),
    ]
    assert check_clearances(room, items, rules) == []


def test_clearance_uses_category_override(make_item, room, rules) -> None:
    # 50cm apart: fine for the global 45cm, too close for a bed's 60cm
    items = [
        make_item("bed_1", "bed", 20, 20, 50, 100, 100),
        make_item("stool_1", "stool", 20, 20, 45, 150, 100),
    ]
    issues = check_clearances(room, items, rules)
    assert len(issues) == 1
    assert "(50cm < 60cm)" in issues[0].message


def test_clearance_ignores_items_beyond_neighbor_radius(make_item, room, rules_config) -> None:
    from fitcheck.core.rules import parse_rules

    rules_config["clearance_rules"]["between_furniture_cm"] = 500
    rules = parse_rules(rules_config)
    items = [
        make_item("sofa_1", "sofa", 20, 20, 85, 50, 100),
        make_item("sofa_2", "sofa", 20, 20, 85, 250, 100),
    ]
    assert check_clearances(room, items, rules) == []


def test_clearance_near_door(make_item, rules) -> None:
    room = _room_with_opening("south", 100, "door")
    sofa = make_item("sofa_1", "sofa", 100, 40, 85, 100, 50)
    issues = check_clearances(room, [sofa], rules)
    assert len(issues) == 1
    assert issues[0].furniture_ids == ["sofa_1"]
    assert issues[0].message == "sofa too close to door (50cm < 90cm)"


def test_clearance_window_uses_window_constant(make_item, rules) -> None:
    room = _room_with_opening("west", 100, "window")
    near = make_item("sofa_1", "sofa", 40, 40, 85, 25, 100)
    far = make_item("sofa_2", "sofa", 40, 40, 85, 60, 300)
    issues = check_clearances(room, [near, far], rules)
    assert [i.furniture_ids for i in issues] == [["sofa_1"]]


# ----- Relationships -----

def test_relationships_need_room_type(make_item, rules) -> None:
    items = [
        make_item("sofa_1", "sofa", 200, 90, 85, 200, 100),
        make_item("table_1", "coffee_table", 100, 50, 45, 200, 300),
    ]
    assert check_relationships(items, None, rules) == []
    assert check_relationships(items, "garage", rules) == []


def test_relationships_too_far(make_item, rules) -> None:
    items = [
        make_item("sofa_1", "sofa", 200, 90, 85, 200, 100),
        make_item("table_1", "coffee_table", 100, 50, 45, 200, 300),
    ]
    issues = check_relationships(items, "living_room", rules)
    assert len(issues) == 1
    assert issues[0].type == IssueType.RELATIONSHIP
    assert issues[0].severity == Severity.WARNING
    assert issues[0].message == "sofa too far from coffee_table (200cm > 150cm)"
    assert issues[0].furniture_ids == ["sofa_1", "table_1"]


def test_relationships_too_close(make_item, rules) -> None:
    items = [
        make_item("table_1", "coffee_table", 20, 20, 45, 200, 130),
        make_item("sofa_1", "sofa", 200, 90, 85, 200, 100),
    ]
    issues = check_relationships(items, "living_room", rules)
    assert len(issues) == 1
    assert issues[0].message == "sofa too close to coffee_table (30cm < 40cm)"
    assert issues[0].furniture_ids == ["sofa_1", "table_1"]


def test_relationships_use_first_item_per_category(make_item, rules) -> None:
    items = [
        make_item("sofa_1", "sofa", 200, 90, 85, 200, 100),
        make_item("table_1", "coffee_table", 100, 50, 45, 200, 200),
        make_item("table_2", "coffee_table", 100, 50, 45, 200, 450),
    ]
    assert check_relationships(items, "living_room", rules) == []


def test_relationships_missing_category(make_item, rules) -> None:
    items = [make_item("sofa_1", "sofa", 200, 90, 85, 200, 100)]
    assert check_relationships(items, "living_room", rules) == []


# ----- Accessibility -----

def test_accessibility_placeholder_walkway_is_wide_enough(make_item, room, rules) -> None:
    items = [make_item("sofa_1", "sofa", 200, 90, 85, 200, 100)]
    assert estimate_walkways(room, items)[0].width_cm == 120
    assert check_accessibility(room, items, "wheelchair_accessible", rules) == []


def test_accessibility_unknown_or_missing_level(make_item, room, rules) -> None:
    items = [make_item("sofa_1", "sofa", 200, 90, 85, 200, 100)]
    assert check_accessibility(room, items, None, rules) == []
    assert check_accessibility(room, items, "stroller", rules) == []


def test_accessibility_narrow_walkway(make_item, room, rules) -> None:
    items = [make_item("sofa_1", "sofa", 200, 90, 85, 200, 100)]

    def narrow(room, furniture):
        return [
            Walkway(width_cm=70, blocking_furniture=["sofa_1"]),
            Walkway(width_cm=150),
        ]

    issues = check_accessibility(room, items, "wheelchair_accessible", rules, narrow)
    assert len(issues) == 1
    assert issues[0].type == IssueType.ACCESSIBILITY
    assert issues[0].severity == Severity.ERROR
    assert issues[0].furniture_ids == ["sofa_1"]
    assert "(70cm < 91cm)" in issues[0].message


# ----- Safety -----

def test_safety_tip_over_risk(make_item, rules) -> None:
    items = [
        make_item("shelf_1", "bookshelf", 60, 30, 180, 100, 100),
        make_item("shelf_2", "bookshelf", 100, 30, 180, 300, 100),
        make_item("lamp_1", "lamp", 20, 20, 140, 200, 200),
    ]
    issues = check_safety(items, FitCheckOptions(child_safe=True), rules)
    assert len(issues) == 1
    assert issues[0].type == IssueType.SAFETY
    assert issues[0].severity == Severity.WARNING
    assert issues[0].furniture_ids == ["shelf_1"]
    assert "securing to wall" in issues[0].message


def test_safety_pet_friendly_only_has_no_checks(make_item, rules) -> None:
    items = [make_item("shelf_1", "bookshelf", 60, 30, 180, 100, 100)]
    assert check_safety(items, FitCheckOptions(pet_friendly=True), rules) == []


def test_relationships_zero_bounds_are_enforced(make_item, rules_config) -> None:
    from fitcheck.core.rules import parse_rules

    rules_config["room_specific_rules"]["living_room"]["furniture_relationships"] = {
        "sofa_to_coffee_table": {"min_distance_cm": 0, "max_distance_cm": 0},
    }
    rules = parse_rules(rules_config)
    items = [
        make_item("sofa_1", "sofa", 200, 90, 85, 200, 100),
        make_item("table_1", "coffee_table", 100, 50, 45, 200, 180),
    ]
    issues = check_relationships(items, "living_room", rules)
    assert len(issues) == 1
    assert issues[0].message == "sofa too far from coffee_table (80cm > 0cm)"


def test_relationships_absent_bounds_are_skipped(make_item, rules_config) -> None:
    from fitcheck.core.rules import parse_rules

    rules_config["room_specific_rules"]["living_room"]["furniture_relationships"] = {
        "sofa_to_coffee_table": {},
    }
    rules = parse_rules(rules_config)
    items = [
        make_item("sofa_1", "sofa", 200, 90, 85, 200, 100),
        make_item("table_1", "coffee_table", 100, 50, 45, 200, 480),
    ]
    assert check_relationships(items, "living_room", rules) == []
