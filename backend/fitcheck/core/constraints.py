"""
Layout Constraints

The six validation passes of a fit check. Each pass takes the layout and
the rules it needs and returns a list of Issues; none of them raises for a
violation. Passes are independent of one another.

Pass order (as run by FitChecker):
1. Room boundaries   - error
2. Overlaps          - error
3. Clearances        - warning
4. Relationships     - warning (needs room_type)
5. Accessibility     - error   (needs accessibility level)
6. Safety            - warning (needs child_safe / pet_friendly)
"""

from typing import List, Optional

from fitcheck.core import geometry
from fitcheck.core.walkways import WalkwayEstimator, estimate_walkways
from fitcheck.models.results import FitCheckOptions, Issue, IssueType, Severity
from fitcheck.models.room import FurnitureItem, RoomGeometry
from fitcheck.models.rules import ClearanceRules, RuleSet, split_relationship


def _cm(value: float) -> str:
    """Format a distance for messages: one decimal, no trailing zeros."""
    return ("%.1f" % value).rstrip("0").rstrip(".")


# ============ 1. Boundaries ============

def check_room_boundaries(room: RoomGeometry, furniture: List[FurnitureItem]) -> List[Issue]:
    """Flag every item whose footprint leaves the room."""
    issues = []
    for item in furniture:
        if not geometry.within_room(item, room):
            issues.append(Issue(
                type=IssueType.CLEARANCE,
                severity=Severity.ERROR,
                message=f"{item.category} extends beyond room boundaries",
                furniture_ids=[item.product_id],
            ))
    return issues


# ============ 2. Overlaps ============

def check_overlaps(furniture: List[FurnitureItem]) -> List[Issue]:
    """Flag every unordered pair of items whose footprints overlap."""
    issues = []
    for i, item_a in enumerate(furniture):
        for item_b in furniture[i + 1:]:
            if geometry.overlaps(item_a, item_b):
                issues.append(Issue(
                    type=IssueType.OVERLAP,
                    severity=Severity.ERROR,
                    message=f"{item_a.category} overlaps with {item_b.category}",
                    furniture_ids=[item_a.product_id, item_b.product_id],
                ))
    return issues


# ============ 3. Clearances ============

def _required_clearance(item_a: FurnitureItem, item_b: FurnitureItem, rules: RuleSet) -> float:
    """
    Minimum center distance for a pair: the global value, raised by either
    item's category override when one is configured.
    """
    required = rules.clearance_rules.between_furniture_cm
    for item in (item_a, item_b):
        category_rule = rules.furniture_specific_rules.get(item.category)
        if category_rule and category_rule.min_clearance_cm is not None:
            required = max(required, category_rule.min_clearance_cm)
    return required


def _check_opening_clearances(
    room: RoomGeometry,
    item: FurnitureItem,
    clearance: ClearanceRules,
) -> List[Issue]:
    issues = []
    for opening in room.openings:
        point = geometry.opening_position(room, opening)
        dist = geometry.distance_to_point(item, point)
        required = clearance.for_opening(opening.type.value)

        if dist < required:
            issues.append(Issue(
                type=IssueType.CLEARANCE,
                severity=Severity.WARNING,
                message=(
                    f"{item.category} too close to {opening.type.value} "
                    f"({_cm(dist)}cm < {_cm(required)}cm)"
                ),
                furniture_ids=[item.product_id],
            ))
    return issues


def check_clearances(
    room: RoomGeometry,
    furniture: List[FurnitureItem],
    rules: RuleSet,
) -> List[Issue]:
    """
    Check spacing between neighbouring items and around wall openings.

    Only items whose category has an entry in furniture_specific_rules are
    checked; a pair is checked when either item is. Only pairs closer than
    the neighbor radius are considered, and each pair is reported at most once.
    """
    issues = []
    clearance = rules.clearance_rules
    checked = [item.category in rules.furniture_specific_rules for item in furniture]

    for i, item_a in enumerate(furniture):
        for j in range(i + 1, len(furniture)):
            item_b = furniture[j]
            if not (checked[i] or checked[j]):
                continue

            dist = geometry.distance(item_a, item_b)
            if dist >= clearance.neighbor_radius_cm:
                continue

            required = _required_clearance(item_a, item_b, rules)
            if dist < required:
                issues.append(Issue(
                    type=IssueType.CLEARANCE,
                    severity=Severity.WARNING,
                    message=(
                        f"Insufficient clearance between {item_a.category} and "
                        f"{item_b.category} ({_cm(dist)}cm < {_cm(required)}cm)"
                    ),
                    furniture_ids=[item_a.product_id, item_b.product_id],
                ))

    for item, is_checked in zip(furniture, checked):
        if is_checked:
            issues.extend(_check_opening_clearances(room, item, clearance))

    return issues


# ============ 4. Relationships ============

def _first_of_category(furniture: List[FurnitureItem], category: str) -> Optional[FurnitureItem]:
    # Only the first item of a category takes part in relationship checks.
    return next((item for item in furniture if item.category == category), None)


def check_relationships(
    furniture: List[FurnitureItem],
    room_type: Optional[str],
    rules: RuleSet,
) -> List[Issue]:
    """Check the room type's min/max distances between paired categories."""
    issues = []
    if not room_type:
        return issues

    room_rule = rules.room_specific_rules.get(room_type)
    if room_rule is None:
        return issues

    for key, rule in room_rule.furniture_relationships.items():
        first_category, second_category = split_relationship(key)
        item_a = _first_of_category(furniture, first_category)
        item_b = _first_of_category(furniture, second_category)
        if item_a is None or item_b is None:
            continue

        dist = geometry.distance(item_a, item_b)
        ids = [item_a.product_id, item_b.product_id]

        if rule.min_distance_cm is not None and dist < rule.min_distance_cm:
            issues.append(Issue(
                type=IssueType.RELATIONSHIP,
                severity=Severity.WARNING,
                message=(
                    f"{first_category} too close to {second_category} "
                    f"({_cm(dist)}cm < {_cm(rule.min_distance_cm)}cm)"
                ),
                furniture_ids=ids,
            ))

        if rule.max_distance_cm is not None and dist > rule.max_distance_cm:
            issues.append(Issue(
                type=IssueType.RELATIONSHIP,
                severity=Severity.WARNING,
                message=(
                    f"{first_category} too far from {second_category} "
                    f"({_cm(dist)}cm > {_cm(rule.max_distance_cm)}cm)"
                ),
                furniture_ids=ids,
            ))

    return issues


# ============ 5. Accessibility ============

def check_accessibility(
    room: RoomGeometry,
    furniture: List[FurnitureItem],
    level: Optional[str],
    rules: RuleSet,
    walkway_estimator: WalkwayEstimator = estimate_walkways,
) -> List[Issue]:
    """Compare every estimated walkway against the level's minimum width."""
    issues = []
    if not level:
        return issues

    access_rule = rules.accessibility_rules.get(level)
    if access_rule is None:
        return issues

    for walkway in walkway_estimator(room, furniture):
        if walkway.width_cm < access_rule.min_walkway_cm:
            issues.append(Issue(
                type=IssueType.ACCESSIBILITY,
                severity=Severity.ERROR,
                message=(
                    "Walkway too narrow for accessibility "
                    f"({_cm(walkway.width_cm)}cm < {_cm(access_rule.min_walkway_cm)}cm)"
                ),
                furniture_ids=list(walkway.blocking_furniture),
            ))

    return issues


# ============ 6. Safety ============

def check_safety(
    furniture: List[FurnitureItem],
    options: FitCheckOptions,
    rules: RuleSet,
) -> List[Issue]:
    """
    Child-safe: tall, narrow items are a tip-over risk.
    Pet-friendly: no checks yet.
    """
    issues = []

    if options.child_safe:
        child_rule = rules.safety_rules.child_safe

        for item in furniture:
            dims = item.dimensions
            if (dims.height_cm > child_rule.tip_over_min_height_cm
                    and dims.width_cm / dims.height_cm < child_rule.tip_over_min_width_ratio):
                issues.append(Issue(
                    type=IssueType.SAFETY,
                    severity=Severity.WARNING,
                    message=f"{item.category} may have tip-over risk - consider securing to wall",
                    furniture_ids=[item.product_id],
                ))

    return issues
