"""
Fit Checker

Entry point of the engine. Runs the validation passes in a fixed order
over one room and furniture arrangement, and aggregates the issues into a
single FitCheckResult.

A FitChecker holds only its (immutable) RuleSet and walkway estimator, so
one instance can serve concurrent callers.
"""

import logging
from typing import List, Optional

from fitcheck.core import constraints
from fitcheck.core.scoring import build_result
from fitcheck.core.walkways import WalkwayEstimator, estimate_walkways
from fitcheck.models.results import FitCheckOptions, FitCheckResult, Issue
from fitcheck.models.room import FurnitureItem, RoomGeometry
from fitcheck.models.rules import RuleSet


logger = logging.getLogger(__name__)


class FitChecker:
    """
    Checks whether a furniture arrangement fits a room.

    Example:
        >>> checker = FitChecker(load_rules())
        >>> result = checker.check_fit(room, furniture, FitCheckOptions(room_type="living_room"))
        >>> result.passed, result.score
        (True, 100)
    """

    def __init__(
        self,
        rules: RuleSet,
        walkway_estimator: WalkwayEstimator = estimate_walkways,
    ):
        self._rules = rules
        self._walkway_estimator = walkway_estimator

    @property
    def rules(self) -> RuleSet:
        return self._rules

    def check_fit(
        self,
        room: RoomGeometry,
        furniture: List[FurnitureItem],
        options: Optional[FitCheckOptions] = None,
    ) -> FitCheckResult:
        """
        Validate an arrangement and score it.

        Args:
            room: Room footprint and openings
            furniture: Placed items
            options: Flags enabling the relationship, accessibility and safety passes

        Returns:
            FitCheckResult with issues in pass order
        """
        options = options or FitCheckOptions()
        self._log_rotated(furniture)

        issues: List[Issue] = []

        # 1. Room boundaries
        issues.extend(constraints.check_room_boundaries(room, furniture))

        # 2. Overlaps
        issues.extend(constraints.check_overlaps(furniture))

        # 3. Clearances
        issues.extend(constraints.check_clearances(room, furniture, self._rules))

        # 4. Relationships
        issues.extend(constraints.check_relationships(furniture, options.room_type, self._rules))

        # 5. Accessibility
        if options.accessibility:
            issues.extend(constraints.check_accessibility(
                room,
                furniture,
                options.accessibility.value,
                self._rules,
                self._walkway_estimator,
            ))

        # 6. Safety
        if options.child_safe or options.pet_friendly:
            issues.extend(constraints.check_safety(furniture, options, self._rules))

        result = build_result(issues)
        logger.debug(
            "Fit check: %d item(s), %d issue(s), score=%d, passed=%s",
            len(furniture), len(result.issues), result.score, result.passed,
        )
        return result

    def check_bounds(self, room: RoomGeometry, furniture: List[FurnitureItem]) -> FitCheckResult:
        """Quick check: room boundaries only."""
        self._log_rotated(furniture)
        return build_result(constraints.check_room_boundaries(room, furniture))

    @staticmethod
    def _log_rotated(furniture: List[FurnitureItem]) -> None:
        rotated = [item.product_id for item in furniture if item.position.rotation_degrees % 360]
        if rotated:
            logger.debug("Rotation ignored, evaluating axis-aligned footprints for: %s", rotated)
