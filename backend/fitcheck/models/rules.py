"""
Rule Configuration Models

Typed, frozen view of the rules document (rules.json). The five top-level
sections are all required; anything structurally wrong is rejected at load
time by fitcheck.core.rules.load_rules.
"""

import copy
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

RELATIONSHIP_SEPARATOR = "_to_"


class _FrozenRule(BaseModel):
    model_config = ConfigDict(frozen=True)


class ClearanceRules(_FrozenRule):
    """Global distance thresholds."""
    between_furniture_cm: float = Field(..., ge=0)
    door_clearance_cm: float = Field(..., ge=0)
    window_clearance_cm: float = Field(..., ge=0)
    archway_clearance_cm: Optional[float] = Field(None, ge=0)
    neighbor_radius_cm: float = Field(200.0, gt=0)

    def for_opening(self, opening_type: str) -> float:
        """Required item-to-opening distance for an opening type."""
        if opening_type == "door":
            return self.door_clearance_cm
        if opening_type == "archway" and self.archway_clearance_cm is not None:
            return self.archway_clearance_cm
        return self.window_clearance_cm


class FurnitureRule(_FrozenRule):
    """Per-category overrides. Unknown keys are kept for introspection."""
    model_config = ConfigDict(frozen=True, extra="allow")

    min_clearance_cm: Optional[float] = Field(None, ge=0)
    notes: Optional[str] = None


class RelationshipRule(_FrozenRule):
    min_distance_cm: Optional[float] = Field(None, ge=0)
    max_distance_cm: Optional[float] = Field(None, ge=0)


class RoomRule(_FrozenRule):
    model_config = ConfigDict(frozen=True, extra="allow")

    furniture_relationships: Dict[str, RelationshipRule] = Field(default_factory=dict)

    @field_validator("furniture_relationships")
    @classmethod
    def _relationship_keys(cls, value: Dict[str, RelationshipRule]) -> Dict[str, RelationshipRule]:
        for key in value:
            first, sep, second = key.partition(RELATIONSHIP_SEPARATOR)
            if not sep or not first or not second:
                raise ValueError(
                    f"relationship key '{key}' must look like '<category>_to_<category>'"
                )
        return value


class AccessibilityRule(_FrozenRule):
    model_config = ConfigDict(frozen=True, extra="allow")

    min_walkway_cm: float = Field(..., gt=0)


class SafetyRule(_FrozenRule):
    """A safety profile with no typed thresholds (e.g. pet_friendly)."""
    model_config = ConfigDict(frozen=True, extra="allow")


class ChildSafeRule(SafetyRule):
    """Tip-over thresholds: taller than the height and narrower than the ratio."""
    tip_over_min_height_cm: float = Field(150.0, gt=0)
    tip_over_min_width_ratio: float = Field(0.5, gt=0)


class SafetyRules(_FrozenRule):
    """Safety profiles keyed by name; only child_safe carries thresholds."""
    model_config = ConfigDict(frozen=True, extra="allow")

    child_safe: ChildSafeRule = Field(default_factory=ChildSafeRule)
    pet_friendly: Optional[SafetyRule] = None


class RuleSet(_FrozenRule):
    """
    The complete, validated rule configuration.

    A RuleSet is passed explicitly into FitChecker, so several independently
    configured engines can coexist in one process.
    """
    clearance_rules: ClearanceRules
    furniture_specific_rules: Dict[str, FurnitureRule]
    room_specific_rules: Dict[str, RoomRule]
    accessibility_rules: Dict[str, AccessibilityRule]
    safety_rules: SafetyRules

    _raw: Dict[str, Any] = PrivateAttr(default_factory=dict)

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "RuleSet":
        """Validate a raw rules document, keeping it for verbatim export."""
        rule_set = cls.model_validate(config)
        rule_set._raw = config
        return rule_set

    def as_config(self) -> Dict[str, Any]:
        """The rules document as it was loaded."""
        if self._raw:
            return copy.deepcopy(self._raw)
        return self.model_dump(exclude_none=True)


def split_relationship(key: str) -> tuple[str, str]:
    """'sofa_to_coffee_table' -> ('sofa', 'coffee_table')."""
    first, _, second = key.partition(RELATIONSHIP_SEPARATOR)
    return first, second
