"""
Fit Check Options and Results

Request-scoped flags that switch optional validation passes on, and the
structured verdict the engine returns.
"""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class AccessibilityLevel(str, Enum):
    WHEELCHAIR_ACCESSIBLE = "wheelchair_accessible"
    MOBILITY_AID = "mobility_aid"


class IssueType(str, Enum):
    """What kind of rule an issue violates."""
    CLEARANCE = "clearance"
    OVERLAP = "overlap"
    RELATIONSHIP = "relationship"
    ACCESSIBILITY = "accessibility"
    SAFETY = "safety"


class Severity(str, Enum):
    ERROR = "error"      # Blocks the layout
    WARNING = "warning"  # Advisory


class FitCheckOptions(BaseModel):
    """
    Optional flags for a fit check.

    Leaving a flag unset disables the pass it drives: no room_type means no
    relationship checks, no accessibility level means no walkway checks, and
    neither child_safe nor pet_friendly means no safety checks.
    """
    accessibility: Optional[AccessibilityLevel] = None
    child_safe: bool = False
    pet_friendly: bool = False
    room_type: Optional[str] = Field(None, description="e.g. 'living_room'")


class Issue(BaseModel):
    """A single violation detected in the layout."""
    model_config = ConfigDict(frozen=True)

    type: IssueType
    severity: Severity
    message: str = Field(..., description="Human-readable explanation")
    furniture_ids: List[str] = Field(default_factory=list, description="IDs of items involved")


class FitCheckResult(BaseModel):
    """Consolidated verdict for one furniture arrangement."""
    model_config = ConfigDict(frozen=True)

    passed: bool = Field(..., description="True when no issue is an error")
    issues: List[Issue] = Field(default_factory=list)
    score: int = Field(..., ge=0, le=100, description="Overall score 0-100")
    suggestions: List[str] = Field(default_factory=list)
