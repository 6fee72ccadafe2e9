"""
Room and Furniture Data Models

These Pydantic models define the room footprint and the furniture
arrangement submitted for a fit check. They serve as the "contract"
between the engine and whoever supplies room/furniture data.

All lengths are centimetres. The room origin (0, 0) is a corner and the
footprint extends to (width_cm, length_cm).
"""

from enum import Enum
from typing import List
from pydantic import BaseModel, ConfigDict, Field


class OpeningType(str, Enum):
    """Kind of wall opening."""
    DOOR = "door"
    WINDOW = "window"
    ARCHWAY = "archway"


class Wall(str, Enum):
    """Wall an opening sits on."""
    NORTH = "north"  # y = length
    SOUTH = "south"  # y = 0
    EAST = "east"    # x = width
    WEST = "west"    # x = 0


class Dimensions(BaseModel):
    """Physical size of a furniture item."""
    model_config = ConfigDict(allow_inf_nan=False)

    width_cm: float = Field(..., gt=0, description="Extent along the x axis")
    length_cm: float = Field(..., gt=0, description="Extent along the y axis")
    height_cm: float = Field(..., gt=0, description="Vertical extent")


class Position(BaseModel):
    """
    Placement of a furniture item's center.

    rotation_degrees is carried through but not used by the geometry,
    which works with axis-aligned boxes only.
    """
    model_config = ConfigDict(allow_inf_nan=False)

    x_cm: float
    y_cm: float
    rotation_degrees: float = Field(default=0.0)


class FurnitureItem(BaseModel):
    """
    A single placed furniture item.

    Attributes:
        product_id: Unique identifier (e.g., "sofa_1", a retailer SKU)
        category: Category name used for rule lookup (e.g., "sofa")
        dimensions: Physical size
        position: Center position and rotation
    """
    product_id: str = Field(..., description="Unique item ID")
    category: str = Field(..., description="Furniture category")
    dimensions: Dimensions
    position: Position

    @property
    def center(self) -> tuple[float, float]:
        """Center point of the item."""
        return (self.position.x_cm, self.position.y_cm)


class OpeningPosition(BaseModel):
    """Wall-relative location of an opening."""
    model_config = ConfigDict(allow_inf_nan=False)

    wall: Wall
    distance_from_corner_cm: float = Field(..., ge=0)


class OpeningDimensions(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    width_cm: float = Field(..., gt=0)
    height_cm: float = Field(..., gt=0)


class Opening(BaseModel):
    """A door, window or archway in one of the room's walls."""
    type: OpeningType
    position: OpeningPosition
    dimensions: OpeningDimensions


class RoomGeometry(BaseModel):
    """Rectangular room footprint with its wall openings."""
    model_config = ConfigDict(allow_inf_nan=False)

    width_cm: float = Field(..., gt=0, description="Room extent along x")
    length_cm: float = Field(..., gt=0, description="Room extent along y")
    height_cm: float = Field(..., gt=0, description="Ceiling height")
    openings: List[Opening] = Field(default_factory=list)
