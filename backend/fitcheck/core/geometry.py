"""
Geometry Utilities

Shapely-based functions for spatial operations on furniture layouts:
- Converting items and rooms to axis-aligned boxes
- Overlap detection
- Room containment
- Center-to-center and center-to-point distances
- Resolving wall openings into room coordinates

Items are treated as axis-aligned boxes centred on their position.
Rotation is not applied.
"""

from typing import Tuple
from shapely.geometry import Polygon, box, Point

from fitcheck.models.room import FurnitureItem, RoomGeometry, Opening, Wall


Bounds = Tuple[float, float, float, float]


def bounds(item: FurnitureItem) -> Bounds:
    """
    Axis-aligned bounds of an item's footprint.

    Returns:
        (min_x, max_x, min_y, max_y)

    Example:
        >>> sofa = FurnitureItem(product_id="sofa_1", category="sofa",
        ...     dimensions=Dimensions(width_cm=200, length_cm=90, height_cm=85),
        ...     position=Position(x_cm=100, y_cm=100))
        >>> bounds(sofa)
        (0.0, 200.0, 55.0, 145.0)
    """
    half_width = item.dimensions.width_cm / 2
    half_length = item.dimensions.length_cm / 2
    x, y = item.position.x_cm, item.position.y_cm
    return (x - half_width, x + half_width, y - half_length, y + half_length)


def item_to_polygon(item: FurnitureItem) -> Polygon:
    """Convert a FurnitureItem footprint to a Shapely box."""
    min_x, max_x, min_y, max_y = bounds(item)
    return box(min_x, min_y, max_x, max_y)


def room_to_polygon(room: RoomGeometry) -> Polygon:
    """The room floor as a box from (0, 0) to (width, length)."""
    return box(0, 0, room.width_cm, room.length_cm)


def overlaps(item_a: FurnitureItem, item_b: FurnitureItem) -> bool:
    """
    Check if two items overlap.

    Only a positive-area intersection counts; items that merely touch
    along an edge or at a corner do not overlap.

    Example:
        >>> chair_a at (100, 100), chair_b at (120, 110), both 50x50
        >>> overlaps(chair_a, chair_b)
        True
    """
    poly_a = item_to_polygon(item_a)
    poly_b = item_to_polygon(item_b)
    return poly_a.intersection(poly_b).area > 0


def within_room(item: FurnitureItem, room: RoomGeometry) -> bool:
    """
    Check if an item lies inside the room footprint.

    Returns:
        True if the item's box is within [0, width] x [0, length], edges included
    """
    return room_to_polygon(room).covers(item_to_polygon(item))


def distance(item_a: FurnitureItem, item_b: FurnitureItem) -> float:
    """Euclidean distance between two item centers."""
    return Point(item_a.center).distance(Point(item_b.center))


def distance_to_point(item: FurnitureItem, point: Tuple[float, float]) -> float:
    """Euclidean distance from an item's center to a point."""
    return Point(item.center).distance(Point(point))


def opening_position(room: RoomGeometry, opening: Opening) -> Tuple[float, float]:
    """
    Resolve an opening's wall-relative offset into room coordinates.

    Example:
        >>> north door 80cm from the corner in a 400x500 room
        >>> opening_position(room, door)
        (80.0, 500.0)
    """
    offset = opening.position.distance_from_corner_cm
    wall = opening.position.wall

    if wall == Wall.NORTH:
        return (offset, room.length_cm)
    if wall == Wall.SOUTH:
        return (offset, 0.0)
    if wall == Wall.EAST:
        return (room.width_cm, offset)
    return (0.0, offset)
