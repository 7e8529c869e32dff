from typing import List, Sequence
from ..ingestion.models import Point, UserStroke

# Reference stroke data is authored in a fixed 300x300 logical square
CANONICAL_SIZE = 300.0

class InvalidDimensions(ValueError):
    """Raised when a capture surface has a non-positive width or height."""

def check_dimensions(width: float, height: float) -> None:
    if width <= 0 or height <= 0:
        raise InvalidDimensions(f"capture dimensions must be positive, got {width}x{height}")

def normalize_points(points: Sequence[Point], width: float, height: float) -> List[Point]:
    """
    Maps capture-surface pixels onto the canonical square.
    The square is fitted aspect-preserving and centered on the surface.
    """
    check_dimensions(width, height)
    if not points:
        return []

    scale = min(width, height) / CANONICAL_SIZE
    offset_x = (width - CANONICAL_SIZE * scale) / 2
    offset_y = (height - CANONICAL_SIZE * scale) / 2

    return [Point(x=(p.x - offset_x) / scale, y=(p.y - offset_y) / scale) for p in points]

def normalize_strokes(strokes: Sequence[UserStroke], width: float, height: float) -> List[UserStroke]:
    # Copies only; the captured strokes are left untouched
    return [
        s.model_copy(update={"points": normalize_points(s.points, width, height)})
        for s in strokes
    ]
