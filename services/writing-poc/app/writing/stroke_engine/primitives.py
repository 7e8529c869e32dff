from typing import Any, Iterable, Optional, Sequence
from pydantic import BaseModel
from ..ingestion.models import Point
import math
import numpy as np

class BoundingBox(BaseModel):
    x: float
    y: float
    width: float
    height: float

    @property
    def center(self) -> Point:
        return Point(x=self.x + self.width / 2, y=self.y + self.height / 2)

    @property
    def diagonal(self) -> float:
        return math.hypot(self.width, self.height)

def distance(p1: Point, p2: Point) -> float:
    return math.sqrt((p1.x - p2.x)**2 + (p1.y - p2.y)**2)

def point_to_segment_distance(pt: Point, start: Point, end: Point) -> float:
    # Distance to the finite segment start-end, not the infinite line
    dx = end.x - start.x
    dy = end.y - start.y
    len_sq = dx * dx + dy * dy
    if len_sq == 0:
        return distance(pt, start)

    t = ((pt.x - start.x) * dx + (pt.y - start.y) * dy) / len_sq
    t = max(0.0, min(1.0, t))
    foot = Point(x=start.x + t * dx, y=start.y + t * dy)
    return distance(pt, foot)

def bounding_box(strokes: Iterable[Any]) -> Optional[BoundingBox]:
    """
    Extent over every point of every stroke (anything with `.points`).
    Returns None when there is nothing to measure, which callers treat as
    "no comparison possible" rather than as a zero-sized box.
    """
    coords = [(p.x, p.y) for s in strokes for p in s.points]
    if not coords:
        return None

    arr = np.asarray(coords, dtype=np.float64)
    min_x, min_y = arr.min(axis=0)
    max_x, max_y = arr.max(axis=0)
    return BoundingBox(
        x=float(min_x),
        y=float(min_y),
        width=float(max_x - min_x),
        height=float(max_y - min_y),
    )

def stroke_length(points: Sequence[Point]) -> float:
    if len(points) < 2:
        return 0.0
    arr = np.asarray([(p.x, p.y) for p in points], dtype=np.float64)
    steps = np.diff(arr, axis=0)
    return float(np.hypot(steps[:, 0], steps[:, 1]).sum())

def stroke_angle(points: Sequence[Point]) -> float:
    # Chord direction only: first point to last point
    if len(points) < 2:
        return 0.0
    start = points[0]
    end = points[-1]
    return math.atan2(end.y - start.y, end.x - start.x)

def symmetric_ratio(a: float, b: float) -> float:
    """
    min(a/b, b/a): 1.0 for equal sizes, falling toward 0 as they diverge
    in either direction. A zero on one side only yields 0.0.
    """
    if a == b:
        return 1.0
    if a <= 0 or b <= 0:
        return 0.0
    return min(a / b, b / a)
