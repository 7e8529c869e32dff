from typing import List
from ..ingestion.models import CharacterDefinition, UserStroke
from ..stroke_engine.normalization import normalize_points
from ..stroke_engine.primitives import distance

STROKE_ORDER_MAX = 40
POINTS_PER_STROKE = 10
START_PENALTY = 3
END_PENALTY = 3
ORDER_PENALTY = 5

# Canonical units (about 5% of the 300x300 square)
ENDPOINT_TOLERANCE = 15.0

def calculate_stroke_order_score(
    definition: CharacterDefinition,
    user_strokes: List[UserStroke],
    canvas_width: float,
    canvas_height: float,
) -> int:
    """
    Legacy stroke-order score out of 40.

    Each reference stroke is worth 10 points, checked against the user stroke
    at the same position: -3 for a start point outside tolerance, -3 for an end
    point outside tolerance, -5 when the stroke was drawn out of order.
    Missing or empty user strokes earn nothing.

    Not part of the aggregate total.
    """
    score = 0
    for i, correct in enumerate(definition.stroke_order):
        if i >= len(user_strokes) or not user_strokes[i].points:
            continue
        user = user_strokes[i]
        points = normalize_points(user.points, canvas_width, canvas_height)

        stroke_score = POINTS_PER_STROKE
        if distance(points[0], correct.start_point) > ENDPOINT_TOLERANCE:
            stroke_score -= START_PENALTY
        if distance(points[-1], correct.end_point) > ENDPOINT_TOLERANCE:
            stroke_score -= END_PENALTY
        if user.stroke_number != i + 1:
            stroke_score -= ORDER_PENALTY

        score += max(0, stroke_score)

    return min(STROKE_ORDER_MAX, score)
