import logging
import math
from typing import List, Sequence
from ..ingestion.models import CharacterDefinition, UserStroke
from ..stroke_engine.normalization import normalize_strokes
from ..stroke_engine.primitives import bounding_box, stroke_angle, stroke_length, symmetric_ratio

logger = logging.getLogger("judgment.shape")

SHAPE_MAX = 50.0
BOUNDS_WEIGHT = 20.0
LENGTH_WEIGHT = 15.0
ANGLE_WEIGHT = 15.0

def bounds_component(definition: CharacterDefinition, normalized: Sequence[UserStroke]) -> float:
    correct = bounding_box(definition.stroke_order)
    user = bounding_box(normalized)
    if correct is None or user is None:
        return 0.0

    width_ratio = symmetric_ratio(user.width, correct.width)
    height_ratio = symmetric_ratio(user.height, correct.height)
    return (width_ratio + height_ratio) / 2 * BOUNDS_WEIGHT

def length_component(definition: CharacterDefinition, normalized: Sequence[UserStroke]) -> float:
    total = 0.0
    counted = 0
    for ref, user in zip(definition.stroke_order, normalized):
        correct_len = stroke_length(ref.points)
        if correct_len <= 0:
            # Zero-length reference stroke carries no length information
            continue
        total += symmetric_ratio(stroke_length(user.points), correct_len)
        counted += 1

    if counted == 0:
        return 0.0
    return total / counted * LENGTH_WEIGHT

def angle_component(definition: CharacterDefinition, normalized: Sequence[UserStroke]) -> float:
    pairs = list(zip(definition.stroke_order, normalized))
    if not pairs:
        return 0.0

    total = 0.0
    for ref, user in pairs:
        diff = abs(stroke_angle(ref.points) - stroke_angle(user.points))
        wrapped = min(diff, 2 * math.pi - diff) / math.pi  # 0 = same direction, 1 = opposite
        total += 1 - wrapped
    return total / len(pairs) * ANGLE_WEIGHT

def calculate_shape_score(
    definition: CharacterDefinition,
    user_strokes: List[UserStroke],
    canvas_width: float,
    canvas_height: float,
) -> float:
    """
    Shape accuracy out of 50: overall size (20), per-stroke length (15)
    and per-stroke direction (15).
    """
    normalized = normalize_strokes(user_strokes, canvas_width, canvas_height)

    bounds = bounds_component(definition, normalized)
    length = length_component(definition, normalized)
    angle = angle_component(definition, normalized)
    logger.debug("shape %s: bounds=%.3f length=%.3f angle=%.3f", definition.id, bounds, length, angle)

    return max(0.0, min(SHAPE_MAX, bounds + length + angle))
