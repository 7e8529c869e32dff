import logging
import math
from typing import List, Sequence
from ..ingestion.models import CharacterDefinition, Point, UserStroke
from ..stroke_engine.normalization import CANONICAL_SIZE, normalize_points, normalize_strokes
from ..stroke_engine.primitives import bounding_box, distance, symmetric_ratio

logger = logging.getLogger("judgment.balance")

BALANCE_MAX = 50.0
CENTER_WEIGHT = 20.0
LAYOUT_WEIGHT = 15.0
SPACING_WEIGHT = 15.0

# Half credit when a component needs two or more strokes to mean anything
BASELINE = 7.5

# Per-stroke centers are compared inside the whole canonical square
CANONICAL_DIAGONAL = math.hypot(CANONICAL_SIZE, CANONICAL_SIZE)

def center_component(definition: CharacterDefinition, normalized: Sequence[UserStroke]) -> float:
    correct = bounding_box(definition.stroke_order)
    user = bounding_box(normalized)
    if correct is None or user is None:
        return 0.0

    center_dist = distance(correct.center, user.center)
    max_dist = correct.diagonal
    if max_dist == 0:
        return CENTER_WEIGHT if center_dist == 0 else 0.0
    return max(0.0, 1 - center_dist / max_dist) * CENTER_WEIGHT

def _reference_centers(definition: CharacterDefinition) -> List[Point]:
    centers = []
    for stroke in definition.stroke_order:
        box = bounding_box([stroke])
        if box is not None:
            centers.append(box.center)
    return centers

def _user_centers(normalized: Sequence[UserStroke]) -> List[Point]:
    centers = []
    for stroke in normalized:
        if not stroke.points:
            continue
        # Already canonical; framed against a 300x300 surface, not the reference extent
        framed = stroke.model_copy(update={"points": normalize_points(stroke.points, CANONICAL_SIZE, CANONICAL_SIZE)})
        box = bounding_box([framed])
        if box is not None:
            centers.append(box.center)
    return centers

def layout_component(definition: CharacterDefinition, normalized: Sequence[UserStroke]) -> float:
    if len(definition.stroke_order) < 2 or len(normalized) < 2:
        return BASELINE

    correct_centers = _reference_centers(definition)
    user_centers = _user_centers(normalized)
    if len(correct_centers) != len(user_centers) or not correct_centers:
        return BASELINE

    total = 0.0
    for c, u in zip(correct_centers, user_centers):
        total += max(0.0, 1 - distance(c, u) / CANONICAL_DIAGONAL)
    return total / len(correct_centers) * LAYOUT_WEIGHT

def spacing_component(definition: CharacterDefinition, normalized: Sequence[UserStroke]) -> float:
    ref = definition.stroke_order
    if len(ref) < 2 or len(normalized) < 2:
        return BASELINE

    total = 0.0
    counted = 0
    for i in range(min(len(ref), len(normalized)) - 1):
        user_a = normalized[i].points
        user_b = normalized[i + 1].points
        if not user_a or not user_b:
            continue

        correct_gap = distance(ref[i].end_point, ref[i + 1].start_point)
        if correct_gap <= 0:
            # Strokes that join in the reference give no gap to compare against
            continue
        user_gap = distance(user_a[-1], user_b[0])
        total += symmetric_ratio(user_gap, correct_gap)
        counted += 1

    if counted == 0:
        return BASELINE
    return total / counted * SPACING_WEIGHT

def calculate_balance_score(
    definition: CharacterDefinition,
    user_strokes: List[UserStroke],
    canvas_width: float,
    canvas_height: float,
) -> float:
    """
    Balance out of 50: placement of the whole character (20), placement of
    each stroke (15) and the gaps between consecutive strokes (15).
    """
    normalized = normalize_strokes(user_strokes, canvas_width, canvas_height)

    center = center_component(definition, normalized)
    layout = layout_component(definition, normalized)
    spacing = spacing_component(definition, normalized)
    logger.debug("balance %s: center=%.3f layout=%.3f spacing=%.3f", definition.id, center, layout, spacing)

    return max(0.0, min(BALANCE_MAX, center + layout + spacing))
