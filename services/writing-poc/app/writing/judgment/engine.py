import logging
import math
from typing import List
from ..ingestion.models import CharacterDefinition, ScoreResult, UserStroke
from ..stroke_engine.normalization import check_dimensions
from .shape import calculate_shape_score
from .balance import calculate_balance_score

logger = logging.getLogger("judgment.engine")

def round_half_up(value: float) -> int:
    # round() would send 12.5 to 12
    return int(math.floor(value + 0.5))

def compute_score(
    definition: CharacterDefinition,
    user_strokes: List[UserStroke],
    canvas_width: float,
    canvas_height: float,
) -> ScoreResult:
    """
    Scores a drawing against a reference character out of 100:
    shape (50) + balance (50).

    Stroke order is not used; see calculate_stroke_order_score.
    """
    check_dimensions(canvas_width, canvas_height)

    shape = calculate_shape_score(definition, user_strokes, canvas_width, canvas_height)
    balance = calculate_balance_score(definition, user_strokes, canvas_width, canvas_height)

    shape_score = round_half_up(shape)
    balance_score = round_half_up(balance)
    logger.debug("score %s: shape=%.3f balance=%.3f strokes=%d", definition.id, shape, balance, len(user_strokes))

    return ScoreResult(
        total_score=shape_score + balance_score,
        shape_score=shape_score,
        balance_score=balance_score,
    )
