"""
Progress transitions.

Every function here is pure: the progress value passed in is never modified,
a new one is returned. Persistence lives in storage.py.
"""
from datetime import date, datetime
from typing import List, Optional
from ..ingestion.models import ScoreResult, UserStroke
from ..judgment.stroke_order import STROKE_ORDER_MAX
from .models import CharacterProgress, MasteryLevel, PracticeMode, PracticeRecord, UserProgress

ADVANCED_THRESHOLD = 60
INTERMEDIATE_THRESHOLD = 50

def mastery_for_score(score: float) -> MasteryLevel:
    if score >= ADVANCED_THRESHOLD:
        return MasteryLevel.ADVANCED
    if score >= INTERMEDIATE_THRESHOLD:
        return MasteryLevel.INTERMEDIATE
    return MasteryLevel.BEGINNER

def update_streak(consecutive_days: int, last_practice: Optional[datetime], today: date) -> int:
    """
    Consecutive-day count after practicing on `today`.
    Same day keeps the count, the next day extends it, any longer gap restarts at 1.
    """
    if last_practice is None:
        return 1
    gap = (today - last_practice.date()).days
    if gap == 0:
        return consecutive_days
    if gap == 1:
        return consecutive_days + 1
    return 1

def create_initial_user_progress(now: datetime) -> UserProgress:
    return UserProgress(first_launch_date=now)

def build_practice_record(
    character_id: str,
    score: ScoreResult,
    strokes: List[UserStroke],
    mode: PracticeMode,
    practice_time: int,
    practice_date: datetime,
    stroke_order_score: int = 0,
) -> PracticeRecord:
    return PracticeRecord(
        character_id=character_id,
        practice_date=practice_date,
        mode=mode,
        score=score.total_score,
        stroke_order_score=stroke_order_score,
        shape_score=score.shape_score,
        balance_score=score.balance_score,
        practice_time=practice_time,
        stroke_data=strokes,
    )

def _apply_to_character(current: Optional[CharacterProgress], record: PracticeRecord) -> CharacterProgress:
    prev = current or CharacterProgress()
    count = prev.practice_count + 1
    return CharacterProgress(
        mastery_level=mastery_for_score(record.score),  # latest attempt, not best
        best_score=max(prev.best_score, record.score),
        practice_count=count,
        last_practice_date=record.practice_date,
        average_score=(prev.average_score * (count - 1) + record.score) / count,
        stroke_order_accuracy=record.stroke_order_score / STROKE_ORDER_MAX,
    )

def apply_practice_result(progress: UserProgress, record: PracticeRecord) -> UserProgress:
    characters = dict(progress.character_progress)
    characters[record.character_id] = _apply_to_character(characters.get(record.character_id), record)

    return progress.model_copy(update={
        "character_progress": characters,
        "total_practice_time": progress.total_practice_time + record.practice_time,
        "total_practice_count": progress.total_practice_count + 1,
        "consecutive_days": update_streak(
            progress.consecutive_days, progress.last_practice_date, record.practice_date.date()
        ),
        "last_practice_date": record.practice_date,
    })
