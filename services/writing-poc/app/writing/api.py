import logging
from datetime import datetime
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field, ValidationError
from typing import List, Optional
from ..config import get_data_dir
from .ingestion.models import CharacterDefinition, LessonType, ScoreRequest, ScoreResult
from .catalog.characters import get_all_characters, get_character_data
from .judgment.engine import compute_score
from .judgment.stroke_order import calculate_stroke_order_score
from .stroke_engine.normalization import InvalidDimensions
from .progress.models import CharacterProgress, PracticeMode, PracticeRecord, UserProgress
from .progress.storage import ProgressStore
from .progress.tracker import apply_practice_result, build_practice_record, create_initial_user_progress

logger = logging.getLogger("writing.api")

router = APIRouter(prefix="/api/v1/writing", tags=["writing"])

def get_store() -> ProgressStore:
    return ProgressStore(get_data_dir())

class CharacterSummary(BaseModel):
    id: str
    character: str
    lesson_type: LessonType
    total_strokes: int

class StrokeOrderResponse(BaseModel):
    stroke_order_score: int

class PracticeRequest(ScoreRequest):
    mode: PracticeMode = PracticeMode.BEAUTIFUL
    practice_time: int = Field(default=0, ge=0)  # seconds

class PracticeResponse(BaseModel):
    score: ScoreResult
    character_progress: CharacterProgress
    consecutive_days: int

def _lookup(lesson_type: LessonType, character: str) -> CharacterDefinition:
    definition = get_character_data(character, lesson_type)
    if definition is None:
        raise HTTPException(status_code=404, detail=f"Unknown {lesson_type} character: {character}")
    return definition

@router.get("/characters", response_model=List[CharacterSummary])
async def list_characters(lesson_type: Optional[LessonType] = None):
    return [
        CharacterSummary(id=c.id, character=c.character, lesson_type=c.lesson_type, total_strokes=c.total_strokes)
        for c in get_all_characters()
        if lesson_type is None or c.lesson_type == lesson_type
    ]

@router.get("/characters/{lesson_type}/{character}", response_model=CharacterDefinition)
async def get_character(lesson_type: LessonType, character: str):
    """
    Reference stroke data for one glyph, in the canonical 300x300 space.
    """
    return _lookup(lesson_type, character)

@router.post("/score", response_model=ScoreResult)
async def score_drawing(request: ScoreRequest):
    """
    Scores the user's strokes against the reference character (shape 50 + balance 50).
    """
    definition = _lookup(request.lesson_type, request.character)
    try:
        return compute_score(definition, request.strokes, request.canvas_width, request.canvas_height)
    except InvalidDimensions as e:
        raise HTTPException(status_code=422, detail=str(e))

@router.post("/stroke-order", response_model=StrokeOrderResponse)
async def score_stroke_order(request: ScoreRequest):
    """
    Legacy stroke-order score (0-40). Reported on its own, never added to the total.
    """
    definition = _lookup(request.lesson_type, request.character)
    try:
        value = calculate_stroke_order_score(definition, request.strokes, request.canvas_width, request.canvas_height)
    except InvalidDimensions as e:
        raise HTTPException(status_code=422, detail=str(e))
    return StrokeOrderResponse(stroke_order_score=value)

@router.post("/practice", response_model=PracticeResponse)
def record_practice(request: PracticeRequest, store: ProgressStore = Depends(get_store)):
    """
    Scores a practice attempt, appends it to the history and folds it into the user's progress.
    """
    if not request.strokes:
        logger.warning("Rejected empty practice for %s", request.character)
        raise HTTPException(status_code=400, detail="Draw the character before scoring")

    definition = _lookup(request.lesson_type, request.character)
    try:
        score = compute_score(definition, request.strokes, request.canvas_width, request.canvas_height)
    except InvalidDimensions as e:
        raise HTTPException(status_code=422, detail=str(e))

    now = datetime.now()
    record = build_practice_record(
        character_id=definition.id,
        score=score,
        strokes=request.strokes,
        mode=request.mode,
        practice_time=request.practice_time,
        practice_date=now,
    )
    try:
        store.save_practice_record(record)
    except ValidationError:
        logger.exception("Practice history unreadable, %s not recorded", definition.id)
        raise HTTPException(status_code=500, detail="Practice history is unreadable; attempt not recorded")

    progress = store.load_user_progress() or create_initial_user_progress(now)
    progress = apply_practice_result(progress, record)
    store.save_user_progress(progress)
    logger.info("Recorded practice %s: total=%d streak=%d", definition.id, score.total_score, progress.consecutive_days)

    return PracticeResponse(
        score=score,
        character_progress=progress.character_progress[definition.id],
        consecutive_days=progress.consecutive_days,
    )

@router.get("/progress", response_model=UserProgress)
def get_progress(store: ProgressStore = Depends(get_store)):
    return store.load_user_progress() or create_initial_user_progress(datetime.now())

@router.get("/records", response_model=List[PracticeRecord])
def list_records(character_id: Optional[str] = None, store: ProgressStore = Depends(get_store)):
    records = store.load_practice_records()
    if character_id is not None:
        records = [r for r in records if r.character_id == character_id]
    return records
