from enum import Enum, IntEnum
from datetime import datetime
from typing import Dict, List, Optional
from pydantic import BaseModel, Field
from ..ingestion.models import UserStroke

class PracticeMode(str, Enum):
    STROKE_ORDER = "strokeOrder"
    BEAUTIFUL = "beautiful"
    SPEED = "speed"

class MasteryLevel(IntEnum):
    BEGINNER = 0      # score < 50
    INTERMEDIATE = 1  # 50-59
    ADVANCED = 2      # 60+

class PracticeRecord(BaseModel):
    character_id: str
    practice_date: datetime
    mode: PracticeMode
    score: int = Field(ge=0, le=100)
    stroke_order_score: int = Field(default=0, ge=0, le=40)  # 0 while stroke order is not scored
    shape_score: int = Field(ge=0, le=50)
    balance_score: int = Field(ge=0, le=50)
    practice_time: int = Field(default=0, ge=0)  # seconds
    stroke_data: List[UserStroke] = []

class CharacterProgress(BaseModel):
    mastery_level: MasteryLevel = MasteryLevel.BEGINNER
    best_score: int = 0
    practice_count: int = 0
    last_practice_date: Optional[datetime] = None
    average_score: float = 0.0
    stroke_order_accuracy: float = 0.0  # 0-1

class UserProgress(BaseModel):
    character_progress: Dict[str, CharacterProgress] = {}
    total_practice_time: int = 0  # seconds
    total_practice_count: int = 0
    consecutive_days: int = 0
    last_practice_date: Optional[datetime] = None
    first_launch_date: datetime
