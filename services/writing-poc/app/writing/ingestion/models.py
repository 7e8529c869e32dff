from pydantic import BaseModel, Field, model_validator
from typing import List, Literal, Optional
from datetime import datetime

LessonType = Literal["hiragana", "katakana"]

class Point(BaseModel):
    x: float
    y: float

class Stroke(BaseModel):
    """Reference stroke, authored in the canonical 300x300 space."""
    stroke_number: int
    points: List[Point] = Field(min_length=1)
    start_point: Optional[Point] = None
    end_point: Optional[Point] = None

    @model_validator(mode="after")
    def _endpoints_match_points(self):
        if self.start_point is None:
            self.start_point = self.points[0]
        if self.end_point is None:
            self.end_point = self.points[-1]
        if self.start_point != self.points[0] or self.end_point != self.points[-1]:
            raise ValueError(f"stroke {self.stroke_number}: start/end points must be the first/last of points")
        return self

class CharacterDefinition(BaseModel):
    id: str
    character: str
    lesson_type: LessonType
    stroke_order: List[Stroke] = Field(min_length=1)
    total_strokes: Optional[int] = None

    @model_validator(mode="after")
    def _strokes_are_contiguous(self):
        if self.total_strokes is None:
            self.total_strokes = len(self.stroke_order)
        if self.total_strokes != len(self.stroke_order):
            raise ValueError(f"total_strokes={self.total_strokes} but {len(self.stroke_order)} strokes given")
        for i, stroke in enumerate(self.stroke_order):
            if stroke.stroke_number != i + 1:
                raise ValueError(f"stroke at position {i} is numbered {stroke.stroke_number}, expected {i + 1}")
        return self

class UserStroke(BaseModel):
    """A completed stroke as captured, in capture-surface pixels."""
    stroke_number: int
    points: List[Point]
    timestamp: Optional[datetime] = None
    pressure: Optional[float] = None  # Touch devices only

class ScoreResult(BaseModel):
    total_score: int
    shape_score: int
    balance_score: int

class ScoreRequest(BaseModel):
    lesson_type: LessonType
    character: str
    strokes: List[UserStroke]
    canvas_width: float = Field(gt=0)
    canvas_height: float = Field(gt=0)
