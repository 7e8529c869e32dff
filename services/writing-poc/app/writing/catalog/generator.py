"""
Reference stroke templates for the kana catalog.
Simplified strokes laid out around the middle of the 300x300 canonical square;
glyphs without a hand-authored template fall back to two vertical strokes.
"""
from typing import Dict, List, Tuple
from ..ingestion.models import Point

CENTER_X = 150
CENTER_Y = 150
SIZE = 100

StrokeTemplate = List[Point]

def _pts(*coords: Tuple[float, float]) -> StrokeTemplate:
    return [Point(x=x, y=y) for x, y in coords]

def simple_stroke(start_x: float, start_y: float, end_x: float, end_y: float) -> StrokeTemplate:
    return _pts((start_x, start_y), (end_x, end_y))

def _default_strokes() -> List[StrokeTemplate]:
    return [
        simple_stroke(CENTER_X - SIZE * 0.3, CENTER_Y - SIZE, CENTER_X - SIZE * 0.3, CENTER_Y + SIZE),
        simple_stroke(CENTER_X + SIZE * 0.3, CENTER_Y - SIZE, CENTER_X + SIZE * 0.3, CENTER_Y + SIZE),
    ]

def _hook_stroke(tail: bool) -> StrokeTemplate:
    # Shared body of う/え/ウ: down-left curve, optionally swinging back right
    pts = [
        (CENTER_X, CENTER_Y - SIZE * 0.3),
        (CENTER_X - SIZE * 0.2, CENTER_Y),
        (CENTER_X - SIZE * 0.3, CENTER_Y + SIZE * 0.3),
    ]
    if tail:
        pts.append((CENTER_X, CENTER_Y + SIZE * 0.6))
    return _pts(*pts)

HIRAGANA_TEMPLATES: Dict[str, List[StrokeTemplate]] = {
    "あ": [
        _pts((100, 50), (100, 120), (100, 180)),
        _pts((80, 100), (120, 100)),
        _pts((100, 140), (100, 200), (80, 220)),
    ],
    "い": [
        _pts((80, 50), (80, 100), (80, 150)),
        _pts((120, 70), (120, 130), (120, 200)),
    ],
    "う": [
        simple_stroke(CENTER_X, CENTER_Y - SIZE, CENTER_X, CENTER_Y - SIZE * 0.3),
        _hook_stroke(tail=True),
    ],
    "え": [
        simple_stroke(CENTER_X, CENTER_Y - SIZE, CENTER_X, CENTER_Y - SIZE * 0.3),
        _hook_stroke(tail=True),
        simple_stroke(CENTER_X + SIZE * 0.2, CENTER_Y, CENTER_X + SIZE * 0.4, CENTER_Y + SIZE * 0.2),
    ],
    "お": [
        simple_stroke(CENTER_X, CENTER_Y - SIZE, CENTER_X, CENTER_Y + SIZE * 0.2),
        simple_stroke(CENTER_X - SIZE * 0.3, CENTER_Y, CENTER_X + SIZE * 0.3, CENTER_Y),
        simple_stroke(CENTER_X, CENTER_Y + SIZE * 0.2, CENTER_X - SIZE * 0.2, CENTER_Y + SIZE * 0.8),
        simple_stroke(CENTER_X + SIZE * 0.2, CENTER_Y + SIZE * 0.4, CENTER_X + SIZE * 0.4, CENTER_Y + SIZE * 0.6),
    ],
}

KATAKANA_TEMPLATES: Dict[str, List[StrokeTemplate]] = {
    "ア": [
        _pts((80, 50), (120, 50)),
        _pts((100, 50), (100, 200)),
    ],
    "イ": [
        _pts((80, 50), (80, 150)),
        _pts((120, 70), (120, 200)),
    ],
    "ウ": [
        simple_stroke(CENTER_X, CENTER_Y - SIZE, CENTER_X, CENTER_Y - SIZE * 0.3),
        _hook_stroke(tail=False),
    ],
    "エ": [
        simple_stroke(CENTER_X, CENTER_Y - SIZE, CENTER_X, CENTER_Y + SIZE),
        simple_stroke(CENTER_X - SIZE * 0.3, CENTER_Y - SIZE * 0.3, CENTER_X + SIZE * 0.3, CENTER_Y - SIZE * 0.3),
        simple_stroke(CENTER_X - SIZE * 0.3, CENTER_Y + SIZE * 0.3, CENTER_X + SIZE * 0.3, CENTER_Y + SIZE * 0.3),
    ],
    "オ": [
        simple_stroke(CENTER_X, CENTER_Y - SIZE, CENTER_X, CENTER_Y + SIZE),
        simple_stroke(CENTER_X - SIZE * 0.3, CENTER_Y - SIZE * 0.3, CENTER_X + SIZE * 0.3, CENTER_Y - SIZE * 0.3),
        simple_stroke(CENTER_X - SIZE * 0.3, CENTER_Y + SIZE * 0.3, CENTER_X + SIZE * 0.3, CENTER_Y + SIZE * 0.3),
        simple_stroke(CENTER_X + SIZE * 0.2, CENTER_Y, CENTER_X + SIZE * 0.4, CENTER_Y + SIZE * 0.2),
    ],
}

def generate_hiragana_strokes(character: str) -> List[StrokeTemplate]:
    return HIRAGANA_TEMPLATES.get(character) or _default_strokes()

def generate_katakana_strokes(character: str) -> List[StrokeTemplate]:
    return KATAKANA_TEMPLATES.get(character) or _default_strokes()
