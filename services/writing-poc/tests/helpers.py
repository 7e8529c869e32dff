"""
Builders shared by the scoring tests.
"""

from app.writing.ingestion.models import CharacterDefinition, Point, Stroke, UserStroke


def make_definition(*strokes, char_id="test", lesson_type="hiragana"):
    """Build a reference character from lists of (x, y) tuples."""
    return CharacterDefinition(
        id=char_id,
        character=char_id,
        lesson_type=lesson_type,
        stroke_order=[
            Stroke(stroke_number=i + 1, points=[Point(x=x, y=y) for x, y in pts])
            for i, pts in enumerate(strokes)
        ],
    )


def user_strokes_from(definition, scale=1.0, dx=0.0, dy=0.0):
    """User strokes tracing the reference, mapped to pixels by scale + translation."""
    return [
        UserStroke(
            stroke_number=s.stroke_number,
            points=[Point(x=p.x * scale + dx, y=p.y * scale + dy) for p in s.points],
        )
        for s in definition.stroke_order
    ]
