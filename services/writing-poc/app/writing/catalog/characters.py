import logging
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional
from ..ingestion.models import CharacterDefinition, LessonType, Stroke
from .generator import StrokeTemplate, generate_hiragana_strokes, generate_katakana_strokes

logger = logging.getLogger("catalog")

# Gojuon order, 46 glyphs each
HIRAGANA_LIST = [
    "あ", "い", "う", "え", "お",
    "か", "き", "く", "け", "こ",
    "さ", "し", "す", "せ", "そ",
    "た", "ち", "つ", "て", "と",
    "な", "に", "ぬ", "ね", "の",
    "は", "ひ", "ふ", "へ", "ほ",
    "ま", "み", "む", "め", "も",
    "や", "ゆ", "よ",
    "ら", "り", "る", "れ", "ろ",
    "わ", "を", "ん",
]

KATAKANA_LIST = [
    "ア", "イ", "ウ", "エ", "オ",
    "カ", "キ", "ク", "ケ", "コ",
    "サ", "シ", "ス", "セ", "ソ",
    "タ", "チ", "ツ", "テ", "ト",
    "ナ", "ニ", "ヌ", "ネ", "ノ",
    "ハ", "ヒ", "フ", "ヘ", "ホ",
    "マ", "ミ", "ム", "メ", "モ",
    "ヤ", "ユ", "ヨ",
    "ラ", "リ", "ル", "レ", "ロ",
    "ワ", "ヲ", "ン",
]

def create_character_data(character: str, lesson_type: LessonType, strokes: List[StrokeTemplate]) -> CharacterDefinition:
    """Numbers the strokes 1..n; start/end points come from each stroke's points."""
    return CharacterDefinition(
        id=character,
        character=character,
        lesson_type=lesson_type,
        stroke_order=[Stroke(stroke_number=i + 1, points=pts) for i, pts in enumerate(strokes)],
    )

def _build_catalog() -> Mapping[str, CharacterDefinition]:
    table: Dict[str, CharacterDefinition] = {}
    for ch in HIRAGANA_LIST:
        table[ch] = create_character_data(ch, "hiragana", generate_hiragana_strokes(ch))
    for ch in KATAKANA_LIST:
        table[ch] = create_character_data(ch, "katakana", generate_katakana_strokes(ch))
    logger.info("Built character catalog (%d glyphs)", len(table))
    return MappingProxyType(table)

CHARACTERS = _build_catalog()

def get_character_data(character: str, lesson_type: LessonType) -> Optional[CharacterDefinition]:
    definition = CHARACTERS.get(character)
    if definition is None or definition.lesson_type != lesson_type:
        return None
    return definition

def get_all_characters() -> List[CharacterDefinition]:
    return list(CHARACTERS.values())
