"""
Tests for the balance score (center 20 + per-stroke layout 15 + spacing 15).
"""

import pytest

from app.writing.ingestion.models import Point, UserStroke
from app.writing.judgment.balance import (
    BASELINE,
    calculate_balance_score,
    center_component,
    layout_component,
    spacing_component,
)

from helpers import make_definition, user_strokes_from


class TestBalanceScore:

    def test_perfect_match_scores_50(self, three_stroke_char):
        strokes = user_strokes_from(three_stroke_char, scale=2)
        assert calculate_balance_score(three_stroke_char, strokes, 600, 600) == pytest.approx(50)

    def test_single_stroke_gets_two_baselines(self, single_stroke_char):
        strokes = user_strokes_from(single_stroke_char)
        assert calculate_balance_score(single_stroke_char, strokes, 300, 300) == pytest.approx(20 + 2 * BASELINE)

    @pytest.mark.parametrize("fixture", ["single_stroke_char", "three_stroke_char"])
    def test_empty_drawing_scores_baselines_only(self, fixture, request):
        definition = request.getfixturevalue(fixture)
        assert calculate_balance_score(definition, [], 300, 300) == pytest.approx(15)

    def test_joined_reference_strokes_fall_back_to_spacing_baseline(self):
        definition = make_definition([(0, 0), (100, 0)], [(100, 0), (100, 100)])
        strokes = user_strokes_from(definition)
        assert calculate_balance_score(definition, strokes, 300, 300) == pytest.approx(20 + 15 + BASELINE)

    def test_translation_degrades_center_until_floor(self, single_stroke_char):
        # Reference box is 100 wide and 0 tall, so its diagonal is 100
        scores = [
            calculate_balance_score(single_stroke_char, user_strokes_from(single_stroke_char, dx=dx), 300, 300)
            for dx in (0, 25, 50, 75, 100, 200)
        ]
        assert scores[0] > scores[1] > scores[2] > scores[3] > scores[4]
        assert scores[2] == pytest.approx(10 + 15)
        assert scores[4] == pytest.approx(15)
        assert scores[5] == pytest.approx(15)


class TestCenterComponent:

    def test_missing_user_box(self, single_stroke_char):
        assert center_component(single_stroke_char, []) == 0.0

    def test_zero_diagonal_reference(self):
        dot = make_definition([(150, 150)])
        same = [UserStroke(stroke_number=1, points=[Point(x=150, y=150)])]
        elsewhere = [UserStroke(stroke_number=1, points=[Point(x=151, y=150)])]
        assert center_component(dot, same) == 20
        assert center_component(dot, elsewhere) == 0.0


class TestLayoutComponent:

    def test_stroke_count_mismatch_uses_baseline(self, three_stroke_char):
        two = user_strokes_from(three_stroke_char)[:2]
        assert layout_component(three_stroke_char, two) == BASELINE

    def test_empty_user_stroke_is_skipped(self, three_stroke_char):
        strokes = user_strokes_from(three_stroke_char)
        strokes[1] = UserStroke(stroke_number=2, points=[])
        # 3 reference centers vs 2 user centers
        assert layout_component(three_stroke_char, strokes) == BASELINE

    def test_offset_strokes_lose_credit(self, three_stroke_char):
        shifted = user_strokes_from(three_stroke_char, dx=30, dy=40)
        # Every center moves by 50; canonical diagonal is 300 * sqrt(2)
        expected = (1 - 50 / (300 * 2 ** 0.5)) * 15
        assert layout_component(three_stroke_char, shifted) == pytest.approx(expected)


class TestSpacingComponent:

    def test_user_joined_strokes_score_zero(self):
        definition = make_definition([(0, 0), (100, 0)], [(150, 0), (250, 0)])
        joined = [
            UserStroke(stroke_number=1, points=[Point(x=0, y=0), Point(x=100, y=0)]),
            UserStroke(stroke_number=2, points=[Point(x=100, y=0), Point(x=200, y=0)]),
        ]
        assert spacing_component(definition, joined) == 0.0

    def test_double_gap_gets_half_credit(self):
        definition = make_definition([(0, 0), (100, 0)], [(150, 0), (250, 0)])
        wide = [
            UserStroke(stroke_number=1, points=[Point(x=0, y=0), Point(x=100, y=0)]),
            UserStroke(stroke_number=2, points=[Point(x=200, y=0), Point(x=300, y=0)]),
        ]
        assert spacing_component(definition, wide) == pytest.approx(7.5)

    def test_single_user_stroke_uses_baseline(self, three_stroke_char):
        assert spacing_component(three_stroke_char, user_strokes_from(three_stroke_char)[:1]) == BASELINE

    def test_no_evaluable_pair_uses_baseline(self, three_stroke_char):
        strokes = [UserStroke(stroke_number=i + 1, points=[]) for i in range(3)]
        assert spacing_component(three_stroke_char, strokes) == BASELINE
