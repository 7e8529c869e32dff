"""
Tests for the JSON-file progress store.
"""

import os
from datetime import datetime

import pytest
from pydantic import ValidationError

from app.writing.ingestion.models import Point, UserStroke
from app.writing.progress.models import PracticeMode, PracticeRecord
from app.writing.progress.storage import STORAGE_KEYS, ProgressStore
from app.writing.progress.tracker import apply_practice_result, create_initial_user_progress

WHEN = datetime(2024, 5, 4, 12, 30, 15)


def make_record(character_id="か", score=64):
    return PracticeRecord(
        character_id=character_id,
        practice_date=WHEN,
        mode=PracticeMode.BEAUTIFUL,
        score=score,
        shape_score=32,
        balance_score=score - 32,
        practice_time=42,
        stroke_data=[UserStroke(stroke_number=1, points=[Point(x=1.5, y=2.5)], timestamp=WHEN)],
    )


@pytest.fixture
def store(tmp_path):
    return ProgressStore(str(tmp_path / "data"))


class TestProgressStore:

    def test_nothing_stored(self, store):
        assert store.load_user_progress() is None
        assert store.load_practice_records() == []

    def test_user_progress_round_trip(self, store):
        progress = apply_practice_result(create_initial_user_progress(WHEN), make_record())
        store.save_user_progress(progress)
        assert store.load_user_progress() == progress

    def test_records_append(self, store):
        store.save_practice_record(make_record("か"))
        store.save_practice_record(make_record("き", score=50))
        records = store.load_practice_records()
        assert [r.character_id for r in records] == ["か", "き"]
        assert records[0].stroke_data[0].timestamp == WHEN
        assert records[0] == make_record("か")

    def test_files_named_by_key(self, store):
        store.save_practice_record(make_record())
        assert os.path.exists(os.path.join(store.data_dir, f"{STORAGE_KEYS['PRACTICE_RECORDS']}.json"))

    def test_corrupt_progress_degrades_to_none(self, store):
        os.makedirs(store.data_dir)
        with open(os.path.join(store.data_dir, "jwm_user_progress.json"), "w") as f:
            f.write("{not json")
        assert store.load_user_progress() is None

    def test_corrupt_records_degrade_to_empty(self, store):
        os.makedirs(store.data_dir)
        with open(os.path.join(store.data_dir, "jwm_practice_records.json"), "w") as f:
            f.write('[{"character_id": 1}]')
        assert store.load_practice_records() == []

    def test_append_refuses_to_overwrite_unreadable_history(self, store):
        for ch in ("か", "き", "く"):
            store.save_practice_record(make_record(ch))
        path = os.path.join(store.data_dir, "jwm_practice_records.json")
        with open(path, "rb") as f:
            truncated = f.read()[:-5]
        with open(path, "wb") as f:
            f.write(truncated)

        with pytest.raises(ValidationError):
            store.save_practice_record(make_record("え"))
        with open(path, "rb") as f:
            assert f.read() == truncated

    def test_save_leaves_no_temp_files(self, store):
        store.save_practice_record(make_record("か"))
        store.save_practice_record(make_record("き"))
        store.save_user_progress(create_initial_user_progress(WHEN))
        assert sorted(os.listdir(store.data_dir)) == ["jwm_practice_records.json", "jwm_user_progress.json"]

    def test_failed_write_keeps_previous_file(self, store, monkeypatch):
        store.save_practice_record(make_record("か"))
        path = os.path.join(store.data_dir, "jwm_practice_records.json")
        with open(path, "rb") as f:
            before = f.read()

        def fail(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr(os, "replace", fail)
        with pytest.raises(OSError):
            store.save_practice_record(make_record("き"))
        monkeypatch.undo()

        with open(path, "rb") as f:
            assert f.read() == before
        assert os.listdir(store.data_dir) == ["jwm_practice_records.json"]
