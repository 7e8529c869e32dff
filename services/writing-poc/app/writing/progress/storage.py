import os
import logging
import tempfile
from typing import List, Optional
from pydantic import TypeAdapter, ValidationError
from .models import PracticeRecord, UserProgress

logger = logging.getLogger("progress.storage")

# One JSON file per key
STORAGE_KEYS = {
    "USER_PROGRESS": "jwm_user_progress",
    "PRACTICE_RECORDS": "jwm_practice_records",
}

_records_adapter = TypeAdapter(List[PracticeRecord])

class ProgressStore:
    """
    Key/value JSON persistence for user progress and the practice history.
    Reads degrade to "nothing stored" on a missing or unreadable file; writes raise.
    """
    def __init__(self, data_dir: str):
        self.data_dir = data_dir

    def _path(self, key: str) -> str:
        return os.path.join(self.data_dir, f"{STORAGE_KEYS[key]}.json")

    def _write(self, key: str, payload: bytes) -> None:
        # The previous file stays intact until os.replace
        os.makedirs(self.data_dir, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(prefix=f".{STORAGE_KEYS[key]}.", suffix=".tmp", dir=self.data_dir)
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(payload)
            os.replace(tmp_path, self._path(key))
        except BaseException:
            os.unlink(tmp_path)
            raise

    def _read(self, key: str) -> Optional[bytes]:
        path = self._path(key)
        if not os.path.exists(path):
            return None
        with open(path, "rb") as f:
            return f.read()

    def save_user_progress(self, progress: UserProgress) -> None:
        self._write("USER_PROGRESS", progress.model_dump_json().encode("utf-8"))

    def load_user_progress(self) -> Optional[UserProgress]:
        try:
            data = self._read("USER_PROGRESS")
            if not data:
                return None
            return UserProgress.model_validate_json(data)
        except (OSError, ValidationError) as e:
            logger.exception("Failed to load user progress: %s", e)
            return None

    def _read_records(self) -> List[PracticeRecord]:
        data = self._read("PRACTICE_RECORDS")
        if not data:
            return []
        return _records_adapter.validate_json(data)

    def save_practice_record(self, record: PracticeRecord) -> None:
        """
        Appends to the history. An existing history that does not parse raises
        ValidationError and is left on disk as is.
        """
        records = self._read_records()
        records.append(record)
        self._write("PRACTICE_RECORDS", _records_adapter.dump_json(records))

    def load_practice_records(self) -> List[PracticeRecord]:
        try:
            return self._read_records()
        except (OSError, ValidationError) as e:
            logger.exception("Failed to load practice records: %s", e)
            return []
