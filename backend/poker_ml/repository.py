# poker_ml/repository.py
import os
import json
import logging
import tempfile
from typing import List
from .config import DATA_FILE, MAX_RECORDS
from .models_entity import Observation

logger = logging.getLogger(__name__)


class ObservationRepository:
    """Bounded, insertion-ordered log of observations backed by one JSON file.

    Every call goes back to disk; nothing is cached between requests.
    There is no locking, so two concurrent writers race and the last
    ``persist`` wins.
    """

    def __init__(self, data_file: str | None = None, max_records: int = MAX_RECORDS):
        if max_records < 1:
            raise ValueError("max_records must be at least 1")
        self._data_file = data_file or DATA_FILE
        self._max_records = max_records

    @property
    def data_file(self) -> str:
        return self._data_file

    def load(self) -> List[Observation]:
        if not os.path.exists(self._data_file):
            return []
        with open(self._data_file, encoding="utf-8") as f:
            rows = json.load(f)
        return [Observation.from_dict(r) for r in rows]

    def append(self, observation: Observation) -> List[Observation]:
        """Append one record, evicting the oldest ones past capacity.

        Returns the sequence as persisted.
        """
        records = self.load()
        records.append(observation)
        if len(records) > self._max_records:
            evicted = len(records) - self._max_records
            logger.info(f"Store over capacity, evicting {evicted} oldest record(s)")
            records = records[evicted:]
        self.persist(records)
        return records

    def persist(self, records: List[Observation]) -> None:
        directory = os.path.dirname(os.path.abspath(self._data_file))
        os.makedirs(directory, exist_ok=True)
        # write next to the target then swap it in
        fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump([r.to_dict() for r in records], f, ensure_ascii=False)
            # mkstemp creates 0600, keep the existing mode or the usual 0644
            mode = (
                os.stat(self._data_file).st_mode & 0o777
                if os.path.exists(self._data_file)
                else 0o644
            )
            os.chmod(tmp_path, mode)
            os.replace(tmp_path, self._data_file)
        except Exception:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise
        logger.debug(f"Persisted {len(records)} records to {self._data_file}")
