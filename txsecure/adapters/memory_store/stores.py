"""Memory Store Implementations."""
import copy
import logging
import threading
from typing import Any, Dict, Optional

from txsecure.domain.interfaces import RecordStore

logger = logging.getLogger(__name__)


class MemoryRecordStore(RecordStore):
    """Process-local record store for development and tests."""

    def __init__(self):
        self._records: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.Lock()

    def put_record(self, record: Dict[str, Any]) -> Dict[str, Any]:
        with self._lock:
            if record["id"] in self._records:
                raise ValueError(f"Record {record['id']} already exists")
            self._records[record["id"]] = copy.deepcopy(record)
        logger.debug("Stored record %s", record["id"])
        return copy.deepcopy(record)

    def get_record(self, record_id: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            data = self._records.get(record_id)
        return copy.deepcopy(data) if data is not None else None
