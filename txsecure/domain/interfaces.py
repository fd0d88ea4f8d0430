"""Domain interfaces for persistence stores."""
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class RecordStore(ABC):
    """Persistence port for encrypted transaction records (wire form)."""

    @abstractmethod
    def put_record(self, record: Dict[str, Any]) -> Dict[str, Any]: pass
    @abstractmethod
    def get_record(self, record_id: str) -> Optional[Dict[str, Any]]: pass
