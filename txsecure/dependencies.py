"""Dependency Injection Module."""
import logging
from typing import Optional

from txsecure.adapters.memory_store.stores import MemoryRecordStore
from txsecure.domain.crypto.errors import ConfigurationError
from txsecure.domain.interfaces import RecordStore
from txsecure.settings import settings

logger = logging.getLogger(__name__)

_record_store_instance: Optional[RecordStore] = None


def get_record_store() -> RecordStore:
    """Process-wide record store."""
    global _record_store_instance
    if _record_store_instance is None:
        _record_store_instance = MemoryRecordStore()
    return _record_store_instance


def get_master_key() -> str:
    """Return the configured master key hex.

    Raises:
        ConfigurationError: If MASTER_KEY_HEX is not configured.
    """
    master_key = settings.MASTER_KEY_HEX
    if not master_key:
        logger.error("MASTER_KEY_HEX is not configured")
        raise ConfigurationError("MASTER_KEY_HEX not configured on server")
    return master_key
