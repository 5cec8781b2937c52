from .base import BaseRecordStore
from .factory import create_record_store, get_record_store, reset_record_store
from .memory import InMemoryRecordStore

__all__ = [
    "BaseRecordStore",
    "InMemoryRecordStore",
    "create_record_store",
    "get_record_store",
    "reset_record_store",
]
