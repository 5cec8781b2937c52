"""
工厂函数：根据 settings.RECORD_STORE_BACKEND 返回进程内唯一的存储实例。

新增存储后端只需：
  1. 新建 XxxRecordStore(BaseRecordStore) 类
  2. 在此处 _build_registry() 加一行
  不需要修改 services.py 或任何业务代码。

测试不要依赖这里的全局实例：直接构造 InMemoryRecordStore() 传给 services 即可。
"""

import logging
import threading
from typing import Optional

from django.conf import settings

from .base import BaseRecordStore

logger = logging.getLogger(__name__)

_store: Optional[BaseRecordStore] = None
_store_lock = threading.Lock()


def _build_registry() -> dict[str, type[BaseRecordStore]]:
    # 延迟导入，避免在 Django apps 就绪前触发 models import
    from .database import DatabaseRecordStore
    from .memory import InMemoryRecordStore

    return {
        "memory":   InMemoryRecordStore,
        "database": DatabaseRecordStore,
    }


def create_record_store(backend: str) -> BaseRecordStore:
    """
    按名字构造一个新的存储实例（不缓存）。

    Raises:
        ValueError: backend 未知
    """
    registry = _build_registry()
    store_cls = registry.get(backend)

    if store_cls is None:
        raise ValueError(
            f"Unknown RECORD_STORE_BACKEND: {backend!r}. "
            f"Known backends: {list(registry.keys())}"
        )

    return store_cls()


def get_record_store() -> BaseRecordStore:
    """
    从 settings.RECORD_STORE_BACKEND 读取后端（默认 "memory"），返回缓存的实例。

    内存后端首次创建时，如果 settings.SEED_DEMO_DATA 为真，会灌入 demo 患者。
    """
    global _store
    with _store_lock:
        if _store is None:
            backend = getattr(settings, "RECORD_STORE_BACKEND", "memory")
            store = create_record_store(backend)
            if backend == "memory" and getattr(settings, "SEED_DEMO_DATA", False):
                from ..seed import seed_demo_data
                seeded = seed_demo_data(store)
                logger.info("Seeded %d demo patients into the in-memory store", seeded)
            logger.info("Record store ready: backend=%s", backend)
            _store = store
        return _store


def reset_record_store() -> None:
    """丢弃缓存的实例，下次 get_record_store() 重新创建。"""
    global _store
    with _store_lock:
        _store = None
