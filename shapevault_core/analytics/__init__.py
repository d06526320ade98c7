"""
Analytics Layer
===============

Bounded Context: Derived-value cache and its synchronization.

Responsibilities:
- PropertyStore: last-pushed scalars per shape id, aggregate statistics
- StoreSyncObserver: keeps the store current via shape notifications
"""

from shapevault_core.analytics.store import PropertyStore, StoreStatistics
from shapevault_core.analytics.sync import StoreSyncObserver

__all__ = [
    "PropertyStore",
    "StoreStatistics",
    "StoreSyncObserver",
]
