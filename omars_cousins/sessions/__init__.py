"""Chat session management.

Responsibilities:
    - Ordered collection of named sessions, one selected at a time
    - Optimistic user messages and persona replies per submission
    - JSON persistence through a small key-value interface

Independent of NiceGUI; the UI only supplies a storage mapping.
"""

from omars_cousins.sessions.storage import KeyValueStore, MappingStorage, MemoryStorage
from omars_cousins.sessions.store import (
    ERROR_ANSWER,
    PRIMER,
    STORAGE_KEY,
    SessionStore,
    dump_sessions,
    load_sessions,
    new_session,
)

__all__ = [
    "ERROR_ANSWER",
    "PRIMER",
    "STORAGE_KEY",
    "KeyValueStore",
    "MappingStorage",
    "MemoryStorage",
    "SessionStore",
    "dump_sessions",
    "load_sessions",
    "new_session",
]
