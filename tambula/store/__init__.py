"""
Handles all the persistence for the application.
Currently has two implementations: in-memory and
database (anything tortoise-orm can connect to).
"""

from .database import DatabaseStore
from .memory import MemoryStore
from .persistent_store import PersistentStore, UniqueConstraintError

MEMORY_URL = "memory://"


def create_store(db_url: str) -> PersistentStore:
    """Picks the store implementation for the given url."""
    if db_url == MEMORY_URL:
        return MemoryStore()
    return DatabaseStore(db_url)
