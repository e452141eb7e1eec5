"""
Provides a simple in-memory implementation of the data store,
for testing and development purposes.
"""

from .store import MemoryStore, UserRecord, TicketRecord
