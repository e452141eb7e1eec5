"""
Provides the database implementation of the data store, backed by tortoise-orm.
"""

from .store import DatabaseStore
