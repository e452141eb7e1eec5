"""
This module hosts the abstract base class for all persistent storage.
This class is used to define the "contract" that all storage backends
must adhere to. Any class that implements this interface is assumed to
provide a persistent data store.

Records returned by a store expose the attributes of the
:class:`~tambula.models.User` and :class:`~tambula.models.Ticket`
models, whether or not they are backed by the database.
"""

from abc import ABC, abstractmethod
from typing import Optional, List, Dict


class UniqueConstraintError(Exception):
    """
    Raised when an insert would duplicate a value that must be unique.

    :ivar fields: Maps each offending field to a message.
    """

    def __init__(self, fields: Dict[str, str]):
        super().__init__(fields)
        self.fields = fields


class PersistentStore(ABC):
    """The abstract store interface."""

    async def open(self):
        """Prepares the store for use. Called once on startup."""

    async def close(self):
        """Releases any resources held by the store."""

    @abstractmethod
    async def add_user(self, username: str, password_hash: str, email: str, name: str):
        """
        Adds a user to the system.

        :raises UniqueConstraintError: If the username or email is taken.
        """

    @abstractmethod
    async def get_user(self, *, username: Optional[str] = None, email: Optional[str] = None):
        """
        Gets the first user matching any of the given fields.
        """

    @abstractmethod
    async def add_ticket(self, ticket_id: str, grid: List[List]):
        """
        Adds a ticket to the system.

        :raises UniqueConstraintError: If the ticket id is taken.
        """

    @abstractmethod
    async def get_tickets(self, ticket_id: str, *, skip: int = 0, limit: Optional[int] = None) -> List:
        """Gets the tickets with the given id, skipping and limiting the results."""

    @abstractmethod
    async def count_tickets(self) -> int:
        """Counts all the tickets in the store."""
