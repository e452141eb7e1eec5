from itertools import count
from typing import Optional, Dict, List

from attr import dataclass

from tambula.store.persistent_store import PersistentStore, UniqueConstraintError


@dataclass
class UserRecord:
    id: int
    username: str
    password_hash: str
    email: str
    name: str


@dataclass
class TicketRecord:
    id: int
    ticket_id: str
    grid: List[List]


class MemoryStore(PersistentStore):
    """
    Emulates a database by doing all the operation in memory.
    """

    def __init__(self):
        self.users: Dict[int, UserRecord] = {}
        self.tickets: Dict[int, TicketRecord] = {}
        self._user_ids = count(1)
        self._ticket_ids = count(1)

    async def add_user(self, username, password_hash, email, name) -> UserRecord:
        errors = {}
        for user in self.users.values():
            if user.username == username:
                errors["username"] = "User with that item already exists!"
            if user.email == email:
                errors["email"] = "User with that item already exists!"

        if errors:
            raise UniqueConstraintError(errors)

        user = UserRecord(next(self._user_ids), username, password_hash, email, name)
        self.users[user.id] = user
        return user

    async def get_user(self, *, username=None, email=None) -> Optional[UserRecord]:
        for user in self.users.values():
            if (username is not None and user.username == username) or (email is not None and user.email == email):
                return user
        return None

    async def add_ticket(self, ticket_id, grid) -> TicketRecord:
        if any(ticket.ticket_id == ticket_id for ticket in self.tickets.values()):
            raise UniqueConstraintError({"ticket_id": "Ticket with that id already exists!"})

        ticket = TicketRecord(next(self._ticket_ids), ticket_id, grid)
        self.tickets[ticket.id] = ticket
        return ticket

    async def get_tickets(self, ticket_id, *, skip=0, limit=None) -> List[TicketRecord]:
        tickets = [ticket for ticket in self.tickets.values() if ticket.ticket_id == ticket_id]
        end = skip + limit if limit is not None else None
        return tickets[skip:end]

    async def count_tickets(self) -> int:
        return len(self.tickets)
