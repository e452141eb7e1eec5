from typing import Optional, List

from tortoise import Tortoise, connections
from tortoise.exceptions import IntegrityError
from tortoise.expressions import Q

from tambula import logger
from tambula.models import User, Ticket
from tambula.store.persistent_store import PersistentStore, UniqueConstraintError


def unique_violations(error: IntegrityError, *candidates: str):
    """
    Works out which of the candidate fields an integrity error complains about.

    The drivers word their messages differently ("UNIQUE constraint failed: users.email",
    "duplicate key value violates unique constraint "users_email_key""), but all of them
    mention the offending column.
    """
    messages = " ".join(str(arg) for arg in error.args).lower()
    if "unique" not in messages and "duplicate" not in messages:
        return {}
    return {field: "Item with that value already exists!" for field in candidates if field in messages}


class DatabaseStore(PersistentStore):
    """
    Persists users and tickets to any database supported by tortoise.
    """

    def __init__(self, db_url: str, generate_schemas=True):
        self.db_url = db_url
        self.generate_schemas = generate_schemas

    async def open(self):
        """Initializes tortoise and generates the schema for our database."""
        logger.info("Opening database store")
        await Tortoise.init(
            db_url=self.db_url,
            modules={'models': ['tambula.models']}
        )
        if self.generate_schemas:
            await Tortoise.generate_schemas(safe=True)

    async def close(self):
        """Closes the open database connections."""
        logger.info("Closing database store")
        await connections.close_all()

    async def add_user(self, username, password_hash, email, name) -> User:
        try:
            return await User.create(username=username, password_hash=password_hash, email=email, name=name)
        except IntegrityError as error:
            errors = unique_violations(error, "username", "email")
            if not errors:
                raise
            raise UniqueConstraintError(errors) from error

    async def get_user(self, *, username=None, email=None) -> Optional[User]:
        filters = []
        if username is not None:
            filters.append(Q(username=username))
        if email is not None:
            filters.append(Q(email=email))

        if not filters:
            return None

        return await User.filter(Q(*filters, join_type="OR")).first()

    async def add_ticket(self, ticket_id, grid) -> Ticket:
        try:
            return await Ticket.create(ticket_id=ticket_id, grid=grid)
        except IntegrityError as error:
            errors = unique_violations(error, "ticket_id")
            if not errors:
                raise
            raise UniqueConstraintError(errors) from error

    async def get_tickets(self, ticket_id, *, skip=0, limit=None) -> List[Ticket]:
        query = Ticket.filter(ticket_id=ticket_id).order_by("id")
        if limit is not None:
            query = query.limit(limit)
        if skip:
            query = query.offset(skip)
        return await query

    async def count_tickets(self) -> int:
        return await Ticket.all().count()
