"""
Tickets
-------
"""
from typing import List

from tambula import logger
from tambula.service.generator import generate_ticket, generate_ticket_id
from tambula.store import PersistentStore


async def create_tickets(store: PersistentStore, count: int) -> List:
    """
    Generates and stores the given number of tickets.

    Each ticket is generated then persisted before moving on to the next one.
    A failure part way through leaves the tickets already stored in place.
    """
    tickets = []
    for _ in range(count):
        tickets.append(await store.add_ticket(generate_ticket_id(), generate_ticket()))

    logger.debug("Created %s tickets", len(tickets))
    return tickets


async def get_tickets(store: PersistentStore, ticket_id: str, *, page: int = 1, limit: int = 10) -> List:
    """
    Gets a page of the tickets with the given id.

    :param page: The page to fetch, starting at 1.
    :param limit: The number of tickets per page.
    """
    if page < 1 or limit < 1:
        raise ValueError("Page and limit must both be at least 1.")

    return await store.get_tickets(ticket_id, skip=(page - 1) * limit, limit=limit)
