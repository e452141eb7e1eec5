"""
Ticket Related Views
--------------------------

Handles generating and fetching tickets.
"""
from aiohttp_apispec import docs

from tambula.permissions import requires, ValidToken
from tambula.serializer import expects, returns
from tambula.serializer.misc import TicketRequestSchema, PaginationSchema
from tambula.serializer.models import TicketSchema
from tambula.service.tickets import create_tickets, get_tickets
from tambula.views.base import BaseView, BEARER_SECURITY


class TicketsView(BaseView):
    """
    Generates new tickets.
    """
    url = "/tickets"
    name = "tickets"

    @docs(summary="Create Tickets", security=BEARER_SECURITY)
    @requires(ValidToken())
    @expects(TicketRequestSchema())
    @returns(TicketSchema(many=True))
    async def post(self):
        return await create_tickets(self.store, self.request["data"]["num_tickets"])


class TicketView(BaseView):
    """
    Gets the tickets with the given id, a page at a time.
    """
    url = "/tickets/{id}"
    name = "ticket"

    @docs(summary="Get A Ticket", security=BEARER_SECURITY)
    @requires(ValidToken())
    @expects(PaginationSchema(), into="query", location="query")
    @returns(TicketSchema(many=True))
    async def get(self):
        return await get_tickets(
            self.store,
            self.request.match_info["id"],
            page=self.request["query"]["page"],
            limit=self.request["query"]["limit"]
        )
