from aiohttp.test_utils import TestClient

from tambula.serializer.models import TicketSchema
from tambula.service.generator import BLANK, COLUMN_RANGES


class TestTicketsView:

    async def test_create_tickets(self, client: TestClient, auth_headers, database_store):
        """Assert that an authenticated user can create tickets."""
        response = await client.post('/tickets', json={"numTickets": 3}, headers=auth_headers)
        assert response.status == 200

        tickets = TicketSchema(many=True).load(await response.json())
        assert len(tickets) == 3
        assert len({ticket["ticket_id"] for ticket in tickets}) == 3
        assert await database_store.count_tickets() == 3

        for ticket in tickets:
            for row in ticket["grid"]:
                for column, cell in enumerate(row):
                    if cell != BLANK:
                        low, high = COLUMN_RANGES[column]
                        assert low <= cell <= high

    async def test_create_tickets_keys(self, client: TestClient, auth_headers):
        """Assert that tickets are sent with camel cased keys."""
        response = await client.post('/tickets', json={"numTickets": 1}, headers=auth_headers)
        ticket, = await response.json()
        assert set(ticket) == {"ticketId", "ticketData"}

    async def test_create_tickets_no_token(self, client: TestClient, database_store):
        """Assert that creating tickets without a token fails and stores nothing."""
        response = await client.post('/tickets', json={"numTickets": 2})
        assert response.status == 401
        assert await response.json() == {"message": "Access denied. No token provided"}
        assert await database_store.count_tickets() == 0

    async def test_create_tickets_bad_token(self, client: TestClient, database_store):
        response = await client.post('/tickets', json={"numTickets": 2}, headers={"Authorization": "Bearer a.b.c"})
        assert response.status == 401
        assert (await response.json())["message"] == "Invalid token"
        assert await database_store.count_tickets() == 0

    async def test_create_tickets_malformed_header(self, client: TestClient, auth_headers, database_store):
        token = auth_headers["Authorization"][len("Bearer "):]
        response = await client.post('/tickets', json={"numTickets": 2}, headers={"Authorization": token})
        assert response.status == 401
        assert await database_store.count_tickets() == 0

    async def test_create_tickets_bad_count(self, client: TestClient, auth_headers, database_store):
        """Assert that the number of tickets is validated."""
        for count in (0, -1, "two", 1000000):
            response = await client.post('/tickets', json={"numTickets": count}, headers=auth_headers)
            assert response.status == 400
            assert "numTickets" in (await response.json())["errors"]
        assert await database_store.count_tickets() == 0

    async def test_create_tickets_not_json(self, client: TestClient, auth_headers):
        response = await client.post('/tickets', data="numTickets=2", headers=auth_headers)
        assert response.status == 400
        assert "only accepts JSON" in (await response.json())["message"]

    async def test_create_tickets_store_failure(self, client: TestClient, auth_headers, database_store, monkeypatch):
        """Assert that a broken store gives a generic error without leaking details."""

        async def broken_add_ticket(ticket_id, grid):
            raise RuntimeError("connection to the database went away")

        monkeypatch.setattr(database_store, "add_ticket", broken_add_ticket)
        response = await client.post('/tickets', json={"numTickets": 1}, headers=auth_headers)
        assert response.status == 500
        assert await response.json() == {"message": "An error occurred"}


class TestTicketView:

    async def test_get_ticket(self, client: TestClient, auth_headers):
        """Assert that a created ticket can be fetched by its id."""
        response = await client.post('/tickets', json={"numTickets": 1}, headers=auth_headers)
        created, = await response.json()

        response = await client.get(f"/tickets/{created['ticketId']}", headers=auth_headers)
        assert response.status == 200
        assert await response.json() == [created]

    async def test_get_ticket_past_last_page(self, client: TestClient, auth_headers):
        response = await client.post('/tickets', json={"numTickets": 1}, headers=auth_headers)
        created, = await response.json()

        response = await client.get(f"/tickets/{created['ticketId']}?page=2&limit=10", headers=auth_headers)
        assert response.status == 200
        assert await response.json() == []

    async def test_get_missing_ticket(self, client: TestClient, auth_headers):
        response = await client.get("/tickets/doesnotexist", headers=auth_headers)
        assert response.status == 200
        assert await response.json() == []

    async def test_get_ticket_bad_page(self, client: TestClient, auth_headers):
        response = await client.get("/tickets/anything?page=0&limit=ten", headers=auth_headers)
        assert response.status == 400
        assert set((await response.json())["errors"]) == {"page", "limit"}

    async def test_get_ticket_page_too_large(self, client: TestClient, auth_headers):
        response = await client.get("/tickets/anything?page=1&limit=99999999999999999999", headers=auth_headers)
        assert response.status == 400
        assert set((await response.json())["errors"]) == {"limit"}

        response = await client.get("/tickets/anything?page=99999999999999999999&limit=10", headers=auth_headers)
        assert response.status == 400
        assert set((await response.json())["errors"]) == {"page"}

    async def test_get_ticket_ignores_other_params(self, client: TestClient, auth_headers):
        """Assert that cache busters and the like don't break the request."""
        response = await client.post('/tickets', json={"numTickets": 1}, headers=auth_headers)
        created, = await response.json()

        response = await client.get(f"/tickets/{created['ticketId']}?page=1&limit=10&_=123", headers=auth_headers)
        assert response.status == 200
        assert await response.json() == [created]

    async def test_get_ticket_no_token(self, client: TestClient):
        response = await client.get("/tickets/anything?page=1&limit=10")
        assert response.status == 401


async def test_end_to_end(client: TestClient):
    """Register, log in, create a couple of tickets and fetch one of them back."""
    response = await client.post('/register', json={
        "username": "alice", "password": "secret1", "email": "a@x.com", "name": "Alice"
    })
    assert response.status == 200

    response = await client.post('/login', json={"username": "alice", "password": "secret1"})
    assert response.status == 200
    headers = {"Authorization": f"Bearer {(await response.json())['token']}"}

    response = await client.post('/tickets', json={"numTickets": 2}, headers=headers)
    assert response.status == 200
    tickets = await response.json()
    assert len(tickets) == 2
    assert tickets[0]["ticketId"] != tickets[1]["ticketId"]
    for ticket in tickets:
        assert len(ticket["ticketData"]) == 3
        assert all(len(row) == 9 for row in ticket["ticketData"])

    response = await client.get(f"/tickets/{tickets[1]['ticketId']}?page=1&limit=10", headers=headers)
    assert response.status == 200
    assert await response.json() == [tickets[1]]
