from marshmallow import EXCLUDE, Schema, pre_load, post_load
from marshmallow.fields import String, Email, Integer
from marshmallow.validate import Length, Range

from tambula.config import max_tickets_per_request


class RegisterSchema(Schema):
    """The schema of the register request."""
    username = String(required=True, validate=Length(min=1), metadata={"description": "A unique username."})
    password = String(required=True, validate=Length(min=6), load_only=True)
    email = Email(required=True, metadata={"description": "A unique email address."})
    name = String(required=True, validate=Length(min=1))

    @pre_load
    def strip_whitespace(self, data, **kwargs):
        """Trims the username and name so that blank values are rejected."""
        if isinstance(data, dict):
            data = dict(data)
            for key in ("username", "name", "email"):
                if isinstance(data.get(key), str):
                    data[key] = data[key].strip()
        return data

    @post_load
    def normalize_email(self, data, **kwargs):
        data["email"] = data["email"].lower()
        return data


class LoginSchema(Schema):
    username = String(required=True)
    password = String(required=True, load_only=True)


class TicketRequestSchema(Schema):
    """The schema of the create tickets request."""
    num_tickets = Integer(
        required=True, strict=True, data_key="numTickets",
        validate=Range(min=1, max=max_tickets_per_request),
        metadata={"description": "The number of tickets to generate."}
    )


MAX_PAGE = 1_000_000
MAX_PAGE_SIZE = 1000


class PaginationSchema(Schema):
    """Query parameters other than these two are ignored."""
    page = Integer(load_default=1, validate=Range(min=1, max=MAX_PAGE))
    limit = Integer(load_default=10, validate=Range(min=1, max=MAX_PAGE_SIZE))

    class Meta:
        unknown = EXCLUDE


class MessageSchema(Schema):
    message = String(required=True)


class TokenSchema(Schema):
    token = String(required=True)
