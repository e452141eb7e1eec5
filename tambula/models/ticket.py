"""
Ticket
---------------------------
"""
from tortoise import Model, fields


class Ticket(Model):
    """
    A generated tambula ticket. The grid is stored as
    json and never changes after the ticket is created.
    """

    id = fields.IntField(primary_key=True)
    ticket_id = fields.CharField(max_length=32, unique=True)
    grid = fields.JSONField()
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "tickets"

    def __str__(self):
        return f"[{self.id}] {self.ticket_id}"
