"""
Model Serializers
-----------------

Defines serializers for the various models in the system.
"""

from marshmallow import Schema, validates, ValidationError
from marshmallow.fields import String, List

from tambula.service.generator import ROWS, COLUMNS
from .fields import Cell


class TicketSchema(Schema):
    """
    The schema corresponding to the :class:`~tambula.models.ticket.Ticket` model.
    Keys are camel cased on the wire.
    """

    ticket_id = String(required=True, data_key="ticketId")
    grid = List(List(Cell()), required=True, data_key="ticketData")

    @validates("grid")
    def validate_shape(self, grid, **kwargs):
        """Asserts that the grid is made up of 3 rows of 9 cells."""
        if len(grid) != ROWS or any(len(row) != COLUMNS for row in grid):
            raise ValidationError(f"A ticket must have {ROWS} rows of {COLUMNS} cells.")
