"""
Fields
-------

Defines some additional fields so that the Schemas can
serialize to and from additional native python data types.
"""
from typing import Union

from marshmallow import fields, ValidationError

from tambula.service.generator import BLANK


class Cell(fields.Field):
    """
    A single cell of a ticket grid. Serializes to an :class:`int`
    between 1 and 90 or to the blank marker :data:`~tambula.service.generator.BLANK`.
    """

    def _serialize(self, value: Union[int, str], attr, obj, **kwargs) -> Union[int, str]:
        if value == BLANK:
            return value
        if isinstance(value, int) and not isinstance(value, bool) and 1 <= value <= 90:
            return value
        raise ValidationError(f"Cell must be a number from 1 to 90 or \"{BLANK}\", not {value!r}.")

    def _deserialize(self, value, attr, data, **kwargs) -> Union[int, str]:
        return self._serialize(value, attr, data)
