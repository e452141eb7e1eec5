"""
Ticket Generator
----------------

Generates tambula tickets: 3 rows by 9 columns, where each column
may only hold numbers from its own fixed range.

.. code-block:: python

    >>> grid = generate_ticket()
    >>> len(grid), len(grid[0])
    (3, 9)

The generator draws one number per cell from the column's pool
until the pool runs dry, at which point the cell is left blank.
It does not try to force the conventional 5 numbers per row; use
:func:`row_density` to measure how many numbers each row ended up with.
"""
import random
import string
import time
from typing import List, Tuple, Union

ROWS = 3
COLUMNS = 9

BLANK = "x"
"""The marker placed in a cell that holds no number."""

COLUMN_RANGES: List[Tuple[int, int]] = [(1, 9)] + [(10 * c + 1, 10 * c + 10) for c in range(1, 8)] + [(81, 90)]
"""The inclusive range of numbers that each column may hold."""

Cell = Union[int, str]
Grid = List[List[Cell]]

_ID_ALPHABET = string.digits + string.ascii_lowercase
_ID_RANDOM_LENGTH = 5


def column_pools() -> List[List[int]]:
    """Creates a fresh pool of candidate numbers for every column."""
    return [list(range(low, high + 1)) for low, high in COLUMN_RANGES]


def generate_ticket(rng: random.Random = None) -> Grid:
    """
    Generates a single ticket grid.

    :param rng: An optional source of randomness, mostly useful for
        reproducible tests. Defaults to the module level generator.
    :return: A list of 3 rows, each a list of 9 cells.
    """
    rng = rng if rng is not None else random
    pools = column_pools()

    grid = []
    for _ in range(ROWS):
        row = []
        for pool in pools:
            if pool:
                row.append(pool.pop(rng.randrange(len(pool))))
            else:
                row.append(BLANK)
        grid.append(row)

    return grid


def row_density(grid: Grid) -> List[int]:
    """Counts the numeric cells in each row of the grid."""
    return [sum(1 for cell in row if cell != BLANK) for row in grid]


def to_base36(value: int) -> str:
    """Encodes a non-negative integer in lowercase base 36."""
    if value < 0:
        raise ValueError("Only non-negative integers can be encoded.")

    digits = []
    while True:
        value, remainder = divmod(value, 36)
        digits.append(_ID_ALPHABET[remainder])
        if not value:
            break

    return "".join(reversed(digits))


def generate_ticket_id(now: float = None) -> str:
    """
    Generates a short ticket identifier from the current time in
    milliseconds followed by 5 random base 36 characters.

    Collisions are unlikely but possible, the ticket store's
    unique constraint has the final say.
    """
    timestamp = int((now if now is not None else time.time()) * 1000)
    suffix = "".join(random.choice(_ID_ALPHABET) for _ in range(_ID_RANDOM_LENGTH))
    return to_base36(timestamp) + suffix
