"""
The models package contains all the models persisted by the database store.
"""

from .ticket import Ticket
from .user import User
