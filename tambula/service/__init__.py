"""
The service layer for the system. Acts as the internal API.
Each interface (currently only the REST API) should use the
service layer to implement their logic.

The service layer implements the use cases for the system, such
that they may be reused by any program that needs to access it.
"""

from .generator import generate_ticket, generate_ticket_id, BLANK, COLUMN_RANGES
from .users import register_user, login_user, UserExistsError, InvalidCredentialsError
from .verify_token import JWTVerifier, TokenVerificationError
