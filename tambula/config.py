import os

server_mode = os.getenv("SERVER_MODE", "development")
"""The operational mode of the server."""

token_secret = os.getenv("TOKEN_SECRET")
"""The key used to sign and verify session tokens. Required."""

database_url = os.getenv("DATABASE_URL", "sqlite://db.sqlite3")
"""The tortoise database url, or ``memory://`` for the in-memory store."""

api_root = os.getenv("API_ROOT", "")
"""The base url for the api."""

port = int(os.getenv("PORT", "8080"))
"""The port to listen on."""

bcrypt_rounds = int(os.getenv("BCRYPT_ROUNDS", "10"))
"""The bcrypt work factor for password hashes."""

max_tickets_per_request = int(os.getenv("MAX_TICKETS_PER_REQUEST", "100"))
"""The largest batch of tickets a single request may create."""

sentry_dsn = os.getenv("SENTRY_DSN")
"""The sentry DSN, enables error reporting outside of development."""
