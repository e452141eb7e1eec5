import pytest
from aiohttp.test_utils import TestClient
from faker import Faker

from tambula.app import build_app
from tambula.service import passwords
from tambula.service.users import register_user
from tambula.service.verify_token import JWTVerifier
from tambula.store import MemoryStore, DatabaseStore

fake = Faker()

TOKEN_SECRET = "not-so-secret"


@pytest.fixture(autouse=True)
def fast_hashing(monkeypatch):
    """The default work factor makes the suite needlessly slow."""
    monkeypatch.setattr(passwords, "bcrypt_rounds", 4)


@pytest.fixture
def token_verifier() -> JWTVerifier:
    return JWTVerifier(TOKEN_SECRET)


@pytest.fixture(params=["memory", "database"])
async def store(request):
    """An open store, once for each implementation."""
    if request.param == "memory":
        store = MemoryStore()
    else:
        store = DatabaseStore("sqlite://:memory:")

    await store.open()
    yield store
    await store.close()


@pytest.fixture
def database_store() -> DatabaseStore:
    """A database store, opened and closed by the app."""
    return DatabaseStore("sqlite://:memory:")


@pytest.fixture
async def client(aiohttp_client, database_store) -> TestClient:
    app = build_app(store=database_store, token_secret=TOKEN_SECRET)
    return await aiohttp_client(app)


@pytest.fixture
def random_credentials():
    """Details for a user that has not registered yet."""
    return {
        "username": fake.user_name() + str(fake.random_int()),
        "password": fake.password(length=12),
        "email": fake.email().lower(),
        "name": fake.name(),
    }


@pytest.fixture
async def random_user(client, database_store, random_credentials):
    """Registers a random user in the database."""
    return await register_user(database_store, **random_credentials)


@pytest.fixture
def auth_headers(random_user, token_verifier):
    """Headers carrying a valid token for the random user."""
    return {"Authorization": f"Bearer {token_verifier.create_token(random_user.username)}"}
