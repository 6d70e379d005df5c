import base64
import os
import uuid
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

# Settings are read when app.core.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")
os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ["ADMIN_EMAILS"] = "admin@ucsb.edu"

import jwt as pyjwt
import pytest
from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.core.auth import get_current_user_optional
from app.core.config import settings
from app.db.base import Base
from app.db.session import get_db
from app.main import app
from app.models.user import User
from app.seed.seed_data import seed_db


# Use a SQLite database for testing
SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False}
)

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database dependency override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def seeded_db(db_session):
    """Create a database session with seeded data."""
    seed_db(db_session)
    return db_session


# --- Caller overrides (skip token verification) ---


@pytest.fixture
def login_as(client, db_session):
    """Persist a user and make it the caller for subsequent requests."""
    def _login(email="cgaucho@ucsb.edu", admin=False):
        user = User(
            external_auth_uid=str(uuid.uuid4()),
            external_auth_provider="google",
            email=email,
            admin=admin,
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        app.dependency_overrides[get_current_user_optional] = lambda: user
        return user

    yield _login
    app.dependency_overrides.pop(get_current_user_optional, None)


@pytest.fixture
def as_user(login_as):
    """Caller with only the user role."""
    return login_as()


@pytest.fixture
def as_admin(login_as):
    """Caller with the admin (and user) role."""
    return login_as(email="phtcon@ucsb.edu", admin=True)


# --- Real tokens against a mocked JWKS ---


# Test JWT key pair (generated once)
_test_private_key = rsa.generate_private_key(
    public_exponent=65537,
    key_size=2048,
    backend=default_backend()
)
_test_public_key = _test_private_key.public_key()


def _int_to_base64url(n):
    byte_length = (n.bit_length() + 7) // 8
    return base64.urlsafe_b64encode(n.to_bytes(byte_length, "big")).decode("utf-8").rstrip("=")


def create_test_jwks(public_key, kid="test-key-id"):
    """Create a test JWKS structure from a public key."""
    public_numbers = public_key.public_numbers()
    return {
        "keys": [
            {
                "kty": "RSA",
                "kid": kid,
                "use": "sig",
                "alg": "RS256",
                "n": _int_to_base64url(public_numbers.n),
                "e": _int_to_base64url(public_numbers.e),
            }
        ]
    }


def sign_test_token(
    private_key,
    sub,
    email="test@example.com",
    exp=None,
    aud=None,
    iss=None,
    kid="test-key-id",
    **extra_claims,
):
    """Create a signed RS256 JWT with the given claims."""
    if exp is None:
        exp = int((datetime.now(timezone.utc) + timedelta(hours=1)).timestamp())

    claims = {
        "sub": sub,
        "email": email,
        "aud": aud or settings.supabase_jwt_audience,
        "iss": iss or settings.supabase_issuer,
        "exp": exp,
        "iat": int(datetime.now(timezone.utc).timestamp()),
        **extra_claims,
    }

    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption()
    ).decode("utf-8")

    headers = {"kid": kid, "alg": "RS256", "typ": "JWT"}
    return pyjwt.encode(claims, private_pem, algorithm="RS256", headers=headers)


# Default test Supabase UIDs (valid UUIDs for external_auth_uid)
TEST_SUPABASE_UID_1 = "550e8400-e29b-41d4-a716-446655440000"
TEST_SUPABASE_UID_2 = "550e8400-e29b-41d4-a716-446655440001"


@pytest.fixture
def mock_jwks():
    """Fixture that mocks JWKS so JWT verification uses the test key."""
    test_jwks = create_test_jwks(_test_public_key)
    with patch("app.core.auth.fetch_jwks", return_value=test_jwks):
        yield test_jwks


@pytest.fixture
def create_test_token():
    """Fixture that provides a function to create test JWT tokens. sub must be a valid UUID."""
    def _create(sub=TEST_SUPABASE_UID_1, email="test@example.com", **kwargs):
        return sign_test_token(_test_private_key, sub=sub, email=email, **kwargs)
    return _create
