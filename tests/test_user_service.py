"""Tests for registration and login."""

import pytest

from roomease_api.app.core.errors import AuthError, ConflictError, ValidationError
from roomease_api.app.schemas.user import UserCreate, UserLogin
from roomease_api.app.services.user_service import UserService
from roomease_api.app.stores.memory import InMemoryUserStore
from roomease_api.app.stores.sqlite import SqliteUserStore


@pytest.fixture(params=["memory", "sqlite"])
def users(request, db_path):
    return InMemoryUserStore() if request.param == "memory" else SqliteUserStore(db_path)


@pytest.fixture
def service(users):
    return UserService(users)


def signup(email="alex@example.com", password="hunter22", name="Alex", role=None):
    return UserCreate(email=email, password=password, name=name, role=role)


@pytest.mark.unit
async def test_register_defaults_role_and_hashes_password(service, users):
    user = await service.register(signup())
    assert user.role == "student"
    assert user.id.startswith("user_")
    stored = users.get(user.id)
    assert stored is not None
    assert stored.password_hash != "hunter22"
    assert "$" in stored.password_hash


@pytest.mark.unit
async def test_register_keeps_explicit_role(service):
    user = await service.register(signup(role="landlord"))
    assert user.role == "landlord"


@pytest.mark.unit
@pytest.mark.parametrize(
    "payload",
    [
        {"password": "x", "name": "A"},
        {"email": "a@example.com", "name": "A"},
        {"email": "a@example.com", "password": "x"},
        {"email": "  ", "password": "x", "name": "A"},
    ],
)
async def test_register_requires_fields(service, users, payload):
    with pytest.raises(ValidationError) as exc_info:
        await service.register(UserCreate(**payload))
    assert exc_info.value.status_code == 400
    assert users.count() == 0


@pytest.mark.unit
async def test_duplicate_email_is_rejected_ignoring_case(service, users):
    await service.register(signup(email="Alex@Example.com"))
    with pytest.raises(ConflictError) as exc_info:
        await service.register(signup(email="alex@example.com", name="Someone else"))
    assert exc_info.value.status_code == 400
    assert users.count() == 1


@pytest.mark.unit
async def test_authenticate(service):
    registered = await service.register(signup())
    user = await service.authenticate(UserLogin(email="ALEX@example.com", password="hunter22"))
    assert user.id == registered.id


@pytest.mark.unit
@pytest.mark.parametrize("email, password", [("alex@example.com", "wrong"), ("ghost@example.com", "hunter22")])
async def test_authenticate_rejects_bad_credentials(service, email, password):
    await service.register(signup())
    with pytest.raises(AuthError) as exc_info:
        await service.authenticate(UserLogin(email=email, password=password))
    assert exc_info.value.status_code == 401
    assert exc_info.value.message == "Invalid credentials"


@pytest.mark.unit
async def test_authenticate_requires_fields(service):
    with pytest.raises(ValidationError):
        await service.authenticate(UserLogin(email="alex@example.com"))
