import pytest
from fastapi.testclient import TestClient

from clubhub.cryptography import create_token, encrypt_password
from clubhub.database import Store
from clubhub.main import create_app
from clubhub.models.event_model import Event
from clubhub.models.user_model import User


@pytest.fixture
def store(tmp_path):
    test_store = Store(f"sqlite:///{tmp_path / 'clubhub_test.db'}")
    test_store.connect()
    yield test_store
    test_store.dispose()


@pytest.fixture
def client(store):
    return TestClient(create_app(store))


@pytest.fixture
def db(store):
    session = store.session()
    yield session
    session.close()


def _make_user(store, email, admin=False, name="Test User"):
    session = store.session()
    try:
        user = User(
            name=name,
            email=email,
            password=encrypt_password("secret123"),
            role="admin" if admin else "user",
            is_admin=admin,
        )
        session.add(user)
        session.commit()
        session.refresh(user)
        return user.id, user.email
    finally:
        session.close()


@pytest.fixture
def admin_headers(store):
    user_id, email = _make_user(store, "admin@club.test", admin=True, name="Admin")
    return {"Authorization": f"Bearer {create_token(user_id, email)}"}


@pytest.fixture
def user_headers(store):
    user_id, email = _make_user(store, "student@club.test")
    return {"Authorization": f"Bearer {create_token(user_id, email)}"}


@pytest.fixture
def make_event(store):
    def _make_event(title="Intro Workshop", **fields):
        session = store.session()
        try:
            slug = fields.pop("slug", None) or title.lower().replace(" ", "-")
            event = Event(title=title, slug=slug, **fields)
            session.add(event)
            session.commit()
            session.refresh(event)
            return event.id, event.slug
        finally:
            session.close()
    return _make_event


def registration_payload(registration_no="12345abc", **overrides):
    payload = {
        "name": "Asha Verma",
        "registrationNo": registration_no,
        "phoneNumber": "9876543210",
        "course": "BTech",
        "section": "K21",
        "year": "2",
        "department": "CSE",
    }
    payload.update(overrides)
    return payload


@pytest.fixture(name="registration_payload")
def registration_payload_fixture():
    return registration_payload
