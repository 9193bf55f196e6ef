import pytest
from fastapi.testclient import TestClient

from app.api.users import get_dispatcher
from app.flow.dispatcher import RequestDispatcher
from app.main import app
from app.models.user import User


class FakeUserStore:
    """In-memory stand-in for UserStore. Appends every call to `calls`."""

    def __init__(self, calls):
        self.items = {}
        self.calls = calls

    async def get(self, user_id):
        self.calls.append(("get", user_id))
        item = self.items.get(user_id)
        return User.from_item(item) if item else None

    async def put(self, user):
        self.calls.append(("put", user.id))
        self.items[user.id] = user.to_item()

    async def update_fields(self, user_id, fields):
        self.calls.append(("update_fields", user_id))
        self.items.setdefault(user_id, {"id": user_id}).update(fields)

    async def delete(self, user_id):
        self.calls.append(("delete", user_id))
        self.items.pop(user_id, None)

    def seed(self, user_id, name, email):
        self.items[user_id] = {"id": user_id, "name": name, "email": email}


class FakeMailer:
    def __init__(self, calls, fail_with=None):
        self.sent = []
        self.calls = calls
        self.fail_with = fail_with

    async def send_notification(self, to_address, subject, body_text):
        self.calls.append(("send", to_address))
        if self.fail_with is not None:
            raise self.fail_with
        self.sent.append({"to": to_address, "subject": subject, "body": body_text})


@pytest.fixture
def calls():
    return []


@pytest.fixture
def store(calls):
    return FakeUserStore(calls)


@pytest.fixture
def mailer(calls):
    return FakeMailer(calls)


@pytest.fixture
def dispatcher(store, mailer):
    return RequestDispatcher(store=store, mailer=mailer)


@pytest.fixture
def client(dispatcher):
    app.dependency_overrides[get_dispatcher] = lambda: dispatcher
    yield TestClient(app)
    app.dependency_overrides.clear()
