import asyncio

import pytest
from pymongo.errors import OperationFailure

from app.db import mongo


class FakeAdmin:
    def __init__(self, error):
        self.error = error

    async def command(self, name):
        raise self.error


class FakeMotorClient:
    instances = []

    def __init__(self, url, **kwargs):
        self.admin = FakeAdmin(OperationFailure("Authentication failed."))
        self.closed = False
        FakeMotorClient.instances.append(self)

    def __getitem__(self, name):
        return {"name": name}

    def close(self):
        self.closed = True


@pytest.fixture
def fake_motor(monkeypatch):
    FakeMotorClient.instances = []
    monkeypatch.setattr(mongo, "AsyncIOMotorClient", FakeMotorClient)
    monkeypatch.setattr(mongo, "_client", None)
    monkeypatch.setattr(mongo, "_database", None)
    return FakeMotorClient


def test_auth_failure_resets_client(fake_motor):
    with pytest.raises(OperationFailure):
        asyncio.run(mongo.connect_to_mongo())

    assert mongo._client is None
    assert mongo._database is None
    assert fake_motor.instances[0].closed


def test_retry_after_auth_failure_builds_new_client(fake_motor):
    for _ in range(2):
        with pytest.raises(OperationFailure):
            asyncio.run(mongo.connect_to_mongo())

    # The second call did not short-circuit on a stale client
    assert len(fake_motor.instances) == 2


def test_users_collection_requires_connection(fake_motor):
    with pytest.raises(RuntimeError):
        mongo.get_users_collection()
