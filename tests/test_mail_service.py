import asyncio
import json

import httpx
import pytest

from app.services.mail_service import MailService


def make_service(handler, api_key="secret"):
    return MailService(
        api_url="https://mail.test/send",
        api_key=api_key,
        sender="no-reply@userhub.test",
        timeout=5.0,
        transport=httpx.MockTransport(handler),
    )


def test_send_posts_plain_text_message():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(202, json={"id": "msg-1"})

    service = make_service(handler)

    async def go():
        try:
            await service.send_notification("anna@example.com", "New user created", "New user: Anna\nu1")
        finally:
            await service.close()

    asyncio.run(go())

    assert len(seen) == 1
    request = seen[0]
    assert str(request.url) == "https://mail.test/send"
    assert request.headers["Authorization"] == "Bearer secret"
    assert json.loads(request.content) == {
        "from": "no-reply@userhub.test",
        "to": ["anna@example.com"],
        "subject": "New user created",
        "text": "New user: Anna\nu1",
    }


def test_send_without_key_has_no_auth_header():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(204)

    service = make_service(handler, api_key="")

    async def go():
        try:
            await service.send("a@x.com", "b@x.com", "s", "t")
        finally:
            await service.close()

    asyncio.run(go())
    assert "Authorization" not in seen[0].headers


def test_rejected_send_raises():
    service = make_service(lambda request: httpx.Response(500, text="boom"))

    async def go():
        try:
            await service.send_notification("a@x.com", "s", "t")
        finally:
            await service.close()

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(go())


def test_is_configured():
    assert make_service(lambda request: httpx.Response(200)).is_configured()
