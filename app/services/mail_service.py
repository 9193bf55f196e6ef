"""
app/services/mail_service.py

Purpose: Transactional email sending

- Sends plain-text mail through an HTTP mail API
- One shared httpx client per process
- No retries; a rejected send raises to the caller
"""

import httpx
from typing import Optional
from app.core.config import settings
from app.core.logging import get_logger

logger = get_logger(__name__)


class MailService:
    """Service for sending notification emails via the mail API"""

    def __init__(
        self,
        api_url: Optional[str] = None,
        api_key: Optional[str] = None,
        sender: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_url = api_url or settings.MAIL_API_URL
        self.api_key = api_key if api_key is not None else settings.MAIL_API_KEY
        self.sender = sender or settings.MAIL_SENDER
        self._timeout = timeout or settings.MAIL_TIMEOUT
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            headers = {}
            if self.api_key:
                headers["Authorization"] = f"Bearer {self.api_key}"
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                headers=headers,
                transport=self._transport,
            )
        return self._client

    async def send(
        self,
        from_address: str,
        to_address: str,
        subject: str,
        body_text: str
    ) -> None:
        """
        Sends a plain-text email

        Args:
            from_address: Sender address
            to_address: Recipient address
            subject: Subject line
            body_text: Plain-text body

        Raises:
            httpx.HTTPError: transport failure or non-2xx answer
        """
        payload = {
            "from": from_address,
            "to": [to_address],
            "subject": subject,
            "text": body_text,
        }

        logger.info(f"Sending mail to {to_address}: {subject}")

        response = await self._get_client().post(self.api_url, json=payload)
        response.raise_for_status()

        logger.info(f"Mail accepted for {to_address} ({response.status_code})")

    async def send_notification(self, to_address: str, subject: str, body_text: str) -> None:
        """Sends from the configured fixed sender."""
        await self.send(self.sender, to_address, subject, body_text)

    def is_configured(self) -> bool:
        """Check if the mail API is properly configured"""
        return bool(self.api_url and self.sender)

    async def close(self):
        if self._client is not None:
            await self._client.aclose()
            self._client = None


# Singleton instance
mail_service = MailService()
