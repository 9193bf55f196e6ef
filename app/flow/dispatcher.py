"""
app/flow/dispatcher.py

Purpose: Central request dispatcher

- Receives normalized requests from the HTTP router or the Lambda entry point
- Routes to Get / Create / Update / Delete based on the HTTP method
- Sends create/update notifications via the mail service
- Maps every failure to a status code in one place
"""

import json
from typing import Optional, Union
from app.models.user import User, NAME, EMAIL, new_user_id
from app.schemas.request import HandlerRequest
from app.schemas.response import HandlerResponse
from app.core.exceptions import (
    UserHubError,
    ResourceNotFoundError,
    MethodNotAllowedError,
    MissingMethodError,
)
from app.core.logging import get_logger, LogContext
from utils.constants import (
    GREETING_MESSAGE,
    MISSING_ID_MESSAGE,
    USER_CREATED_SUBJECT,
    USER_CREATED_BODY,
    USER_CHANGED_SUBJECT,
    USER_CHANGED_BODY,
)

logger = get_logger(__name__)


class RequestDispatcher:
    """
    Routes one request to the matching CRUD operation.

    Each operation performs at most one store read, at most one store
    write and then its notification sends, in that order. Nothing is
    rolled back if a send fails after the write.
    """

    def __init__(self, store, mailer):
        self.store = store
        self.mailer = mailer

    async def handle(
        self,
        method: Optional[str],
        user_id: Optional[str] = None,
        body: Optional[Union[str, bytes]] = None
    ) -> HandlerResponse:
        """
        Main entry point

        Args:
            method: HTTP verb, may be None
            user_id: Path parameter 'id', may be None
            body: Raw JSON body for POST/PUT, decoded inside the error boundary

        Returns:
            HandlerResponse with status code, JSON content type and body
        """
        with LogContext(method=method, user_id=user_id):
            try:
                response = await self._route(method, user_id, body)

            except UserHubError as e:
                logger.info(f"Request rejected: {e.code}")
                response = HandlerResponse(status_code=e.status_code, body=e.message)

            except Exception as e:
                logger.error(f"Unhandled failure: {e}", exc_info=True)
                response = HandlerResponse(status_code=500, body=str(e))

            logger.info(f"{method} answered {response.status_code}")
            return response

    async def handle_request(self, request: HandlerRequest) -> HandlerResponse:
        return await self.handle(request.method, request.id, request.body)

    async def _route(self, method, user_id, body) -> HandlerResponse:
        # Probe check comes before the missing-method check
        if method == "GET" and user_id is None:
            return self._greeting(method, user_id)

        if not method:
            raise MissingMethodError()

        if method == "GET":
            return await self.get_user(user_id)
        elif method == "POST":
            return await self.create_user(body)
        elif method == "PUT":
            return await self.update_user(_require_id(user_id), body)
        elif method == "DELETE":
            return await self.delete_user(_require_id(user_id))
        else:
            raise MethodNotAllowedError()

    def _greeting(self, method, user_id) -> HandlerResponse:
        # Absent id renders as the string "null"
        payload = {
            "message": GREETING_MESSAGE,
            "method": method,
            "id": str(user_id) if user_id is not None else "null"
        }
        return HandlerResponse(status_code=200, body=json.dumps(payload))

    async def get_user(self, user_id: str) -> HandlerResponse:
        user = await self.store.get(user_id)
        if user is None:
            raise ResourceNotFoundError()
        return HandlerResponse(status_code=200, body=user.to_json())

    async def create_user(self, body: Optional[Union[str, bytes]]) -> HandlerResponse:
        user = User.from_json(body)
        user.id = new_user_id()

        await self.store.put(user)
        logger.info(f"Created new user {user.id}")

        await self.mailer.send_notification(
            user.email,
            USER_CREATED_SUBJECT,
            USER_CREATED_BODY.format(name=user.name, id=user.id)
        )

        return HandlerResponse(status_code=201, body=user.to_json())

    async def update_user(self, user_id: str, body: Optional[Union[str, bytes]]) -> HandlerResponse:
        user = User.from_json(body)
        user.id = user_id

        old = await self.store.get(user_id)
        if old is None:
            raise ResourceNotFoundError()

        await self.store.update_fields(user_id, {NAME: user.name, EMAIL: user.email})

        message = USER_CHANGED_BODY.format(
            old_name=old.name,
            old_email=old.email,
            name=user.name,
            email=user.email,
            id=user.id
        )
        await self.mailer.send_notification(old.email, USER_CHANGED_SUBJECT, message)

        if user.email != old.email:
            await self.mailer.send_notification(user.email, USER_CHANGED_SUBJECT, message)

        return HandlerResponse(status_code=200, body=user.to_json())

    async def delete_user(self, user_id: str) -> HandlerResponse:
        # No existence check: absent ids answer 204 as well
        await self.store.delete(user_id)
        return HandlerResponse(status_code=204, body="")


def _require_id(user_id: Optional[str]) -> str:
    if user_id is None:
        raise ValueError(MISSING_ID_MESSAGE)
    return user_id
