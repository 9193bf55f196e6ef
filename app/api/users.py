"""
app/api/users.py

Purpose: HTTP entry point for user records

- /users and /users/{id} accept every verb
- Normalizes the request and passes control to the dispatcher
- The dispatcher decides 405 for unsupported verbs, not the router
"""

from fastapi import APIRouter, Request, Depends
from fastapi.responses import Response
from typing import Optional

from app.core.logging import get_logger
from app.flow.dispatcher import RequestDispatcher

logger = get_logger(__name__)
router = APIRouter()

ALL_METHODS = ["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS", "HEAD"]


def get_dispatcher(request: Request) -> RequestDispatcher:
    """
    Returns the process-wide dispatcher built during startup.
    """
    dispatcher = getattr(request.app.state, "dispatcher", None)
    if dispatcher is None:
        raise RuntimeError("Dispatcher not initialized. Application startup did not run.")
    return dispatcher


async def _forward(request: Request, user_id: Optional[str], dispatcher: RequestDispatcher) -> Response:
    raw = await request.body()

    # Bytes go through undecoded; parsing failures belong to the dispatcher
    result = await dispatcher.handle(request.method, user_id, raw or None)

    return Response(
        content=result.body,
        status_code=result.status_code,
        headers=result.headers
    )


@router.api_route("/users", methods=ALL_METHODS)
async def users_collection(request: Request, dispatcher: RequestDispatcher = Depends(get_dispatcher)):
    """
    Greeting on GET, create on POST.
    """
    return await _forward(request, None, dispatcher)


@router.api_route("/users/{user_id}", methods=ALL_METHODS)
async def users_item(user_id: str, request: Request, dispatcher: RequestDispatcher = Depends(get_dispatcher)):
    """
    Get, update or delete a single user.
    """
    return await _forward(request, user_id, dispatcher)
