"""
app/api/lambda_handler.py

Purpose: API Gateway proxy entry point

- lambda_handler(event, context) for proxy integrations
- Builds the store / mail / dispatcher singletons on the first invocation
- Reuses one event loop across warm invocations so the Motor client stays bound
"""

import asyncio
from typing import Dict, Any, Optional

from app.core.config import validate_settings
from app.core.logging import setup_logging, get_logger
from app.db.mongo import connect_to_mongo, get_users_collection
from app.flow.dispatcher import RequestDispatcher
from app.schemas.request import parse_proxy_event
from app.schemas.response import HandlerResponse
from app.services.mail_service import mail_service
from app.services.user_service import UserStore

setup_logging()
logger = get_logger(__name__)

_loop: Optional[asyncio.AbstractEventLoop] = None
_dispatcher: Optional[RequestDispatcher] = None


def _get_loop() -> asyncio.AbstractEventLoop:
    global _loop
    if _loop is None or _loop.is_closed():
        _loop = asyncio.new_event_loop()
    return _loop


async def _build_dispatcher() -> RequestDispatcher:
    validate_settings()
    await connect_to_mongo()
    return RequestDispatcher(store=UserStore(get_users_collection()), mailer=mail_service)


def set_dispatcher(dispatcher: Optional[RequestDispatcher]):
    """Installs a prebuilt dispatcher (tests, custom wiring)."""
    global _dispatcher
    _dispatcher = dispatcher


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Handles one API Gateway proxy event

    Returns:
        {"statusCode": int, "headers": {...}, "body": str}
    """
    global _dispatcher
    loop = _get_loop()

    if _dispatcher is None:
        logger.info("Cold start: building dispatcher")
        try:
            _dispatcher = loop.run_until_complete(_build_dispatcher())
        except Exception as e:
            logger.critical(f"Failed to initialize handler: {e}", exc_info=True)
            return HandlerResponse(status_code=500, body=str(e)).to_proxy_result()

    request = parse_proxy_event(event or {})
    result = loop.run_until_complete(_dispatcher.handle_request(request))
    return result.to_proxy_result()
