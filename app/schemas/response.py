"""
app/schemas/response.py

Purpose: Outbound response shapes

- HandlerResponse: status/headers/body triple produced by the dispatcher
- ErrorResponse: JSON error envelope for framework-level failures
"""

from pydantic import BaseModel, Field
from typing import Optional, Any, Dict

JSON_HEADERS = {"Content-Type": "application/json"}


class HandlerResponse(BaseModel):
    """
    Gateway-neutral response produced by the dispatcher.
    """
    status_code: int
    headers: Dict[str, str] = Field(default_factory=lambda: dict(JSON_HEADERS))
    body: str = ""

    def to_proxy_result(self) -> Dict[str, Any]:
        """Shape used by API Gateway proxy integrations."""
        return {
            "statusCode": self.status_code,
            "headers": dict(self.headers),
            "body": self.body,
        }


class ErrorResponse(BaseModel):
    """
    Standard error response structure.
    """
    error: str
    code: str
    details: Optional[Any] = None
