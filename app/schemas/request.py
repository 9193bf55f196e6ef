"""
app/schemas/request.py

Purpose: Inbound request normalization

- HandlerRequest is what the dispatcher consumes
- Parsers for API Gateway proxy events
"""

from pydantic import BaseModel, Field
from typing import Optional, Dict, Any


class HandlerRequest(BaseModel):
    """
    Normalized request, independent of the gateway that delivered it.
    """
    method: Optional[str] = Field(None, description="HTTP verb as received")
    id: Optional[str] = Field(None, description="Path parameter 'id'")
    body: Optional[str] = Field(None, description="Raw request body")


def parse_proxy_event(event: Dict[str, Any]) -> HandlerRequest:
    """
    Parses an API Gateway proxy event

    Proxy format:
    - httpMethod: "GET"
    - pathParameters: {"id": "..."} or null
    - body: raw string or null
    """
    path_parameters = event.get("pathParameters") or {}

    return HandlerRequest(
        method=event.get("httpMethod"),
        id=path_parameters.get("id"),
        body=event.get("body")
    )
