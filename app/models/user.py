"""
app/models/user.py

Purpose: User record model

- id: server-minted identifier, immutable after creation
- name / email: the only mutable fields
- JSON (de)serialization with fixed field keys
"""

from pydantic import BaseModel, Field
from typing import Optional, Union, Dict, Any
import uuid

# Attribute names in the record store and in JSON bodies
ID = "id"
NAME = "name"
EMAIL = "email"


def new_user_id() -> str:
    """Mints a fresh opaque user id."""
    return str(uuid.uuid4())


class User(BaseModel):
    id: Optional[str] = Field(None, description="Server-generated identifier")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Contact address")

    @classmethod
    def from_json(cls, body: Optional[Union[str, bytes]]) -> "User":
        """Parses a request body. Raises pydantic.ValidationError on bad input."""
        return cls.model_validate_json(body if body is not None else "")

    def to_json(self) -> str:
        return self.model_dump_json()

    def to_item(self) -> Dict[str, Any]:
        """Document stored in the Users collection."""
        return {ID: self.id, NAME: self.name, EMAIL: self.email}

    @classmethod
    def from_item(cls, item: Dict[str, Any]) -> "User":
        return cls(id=item[ID], name=item[NAME], email=item[EMAIL])
