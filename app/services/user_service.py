"""
app/services/user_service.py

Purpose: User record store

- get / put / update_fields / delete against the Users collection
- Records are keyed by the server-generated id
- Mongo's _id never leaves this module
"""

from typing import Optional, Dict, Any
from app.models.user import User, ID
from app.core.logging import get_logger

logger = get_logger(__name__)

# Keep Mongo's internal key out of returned documents
_PROJECTION = {"_id": 0}


class UserStore:
    """
    Thin async wrapper over a Motor collection holding User records.
    """

    def __init__(self, collection):
        self._collection = collection

    async def get(self, user_id: str) -> Optional[User]:
        """
        Retrieves a user by ID.

        Args:
            user_id: User ID

        Returns:
            User or None if not found
        """
        item = await self._collection.find_one({ID: user_id}, _PROJECTION)
        if not item:
            return None
        return User.from_item(item)

    async def put(self, user: User) -> None:
        """
        Writes a full record, replacing any record with the same id.
        """
        await self._collection.replace_one({ID: user.id}, user.to_item(), upsert=True)
        logger.info(f"User record written: {user.id}")

    async def update_fields(self, user_id: str, fields: Dict[str, Any]) -> None:
        """
        Overwrites the given attributes of an existing record.

        Args:
            user_id: User ID
            fields: Attribute name -> new value (name, email)
        """
        result = await self._collection.update_one({ID: user_id}, {"$set": fields})
        if result.modified_count > 0:
            logger.info(f"User fields updated: {user_id}")
        else:
            logger.debug(f"Update left record unchanged: {user_id}")

    async def delete(self, user_id: str) -> None:
        """
        Removes a record. Deleting an absent id is not an error.
        """
        result = await self._collection.delete_one({ID: user_id})
        logger.info(f"Delete issued for {user_id}, {result.deleted_count} record(s) removed")
