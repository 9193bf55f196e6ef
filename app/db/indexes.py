"""
app/db/indexes.py

Purpose: Database index management

- Unique index on Users.id so lookups are keyed like a table
"""

from app.db.mongo import get_users_collection
from app.models.user import ID
from app.core.logging import get_logger

logger = get_logger(__name__)


async def create_indexes():
    """
    Creates the Users indexes.
    This function is idempotent - safe to run multiple times.
    """
    try:
        users = get_users_collection()

        await users.create_index(ID, unique=True, name="id_unique")
        logger.debug("Created unique index on Users.id")

    except Exception as e:
        logger.error(f"Error creating indexes: {str(e)}", exc_info=True)
        raise
