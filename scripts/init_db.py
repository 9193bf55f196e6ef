"""
Database initialization script - Users collection

Run once to create the collection index:
    python scripts/init_db.py
"""

import asyncio
import sys
from pathlib import Path
from dotenv import load_dotenv

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

# Load environment variables
load_dotenv()

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import ASCENDING
import logging

from app.core.config import settings

logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
logger = logging.getLogger(__name__)


async def create_indexes():
    """Create the unique id index and report what exists"""

    logger.info(f"Connecting to MongoDB: {settings.MONGODB_DB_NAME}")
    client = AsyncIOMotorClient(settings.MONGODB_URL)
    db = client[settings.MONGODB_DB_NAME]

    try:
        await client.admin.command('ping')
        logger.info("Connected successfully")

        users = db[settings.USERS_COLLECTION]
        logger.info(f"Preparing '{settings.USERS_COLLECTION}' collection...")

        await users.create_index(
            [("id", ASCENDING)],
            unique=True,
            name="id_unique"
        )
        logger.info("  id index created (unique)")

        indexes = await users.index_information()
        for idx_name in indexes.keys():
            if idx_name != "_id_":
                logger.info(f"    {idx_name}")

        count = await users.count_documents({})
        logger.info(f"Current documents: {count}")

        logger.info("Database initialization complete")

    except Exception as e:
        logger.error(f"Error: {e}")
        raise

    finally:
        client.close()


if __name__ == "__main__":
    asyncio.run(create_indexes())
