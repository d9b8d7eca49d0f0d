"""
Database initialization script

Run once to create the users collection indexes:
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

from app.core.logging import setup_logging, get_logger
from app.db.mongo import connect_to_mongo, close_mongo_connection, get_users_collection
from app.db.indexes import create_indexes

setup_logging()
logger = get_logger(__name__)


async def main():
    """Main initialization"""
    logger.info("Medicover database setup")

    await connect_to_mongo()
    try:
        await create_indexes()

        users = get_users_collection()
        indexes = await users.index_information()
        for index_name in indexes:
            if index_name != "_id_":
                logger.info(f"  index: {index_name}")

        logger.info(f"Users: {await users.count_documents({})}")
    finally:
        await close_mongo_connection()


if __name__ == "__main__":
    asyncio.run(main())
