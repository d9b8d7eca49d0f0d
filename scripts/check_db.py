"""
Quick check that MongoDB is reachable and the users collection is usable

Run: python scripts/check_db.py
"""

import asyncio
import sys
from pathlib import Path
from datetime import datetime, timezone
import os
from dotenv import load_dotenv

sys.path.insert(0, str(Path(__file__).parent.parent))

# Load environment variables
load_dotenv()

from motor.motor_asyncio import AsyncIOMotorClient
import logging

logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
logger = logging.getLogger(__name__)

MONGODB_URL = os.getenv("MONGODB_URL", "mongodb://localhost:27017")
MONGODB_DB_NAME = os.getenv("MONGODB_DB_NAME", "medicover")

PROBE_COLLECTION = "connection_checks"


async def check_connection():
    """Ping, list collections, write and delete a probe document"""
    logger.info("=" * 60)
    logger.info("  MongoDB Connection Check")
    logger.info("=" * 60)

    client = AsyncIOMotorClient(MONGODB_URL, serverSelectionTimeoutMS=10000)
    db = client[MONGODB_DB_NAME]

    try:
        await client.admin.command('ping')
        logger.info(f"Connected to {MONGODB_DB_NAME}")

        collections = await db.list_collection_names()
        logger.info(f"Collections: {collections if collections else '(none yet)'}")

        result = await db[PROBE_COLLECTION].insert_one({
            "name": "Medicover Test Connection",
            "timestamp": datetime.now(timezone.utc)
        })
        logger.info(f"Probe document written: {result.inserted_id}")
        await db[PROBE_COLLECTION].delete_one({"_id": result.inserted_id})

        user_count = await db.users.count_documents({})
        logger.info(f"Users: {user_count}")

        logger.info("Database is ready")

    except Exception as e:
        logger.error(f"Check failed: {e}")
        logger.error("Make sure mongod is running and MONGODB_URL in .env is correct")
        raise

    finally:
        client.close()


if __name__ == "__main__":
    asyncio.run(check_connection())
