"""
MongoDB Connection Utility

The platform keeps everything in one MongoDB database. The dashboard
only READS these collections:
- users: candidate profiles
- candidatedocuments: uploaded documents (cv, passport, diploma, ...)
- interviews: scheduled/completed interviews
- applications: job applications

Collection names follow the platform's ODM (lowercased plural model names).
"""
import structlog
from pymongo import MongoClient, ASCENDING, DESCENDING
from pymongo.database import Database
from pymongo.collection import Collection
from pymongo.errors import PyMongoError
from app.core.config import get_settings

logger = structlog.get_logger()

# Global client (connection pooling handled internally by pymongo)
_client: MongoClient = None
_db: Database = None


def get_mongo_client() -> MongoClient:
    """Get or create MongoDB client (singleton pattern)"""
    global _client
    if _client is None:
        _client = MongoClient(get_settings().mongodb_uri)
    return _client


def get_mongo_db() -> Database:
    """Get the platform database"""
    global _db
    if _db is None:
        client = get_mongo_client()
        _db = client[get_settings().mongodb_db]
    return _db


def get_collection(name: str) -> Collection:
    """Get a specific collection by name, e.g. COLLECTIONS["interviews"]."""
    db = get_mongo_db()
    return db[name]


def test_mongo_connection() -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        client = get_mongo_client()
        # ping command checks connection
        client.admin.command('ping')
        return True
    except PyMongoError as e:
        logger.warning("MongoDB connection failed", error=str(e))
        return False


# Collection name constants (avoid typos)
COLLECTIONS = {
    "users": "users",
    "documents": "candidatedocuments",
    "interviews": "interviews",
    "applications": "applications",
}


def init_mongo_indexes():
    """
    Create indexes for the dashboard queries.
    Call this once during app startup.
    """
    db = get_mongo_db()

    # Every dashboard query filters by candidate, recent activity also sorts by creation
    for key in ("documents", "interviews", "applications"):
        db[COLLECTIONS[key]].create_index([
            ("candidateId", ASCENDING),
            ("createdAt", DESCENDING)
        ])

    logger.info("MongoDB indexes created")
