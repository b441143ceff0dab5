"""
MongoDB Service - read operations for the collections the dashboard uses.

Collections (owned by the rest of the platform, read-only here):
1. candidatedocuments - uploaded candidate documents
2. interviews         - interviews scheduled for candidates
3. applications       - job applications
4. users              - candidate profiles

candidateId is stored as an ObjectId by the platform. Identifiers that
are not valid ObjectIds (e.g. seeded test data) are matched as strings.
"""

from typing import Optional, List, Union
from bson import ObjectId
from pymongo import DESCENDING
from pymongo.collection import Collection

from app.db.mongodb import get_collection, COLLECTIONS


# ============================================================
# HELPER: Convert ObjectId to string for JSON serialization
# ============================================================

def serialize_doc(doc: dict) -> dict:
    """Convert MongoDB document to JSON-serializable dict."""
    if doc is None:
        return None
    for key in ("_id", "candidateId"):
        if isinstance(doc.get(key), ObjectId):
            doc[key] = str(doc[key])
    return doc


def serialize_docs(docs) -> list:
    """Convert an iterable of MongoDB documents to JSON-serializable list."""
    return [serialize_doc(doc) for doc in docs]


def to_object_id(identifier: str) -> Union[ObjectId, str]:
    """ObjectId for valid hex ids, the raw value otherwise."""
    if isinstance(identifier, ObjectId):
        return identifier
    if ObjectId.is_valid(identifier):
        return ObjectId(identifier)
    return identifier


# ============================================================
# CANDIDATE-OWNED COLLECTIONS
# documents, interviews and applications share the same queries
# ============================================================

class CandidateRecordService:
    """
    Base for collections keyed by candidateId.
    Subclasses only set collection_key.
    """

    collection_key: str = None

    def __init__(self, collection: Collection = None):
        self.collection: Collection = collection or get_collection(COLLECTIONS[self.collection_key])

    def find_by_candidate(self, candidate_id: str) -> List[dict]:
        """All records for a candidate (no pagination)."""
        cursor = self.collection.find({"candidateId": to_object_id(candidate_id)})
        return serialize_docs(cursor)

    def find_recent_by_candidate(self, candidate_id: str, limit: int) -> List[dict]:
        """Most recently created records for a candidate, newest first."""
        cursor = (
            self.collection.find({"candidateId": to_object_id(candidate_id)})
            .sort("createdAt", DESCENDING)
            .limit(limit)
        )
        return serialize_docs(cursor)


class CandidateDocumentService(CandidateRecordService):
    """Uploaded documents: {candidateId, type, status, createdAt, ...}"""

    collection_key = "documents"


class InterviewService(CandidateRecordService):
    """Interviews: {candidateId, scheduledAt, status, createdAt, ...}"""

    collection_key = "interviews"


class ApplicationService(CandidateRecordService):
    """Job applications: {candidateId, jobId, status, createdAt, ...}"""

    collection_key = "applications"


# ============================================================
# USERS COLLECTION
# ============================================================

class UserService:
    """Candidate profile lookups."""

    def __init__(self, collection: Collection = None):
        self.collection: Collection = collection or get_collection(COLLECTIONS["users"])

    def find_by_id(self, candidate_id: str) -> Optional[dict]:
        """Fetch user by id. Password hashes are never loaded."""
        doc = self.collection.find_one(
            {"_id": to_object_id(candidate_id)},
            projection={"password": 0}
        )
        return serialize_doc(doc)


# ============================================================
# CONVENIENCE FUNCTION: Get all services
# ============================================================

def get_mongo_services() -> dict:
    """
    Get all MongoDB service instances.

    Usage:
        services = get_mongo_services()
        services['documents'].find_by_candidate(candidate_id)
    """
    return {
        "documents": CandidateDocumentService(),
        "interviews": InterviewService(),
        "applications": ApplicationService(),
        "users": UserService()
    }
