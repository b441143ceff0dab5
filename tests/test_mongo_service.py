"""Tests for the pymongo-backed repositories (collection mocked)."""

from unittest.mock import MagicMock

from bson import ObjectId
from pymongo import DESCENDING

from app.services.mongo_service import (
    ApplicationService,
    CandidateDocumentService,
    InterviewService,
    UserService,
    serialize_doc,
    to_object_id,
)
from conftest import CANDIDATE_ID


def mock_collection(docs=()):
    collection = MagicMock()
    cursor = MagicMock()
    cursor.__iter__.return_value = iter([dict(d) for d in docs])
    cursor.sort.return_value = cursor
    cursor.limit.return_value = cursor
    collection.find.return_value = cursor
    return collection, cursor


class TestHelpers:

    def test_to_object_id(self):
        assert to_object_id(CANDIDATE_ID) == ObjectId(CANDIDATE_ID)
        assert to_object_id("seed-user-1") == "seed-user-1"

    def test_serialize_doc(self):
        oid, cid = ObjectId(), ObjectId(CANDIDATE_ID)
        doc = serialize_doc({"_id": oid, "candidateId": cid, "type": "cv"})
        assert doc == {"_id": str(oid), "candidateId": CANDIDATE_ID, "type": "cv"}
        assert serialize_doc(None) is None


class TestCandidateRecordServices:

    def test_find_by_candidate(self):
        collection, _ = mock_collection([{"_id": ObjectId(), "candidateId": ObjectId(CANDIDATE_ID)}])
        service = CandidateDocumentService(collection=collection)

        docs = service.find_by_candidate(CANDIDATE_ID)

        collection.find.assert_called_once_with({"candidateId": ObjectId(CANDIDATE_ID)})
        assert docs[0]["candidateId"] == CANDIDATE_ID

    def test_find_recent_by_candidate(self):
        collection, cursor = mock_collection()
        service = InterviewService(collection=collection)

        assert service.find_recent_by_candidate(CANDIDATE_ID, 5) == []

        cursor.sort.assert_called_once_with("createdAt", DESCENDING)
        cursor.limit.assert_called_once_with(5)

    def test_collection_keys(self):
        assert CandidateDocumentService.collection_key == "documents"
        assert InterviewService.collection_key == "interviews"
        assert ApplicationService.collection_key == "applications"


class TestUserService:

    def test_find_by_id_excludes_password(self):
        collection = MagicMock()
        collection.find_one.return_value = {"_id": ObjectId(CANDIDATE_ID), "name": "Maria"}
        service = UserService(collection=collection)

        user = service.find_by_id(CANDIDATE_ID)

        collection.find_one.assert_called_once_with(
            {"_id": ObjectId(CANDIDATE_ID)}, projection={"password": 0}
        )
        assert user == {"_id": CANDIDATE_ID, "name": "Maria"}

    def test_find_by_id_missing(self):
        collection = MagicMock()
        collection.find_one.return_value = None
        assert UserService(collection=collection).find_by_id(CANDIDATE_ID) is None
