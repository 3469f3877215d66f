import copy

import pytest
from bson import ObjectId
from pymongo import ReturnDocument
from pymongo import errors as mongo_errors

from apps.feedback_api.adapters.mongo_feedback_store import MongoFeedbackStore


class _InsertOneResult:
    def __init__(self, inserted_id):
        self.inserted_id = inserted_id


class _DeleteResult:
    def __init__(self, deleted_count):
        self.deleted_count = deleted_count


class _Cursor:
    def __init__(self, docs):
        self._docs = docs
        self._skip = 0
        self._limit = 0

    def skip(self, n):
        self._skip = n
        return self

    def limit(self, n):
        self._limit = n
        return self

    async def to_list(self, length=None):
        docs = self._docs[self._skip:]
        if self._limit:
            docs = docs[: self._limit]
        return [copy.deepcopy(d) for d in docs]


class FakeCollection:
    """Colección en memoria con el subconjunto de la API async de pymongo que usa el store."""

    def __init__(self):
        self.docs = []
        self.unique_fields = set()
        self.calls = []

    def _check_unique(self, doc, exclude_id=None):
        for field in self.unique_fields:
            for d in self.docs:
                if d["_id"] != exclude_id and field in doc and d.get(field) == doc[field]:
                    raise mongo_errors.DuplicateKeyError(
                        f"E11000 duplicate key error collection: test.feedbacks index: {field}_1",
                        11000,
                    )

    async def create_index(self, keys, unique=False, **kwargs):
        self.calls.append(("create_index", keys))
        if unique:
            self.unique_fields.update(k for k, _ in keys)
        return "_".join(f"{k}_{d}" for k, d in keys)

    def find(self, filter):
        self.calls.append(("find", filter))
        return _Cursor(list(self.docs))

    async def insert_one(self, document):
        self.calls.append(("insert_one", document))
        self._check_unique(document)
        doc = copy.deepcopy(document)
        doc["_id"] = ObjectId()
        self.docs.append(doc)
        return _InsertOneResult(doc["_id"])

    async def find_one(self, filter):
        self.calls.append(("find_one", filter))
        for d in self.docs:
            if d["_id"] == filter["_id"]:
                return copy.deepcopy(d)
        return None

    async def find_one_and_update(self, filter, update, return_document=ReturnDocument.BEFORE):
        self.calls.append(("find_one_and_update", filter, update))
        for d in self.docs:
            if d["_id"] == filter["_id"]:
                before = copy.deepcopy(d)
                self._check_unique(update["$set"], exclude_id=d["_id"])
                d.update(copy.deepcopy(update["$set"]))
                return copy.deepcopy(d) if return_document == ReturnDocument.AFTER else before
        return None

    async def delete_one(self, filter):
        self.calls.append(("delete_one", filter))
        for i, d in enumerate(self.docs):
            if d["_id"] == filter["_id"]:
                del self.docs[i]
                return _DeleteResult(1)
        return _DeleteResult(0)


@pytest.fixture
def collection() -> FakeCollection:
    return FakeCollection()


@pytest.fixture
def store(collection) -> MongoFeedbackStore:
    return MongoFeedbackStore(collection)
