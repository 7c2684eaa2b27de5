"""
Shared fixtures: an in-memory Firestore double, a scripted text model and a
TestClient wired to both through dependency overrides.
"""
import copy
import uuid

import pytest
from fastapi.testclient import TestClient

from prepwise.api.deps import get_db, get_text_model
from prepwise.main import app


class FakeSnapshot:
    def __init__(self, doc_id, data):
        self.id = doc_id
        self._data = data

    @property
    def exists(self):
        return self._data is not None

    def to_dict(self):
        return copy.deepcopy(self._data)


class FakeDocumentReference:
    def __init__(self, collection, doc_id):
        self._collection = collection
        self.id = doc_id

    def set(self, data):
        self._collection.docs[self.id] = copy.deepcopy(data)

    def get(self):
        return FakeSnapshot(self.id, self._collection.docs.get(self.id))


def _matches(data, field_filter):
    field, op, value = field_filter.field_path, field_filter.op_string, field_filter.value
    if field not in data:
        return False
    if op == "==":
        return data[field] == value
    if op == "!=":
        return data[field] != value
    raise NotImplementedError(op)


class FakeQuery:
    def __init__(self, collection, filters=(), orders=(), limit=None):
        self._collection = collection
        self._filters = filters
        self._orders = orders
        self._limit = limit

    def where(self, *, filter):
        return FakeQuery(self._collection, self._filters + (filter,), self._orders, self._limit)

    def order_by(self, field, direction="ASCENDING"):
        return FakeQuery(self._collection, self._filters, self._orders + ((field, direction),), self._limit)

    def limit(self, count):
        return FakeQuery(self._collection, self._filters, self._orders, count)

    def stream(self):
        snapshots = [
            FakeSnapshot(doc_id, data)
            for doc_id, data in self._collection.docs.items()
            if all(_matches(data, f) for f in self._filters)
        ]
        for field, direction in reversed(self._orders):
            snapshots.sort(key=lambda s: s._data[field], reverse=direction == "DESCENDING")
        if self._limit is not None:
            snapshots = snapshots[:self._limit]
        return iter(snapshots)


class FakeCollection(FakeQuery):
    def __init__(self):
        self.docs = {}
        super().__init__(self)

    def document(self, doc_id=None):
        return FakeDocumentReference(self, doc_id or uuid.uuid4().hex)

    def add(self, data):
        ref = self.document()
        ref.set(data)
        return None, ref


class FakeFirestore:
    def __init__(self):
        self.collections = {}

    def collection(self, name):
        return self.collections.setdefault(name, FakeCollection())


class ScriptedModel:
    """Returns queued replies in order; queued exceptions are raised instead."""

    def __init__(self, *replies):
        self.replies = list(replies)
        self.prompts = []

    async def generate(self, prompt):
        self.prompts.append(prompt)
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def db():
    return FakeFirestore()


@pytest.fixture
def model():
    return ScriptedModel()


@pytest.fixture
def client(db, model):
    app.dependency_overrides[get_db] = lambda: db
    app.dependency_overrides[get_text_model] = lambda: model
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
