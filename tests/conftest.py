"""
Pytest configuration for the Bookstore API.

Provides an in‑memory stand‑in for a pymongo ``AsyncCollection`` and
fixtures wiring it into ``BookService`` and a ``TestClient``.  Only
the calls the application makes are implemented: ``find``,
``find_one``, ``insert_one``, ``replace_one``, ``delete_one``,
``delete_many`` and ``database.command("ping")``.
"""

from __future__ import annotations

import copy
from types import SimpleNamespace
from typing import Any, Dict, Generator, List, Optional

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from bookstore_api.app.main import create_app
from bookstore_api.app.services.book_service import BookService


class FakeCursor:
    """Async iterable over a snapshot of matching documents."""

    def __init__(self, documents: List[Dict[str, Any]]) -> None:
        self._documents = documents

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        for document in self._documents:
            yield document

    async def to_list(self, length: Optional[int] = None) -> List[Dict[str, Any]]:
        return self._documents[:length] if length is not None else list(self._documents)


class FakeDatabase:
    def __init__(self, collection: "FakeCollection") -> None:
        self._collection = collection

    async def command(self, name: str) -> Dict[str, Any]:
        self._collection._check_available()
        assert name == "ping"
        return {"ok": 1.0}


class FakeCollection:
    """Dictionary backed collection keyed by ObjectId.

    With ``available=False`` every operation raises
    ``ServerSelectionTimeoutError`` like a driver that cannot reach the
    server.
    """

    def __init__(self, available: bool = True) -> None:
        self.available = available
        self.documents: Dict[ObjectId, Dict[str, Any]] = {}
        self.database = FakeDatabase(self)

    def _check_available(self) -> None:
        if not self.available:
            raise ServerSelectionTimeoutError("No servers found yet")

    def _matching(self, filter: Dict[str, Any]) -> List[Dict[str, Any]]:
        if not filter:
            return list(self.documents.values())
        assert set(filter) == {"_id"}, f"unsupported filter: {filter}"
        document = self.documents.get(filter["_id"])
        return [document] if document is not None else []

    def find(self, filter: Optional[Dict[str, Any]] = None) -> FakeCursor:
        self._check_available()
        return FakeCursor([copy.deepcopy(d) for d in self._matching(filter or {})])

    async def find_one(self, filter: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        self._check_available()
        matches = self._matching(filter)
        return copy.deepcopy(matches[0]) if matches else None

    async def insert_one(self, document: Dict[str, Any]) -> SimpleNamespace:
        self._check_available()
        stored = copy.deepcopy(document)
        stored["_id"] = ObjectId()
        self.documents[stored["_id"]] = stored
        return SimpleNamespace(inserted_id=stored["_id"], acknowledged=True)

    async def replace_one(self, filter: Dict[str, Any], replacement: Dict[str, Any]) -> SimpleNamespace:
        self._check_available()
        matches = self._matching(filter)
        for document in matches:
            stored = copy.deepcopy(replacement)
            stored["_id"] = document["_id"]
            self.documents[document["_id"]] = stored
        return SimpleNamespace(matched_count=len(matches), modified_count=len(matches))

    async def delete_one(self, filter: Dict[str, Any]) -> SimpleNamespace:
        self._check_available()
        matches = self._matching(filter)[:1]
        for document in matches:
            del self.documents[document["_id"]]
        return SimpleNamespace(deleted_count=len(matches))

    async def delete_many(self, filter: Dict[str, Any]) -> SimpleNamespace:
        self._check_available()
        matches = self._matching(filter)
        for document in matches:
            del self.documents[document["_id"]]
        return SimpleNamespace(deleted_count=len(matches))


@pytest.fixture
def collection() -> FakeCollection:
    return FakeCollection()


@pytest.fixture
def book_service(collection: FakeCollection) -> BookService:
    return BookService(collection)


@pytest.fixture
def client(book_service: BookService) -> Generator[TestClient, None, None]:
    """HTTP client for an application backed by the in‑memory collection."""
    app = create_app(book_service=book_service)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def dune() -> Dict[str, Any]:
    return {"Name": "Dune", "Price": 15.99, "Category": "Fiction", "Author": "Herbert"}
