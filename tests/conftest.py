from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta

import pytest
from google.api_core import exceptions as gexc

from tzcompanion.modules.time_conversion.parsing import ParsedDate


class FakeSnapshot:
    def __init__(self, data: dict | None) -> None:
        self._data = data

    @property
    def exists(self) -> bool:
        return self._data is not None

    def to_dict(self) -> dict | None:
        return dict(self._data) if self._data is not None else None


class FakeDocument:
    def __init__(self, store: dict, doc_id: str) -> None:
        self._store = store
        self._doc_id = doc_id

    def get(self) -> FakeSnapshot:
        return FakeSnapshot(self._store.get(self._doc_id))

    def set(self, data: dict, merge: bool = False) -> None:
        if merge and self._doc_id in self._store:
            self._store[self._doc_id].update(data)
        else:
            self._store[self._doc_id] = dict(data)

    def create(self, data: dict) -> None:
        if self._doc_id in self._store:
            raise gexc.Conflict(f"Document {self._doc_id} already exists")
        self._store[self._doc_id] = dict(data)


class FakeCollection:
    def __init__(self, store: dict) -> None:
        self._store = store

    def document(self, doc_id: str) -> FakeDocument:
        return FakeDocument(self._store, doc_id)


class FakeFirestore:
    """In-memory stand-in for the subset of the Firestore client the repo uses."""

    def __init__(self) -> None:
        self.collections: dict[str, dict[str, dict]] = {}
        self.calls = 0

    def collection(self, name: str) -> FakeCollection:
        self.calls += 1
        return FakeCollection(self.collections.setdefault(name, {}))


class BrokenDocument:
    def get(self):
        raise gexc.ServiceUnavailable("firestore is down")

    def set(self, data: dict, merge: bool = False) -> None:
        raise gexc.ServiceUnavailable("firestore is down")

    def create(self, data: dict) -> None:
        raise gexc.ServiceUnavailable("firestore is down")


class BrokenFirestore:
    def collection(self, name: str):
        return self

    def document(self, doc_id: str) -> BrokenDocument:
        return BrokenDocument()


@dataclass
class FakeDateParser:
    """Matches any text containing ``keyword`` as 15:00 the next day on the reference clock."""

    keyword: str = "3pm"
    references: list[datetime] = field(default_factory=list)
    miss_on_call: int | None = None

    def parse(self, text: str, reference: datetime) -> ParsedDate | None:
        self.references.append(reference)
        if self.miss_on_call is not None and len(self.references) == self.miss_on_call:
            return None
        if self.keyword not in text:
            return None
        instant = (reference + timedelta(days=1)).replace(
            hour=15, minute=0, second=0, microsecond=0
        )
        return ParsedDate(instant=instant, matched_text=f"{self.keyword} tomorrow")


@pytest.fixture
def firestore():
    """An empty in-memory Firestore."""
    return FakeFirestore()


@pytest.fixture
def broken_firestore():
    """A Firestore whose every call fails."""
    return BrokenFirestore()


@pytest.fixture
def fake_parser():
    return FakeDateParser()
