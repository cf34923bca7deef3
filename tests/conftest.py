import itertools
from types import SimpleNamespace

import pytest

from wallet.mongodb_wallet import MongoDBWallet

CONFIG = {
    "uri": "mongodb://localhost:27017/testWalletDb",
    "collectionName": "testWallet",
    "namePrefix": "alpha",
}


# ---------- in-memory collection ----------

def _matches(doc, query):
    return all(doc.get(k) == v for k, v in query.items())


def _project(doc, projection):
    if not projection:
        return dict(doc)
    out = {k: doc[k] for k, on in projection.items() if on and k != "_id" and k in doc}
    if projection.get("_id", True):
        out["_id"] = doc["_id"]
    return out


class FakeCursor:
    def __init__(self, docs):
        self._it = iter(docs)

    def __aiter__(self):
        return self

    async def __anext__(self):
        try:
            return next(self._it)
        except StopIteration:
            raise StopAsyncIteration


class FakeCollection:
    """Just enough of AsyncCollection for the wallet, kept in a list."""

    def __init__(self):
        self.docs = []
        self.indexes = []
        self._ids = itertools.count(1)

    async def replace_one(self, query, replacement, upsert=False):
        for i, doc in enumerate(self.docs):
            if _matches(doc, query):
                self.docs[i] = dict(replacement, _id=doc["_id"])
                return SimpleNamespace(matched_count=1, modified_count=1, upserted_id=None)
        if upsert:
            new_id = next(self._ids)
            self.docs.append(dict(replacement, _id=new_id))
            return SimpleNamespace(matched_count=0, modified_count=0, upserted_id=new_id)
        return SimpleNamespace(matched_count=0, modified_count=0, upserted_id=None)

    async def find_one(self, query, projection=None):
        for doc in self.docs:
            if _matches(doc, query):
                return _project(doc, projection)
        return None

    def find(self, query, projection=None):
        return FakeCursor([_project(d, projection) for d in self.docs if _matches(d, query)])

    async def delete_many(self, query):
        before = len(self.docs)
        self.docs = [d for d in self.docs if not _matches(d, query)]
        return SimpleNamespace(deleted_count=before - len(self.docs))

    async def create_index(self, keys):
        name = "_".join(f"{field}_{direction}" for field, direction in keys)
        self.indexes.append(name)
        return name


# ---------- fixtures ----------

@pytest.fixture
def collection():
    return FakeCollection()


@pytest.fixture
def wallet(collection):
    return MongoDBWallet(CONFIG, collection=collection)


@pytest.fixture(autouse=True)
def _no_wallet_env(monkeypatch):
    for var in (
        "MONGODB_WALLET_URI",
        "MONGODB_WALLET_COLLECTION",
        "MONGODB_WALLET_PREFIX",
        "MONGODB_WALLET_TIMEOUT_MS",
    ):
        monkeypatch.delenv(var, raising=False)
