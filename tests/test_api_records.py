import pytest

from reidentify.store import DocumentStore
from tests.conftest import make_app


def _seed(store, collection, *docs):
    with store.transaction():
        return [store.insert(collection, d) for d in docs]


@pytest.mark.parametrize(
    "path, collection",
    [
        ("/api/pending", "pending"),
        ("/api/approved", "approved"),
        ("/api/rejected", "rejected"),
        ("/api/acchistoryid", "approved_history"),
        ("/api/rejhistoryids", "rejected_history"),
    ],
)
def test_listing_returns_whole_collection(client, store, path, collection):
    assert client.get(path).get_json() == []

    ids = _seed(store, collection, {"name": "A", "year": 2}, {"name": "B", "tags": ["x", "y"]})

    rv = client.get(path)
    assert rv.status_code == 200
    items = rv.get_json()
    assert {item["_id"] for item in items} == set(ids)
    assert sorted(item["name"] for item in items) == ["A", "B"]


def test_history_listings_are_independent(client, store):
    _seed(store, "approved_history", {"name": "old approved"})
    _seed(store, "rejected_history", {"name": "old rejected"}, {"name": "older rejected"})

    assert len(client.get("/api/acchistoryid").get_json()) == 1
    assert len(client.get("/api/rejhistoryids").get_json()) == 2
    assert client.get("/api/pending").get_json() == []


class BrokenStore(DocumentStore):
    def find_all(self, collection):
        raise RuntimeError("connection refused")


@pytest.mark.parametrize(
    "path, log_message",
    [
        ("/api/pending", "Error fetching pending requests"),
        ("/api/approved", "Error fetching approved requests"),
        ("/api/rejected", "Error fetching rejected requests"),
        ("/api/acchistoryid", "Error fetching approved history data"),
        ("/api/rejhistoryids", "Error fetching rejected history data"),
    ],
)
def test_listing_store_failure_is_500(tmp_path, caplog, path, log_message):
    app = make_app(tmp_path, store=BrokenStore())

    rv = app.test_client().get(path)
    assert rv.status_code == 500
    assert rv.get_json() == {"message": "Internal Server Error"}
    assert log_message in [r.getMessage() for r in caplog.records if r.levelname == "ERROR"]
