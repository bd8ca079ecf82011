import json
from pathlib import Path
import sys

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

sys.path.append(str(Path(__file__).resolve().parents[1]))

from core.settings import STORAGE_KEYS
from models.checkin import CheckinPartition
from models.project import Project
from models.registry import ProjectRegistry
from storage.gateway import PersistenceGateway
from storage.store import BlobStore, init_store


@pytest.fixture
def store():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_store(engine)
    return BlobStore(lambda: Session(engine))


@pytest.fixture
def gateway(store):
    return PersistenceGateway(store)


def test_blob_store_save_load_delete(store):
    assert store.load("missing") is None
    store.save("k", "one")
    store.save("k", "two")
    assert store.load("k") == "two"
    assert list(store.keys()) == ["k"]
    store.delete("k")
    assert store.load("k") is None
    store.delete("k")


def test_missing_blobs_load_as_empty(gateway):
    assert gateway.load_projects() == []
    assert gateway.load_checkins() == CheckinPartition()


def test_projects_round_trip_in_order(gateway, store):
    registry = ProjectRegistry(
        projects=(Project("p2", "读书"), Project("p1", "跑步")),
        active_id="p2",
    )
    gateway.save_projects(registry)

    assert json.loads(store.load(STORAGE_KEYS.projects)) == [
        {"id": "p2", "name": "读书"},
        {"id": "p1", "name": "跑步"},
    ]
    assert gateway.load_projects() == list(registry.projects)


def test_checkins_round_trip(gateway, store):
    partition = CheckinPartition({"p1": {"2024-06-10", "2024-06-09"}, "p2": {"2024-01-01"}})
    gateway.save_checkins(partition)

    assert json.loads(store.load(STORAGE_KEYS.checkins)) == {
        "p1": {"2024-06-09": True, "2024-06-10": True},
        "p2": {"2024-01-01": True},
    }
    assert gateway.load_checkins() == partition


@pytest.mark.parametrize("raw", ["not json", "", "{", '"text"', "42", '{"id": "x"}'])
def test_malformed_projects_load_as_empty(gateway, store, raw):
    store.save(STORAGE_KEYS.projects, raw)
    assert gateway.load_projects() == []


@pytest.mark.parametrize("raw", ["not json", "[1, 2]", "null", '"x"'])
def test_malformed_checkins_load_as_empty(gateway, store, raw):
    store.save(STORAGE_KEYS.checkins, raw)
    assert gateway.load_checkins() == CheckinPartition()


def test_bad_project_entries_are_skipped(gateway, store):
    payload = [
        {"id": "ok", "name": "Good"},
        {"id": "", "name": "No id"},
        {"id": "blank", "name": "   "},
        {"name": "Missing id"},
        "junk",
        {"id": "ok", "name": "Duplicate"},
        {"id": "ok2", "name": "Also good"},
    ]
    store.save(STORAGE_KEYS.projects, json.dumps(payload))
    assert gateway.load_projects() == [Project("ok", "Good"), Project("ok2", "Also good")]


def test_checkins_keep_presence_only_and_drop_bad_keys(gateway, store):
    payload = {
        "p1": {"2024-06-10": True, "2024-06-09": False, "2024-6-8": True, "nonsense": True},
        "p2": ["2024-06-10"],
        "p3": {},
    }
    store.save(STORAGE_KEYS.checkins, json.dumps(payload))

    partition = gateway.load_checkins()
    assert partition == {"p1": {"2024-06-10", "2024-06-09"}}


def test_store_errors_are_swallowed_on_load():
    class BrokenStore(BlobStore):
        def __init__(self):
            super().__init__(session_factory=None)

        def load(self, key):
            raise RuntimeError("disk gone")

    gateway = PersistenceGateway(BrokenStore())
    assert gateway.load_projects() == []
    assert gateway.load_checkins() == CheckinPartition()
