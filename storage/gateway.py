"""Load and save the project registry and check-ins as JSON blobs.

Loading is best-effort: missing or malformed blobs come back as empty values
and bad entries inside an otherwise valid blob are skipped. Nothing here
raises on bad stored data.
"""
from __future__ import annotations

import json
from typing import Any, List, Optional

from core.logs import get_logger
from core.settings import STORAGE_KEYS
from helpers.datetime_utils import parse_day_key
from models.checkin import CheckinPartition
from models.project import Project
from models.registry import ProjectRegistry
from storage.store import BlobStore

logger = get_logger("storage")


def _decode(raw: Optional[str], key: str) -> Any:
    if raw is None or raw == "":
        return None
    try:
        return json.loads(raw)
    except (TypeError, ValueError) as exc:
        logger.warning("Stored value for %s is not valid JSON: %s", key, exc)
        return None


def _encode(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, sort_keys=False)


def projects_from_json(data: Any) -> List[Project]:
    if not isinstance(data, list):
        if data is not None:
            logger.warning("Stored projects are not a list, ignoring them")
        return []

    projects: List[Project] = []
    seen = set()
    for item in data:
        if not isinstance(item, dict):
            continue
        project_id = item.get("id")
        name = item.get("name")
        if not isinstance(project_id, str) or not project_id or project_id in seen:
            logger.warning("Skipping stored project with bad id: %r", item)
            continue
        if not isinstance(name, str) or not name.strip():
            logger.warning("Skipping stored project with empty name: %r", item)
            continue
        seen.add(project_id)
        projects.append(Project(id=project_id, name=name))
    return projects


def checkins_from_json(data: Any) -> CheckinPartition:
    if not isinstance(data, dict):
        if data is not None:
            logger.warning("Stored check-ins are not a mapping, ignoring them")
        return CheckinPartition()

    cleaned = {}
    for project_id, days in data.items():
        if not isinstance(days, dict):
            logger.warning("Skipping check-ins of %r: not a mapping", project_id)
            continue
        # Any well-formed key counts, whatever value it carries.
        keys = {key for key in days if parse_day_key(key) is not None}
        if len(keys) != len(days):
            logger.warning("Dropped %d malformed day keys for %r", len(days) - len(keys), project_id)
        cleaned[project_id] = keys
    return CheckinPartition(cleaned)


class PersistenceGateway:
    def __init__(self, store: BlobStore, *, projects_key: str = STORAGE_KEYS.projects,
                 checkins_key: str = STORAGE_KEYS.checkins):
        self.store = store
        self.projects_key = projects_key
        self.checkins_key = checkins_key

    def _load_json(self, key: str) -> Any:
        try:
            raw = self.store.load(key)
        except Exception as exc:
            logger.warning("Could not read %s: %s", key, exc)
            return None
        return _decode(raw, key)

    # ----- projects -----
    def load_projects(self) -> List[Project]:
        return projects_from_json(self._load_json(self.projects_key))

    def save_projects(self, registry: ProjectRegistry) -> None:
        payload = [project.to_dict() for project in registry.projects]
        self.store.save(self.projects_key, _encode(payload))
        logger.debug("Saved %d projects", len(payload))

    # ----- check-ins -----
    def load_checkins(self) -> CheckinPartition:
        return checkins_from_json(self._load_json(self.checkins_key))

    def save_checkins(self, partition: CheckinPartition) -> None:
        self.store.save(self.checkins_key, _encode(partition.to_dict()))
        logger.debug("Saved check-ins for %d projects", len(partition))


__all__ = [
    "PersistenceGateway",
    "checkins_from_json",
    "projects_from_json",
]
