# daka/models/project.py
from __future__ import annotations

from dataclasses import dataclass
import uuid

from core.settings import DEFAULT_PROJECT_ID, DEFAULT_PROJECT_NAME


@dataclass(frozen=True)
class Project:
    id: str
    name: str

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name}


DEFAULT_PROJECT = Project(id=DEFAULT_PROJECT_ID, name=DEFAULT_PROJECT_NAME)


def new_project_id() -> str:
    return str(uuid.uuid4())


def create_project(name: str) -> Project:
    return Project(id=new_project_id(), name=name)


__all__ = ["DEFAULT_PROJECT", "Project", "create_project", "new_project_id"]
