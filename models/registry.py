# daka/models/registry.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from models.project import Project


@dataclass(frozen=True)
class ProjectRegistry:
    """Newest-first projects plus the id of the one being edited."""

    projects: Tuple[Project, ...] = ()
    active_id: str = ""

    def __len__(self) -> int:
        return len(self.projects)

    def ids(self) -> Tuple[str, ...]:
        return tuple(project.id for project in self.projects)

    def contains(self, project_id: Optional[str]) -> bool:
        return any(project.id == project_id for project in self.projects)

    def get(self, project_id: Optional[str]) -> Optional[Project]:
        for project in self.projects:
            if project.id == project_id:
                return project
        return None

    @property
    def active_project(self) -> Optional[Project]:
        return self.get(self.active_id)


__all__ = ["ProjectRegistry"]
