# daka/services/projects.py
"""Project registry operations.

None of these raise on bad input: an empty name or an unknown id leaves the
registry as it was.
"""
from __future__ import annotations

from typing import Iterable, Optional, Tuple

from models.project import DEFAULT_PROJECT, Project, create_project
from models.registry import ProjectRegistry


def reconcile(projects: Iterable[Project], active_id: Optional[str]) -> ProjectRegistry:
    """Build a registry that is non-empty and whose active id is a member."""

    members = tuple(projects)
    if not members:
        return ProjectRegistry(projects=(DEFAULT_PROJECT,), active_id=DEFAULT_PROJECT.id)
    if not any(project.id == active_id for project in members):
        active_id = members[0].id
    return ProjectRegistry(projects=members, active_id=active_id)


def add_project(
    registry: ProjectRegistry, name: Optional[str]
) -> Tuple[ProjectRegistry, Optional[Project]]:
    cleaned = (name or "").strip()
    if not cleaned:
        return registry, None

    project = create_project(cleaned)
    while registry.contains(project.id):
        project = create_project(cleaned)
    updated = reconcile((project,) + registry.projects, project.id)
    return updated, project


def select_active(registry: ProjectRegistry, project_id: Optional[str]) -> ProjectRegistry:
    if project_id == registry.active_id or not registry.contains(project_id):
        return registry
    return ProjectRegistry(projects=registry.projects, active_id=project_id)


__all__ = ["add_project", "reconcile", "select_active"]
