"""Domain models exposed by the Daka application."""
from .checkin import CheckinPartition, CheckinStats, DayCell
from .project import DEFAULT_PROJECT, Project
from .registry import ProjectRegistry

__all__ = [
    "CheckinPartition",
    "CheckinStats",
    "DayCell",
    "DEFAULT_PROJECT",
    "Project",
    "ProjectRegistry",
]
