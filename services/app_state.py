# daka/services/app_state.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, List, Optional, Tuple

from core.logs import get_logger
from core.settings import UI
from helpers.datetime_utils import (
    DateLike,
    MonthLabel,
    build_week_grid,
    day_key,
    is_future,
    month_labels,
)
from models.checkin import CheckinPartition, CheckinStats, DayCell
from models.project import Project
from models.registry import ProjectRegistry
from services import checkins, projects as project_ops
from storage.gateway import PersistenceGateway

PROJECTS = "projects"
CHECKINS = "checkins"

STATUS_CHECKED = "已打卡"
STATUS_UNCHECKED = "未打卡"

logger = get_logger("state")


def _as_date(value: DateLike) -> date:
    return value.date() if isinstance(value, datetime) else value


@dataclass(frozen=True)
class PendingToggle:
    """A day picked in the grid that waits for confirm/cancel."""

    day: date
    key: str
    is_checked: bool

    @property
    def status(self) -> str:
        return STATUS_CHECKED if self.is_checked else STATUS_UNCHECKED


class AppState:
    """The single owner of the registry and check-ins while the app runs.

    Every accepted mutation is persisted through the gateway before the
    commit listeners are notified; rejected ones touch nothing.
    """

    def __init__(
        self,
        gateway: PersistenceGateway,
        registry: ProjectRegistry,
        partition: CheckinPartition,
        *,
        today_fn: Callable[[], date] = date.today,
    ):
        self.gateway = gateway
        self._registry = registry
        self._partition = partition
        self._today_fn = today_fn
        self._listeners: List[Callable[[str], None]] = []
        self._pending: Optional[PendingToggle] = None

    @classmethod
    def load(
        cls,
        gateway: PersistenceGateway,
        *,
        today_fn: Callable[[], date] = date.today,
    ) -> "AppState":
        stored = gateway.load_projects()
        registry = project_ops.reconcile(stored, stored[0].id if stored else None)
        state = cls(gateway, registry, gateway.load_checkins(), today_fn=today_fn)
        if list(registry.projects) != stored:
            logger.info("Project list restored to defaults")
            state._commit(PROJECTS)
        return state

    # ---------- events ----------
    def subscribe(self, callback: Callable[[str], None]) -> None:
        if callback not in self._listeners:
            self._listeners.append(callback)

    def unsubscribe(self, callback: Callable[[str], None]) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _commit(self, aggregate: str) -> None:
        if aggregate == PROJECTS:
            self.gateway.save_projects(self._registry)
        else:
            self.gateway.save_checkins(self._partition)
        logger.debug("Committed %s", aggregate)
        for listener in list(self._listeners):
            listener(aggregate)

    # ---------- queries ----------
    @property
    def registry(self) -> ProjectRegistry:
        return self._registry

    @property
    def partition(self) -> CheckinPartition:
        return self._partition

    @property
    def projects(self) -> Tuple[Project, ...]:
        return self._registry.projects

    @property
    def active_id(self) -> str:
        return self._registry.active_id

    @property
    def active_project(self) -> Optional[Project]:
        return self._registry.active_project

    def today(self) -> date:
        return _as_date(self._today_fn())

    def week_grid(
        self, today: Optional[DateLike] = None, total_days: Optional[int] = None
    ) -> List[List[date]]:
        end = today if today is not None else self.today()
        days = total_days if total_days is not None else UI.heatmap.total_days
        return build_week_grid(end, days)

    def month_labels(self, weeks: List[List[date]]) -> List[MonthLabel]:
        return month_labels(weeks)

    def cells(self, weeks: List[List[date]], today: Optional[DateLike] = None) -> List[List[DayCell]]:
        end = today if today is not None else self.today()
        return checkins.day_cells(self._partition, self.active_id, weeks, end)

    def is_checked(self, day: DateLike) -> bool:
        return checkins.is_checked(self._partition, self.active_id, day_key(day))

    def stats(self, today: Optional[DateLike] = None) -> CheckinStats:
        end = today if today is not None else self.today()
        return checkins.stats(self._partition, self.active_id, end)

    # ---------- mutations ----------
    def select_project(self, project_id: str) -> bool:
        updated = project_ops.select_active(self._registry, project_id)
        if updated is self._registry:
            logger.debug("Ignoring selection of %r", project_id)
            return False
        self._registry = updated
        self._pending = None
        self._commit(PROJECTS)
        return True

    def add_project(self, name: str) -> Optional[Project]:
        updated, project = project_ops.add_project(self._registry, name)
        if project is None:
            logger.debug("Ignoring empty project name")
            return None
        self._registry = updated
        self._pending = None
        self._commit(PROJECTS)
        logger.info("Project created: %s", project.id)
        return project

    def toggle_day(self, day: DateLike, today: Optional[DateLike] = None) -> bool:
        """Flip the active project's check-in for ``day``; future days are refused."""

        end = today if today is not None else self.today()
        if is_future(day, end):
            logger.debug("Refusing to toggle future day %s", day_key(day))
            return False
        self._partition = checkins.toggle(self._partition, self.active_id, day_key(day))
        self._commit(CHECKINS)
        return True

    # ---------- confirm workflow ----------
    @property
    def pending(self) -> Optional[PendingToggle]:
        return self._pending

    def request_toggle(self, day: DateLike, today: Optional[DateLike] = None) -> Optional[PendingToggle]:
        end = today if today is not None else self.today()
        if is_future(day, end):
            return None
        self._pending = PendingToggle(
            day=_as_date(day),
            key=day_key(day),
            is_checked=self.is_checked(day),
        )
        return self._pending

    def pending_status(self) -> Tuple[str, str]:
        """``(key, status)`` of the pending day, blanks when nothing is selected."""

        if self._pending is None:
            return "", ""
        return self._pending.key, STATUS_CHECKED if self.is_checked(self._pending.day) else STATUS_UNCHECKED

    def confirm_toggle(self, today: Optional[DateLike] = None) -> bool:
        pending = self._pending
        self._pending = None
        if pending is None:
            return False
        return self.toggle_day(pending.day, today)

    def cancel_toggle(self) -> None:
        self._pending = None


__all__ = ["AppState", "PendingToggle", "CHECKINS", "PROJECTS", "STATUS_CHECKED", "STATUS_UNCHECKED"]
