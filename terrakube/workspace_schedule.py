"""Scheduled jobs of a workspace."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .crud import CrudService, ListOptions
from .errors import validate_id
from .jsonapi import attr


@dataclass
class WorkspaceSchedule:
    """A scheduled job for a workspace."""

    jsonapi_type: ClassVar[str] = "schedule"

    id: str = ""
    schedule: str = attr("cron", "")
    template_id: str = attr("templateReference", "")
    created_by: str | None = attr("createdBy")
    created_date: str | None = attr("createdDate")
    updated_by: str | None = attr("updatedBy")
    updated_date: str | None = attr("updatedDate")


class WorkspaceScheduleService(CrudService):
    """Operations on the workspace schedule endpoints."""

    model = WorkspaceSchedule

    def _schedules(self, workspace_id: str, *schedule: str) -> str:
        for label, value in zip(("workspaceID", "scheduleID"), (workspace_id, *schedule)):
            validate_id(label, value)
        return self.transport.api_path("workspace", workspace_id, "schedule", *schedule)

    def list(
        self, workspace_id: str, opts: ListOptions | None = None
    ) -> list[WorkspaceSchedule]:
        """Return all schedules of a workspace."""
        return self._list(self._schedules(workspace_id), opts)

    def get(self, workspace_id: str, schedule_id: str) -> WorkspaceSchedule:
        """Return one schedule by ID."""
        return self._get(self._schedules(workspace_id, schedule_id))

    def create(self, workspace_id: str, schedule: WorkspaceSchedule) -> WorkspaceSchedule:
        """Create a schedule for a workspace."""
        return self._create(self._schedules(workspace_id), schedule)

    def update(self, workspace_id: str, schedule: WorkspaceSchedule) -> WorkspaceSchedule:
        """Update an existing schedule; its ``id`` must be set."""
        return self._update(self._schedules(workspace_id, schedule.id), schedule)

    def delete(self, workspace_id: str, schedule_id: str) -> None:
        """Delete a schedule by ID."""
        self._delete(self._schedules(workspace_id, schedule_id))