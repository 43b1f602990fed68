"""Access control entries of a workspace."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .crud import CrudService, ListOptions
from .errors import validate_id
from .jsonapi import attr


@dataclass
class WorkspaceAccess:
    """Access control settings granted to a team on a workspace."""

    jsonapi_type: ClassVar[str] = "access"

    id: str = ""
    manage_state: bool = attr("manageState", False)
    manage_workspace: bool = attr("manageWorkspace", False)
    manage_job: bool = attr("manageJob", False)
    name: str = attr("name", "")
    created_by: str | None = attr("createdBy")
    created_date: str | None = attr("createdDate")
    updated_by: str | None = attr("updatedBy")
    updated_date: str | None = attr("updatedDate")


class WorkspaceAccessService(CrudService):
    """Operations on the workspace access endpoints."""

    model = WorkspaceAccess

    def _entries(self, org_id: str, workspace_id: str, *entry: str) -> str:
        checks = zip(("organizationID", "workspaceID", "accessID"), (org_id, workspace_id, *entry))
        for label, value in checks:
            validate_id(label, value)
        return self.transport.api_path(
            "organization", org_id, "workspace", workspace_id, "access", *entry
        )

    def list(
        self, org_id: str, workspace_id: str, opts: ListOptions | None = None
    ) -> list[WorkspaceAccess]:
        """Return all access entries of a workspace."""
        return self._list(self._entries(org_id, workspace_id), opts)

    def get(self, org_id: str, workspace_id: str, access_id: str) -> WorkspaceAccess:
        """Return one access entry by ID."""
        return self._get(self._entries(org_id, workspace_id, access_id))

    def create(self, org_id: str, workspace_id: str, access: WorkspaceAccess) -> WorkspaceAccess:
        """Create an access entry for a workspace."""
        return self._create(self._entries(org_id, workspace_id), access)

    def update(self, org_id: str, workspace_id: str, access: WorkspaceAccess) -> WorkspaceAccess:
        """Update an existing access entry; its ``id`` must be set."""
        return self._update(self._entries(org_id, workspace_id, access.id), access)

    def delete(self, org_id: str, workspace_id: str, access_id: str) -> None:
        """Delete an access entry by ID."""
        self._delete(self._entries(org_id, workspace_id, access_id))