"""Workspaces of an organization."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .crud import CrudService, ListOptions
from .errors import validate_id
from .jsonapi import attr, relation
from .vcs import VCS


@dataclass
class Workspace:
    """A Terrakube workspace."""

    jsonapi_type: ClassVar[str] = "workspace"

    id: str = ""
    name: str = attr("name", "")
    description: str | None = attr("description")
    source: str = attr("source", "")
    branch: str = attr("branch", "")
    folder: str = attr("folder", "")
    template_id: str = attr("defaultTemplate", "")
    iac_type: str = attr("iacType", "")
    iac_version: str = attr("terraformVersion", "")
    execution_mode: str = attr("executionMode", "")
    deleted: bool = attr("deleted", False)
    locked: bool = attr("locked", False)
    allow_remote_apply: bool = attr("allowRemoteApply", False)
    lock_description: str | None = attr("lockDescription")
    module_ssh_key: str | None = attr("moduleSshKey")
    last_job_status: str | None = attr("lastJobStatus")
    last_job_date: str | None = attr("lastJobDate")
    created_by: str | None = attr("createdBy")
    created_date: str | None = attr("createdDate")
    updated_by: str | None = attr("updatedBy")
    updated_date: str | None = attr("updatedDate")
    vcs: VCS | None = relation("vcs")


class WorkspaceService(CrudService):
    """Operations on the workspace endpoints."""

    model = Workspace

    def _path(self, org_id: str, workspace_id: str | None = None, label: str = "id") -> str:
        validate_id("organization ID", org_id)
        segments = ["organization", org_id, "workspace"]
        if workspace_id is not None:
            validate_id(label, workspace_id)
            segments.append(workspace_id)
        return self.transport.api_path(*segments)

    def list(self, org_id: str, opts: ListOptions | None = None) -> list[Workspace]:
        """Return all workspaces of an organization, optionally filtered."""
        return self._list(self._path(org_id), opts)

    def get(self, org_id: str, workspace_id: str) -> Workspace:
        """Return one workspace by ID."""
        return self._get(self._path(org_id, workspace_id))

    def create(self, org_id: str, workspace: Workspace) -> Workspace:
        """Create a workspace in an organization."""
        return self._create(self._path(org_id), workspace)

    def update(self, org_id: str, workspace: Workspace) -> Workspace:
        """Update an existing workspace; its ``id`` must be set."""
        return self._update(self._path(org_id, workspace.id, "workspace ID"), workspace)

    def delete(self, org_id: str, workspace_id: str) -> None:
        """Delete a workspace by ID."""
        self._delete(self._path(org_id, workspace_id))