"""Tag associations of a workspace."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .crud import CrudService, ListOptions
from .errors import validate_id
from .jsonapi import attr

_TAG_LABELS = ("organizationID", "workspaceID", "tagID")


@dataclass
class WorkspaceTag:
    """A tag attached to a workspace."""

    jsonapi_type: ClassVar[str] = "workspacetag"

    id: str = ""
    tag_id: str = attr("tagId", "")
    created_by: str | None = attr("createdBy")
    created_date: str | None = attr("createdDate")
    updated_by: str | None = attr("updatedBy")
    updated_date: str | None = attr("updatedDate")


class WorkspaceTagService(CrudService):
    """Operations on the workspace tag endpoints."""

    model = WorkspaceTag

    def _tags(self, org_id: str, workspace_id: str, *tag: str) -> str:
        for label, value in zip(_TAG_LABELS, (org_id, workspace_id, *tag)):
            validate_id(label, value)
        return self.transport.api_path(
            "organization", org_id, "workspace", workspace_id, "workspaceTag", *tag
        )

    def list(
        self, org_id: str, workspace_id: str, opts: ListOptions | None = None
    ) -> list[WorkspaceTag]:
        """Return all tags of a workspace."""
        return self._list(self._tags(org_id, workspace_id), opts)

    def get(self, org_id: str, workspace_id: str, tag_id: str) -> WorkspaceTag:
        """Return one workspace tag by ID."""
        return self._get(self._tags(org_id, workspace_id, tag_id))

    def create(self, org_id: str, workspace_id: str, tag: WorkspaceTag) -> WorkspaceTag:
        """Attach a tag to a workspace."""
        return self._create(self._tags(org_id, workspace_id), tag)

    def update(self, org_id: str, workspace_id: str, tag: WorkspaceTag) -> WorkspaceTag:
        """Update an existing workspace tag; its ``id`` must be set."""
        return self._update(self._tags(org_id, workspace_id, tag.id), tag)

    def delete(self, org_id: str, workspace_id: str, tag_id: str) -> None:
        """Remove a tag from a workspace."""
        self._delete(self._tags(org_id, workspace_id, tag_id))